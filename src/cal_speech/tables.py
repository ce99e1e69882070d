"""Correction and pattern tables for the speech post-processing pipeline.

Tables are the only localized asset: the stage algorithms read everything
script-specific from a :class:`SpeechTables` instance.  :data:`ZH_CN_TABLES`
holds the bundled Simplified Chinese tables.

Substitution tables are applied in declaration order and later rules may
match text produced by earlier ones.  To keep that safe, every key must be
declared before any shorter key it contains; :class:`SpeechTables`
enforces this when it is constructed, so a misordered table fails at
startup rather than silently producing ``十一 -> 101``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Literal

from cal_speech.exceptions import TableConfigurationError, TableOrderError
from cal_speech.models.speech import CorrectionType, EventColor

PeriodRule = Literal["morning", "afternoon", "noon"]

Substitution = tuple[str, str]


@dataclass(frozen=True)
class EventCategory:
    """A coarse event category recognised from keywords.

    Attributes:
        label: Canonical label, used as the event title.
        keywords: Synonyms that identify the category.
        color: Colour tag used by the calendar UI.
    """

    label: str
    keywords: tuple[str, ...]
    color: EventColor = "blue"

    def __post_init__(self) -> None:
        if not self.keywords or not all(self.keywords):
            raise TableConfigurationError(
                f"Category {self.label!r} needs at least one non-empty keyword",
                table="categories",
            )

    @cached_property
    def pattern(self) -> re.Pattern[str]:
        """Alternation of all keywords, in declaration order."""
        return re.compile("|".join(re.escape(k) for k in self.keywords))


def validate_substitution_order(table: str, entries: tuple[Substitution, ...]) -> None:
    """Check that a substitution table is safe to apply in order.

    Args:
        table: Table name, used in error messages.
        entries: ``(source, target)`` pairs in application order.

    Raises:
        TableConfigurationError: If a source is empty, duplicated, or maps
            to itself.
        TableOrderError: If a source is declared before a longer source
            that contains it.
    """
    seen: set[str] = set()
    for source, target in entries:
        if not source:
            raise TableConfigurationError(f"{table} table has an empty source", table=table)
        if source == target:
            raise TableConfigurationError(
                f"{table} table maps {source!r} to itself", table=table
            )
        if source in seen:
            raise TableConfigurationError(
                f"{table} table declares {source!r} twice", table=table
            )
        seen.add(source)

    for index, (source, _) in enumerate(entries):
        for later, _ in entries[index + 1 :]:
            if source in later:
                raise TableOrderError(table, shorter=source, longer=later)


@dataclass(frozen=True)
class SpeechTables:
    """Immutable bundle of every localized table the pipeline reads.

    Attributes:
        lexical: Known mis-recognitions and synonyms, applied in order.
        numerals: Spelled-out numerals to digit strings, applied in order.
        correction_types: Ordered ``(pattern, type)`` pairs classifying a
            lexical source word; the first match wins, the fallback is
            ``common_word``.
        punctuation: Characters removed by the normalizer.
        unit_particles: Time/date particles that absorb adjacent spaces.
        hour_separators: Characters between hour and minute (``点``, ``:``).
        minute_suffix: Optional particle after the minute (``分``).
        periods: Period-of-day words with their 24-hour adjustment rule.
        relative_dates: Keywords resolved against the reference date.
        date_triggers: Keywords whose presence counts as a date signal.
        event_date_offsets: First-match lookup used for the event's date.
        categories: Event categories, in priority order.
        default_title: Title used when no category matches.
        description_template: ``str.format`` template with a ``{text}`` field.
    """

    lexical: tuple[Substitution, ...]
    numerals: tuple[Substitution, ...]
    correction_types: tuple[tuple[str, CorrectionType], ...]
    punctuation: str
    unit_particles: str
    hour_separators: str
    minute_suffix: str
    periods: tuple[tuple[str, PeriodRule], ...]
    relative_dates: tuple[tuple[str, int], ...]
    date_triggers: tuple[str, ...]
    event_date_offsets: tuple[tuple[str, int], ...]
    categories: tuple[EventCategory, ...]
    default_title: str
    description_template: str = "{text}"

    def __post_init__(self) -> None:
        validate_substitution_order("lexical", self.lexical)
        validate_substitution_order("numerals", self.numerals)
        if not self.hour_separators:
            raise TableConfigurationError(
                "At least one hour separator is required", table="hour_separators"
            )

    # -- compiled patterns -------------------------------------------------

    @cached_property
    def punctuation_re(self) -> re.Pattern[str]:
        if not self.punctuation:
            return re.compile(r"(?!)")
        return re.compile(f"[{re.escape(self.punctuation)}]")

    @cached_property
    def particle_spacing_re(self) -> re.Pattern[str]:
        if not self.unit_particles:
            return re.compile(r"(?!)")
        return re.compile(rf"\s*([{re.escape(self.unit_particles)}])\s*")

    @cached_property
    def correction_type_res(self) -> tuple[tuple[re.Pattern[str], CorrectionType], ...]:
        return tuple((re.compile(p), t) for p, t in self.correction_types)

    @cached_property
    def period_rules(self) -> dict[str, PeriodRule]:
        return dict(self.periods)

    @cached_property
    def date_trigger_re(self) -> re.Pattern[str]:
        words = "|".join(re.escape(w) for w in self.date_triggers)
        iso = r"\d{4}-\d{2}-\d{2}"
        return re.compile(f"{words}|{iso}" if words else iso)


# ---------------------------------------------------------------------------
# Simplified Chinese tables
# ---------------------------------------------------------------------------

_DIGITS = "一二三四五六七八九"


def _spell_zh(number: int) -> str:
    """Spell 0-99 the way a recogniser writes it (``二十一``, ``十五``)."""
    if number == 0:
        return "零"
    tens, units = divmod(number, 10)
    unit = _DIGITS[units - 1] if units else ""
    if tens == 0:
        return unit
    if tens == 1:
        return "十" + unit
    return _DIGITS[tens - 1] + "十" + unit


def _zh_numerals(limit: int = 59) -> tuple[Substitution, ...]:
    # Longest spellings first so 二十一 is consumed before 二十 and 二.
    spelled = [(_spell_zh(n), str(n)) for n in range(limit, -1, -1)]
    return tuple(sorted(spelled, key=lambda entry: len(entry[0]), reverse=True))


_ZH_LEXICAL: tuple[Substitution, ...] = (
    # Doubled-character recognition glitches
    ("明明", "明天"),
    ("后后", "后天"),
    ("开开", "开会"),
    ("会会", "会议"),
    ("点点", "点"),
    ("分分", "分"),
    ("号号", "号"),
    ("月月", "月"),
    ("年年", "年"),
    # Spoken time words
    ("点半", "点30分"),
    ("半点", "30分"),
    ("一刻", "15分"),
    ("三刻", "45分"),
    # Relative dates
    ("这周", "本周"),
    ("这个月", "本月"),
    ("下星期", "下周"),
    ("下礼拜", "下周"),
    # Event categories
    ("开会", "会议"),
    ("吃饭", "聚餐"),
    ("上课", "课程"),
    ("看医生", "医疗预约"),
    ("看牙医", "牙医预约"),
    # Colloquial digits
    ("幺", "一"),
    ("两", "二"),
    ("俩", "二"),
    ("仨", "三"),
)

ZH_CN_TABLES = SpeechTables(
    lexical=_ZH_LEXICAL,
    numerals=_zh_numerals(),
    correction_types=(
        (r"[点分时刻半]", "time"),
        (r"[天月年周]|星期|礼拜", "date"),
        (r"[零一二三四五六七八九十幺两俩仨]", "number"),
        (r"[会议约聚餐课程]", "event_type"),
    ),
    punctuation="，。！？；：",
    unit_particles="点分号月日年",
    hour_separators="点:：",
    minute_suffix="分",
    periods=(
        ("上午", "morning"),
        ("早上", "morning"),
        ("凌晨", "morning"),
        ("下午", "afternoon"),
        ("晚上", "afternoon"),
        ("傍晚", "afternoon"),
        ("中午", "noon"),
    ),
    relative_dates=(
        ("今天", 0),
        ("明天", 1),
        ("后天", 2),
        ("大后天", 3),
    ),
    date_triggers=("今天", "明天", "后天", "下周", "下个月"),
    event_date_offsets=(
        ("明天", 1),
        ("后天", 2),
    ),
    # Colours: work blue, social green, dining orange, health red, study purple,
    # anything else pink.
    categories=(
        EventCategory("会议", ("开会", "会议", "例会", "讨论", "商议"), "blue"),
        EventCategory("约会", ("约会", "见面", "聚会"), "green"),
        EventCategory("聚餐", ("聚餐", "吃饭", "喝茶", "咖啡"), "orange"),
        EventCategory("课程", ("上课", "课程", "培训", "学习", "讲座", "研讨"), "purple"),
        EventCategory("面试", ("面试", "招聘", "求职"), "pink"),
        EventCategory(
            "医疗预约", ("医疗", "医生", "医院", "体检", "看病", "牙医", "检查"), "red"
        ),
        EventCategory("运动", ("运动", "健身", "跑步", "游泳", "瑜伽", "篮球", "足球"), "red"),
        EventCategory("购物", ("购物", "买东西", "逛街"), "pink"),
        EventCategory("旅行", ("旅行", "出差", "度假", "旅游"), "pink"),
    ),
    default_title="新事件",
    description_template="基于语音识别创建：{text}",
)
