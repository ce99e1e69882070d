"""Table-driven lexical and numeral correction stages.

Both stages walk an ordered substitution table.  Every entry whose source
occurs in the current text replaces *all* of its occurrences and records a
single :class:`~cal_speech.models.speech.SpeechCorrection`.  Rules cascade:
a later entry sees the text produced by earlier ones.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cal_speech.models.speech import CorrectionType, SpeechCorrection
from cal_speech.tables import ZH_CN_TABLES, SpeechTables, Substitution

logger = logging.getLogger(__name__)

LEXICAL_CONFIDENCE = 0.9
NUMERAL_CONFIDENCE = 0.95

StageResult = tuple[str, list[SpeechCorrection]]


def classify_correction(word: str, tables: SpeechTables = ZH_CN_TABLES) -> CorrectionType:
    """Infer a correction type from the character class of *word*.

    The table's ``(pattern, type)`` pairs are tried in order; the first
    pattern found in *word* decides.  Anything unmatched is
    ``"common_word"``.
    """
    for pattern, correction_type in tables.correction_type_res:
        if pattern.search(word):
            return correction_type
    return "common_word"


def _apply_substitutions(
    text: str,
    entries: tuple[Substitution, ...],
    type_for: Callable[[str], CorrectionType],
    confidence: float,
) -> StageResult:
    corrections: list[SpeechCorrection] = []
    for source, target in entries:
        if source not in text:
            continue
        text = text.replace(source, target)
        corrections.append(
            SpeechCorrection(
                original=source,
                corrected=target,
                type=type_for(source),
                confidence=confidence,
            )
        )
    return text, corrections


def apply_lexical_corrections(text: str, tables: SpeechTables = ZH_CN_TABLES) -> StageResult:
    """Rewrite known mis-recognitions and synonyms to their canonical form.

    Args:
        text: Normalized transcript.
        tables: Tables providing the lexical substitutions and the
            correction-type classifier.

    Returns:
        The rewritten text and one correction per table entry that
        matched, each with confidence ``0.9``.
    """
    text, corrections = _apply_substitutions(
        text,
        tables.lexical,
        lambda word: classify_correction(word, tables),
        LEXICAL_CONFIDENCE,
    )
    logger.debug("Lexical stage applied %d correction(s)", len(corrections))
    return text, corrections


def apply_numeral_corrections(text: str, tables: SpeechTables = ZH_CN_TABLES) -> StageResult:
    """Rewrite spelled-out numerals as digits.

    Table order decides precedence, so compound numerals are declared
    before the shorter numerals they contain.

    Args:
        text: Transcript after lexical correction.
        tables: Tables providing the numeral substitutions.

    Returns:
        The rewritten text and one ``"number"`` correction per table entry
        that matched, each with confidence ``0.95``.
    """
    text, corrections = _apply_substitutions(
        text,
        tables.numerals,
        lambda _word: "number",
        NUMERAL_CONFIDENCE,
    )
    logger.debug("Numeral stage applied %d correction(s)", len(corrections))
    return text, corrections
