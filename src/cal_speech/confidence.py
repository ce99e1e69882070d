"""Final confidence scoring for a processed transcript.

The score is a heuristic, not a probability.  It falls as more
corrections are needed, and rises when the corrections were
high-confidence or an event could be extracted.  The weights are tunable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from cal_speech.models.speech import ExtractedEventInfo, SpeechCorrection


@dataclass(frozen=True)
class ConfidenceWeights:
    """Tunable constants of :func:`recalculate_confidence`.

    Attributes:
        penalty_per_correction: Subtracted once per correction.
        max_penalty: Cap on the total correction penalty.
        event_bonus: Added when an event was extracted confidently.
        event_threshold: Event confidence that must be exceeded for the
            bonus.
        high_confidence_threshold: Correction confidence that must be
            exceeded to count as high-confidence.
        high_confidence_bonus: Added per high-confidence correction.
        floor: Lowest possible score.
        ceiling: Highest possible score.
    """

    penalty_per_correction: float = 0.05
    max_penalty: float = 0.3
    event_bonus: float = 0.2
    event_threshold: float = 0.7
    high_confidence_threshold: float = 0.9
    high_confidence_bonus: float = 0.05
    floor: float = 0.1
    ceiling: float = 1.0


DEFAULT_WEIGHTS = ConfidenceWeights()


def recalculate_confidence(
    original_confidence: float,
    corrections: Sequence[SpeechCorrection],
    event_info: ExtractedEventInfo | None = None,
    weights: ConfidenceWeights = DEFAULT_WEIGHTS,
) -> float:
    """Combine recogniser confidence, corrections, and extraction outcome.

    Args:
        original_confidence: Confidence reported by the recogniser.  Not
            validated; out-of-range values are absorbed by the clamp.
        corrections: Every correction applied to the transcript.
        event_info: The extracted event, if any.
        weights: Scoring constants.

    Returns:
        The recalculated score, clamped to ``[floor, ceiling]``.
    """
    score = original_confidence
    score -= min(len(corrections) * weights.penalty_per_correction, weights.max_penalty)

    if event_info is not None and event_info.confidence > weights.event_threshold:
        score += weights.event_bonus

    high_confidence = sum(
        1 for c in corrections if c.confidence > weights.high_confidence_threshold
    )
    score += high_confidence * weights.high_confidence_bonus

    return max(weights.floor, min(weights.ceiling, score))
