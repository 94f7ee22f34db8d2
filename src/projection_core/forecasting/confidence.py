"""Confidence bands and labels for projected months."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from projection_core.forecasting.config import (
    CONFIDENCE_DECAY,
    CONFIDENCE_WIDENING,
    HIGH_CONFIDENCE_SCORE,
    MEDIUM_CONFIDENCE_SCORE,
)
from projection_core.forecasting.types import Confidence


@dataclass(frozen=True)
class ConfidenceBand:
    lower_bound: float
    upper_bound: float
    score: float
    confidence: Confidence


def historical_std(values: Sequence[float]) -> float:
    """Population standard deviation of the history."""
    return float(np.std(np.asarray(values, dtype=float)))


def confidence_score(step: int) -> float:
    """Score from 100 down by a fixed amount per step, floored at 0."""
    return float(max(0, 100 - step * CONFIDENCE_DECAY))


def confidence_label(score: float) -> Confidence:
    if score >= HIGH_CONFIDENCE_SCORE:
        return Confidence.HIGH
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return Confidence.MEDIUM
    return Confidence.LOW


def estimate_confidence(predicted: float, std: float, step: int) -> ConfidenceBand:
    """Build the band around one projected value.

    The half-width is ``std * (1 + 0.1 * step)`` so uncertainty grows with the
    horizon. The lower bound is floored at 0.

    Args:
        predicted: Non-negative prediction for the step.
        std: Population standard deviation of the history.
        step: 1-based forecast step.

    Returns:
        ConfidenceBand with bounds, raw score and label.
    """
    half_width = std * (1.0 + step * CONFIDENCE_WIDENING)
    score = confidence_score(step)
    return ConfidenceBand(
        lower_bound=max(0.0, predicted - half_width),
        upper_bound=predicted + half_width,
        score=score,
        confidence=confidence_label(score),
    )
