#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Energy Engine
Daily inputs (sleep, training, focus, nutrition) -> 0-100 energy score

Version: 1.0.0
"""

import math
from typing import Any, Optional

from neura_os.core.models import Number, coerce_number, round_half_up

# ===== WEIGHTS =====

SLEEP_WEIGHT = 0.35
TRAINING_WEIGHT = 0.20
FOCUS_WEIGHT = 0.25
NUTRITION_WEIGHT = 0.20

ENERGY_MIN = 0
ENERGY_MAX = 100

# ===== LABEL BANDS =====

# Lower bounds of the moderate, high and peak bands
LABEL_MODERATE_FROM = 35
LABEL_HIGH_FROM = 65
LABEL_PEAK_FROM = 85

NO_DATA_LABEL = "No data for today."
LOW_LABEL = "Low energy · A good day for light tasks and review."
MODERATE_LABEL = "Moderate energy · Mix medium tasks with small deliveries."
HIGH_LABEL = "High energy · Ideal for deep study and complex freelance work."
PEAK_LABEL = "Peak energy · Excellent for high-impact projects."

def sleep_score(sleep: Number) -> int:
    """Step mapping of sleep hours; cliffs below 6.5h and 5.5h"""
    if sleep <= 0:
        return 20
    if sleep >= 8:
        return 100
    if sleep >= 6.5:
        return 85
    if sleep >= 5.5:
        return 70
    return 50

def scale_score(value: Number) -> float:
    """0-10 input to 0-100; out-of-range values are not clamped here"""
    return value / 10 * 100

def calculate_energy(sleep: Any = 0, training: Any = 0, focus: Any = 0, nutrition: Any = 0) -> int:
    """
    Composite energy score.

    Every input is coerced with ``coerce_number`` (non-numeric -> 0), so the
    function never raises; huge magnitudes saturate. The weighted sum is
    clamped to [0, 100] and rounded half-up.
    """
    sleep = coerce_number(sleep)
    training = coerce_number(training)
    focus = coerce_number(focus)
    nutrition = coerce_number(nutrition)

    energy = (
        sleep_score(sleep) * SLEEP_WEIGHT +
        scale_score(training) * TRAINING_WEIGHT +
        scale_score(focus) * FOCUS_WEIGHT +
        scale_score(nutrition) * NUTRITION_WEIGHT
    )

    # opposite saturated inputs cancel to NaN
    if math.isnan(energy):
        return ENERGY_MIN

    clamped = max(ENERGY_MIN, min(ENERGY_MAX, energy))
    return round_half_up(clamped)

def energy_label(energy: Optional[Number]) -> str:
    """Human readable category for an energy value"""
    if energy is None:
        return NO_DATA_LABEL
    if energy < LABEL_MODERATE_FROM:
        return LOW_LABEL
    if energy < LABEL_HIGH_FROM:
        return MODERATE_LABEL
    if energy < LABEL_PEAK_FROM:
        return HIGH_LABEL
    return PEAK_LABEL
