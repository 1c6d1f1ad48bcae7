#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Fallback Coach
Deterministic template replies used when the language model is unavailable

Version: 1.0.0
"""

from typing import List, Optional, Sequence

from neura_os.core.models import FocusSession, Number, Task

# Tier split for coaching sentences; independent from the label bands in energy.py
TIER_MODERATE_FROM = 40
TIER_HIGH_FROM = 70

ACKNOWLEDGMENT = (
    "Thanks for sharing. I'll take that into account together with your "
    "energy, tasks and focus sessions."
)
LOW_ENERGY = (
    "Your energy is low today, so ease the pressure on yourself and "
    "prioritize short, simple tasks."
)
MODERATE_ENERGY = (
    "Your energy is moderate; it's a good moment to balance operational "
    "work with a study block."
)
HIGH_ENERGY = (
    "Your energy is high; a great moment to move forward on something "
    "you've been putting off."
)
URGENT_TASKS = (
    "There are {count} high-urgency task(s) piling up. Focus on one at a "
    "time instead of trying to solve everything at once."
)
FOCUS_EVIDENCE = (
    "I can see consistent focus sessions logged. Use that as evidence that "
    "you can get back into a state of concentration."
)
CLOSING = (
    "If you can, consciously choose one next action for today instead of "
    "running on autopilot."
)

class FallbackCoach:
    """Rule-based reply builder; no external calls, cannot fail"""

    def energy_sentence(self, energy: Optional[Number]) -> Optional[str]:
        if energy is None:
            return None
        if energy < TIER_MODERATE_FROM:
            return LOW_ENERGY
        if energy < TIER_HIGH_FROM:
            return MODERATE_ENERGY
        return HIGH_ENERGY

    def build(self, text: str, energy: Optional[Number],
              tasks: Sequence[Task], focus_sessions: Sequence[FocusSession]) -> str:
        """Assemble the reply from the sentences that apply"""
        sentences: List[str] = [ACKNOWLEDGMENT]

        tier = self.energy_sentence(energy)
        if tier:
            sentences.append(tier)

        urgent = [task for task in tasks or () if task.is_urgent]
        if urgent:
            sentences.append(URGENT_TASKS.format(count=len(urgent)))

        if any(session.is_long for session in focus_sessions or ()):
            sentences.append(FOCUS_EVIDENCE)

        sentences.append(CLOSING)
        return " ".join(sentences)
