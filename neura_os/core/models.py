#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Core Data Models
Tasks, focus sessions and coach replies with validation

Version: 1.0.0
"""

import math
import sys
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union
import logging

from neura_os.utils.datetime_utils import isoformat_utc

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Task with urgency at or above this value and not done counts as urgent
URGENT_THRESHOLD = 7
# Focus sessions at least this long count as sustained focus
LONG_FOCUS_MINUTES = 25

DEFAULT_TASK_CATEGORY = "personal"
DEFAULT_FOCUS_TITLE = "Focus session"
DEFAULT_FOCUS_MINUTES = 25

# Largest integer magnitude a float holds exactly
MAX_EXACT_INT = 2 ** 53

# ===== EXCEPTIONS =====

class NeuraError(Exception):
    """Base error for the service"""
    pass

class ValidationError(NeuraError):
    """Invalid or missing input field"""
    pass

class NotFoundError(NeuraError):
    """Requested record does not exist"""
    pass

# ===== ENUMS =====

class CoachSource(Enum):
    """Provenance of a coach reply"""
    LLM = "llm"
    FALLBACK = "fallback"
    FALLBACK_ERROR = "fallback-error"

# ===== VALIDATION HELPERS =====

def validate_text(text: Any, min_length: int = 1, max_length: Optional[int] = None,
                  field_name: str = "text") -> str:
    """Strip and length-check a required string field"""
    if not isinstance(text, str):
        raise ValidationError(f"{field_name} must be a string")

    text = text.strip()
    if len(text) < min_length:
        raise ValidationError(f"{field_name} is required")

    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")

    return text

def _saturate(number: float) -> float:
    """Pin infinities to the largest finite float with the same sign"""
    if math.isinf(number):
        return math.copysign(sys.float_info.max, number)
    return number

def coerce_number(value: Any, default: Number = 0) -> Number:
    """
    Lenient numeric coercion: numbers and numeric strings pass through,
    anything else (None, text, NaN) becomes ``default``.

    Magnitudes beyond the float range (huge ints, "1e400", infinity) saturate
    at +/- sys.float_info.max, so arithmetic on the result never raises.
    Integral values that are exact as floats come back as int (9.0 -> 9).
    """
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        if abs(value) <= MAX_EXACT_INT:
            return value
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return default
        try:
            number = float(stripped)
        except ValueError:
            return default
    else:
        return default

    if math.isnan(number):
        return default
    number = _saturate(number)
    if number.is_integer() and abs(number) <= MAX_EXACT_INT:
        return int(number)
    return number

def coerce_optional_number(value: Any) -> Optional[Number]:
    """Like coerce_number but keeps absence: None and non-numeric give None"""
    if value is None:
        return None
    sentinel = object()
    number = coerce_number(value, default=sentinel)
    return None if number is sentinel else number

def round_half_up(value: float) -> int:
    """
    Round to nearest integer, halves going up (2.5 -> 3, -0.5 -> 0).
    NaN gives 0 and infinities round the saturated float.
    """
    if math.isnan(value):
        return 0
    return int(math.floor(_saturate(value) + 0.5))

def new_id() -> str:
    return uuid.uuid4().hex

# ===== CORE MODELS =====

@dataclass
class Task:
    """Task record; only ``done`` and ``updated_at`` change after creation"""
    id: str
    title: str
    urgency: Number = 0
    effort: Number = 0
    impact: Number = 0
    weight: int = 0
    date: Optional[str] = None
    time: Optional[str] = None
    category: str = DEFAULT_TASK_CATEGORY
    done: bool = False
    created_at: str = field(default_factory=isoformat_utc)
    updated_at: Optional[str] = None

    def __post_init__(self):
        self.title = validate_text(self.title, min_length=1, field_name="title")

    @property
    def is_urgent(self) -> bool:
        return self.urgency >= URGENT_THRESHOLD and not self.done

    def toggle(self) -> bool:
        """Flip completion and stamp the update time"""
        self.done = not self.done
        self.updated_at = isoformat_utc()
        return self.done

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'urgency': self.urgency,
            'effort': self.effort,
            'impact': self.impact,
            'weight': self.weight,
            'date': self.date,
            'time': self.time,
            'category': self.category,
            'done': self.done,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at
        }

    @staticmethod
    def compute_weight(urgency: Number, effort: Number, impact: Number) -> int:
        """Rounded mean; coerced inputs only overflow to infinity, which rounds saturated"""
        return round_half_up((urgency + effort + impact) / 3)

    @classmethod
    def create(cls, title: str, urgency: Number = 0, effort: Number = 0, impact: Number = 0,
               date: Optional[str] = None, time: Optional[str] = None,
               category: Optional[str] = None) -> "Task":
        """Create a new task with a fresh id and derived weight"""
        urgency = coerce_number(urgency)
        effort = coerce_number(effort)
        impact = coerce_number(impact)

        return cls(
            id=new_id(),
            title=title,
            urgency=urgency,
            effort=effort,
            impact=impact,
            weight=cls.compute_weight(urgency, effort, impact),
            date=date,
            time=time,
            category=category or DEFAULT_TASK_CATEGORY
        )

@dataclass(frozen=True)
class FocusSession:
    """Logged block of concentrated work"""
    id: str
    title: str = DEFAULT_FOCUS_TITLE
    minutes: Number = DEFAULT_FOCUS_MINUTES
    energy_start: Optional[Number] = None
    created_at: str = field(default_factory=isoformat_utc)

    @property
    def is_long(self) -> bool:
        return self.minutes >= LONG_FOCUS_MINUTES

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'minutes': self.minutes,
            'energyStart': self.energy_start,
            'createdAt': self.created_at
        }

    @classmethod
    def create(cls, title: Optional[str] = None, minutes: Number = DEFAULT_FOCUS_MINUTES,
               energy_start: Optional[Number] = None) -> "FocusSession":
        return cls(
            id=new_id(),
            title=title if title is not None else DEFAULT_FOCUS_TITLE,
            minutes=minutes,
            energy_start=energy_start
        )

@dataclass
class CoachMeta:
    """Summary of the state a coach reply was built from"""
    energy: Optional[Number]
    tasks_open: int
    tasks_urgent: int
    focus_count: int

    @classmethod
    def from_state(cls, energy: Optional[Number], tasks: List[Task],
                   focus_sessions: List[FocusSession]) -> "CoachMeta":
        return cls(
            energy=energy,
            tasks_open=sum(1 for task in tasks if not task.done),
            tasks_urgent=sum(1 for task in tasks if task.is_urgent),
            focus_count=len(focus_sessions)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'energy': self.energy,
            'tasksOpen': self.tasks_open,
            'tasksUrgent': self.tasks_urgent,
            'focusCount': self.focus_count
        }

@dataclass
class CoachReply:
    """Coach answer tagged with its provenance"""
    user_message: str
    reply: str
    source: CoachSource
    meta: CoachMeta

    def to_dict(self) -> Dict[str, Any]:
        return {
            'userMessage': self.user_message,
            'reply': self.reply,
            'source': self.source.value,
            'meta': self.meta.to_dict()
        }

__all__ = [
    # Constants
    'URGENT_THRESHOLD',
    'LONG_FOCUS_MINUTES',
    'DEFAULT_TASK_CATEGORY',
    'DEFAULT_FOCUS_TITLE',
    'DEFAULT_FOCUS_MINUTES',

    # Exceptions
    'NeuraError',
    'ValidationError',
    'NotFoundError',

    # Enums
    'CoachSource',

    # Helpers
    'Number',
    'validate_text',
    'coerce_number',
    'coerce_optional_number',
    'round_half_up',
    'new_id',

    # Models
    'Task',
    'FocusSession',
    'CoachMeta',
    'CoachReply'
]
