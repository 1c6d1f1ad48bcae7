#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Request Schemas
Numeric fields are coerced leniently; only the task title is strict

Version: 1.0.0
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from neura_os.core.models import (
    DEFAULT_FOCUS_MINUTES, DEFAULT_TASK_CATEGORY, ValidationError,
    coerce_number, coerce_optional_number, validate_text
)

Number = Union[int, float]

def _optional_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    return v if isinstance(v, str) else str(v)

# ===== BASE =====

class DefaultedBody(BaseModel):
    """Body where every field has a default; a non-object payload means all defaults"""

    @model_validator(mode="before")
    @classmethod
    def non_object_is_empty(cls, data):
        return data if isinstance(data, dict) else {}

# ===== ENERGY =====

class EnergyInput(DefaultedBody):
    """Daily inputs for the energy score; bad values become 0"""
    sleep: Number = 0
    training: Number = 0
    focus: Number = 0
    nutrition: Number = 0

    @field_validator("sleep", "training", "focus", "nutrition", mode="before")
    @classmethod
    def coerce(cls, v):
        return coerce_number(v)

# ===== TASKS =====

class TaskCreate(BaseModel):
    """New task; title is required"""
    title: str
    urgency: Number = 0
    effort: Number = 0
    impact: Number = 0
    date: Optional[str] = None
    time: Optional[str] = None
    category: str = DEFAULT_TASK_CATEGORY

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        try:
            return validate_text(v, min_length=1, field_name="title")
        except ValidationError as e:
            raise ValueError(str(e))

    @field_validator("urgency", "effort", "impact", mode="before")
    @classmethod
    def coerce(cls, v):
        return coerce_number(v)

    @field_validator("date", "time", mode="before")
    @classmethod
    def optional_text(cls, v):
        return _optional_str(v)

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        v = _optional_str(v)
        return v.strip() if v and v.strip() else DEFAULT_TASK_CATEGORY

# ===== FOCUS SESSIONS =====

class FocusSessionCreate(DefaultedBody):
    """New focus session; every field has a default"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    minutes: Number = DEFAULT_FOCUS_MINUTES
    energy_start: Optional[Number] = Field(default=None, alias="energyStart")

    @field_validator("title", mode="before")
    @classmethod
    def stringify_title(cls, v):
        return _optional_str(v)

    @field_validator("minutes", mode="before")
    @classmethod
    def coerce_minutes(cls, v):
        return coerce_number(v)

    @field_validator("energy_start", mode="before")
    @classmethod
    def coerce_energy_start(cls, v):
        return coerce_optional_number(v)

# ===== COACH =====

class CoachMessageIn(DefaultedBody):
    """Message for the coach with the client's current energy"""
    text: str = ""
    energy: Optional[Number] = None

    @field_validator("text", mode="before")
    @classmethod
    def stringify_text(cls, v):
        return _optional_str(v) or ""

    @field_validator("energy", mode="before")
    @classmethod
    def coerce_energy(cls, v):
        return coerce_optional_number(v)

__all__ = [
    'DefaultedBody',
    'EnergyInput',
    'TaskCreate',
    'FocusSessionCreate',
    'CoachMessageIn'
]
