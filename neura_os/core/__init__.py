"""
Core engine: energy scoring, data models and the coaching services.
"""

from neura_os.core.energy import calculate_energy, energy_label, sleep_score
from neura_os.core.fallback import FallbackCoach
from neura_os.core.models import (
    CoachMeta, CoachReply, CoachSource, FocusSession, NotFoundError, Task, ValidationError
)
from neura_os.core.ai_service import AdaptiveCoach, LLMResult, OpenAIChatClient, create_chat_client

__all__ = [
    'calculate_energy',
    'energy_label',
    'sleep_score',
    'FallbackCoach',
    'CoachMeta',
    'CoachReply',
    'CoachSource',
    'FocusSession',
    'NotFoundError',
    'Task',
    'ValidationError',
    'AdaptiveCoach',
    'LLMResult',
    'OpenAIChatClient',
    'create_chat_client',
]
