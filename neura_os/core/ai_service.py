#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Adaptive Coach
Language-model coaching with a deterministic fallback

Version: 1.0.0
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence
import logging

import openai
from openai import AsyncOpenAI

from neura_os.config import Settings
from neura_os.core.fallback import FallbackCoach
from neura_os.core.models import (
    CoachMeta, CoachReply, CoachSource, FocusSession, NeuraError, Number, Task
)

logger = logging.getLogger(__name__)

# Most recent records included in the prompt
MAX_CONTEXT_ITEMS = 10

EMPTY_REPLY_PLACEHOLDER = "I couldn't put together a reply right now."

# ===== EXCEPTIONS =====

class AIServiceError(NeuraError):
    """Base error for the language-model integration"""
    pass

class AIProviderError(AIServiceError):
    """Provider returned something unusable"""
    pass

# ===== DATA CLASSES =====

@dataclass
class LLMResult:
    """Outcome of one external call: text on success, error description on failure"""
    ok: bool
    text: str = ""
    error: Optional[str] = None
    tokens_used: int = 0
    response_time_ms: int = 0

    @classmethod
    def success(cls, text: str, tokens_used: int = 0, response_time_ms: int = 0) -> "LLMResult":
        return cls(ok=True, text=text, tokens_used=tokens_used, response_time_ms=response_time_ms)

    @classmethod
    def failure(cls, error: str, response_time_ms: int = 0) -> "LLMResult":
        return cls(ok=False, error=error, response_time_ms=response_time_ms)

@dataclass
class CoachStats:
    """Coach request statistics"""
    total_requests: int = 0
    llm_failures: int = 0
    total_tokens_used: int = 0
    average_response_time_ms: float = 0.0
    replies_by_source: Dict[str, int] = field(default_factory=dict)

    def record(self, source: CoachSource, response_time_ms: int, tokens_used: int = 0) -> None:
        self.total_requests += 1
        self.total_tokens_used += tokens_used
        self.replies_by_source[source.value] = self.replies_by_source.get(source.value, 0) + 1
        if source == CoachSource.FALLBACK_ERROR:
            self.llm_failures += 1

        total_time = self.average_response_time_ms * (self.total_requests - 1)
        self.average_response_time_ms = (total_time + response_time_ms) / self.total_requests

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_requests': self.total_requests,
            'llm_failures': self.llm_failures,
            'total_tokens_used': self.total_tokens_used,
            'average_response_time_ms': round(self.average_response_time_ms, 2),
            'replies_by_source': dict(self.replies_by_source)
        }

# ===== CLIENTS =====

class ChatClient(Protocol):
    """
    Protocol for chat-completion clients.
    Implementations report failures through LLMResult instead of raising.
    """

    model_name: str

    async def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        ...

    async def aclose(self) -> None:
        ...

class OpenAIChatClient:
    """OpenAI chat completions, one attempt per call"""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", temperature: float = 0.7,
                 max_tokens: int = 600, timeout: float = 30.0):
        self.model_name = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    async def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        start_time = time.time()

        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens
            )

            if not getattr(response, "choices", None):
                raise AIProviderError("Completion response has no choices")

            content = response.choices[0].message.content
            tokens_used = response.usage.total_tokens if response.usage else 0

            return LLMResult.success(
                text=(content or "").strip(),
                tokens_used=tokens_used,
                response_time_ms=int((time.time() - start_time) * 1000)
            )

        except openai.APITimeoutError as e:
            logger.warning(f"OpenAI request timed out: {e}")
            return LLMResult.failure(f"timeout: {e}", int((time.time() - start_time) * 1000))

        except openai.APIError as e:
            logger.warning(f"OpenAI API error: {e}")
            return LLMResult.failure(f"api error: {e}", int((time.time() - start_time) * 1000))

        except Exception as e:
            logger.warning(f"OpenAI call failed: {e}")
            return LLMResult.failure(str(e) or type(e).__name__, int((time.time() - start_time) * 1000))

    async def aclose(self) -> None:
        await self.client.close()

def create_chat_client(settings: Settings) -> Optional[OpenAIChatClient]:
    """Build the OpenAI client, or None when no key is configured"""
    if not settings.llm_enabled:
        logger.warning("⚠️ OPENAI_API_KEY is not set - the coach will use the fallback only")
        return None

    client = OpenAIChatClient(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        temperature=settings.OPENAI_TEMPERATURE,
        max_tokens=settings.OPENAI_MAX_TOKENS,
        timeout=settings.AI_TIMEOUT
    )
    logger.info(f"OpenAI client initialized - model: {settings.OPENAI_MODEL}")
    return client

# ===== PROMPT MANAGER =====

class PromptManager:
    """System instruction and user payload for the coach"""

    SYSTEM_PROMPT = """You are the coach of the NEURA OS system.
Your role is to guide the user in an empathetic, direct and practical way,
helping them organize the day, reduce guilt and focus on micro-actions.
Use simple language and answer in at most 3 short paragraphs.
Consider:
- Energy level (0-100)
- Number of open and urgent tasks
- Focus sessions already done
- A possible feeling of overload or procrastination.

Never give medical or psychiatric advice. Stick to routine, organization, healthy habits, rest and focus.
"""

    USER_TEMPLATE = """User message:
\"\"\"
{message}
\"\"\"

Current energy: {energy}

Task summary (max {limit}):
{tasks}

Focus session summary (max {limit}):
{focus_sessions}

Answer as if you were talking directly to the user.
"""

    def get_system_prompt(self) -> str:
        return self.SYSTEM_PROMPT

    def summarize_tasks(self, tasks: Sequence[Task]) -> str:
        lines = [
            f"- [{'DONE' if task.done else 'PENDING'}] "
            f"(urgency {task.urgency}/10, weight {task.weight}) {task.title}"
            for task in list(tasks)[:MAX_CONTEXT_ITEMS]
        ]
        return "\n".join(lines) or "no tasks recorded."

    def summarize_focus_sessions(self, focus_sessions: Sequence[FocusSession]) -> str:
        lines = []
        for session in list(focus_sessions)[:MAX_CONTEXT_ITEMS]:
            energy_start = session.energy_start if session.energy_start is not None else "n/a"
            lines.append(f"- {session.title} ({session.minutes} min, starting energy: {energy_start})")
        return "\n".join(lines) or "no sessions recorded."

    def build_user_prompt(self, text: str, energy: Optional[Number],
                          tasks: Sequence[Task], focus_sessions: Sequence[FocusSession]) -> str:
        return self.USER_TEMPLATE.format(
            message=text or "(no specific message)",
            energy=energy if energy is not None else "no data",
            limit=MAX_CONTEXT_ITEMS,
            tasks=self.summarize_tasks(tasks),
            focus_sessions=self.summarize_focus_sessions(focus_sessions)
        )

# ===== MAIN COACH =====

class AdaptiveCoach:
    """
    Chooses between the language model and the fallback coach.

    No client configured -> fallback reply tagged ``fallback``.
    Client configured -> one call; success is tagged ``llm`` and any failure
    falls back with the ``fallback-error`` tag. Call failures never escape.
    """

    def __init__(self, client: Optional[ChatClient] = None,
                 fallback: Optional[FallbackCoach] = None,
                 prompt_manager: Optional[PromptManager] = None):
        self.client = client
        self.fallback = fallback or FallbackCoach()
        self.prompt_manager = prompt_manager or PromptManager()
        self.stats = CoachStats()

        logger.info(f"Adaptive coach initialized - LLM: {'✅' if self.llm_configured else '❌'}")

    @property
    def llm_configured(self) -> bool:
        return self.client is not None

    async def respond(self, text: str, energy: Optional[Number],
                      tasks: Sequence[Task], focus_sessions: Sequence[FocusSession]) -> CoachReply:
        """Build a coach reply for the given message and state snapshot"""
        start_time = time.time()
        tasks = list(tasks or [])
        focus_sessions = list(focus_sessions or [])
        meta = CoachMeta.from_state(energy, tasks, focus_sessions)
        tokens_used = 0

        if not self.llm_configured:
            source = CoachSource.FALLBACK
            reply = self.fallback.build(text, energy, tasks, focus_sessions)
        else:
            result = await self._call_llm(text, energy, tasks, focus_sessions)
            if result.ok:
                source = CoachSource.LLM
                reply = result.text or EMPTY_REPLY_PLACEHOLDER
                tokens_used = result.tokens_used
            else:
                logger.error(f"❌ Language model call failed, using fallback: {result.error}")
                source = CoachSource.FALLBACK_ERROR
                reply = self.fallback.build(text, energy, tasks, focus_sessions)

        self.stats.record(source, int((time.time() - start_time) * 1000), tokens_used)

        return CoachReply(user_message=text, reply=reply, source=source, meta=meta)

    async def _call_llm(self, text: str, energy: Optional[Number],
                        tasks: List[Task], focus_sessions: List[FocusSession]) -> LLMResult:
        system_prompt = self.prompt_manager.get_system_prompt()
        user_prompt = self.prompt_manager.build_user_prompt(text, energy, tasks, focus_sessions)

        try:
            result = await self.client.complete(system_prompt, user_prompt)
        except Exception as e:
            return LLMResult.failure(str(e) or type(e).__name__)

        if not isinstance(result, LLMResult):
            return LLMResult.failure(f"Unexpected client result: {type(result).__name__}")
        return result

    def get_stats(self) -> Dict[str, Any]:
        return {
            'llm_configured': self.llm_configured,
            'model': getattr(self.client, 'model_name', None),
            **self.stats.to_dict()
        }

    async def aclose(self) -> None:
        """Release the client's HTTP resources"""
        if self.client is not None:
            await self.client.aclose()

__all__ = [
    # Constants
    'MAX_CONTEXT_ITEMS',
    'EMPTY_REPLY_PLACEHOLDER',

    # Exceptions
    'AIServiceError',
    'AIProviderError',

    # Data classes
    'LLMResult',
    'CoachStats',

    # Clients
    'ChatClient',
    'OpenAIChatClient',
    'create_chat_client',

    # Components
    'PromptManager',
    'AdaptiveCoach'
]
