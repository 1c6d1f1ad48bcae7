from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from neura_os.api.dependencies import get_coach, get_store
from neura_os.api.schemas import CoachMessageIn
from neura_os.core.ai_service import AdaptiveCoach
from neura_os.services.state_store import StateStore

router = APIRouter(prefix="/api/psychologist", tags=["coach"])

@router.post("/message", response_model=Dict[str, Any])
async def message(payload: Optional[CoachMessageIn] = None,
                  store: StateStore = Depends(get_store),
                  coach: AdaptiveCoach = Depends(get_coach)):
    """
    Coach reply for the user's message.

    Uses the language model when configured; otherwise, or when the call
    fails, answers from the rule-based fallback. Never fails because of the
    external service.
    """
    payload = payload or CoachMessageIn()
    tasks, focus_sessions = store.snapshot()

    reply = await coach.respond(
        text=payload.text,
        energy=payload.energy,
        tasks=tasks,
        focus_sessions=focus_sessions
    )
    return reply.to_dict()
