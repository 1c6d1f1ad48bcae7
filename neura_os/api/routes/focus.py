from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from neura_os.api.dependencies import get_store
from neura_os.api.schemas import FocusSessionCreate
from neura_os.services.state_store import StateStore

router = APIRouter(prefix="/api/focus-sessions", tags=["focus"])

@router.get("", response_model=List[Dict[str, Any]])
async def list_focus_sessions(store: StateStore = Depends(get_store)):
    """All focus sessions, most recent first"""
    return [session.to_dict() for session in store.list_focus_sessions()]

@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_focus_session(payload: Optional[FocusSessionCreate] = None,
                               store: StateStore = Depends(get_store)):
    payload = payload or FocusSessionCreate()
    session = store.add_focus_session(
        title=payload.title,
        minutes=payload.minutes,
        energy_start=payload.energy_start
    )
    return session.to_dict()
