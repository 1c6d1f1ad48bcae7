from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from neura_os.api.dependencies import get_store
from neura_os.api.schemas import TaskCreate
from neura_os.services.state_store import StateStore

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

@router.get("", response_model=List[Dict[str, Any]])
async def list_tasks(store: StateStore = Depends(get_store)):
    """All tasks, most recent first"""
    return [task.to_dict() for task in store.list_tasks()]

@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_task(payload: TaskCreate, store: StateStore = Depends(get_store)):
    """
    Create a task. Weight is the rounded mean of urgency, effort and impact.
    """
    task = store.add_task(
        title=payload.title,
        urgency=payload.urgency,
        effort=payload.effort,
        impact=payload.impact,
        date=payload.date,
        time=payload.time,
        category=payload.category
    )
    return task.to_dict()

@router.get("/{task_id}", response_model=Dict[str, Any])
async def get_task(task_id: str, store: StateStore = Depends(get_store)):
    return store.get_task(task_id).to_dict()

@router.patch("/{task_id}/toggle", response_model=Dict[str, Any])
async def toggle_task(task_id: str, store: StateStore = Depends(get_store)):
    """Flip the done flag of a task"""
    return store.toggle_task(task_id).to_dict()
