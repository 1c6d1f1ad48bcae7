import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from neura_os.api.dependencies import get_app_settings, get_coach
from neura_os.config import Settings
from neura_os.core.ai_service import AdaptiveCoach
from neura_os.services.mock_fit import get_mock_biometrics

router = APIRouter(tags=["system"])

ENDPOINTS = [
    '/api/energy/calculate',
    '/api/psychologist/message',
    '/api/google-fit/mock',
    '/api/tasks',
    '/api/tasks/:id/toggle',
    '/api/focus-sessions',
]

@router.get("/", response_model=Dict[str, Any])
async def root(settings: Settings = Depends(get_app_settings)):
    return {
        "name": settings.APP_NAME,
        "status": "online",
        "docs": "/api/health"
    }

@router.get("/api/health", response_model=Dict[str, Any])
async def health(request: Request,
                 settings: Settings = Depends(get_app_settings),
                 coach: AdaptiveCoach = Depends(get_coach)):
    """Liveness, uptime and whether a language model is configured"""
    return {
        "ok": True,
        "message": f"{settings.APP_NAME} is running.",
        "uptime": round(time.time() - request.app.state.started_at, 3),
        "llmConfigured": coach.llm_configured,
        "endpoints": ENDPOINTS,
        "coach": coach.get_stats()
    }

@router.get("/api/google-fit/mock", response_model=Dict[str, Any])
async def google_fit_mock():
    """Mock wearable data"""
    return get_mock_biometrics()
