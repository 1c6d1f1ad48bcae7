#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - API Dependencies
Providers for the per-application store, coach and settings
"""

from fastapi import Request

from neura_os.config import Settings
from neura_os.core.ai_service import AdaptiveCoach
from neura_os.services.state_store import StateStore

# ===== DEPENDENCY PROVIDERS =====

def get_store(request: Request) -> StateStore:
    """State store created by the application lifespan"""
    return request.app.state.store

def get_coach(request: Request) -> AdaptiveCoach:
    """Adaptive coach created by the application lifespan"""
    return request.app.state.coach

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
