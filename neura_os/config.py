#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - Configuration
Environment-driven settings with validation

Version: 1.0.0
"""

import sys
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Environment(Enum):
    """Runtime environments"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class Settings(BaseSettings):
    """NEURA OS API settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ===== APPLICATION =====

    APP_NAME: str = Field(default="NEURA OS API", description="Service name")
    VERSION: str = Field(default="1.0.0", description="Service version")
    ENVIRONMENT: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")

    # ===== SERVER =====

    HOST: str = Field(default="0.0.0.0", description="Bind host")
    PORT: int = Field(default=4000, description="Listening port")
    CORS_ORIGIN: str = Field(default="*", description="'*' or comma-separated allowed origins")

    # ===== AI =====

    OPENAI_API_KEY: Optional[str] = Field(default=None, description="Language model credential; unset means fallback only")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="Chat completion model")
    OPENAI_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    OPENAI_MAX_TOKENS: int = Field(default=600, gt=0, description="Reply token limit")
    AI_TIMEOUT: float = Field(default=30.0, gt=0, description="Timeout for the external call in seconds")

    # ===== LOGGING =====

    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO, description="Root log level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log record format"
    )
    LOG_TO_FILE: bool = Field(default=False, description="Also write a rotating log file")
    LOG_DIR: Path = Field(default=Path("logs"), description="Directory for log files")

    @field_validator("OPENAI_API_KEY", mode="before")
    @classmethod
    def blank_key_is_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError(f"Port {v} is out of range (1-65535)")
        return v

    @property
    def allowed_origins(self) -> List[str]:
        origin = self.CORS_ORIGIN.strip()
        if not origin or origin == "*":
            return ["*"]
        return [item.strip() for item in origin.split(",") if item.strip()]

    @property
    def llm_enabled(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    def get_logging_config(self) -> Dict[str, Any]:
        """dictConfig-compatible logging configuration"""
        handlers = ['console']
        handler_config: Dict[str, Any] = {
            'console': {
                'class': 'logging.StreamHandler',
                'level': self.LOG_LEVEL.value,
                'formatter': 'default',
                'stream': sys.stdout
            }
        }

        if self.LOG_TO_FILE:
            handlers.append('file')
            handler_config['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.LOG_LEVEL.value,
                'formatter': 'default',
                'filename': str(self.LOG_DIR / f"neura_{self.ENVIRONMENT.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        quiet = {'level': 'WARNING', 'handlers': handlers, 'propagate': False}

        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.LOG_FORMAT,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': handler_config,
            'loggers': {
                '': {
                    'level': self.LOG_LEVEL.value,
                    'handlers': handlers,
                    'propagate': False
                },
                'httpx': dict(quiet),
                'openai': dict(quiet),
                'uvicorn.access': dict(quiet)
            }
        }

    def to_dict(self) -> Dict[str, Any]:
        """Settings summary without secrets"""
        return {
            'app_name': self.APP_NAME,
            'version': self.VERSION,
            'environment': self.ENVIRONMENT.value,
            'server': {
                'host': self.HOST,
                'port': self.PORT,
                'allowed_origins': self.allowed_origins
            },
            'ai': {
                'enabled': self.llm_enabled,
                'model': self.OPENAI_MODEL,
                'temperature': self.OPENAI_TEMPERATURE,
                'timeout': self.AI_TIMEOUT
            },
            'log_level': self.LOG_LEVEL.value
        }

@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment"""
    return Settings()

__all__ = [
    'Environment',
    'LogLevel',
    'Settings',
    'get_settings'
]
