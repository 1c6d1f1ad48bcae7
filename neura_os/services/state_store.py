#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS - State Store
In-memory tasks and focus sessions for the lifetime of the process

Version: 1.0.0
"""

import threading
from typing import List, Optional, Tuple
import logging

from neura_os.core.models import FocusSession, NotFoundError, Number, Task

logger = logging.getLogger(__name__)

class StateStore:
    """
    Newest-first collections of tasks and focus sessions.

    Mutations run under a single lock; reads return copies of the lists so
    callers never see a partially built record. Nothing is persisted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self._focus_sessions: List[FocusSession] = []

    # === TASKS ===

    def add_task(self, title: str, urgency: Number = 0, effort: Number = 0, impact: Number = 0,
                 date: Optional[str] = None, time: Optional[str] = None,
                 category: Optional[str] = None) -> Task:
        """Create a task and insert it at the head of the list"""
        task = Task.create(
            title=title,
            urgency=urgency,
            effort=effort,
            impact=impact,
            date=date,
            time=time,
            category=category
        )

        with self._lock:
            self._tasks.insert(0, task)

        logger.info(f"📝 Task created: {task.id} (weight {task.weight})")
        return task

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def _find_task(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(f"Task {task_id} not found")

    def get_task(self, task_id: str) -> Task:
        """Exact lookup by id; NotFoundError if unknown"""
        with self._lock:
            return self._find_task(task_id)

    def toggle_task(self, task_id: str) -> Task:
        """Flip ``done`` on a task; NotFoundError if unknown"""
        with self._lock:
            task = self._find_task(task_id)
            done = task.toggle()

        logger.info(f"🔁 Task {task_id} toggled - done: {done}")
        return task

    # === FOCUS SESSIONS ===

    def add_focus_session(self, title: Optional[str] = None, minutes: Number = 25,
                          energy_start: Optional[Number] = None) -> FocusSession:
        session = FocusSession.create(title=title, minutes=minutes, energy_start=energy_start)

        with self._lock:
            self._focus_sessions.insert(0, session)

        logger.info(f"⏱️ Focus session logged: {session.id} ({session.minutes} min)")
        return session

    def list_focus_sessions(self) -> List[FocusSession]:
        with self._lock:
            return list(self._focus_sessions)

    # === SNAPSHOT / LIFECYCLE ===

    def snapshot(self) -> Tuple[List[Task], List[FocusSession]]:
        """Consistent copy of both collections"""
        with self._lock:
            return list(self._tasks), list(self._focus_sessions)

    def counts(self) -> Tuple[int, int]:
        with self._lock:
            return len(self._tasks), len(self._focus_sessions)

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()
            self._focus_sessions.clear()
        logger.info("🧹 State store cleared")
