"""Onboarding state passed explicitly into route guarding.

Sessions live in a process-local store keyed by session id; guard decisions
only read the session they are handed.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional

from pydantic import BaseModel

ONBOARDING_PATH = "/onboarding"


class OnboardingSession(BaseModel):
    is_onboarding_complete: bool = False
    has_started_onboarding: bool = False


class OnboardingSessionUpdate(BaseModel):
    is_onboarding_complete: Optional[bool] = None
    has_started_onboarding: Optional[bool] = None


@dataclass
class OnboardingRouteDecision:
    allow: bool
    redirect_to: Optional[str] = None
    return_path: Optional[str] = None


def resolve_onboarding_route(session: OnboardingSession, path: str) -> OnboardingRouteDecision:
    if path == ONBOARDING_PATH:
        return OnboardingRouteDecision(allow=True)
    if session.is_onboarding_complete:
        return OnboardingRouteDecision(allow=True)
    return OnboardingRouteDecision(allow=False, redirect_to=ONBOARDING_PATH, return_path=path)


class OnboardingSessionStore:
    """In-memory keeper for onboarding sessions."""

    def __init__(self) -> None:
        self._sessions: Dict[str, OnboardingSession] = {}
        self._lock = Lock()

    def get(self, session_id: str) -> OnboardingSession:
        """Return a copy of the session, or a fresh one if none was saved."""
        with self._lock:
            session = self._sessions.get(session_id)
            return session.model_copy() if session else OnboardingSession()

    def update(self, session_id: str, changes: OnboardingSessionUpdate) -> OnboardingSession:
        with self._lock:
            current = self._sessions.get(session_id) or OnboardingSession()
            updated = current.model_copy(update=changes.model_dump(exclude_none=True))
            self._sessions[session_id] = updated
            return updated.model_copy()

    def reset(self) -> None:
        """Utility method for tests to clear stored sessions."""
        with self._lock:
            self._sessions.clear()
