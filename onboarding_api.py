"""FastAPI router exposing onboarding session state and route guarding."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict

from fastapi import APIRouter, Query

from onboarding_session import (
    OnboardingSession,
    OnboardingSessionStore,
    OnboardingSessionUpdate,
    resolve_onboarding_route,
)

logger = logging.getLogger(__name__)
router = APIRouter()

session_store = OnboardingSessionStore()


@router.get("/onboarding/{session_id}", response_model=OnboardingSession)
def get_onboarding_session(session_id: str) -> OnboardingSession:
    return session_store.get(session_id)


@router.put("/onboarding/{session_id}", response_model=OnboardingSession)
def update_onboarding_session(session_id: str, changes: OnboardingSessionUpdate) -> OnboardingSession:
    session = session_store.update(session_id, changes)
    logger.info(
        "onboarding_session_updated",
        extra={"session_id": session_id, **session.model_dump()},
    )
    return session


@router.get("/onboarding/{session_id}/route")
def guard_route(session_id: str, path: str = Query(...)) -> Dict[str, Any]:
    decision = resolve_onboarding_route(session_store.get(session_id), path)
    if not decision.allow:
        logger.debug("onboarding_redirect", extra={"session_id": session_id, "return_path": path})
    return asdict(decision)
