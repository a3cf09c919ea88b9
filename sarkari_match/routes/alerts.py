"""
API routes for job alert subscriptions
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..database import get_job_repository, get_preference_store
from ..models.alerts import AlertPreferences, SubscriptionResponse, ValidationResult
from ..models.user import FormErrorResponse
from ..services.alert_service import (
    SUBSCRIBABLE_CATEGORIES,
    contact_kind,
    default_preferences,
    prefill_for_job,
    subscribe,
    validate_alert_preferences,
)
from ..services.job_repository import JobRepository
from ..services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("/defaults", response_model=AlertPreferences)
async def get_default_preferences(
    job_id: Optional[str] = Query(None, description="Prefill from this job"),
    repository: JobRepository = Depends(get_job_repository)
):
    """
    First-time alert preferences, optionally prefilled from a job
    """
    try:
        prefs = default_preferences()
        if job_id:
            job = await repository.get(job_id)
            if not job:
                raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")
            prefs = prefill_for_job(prefs, job)
        return prefs

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building alert defaults: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/categories", response_model=List[str])
async def get_categories():
    """
    Job categories a user can subscribe to
    """
    return list(SUBSCRIBABLE_CATEGORIES)


@router.post("/validate", response_model=ValidationResult)
async def validate_preferences(prefs: AlertPreferences):
    """
    Validate alert preferences without saving them
    """
    return validate_alert_preferences(prefs)


@router.get("/{user_id}", response_model=AlertPreferences)
async def get_preferences(
    user_id: str,
    store: PreferenceStore = Depends(get_preference_store)
):
    """
    Get a user's alert preferences, or the defaults if none were saved
    """
    try:
        prefs = await store.get_alert_preferences(user_id)
        return prefs or default_preferences()

    except Exception as e:
        logger.error(f"Error fetching alert preferences: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put(
    "/{user_id}",
    response_model=SubscriptionResponse,
    responses={422: {"model": FormErrorResponse}}
)
async def save_preferences(
    user_id: str,
    prefs: AlertPreferences,
    store: PreferenceStore = Depends(get_preference_store)
):
    """
    Validate, subscribe and save a user's alert preferences
    """
    subscribed, validation = subscribe(prefs)
    if not validation.valid:
        raise HTTPException(status_code=422, detail=FormErrorResponse(errors=validation.errors).model_dump())

    try:
        saved = await store.save_alert_preferences(user_id, subscribed)
        return SubscriptionResponse(
            preferences=saved,
            validation=validation,
            contact_kind=contact_kind(saved.contact)
        )

    except Exception as e:
        logger.error(f"Error saving alert preferences: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
