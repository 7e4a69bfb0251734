"""Buglist endpoints for the host sync framework"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.config import settings
from app.exceptions import BuglistSyncError
from app.models import BugBatch, Buglist, SendResult
from app.services import BuglistSyncService, ProjectContext
from app.services.urls import normalize_base_url

router = APIRouter(prefix="/api/buglist", tags=["buglist"])

# One sync session per process: project ids are resolved once and reused.
project_context = ProjectContext()


def get_sync_service() -> BuglistSyncService:
    try:
        return BuglistSyncService.from_settings(settings, context=project_context)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/base-url")
def base_url(raw: str):
    """Normalize a user-entered Backlog project URL"""
    try:
        return {"base_url": normalize_base_url(raw)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=Buglist)
def fetch_buglist(
    since: Optional[datetime] = None,
    service: BuglistSyncService = Depends(get_sync_service),
):
    """Fetch the full issue list as a buglist"""
    try:
        return service.fetch_buglist(since)
    except BuglistSyncError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/", response_model=SendResult)
def send_buglist(
    batch: BugBatch,
    service: BuglistSyncService = Depends(get_sync_service),
):
    """Replay local creates, updates and deletes against Backlog"""
    try:
        return service.send_buglist(batch.bugs)
    except BuglistSyncError as e:
        raise HTTPException(status_code=502, detail=str(e))
