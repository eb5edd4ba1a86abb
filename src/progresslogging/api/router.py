"""REST API router - read-only view over a ProgressMonitor."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from progresslogging import __version__
from progresslogging.api.deps import get_monitor
from progresslogging.api.schemas import (
    HealthResponse,
    ProgressListResponse,
    ProgressResponse,
)
from progresslogging.monitor import ProgressMonitor

router = APIRouter(prefix="/v1")


def _listing(records) -> ProgressListResponse:
    items = [ProgressResponse.from_progress(p) for p in records]
    return ProgressListResponse(progress=items, count=len(items))


@router.get("/health", response_model=HealthResponse)
async def health_check(monitor: ProgressMonitor = Depends(get_monitor)):
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__, tracked=len(monitor.snapshot()))


@router.get("/progress", response_model=ProgressListResponse, response_model_by_alias=True)
async def list_progress(
    parent_id: Optional[UUID] = None,
    monitor: ProgressMonitor = Depends(get_monitor),
):
    """List tracked tasks, optionally only the children of ``parent_id``."""
    if parent_id is None:
        return _listing(monitor.snapshot())
    return _listing(monitor.children(parent_id))


@router.get("/progress/{progress_id}", response_model=ProgressResponse, response_model_by_alias=True)
async def get_progress(progress_id: UUID, monitor: ProgressMonitor = Depends(get_monitor)):
    """Get the latest record of one task."""
    progress = monitor.get(progress_id)
    if progress is None:
        raise HTTPException(status_code=404, detail=f"Progress not found: {progress_id}")
    return ProgressResponse.from_progress(progress)


@router.get(
    "/progress/{progress_id}/children",
    response_model=ProgressListResponse,
    response_model_by_alias=True,
)
async def get_children(progress_id: UUID, monitor: ProgressMonitor = Depends(get_monitor)):
    """List the direct children of one task."""
    return _listing(monitor.children(progress_id))
