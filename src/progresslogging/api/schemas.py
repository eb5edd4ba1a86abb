"""API response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from progresslogging.models import Progress, ProgressState


class ProgressResponse(BaseModel):
    """One progress record in wire shape."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    parent_id: str = Field(..., alias="parentId")
    fraction: Optional[float] = Field(None, description="None while indeterminate")
    name: str = ""
    done: bool = False
    state: ProgressState

    @classmethod
    def from_progress(cls, progress: Progress) -> "ProgressResponse":
        return cls(**progress.to_wire(), state=progress.state)


class ProgressListResponse(BaseModel):
    """List of progress records."""

    progress: list[ProgressResponse]
    count: int


class HealthResponse(BaseModel):
    """Health response."""

    status: str
    version: str
    tracked: int = Field(..., description="Number of tasks the monitor currently tracks")
