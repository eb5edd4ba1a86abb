"""Progress model - one immutable progress observation."""

import math
from typing import Any, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from progresslogging.identity import ROOT_ID
from progresslogging.models.enums import ProgressState


class Progress(BaseModel):
    """Progress of one task at one point in time.

    ``fraction`` is ``None`` while progress is indeterminate, otherwise the
    completed ratio (values of 1 or more mean over-complete, not finished).
    Only ``done`` marks the end of a task; once a record with ``done=True``
    is emitted for an id, producers must not emit further records for it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID
    parent_id: UUID = Field(
        default=ROOT_ID,
        serialization_alias="parentId",
        validation_alias=AliasChoices("parent_id", "parentId"),
    )
    fraction: Optional[float] = None
    name: str = ""
    done: bool = False

    @field_validator("fraction", mode="before")
    @classmethod
    def normalize_fraction(cls, v: Any) -> Optional[float]:
        """NaN is the historical spelling of indeterminate."""
        if v is None:
            return None
        if isinstance(v, (bool, str)):
            raise ValueError(f"fraction must be a real number, not {type(v).__name__}")
        v = float(v)
        if math.isnan(v):
            return None
        return v

    @property
    def state(self) -> ProgressState:
        """Tagged reading of this record; ``done`` wins over ``fraction``."""
        if self.done:
            return ProgressState.DONE
        if self.fraction is None:
            return ProgressState.INDETERMINATE
        return ProgressState.IN_PROGRESS

    @property
    def is_root(self) -> bool:
        """Check if the task has no parent."""
        return self.parent_id == ROOT_ID

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the monitor wire shape (string ids, ``parentId``)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "Progress":
        return cls.model_validate(data)

    def __str__(self) -> str:
        text = self.name or "Progress"
        if not self.is_root:
            text += " (sub)"
        if self.fraction is None:
            return f"{text}: ??%"
        return f"{text}: {math.floor(self.fraction * 100)}%"
