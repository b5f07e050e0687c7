"""Example app: state models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class LifecycleState(str, Enum):
    BACKGROUND_INACTIVE = "background_inactive"
    FOREGROUND_INACTIVE = "foreground_inactive"
    FOREGROUND_ACTIVE = "foreground_active"


class TaskStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    CONFIRMED = "confirmed"
    DONE = "done"


class ReachabilityState(BaseModel):
    """Network monitoring. `online` is None while unknown or not monitoring."""

    model_config = {"frozen": True, "extra": "forbid"}

    monitoring: bool = False
    online: bool | None = None


class TaskState(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    id: str = Field(min_length=1)
    title: str
    status: TaskStatus = TaskStatus.PENDING


class AppState(BaseModel):
    """Whole application state. Immutable; reducers return updated copies."""

    model_config = {"frozen": True, "extra": "forbid"}

    lifecycle: LifecycleState = LifecycleState.BACKGROUND_INACTIVE
    reachability: ReachabilityState = Field(default_factory=ReachabilityState)
    tasks: tuple[TaskState, ...] = ()

    @classmethod
    def initial(cls) -> AppState:
        return cls()
