"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Vector = tuple[float, float, float]


class HealthResponse(BaseModel):
    status: str
    version: str


class TrackingRequest(BaseModel):
    label: str
    position: Vector


class CommandRequest(BaseModel):
    command: Literal["start", "restart", "jump", "set_speed", "reset", "click"]
    value: float | None = Field(default=None, ge=0.0, le=1.0)
    label: str | None = None

    @model_validator(mode="after")
    def _check_arguments(self) -> CommandRequest:
        if self.command == "set_speed" and self.value is None:
            raise ValueError("set_speed requires a value")
        if self.command == "click" and not self.label:
            raise ValueError("click requires a label")
        return self


class QueuedResponse(BaseModel):
    queued: int


class TickRequest(BaseModel):
    dt: float = Field(ge=0.0)


class PoseModel(BaseModel):
    position: Vector
    forward: Vector


class SegmentModel(BaseModel):
    position: Vector
    forward: Vector
    length_scale: float


class DecorationModel(BaseModel):
    label: str
    t: float
    position: Vector
    forward: Vector


class ScoreboardModel(BaseModel):
    score: int
    speed: float


class SignalsModel(BaseModel):
    start_enabled: bool
    jump_enabled: bool
    start_label: str


class TickResponse(BaseModel):
    tick: int
    time: float
    signals: SignalsModel
    agent: PoseModel | None = None
    segments: list[SegmentModel] | None = None
    scoreboard: ScoreboardModel | None = None
    decorations: list[DecorationModel] | None = None
    events: list[str] = []
    reoriented: dict[str, Vector] = {}
    control_points_changed: bool = False


class StateResponse(BaseModel):
    control_points: list[Vector]
    phase: str
    t: float
    jumping: bool
    agent: PoseModel | None
    segments: list[SegmentModel]
    scoreboard: ScoreboardModel
    signals: SignalsModel
    hud: dict


class ClosestResponse(BaseModel):
    t: float
    tangent: Vector
