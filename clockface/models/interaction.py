"""Pydantic models for user actions arriving over the chart WebSocket.

One message is one discrete input: a range click, a ray activation, a
wheel tick or a pointer event.  The ``action`` field selects the model.
Wheel and pointer values must be finite numbers.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from clockface.domain.enums import TimeRange


class SetRangeAction(BaseModel):
    action: Literal["set_range"]
    range: TimeRange


class SelectAction(BaseModel):
    action: Literal["select"]
    event_id: str = Field(..., min_length=1)


class ZoomAction(BaseModel):
    action: Literal["zoom"]
    delta_y: float = Field(..., description="Wheel delta; negative zooms in")

    model_config = {"allow_inf_nan": False}


class PanStartAction(BaseModel):
    action: Literal["pan_start"]
    x: float
    y: float

    model_config = {"allow_inf_nan": False}


class PanMoveAction(BaseModel):
    action: Literal["pan_move"]
    x: float
    y: float

    model_config = {"allow_inf_nan": False}


class PanEndAction(BaseModel):
    action: Literal["pan_end"]


class RenderAction(BaseModel):
    action: Literal["render"]


InteractionAction = Annotated[
    Union[
        SetRangeAction,
        SelectAction,
        ZoomAction,
        PanStartAction,
        PanMoveAction,
        PanEndAction,
        RenderAction,
    ],
    Field(discriminator="action"),
]

_adapter: TypeAdapter[InteractionAction] = TypeAdapter(InteractionAction)


def parse_action(raw: Any) -> InteractionAction:
    """Validate a raw message.  Raises pydantic.ValidationError."""
    return _adapter.validate_python(raw)
