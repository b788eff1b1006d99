from clockface.models.interaction import (
    InteractionAction,
    PanEndAction,
    PanMoveAction,
    PanStartAction,
    RenderAction,
    SelectAction,
    SetRangeAction,
    ZoomAction,
    parse_action,
)

__all__ = [
    "InteractionAction",
    "PanEndAction",
    "PanMoveAction",
    "PanStartAction",
    "RenderAction",
    "SelectAction",
    "SetRangeAction",
    "ZoomAction",
    "parse_action",
]
