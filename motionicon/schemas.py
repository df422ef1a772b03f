"""Pydantic schemas for icon props."""
from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from motionicon.animation.motion_presets import CustomMotionPreset
from motionicon.animation.motion_types import AnimationMode, MotionType, TriggerType

logger = logging.getLogger(__name__)


class IconProps(BaseModel):
    """Props accepted by every icon.

    Accepts both snake_case names and the camelCase names used by rendering
    code (``strokeWidth``, ``className``, ``aria-label``...). Unrecognised
    motion types, triggers and modes fall back to their defaults instead of
    failing validation. An optional prop with an invalid value (a zero size,
    a negative stroke width, ``animated="maybe"``) is treated as unset.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    size: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    stroke_width: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False, alias="strokeWidth")
    class_name: Optional[str] = Field(default=None, alias="className")
    animated: Optional[bool] = None
    motion_type: MotionType = Field(
        default=MotionType.SCALE,
        validation_alias=AliasChoices("motion_type", "motionType", "lively"),
    )
    trigger: TriggerType = TriggerType.HOVER
    animation_mode: AnimationMode = Field(default=AnimationMode.MOTION, alias="animationMode")
    motion_preset: Optional[CustomMotionPreset] = Field(default=None, alias="motionPreset")
    aria_label: Optional[str] = Field(default=None, alias="aria-label")

    @field_validator("size", "stroke_width", "class_name", "animated", "motion_preset", "aria_label", mode="wrap")
    @classmethod
    def _unset_when_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.warning(f"Ignoring invalid {info.field_name}: {value!r}")
            return None

    @field_validator("motion_type", mode="before")
    @classmethod
    def _parse_motion_type(cls, value: Any) -> MotionType:
        return MotionType.parse(value)

    @field_validator("trigger", mode="before")
    @classmethod
    def _parse_trigger(cls, value: Any) -> TriggerType:
        return TriggerType.parse(value)

    @field_validator("animation_mode", mode="before")
    @classmethod
    def _parse_animation_mode(cls, value: Any) -> AnimationMode:
        return AnimationMode.parse(value)
