# Copyright (c) Syntropy Systems
"""Pydantic models for hide directives and function results."""

from __future__ import annotations

from typing import Literal, cast

from pydantic import Field, model_serializer, model_validator

from .base import JSONObject, ShipsplitBaseModel

DecisionReason = Literal["control", "exempt", "untagged", "match", "mismatch"]


class HideDirective(ShipsplitBaseModel):
    """Instruction to remove one delivery option from the visible set."""

    delivery_option_handle: str = Field(alias="deliveryOptionHandle")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_hide(cls, data: object) -> object:
        if isinstance(data, dict) and "hide" in data:
            return cast("dict[str, object]", data)["hide"]
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> JSONObject:
        return {"hide": {"deliveryOptionHandle": self.delivery_option_handle}}


class FunctionResult(ShipsplitBaseModel):
    """Operations returned to the checkout host."""

    operations: list[HideDirective] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> FunctionResult:
        """Return the no-change result."""
        return cls(operations=[])

    @property
    def hidden_handles(self) -> list[str]:
        """Handles of the options being hidden, in order."""
        return [op.delivery_option_handle for op in self.operations]


class OptionDecision(ShipsplitBaseModel):
    """Per-option decision record used by ``explain``."""

    handle: str
    title: str
    token: str | None = None
    visible: bool
    reason: DecisionReason
