# Copyright (c) Syntropy Systems
"""Pydantic models for the cart snapshot supplied by the checkout host."""

from __future__ import annotations

from typing import cast

from pydantic import Field, field_validator

from .base import JSONValue, ShipsplitBaseModel


class CartAttribute(ShipsplitBaseModel):
    """A single cart attribute as returned when queried by key."""

    key: str | None = None
    value: str | None = None


class SellingPlanAllocation(ShipsplitBaseModel):
    """Selling plan attached to a line (subscription or recurring purchase)."""

    selling_plan_id: str | None = Field(default=None, alias="sellingPlanId")
    name: str | None = None


class LineItem(ShipsplitBaseModel):
    """A cart line."""

    id: str | None = None
    quantity: int = 1
    selling_plan_allocation: SellingPlanAllocation | None = Field(
        default=None, alias="sellingPlanAllocation"
    )
    subscription: bool = False

    @property
    def is_subscription(self) -> bool:
        """Whether this line is a subscription or recurring purchase."""
        return self.subscription or self.selling_plan_allocation is not None


class DeliveryOption(ShipsplitBaseModel):
    """A shipping method choice presented at checkout."""

    handle: str
    title: str | None = None


class DeliveryGroup(ShipsplitBaseModel):
    """Delivery options resolved for one group of cart lines."""

    id: str | None = None
    delivery_options: list[DeliveryOption] = Field(
        default_factory=list, alias="deliveryOptions"
    )


class Cart(ShipsplitBaseModel):
    """Cart snapshot for a single decision."""

    attributes: dict[str, str] = Field(default_factory=dict)
    attribute: CartAttribute | None = None
    lines: list[LineItem] = Field(default_factory=list)
    delivery_groups: list[DeliveryGroup] = Field(
        default_factory=list, alias="deliveryGroups"
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: object) -> dict[str, str]:
        if value is None:
            return {}
        if isinstance(value, dict):
            # Attributes unrelated to the variant may be null; drop them
            return {
                key: attr_value
                for key, attr_value in cast("dict[object, object]", value).items()
                if isinstance(key, str) and isinstance(attr_value, str)
            }
        if not isinstance(value, list):
            return cast("dict[str, str]", value)
        # Host attribute lists look like [{"key": ..., "value": ...}]
        converted: dict[str, str] = {}
        for item in cast("list[JSONValue]", value):
            if not isinstance(item, dict):
                continue
            key = item.get("key")
            attr_value = item.get("value")
            if isinstance(key, str) and isinstance(attr_value, str):
                converted[key] = attr_value
        return converted

    @property
    def has_subscription(self) -> bool:
        """Whether any line is a subscription or recurring purchase."""
        return any(line.is_subscription for line in self.lines)

    def iter_options(self) -> list[DeliveryOption]:
        """Return every delivery option, group order then option order."""
        return [
            option
            for group in self.delivery_groups
            for option in group.delivery_options
        ]


class FunctionInput(ShipsplitBaseModel):
    """Top-level input payload: ``{"cart": {...}}``."""

    cart: Cart
