# Copyright (c) Syntropy Systems
"""Pydantic models for cart snapshots and function results."""

from .base import ShipsplitBaseModel
from .cart import (
    Cart,
    CartAttribute,
    DeliveryGroup,
    DeliveryOption,
    FunctionInput,
    LineItem,
    SellingPlanAllocation,
)
from .result import FunctionResult, HideDirective, OptionDecision

__all__ = [
    "Cart",
    "CartAttribute",
    "DeliveryGroup",
    "DeliveryOption",
    "FunctionInput",
    "FunctionResult",
    "HideDirective",
    "LineItem",
    "OptionDecision",
    "SellingPlanAllocation",
    "ShipsplitBaseModel",
]
