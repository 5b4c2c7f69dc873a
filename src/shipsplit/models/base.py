# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for shipsplit."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, JsonValue
from typing_extensions import TypeAlias

JSONValue: TypeAlias = JsonValue
JSONObject: TypeAlias = dict[str, JSONValue]


class ShipsplitBaseModel(BaseModel):
    """Base model with shared config for shipsplit schemas.

    Snapshots are frozen so the filter can never mutate the cart it is given.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )
