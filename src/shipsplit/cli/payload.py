# Copyright (c) Syntropy Systems
"""Loading cart snapshots and config for CLI commands."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from shipsplit.config import load_config
from shipsplit.models import CartAttribute, FunctionInput

if TYPE_CHECKING:
    from pathlib import Path

    from shipsplit.policy import VisibilityPolicy

STDIN_MARKER = "-"


def read_input(source: Path | None) -> FunctionInput:
    """Read a ``{"cart": ...}`` JSON snapshot from a file or stdin.

    Raises OSError if the file cannot be read and ValueError (including
    pydantic.ValidationError) if it is not a valid snapshot.
    """
    if source is None or str(source) == STDIN_MARKER:
        text = sys.stdin.read()
    else:
        text = source.read_text(encoding="utf-8")
    return FunctionInput.model_validate_json(text)


def with_variant(
    payload: FunctionInput, policy: VisibilityPolicy, variant: str | None
) -> FunctionInput:
    """Return a copy of the payload with the assigned variant overridden."""
    if variant is None:
        return payload
    cart = payload.cart
    attributes = {**cart.attributes, policy.attribute_key: variant}
    cart = cart.model_copy(
        update={
            "attributes": attributes,
            "attribute": CartAttribute(key=policy.attribute_key, value=variant),
        }
    )
    return payload.model_copy(update={"cart": cart})


def load_policy(config_path: Path | None) -> VisibilityPolicy:
    """Load config (explicit path or discovered) and build the policy.

    Raises FileNotFoundError if an explicit config path is not a file.
    """
    if config_path is not None and not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)
    return load_config(config_path).to_policy()
