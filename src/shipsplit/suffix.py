# Copyright (c) Syntropy Systems
"""Variant suffix extraction from delivery option titles."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

# " (" + token + ")"
SUFFIX_LENGTH = 4


def extract_suffix(
    title: str | None,
    allowed: Collection[str] | None = None,
) -> str | None:
    """Return the variant token embedded at the end of a title.

    A title is tagged when it ends with a space, an opening parenthesis, one
    alphanumeric character and a closing parenthesis, e.g.
    ``"Standard Shipping (A)"``. Only the trailing parenthetical counts, so
    ``"Multiple (X) parts (A)"`` yields ``"A"``.

    If ``allowed`` is given, tokens outside it are treated as untagged.

    Never raises; returns None when there is no usable token.
    """
    if not title or len(title) < SUFFIX_LENGTH:
        return None

    if title[-1] != ")" or title[-3] != "(" or title[-4] != " ":
        return None

    token = title[-2]
    if not token.isalnum():
        return None

    if allowed is not None and token not in allowed:
        return None

    return token


def tag_title(name: str, token: str) -> str:
    """Build a rate title tagged for a variant, e.g. ``"Express (B)"``.

    Raises ValueError if the token could not be extracted back from the title.
    """
    if len(token) != 1 or not token.isalnum():
        msg = f"Variant suffix must be a single alphanumeric character, got {token!r}"
        raise ValueError(msg)
    return f"{name.rstrip()} ({token})"
