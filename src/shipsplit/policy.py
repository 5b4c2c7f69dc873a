# Copyright (c) Syntropy Systems
"""Visibility policy: variant resolution, exemptions and per-option matching."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from typing_extensions import TypeAlias

from shipsplit.suffix import extract_suffix

if TYPE_CHECKING:
    from collections.abc import Callable

    from shipsplit.models import Cart

DEFAULT_ATTRIBUTE_KEY = "_shipping_variant"

VariantResolver: TypeAlias = "Callable[[Cart, str], str | None]"
ExemptionCheck: TypeAlias = "Callable[[Cart], bool]"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_flat_attribute(cart: Cart, key: str) -> str | None:
    """Read the variant from the flat attribute mapping."""
    return _clean(cart.attributes.get(key))


def resolve_structured_attribute(cart: Cart, key: str) -> str | None:
    """Read the variant from the structured ``attribute`` object.

    The host only returns the attribute it was queried for, so the key is
    checked only when present.
    """
    attribute = cart.attribute
    if attribute is None:
        return None
    if attribute.key is not None and attribute.key != key:
        return None
    return _clean(attribute.value)


def resolve_any_attribute(cart: Cart, key: str) -> str | None:
    """Structured attribute first, then the flat mapping."""
    return resolve_structured_attribute(cart, key) or resolve_flat_attribute(
        cart, key
    )


def subscription_exempt(cart: Cart) -> bool:
    """Exempt carts containing any subscription or recurring line."""
    return cart.has_subscription


def never_exempt(cart: Cart) -> bool:  # noqa: ARG001
    """Never exempt a cart."""
    return False


ATTRIBUTE_SOURCES: dict[str, VariantResolver] = {
    "any": resolve_any_attribute,
    "flat": resolve_flat_attribute,
    "structured": resolve_structured_attribute,
}

EXEMPTIONS: dict[str, ExemptionCheck] = {
    "subscription": subscription_exempt,
    "none": never_exempt,
}


@dataclass(frozen=True)
class VisibilityPolicy:
    """Decides which delivery options a shopper in a variant may see."""

    attribute_key: str = DEFAULT_ATTRIBUTE_KEY
    resolve_variant: VariantResolver = field(default=resolve_any_attribute)
    is_exempt: ExemptionCheck = field(default=subscription_exempt)
    # None accepts any single alphanumeric token
    allowed_tokens: frozenset[str] | None = None

    def assigned_variant(self, cart: Cart) -> str | None:
        """Return the cart's assigned variant, or None for the control group."""
        return self.resolve_variant(cart, self.attribute_key)

    def exempt(self, cart: Cart) -> bool:
        """Whether the cart is excluded from the experiment."""
        return self.is_exempt(cart)

    def token_for(self, title: str | None) -> str | None:
        """Extract the title's variant token under this policy's allow-list."""
        return extract_suffix(title, self.allowed_tokens)

    def is_visible(self, title: str | None, variant: str) -> bool:
        """Untagged titles and titles tagged with ``variant`` stay visible."""
        token = self.token_for(title)
        return token is None or token == variant
