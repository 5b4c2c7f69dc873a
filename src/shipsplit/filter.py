# Copyright (c) Syntropy Systems
"""Variant filter: decide which delivery options to hide for a cart."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from shipsplit.models import (
    Cart,
    FunctionInput,
    FunctionResult,
    HideDirective,
    OptionDecision,
)
from shipsplit.policy import VisibilityPolicy

logger = logging.getLogger(__name__)

DEFAULT_POLICY = VisibilityPolicy()


def decide(cart: Cart, policy: VisibilityPolicy | None = None) -> list[HideDirective]:
    """Return hide directives for options tagged with another variant.

    Carts without an assigned variant (control) and exempt carts get no
    directives. Directives follow group order, then option order.
    """
    policy = policy or DEFAULT_POLICY

    variant = policy.assigned_variant(cart)
    if variant is None:
        logger.debug(
            "No variant assigned (%s); showing all options", policy.attribute_key
        )
        return []

    if policy.exempt(cart):
        logger.debug("Cart exempt from variant %s; showing all options", variant)
        return []

    directives = [
        HideDirective(delivery_option_handle=option.handle)
        for option in cart.iter_options()
        if not policy.is_visible(option.title, variant)
    ]
    logger.debug("Variant %s: hiding %d option(s)", variant, len(directives))
    return directives


def run(
    payload: FunctionInput | Mapping[str, object],
    policy: VisibilityPolicy | None = None,
) -> FunctionResult:
    """Run the filter over a host payload of the form ``{"cart": {...}}``.

    Raises pydantic.ValidationError if the payload is not a cart snapshot.
    """
    if not isinstance(payload, FunctionInput):
        payload = FunctionInput.model_validate(payload)
    return FunctionResult(operations=decide(payload.cart, policy))


def explain(cart: Cart, policy: VisibilityPolicy | None = None) -> list[OptionDecision]:
    """Return the decision for every option, in traversal order."""
    policy = policy or DEFAULT_POLICY

    variant = policy.assigned_variant(cart)
    exempt = variant is not None and policy.exempt(cart)

    decisions: list[OptionDecision] = []
    for option in cart.iter_options():
        title = option.title or ""
        token = policy.token_for(title)
        if variant is None:
            visible, reason = True, "control"
        elif exempt:
            visible, reason = True, "exempt"
        elif token is None:
            visible, reason = True, "untagged"
        elif token == variant:
            visible, reason = True, "match"
        else:
            visible, reason = False, "mismatch"
        decisions.append(
            OptionDecision(
                handle=option.handle,
                title=title,
                token=token,
                visible=visible,
                reason=reason,
            )
        )
    return decisions
