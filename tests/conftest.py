# Copyright (c) Syntropy Systems
"""Pytest fixtures for shipsplit tests."""

import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from shipsplit.models import Cart

# Store original cwd at module load time
_original_cwd = Path.cwd()

CartFactory = Callable[..., Cart]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Generator[Path, None, None]:
    """Change into a temporary project directory with no config."""
    os.chdir(temp_dir)

    yield temp_dir

    # Always return to original cwd
    os.chdir(_original_cwd)


@pytest.fixture
def make_cart() -> CartFactory:
    """Build a cart from groups of option titles.

    Handles are assigned h1, h2, ... in traversal order.
    """

    def _make(
        *groups: list[str],
        variant: str | None = None,
        subscription: bool = False,
        key: str = "_shipping_variant",
    ) -> Cart:
        counter = 0
        delivery_groups = []
        for titles in groups:
            options = []
            for title in titles:
                counter += 1
                options.append({"handle": f"h{counter}", "title": title})
            delivery_groups.append({"deliveryOptions": options})

        lines = [{"id": "line-1", "quantity": 1}]
        if subscription:
            lines.append(
                {
                    "id": "line-2",
                    "quantity": 1,
                    "sellingPlanAllocation": {"sellingPlanId": "sp-1"},
                }
            )

        data: dict[str, object] = {"lines": lines, "deliveryGroups": delivery_groups}
        if variant is not None:
            data["attribute"] = {"key": key, "value": variant}
        return Cart.model_validate(data)

    return _make
