"""
shipsplit - Shipping rate split testing.

Hide the delivery options that belong to another experiment variant.
"""

from shipsplit.filter import decide, explain, run
from shipsplit.policy import VisibilityPolicy
from shipsplit.suffix import extract_suffix, tag_title

__version__ = "0.1.0"
__all__ = [
    "VisibilityPolicy",
    "__version__",
    "decide",
    "explain",
    "extract_suffix",
    "run",
    "tag_title",
]
