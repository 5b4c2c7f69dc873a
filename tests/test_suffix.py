# Copyright (c) Syntropy Systems
"""Tests for variant suffix extraction."""

import pytest

from shipsplit.suffix import extract_suffix, tag_title


class TestExtractSuffix:
    """Tests for extract_suffix."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Standard Shipping (A)", "A"),
            ("Express Shipping", None),
            ("Standard Shipping (AB)", None),
            ("(A)", None),
            ("Free Shipping ()", None),
            ("Multiple (X) parts (A)", "A"),
            ("Economy (1)", "1"),
            ("Economy (b)", "b"),
        ],
    )
    def test_extraction_table(self, title, expected):
        """Test the documented title/token pairs."""
        assert extract_suffix(title) == expected

    def test_empty_and_none(self):
        """Test that empty and missing titles have no token."""
        assert extract_suffix("") is None
        assert extract_suffix(None) is None

    def test_short_titles(self):
        """Test titles shorter than the suffix itself."""
        assert extract_suffix("A") is None
        assert extract_suffix("(A") is None
        assert extract_suffix(" (A") is None

    def test_minimal_tagged_title(self):
        """Test that a bare suffix with its leading space is tagged."""
        assert extract_suffix(" (A)") == "A"

    def test_requires_space_before_parenthesis(self):
        """Test that the space before the opening parenthesis is mandatory."""
        assert extract_suffix("Shipping(A)") is None
        assert extract_suffix("Shipping  (A)") == "A"

    def test_trailing_text_after_suffix(self):
        """Test that nothing may follow the closing parenthesis."""
        assert extract_suffix("Shipping (A) ") is None
        assert extract_suffix("Shipping (A).") is None

    def test_non_alphanumeric_token(self):
        """Test punctuation and whitespace tokens are rejected."""
        assert extract_suffix("Shipping (-)") is None
        assert extract_suffix("Shipping ( )") is None
        assert extract_suffix("Shipping (*)") is None

    def test_word_parenthetical(self):
        """Test multi-character parentheticals are not tokens."""
        assert extract_suffix("Standard Shipping (Control)") is None

    def test_non_ascii_text(self):
        """Test non-ASCII text around the suffix never raises."""
        assert extract_suffix("Envío estándar (B)") == "B"
        assert extract_suffix("配送 (A)") == "A"
        assert extract_suffix("Livraison (é)") == "é"
        assert extract_suffix("Versand 🚚 (🚚)") is None
        assert extract_suffix("🚚🚚🚚") is None

    def test_allow_list(self):
        """Test that an allow-list rejects tokens outside it."""
        allowed = frozenset({"A", "B", "C", "D"})

        assert extract_suffix("Express (C)", allowed) == "C"
        assert extract_suffix("Express (E)", allowed) is None
        assert extract_suffix("Express (1)", allowed) is None
        assert extract_suffix("Express", allowed) is None

    def test_empty_allow_list(self):
        """Test that an empty allow-list accepts nothing."""
        assert extract_suffix("Express (A)", frozenset()) is None


class TestTagTitle:
    """Tests for tag_title."""

    def test_tag_title(self):
        """Test building a tagged title."""
        assert tag_title("Standard Shipping", "B") == "Standard Shipping (B)"

    def test_tag_title_strips_trailing_space(self):
        """Test that trailing whitespace does not double the separator."""
        assert tag_title("Express ", "A") == "Express (A)"

    def test_tagged_title_is_extracted(self):
        """Test that a tagged title yields its token."""
        assert extract_suffix(tag_title("Pickup", "3")) == "3"

    @pytest.mark.parametrize("token", ["", "AB", "-", " "])
    def test_tag_title_invalid_token(self, token):
        """Test that tokens which could never be extracted are rejected."""
        with pytest.raises(ValueError, match="single alphanumeric"):
            tag_title("Express", token)
