"""Tests for category bucketing of flattened tokens."""

from __future__ import annotations

import pytest


class TestClassifyKey:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("colors-primary-500", "colors"),
            ("slide-background", "colors"),
            ("dark-text", "colors"),
            ("typography-fontSize-lg", "typography"),
            ("fontWeight-bold", "typography"),
            ("spacing-md", "spacing"),
            ("borderRadius-md", "borders-shadows"),
            ("shadows-lg", "borders-shadows"),
            ("transitions-duration-fast", "transitions"),
            ("gradients-primary", "other"),
            ("components-code-padding", "other"),
        ],
    )
    def test_buckets(self, key: str, expected: str) -> None:
        from prsm_theme.core.categorize import classify_key

        assert classify_key(key) == expected

    def test_first_match_wins(self) -> None:
        from prsm_theme.core.categorize import CategoryBucket, classify_key

        # "slide-padding" starts with slide, so it is a colour even though it is spacing-like
        assert classify_key("slide-padding-reveal") is CategoryBucket.COLORS


class TestCategorize:
    def test_declaration_lines(self) -> None:
        from prsm_theme.core.categorize import CategoryBucket, categorize

        buckets = categorize({"spacing-md": "1rem", "typography-fontWeight-bold": 700})
        assert buckets[CategoryBucket.SPACING] == ["--prsm-spacing-md: 1rem;"]
        assert buckets[CategoryBucket.TYPOGRAPHY] == ["--prsm-typography-fontWeight-bold: 700;"]

    def test_all_buckets_present(self) -> None:
        from prsm_theme.core.categorize import CategoryBucket, categorize

        buckets = categorize({})
        assert set(buckets) == set(CategoryBucket)
        assert all(lines == [] for lines in buckets.values())

    def test_preserves_order_within_bucket(self) -> None:
        from prsm_theme.core.categorize import CategoryBucket, categorize

        buckets = categorize({"colors-b": "#2", "spacing-x": "1", "colors-a": "#1"})
        assert buckets[CategoryBucket.COLORS] == ["--prsm-colors-b: #2;", "--prsm-colors-a: #1;"]

    def test_whole_floats_render_without_decimal(self) -> None:
        from prsm_theme.core.categorize import css_declaration

        assert css_declaration("lineHeight-none", 1.0) == "--prsm-lineHeight-none: 1;"
        assert css_declaration("lineHeight-tight", 1.2) == "--prsm-lineHeight-tight: 1.2;"
