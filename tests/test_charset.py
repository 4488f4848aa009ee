"""Tests for the character set collation table."""

import pytest
from ddl_normalize.charset import _DEFAULT_COLLATIONS, default_collation


class TestDefaultCollation:
    """Tests for default_collation."""

    @pytest.mark.parametrize(
        "character_set, collation",
        [
            ("utf8", "utf8_general_ci"),
            ("utf8mb4", "utf8mb4_general_ci"),
            ("latin1", "latin1_swedish_ci"),
            ("binary", "binary"),
            ("gb18030", "gb18030_chinese_ci"),
        ],
    )
    def test_known_character_sets(self, character_set, collation):
        assert default_collation(character_set) == collation

    def test_unknown_character_set_returns_empty_string(self):
        assert default_collation("klingon") == ""

    def test_lookup_is_case_sensitive(self):
        assert default_collation("UTF8") == ""

    def test_table_covers_all_mysql_character_sets(self):
        assert len(_DEFAULT_COLLATIONS) == 41
