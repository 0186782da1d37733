"""Tests for ordered token substitution."""

import pytest

from file_monitor.core.substitution import (
    FILE_PATH,
    POST_COMBINE,
    PRE_COMBINE,
    SubstitutionContext,
    substitute_tokens,
)
from file_monitor.core.tokens import CURRENT, SEPARATOR


@pytest.fixture
def context():
    return SubstitutionContext(base_dir="/srv/app", separator="/", file_name="data.txt")


class TestSubstitutionTables:
    """Tests for the fixed substitution order."""

    def test_pre_combine_current_becomes_dot(self, context):
        assert substitute_tokens("[RutaActual][DS]A", PRE_COMBINE, context) == ".[DS]A"

    def test_post_combine(self, context):
        result = substitute_tokens("[RutaActual][DS]logs[DS]app", POST_COMBINE, context)

        assert result == "/srv/app/logs/app"

    def test_file_path(self, context):
        result = substitute_tokens("[Auto]/in/[FileName]", FILE_PATH, context)

        assert result == "/srv/app/in/data.txt"

    def test_post_combine_leaves_file_tokens(self, context):
        result = substitute_tokens("[Auto][DS][FileName]", POST_COMBINE, context)

        assert result == "[Auto]/[FileName]"

    def test_order_is_applied_sequentially(self):
        """Test a replacement value is visible to later entries of the table."""
        context = SubstitutionContext(base_dir="[DS]root", separator="\\")

        result = substitute_tokens("[RutaActual][DS]x", POST_COMBINE, context)

        assert result == "\\root\\x"

    def test_custom_table(self, context):
        table = ((SEPARATOR, lambda ctx: "|"), (CURRENT, lambda ctx: "here"))

        assert substitute_tokens("[RutaActual][DS]x", table, context) == "here|x"

    def test_missing_file_name(self):
        context = SubstitutionContext(base_dir="/srv/app", separator="/")

        with pytest.raises(ValueError, match="no file name"):
            substitute_tokens("/tmp/[FileName]", FILE_PATH, context)

    def test_unused_replacement_not_called(self):
        """Test the file name is only required when [FileName] is present."""
        context = SubstitutionContext(base_dir="/srv/app", separator="/")

        assert substitute_tokens("[Auto]/x", FILE_PATH, context) == "/srv/app/x"
