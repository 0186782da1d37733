"""Unit tests for file path resolution ([Auto] / [FileName])."""

import posixpath

import pytest

from file_monitor.paths import LocalFileSystem, PathResolver

POSIX_BASE_DIR = "/srv/app/bin"


class TestResolveFilePath:
    """Test file path resolution."""

    def test_auto_appends_file_name(self, posix_resolver):
        """Test [Auto] as the whole expression resolves to base dir + file name."""
        result = posix_resolver.resolve_file_path("[Auto]", "data.txt")

        assert result == f"{POSIX_BASE_DIR}/data.txt"

    @pytest.mark.parametrize("expression", ["  [Auto]  ", "[auto]", "[AUTO]\n"])
    def test_auto_is_trimmed_and_case_insensitive(self, posix_resolver, expression):
        """Test [Auto] detection ignores surrounding whitespace and case."""
        result = posix_resolver.resolve_file_path(expression, "data.txt")

        assert result == f"{POSIX_BASE_DIR}/data.txt"

    def test_auto_with_base_dir_ending_in_separator(self):
        """Test exactly one separator is placed before the appended file name."""
        resolver = PathResolver("/srv/app/", filesystem=LocalFileSystem(posixpath))

        assert resolver.resolve_file_path("[Auto]", "data.txt") == "/srv/app/data.txt"

    def test_file_name_token(self, posix_resolver):
        """Test [FileName] is replaced by the requested file name."""
        result = posix_resolver.resolve_file_path("/var/data/[FileName]", "report.csv")

        assert result == "/var/data/report.csv"

    def test_file_name_token_with_current_and_separator(self, posix_resolver):
        """Test [FileName] combines with the other tokens."""
        result = posix_resolver.resolve_file_path(
            "[RutaActual][DS]in[DS][FileName]", "report.csv"
        )

        assert result == f"{POSIX_BASE_DIR}/in/report.csv"

    def test_relative_path_without_tokens(self, posix_resolver):
        """Test plain relative expressions resolve against the base directory."""
        result = posix_resolver.resolve_file_path("conf/app.yaml", "ignored.txt")

        assert result == f"{POSIX_BASE_DIR}/conf/app.yaml"

    def test_trailing_separators_are_stripped(self, posix_resolver):
        """Test every trailing separator is removed from the result."""
        result = posix_resolver.resolve_file_path("/var/data/[FileName]", "out///")

        assert result == "/var/data/out"

    def test_none_expression_resolves_to_base_dir(self, posix_resolver):
        """Test a missing expression falls back to the base directory."""
        assert posix_resolver.resolve_file_path(None, "data.txt") == POSIX_BASE_DIR

    def test_file_name_token_without_file_name(self, posix_resolver):
        """Test [FileName] with no file name fails loudly."""
        with pytest.raises(ValueError, match="no file name"):
            posix_resolver.resolve_file_path("/var/[FileName]", None)

    def test_auto_without_file_name(self, posix_resolver):
        """Test [Auto] with no file name fails loudly."""
        with pytest.raises(ValueError, match="requires a file name"):
            posix_resolver.resolve_file_path("[Auto]", None)

    def test_root_only_result_is_rejected(self, posix_resolver):
        """Test a result made only of separators is a precondition error."""
        with pytest.raises(ValueError, match="only of separators"):
            posix_resolver.resolve_file_path("/", "data.txt")


class TestResolveFilePathWindows:
    """Test file path resolution with Windows path syntax."""

    def test_auto_appends_file_name(self, windows_resolver):
        result = windows_resolver.resolve_file_path("[Auto]", "data.txt")

        assert result == "D:\\app\\bin\\Debug\\data.txt"

    def test_file_name_token(self, windows_resolver):
        result = windows_resolver.resolve_file_path("C:\\temp\\[FileName]", "a.log")

        assert result == "C:\\temp\\a.log"
