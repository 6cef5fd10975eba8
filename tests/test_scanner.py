"""Tests for the header scanner."""

from cenumgen.pipeline import scan_header


def names(text: str) -> list[str]:
    return [entry.source_name for entry in scan_header(text).entries]


class TestScanHeader:
    """Test #define name extraction."""

    def test_extracts_names_in_order(self, iops_header):
        """Test names come back in first-occurrence order."""
        assert names(iops_header) == [
            "_IOPSKEYS_H_",
            "kIOPSPowerAdapterIDKey",
            "kIOPSPowerAdapterWattsKey",
        ]

    def test_ignores_other_text(self):
        """Test non-define lines are skipped."""
        text = "#include <stdio.h>\nint x = 1;\n// #define COMMENTED 1\n#define REAL 2\n"
        assert names(text) == ["REAL"]

    def test_leading_whitespace(self):
        """Test indented definitions are found."""
        assert names("   #define INDENTED 1\n\t#define TABBED 2") == ["INDENTED", "TABBED"]

    def test_inline_after_statement(self):
        """Test a definition following a semicolon on the same line."""
        assert names("int x = 0; #define INLINE_NAME 3\n") == ["INLINE_NAME"]

    def test_function_like_macro_name(self):
        """Test the name of a function-like macro is taken without its parameters."""
        assert names("#define MAX(a, b) ((a) > (b) ? (a) : (b))") == ["MAX"]

    def test_requires_name_on_same_line(self):
        """Test a definition split across lines is not matched."""
        assert names("#define\nNEXT_LINE 1\n") == []

    def test_requires_whitespace_after_keyword(self):
        """Test #defineX is not a definition."""
        assert names("#defineX 1\n") == []

    def test_empty_text(self):
        """Test empty input yields nothing."""
        result = scan_header("")
        assert result.entries == []
        assert result.warnings == []


class TestDuplicates:
    """Test handling of repeated definitions."""

    def test_keeps_first_occurrence(self):
        """Test only the first definition of a name is kept."""
        text = "#define A 1\n#define B 2\n#define A 3\n"
        assert names(text) == ["A", "B"]

    def test_warns_for_every_repeat(self):
        """Test each later definition adds a warning."""
        text = "#define A 1\n#define A 2\n#define A 3\n"
        result = scan_header(text)

        assert len(result.entries) == 1
        assert result.warnings == [
            "Duplicate #define A found; keeping first occurrence",
            "Duplicate #define A found; keeping first occurrence",
        ]


class TestLineEndings:
    """Test headers saved with non-Unix line endings."""

    def test_windows_line_endings(self):
        """Test CRLF-separated definitions are all found."""
        assert names("#define A 1\r\n#define B 2\r\n") == ["A", "B"]

    def test_bare_carriage_returns(self):
        """Test CR-only separated definitions are all found."""
        assert names("#define A 1\r#define B 2\r  #define C 3\r") == ["A", "B", "C"]
