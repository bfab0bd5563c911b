"""Tests for input normalization."""

from sentilyzer.utils.text_source import decode_upload, normalize_file_content, normalize_text_input


class TestNormalizeTextInput:
    """Single text box mode."""

    def test_trims_text(self):
        assert normalize_text_input("  I love this!  \n") == ["I love this!"]

    def test_blank_is_noop(self):
        assert normalize_text_input("   \n\t ") == []
        assert normalize_text_input("") == []

    def test_keeps_inner_newlines(self):
        """Typed text is one item even when it spans lines."""
        assert normalize_text_input("first\nsecond") == ["first\nsecond"]


class TestNormalizeFileContent:
    """Uploaded file mode."""

    def test_drops_blank_lines(self):
        assert normalize_file_content("a\n\n  \nb") == ["a", "b"]

    def test_crlf_line_endings(self):
        assert normalize_file_content("one\r\ntwo\r\n\r\nthree\r\n") == ["one", "two", "three"]

    def test_caps_at_twenty_lines(self):
        content = "\n".join(f"line {i}" for i in range(30))
        lines = normalize_file_content(content)

        assert len(lines) == 20
        assert lines == [f"line {i}" for i in range(20)]

    def test_cap_counts_non_blank_lines_only(self):
        content = "\n\n".join(f"row {i}" for i in range(25))
        assert normalize_file_content(content)[-1] == "row 19"

    def test_csv_and_json_read_as_plain_lines(self):
        assert normalize_file_content('text,label\n"good",1') == ["text,label", '"good",1']
        assert normalize_file_content('[\n  "a",\n  "b"\n]') == ["[", '"a",', '"b"', "]"]

    def test_empty_content(self):
        assert normalize_file_content("") == []


def test_decode_upload_strips_bom():
    assert decode_upload("\ufeffhello\nworld".encode("utf-8")) == "hello\nworld"


def test_decode_upload_replaces_invalid_bytes():
    assert decode_upload(b"ok \xff line") == "ok \ufffd line"
