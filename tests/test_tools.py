"""Tests for the URI tool handlers."""

import pytest

from rfcuri.tools import (
    handle_equals,
    handle_file_base,
    handle_normalize,
    handle_parse,
    handle_path_to_uri,
    handle_resolve,
    handle_uri_to_path,
)


class TestParseTool:
    """Tests for handle_parse."""

    def test_parse(self):
        result = handle_parse("foo://example.com:8042/over/there?name=ferret#nose")

        assert result["success"] is True
        assert result["kind"] == "generic"
        assert result["scheme"] == "foo"
        assert result["host"] == "example.com"
        assert result["port"] == 8042
        assert result["path"] == "/over/there"
        assert result["uri"] == "foo://example.com:8042/over/there?name=ferret#nose"

    def test_parse_http_kind(self):
        result = handle_parse("http://a", kind="http")

        assert result["kind"] == "http"
        assert result["path"] == "/"

    def test_invalid_uri(self):
        result = handle_parse("ldap://[2001:db8::7]/c=GB")

        assert result["success"] is False
        assert result["error"] == "Invalid URI"
        assert "IPv6" in result["details"]

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown URI kind"):
            handle_parse("http://a/", kind="ftp")


class TestNormalizeTool:
    """Tests for handle_normalize."""

    def test_normalize(self):
        result = handle_normalize("HTTP://Example.com:80/a/../b", kind="http")

        assert result["success"] is True
        assert result["original"] == "http://Example.com:80/a/../b"
        assert result["uri"] == "http://example.com/b"
        assert result["changed"] is True

    def test_already_normal(self):
        result = handle_normalize("http://a/b")
        assert result["changed"] is False


class TestEqualsTool:
    """Tests for handle_equals."""

    def test_not_equal_unless_normalized(self):
        raw = handle_equals("http://foo/%5bbar", "http://foo/%5Bbar")
        normalized = handle_equals("http://foo/%5bbar", "http://foo/%5Bbar", normalized=True)

        assert raw["equal"] is False
        assert normalized["equal"] is True
        assert normalized["first"] == "http://foo/%5bbar"


class TestResolutionTools:
    """Tests for handle_resolve and handle_file_base."""

    def test_resolve(self):
        result = handle_resolve("../g", "http://a/b/c/d;p?q")

        assert result["success"] is True
        assert result["uri"] == "http://a/b/g"

    def test_resolve_invalid_base(self):
        result = handle_resolve("g", "/relative")

        assert result["success"] is False
        assert "Invalid base URI" in result["details"]

    def test_resolve_file_drive_letter(self):
        result = handle_resolve("../../../g", "file:///c:/a/b/c/d;p?q", kind="file")
        assert result["uri"] == "file:///c:/g"

    def test_file_base(self):
        result = handle_file_base("file://example.com/foo?bar#baz")

        assert result["base"] == "file://example.com/foo"
        assert result["path"] == "/foo"

    def test_file_base_invalid(self):
        result = handle_file_base("file:////foo.txt")
        assert result["success"] is False


class TestFilesystemTools:
    """Tests for handle_path_to_uri and handle_uri_to_path."""

    def test_round_trip(self, sample_file):
        uri = handle_path_to_uri(str(sample_file))["uri"]
        result = handle_uri_to_path(uri)

        assert result["success"] is True
        assert result["path"] == str(sample_file.resolve())

    def test_uri_to_path_invalid(self):
        result = handle_uri_to_path("http://a/b")
        assert result["success"] is False


class TestErrorHandling:
    """Tests for the tool error wrapper."""

    def test_syntax_error_logged_as_warning(self, caplog):
        with caplog.at_level("WARNING", logger="rfcuri.utils.errors"):
            handle_parse("http://a:/")

        assert "Invalid URI in handle_parse" in caplog.text

    def test_internal_error_reported(self, monkeypatch, caplog):
        monkeypatch.setattr("rfcuri.core.parser._parse_fragment", lambda state: None)

        with caplog.at_level("ERROR", logger="rfcuri.utils.errors"):
            result = handle_parse("http://a/#frag")

        assert result["success"] is False
        assert result["error"] == "Internal parser error"
        assert "Parser failure in handle_parse" in caplog.text
