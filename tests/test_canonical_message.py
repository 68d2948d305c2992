"""
Tests for header canonicalization and signing string construction
"""

import pytest

from httpsig_sdk.signing import (
    CanonicalHeaders,
    SigningError,
    SigningErrorCodes,
    build_headers_parameter,
    build_request_target,
    build_signing_string,
    canonical_header_block,
    canonical_header_line,
    header_values,
    signed_header_names,
    unique_header_names,
)


class TestUniqueHeaderNames:
    """Test de-duplication and ordering of header names"""

    def test_first_occurrence_order(self):
        headers = [("Date", "d"), ("Host", "h"), ("Date", "d2"), ("Accept", "a")]
        assert unique_header_names(headers) == ["Date", "Host", "Accept"]

    def test_case_is_preserved(self):
        assert unique_header_names([("X-Custom", "1")]) == ["X-Custom"]

    def test_exact_string_equality(self):
        # Differently cased names are distinct entries
        headers = [("X-A", "1"), ("x-a", "2"), ("X-A", "3")]
        assert unique_header_names(headers) == ["X-A", "x-a"]

    def test_never_longer_than_input(self):
        headers = [("A", "1"), ("B", "2"), ("A", "3"), ("C", "4"), ("B", "5")]
        names = unique_header_names(headers)
        assert len(names) <= len(headers)
        assert len(names) == len(set(names))

    def test_empty(self):
        assert unique_header_names([]) == []


class TestHeaderValues:
    """Test value collection for repeated headers"""

    def test_single_value(self):
        assert header_values([("Date", "Tue")], "Date") == "Tue"

    def test_multiple_values_in_order(self):
        headers = [("Cookie", "a=1"), ("Host", "h"), ("Cookie", "b=2")]
        assert header_values(headers, "Cookie") == "a=1, b=2"

    def test_exact_match_only(self):
        headers = [("Cookie", "a=1"), ("cookie", "b=2")]
        assert header_values(headers, "Cookie") == "a=1"
        assert header_values(headers, "cookie") == "b=2"

    def test_missing_name(self):
        assert header_values([("Date", "d")], "Host") == ""

    def test_empty_values_are_kept(self):
        assert header_values([("X-A", ""), ("X-A", "2")], "X-A") == ", 2"


class TestCanonicalLines:
    """Test canonical "name: values" lines and blocks"""

    def test_multi_value_line(self):
        headers = [("X-A", "1"), ("X-A", "2")]
        assert canonical_header_line(headers, "X-A") == "x-a: 1, 2"
        assert unique_header_names(headers) == ["X-A"]

    def test_name_is_trimmed_and_lowercased(self):
        headers = [("  Content-Type\t", "application/json")]
        assert canonical_header_line(headers, "  Content-Type\t") == "content-type: application/json"

    def test_unicode_space_separators_are_trimmed(self):
        headers = [("\u00a0Date\u3000\t", "d")]
        assert canonical_header_line(headers, "\u00a0Date\u3000\t") == "date: d"

    def test_line_breaks_in_name_are_kept(self):
        assert canonical_header_line([("Date\n", "d")], "Date\n") == "date\n: d"
        assert canonical_header_line([("\rHost\x0b", "h")], "\rHost\x0b") == "\rhost\x0b: h"

    def test_values_are_not_trimmed(self):
        assert canonical_header_line([("X-A", " padded ")], "X-A") == "x-a:  padded "

    def test_block_order_and_separator(self):
        headers = [("Host", "example.com"), ("Date", "d"), ("Host", "other")]
        assert canonical_header_block(headers) == "host: example.com, other\ndate: d"

    def test_block_with_mixed_case_duplicates(self):
        headers = [("X-A", "1"), ("x-a", "2")]
        assert canonical_header_block(headers) == "x-a: 1\nx-a: 2"

    def test_empty_block(self):
        assert canonical_header_block([]) == ""


class TestSignedHeaderNames:
    """Test the headers= parameter value"""

    def test_lowercased_space_joined(self):
        headers = [("Date", "d"), ("Host", "h"), ("Date", "d2")]
        assert signed_header_names(headers) == "date host"
        assert build_headers_parameter(headers) == "(request-target) date host"

    def test_names_are_not_trimmed(self):
        assert build_headers_parameter([(" Date ", "d")]) == "(request-target)  date "

    def test_no_headers(self):
        assert build_headers_parameter([]) == "(request-target) "

    def test_mixed_case_duplicates_listed_twice(self):
        assert signed_header_names([("X-A", "1"), ("x-a", "2")]) == "x-a x-a"


class TestSigningString:
    """Test full signing string layout"""

    def test_get_with_query(self):
        signing_string = build_signing_string(
            "GET",
            "/foo?bar=1",
            [("Date", "Tue, 07 Jun 2014 20:51:35 GMT")]
        )
        assert signing_string == "(request-target): get /foo?bar=1\ndate: Tue, 07 Jun 2014 20:51:35 GMT"

    def test_empty_headers_keep_trailing_newline(self):
        assert build_signing_string("POST", "/", []) == "(request-target): post /\n"

    def test_path_is_verbatim(self):
        signing_string = build_signing_string("get", "/a%20b/?q=A B&x=%2F", [])
        assert signing_string == "(request-target): get /a%20b/?q=A B&x=%2F\n"

    def test_request_target(self):
        assert build_request_target("DELETE", "/items/1") == "(request-target): delete /items/1"

    def test_multiple_headers(self):
        headers = [
            ("Host", "example.org"),
            ("Date", "Tue, 07 Jun 2014 20:51:35 GMT"),
            ("Content-Type", "application/json"),
            ("Digest", "SHA-256=X48E9qOokqqrvdts8nOJRJN3OWDUoyWxBf7kbu9DBPE="),
            ("Content-Length", "18"),
        ]
        expected = "\n".join([
            "(request-target): post /foo?param=value&pet=dog",
            "host: example.org",
            "date: Tue, 07 Jun 2014 20:51:35 GMT",
            "content-type: application/json",
            "digest: SHA-256=X48E9qOokqqrvdts8nOJRJN3OWDUoyWxBf7kbu9DBPE=",
            "content-length: 18",
        ])
        assert build_signing_string("POST", "/foo?param=value&pet=dog", headers) == expected


class TestCanonicalHeaders:
    """Test the CanonicalHeaders wrapper"""

    def test_mapping_input(self):
        headers = CanonicalHeaders({"Host": "example.com", "Date": "d"})
        assert headers.unique_names == ["Host", "Date"]
        assert headers.block == "host: example.com\ndate: d"

    def test_entries_are_immutable_tuple(self):
        source = [["Host", "example.com"]]
        headers = CanonicalHeaders(source)
        source.append(["Date", "d"])
        assert headers.entries == (("Host", "example.com"),)
        assert len(headers) == 1

    def test_accepts_canonical_headers(self):
        headers = CanonicalHeaders([("Date", "d")])
        assert build_signing_string("GET", "/", headers) == "(request-target): get /\ndate: d"
        assert canonical_header_block(headers) == "date: d"

    def test_generator_input(self):
        headers = CanonicalHeaders((name, "v") for name in ["A", "B", "A"])
        assert headers.signed_names == "a b"

    def test_none_is_empty(self):
        assert CanonicalHeaders(None).block == ""

    def test_invalid_entry_shape(self):
        with pytest.raises(SigningError) as exc_info:
            CanonicalHeaders([("Date",)])
        assert exc_info.value.code == SigningErrorCodes.INVALID_HEADERS

    def test_non_string_value(self):
        with pytest.raises(SigningError) as exc_info:
            CanonicalHeaders([("Content-Length", 18)])
        assert exc_info.value.code == SigningErrorCodes.INVALID_HEADERS
