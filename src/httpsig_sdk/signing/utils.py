"""
Utility functions for request signing

This module provides helpers shared by the signing modules: header name
normalization, UTF-8 and base64 conversion with signing error mapping,
URL splitting and key material checks.
"""

import base64
import binascii
import unicodedata
from typing import Dict, Optional, Union
from urllib.parse import urlsplit

from .types import (
    Algorithm,
    EncodingFailure,
    SigningError,
    SigningErrorCodes,
)
from .algorithms import is_hmac


PEM_PRIVATE_KEY_MARKER = "PRIVATE KEY-----"


def is_horizontal_whitespace(char: str) -> bool:
    """Tab or any Unicode space separator (category Zs)."""
    return char == "\t" or unicodedata.category(char) == "Zs"


def trim_horizontal_whitespace(value: str) -> str:
    """
    Remove leading and trailing horizontal whitespace.

    Line breaks and other control characters are kept.
    """
    start, end = 0, len(value)
    while start < end and is_horizontal_whitespace(value[start]):
        start += 1
    while end > start and is_horizontal_whitespace(value[end - 1]):
        end -= 1
    return value[start:end]


def normalize_header_name(name: str) -> str:
    """
    Normalize header name to lowercase for consistent processing.

    Args:
        name: Header name to normalize

    Returns:
        str: Lowercase header name without surrounding spaces or tabs
    """
    return trim_horizontal_whitespace(name.lower())


def to_utf8(value: Union[str, bytes], what: str = "value") -> bytes:
    """
    Encode a string as UTF-8, passing bytes through unchanged.

    Args:
        value: String or bytes to encode
        what: Description used in the error message

    Returns:
        bytes: UTF-8 encoded value

    Raises:
        EncodingFailure: If the value cannot be encoded
    """
    if isinstance(value, bytes):
        return value

    try:
        return value.encode('utf-8')
    except (UnicodeEncodeError, AttributeError) as e:
        raise EncodingFailure(
            f"Failed to encode {what} as UTF-8: {e}",
            {"what": what, "value_type": str(type(value))}
        ) from e


def to_base64(data: bytes) -> str:
    """
    Standard base64 encoding without line wrapping.

    Raises:
        EncodingFailure: If data is not bytes
    """
    if not isinstance(data, (bytes, bytearray)):
        raise EncodingFailure(
            f"Signature must be bytes, got {type(data).__name__}",
            {"value_type": str(type(data))}
        )

    try:
        return base64.b64encode(bytes(data)).decode('ascii')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise EncodingFailure(f"Base64 encoding failed: {e}") from e


def parse_url(url: str) -> Dict[str, str]:
    """
    Parse URL to extract components needed for signing.

    Args:
        url: Absolute URL string to parse

    Returns:
        dict: Dictionary with parsed URL components:
            - origin: scheme + netloc
            - pathname: path component ("/" when empty)
            - search: query string (including ?)
            - target_uri: pathname + search

    Raises:
        SigningError: If URL format is invalid
    """
    if not isinstance(url, str):
        raise SigningError(
            f"URL must be a string, got {type(url).__name__}",
            SigningErrorCodes.INVALID_URL
        )

    try:
        parsed = urlsplit(url)
    except ValueError as e:
        raise SigningError(
            f"Failed to parse URL: {e}",
            SigningErrorCodes.INVALID_URL,
            {"url": url, "original_error": str(e)}
        ) from e

    if not parsed.scheme or not parsed.netloc:
        raise SigningError(
            f"Invalid URL format: {url}",
            SigningErrorCodes.INVALID_URL,
            {"url": url}
        )

    pathname = parsed.path or "/"
    search = f"?{parsed.query}" if parsed.query else ""

    return {
        "origin": f"{parsed.scheme}://{parsed.netloc}",
        "pathname": pathname,
        "search": search,
        "target_uri": pathname + search
    }


def validate_key_id(key_id: Optional[str]) -> bool:
    """Key IDs are opaque strings; the empty string is allowed."""
    return isinstance(key_id, str)


def validate_key_material(algorithm: Algorithm) -> bool:
    """
    Check that an algorithm carries key material of the right shape.

    HMAC secrets may be any string or bytes, including empty ones. RSA
    keys must look like PEM private key text; the key itself is only
    parsed at sign time.

    Args:
        algorithm: Algorithm to check

    Returns:
        bool: True if the key material is usable
    """
    key = algorithm.key
    if not isinstance(key, (str, bytes)):
        return False

    if is_hmac(algorithm.kind):
        return True

    if isinstance(key, bytes):
        try:
            key = key.decode('ascii')
        except UnicodeDecodeError:
            return False

    return "-----BEGIN " in key and PEM_PRIVATE_KEY_MARKER in key
