"""
Signing string construction for Cavage HTTP Signatures

This module turns a request's method, path and header sequence into the
exact signing string and the `headers` parameter of the signature header.

Headers are a sequence rather than a mapping because a name may repeat.
Grouping of repeated headers compares names exactly as supplied; names
are lower-cased only when they are written out. `("X-A", "1")` and
`("x-a", "2")` therefore produce two separate `x-a` lines.
"""

from typing import List, Optional

from .types import HeaderEntry, HeaderInput, as_header_entries
from .utils import normalize_header_name


REQUEST_TARGET = "(request-target)"
VALUE_SEPARATOR = ", "


class CanonicalHeaders:
    """
    Canonical view of an ordered, possibly duplicate-containing header list
    """

    def __init__(self, headers: Optional[HeaderInput] = None):
        """
        Initialize canonical headers.

        Args:
            headers: (name, value) pairs or a mapping of header names to values

        Raises:
            SigningError: If an entry is not a pair of strings
        """
        self.entries = as_header_entries(headers)

    @property
    def unique_names(self) -> List[str]:
        """Distinct header names in first-occurrence order, case preserved."""
        names: List[str] = []
        for name, _ in self.entries:
            if name not in names:
                names.append(name)
        return names

    def values_for(self, name: str) -> str:
        """All values for an exactly matching name, joined with ", "."""
        return VALUE_SEPARATOR.join(value for key, value in self.entries if key == name)

    def canonical_line(self, name: str) -> str:
        """The "name: value1, value2" line for one header."""
        return f"{normalize_header_name(name)}: {self.values_for(name)}"

    @property
    def block(self) -> str:
        """All canonical lines joined by newlines; empty when there are no headers."""
        return "\n".join(self.canonical_line(name) for name in self.unique_names)

    @property
    def signed_names(self) -> str:
        """Space-joined, lower-cased unique names for the `headers` parameter."""
        return " ".join(self.unique_names).lower()

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"CanonicalHeaders({list(self.entries)!r})"


def unique_header_names(headers: HeaderInput) -> List[str]:
    """
    Distinct header names in order of first appearance.

    Args:
        headers: Header sequence

    Returns:
        list: Names as supplied, de-duplicated by exact string equality
    """
    return CanonicalHeaders(headers).unique_names


def header_values(headers: HeaderInput, name: str) -> str:
    """
    All values of a header joined with ", " in original order.

    Args:
        headers: Header sequence
        name: Header name, compared exactly as supplied

    Returns:
        str: Joined values, empty if the name does not occur
    """
    return CanonicalHeaders(headers).values_for(name)


def canonical_header_line(headers: HeaderInput, name: str) -> str:
    """
    Canonical "name: values" line for one header.

    The name is lower-cased and trimmed; values are those of entries whose
    name matches exactly.
    """
    return CanonicalHeaders(headers).canonical_line(name)


def canonical_header_block(headers: HeaderInput) -> str:
    """
    Canonical lines for every unique header, joined by newlines.

    Args:
        headers: Header sequence

    Returns:
        str: Canonical header block, "" for no headers
    """
    return CanonicalHeaders(headers).block


def signed_header_names(headers: HeaderInput) -> str:
    """Lower-cased unique header names joined by single spaces."""
    return CanonicalHeaders(headers).signed_names


def build_request_target(method: str, path: str) -> str:
    """
    Build the (request-target) line.

    Args:
        method: HTTP method, lower-cased on output
        path: Request path with query string, used verbatim

    Returns:
        str: "(request-target): <method> <path>"
    """
    return f"{REQUEST_TARGET}: {method.lower()} {path}"


def build_signing_string(method: str, path: str, headers: HeaderInput) -> str:
    """
    Build the signing string for a request.

    The request-target line is always followed by a newline, so a request
    without headers yields a signing string ending in "\\n".

    Args:
        method: HTTP method
        path: Request path with query string
        headers: Header sequence

    Returns:
        str: Exact string to sign
    """
    canonical = headers if isinstance(headers, CanonicalHeaders) else CanonicalHeaders(headers)
    return f"{build_request_target(method, path)}\n{canonical.block}"


def build_headers_parameter(headers: HeaderInput) -> str:
    """
    Build the value of the `headers` signature parameter.

    Returns:
        str: "(request-target) " followed by the signed header names
    """
    canonical = headers if isinstance(headers, CanonicalHeaders) else CanonicalHeaders(headers)
    return f"{REQUEST_TARGET} {canonical.signed_names}"
