"""
Type definitions for request signing functionality

This module provides type definitions and data classes for the Cavage
HTTP Signatures draft: algorithm variants with their key material, the
per-request signing context and the immutable signature result.
"""

from collections import abc
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union, Any, TYPE_CHECKING
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import HttpSigSDKError

if TYPE_CHECKING:
    from ..crypto.primitives import SigningPrimitives


class SignatureAlgorithm(str, Enum):
    """Signature algorithms and their canonical names"""
    HMAC_SHA1 = "hmac-sha1"
    HMAC_SHA256 = "hmac-sha256"
    HMAC_SHA512 = "hmac-sha512"
    RSA_SHA256 = "rsa-sha256"
    RSA_SHA512 = "rsa-sha512"


KeyMaterial = Union[str, bytes]


@dataclass(frozen=True)
class Algorithm:
    """
    A signing algorithm together with the secret it signs with

    HMAC variants carry a shared secret, RSA variants a PEM-encoded private
    key. The key is excluded from repr so it never ends up in logs or
    tracebacks.

    Attributes:
        kind: Which algorithm to use
        key: Shared secret (HMAC) or PEM private key (RSA)
    """
    kind: SignatureAlgorithm
    key: KeyMaterial = field(repr=False)

    @property
    def name(self) -> str:
        """Canonical algorithm name used in the header value"""
        return self.kind.value

    @classmethod
    def hmac_sha1(cls, key: KeyMaterial) -> 'Algorithm':
        return cls(SignatureAlgorithm.HMAC_SHA1, key)

    @classmethod
    def hmac_sha256(cls, key: KeyMaterial) -> 'Algorithm':
        return cls(SignatureAlgorithm.HMAC_SHA256, key)

    @classmethod
    def hmac_sha512(cls, key: KeyMaterial) -> 'Algorithm':
        return cls(SignatureAlgorithm.HMAC_SHA512, key)

    @classmethod
    def rsa_sha256(cls, pem: KeyMaterial) -> 'Algorithm':
        return cls(SignatureAlgorithm.RSA_SHA256, pem)

    @classmethod
    def rsa_sha512(cls, pem: KeyMaterial) -> 'Algorithm':
        return cls(SignatureAlgorithm.RSA_SHA512, pem)

    @classmethod
    def from_name(cls, name: str, key: KeyMaterial) -> 'Algorithm':
        """
        Create an algorithm from its canonical name.

        Args:
            name: Algorithm name such as "hmac-sha256" (case-insensitive)
            key: Key material for the algorithm

        Returns:
            Algorithm: The matching algorithm variant

        Raises:
            SigningError: If the name is not a supported algorithm
        """
        try:
            kind = SignatureAlgorithm(name.strip().lower())
        except (ValueError, AttributeError):
            raise SigningError(
                f"Unsupported signature algorithm: {name}",
                SigningErrorCodes.UNSUPPORTED_ALGORITHM,
                {"algorithm": name, "supported": [a.value for a in SignatureAlgorithm]}
            )
        return cls(kind, key)


HeaderEntry = Tuple[str, str]
HeaderInput = Union[Iterable[HeaderEntry], Mapping[str, str]]


def as_header_entries(headers: Optional[HeaderInput]) -> Tuple[HeaderEntry, ...]:
    """
    Normalize caller-supplied headers to a tuple of (name, value) pairs.

    Order and duplicates are kept; names are stored exactly as supplied.
    A mapping contributes its items in iteration order.

    Raises:
        SigningError: If an entry is not a pair of strings
    """
    if headers is None:
        return ()

    items = headers.items() if isinstance(headers, abc.Mapping) else headers
    entries = []
    for entry in items:
        try:
            name, value = entry
        except (TypeError, ValueError):
            raise SigningError(
                "Header entries must be (name, value) pairs",
                SigningErrorCodes.INVALID_HEADERS,
                {"entry_type": str(type(entry))}
            )
        if not isinstance(name, str) or not isinstance(value, str):
            raise SigningError(
                f"Header name and value must be strings: {name!r}",
                SigningErrorCodes.INVALID_HEADERS,
                {"name_type": str(type(name)), "value_type": str(type(value))}
            )
        entries.append((name, value))
    return tuple(entries)


@dataclass(frozen=True)
class SigningContext:
    """
    Everything needed to compute one signature

    Attributes:
        algorithm: Signing algorithm with its key material
        key_id: Opaque identifier the verifier uses to find the key
        method: HTTP method of the request
        path: Request path including any query string, used verbatim
        headers: Ordered (name, value) pairs, duplicates allowed
    """
    algorithm: Algorithm
    key_id: str
    method: str
    path: str
    headers: Tuple[HeaderEntry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'headers', as_header_entries(self.headers))


@dataclass(frozen=True)
class Signature:
    """
    Computed HTTP signature

    Attributes:
        signing_string: Exact string that was signed
        signature: Base64-encoded raw signature
        header_value: Value for the HTTP `Signature` header
    """
    signing_string: str
    signature: str
    header_value: str

    @property
    def authorization_header_value(self) -> str:
        """Value for the HTTP `Authorization` header"""
        return f"Signature {self.header_value}"

    def as_headers(self, authorization: bool = False) -> Dict[str, str]:
        """
        Headers to merge into an outgoing request.

        Args:
            authorization: Use the `Authorization` header instead of `Signature`

        Returns:
            dict: Single-entry header mapping
        """
        if authorization:
            return {"Authorization": self.authorization_header_value}
        return {"Signature": self.header_value}


@dataclass
class SigningConfig:
    """
    Configuration for a reusable signer

    Attributes:
        algorithm: Signing algorithm with its key material
        key_id: Key identifier placed in the header value
        primitives: Optional cryptographic primitives override
    """
    algorithm: Algorithm
    key_id: str
    primitives: Optional['SigningPrimitives'] = None

    def __post_init__(self):
        """Validate signing configuration"""
        if not isinstance(self.algorithm, Algorithm):
            raise ValueError("Algorithm must be an Algorithm instance")

        if not isinstance(self.key_id, str):
            raise ValueError("Key ID must be a string")


class SigningError(HttpSigSDKError):
    """
    Error class for signing operations

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.code}, details: {self.details})"
        return f"{self.message} (code: {self.code})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message='{self.message}', code='{self.code}', details={self.details})"


class PrimitiveFailure(SigningError):
    """The underlying keyed-hash or RSA signing call failed"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, SigningErrorCodes.PRIMITIVE_FAILURE, details)


class EncodingFailure(SigningError):
    """UTF-8 or base64 conversion failed"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, SigningErrorCodes.ENCODING_FAILURE, details)


class SigningErrorCodes:
    """Standard error codes for signing operations"""

    # Configuration errors
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_KEY_ID = "INVALID_KEY_ID"
    INVALID_KEY_MATERIAL = "INVALID_KEY_MATERIAL"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Request errors
    INVALID_URL = "INVALID_URL"
    INVALID_HEADERS = "INVALID_HEADERS"

    # Signing errors
    PRIMITIVE_FAILURE = "PRIMITIVE_FAILURE"
    ENCODING_FAILURE = "ENCODING_FAILURE"
    SIGNING_FAILED = "SIGNING_FAILED"
