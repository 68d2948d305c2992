"""
Cavage HTTP Signatures signer

This module builds signatures per draft-cavage-http-signatures: it
assembles the signing string, signs it with the configured algorithm and
formats the `Signature` / `Authorization` header value. Every call
recomputes from scratch; nothing is cached or retried.

See https://tools.ietf.org/html/draft-cavage-http-signatures-10#section-2.1
"""

from typing import Optional

from ..crypto.primitives import DefaultPrimitives, SigningPrimitives
from .types import (
    Algorithm,
    HeaderInput,
    PrimitiveFailure,
    Signature,
    SigningConfig,
    SigningContext,
    SigningError,
    SigningErrorCodes,
)
from .algorithms import sign_message
from .canonical_message import (
    CanonicalHeaders,
    build_headers_parameter,
    build_signing_string,
)
from .signing_config import create_signing_config, validate_signing_config
from .utils import parse_url, to_base64, to_utf8


def build_signature_header_value(
    key_id: str,
    algorithm_name: str,
    headers_parameter: str,
    signature: str
) -> str:
    """
    Format the signature header value.

    Fields are always emitted in the order keyId, algorithm, headers,
    signature.

    Returns:
        str: keyId="...",algorithm="...",headers="...",signature="..."
    """
    return ",".join([
        f'keyId="{key_id}"',
        f'algorithm="{algorithm_name}"',
        f'headers="{headers_parameter}"',
        f'signature="{signature}"',
    ])


def build_signature(
    context: SigningContext,
    primitives: Optional[SigningPrimitives] = None
) -> Signature:
    """
    Compute the signature for a signing context.

    Args:
        context: Algorithm, key ID, method, path and headers to sign
        primitives: Cryptographic primitives, DefaultPrimitives if omitted

    Returns:
        Signature: Signing string, base64 signature and header value

    Raises:
        PrimitiveFailure: If the keyed hash or RSA signing call fails
        EncodingFailure: If the signing string or key cannot be encoded
        SigningError: For any other failure; no partial result is returned
    """
    if primitives is None:
        primitives = DefaultPrimitives()

    algorithm = context.algorithm

    try:
        headers = CanonicalHeaders(context.headers)
        signing_string = build_signing_string(context.method, context.path, headers)

        message = to_utf8(signing_string, "signing string")
        key = to_utf8(algorithm.key, "key material")

        try:
            raw_signature = sign_message(algorithm.kind, key, message, primitives)
        except SigningError:
            raise
        except Exception as e:
            raise PrimitiveFailure(
                f"{algorithm.name} signing failed: {e}",
                {"algorithm": algorithm.name, "original_error": type(e).__name__}
            ) from e

        signature = to_base64(raw_signature)
        header_value = build_signature_header_value(
            context.key_id,
            algorithm.name,
            build_headers_parameter(headers),
            signature
        )

        return Signature(
            signing_string=signing_string,
            signature=signature,
            header_value=header_value
        )

    except SigningError:
        raise
    except Exception as e:
        raise SigningError(
            f"Request signing failed: {e}",
            SigningErrorCodes.SIGNING_FAILED,
            {"original_error": type(e).__name__}
        ) from e


class HTTPSigner:
    """
    Reusable signer bound to one algorithm and key ID

    Created once from a SigningConfig, then called for each request with
    its path, method and headers.
    """

    def __init__(self, config: SigningConfig):
        """
        Initialize the signer with configuration.

        Args:
            config: Signing configuration

        Raises:
            SigningError: If configuration is invalid
        """
        validate_signing_config(config)
        self.config = config
        self.primitives = config.primitives or DefaultPrimitives()

    @property
    def algorithm(self) -> Algorithm:
        return self.config.algorithm

    @property
    def key_id(self) -> str:
        return self.config.key_id

    def sign(
        self,
        path: str,
        method: str,
        headers: Optional[HeaderInput] = None
    ) -> Signature:
        """
        Sign a request.

        Args:
            path: Request path including query string
            method: HTTP method
            headers: (name, value) pairs in request order, duplicates allowed

        Returns:
            Signature: Computed signature

        Raises:
            SigningError: If signing fails
        """
        context = SigningContext(
            algorithm=self.config.algorithm,
            key_id=self.config.key_id,
            method=method,
            path=path,
            headers=headers
        )
        return build_signature(context, self.primitives)

    def sign_url(
        self,
        url: str,
        method: str,
        headers: Optional[HeaderInput] = None
    ) -> Signature:
        """
        Sign a request given its absolute URL.

        The request target is the URL's path plus query string, or "/"
        when the URL has no path.

        Raises:
            SigningError: If the URL is invalid or signing fails
        """
        target_uri = parse_url(url)['target_uri']
        return self.sign(target_uri, method, headers)

    def __call__(
        self,
        path: str,
        method: str,
        headers: Optional[HeaderInput] = None
    ) -> Signature:
        return self.sign(path, method, headers)

    def __repr__(self) -> str:
        return f"HTTPSigner(key_id={self.config.key_id!r}, algorithm={self.config.algorithm.name!r})"


def create_signer(
    algorithm: Algorithm,
    key_id: str,
    primitives: Optional[SigningPrimitives] = None
) -> HTTPSigner:
    """
    Create a signer for a fixed algorithm and key ID.

    Args:
        algorithm: Algorithm variant carrying its key material
        key_id: Key identifier
        primitives: Optional cryptographic primitives override

    Returns:
        HTTPSigner: Configured signer
    """
    config = (create_signing_config()
              .algorithm(algorithm)
              .key_id(key_id)
              .primitives(primitives)
              .build())
    return HTTPSigner(config)


def sign_request(
    algorithm: Algorithm,
    key_id: str,
    path: str,
    method: str,
    headers: Optional[HeaderInput] = None,
    primitives: Optional[SigningPrimitives] = None
) -> Signature:
    """
    Sign a single request.

    Args:
        algorithm: Algorithm variant carrying its key material
        key_id: Key identifier
        path: Request path including query string
        method: HTTP method
        headers: (name, value) pairs in request order
        primitives: Optional cryptographic primitives override

    Returns:
        Signature: Computed signature
    """
    return create_signer(algorithm, key_id, primitives).sign(path, method, headers)
