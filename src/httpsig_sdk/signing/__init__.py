"""
HTTP Signatures SDK - Request Signing Module

Cavage HTTP Signatures (draft-cavage-http-signatures) with HMAC and RSA
algorithms. This module builds the signing string for a request, signs it
and formats the `Signature` or `Authorization` header value.
"""

from .types import (
    SignatureAlgorithm,
    Algorithm,
    HeaderEntry,
    SigningContext,
    Signature,
    SigningConfig,
    SigningError,
    SigningErrorCodes,
    PrimitiveFailure,
    EncodingFailure,
)

from .algorithms import (
    ALGORITHM_DISPATCH,
    get_algorithm_name,
    get_digest_name,
    list_algorithm_names,
    is_hmac,
    sign_message,
)

from .canonical_message import (
    CanonicalHeaders,
    unique_header_names,
    header_values,
    canonical_header_line,
    canonical_header_block,
    signed_header_names,
    build_request_target,
    build_signing_string,
    build_headers_parameter,
)

from .signer import (
    HTTPSigner,
    build_signature,
    build_signature_header_value,
    create_signer,
    sign_request,
)

from .signing_config import (
    SigningConfigBuilder,
    create_signing_config,
    validate_signing_config,
)

from .utils import (
    normalize_header_name,
    parse_url,
    to_base64,
    to_utf8,
    validate_key_id,
    validate_key_material,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'HTTPSigner',
    'build_signature',
    'build_signature_header_value',
    'create_signer',
    'sign_request',
    # Types
    'SignatureAlgorithm',
    'Algorithm',
    'HeaderEntry',
    'SigningContext',
    'Signature',
    'SigningConfig',
    'SigningError',
    'SigningErrorCodes',
    'PrimitiveFailure',
    'EncodingFailure',
    # Algorithms
    'ALGORITHM_DISPATCH',
    'get_algorithm_name',
    'get_digest_name',
    'list_algorithm_names',
    'is_hmac',
    'sign_message',
    # Canonicalization
    'CanonicalHeaders',
    'unique_header_names',
    'header_values',
    'canonical_header_line',
    'canonical_header_block',
    'signed_header_names',
    'build_request_target',
    'build_signing_string',
    'build_headers_parameter',
    # Configuration
    'SigningConfigBuilder',
    'create_signing_config',
    'validate_signing_config',
    # Utilities
    'normalize_header_name',
    'parse_url',
    'to_base64',
    'to_utf8',
    'validate_key_id',
    'validate_key_material',
]
