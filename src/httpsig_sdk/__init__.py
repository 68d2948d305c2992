"""
HTTP Signatures SDK
Cavage HTTP Signatures request signing with HMAC and RSA support
"""

from .version import __version__
from .exceptions import (
    HttpSigSDKError,
    ValidationError,
    UnsupportedPlatformError,
)
from .crypto.primitives import (
    SigningPrimitives,
    DefaultPrimitives,
    check_platform_compatibility,
)
from .signing import (
    # Core signing functionality
    HTTPSigner,
    build_signature,
    create_signer,
    sign_request,
    # Types
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
    # Canonicalization
    CanonicalHeaders,
    build_signing_string,
    # Configuration
    SigningConfigBuilder,
    create_signing_config,
    # Utilities
    list_algorithm_names,
    normalize_header_name,
    parse_url,
)


def initialize_sdk():
    """
    Initialize the SDK and check platform compatibility.

    Returns:
        dict: Compatibility information with 'compatible' (bool) and 'warnings' (list)
    """
    warnings = []
    compatible = True

    try:
        compat_info = check_platform_compatibility()
        missing = [d for d in ('sha1', 'sha256', 'sha512') if d not in compat_info['hmac_digests']]
        if missing:
            warnings.append(f"HMAC digests unavailable: {', '.join(missing)}")
            compatible = False

        if not compat_info['rsa_supported']:
            warnings.append('RSA signing not supported by cryptography package - check version')
            compatible = False

    except Exception as e:
        warnings.append(f'Platform compatibility check failed: {e}')
        compatible = False

    return {
        'compatible': compatible,
        'warnings': warnings
    }


def is_compatible():
    """
    Quick synchronous compatibility check.

    Returns:
        bool: True if every signing algorithm works on this platform
    """
    return initialize_sdk()['compatible']


# Public API exports
__all__ = [
    '__version__',
    'initialize_sdk',
    'is_compatible',
    # Exceptions
    'HttpSigSDKError',
    'ValidationError',
    'UnsupportedPlatformError',
    # Primitives
    'SigningPrimitives',
    'DefaultPrimitives',
    'check_platform_compatibility',
    # Request Signing - Core
    'HTTPSigner',
    'build_signature',
    'create_signer',
    'sign_request',
    # Request Signing - Types
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
    # Request Signing - Canonicalization
    'CanonicalHeaders',
    'build_signing_string',
    # Request Signing - Configuration
    'SigningConfigBuilder',
    'create_signing_config',
    # Request Signing - Utilities
    'list_algorithm_names',
    'normalize_header_name',
    'parse_url',
]
