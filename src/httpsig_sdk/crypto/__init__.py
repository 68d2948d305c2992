"""
Cryptographic primitives used by the HTTP signature builder
"""

from .primitives import (
    SigningPrimitives,
    DefaultPrimitives,
    HMAC_DIGESTS,
    RSA_DIGESTS,
    hmac_digest,
    rsa_sign,
    load_rsa_private_key,
    check_platform_compatibility,
)

__all__ = [
    'SigningPrimitives',
    'DefaultPrimitives',
    'HMAC_DIGESTS',
    'RSA_DIGESTS',
    'hmac_digest',
    'rsa_sign',
    'load_rsa_private_key',
    'check_platform_compatibility',
]
