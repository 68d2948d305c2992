"""
Algorithm dispatch for HTTP signatures

Maps every SignatureAlgorithm to its primitive family and digest, and
routes signing calls to the matching primitive.
"""

from typing import Dict, List, Tuple, TYPE_CHECKING

from .types import SignatureAlgorithm, SigningError, SigningErrorCodes

if TYPE_CHECKING:
    from ..crypto.primitives import SigningPrimitives


HMAC_FAMILY = "hmac"
RSA_FAMILY = "rsa"

# algorithm -> (primitive family, digest name)
ALGORITHM_DISPATCH: Dict[SignatureAlgorithm, Tuple[str, str]] = {
    SignatureAlgorithm.HMAC_SHA1: (HMAC_FAMILY, "sha1"),
    SignatureAlgorithm.HMAC_SHA256: (HMAC_FAMILY, "sha256"),
    SignatureAlgorithm.HMAC_SHA512: (HMAC_FAMILY, "sha512"),
    SignatureAlgorithm.RSA_SHA256: (RSA_FAMILY, "sha256"),
    SignatureAlgorithm.RSA_SHA512: (RSA_FAMILY, "sha512"),
}


def _lookup(kind: SignatureAlgorithm) -> Tuple[str, str]:
    try:
        return ALGORITHM_DISPATCH[kind]
    except (KeyError, TypeError):
        raise SigningError(
            f"Unsupported signature algorithm: {kind}",
            SigningErrorCodes.UNSUPPORTED_ALGORITHM,
            {"supported": list_algorithm_names()}
        )


def get_algorithm_name(kind: SignatureAlgorithm) -> str:
    """Canonical name of an algorithm, e.g. "hmac-sha256"."""
    _lookup(kind)
    return SignatureAlgorithm(kind).value


def list_algorithm_names() -> List[str]:
    """Canonical names of all supported algorithms."""
    return [kind.value for kind in ALGORITHM_DISPATCH]


def is_hmac(kind: SignatureAlgorithm) -> bool:
    """True for the shared-secret algorithms."""
    return _lookup(kind)[0] == HMAC_FAMILY


def get_digest_name(kind: SignatureAlgorithm) -> str:
    """Hash function used by an algorithm ("sha1", "sha256" or "sha512")."""
    return _lookup(kind)[1]


def sign_message(
    kind: SignatureAlgorithm,
    key: bytes,
    message: bytes,
    primitives: 'SigningPrimitives'
) -> bytes:
    """
    Sign a message with the primitive selected by the algorithm.

    Args:
        kind: Signing algorithm
        key: HMAC secret or PEM private key, already encoded
        message: Bytes to sign
        primitives: Cryptographic primitives to call

    Returns:
        bytes: Raw signature

    Raises:
        SigningError: If the algorithm is not supported. Errors raised by
            the primitive propagate unchanged.
    """
    family, digest = _lookup(kind)

    if family == HMAC_FAMILY:
        return primitives.hmac(digest, key, message)

    return primitives.rsa_sign(key, message, digest)
