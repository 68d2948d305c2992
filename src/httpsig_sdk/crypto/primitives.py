"""
Cryptographic primitives for HTTP signatures

The signing core never implements hashing or RSA itself. It calls an
object satisfying SigningPrimitives; DefaultPrimitives provides keyed
hashes and RSA signatures through the cryptography package. Tests and
alternative backends inject their own.
"""

import sys
import platform
from typing import Any, Dict, Protocol

import cryptography
from cryptography.hazmat.primitives import hashes, hmac as crypto_hmac, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..exceptions import UnsupportedPlatformError

# Supported digests per primitive family
HMAC_DIGESTS = {
    'sha1': hashes.SHA1,
    'sha256': hashes.SHA256,
    'sha512': hashes.SHA512,
}

RSA_DIGESTS = {
    'sha256': hashes.SHA256,
    'sha512': hashes.SHA512,
}


class SigningPrimitives(Protocol):
    """Capability the signature builder signs with"""

    def hmac(self, digest: str, key: bytes, message: bytes) -> bytes:
        ...

    def rsa_sign(self, private_key_pem: bytes, message: bytes, digest: str) -> bytes:
        ...


def hmac_digest(digest: str, key: bytes, message: bytes) -> bytes:
    """
    Compute a keyed hash.

    Args:
        digest: Hash name ("sha1", "sha256" or "sha512")
        key: Shared secret
        message: Message to authenticate

    Returns:
        bytes: Raw HMAC value

    Raises:
        UnsupportedPlatformError: If the digest is not supported
    """
    if digest not in HMAC_DIGESTS:
        raise UnsupportedPlatformError(
            f"Unsupported HMAC digest: {digest}",
            "UNSUPPORTED_DIGEST",
            {"supported": sorted(HMAC_DIGESTS)}
        )

    mac = crypto_hmac.HMAC(key, HMAC_DIGESTS[digest]())
    mac.update(message)
    return mac.finalize()


def load_rsa_private_key(private_key_pem: bytes) -> rsa.RSAPrivateKey:
    """
    Parse an unencrypted PEM-encoded RSA private key.

    Accepts both PKCS#1 ("BEGIN RSA PRIVATE KEY") and PKCS#8
    ("BEGIN PRIVATE KEY") encodings.

    Raises:
        ValueError: If the PEM is malformed or not an RSA key
        TypeError: If the key is password protected
    """
    key = serialization.load_pem_private_key(private_key_pem, password=None)

    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError(f"Expected an RSA private key, got {type(key).__name__}")

    return key


def rsa_sign(private_key_pem: bytes, message: bytes, digest: str) -> bytes:
    """
    Sign a message with RSASSA-PKCS1-v1_5.

    Args:
        private_key_pem: PEM-encoded RSA private key
        message: Message to sign
        digest: Hash name ("sha256" or "sha512")

    Returns:
        bytes: Raw RSA signature

    Raises:
        UnsupportedPlatformError: If the digest is not supported
        ValueError: If the key cannot be parsed
    """
    if digest not in RSA_DIGESTS:
        raise UnsupportedPlatformError(
            f"Unsupported RSA digest: {digest}",
            "UNSUPPORTED_DIGEST",
            {"supported": sorted(RSA_DIGESTS)}
        )

    private_key = load_rsa_private_key(private_key_pem)
    return private_key.sign(message, padding.PKCS1v15(), RSA_DIGESTS[digest]())


class DefaultPrimitives:
    """cryptography-backed HMAC and RSA signing"""

    def hmac(self, digest: str, key: bytes, message: bytes) -> bytes:
        return hmac_digest(digest, key, message)

    def rsa_sign(self, private_key_pem: bytes, message: bytes, digest: str) -> bytes:
        return rsa_sign(private_key_pem, message, digest)

    def __repr__(self) -> str:
        return "DefaultPrimitives()"


def check_platform_compatibility() -> Dict[str, Any]:
    """
    Check platform support for every signing primitive.

    Returns:
        dict: Compatibility information including the cryptography version,
              supported HMAC digests, RSA support and platform details
    """
    compatibility = {
        'cryptography_version': cryptography.__version__,
        'hmac_digests': [],
        'rsa_supported': False,
        'platform_info': {
            'system': platform.system(),
            'python_version': sys.version,
            'architecture': platform.architecture()[0],
        }
    }

    for digest in HMAC_DIGESTS:
        try:
            hmac_digest(digest, b'key', b'message')
            compatibility['hmac_digests'].append(digest)
        except Exception:
            continue

    try:
        probe = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        probe_pem = probe.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        )
        rsa_sign(probe_pem, b'message', 'sha256')
        compatibility['rsa_supported'] = True
    except Exception:
        compatibility['rsa_supported'] = False

    return compatibility
