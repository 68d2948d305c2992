"""
Configuration management for request signing

This module provides a fluent builder for signer configuration and the
validation applied before a signer is created.
"""

from typing import Optional

from .types import (
    Algorithm,
    KeyMaterial,
    SigningConfig,
    SigningError,
    SigningErrorCodes,
)
from .algorithms import ALGORITHM_DISPATCH, list_algorithm_names
from .utils import validate_key_id, validate_key_material
from ..crypto.primitives import SigningPrimitives


class SigningConfigBuilder:
    """
    Builder for creating signing configurations with fluent API
    """

    def __init__(self):
        self._algorithm: Optional[Algorithm] = None
        self._key_id: Optional[str] = None
        self._primitives: Optional[SigningPrimitives] = None

    def key_id(self, key_id: str) -> 'SigningConfigBuilder':
        """
        Set key identifier.

        Args:
            key_id: Key identifier the verifier uses to look up the key

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._key_id = key_id
        return self

    def algorithm(self, algorithm: Algorithm) -> 'SigningConfigBuilder':
        """
        Set signing algorithm together with its key material.

        Args:
            algorithm: Algorithm variant carrying its key

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._algorithm = algorithm
        return self

    def algorithm_name(self, name: str, key: KeyMaterial) -> 'SigningConfigBuilder':
        """
        Set signing algorithm by canonical name.

        Raises:
            SigningError: If the name is not a supported algorithm
        """
        self._algorithm = Algorithm.from_name(name, key)
        return self

    def hmac_sha1(self, secret: KeyMaterial) -> 'SigningConfigBuilder':
        return self.algorithm(Algorithm.hmac_sha1(secret))

    def hmac_sha256(self, secret: KeyMaterial) -> 'SigningConfigBuilder':
        return self.algorithm(Algorithm.hmac_sha256(secret))

    def hmac_sha512(self, secret: KeyMaterial) -> 'SigningConfigBuilder':
        return self.algorithm(Algorithm.hmac_sha512(secret))

    def rsa_sha256(self, pem: KeyMaterial) -> 'SigningConfigBuilder':
        return self.algorithm(Algorithm.rsa_sha256(pem))

    def rsa_sha512(self, pem: KeyMaterial) -> 'SigningConfigBuilder':
        return self.algorithm(Algorithm.rsa_sha512(pem))

    def primitives(self, primitives: Optional[SigningPrimitives]) -> 'SigningConfigBuilder':
        """
        Override the cryptographic primitives used for signing.

        Args:
            primitives: Object providing hmac() and rsa_sign(), or None for the defaults

        Returns:
            SigningConfigBuilder: Self for method chaining
        """
        self._primitives = primitives
        return self

    def build(self) -> SigningConfig:
        """
        Build the signing configuration.

        Returns:
            SigningConfig: Complete signing configuration

        Raises:
            SigningError: If configuration is invalid
        """
        if self._key_id is None:
            raise SigningError(
                "Key ID is required",
                SigningErrorCodes.INVALID_CONFIG
            )

        if self._algorithm is None:
            raise SigningError(
                "Algorithm is required",
                SigningErrorCodes.INVALID_CONFIG
            )

        _validate_fields(self._algorithm, self._key_id)

        return SigningConfig(
            algorithm=self._algorithm,
            key_id=self._key_id,
            primitives=self._primitives
        )


def create_signing_config() -> SigningConfigBuilder:
    """
    Create a new signing configuration builder.

    Returns:
        SigningConfigBuilder: New configuration builder
    """
    return SigningConfigBuilder()


def _validate_fields(algorithm: Algorithm, key_id: str) -> None:
    if not validate_key_id(key_id):
        raise SigningError(
            "Key ID must be a string",
            SigningErrorCodes.INVALID_KEY_ID
        )

    if not isinstance(algorithm, Algorithm):
        raise SigningError(
            "Algorithm must be an Algorithm instance",
            SigningErrorCodes.INVALID_CONFIG,
            {"algorithm_type": str(type(algorithm))}
        )

    if algorithm.kind not in ALGORITHM_DISPATCH:
        raise SigningError(
            f"Unsupported algorithm: {algorithm.kind}",
            SigningErrorCodes.UNSUPPORTED_ALGORITHM,
            {"supported": list_algorithm_names()}
        )

    if not validate_key_material(algorithm):
        raise SigningError(
            f"Invalid key material for {algorithm.name}",
            SigningErrorCodes.INVALID_KEY_MATERIAL,
            {"algorithm": algorithm.name, "key_type": str(type(algorithm.key))}
        )


def validate_signing_config(config: SigningConfig) -> None:
    """
    Validate signing configuration.

    Key material is checked for shape only; RSA keys are parsed when a
    request is signed.

    Args:
        config: Signing configuration to validate

    Raises:
        SigningError: If configuration is invalid
    """
    if not isinstance(config, SigningConfig):
        raise SigningError(
            "Configuration must be SigningConfig instance",
            SigningErrorCodes.INVALID_CONFIG
        )

    _validate_fields(config.algorithm, config.key_id)

    primitives = config.primitives
    if primitives is not None:
        if not callable(getattr(primitives, 'hmac', None)) or not callable(getattr(primitives, 'rsa_sign', None)):
            raise SigningError(
                "Primitives must provide hmac() and rsa_sign()",
                SigningErrorCodes.INVALID_CONFIG,
                {"primitives_type": str(type(primitives))}
            )
