"""
Tests for the default cryptographic primitives and platform checks
"""

import hashlib
import hmac
from unittest.mock import patch

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from httpsig_sdk import (
    DefaultPrimitives,
    UnsupportedPlatformError,
    check_platform_compatibility,
    initialize_sdk,
    is_compatible,
)
from httpsig_sdk.crypto.primitives import hmac_digest, load_rsa_private_key, rsa_sign

# RFC 4231 / RFC 2202 test case 2
KEY = b"Jefe"
DATA = b"what do ya want for nothing?"


class TestHMACDigest:
    """Test keyed hashes against published vectors"""

    @pytest.mark.parametrize("digest,expected", [
        ("sha1", "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
        ("sha256", "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"),
        ("sha512", "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
                   "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"),
    ])
    def test_known_vectors(self, digest, expected):
        assert hmac_digest(digest, KEY, DATA).hex() == expected
        assert DefaultPrimitives().hmac(digest, KEY, DATA).hex() == expected

    @pytest.mark.parametrize("digest", ["sha1", "sha256", "sha512"])
    def test_empty_key(self, digest):
        expected = hmac.new(b"", DATA, getattr(hashlib, digest)).digest()
        assert hmac_digest(digest, b"", DATA) == expected

    def test_unsupported_digest(self):
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            hmac_digest("md5", KEY, DATA)
        assert exc_info.value.error_code == "UNSUPPORTED_DIGEST"


class TestRSASign:
    """Test RSASSA-PKCS1-v1_5 signing"""

    def test_load_pkcs8_and_pkcs1(self, rsa_private_key, rsa_private_pem, rsa_pkcs1_pem):
        expected = rsa_private_key.private_numbers()
        for pem in (rsa_private_pem, rsa_pkcs1_pem):
            key = load_rsa_private_key(pem.encode('ascii'))
            assert isinstance(key, rsa.RSAPrivateKey)
            assert key.private_numbers() == expected

    def test_load_rejects_non_rsa(self, ec_private_pem):
        with pytest.raises(ValueError):
            load_rsa_private_key(ec_private_pem.encode('ascii'))

    def test_load_rejects_encrypted(self, encrypted_rsa_pem):
        with pytest.raises(TypeError):
            load_rsa_private_key(encrypted_rsa_pem.encode('ascii'))

    def test_sign_verifies(self, rsa_private_key, rsa_private_pem):
        signature = DefaultPrimitives().rsa_sign(rsa_private_pem.encode('ascii'), DATA, "sha512")

        assert len(signature) == 256
        rsa_private_key.public_key().verify(signature, DATA, padding.PKCS1v15(), hashes.SHA512())

    def test_unsupported_digest(self, rsa_private_pem):
        with pytest.raises(UnsupportedPlatformError):
            rsa_sign(rsa_private_pem.encode('ascii'), DATA, "sha1")


class TestPlatformCompatibility:
    """Test platform compatibility reporting"""

    def test_check_platform_compatibility(self):
        info = check_platform_compatibility()

        assert info['hmac_digests'] == ['sha1', 'sha256', 'sha512']
        assert info['rsa_supported'] is True
        assert info['cryptography_version']
        assert 'system' in info['platform_info']

    def test_initialize_sdk(self):
        result = initialize_sdk()
        assert result == {'compatible': True, 'warnings': []}
        assert is_compatible()

    def test_initialize_sdk_reports_missing_rsa(self):
        report = {'hmac_digests': ['sha1', 'sha256', 'sha512'], 'rsa_supported': False}
        with patch('httpsig_sdk.check_platform_compatibility', return_value=report):
            result = initialize_sdk()

        assert result['compatible'] is False
        assert any('RSA' in warning for warning in result['warnings'])

    def test_initialize_sdk_reports_missing_digest(self):
        report = {'hmac_digests': ['sha256'], 'rsa_supported': True}
        with patch('httpsig_sdk.check_platform_compatibility', return_value=report):
            result = initialize_sdk()

        assert result['compatible'] is False
        assert result['warnings'] == ['HMAC digests unavailable: sha1, sha512']
