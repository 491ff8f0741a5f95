# tuition_api/core/security.py
"""Credential codec for branch-admin passwords.

Each branch-admin password is stored twice: a salted bcrypt hash used for
login verification, and an AES-256-CBC ciphertext that lets a super-admin
read the current password back.

Ciphertext format is ``"<iv-hex>:<ciphertext-hex>"`` with a fresh 16-byte IV
per call.
"""
import logging
import os

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from passlib.context import CryptContext

from .config import settings

logger = logging.getLogger(__name__)

IV_SIZE = 16


def derive_key(secret: str) -> bytes:
    """32-byte AES key from the configured secret."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(secret.encode("utf-8"))
    return digest.finalize()


class CredentialCodec:
    def __init__(self, secret: str, rounds: int = 10):
        self._key = derive_key(secret)
        self._pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    # One-way

    def hash(self, secret: str) -> str:
        return self._pwd_context.hash(secret)

    def verify(self, secret: str, hashed: str) -> bool:
        if not secret or not hashed:
            return False
        try:
            return self._pwd_context.verify(secret, hashed)
        except (ValueError, TypeError):
            # passlib raises on hashes it cannot identify
            logger.warning("Unrecognised password hash format")
            return False

    # Reversible

    def encrypt(self, secret: str) -> str:
        if not secret:
            return ""
        iv = os.urandom(IV_SIZE)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(secret.encode("utf-8")) + padder.finalize()
        encryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
        encrypted = encryptor.update(padded) + encryptor.finalize()
        return f"{iv.hex()}:{encrypted.hex()}"

    def decrypt(self, payload: str) -> str:
        """Recover the plaintext; returns "" when the payload cannot be read."""
        if not payload or ":" not in payload:
            return ""
        iv_hex, data_hex = payload.split(":", 1)
        try:
            iv = bytes.fromhex(iv_hex)
            encrypted = bytes.fromhex(data_hex)
            decryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).decryptor()
            padded = decryptor.update(encrypted) + decryptor.finalize()
            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            return (unpadder.update(padded) + unpadder.finalize()).decode("utf-8")
        except ValueError as e:
            logger.error(f"Password decrypt error: {e}")
            return ""


credential_codec = CredentialCodec(settings.credential_secret, settings.bcrypt_rounds)
