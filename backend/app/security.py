"""Authentication for the back office: password hashing, TOTP and bearer tokens."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import logging
import os
import secrets
import struct
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

LOGGER = logging.getLogger(__name__)

ADMIN_USERNAME_ENV = "ADMIN_USERNAME"
ADMIN_PASSWORD_HASH_ENV = "ADMIN_PASSWORD_HASH"
ADMIN_JWT_SECRET_ENV = "ADMIN_JWT_SECRET"
ADMIN_TOTP_SECRET_ENV = "ADMIN_TOTP_SECRET"
ACCESS_TOKEN_EXPIRE_MINUTES_ENV = "ACCESS_TOKEN_EXPIRE_MINUTES"

PBKDF2_DEFAULT_ITERATIONS = 390_000
TOTP_PERIOD = 30
TOTP_DIGITS = 6

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


class SecurityConfigurationError(RuntimeError):
    """Raised when mandatory security settings are missing or invalid."""


class Unauthenticated(HTTPException):
    """Raised when a request cannot be tied to an authenticated user."""

    def __init__(self, detail: str = "Autenticação necessária") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


@dataclass
class UserIdentity:
    """Represents the authenticated user behind a request."""

    user_id: str


def _read_env_var(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise SecurityConfigurationError(f"Environment variable '{name}' is required")
    return value


def generate_password_hash(password: str, *, iterations: int = PBKDF2_DEFAULT_ITERATIONS) -> str:
    """Return a PBKDF2-based password hash string."""

    if not password:
        raise ValueError("password must not be empty")
    salt = secrets.token_bytes(16)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    components = (
        str(iterations),
        base64.urlsafe_b64encode(salt).decode("ascii"),
        base64.urlsafe_b64encode(derived).decode("ascii"),
    )
    return "$".join(components)


def _split_password_hash(stored_hash: str) -> tuple[int, bytes, bytes]:
    try:
        iterations_str, salt_b64, hash_b64 = stored_hash.split("$")
        iterations = int(iterations_str)
        salt = base64.urlsafe_b64decode(salt_b64)
        digest = base64.urlsafe_b64decode(hash_b64)
    except (ValueError, binascii.Error) as exc:
        raise SecurityConfigurationError("Stored admin password hash is invalid") from exc
    return iterations, salt, digest


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored PBKDF2 hash."""

    iterations, salt, digest = _split_password_hash(stored_hash)
    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(candidate, digest)


def _load_admin_credentials() -> tuple[str, str]:
    username = _read_env_var(ADMIN_USERNAME_ENV)
    password_hash = _read_env_var(ADMIN_PASSWORD_HASH_ENV)
    return username, password_hash


def _decode_totp_secret(secret: str) -> bytes:
    normalized = secret.upper()
    normalized += "=" * (-len(normalized) % 8)
    return base64.b32decode(normalized, casefold=True)


@lru_cache(maxsize=1)
def _load_totp_secret() -> Optional[bytes]:
    secret = os.getenv(ADMIN_TOTP_SECRET_ENV)
    if not secret:
        return None
    try:
        return _decode_totp_secret(secret)
    except (ValueError, binascii.Error) as exc:
        raise SecurityConfigurationError("Invalid TOTP secret configured for admin user") from exc


def _totp_code(secret: bytes, counter: int, digits: int = TOTP_DIGITS) -> str:
    msg = struct.pack(">Q", counter)
    digest = hmac.new(secret, msg, hashlib.sha1).digest()
    offset = digest[-1] & 0x0F
    truncated = digest[offset : offset + 4]
    code = struct.unpack(">I", truncated)[0] & 0x7FFFFFFF
    return str(code % (10 ** digits)).zfill(digits)


def _verify_totp(code: str) -> bool:
    secret = _load_totp_secret()
    if secret is None:
        return True
    if not code or not code.isdigit():
        return False
    counter = int(time.time() // TOTP_PERIOD)
    # Accept one period of clock drift either way.
    for offset in (-1, 0, 1):
        candidate = _totp_code(secret, counter + offset)
        if hmac.compare_digest(candidate, code.zfill(TOTP_DIGITS)):
            return True
    return False


def generate_totp_code(secret: str, timestamp: Optional[int] = None) -> str:
    """Generate the expected TOTP value for testing or provisioning."""

    try:
        secret_bytes = _decode_totp_secret(secret)
    except (ValueError, binascii.Error) as exc:
        raise SecurityConfigurationError("Invalid TOTP secret") from exc
    counter = int((timestamp or time.time()) // TOTP_PERIOD)
    return _totp_code(secret_bytes, counter)


@lru_cache(maxsize=1)
def _load_jwt_key() -> bytes:
    raw_secret = _read_env_var(ADMIN_JWT_SECRET_ENV)
    try:
        return base64.urlsafe_b64decode(raw_secret)
    except (ValueError, binascii.Error):
        return raw_secret.encode("utf-8")


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _encode_jwt(payload: dict[str, Any], key: bytes) -> str:
    header = {"typ": "JWT", "alg": "HS256"}
    header_b64 = _b64url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("ascii")
    signature = hmac.new(key, signing_input, hashlib.sha256).digest()
    return f"{header_b64}.{payload_b64}.{_b64url_encode(signature)}"


def _decode_jwt(token: str, key: bytes) -> dict[str, Any]:
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
        signing_input = f"{header_b64}.{payload_b64}".encode("ascii")
        signature = _b64url_decode(signature_b64)
    except (ValueError, binascii.Error) as exc:
        raise Unauthenticated("Token inválido") from exc

    expected_signature = hmac.new(key, signing_input, hashlib.sha256).digest()
    if not hmac.compare_digest(signature, expected_signature):
        raise Unauthenticated("Token inválido")

    try:
        payload_data = json.loads(_b64url_decode(payload_b64).decode("utf-8"))
        exp = int(payload_data["exp"])
    except (ValueError, TypeError, KeyError, binascii.Error) as exc:
        raise Unauthenticated("Token inválido") from exc
    if datetime.now(timezone.utc) >= datetime.fromtimestamp(exp, tz=timezone.utc):
        raise Unauthenticated("Token expirado")
    return payload_data


def _resolve_access_token_expiry() -> timedelta:
    raw = os.getenv(ACCESS_TOKEN_EXPIRE_MINUTES_ENV)
    if not raw:
        return timedelta(minutes=30)
    try:
        minutes = int(raw)
    except ValueError as exc:
        raise SecurityConfigurationError("ACCESS_TOKEN_EXPIRE_MINUTES must be an integer") from exc
    if minutes <= 0:
        raise SecurityConfigurationError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
    return timedelta(minutes=minutes)


def _same_username(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()


def authenticate_admin(username: str, password: str, otp_code: Optional[str]) -> UserIdentity:
    expected_username, expected_hash = _load_admin_credentials()
    if not _same_username(username, expected_username) or not verify_password(
        password, expected_hash
    ):
        LOGGER.warning("Rejected login attempt for %s", username)
        raise Unauthenticated("Credenciais inválidas")

    if _load_totp_secret() is not None:
        if not otp_code:
            raise Unauthenticated("Código 2FA obrigatório")
        if not _verify_totp(otp_code):
            LOGGER.warning("Rejected 2FA code for %s", username)
            raise Unauthenticated("Código 2FA inválido")

    return UserIdentity(user_id=expected_username)


def create_access_token(identity: UserIdentity) -> str:
    key = _load_jwt_key()
    expiry = datetime.now(timezone.utc) + _resolve_access_token_expiry()
    payload: dict[str, Any] = {
        "sub": identity.user_id,
        "exp": int(expiry.timestamp()),
    }
    return _encode_jwt(payload, key)


def current_user_id(token: Optional[str]) -> Optional[str]:
    """Return the user id carried by ``token`` or ``None`` when there is none."""

    if not token:
        return None
    payload = _decode_jwt(token, _load_jwt_key())
    subject = payload.get("sub")
    if not isinstance(subject, str):
        return None
    expected_username, _ = _load_admin_credentials()
    if not _same_username(subject, expected_username):
        return None
    return expected_username


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> UserIdentity:
    user_id = current_user_id(token)
    if user_id is None:
        raise Unauthenticated()
    return UserIdentity(user_id=user_id)


def require_user(identity: UserIdentity = Depends(get_current_user)) -> UserIdentity:
    """FastAPI dependency guarding every back-office route."""

    return identity
