# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens.

Tokens are HS256 JWTs carrying ``sub`` (the username), ``iat`` and ``exp``.
Validity depends only on the signature and the expiry; nothing is stored
server side, so a token cannot be revoked before it expires.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from http import HTTPStatus

import jwt

from tasktracker.shared.errors.base import AppError

_JWT_ALG = "HS256"


class TokenError(AppError):
    def __init__(self, code: str) -> None:
        super().__init__(code=code, status=HTTPStatus.UNAUTHORIZED)


class TokenSignatureError(TokenError):
    def __init__(self) -> None:
        super().__init__("token_invalid")


class TokenExpiredError(TokenError):
    def __init__(self) -> None:
        super().__init__("token_expired")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    def __init__(
        self,
        *,
        secret: str,
        expiration_ms: int,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        if expiration_ms < 1:
            raise ValueError("jwt_expiration_not_positive")
        self._key = secret.encode("utf-8")
        self._ttl = timedelta(milliseconds=expiration_ms)
        self._clock = clock

    def issue(self, subject: str) -> str:
        now = self._clock()
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._key, algorithm=_JWT_ALG)

    def verify(self, token: str) -> str:
        """Return the token subject or raise a ``TokenError``."""
        if not token:
            raise TokenSignatureError()
        try:
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[_JWT_ALG],
                leeway=0,
                # only signature and expiry decide validity
                options={
                    "require": ["exp", "sub"],
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenSignatureError() from exc

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise TokenSignatureError()
        return subject


__all__ = ["TokenError", "TokenExpiredError", "TokenService", "TokenSignatureError"]
