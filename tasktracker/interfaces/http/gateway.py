# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate in front of the API.

Every request is matched against an ordered list of route policies; the
first policy that matches decides whether the request is open or needs an
authenticated subject. Authentication happens once, before any view runs,
and the resulting :class:`AuthContext` is handed to views explicitly by
:func:`auth_context_required`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from functools import wraps

from flask import Flask, g, request

from tasktracker.application.services.token_service import TokenError, TokenService
from tasktracker.shared.errors import UnauthorizedError
from tasktracker.shared.logging import logger

API_PREFIX = "/api"
LOGIN_PATH = f"{API_PREFIX}/auth/login"
_BEARER_PREFIX = "Bearer "


class Access(StrEnum):
    OPEN = "open"
    AUTHENTICATED = "authenticated"


@dataclass(slots=True, frozen=True)
class RoutePolicy:
    access: Access
    prefix: str
    methods: frozenset[str] | None = None
    exact: bool = False

    def matches(self, method: str, path: str) -> bool:
        if self.methods is not None and method.upper() not in self.methods:
            return False
        if self.exact:
            return path == self.prefix
        if self.prefix == "/":
            return True
        return path == self.prefix or path.startswith(f"{self.prefix}/")


@dataclass(slots=True, frozen=True)
class AuthContext:
    subject: str


DEFAULT_POLICIES: tuple[RoutePolicy, ...] = (
    RoutePolicy(Access.OPEN, LOGIN_PATH, methods=frozenset({"POST"}), exact=True),
    # CORS preflight never reaches a view
    RoutePolicy(Access.OPEN, API_PREFIX, methods=frozenset({"OPTIONS"})),
    RoutePolicy(Access.AUTHENTICATED, API_PREFIX),
    RoutePolicy(Access.OPEN, "/"),
)


def extract_bearer_token(header: str | None) -> str | None:
    if not header or not header.startswith(_BEARER_PREFIX):
        return None
    token = header[len(_BEARER_PREFIX):].strip()
    return token or None


class AuthGateway:
    def __init__(
        self,
        *,
        tokens: TokenService,
        policies: Sequence[RoutePolicy] = DEFAULT_POLICIES,
    ) -> None:
        self._tokens = tokens
        self._policies = tuple(policies)

    def policy_for(self, method: str, path: str) -> RoutePolicy:
        for policy in self._policies:
            if policy.matches(method, path):
                return policy
        # nothing matched: fail closed
        return RoutePolicy(Access.AUTHENTICATED, path)

    def authenticate(self, authorization: str | None) -> AuthContext:
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthorizedError("missing_token")
        subject = self._tokens.verify(token)
        return AuthContext(subject=subject)

    def install(self, app: Flask) -> None:
        app.before_request(self._before_request)

    def _before_request(self) -> None:
        policy = self.policy_for(request.method, request.path)
        if policy.access is Access.OPEN:
            return None
        try:
            g.auth = self.authenticate(request.headers.get("Authorization"))
        except (TokenError, UnauthorizedError) as exc:
            logger.warning(
                f"auth.gateway: rejected {request.method} {request.path} reason={exc.code}"
            )
            raise
        logger.debug(f"auth.gateway: ok subject={g.auth.subject} {request.method} {request.path}")
        return None


def current_auth() -> AuthContext:
    auth = getattr(g, "auth", None)
    if not isinstance(auth, AuthContext):
        raise UnauthorizedError()
    return auth


def auth_context_required(f: Callable):
    """Pass the request's ``AuthContext`` to the view as the ``auth`` keyword."""

    @wraps(f)
    def inner(*args, **kwargs):
        kwargs["auth"] = current_auth()
        return f(*args, **kwargs)

    return inner


__all__ = [
    "API_PREFIX",
    "Access",
    "AuthContext",
    "AuthGateway",
    "DEFAULT_POLICIES",
    "LOGIN_PATH",
    "RoutePolicy",
    "auth_context_required",
    "current_auth",
    "extract_bearer_token",
]
