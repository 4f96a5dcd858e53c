# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .token_service import TokenError, TokenExpiredError, TokenService, TokenSignatureError

__all__ = [
    "TokenError",
    "TokenExpiredError",
    "TokenService",
    "TokenSignatureError",
    "WerkzeugPasswordHasher",
]
