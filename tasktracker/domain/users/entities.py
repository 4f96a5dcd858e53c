# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str


def normalize_username(username: str | None) -> str:
    return (username or "").strip()
