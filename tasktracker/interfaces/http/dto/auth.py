from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequestDTO(BaseModel):
    # Blank/missing values are rejected by the use case so both surface as the same 400.
    # no length caps: registration accepts any length
    username: str | None = None
    password: str | None = None

    model_config = ConfigDict(extra="ignore")


class LoginResponseDTO(BaseModel):
    token: str
    username: str
