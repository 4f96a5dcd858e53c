# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from tasktracker.application.use_cases.users.login_user import LoginUserUseCase
from tasktracker.interfaces.http.dto.auth import LoginRequestDTO, LoginResponseDTO
from tasktracker.shared.errors import AppError, InfrastructureError
from tasktracker.shared.errors.validation import raise_validation_error
from tasktracker.shared.logging import logger


class AuthController:
    def __init__(self, *, login_use_case: LoginUserUseCase) -> None:
        self._login_use_case = login_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except AppError as exc:
            logger.info(f"auth.login: rejected ({exc.code})")
            raise
        except Exception as exc:
            logger.exception("auth.login: err")
            raise InfrastructureError(code="login_failed") from exc

        payload = LoginResponseDTO(token=result.token, username=result.username)
        logger.info(f"auth.login: ok username={result.username}")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
