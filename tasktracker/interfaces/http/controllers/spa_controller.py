# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client bundle with a catch-all document for client-side routes."""

from __future__ import annotations

import os
from pathlib import Path

from flask import Blueprint, Response, send_from_directory
from werkzeug.security import safe_join

from tasktracker.interfaces.http.gateway import API_PREFIX
from tasktracker.shared.config.settings import StaticConfig
from tasktracker.shared.errors import RouteNotFoundError
from tasktracker.shared.logging import logger


def is_api_path(path: str) -> bool:
    relative = path.lstrip("/")
    api = API_PREFIX.lstrip("/")
    return relative == api or relative.startswith(f"{api}/")


class SpaController:
    def __init__(self, *, config: StaticConfig) -> None:
        self._root = Path(config.directory).resolve()
        self._fallback = config.fallback_document

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("spa", __name__)
        bp.add_url_rule("/", view_func=self.serve, defaults={"path": ""}, methods=["GET"])
        bp.add_url_rule("/<path:path>", view_func=self.serve, methods=["GET"])
        return bp

    def _readable_asset(self, path: str) -> str | None:
        if not path:
            return None
        candidate = safe_join(str(self._root), path)
        if candidate is None:
            return None
        if os.path.isfile(candidate) and os.access(candidate, os.R_OK):
            return path
        return None

    def serve(self, path: str) -> Response:
        if is_api_path(path):
            raise RouteNotFoundError(f"/{path}")

        asset = self._readable_asset(path)
        if asset is not None:
            return send_from_directory(self._root, asset)

        if self._readable_asset(self._fallback) is None:
            logger.warning(f"spa: fallback document missing under {self._root}")
            raise RouteNotFoundError(f"/{path}")
        return send_from_directory(self._root, self._fallback)
