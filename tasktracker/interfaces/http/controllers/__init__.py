# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .spa_controller import SpaController
from .todos_controller import TodosController

__all__ = ["AuthController", "SpaController", "TodosController"]
