# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import cast

from flask import Blueprint, g, jsonify
from flask.typing import ResponseReturnValue

from todolist.application.services.session_guard import SessionGuard
from todolist.domain.users.entities import User
from todolist.infrastructure.health import DATABASE_OK, database_status
from todolist.interfaces.http.dto.auth import UserDTO
from todolist.interfaces.http.guards import HOME_PATH, session_required


class MiscController:
    def __init__(self, *, guard: SessionGuard) -> None:
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule(HOME_PATH, view_func=self.home, methods=["GET"])
        return bp

    def health(self) -> ResponseReturnValue:
        database = database_status()
        ok = database == DATABASE_OK
        return jsonify({"ok": ok, "database": database}), 200 if ok else 503

    @session_required
    def home(self) -> ResponseReturnValue:
        user = cast(User, g.user)
        return jsonify({"user": UserDTO(id=user.id, username=user.username).model_dump()})
