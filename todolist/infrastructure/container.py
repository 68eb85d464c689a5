# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from todolist.application.services.password_hashing import Argon2PasswordHasher
from todolist.application.services.session_guard import SessionGuard
from todolist.application.use_cases.comments.edit_comment import EditCommentUseCase
from todolist.application.use_cases.users.change_password import ChangePasswordUseCase
from todolist.application.use_cases.users.login_user import LoginUserUseCase
from todolist.application.use_cases.users.register_user import RegisterUserUseCase
from todolist.infrastructure.auth.session_cookie import SignedSessionCookie
from todolist.infrastructure.repositories.comments.sqlalchemy_comment_repository import (
    SqlAlchemyCommentRepository,
)
from todolist.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from todolist.interfaces.http.controllers.auth_controller import AuthController
from todolist.interfaces.http.controllers.comments_controller import CommentsController
from todolist.interfaces.http.controllers.misc_controller import MiscController
from todolist.interfaces.http.controllers.password_controller import PasswordController
from todolist.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> Argon2PasswordHasher:
        return Argon2PasswordHasher(self._config.password)

    @cached_property
    def session_cookie(self) -> SignedSessionCookie:
        return SignedSessionCookie(self._config.secret_key, self._config.security)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository()

    @cached_property
    def session_guard(self) -> SessionGuard:
        return SessionGuard(cookies=self.session_cookie, users=self.user_repository)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def change_password_use_case(self) -> ChangePasswordUseCase:
        return ChangePasswordUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def edit_comment_use_case(self) -> EditCommentUseCase:
        return EditCommentUseCase(comments=self.comment_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            guard=self.session_guard,
            cookies=self.session_cookie,
        )

    @cached_property
    def password_controller(self) -> PasswordController:
        return PasswordController(
            change_password_use_case=self.change_password_use_case,
            guard=self.session_guard,
            cookies=self.session_cookie,
        )

    @cached_property
    def comments_controller(self) -> CommentsController:
        return CommentsController(
            edit_comment_use_case=self.edit_comment_use_case,
            guard=self.session_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(guard=self.session_guard)


container = Container()
