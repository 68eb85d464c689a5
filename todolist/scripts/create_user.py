# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create a login for the todo list.

    python -m todolist.scripts.create_user alice
"""

from __future__ import annotations

import argparse
import getpass
import sys

from todolist.infrastructure.audit import AuditAction, audit_log
from todolist.infrastructure.container import container
from todolist.infrastructure.db import init_db
from todolist.shared.errors import DomainError
from todolist.shared.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a todo-list user")
    parser.add_argument("username", help="Login name of the new user")
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the new user (prompted for when omitted)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    init_db()

    password = args.password or getpass.getpass("Password: ")
    try:
        user = container.register_user_use_case.execute(args.username, password)
    except DomainError as exc:
        print(exc.detail or exc.code, file=sys.stderr)
        return 1

    audit_log(AuditAction.USER_CREATED, user_id=user.id, details={"username": user.username})
    print(f"Created user {user.username} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
