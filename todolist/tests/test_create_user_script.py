from __future__ import annotations

import pytest

from todolist.infrastructure.container import container
from todolist.scripts import create_user


def test_creates_user_with_given_password(capsys: pytest.CaptureFixture[str]) -> None:
    assert create_user.main(["carol", "--password", "carol-password"]) == 0

    assert "Created user carol" in capsys.readouterr().out
    assert container.login_user_use_case.execute("carol", "carol-password").username == "carol"


def test_prompts_when_password_is_omitted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(create_user.getpass, "getpass", lambda prompt: "prompted-password")

    assert create_user.main(["dave"]) == 0
    assert container.login_user_use_case.execute("dave", "prompted-password").username == "dave"


def test_duplicate_and_short_passwords_fail(capsys: pytest.CaptureFixture[str]) -> None:
    assert create_user.main(["erin", "--password", "erin-password"]) == 0
    capsys.readouterr()

    assert create_user.main(["erin", "--password", "erin-password"]) == 1
    assert "already exists" in capsys.readouterr().err

    assert create_user.main(["frank", "--password", "short"]) == 1
    assert "at least 8 characters" in capsys.readouterr().err
