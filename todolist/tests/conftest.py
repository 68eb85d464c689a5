from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

import pytest

# must run before any todolist module reads the configuration
_TMP_DIR = tempfile.mkdtemp(prefix="todolist-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["ENABLE_CSRF"] = "0"
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ.setdefault("ARGON2_PARALLELISM", "1")


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    from todolist.infrastructure.db import ENGINE, Base
    from todolist.infrastructure.db import models  # noqa: F401 (registers tables)

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
