import os
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def db_path(test_data_dir) -> str:
    """Temporary SQLite database with every migration applied."""
    path = os.path.join(test_data_dir, "db_seo.db")
    SQLiteMigrator(path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return path


@pytest.fixture
def rules() -> Rules:
    """Real rules from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


# --- API fixtures ---


@pytest.fixture
def api_settings(db_path):
    from src.api.deps import Settings

    s = Settings()
    s.db_path = db_path
    s.rules_path = PROJECT_ROOT / "rules.yaml"
    s.site_name = "Example Blog"
    s.site_description = "Just another site"
    s.home_url = "https://example.com/"
    s.logo_url = None
    return s


@pytest.fixture
def filter_registry():
    from src.shell.hooks.filters import create_filter_registry

    return create_filter_registry()


@pytest.fixture
def client(api_settings, filter_registry):
    from fastapi.testclient import TestClient

    from src.api.deps import get_filter_registry, get_settings
    from src.api.main import app

    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_filter_registry] = lambda: filter_registry
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_path):
    """Create a user with the given role and return (user, auth headers)."""
    from src.adapters.auth.crypto import JWTAuthAdapter
    from src.adapters.sqlite.repos import SQLiteUserRepo
    from src.domain.entities import User

    def _make(role: str, email: str | None = None):
        user = SQLiteUserRepo(db_path).save(
            User(email=email or f"{role}@example.com", display_name=role.title(), roles=[role])
        )
        token = JWTAuthAdapter().create_token(user.id, 30)
        return user, {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def seed_documents(db_path):
    from datetime import datetime

    from src.adapters.sqlite.repos import SQLiteDocumentRepo
    from src.domain.entities import Document

    repo = SQLiteDocumentRepo(db_path)
    post = repo.save(
        Document(
            id=1,
            type="post",
            slug="hello-world",
            title="Hello World",
            excerpt="Welcome to the blog",
            permalink="https://example.com/p/hello-world",
            author_name="Sam",
            published_at=datetime(2024, 3, 1, 12, 0, 0),
            modified_at=datetime(2024, 3, 2, 12, 0, 0),
        )
    )
    page = repo.save(
        Document(
            id=2,
            type="page",
            slug="about",
            title="About",
            excerpt="",
            permalink="https://example.com/p/about",
            author_name="Sam",
        )
    )
    return {"post": post, "page": page}
