import sqlite3
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from src.domain.entities import Document, User


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so value matches literally (ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteOptionsRepo:
    """Global key/value options (single table, one row per option name)."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def get_option(self, key: str, default: Any = None) -> Any:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT option_value FROM options WHERE option_name = ?", (key,)
            ).fetchone()
            if not row:
                return default
            return row["option_value"]
        finally:
            conn.close()

    def add_option(self, key: str, value: Any) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO options (option_name, option_value) VALUES (?, ?)",
                (key, "" if value is None else str(value)),
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def update_option(self, key: str, value: Any) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO options (option_name, option_value) VALUES (?, ?)
                ON CONFLICT(option_name) DO UPDATE SET
                    option_value=excluded.option_value
            """,
                (key, "" if value is None else str(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_option(self, key: str) -> bool:
        conn = self._get_conn()
        try:
            cursor = conn.execute("DELETE FROM options WHERE option_name = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def list_all(self) -> dict[str, str]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT option_name, option_value FROM options ORDER BY option_name"
            ).fetchall()
            return {r["option_name"]: r["option_value"] for r in rows}
        finally:
            conn.close()


class SQLitePostMetaRepo:
    """Per-document metadata, one value per (document, key)."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def get_meta(self, document_id: int, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT meta_value FROM postmeta WHERE post_id = ? AND meta_key = ?",
                (document_id, key),
            ).fetchone()
            if not row:
                return None
            value: str = row["meta_value"]
            return value
        finally:
            conn.close()

    def update_meta(self, document_id: int, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO postmeta (post_id, meta_key, meta_value) VALUES (?, ?, ?)
                ON CONFLICT(post_id, meta_key) DO UPDATE SET
                    meta_value=excluded.meta_value
            """,
                (document_id, key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_by_prefix(self, prefix: str) -> int:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                "DELETE FROM postmeta WHERE meta_key LIKE ? ESCAPE '\\'",
                (_escape_like(prefix) + "%",),
            )
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()

    def count_by_prefix(self, prefix: str) -> int:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT count(*) AS n FROM postmeta WHERE meta_key LIKE ? ESCAPE '\\'",
                (_escape_like(prefix) + "%",),
            ).fetchone()
            count: int = row["n"]
            return count
        finally:
            conn.close()


class SQLiteDocumentRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def save(self, document: Document) -> Document:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO documents (
                    id, type, slug, title, excerpt, permalink,
                    author_name, featured_image_url, published_at, modified_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    type=excluded.type,
                    slug=excluded.slug,
                    title=excluded.title,
                    excerpt=excluded.excerpt,
                    permalink=excluded.permalink,
                    author_name=excluded.author_name,
                    featured_image_url=excluded.featured_image_url,
                    published_at=excluded.published_at,
                    modified_at=excluded.modified_at
            """,
                (
                    document.id,
                    document.type,
                    document.slug,
                    document.title,
                    document.excerpt,
                    document.permalink,
                    document.author_name,
                    document.featured_image_url,
                    document.published_at.isoformat(),
                    document.modified_at.isoformat(),
                ),
            )
            conn.commit()
            return document
        finally:
            conn.close()

    def get_by_id(self, document_id: int) -> Document | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM documents WHERE id = ?", (document_id,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_slug(self, slug: str) -> Document | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM documents WHERE slug = ?", (slug,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> list[Document]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM documents ORDER BY published_at DESC").fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Document:
        return Document(
            id=row["id"],
            type=row["type"],
            slug=row["slug"],
            title=row["title"],
            excerpt=row["excerpt"],
            permalink=row["permalink"],
            author_name=row["author_name"],
            featured_image_url=row["featured_image_url"],
            published_at=datetime.fromisoformat(row["published_at"]),
            modified_at=datetime.fromisoformat(row["modified_at"]),
        )


class SQLiteUserRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def save(self, user: User) -> User:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO users (
                    id, email, display_name, status, created_at
                ) VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    email=excluded.email,
                    display_name=excluded.display_name,
                    status=excluded.status
            """,
                (
                    str(user.id),
                    user.email,
                    user.display_name,
                    user.status,
                    user.created_at.isoformat(),
                ),
            )

            # Replace role assignments
            conn.execute("DELETE FROM role_assignments WHERE user_id = ?", (str(user.id),))
            for role in user.roles:
                conn.execute(
                    "INSERT INTO role_assignments (id, user_id, role, created_at) "
                    "VALUES (?, ?, ?, ?)",
                    (str(uuid4()), str(user.id), role, datetime.now(UTC).isoformat()),
                )

            conn.commit()
            return user
        finally:
            conn.close()

    def get_by_email(self, email: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
            if not row:
                return None
            return self._map_row_to_user(conn, row)
        finally:
            conn.close()

    def get_by_id(self, user_id: UUID) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (str(user_id),)).fetchone()
            if not row:
                return None
            return self._map_row_to_user(conn, row)
        finally:
            conn.close()

    def _map_row_to_user(self, conn: sqlite3.Connection, row: dict[str, Any]) -> User:
        role_rows = conn.execute(
            "SELECT role FROM role_assignments WHERE user_id = ?", (row["id"],)
        ).fetchall()
        roles = [r["role"] for r in role_rows]

        return User(
            id=UUID(row["id"]),
            email=row["email"],
            display_name=row["display_name"],
            roles=roles,
            status=row["status"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
