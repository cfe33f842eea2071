import logging
import os
import sqlite3

logger = logging.getLogger(__name__)

DOWN_MARKER = "-- Down"


class SQLiteMigrator:
    """
    Applies the numbered .sql files in migrations_dir, in filename order.

    Each file holds its Up script first; an optional "-- Down" line starts
    the script that reverts it. Applied filenames are tracked in _migrations.
    """

    def __init__(self, db_path: str, migrations_dir: str):
        self.db_path = db_path
        self.migrations_dir = migrations_dir

    def _get_connection(self) -> sqlite3.Connection:
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _ensure_migration_table(self, conn: sqlite3.Connection) -> None:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                filename TEXT UNIQUE NOT NULL,
                applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
        """)

    def _applied(self, conn: sqlite3.Connection) -> list[str]:
        rows = conn.execute("SELECT filename FROM _migrations ORDER BY id").fetchall()
        return [row[0] for row in rows]

    def _available(self) -> list[str]:
        return sorted(f for f in os.listdir(self.migrations_dir) if f.endswith(".sql"))

    def _split_script(self, filename: str) -> tuple[str, str]:
        """(up, down) parts of a migration file; down is "" when absent."""
        path = os.path.join(self.migrations_dir, filename)
        with open(path) as f:
            content = f.read()
        up, _, down = content.partition(DOWN_MARKER)
        return up, down

    def pending_migrations(self) -> list[str]:
        conn = self._get_connection()
        try:
            self._ensure_migration_table(conn)
            applied = set(self._applied(conn))
        finally:
            conn.close()
        return [f for f in self._available() if f not in applied]

    def run_migrations(self) -> list[str]:
        """Apply all pending migrations. Returns the filenames applied."""
        pending = self.pending_migrations()
        conn = self._get_connection()
        try:
            for filename in pending:
                logger.info("Applying migration: %s", filename)
                up, _ = self._split_script(filename)
                self._execute(conn, filename, up, "INSERT INTO _migrations (filename) VALUES (?)")
        finally:
            conn.close()

        logger.info("All migrations applied (%d new).", len(pending))
        return pending

    def rollback(self) -> str | None:
        """Revert the most recently applied migration. Returns its filename."""
        conn = self._get_connection()
        try:
            self._ensure_migration_table(conn)
            applied = self._applied(conn)
            if not applied:
                logger.info("Nothing to roll back.")
                return None

            filename = applied[-1]
            _, down = self._split_script(filename)
            if not down.strip():
                raise RuntimeError(f"Migration {filename} has no {DOWN_MARKER} section")

            logger.info("Rolling back migration: %s", filename)
            self._execute(conn, filename, down, "DELETE FROM _migrations WHERE filename = ?")
            return filename
        finally:
            conn.close()

    def _execute(self, conn: sqlite3.Connection, filename: str, script: str, record_sql: str) -> None:
        try:
            conn.executescript(script)
            conn.execute(record_sql, (filename,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {filename} failed: {e}") from e
