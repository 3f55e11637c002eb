"""Database initialization and connection management."""
import logging
from pathlib import Path
from typing import Optional

import aiosqlite

logger = logging.getLogger(__name__)

SAMPLE_QUIZZES = [
    ("Capital of Italy", "Rome"),
    ("Capital of France", "Paris"),
    ("Capital of Spain", "Madrid"),
    ("Capital of Portugal", "Lisbon"),
]


class Database:
    """Database connection manager."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._conn: Optional[aiosqlite.Connection] = None

    async def connect(self) -> aiosqlite.Connection:
        """Establish database connection."""
        if self._conn is None:
            # Ensure data directory exists
            db_dir = Path(self.db_path).parent
            db_dir.mkdir(parents=True, exist_ok=True)

            self._conn = await aiosqlite.connect(self.db_path)
            self._conn.row_factory = aiosqlite.Row

        return self._conn

    async def close(self):
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def execute(self, query: str, params: tuple = ()) -> aiosqlite.Cursor:
        """Execute a write query and commit. Returns the cursor for lastrowid/rowcount."""
        conn = await self.connect()
        cursor = await conn.execute(query, params)
        await conn.commit()
        return cursor

    async def fetchone(self, query: str, params: tuple = ()):
        """Fetch one result."""
        conn = await self.connect()
        async with conn.execute(query, params) as cursor:
            return await cursor.fetchone()

    async def fetchall(self, query: str, params: tuple = ()):
        """Fetch all results."""
        conn = await self.connect()
        async with conn.execute(query, params) as cursor:
            return await cursor.fetchall()


async def init_database(db_path: str = "data/quizzes.db", seed: bool = True) -> Database:
    """Initialize database with schema from migrations/init.sql."""
    migrations_path = Path(__file__).parent.parent / "database" / "migrations" / "init.sql"

    if not migrations_path.exists():
        raise FileNotFoundError(f"Migration file not found: {migrations_path}")

    with open(migrations_path, "r", encoding="utf-8") as f:
        schema_sql = f.read()

    db = Database(db_path)
    conn = await db.connect()

    # Execute schema (split by ; and execute each statement)
    for statement in schema_sql.split(";"):
        statement = statement.strip()
        if statement:
            await conn.execute(statement)

    await conn.commit()

    if seed:
        await _seed_sample_quizzes(conn)

    logger.info("Database initialized at %s", db_path)

    return db


async def _seed_sample_quizzes(conn: aiosqlite.Connection):
    """Fill an empty quizzes table with a few sample questions."""
    async with conn.execute("SELECT COUNT(*) FROM quizzes") as cursor:
        row = await cursor.fetchone()

    if row[0]:
        return

    await conn.executemany(
        "INSERT INTO quizzes (question, answer) VALUES (?, ?)",
        SAMPLE_QUIZZES,
    )
    await conn.commit()
    logger.info("Seeded %d sample quizzes", len(SAMPLE_QUIZZES))


# Global database instance (will be initialized in main.py)
db: Optional[Database] = None


def get_db() -> Database:
    """Get global database instance."""
    if db is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db
