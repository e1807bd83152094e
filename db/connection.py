"""Database connection management"""

from typing import Optional
import asyncpg
from contextlib import asynccontextmanager

from core.exceptions import DatabaseError
from config import settings


class DatabaseManager:
    """PostgreSQL connection manager"""

    def __init__(self, connection_string: Optional[str] = None):
        self.connection_string = connection_string or settings.DATABASE_URL
        self.pool: Optional[asyncpg.Pool] = None

        if not self.connection_string:
            raise DatabaseError("No database connection string provided")

    async def create_pool(self, min_size: int = 2, max_size: int = 20) -> None:
        """
        Create a connection pool

        Bulk imports write one batch of rows concurrently, so connections are
        shared instead of opened per statement.

        Args:
            min_size: Minimum pool size
            max_size: Maximum pool size
        """
        try:
            self.pool = await asyncpg.create_pool(
                self.connection_string,
                min_size=min_size,
                max_size=max_size,
                timeout=10.0,
                command_timeout=30.0
            )
        except Exception as e:
            raise DatabaseError(f"Failed to create connection pool: {e}") from e

    async def close(self) -> None:
        """Close the pool if one was created"""
        if self.pool:
            await self.pool.close()
            self.pool = None

    @asynccontextmanager
    async def get_connection(self):
        """Get async database connection"""
        if self.pool:
            async with self.pool.acquire() as conn:
                yield conn
            return

        try:
            conn = await asyncpg.connect(self.connection_string)
        except Exception as e:
            raise DatabaseError(f"Database connection failed: {e}") from e
        try:
            yield conn
        finally:
            await conn.close()

    async def execute(self, query: str, *args) -> list:
        """Execute query and return results"""
        async with self.get_connection() as conn:
            return await conn.fetch(query, *args)

    async def execute_one(self, query: str, *args):
        """Execute query and return single result"""
        async with self.get_connection() as conn:
            return await conn.fetchrow(query, *args)

    async def execute_write(self, query: str, *args) -> str:
        """Execute write query (INSERT, UPDATE, DELETE)"""
        async with self.get_connection() as conn:
            return await conn.execute(query, *args)

    async def test_connection(self) -> bool:
        """Test database connection"""
        try:
            async with self.get_connection() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (DatabaseError, asyncpg.PostgresError, OSError):
            return False
