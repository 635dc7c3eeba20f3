"""
Base repository: one connection per unit of work.

The leaderboard only ever runs a single statement per call, so
repositories get a cursor rather than a (connection, cursor) pair.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from database_postgres import get_connection

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base class for leaderboard repositories.

    Subclasses run their SQL inside ``with self.cursor() as cursor:``.
    """

    @contextmanager
    def cursor(self, write: bool = False) -> Iterator[Any]:
        """
        Open a connection and yield a RealDictCursor on it.

        Args:
            write: Commit when the block exits cleanly. Reads never commit.

        On an exception the transaction is rolled back and the error is
        re-raised; the cursor and connection are closed either way.
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield cursor
            if write:
                conn.commit()
        except Exception as e:
            logger.error(f"Rolling back leaderboard transaction: {e}")
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()
