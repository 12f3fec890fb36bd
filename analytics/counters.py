"""
Idempotent Counter Store

Atomic read-or-initialize and increment for named counters.

Both operations lean on the database's native upsert so that no two
rows can ever exist for one key and no increment is lost:

- get_or_create: INSERT ... ON CONFLICT DO NOTHING, then read.
- increment:     INSERT ... ON CONFLICT DO UPDATE SET count = count + 1
                 RETURNING count, as a single statement.

Supported backends: PostgreSQL and SQLite 3.35+ (both accept
ON CONFLICT ... RETURNING). Nothing here locks or retries; a failed
statement surfaces as CounterStoreUnavailable.
"""
import logging

from django.db import DatabaseError, connections, router

from core.exceptions import InvalidConfiguration
from .models import VisitCounter

logger = logging.getLogger(__name__)


class CounterStoreUnavailable(Exception):
    """Raised when the counter could not be read or written."""
    pass


class VisitCounterStore:
    """
    Named counters backed by the VisitCounter table.

    Usage:
        store = VisitCounterStore()
        store.get_or_create('site_visits')  # 0 on first access
        store.increment('site_visits')      # 1
    """

    def __init__(self, using: str = None):
        self.using = using or router.db_for_write(VisitCounter)

    @staticmethod
    def _validate_key(key: str) -> str:
        if not isinstance(key, str) or not key.strip():
            raise InvalidConfiguration(f"Counter key must be a non-empty string, got {key!r}")
        max_length = VisitCounter._meta.get_field('key').max_length
        if len(key) > max_length:
            raise InvalidConfiguration(
                f"Counter key must be at most {max_length} characters, got {len(key)}"
            )
        return key

    def get_or_create(self, key: str) -> int:
        """
        Return the current count for key, creating the counter at 0 if absent.

        Raises:
            InvalidConfiguration: If key is blank
            CounterStoreUnavailable: If the database call fails
        """
        key = self._validate_key(key)
        try:
            # Single insert-or-ignore statement (ON CONFLICT DO NOTHING / INSERT OR IGNORE)
            VisitCounter.objects.using(self.using).bulk_create(
                [VisitCounter(key=key, count=0)],
                ignore_conflicts=True,
            )
            count = VisitCounter.objects.using(self.using).values_list(
                'count', flat=True
            ).get(key=key)
        except (DatabaseError, VisitCounter.DoesNotExist) as exc:
            logger.error(f"Counter read failed for {key!r}: {exc}")
            raise CounterStoreUnavailable(f"Could not read counter {key!r}") from exc

        return count

    def increment(self, key: str) -> int:
        """
        Add one to the counter for key and return the new total.

        Creates the counter with count 1 if it does not exist yet.

        Raises:
            InvalidConfiguration: If key is blank
            CounterStoreUnavailable: If the database call fails
        """
        key = self._validate_key(key)
        connection = connections[self.using]
        quote = connection.ops.quote_name
        table = quote(VisitCounter._meta.db_table)
        key_column = quote(VisitCounter._meta.get_field('key').column)
        count_column = quote(VisitCounter._meta.get_field('count').column)

        sql = (
            f"INSERT INTO {table} ({key_column}, {count_column}) VALUES (%s, 1) "
            f"ON CONFLICT ({key_column}) DO UPDATE "
            f"SET {count_column} = {table}.{count_column} + 1 "
            f"RETURNING {count_column}"
        )

        try:
            with connection.cursor() as cursor:
                cursor.execute(sql, [key])
                row = cursor.fetchone()
        except DatabaseError as exc:
            logger.error(f"Counter increment failed for {key!r}: {exc}")
            raise CounterStoreUnavailable(f"Could not increment counter {key!r}") from exc

        return int(row[0])
