"""
Store selection.

The backend is chosen once per process, on first use. The durable backend
is preferred; if the database cannot be reached within
``STORAGE_CONNECT_TIMEOUT`` seconds the service keeps running on the
in-process store and says so in the log.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError

from django.conf import settings
from django.db import DatabaseError, connections

from .base import EntityStore
from .memory import MemoryStore

logger = logging.getLogger(__name__)

REQUIRED_TABLES = (
    'counters',
    'users',
    'chit_groups',
    'chit_group_members',
    'auctions',
    'bids',
    'payments',
    'notifications',
)

_store = None
_lock = threading.Lock()


def _check_database(alias):
    connection = connections[alias]
    try:
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        existing = set(connection.introspection.table_names())
    finally:
        # Probe runs on a worker thread; its connection must not leak
        connection.close()
    missing = [table for table in REQUIRED_TABLES if table not in existing]
    if missing:
        raise DatabaseError(f"Missing tables: {', '.join(missing)}")


def probe_database(alias='default', timeout=5.0):
    """
    Return True if the database answers and holds the store tables.

    Never raises: any failure is logged and reported as False.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='store-probe')
    future = executor.submit(_check_database, alias)
    try:
        future.result(timeout=timeout)
        return True
    except FutureTimeoutError:
        logger.warning("Database '%s' did not answer within %ss", alias, timeout)
        return False
    except Exception as exc:
        logger.warning("Database '%s' is unavailable: %s", alias, exc)
        return False
    finally:
        executor.shutdown(wait=False)


def build_store() -> EntityStore:
    """Construct the backend named by ``STORAGE_BACKEND``."""
    backend = getattr(settings, 'STORAGE_BACKEND', 'database')
    if backend == 'memory':
        logger.info("Using in-memory entity store")
        return MemoryStore()

    if backend != 'database':
        logger.warning("Unknown STORAGE_BACKEND %r, trying the database", backend)

    timeout = getattr(settings, 'STORAGE_CONNECT_TIMEOUT', 5.0)
    if probe_database(timeout=timeout):
        from .database import DatabaseStore

        logger.info("Using database entity store")
        return DatabaseStore()

    logger.warning(
        "Falling back to in-memory entity store; data will not survive a restart"
    )
    return MemoryStore()


def get_store() -> EntityStore:
    """Return the process-wide store, selecting it on first call."""
    global _store
    if _store is None:
        with _lock:
            if _store is None:
                _store = build_store()
    return _store


def set_store(store: EntityStore):
    """Install ``store`` as the process-wide store."""
    global _store
    with _lock:
        _store = store


def reset_store():
    """Forget the current store; the next ``get_store`` selects again."""
    set_store(None)
