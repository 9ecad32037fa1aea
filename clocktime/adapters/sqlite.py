"""
sqlite3 bindings for ClockTime columns.

After ``register_sqlite_adapters()``, a connection opened with
``detect_types=sqlite3.PARSE_DECLTYPES`` reads columns declared as
``CLOCKTIME`` back as ``ClockTime`` values. Writes store the ``HH:MM:SS``
text form.
"""

import logging
import sqlite3

from ..domain.models import START_OF_DAY, ClockTime

logger = logging.getLogger(__name__)


SQLITE_TYPE_NAME = "CLOCKTIME"


def _adapt(value: ClockTime) -> str:
    return value.to_db_value()


def _convert(raw: bytes) -> ClockTime:
    # sqlite3 only calls converters for non-NULL values, always with bytes.
    return START_OF_DAY.scan(raw)


def register_sqlite_adapters(type_name: str = SQLITE_TYPE_NAME) -> None:
    """Register the ClockTime adapter and converter with the sqlite3 module."""
    sqlite3.register_adapter(ClockTime, _adapt)
    sqlite3.register_converter(type_name, _convert)
    logger.debug("Registered sqlite3 converter for %s columns", type_name)
