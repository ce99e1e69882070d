"""Custom exceptions for the cal-speech post-processing pipeline.

The pipeline itself never raises on a transcript: every stage has a
defined fallback.  The only errors are configuration errors raised while
the correction tables are being built.
"""

from __future__ import annotations


class TableConfigurationError(Exception):
    """Raised when a correction or pattern table is malformed.

    Attributes:
        table: Name of the offending table (e.g. ``"lexical"``).
    """

    def __init__(self, message: str, table: str = "") -> None:
        super().__init__(message)
        self.table = table


class TableOrderError(TableConfigurationError):
    """Raised when a table declares a key after one of its own substrings.

    Substitution tables are applied in declaration order, so a shorter key
    declared first would consume part of a longer key before the longer
    rule ever runs (``十`` before ``十一`` turns ``十一`` into ``101``).

    Attributes:
        table: Name of the offending table.
        shorter: The key that is declared too early.
        longer: The key that contains *shorter* and is declared later.
    """

    def __init__(self, table: str, shorter: str, longer: str) -> None:
        super().__init__(
            f"{table} table declares {longer!r} after its substring {shorter!r}",
            table=table,
        )
        self.shorter = shorter
        self.longer = longer
