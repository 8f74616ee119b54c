"""Result normalizer — renders executor output into a comparable canonical form."""

import math
from decimal import Decimal
from typing import Any

from cipher_sql.result.domain.result import NormalizedResult, NormalizedRow, QueryResult, Row


def canonical_text(value: Any) -> str | None:
    """
    Return the canonical text of a single cell, or None for SQL NULL.

    Booleans render as ``true``/``false``, integral floats drop their fractional
    part, binary values use the ``\\x<hex>`` form, and everything else uses its
    natural ``str`` form. Surrounding whitespace is always trimmed.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, int | Decimal):
        return str(value)
    if isinstance(value, bytes | bytearray | memoryview):
        return "\\x" + bytes(value).hex()
    return str(value).strip()


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def normalize_row(row: Row) -> NormalizedRow:
    return {key: canonical_text(value) for key, value in row.items()}


def normalize(raw: QueryResult) -> NormalizedResult:
    """
    Return the canonical form of ``raw``.

    Column order, row order, and each row's key set are preserved exactly; no
    sorting happens here. Queries that need order-independent grading must fix
    the order themselves (``ORDER BY``). Normalizing an already normalized
    result returns an equal result.
    """
    return NormalizedResult(
        columns=list(raw.columns),
        rows=[normalize_row(row) for row in raw.rows],
    )
