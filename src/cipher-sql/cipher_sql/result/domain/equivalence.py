"""Equivalence checker — decides whether two normalized results grade as equal.

Comparison is strict and position-sensitive:

* column names must match in number, name and position;
* row counts must match;
* row ``i`` of one side is compared with row ``i`` of the other, never matched
  by content, so the same rows in a different order are NOT equivalent.

The last point means a learner query without ``ORDER BY`` can be marked wrong
even when it returns the right rows. Reference queries should always fix the
order explicitly.
"""

from cipher_sql.result.domain.result import NormalizedResult


def find_mismatch(expected: NormalizedResult, got: NormalizedResult) -> str | None:
    """Return a short description of the first difference, or None if equivalent."""
    if len(expected.columns) != len(got.columns):
        return (
            f"expected {len(expected.columns)} column(s), got {len(got.columns)}"
        )
    for position, (want, have) in enumerate(zip(expected.columns, got.columns)):
        if want != have:
            return f"column {position + 1} should be '{want}', got '{have}'"

    if len(expected.rows) != len(got.rows):
        return f"expected {len(expected.rows)} row(s), got {len(got.rows)}"

    for index, (want_row, have_row) in enumerate(zip(expected.rows, got.rows)):
        if set(want_row) != set(have_row):
            return f"row {index + 1} has different columns"
        for key, want_value in want_row.items():
            # None only equals None; "" is a value, not a NULL.
            if want_value != have_row[key]:
                return f"row {index + 1} differs in column '{key}'"

    return None


def equivalent(a: NormalizedResult, b: NormalizedResult) -> bool:
    """True iff ``a`` and ``b`` match column-for-column and row-for-row."""
    return find_mismatch(a, b) is None
