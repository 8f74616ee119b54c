"""Safety gate — lexical admission check for learner-submitted SQL.

This is a coarse filter, not a SQL parser and not a complete
injection defence. The rules run in a fixed order and the first failing rule
decides the rejection reason:

1. the input must be a non-empty string;
2. after trimming and lower-casing it must start with ``select``;
3. splitting on ``;`` must leave at most one non-empty fragment;
4. it must not contain any blocked keyword as a substring.

Known limitation: rule 4 is plain substring containment, so identifiers such as
``created_at`` or ``last_update`` are rejected even inside a harmless SELECT.
"""

from cipher_sql.safety.domain.errors import UnsafeQueryError
from cipher_sql.safety.domain.reason import RejectionReason

BLOCKED_KEYWORDS: tuple[str, ...] = (
    "insert",
    "update",
    "delete",
    "drop",
    "alter",
    "truncate",
    "create",
)

_STATEMENT_TERMINATOR = ";"


def check_query(raw: object) -> RejectionReason | None:
    """Return the rejection reason for ``raw``, or None when it is admitted."""
    if not isinstance(raw, str) or not raw:
        return RejectionReason.MISSING_QUERY

    folded = raw.strip().lower()

    if not folded.startswith("select"):
        return RejectionReason.NOT_A_SELECT

    # Only zero-length fragments are dropped; a whitespace-only fragment between
    # two terminators still counts as a second statement.
    fragments = [f for f in folded.split(_STATEMENT_TERMINATOR) if f]
    if len(fragments) > 1:
        return RejectionReason.MULTIPLE_STATEMENTS

    if any(keyword in folded for keyword in BLOCKED_KEYWORDS):
        return RejectionReason.UNSAFE_KEYWORD

    return None


def ensure_safe_select(raw: object) -> str:
    """
    Return ``raw`` unchanged if it passes the gate.

    Raises:
        UnsafeQueryError: carrying the first failing rule's reason.
    """
    reason = check_query(raw)
    if reason is not None:
        raise UnsafeQueryError(reason=reason)
    return str(raw)
