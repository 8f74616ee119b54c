"""RejectionReason — why the safety gate refused a submitted query."""

from enum import StrEnum


class RejectionReason(StrEnum):
    """Gate rejection codes. All of them are user-correctable bad input."""

    MISSING_QUERY = "missing_query"
    NOT_A_SELECT = "not_a_select"
    MULTIPLE_STATEMENTS = "multiple_statements"
    UNSAFE_KEYWORD = "unsafe_keyword"

    @property
    def message(self) -> str:
        """Human-readable reason shown to the learner."""
        return _MESSAGES[self]


_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.MISSING_QUERY: "query is required",
    RejectionReason.NOT_A_SELECT: "Only SELECT queries allowed",
    RejectionReason.MULTIPLE_STATEMENTS: "Multiple statements not allowed",
    RejectionReason.UNSAFE_KEYWORD: "Only safe SELECT allowed",
}
