"""Verdict — the grading outcome of one verification attempt."""

from pydantic import BaseModel, ConfigDict

from cipher_sql.result.domain.result import NormalizedResult


class Verdict(BaseModel, frozen=True):
    """Immutable grading decision plus both compared result sets.

    ``expected`` holds the reference query's normalized rows, never its text.
    ``mismatch`` describes the first difference found and is None when correct.
    """

    model_config = ConfigDict(frozen=True)

    correct: bool
    expected: NormalizedResult
    got: NormalizedResult
    mismatch: str | None = None
