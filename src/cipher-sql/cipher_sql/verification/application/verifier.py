"""AnswerVerifier — grades a learner query against an assignment's hidden reference."""

import time

from cipher_sql.assignment.domain.errors import AssignmentNotFoundError
from cipher_sql.assignment.domain.store import AssignmentStore
from cipher_sql.execution.domain.errors import QueryExecutionError, QueryTimeoutError
from cipher_sql.execution.domain.executor import QueryExecutor
from cipher_sql.result.domain.equivalence import find_mismatch
from cipher_sql.result.domain.normalizer import normalize
from cipher_sql.result.domain.result import QueryResult
from cipher_sql.safety.domain.errors import UnsafeQueryError
from cipher_sql.safety.domain.gate import ensure_safe_select
from cipher_sql.verification.domain.observer import VerificationObserver
from cipher_sql.verification.domain.verdict import Verdict

REFERENCE_FAILED = "Failed to execute reference query"


class AnswerVerifier:
    """Runs the safety gate, the executor, the normalizer and the equivalence check.

    Free of infrastructure dependencies: the store, executor and observer are
    passed in, so any of them can be replaced by a fake in tests.
    """

    def __init__(
        self,
        store: AssignmentStore,
        executor: QueryExecutor,
        observer: VerificationObserver,
    ) -> None:
        self._store = store
        self._executor = executor
        self._observer = observer

    async def execute(self, query: object) -> QueryResult:
        """
        Gate ``query`` and run it, returning the raw result.

        Raises:
            UnsafeQueryError: if the gate rejects the query; nothing is executed.
            QueryExecutionError: if the engine fails, including on timeout.
        """
        try:
            admitted = ensure_safe_select(query)
        except UnsafeQueryError as exc:
            self._observer.execution_rejected(reason=exc.reason.value)
            raise
        return await self._executor.execute(admitted)

    async def verify(self, assignment_id: str, candidate_query: object) -> Verdict:
        """
        Grade ``candidate_query`` against the assignment's reference query.

        The candidate runs first, then the reference; the reference is trusted
        and skips the gate. Neither is retried. The reference query text never
        appears in the Verdict, in raised errors, or in observer events.

        Raises:
            AssignmentNotFoundError: if no assignment has ``assignment_id``.
            UnsafeQueryError: if the gate rejects the candidate; nothing is executed.
            QueryExecutionError: if either query fails in the engine. A failing
                reference query is reported as ``REFERENCE_FAILED`` only;
                a timeout keeps its QueryTimeoutError.
        """
        self._observer.verification_started(assignment_id=assignment_id)
        started = time.perf_counter()

        assignment = self._store.get(assignment_id)
        if assignment is None:
            self._observer.verification_assignment_not_found(assignment_id=assignment_id)
            raise AssignmentNotFoundError(assignment_id=assignment_id)

        try:
            admitted = ensure_safe_select(candidate_query)
        except UnsafeQueryError as exc:
            self._observer.verification_rejected(
                assignment_id=assignment_id, reason=exc.reason.value
            )
            raise

        try:
            got_raw = await self._executor.execute(admitted)
        except QueryExecutionError as exc:
            self._observer.verification_failed(assignment_id=assignment_id, reason=str(exc))
            raise

        try:
            expected_raw = await self._executor.execute(
                assignment.solution_query, redact=True
            )
        except QueryTimeoutError as exc:
            self._observer.verification_failed(assignment_id=assignment_id, reason=str(exc))
            raise
        except QueryExecutionError as exc:
            # Engine messages can quote the reference query.
            self._observer.verification_failed(
                assignment_id=assignment_id, reason=REFERENCE_FAILED
            )
            raise QueryExecutionError(REFERENCE_FAILED) from exc

        expected = normalize(expected_raw)
        got = normalize(got_raw)
        mismatch = find_mismatch(expected, got)

        self._observer.verification_completed(
            assignment_id=assignment_id,
            correct=mismatch is None,
            elapsed_ms=(time.perf_counter() - started) * 1000.0,
        )
        return Verdict(correct=mismatch is None, expected=expected, got=got, mismatch=mismatch)
