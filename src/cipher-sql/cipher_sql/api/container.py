"""Container — wires stores, executors and observers from a StudioConfig."""

from dataclasses import dataclass

from cipher_sql.assignment.application.catalog import AssignmentCatalog
from cipher_sql.assignment.infrastructure.observer import StructlogAssignmentObserver
from cipher_sql.assignment.infrastructure.yaml_store import YamlAssignmentLoader
from cipher_sql.config.domain.config import StudioConfig
from cipher_sql.execution.infrastructure.observer import StructlogExecutionObserver
from cipher_sql.execution.infrastructure.registry import (
    ExecutionBackend,
    create_execution_backend,
)
from cipher_sql.verification.application.verifier import AnswerVerifier
from cipher_sql.verification.infrastructure.observer import StructlogVerificationObserver


@dataclass
class Container:
    """Process-wide services. ``backend`` is None when the executor is not pooled."""

    catalog: AssignmentCatalog
    verifier: AnswerVerifier
    backend: ExecutionBackend | None = None

    async def aclose(self) -> None:
        if self.backend is not None:
            await self.backend.aclose()


def build_container(config: StudioConfig) -> Container:
    """
    Load the assignment catalog and open the execution backend for ``config``.

    Raises:
        AssignmentLoadError: if the assignment catalog cannot be loaded.
    """
    store = YamlAssignmentLoader(observer=StructlogAssignmentObserver()).load(
        path=config.assignments
    )
    backend = create_execution_backend(
        database=config.database,
        pool=config.pool,
        execution=config.execution,
        observer=StructlogExecutionObserver(),
    )
    verifier = AnswerVerifier(
        store=store,
        executor=backend.executor,
        observer=StructlogVerificationObserver(),
    )
    return Container(
        catalog=AssignmentCatalog(store=store),
        verifier=verifier,
        backend=backend,
    )
