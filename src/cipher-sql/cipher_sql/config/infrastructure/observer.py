"""ConfigObserver backed by structlog."""

import structlog


class StructlogConfigObserver:
    """Logs ``config.loaded`` once a StudioConfig has been validated."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, engine: str, pool_max_size: int) -> None:
        self._log.info(
            "config.loaded",
            path=path,
            engine=engine,
            pool_max_size=pool_max_size,
        )
