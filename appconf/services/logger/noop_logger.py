from typing import Any

from appconf.services.logger.interface import LoggingInterface


class NoopLogger(LoggingInterface):
    """Discards all log entries. Used when no logger is injected."""

    def info(self, msg: str, **ctx: Any) -> None:
        pass

    def warn(self, msg: str, **ctx: Any) -> None:
        pass

    def error(self, msg: str, **ctx: Any) -> None:
        pass

    def debug(self, msg: str, **ctx: Any) -> None:
        pass
