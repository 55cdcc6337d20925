from __future__ import annotations

import logging

_DEFAULT_LOGGER = "mstest_step.step"


class LoggerSink:
    """
    OutputSink backed by a standard library logger.

    Runner output goes to a `.output` child logger so it can be routed separately.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(_DEFAULT_LOGGER)
        self._output = self._logger.getChild("output")

    def log(self, message: str) -> None:
        self._logger.info(message)

    def fatal_error(self, message: str) -> None:
        self._logger.error("FATAL: %s", message)

    def write(self, line: str) -> None:
        self._output.info(line)
