import logging
from contextvars import Token
from typing import TextIO

from infrastructure.action import workflow_commands
from infrastructure.observability.context import reset_current_stage, set_current_stage
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)

_TERMINAL_STATUSES = ("success", "halted", "error")


class StageObserver:
    """Logs stage transitions and wraps each stage in an Actions log group."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self._token: Token[str] | None = None

    def __call__(self, stage: str, status: str, detail: str | None = None) -> None:
        if status == "start":
            workflow_commands.start_group(detail or stage, self.stream)
            self._token = set_current_stage(stage)

        level = logging.ERROR if status == "error" else logging.INFO
        log_event(logger, level, "sync.stage", stage=stage, status=status, detail=detail)

        if status in _TERMINAL_STATUSES:
            if self._token is not None:
                reset_current_stage(self._token)
                self._token = None
            workflow_commands.end_group(self.stream)
