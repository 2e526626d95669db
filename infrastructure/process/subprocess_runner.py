import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from domain.errors import ExecError
from domain.models import CapturedOutput
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)


def _merge_environment(overlay: Mapping[str, str] | None) -> dict[str, str] | None:
    if not overlay:
        return None
    return {**os.environ, **overlay}


class SubprocessRunner:
    def run(
        self,
        command: str,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture_output: bool = False,
    ) -> CapturedOutput:
        argv = [command, *args]
        log_event(
            logger,
            logging.INFO,
            "process.run",
            command=argv,
            cwd=str(cwd) if cwd else None,
            env_overlay=sorted(env) if env else None,
            capture_output=capture_output,
        )
        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                env=_merge_environment(env),
                capture_output=capture_output,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as error:
            log_event(logger, logging.ERROR, "process.spawn_failed", command=argv, error=str(error))
            raise ExecError(command, args, None, safe_message(str(error))) from error

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        if result.returncode != 0:
            if stderr.strip():
                log_event(logger, logging.ERROR, "process.stderr", output=stderr.strip())
            raise ExecError(command, args, result.returncode, safe_message(stderr.strip()))

        return CapturedOutput(exit_code=result.returncode, stdout=stdout, stderr=stderr)
