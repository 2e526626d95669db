from pathlib import Path
from typing import Mapping, Protocol, Sequence

from domain.models import CapturedOutput


class ProcessRunner(Protocol):
    def run(
        self,
        command: str,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture_output: bool = False,
    ) -> CapturedOutput:
        """Run a command to completion, raising ExecError on failure.

        ``env`` is merged over the ambient environment. Output is streamed to the
        console unless ``capture_output`` is set.
        """
