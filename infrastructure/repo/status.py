from pathlib import Path

from application.ports import ProcessRunner


def has_pending_changes(repo_dir: Path, *, runner: ProcessRunner) -> bool:
    """Return True when ``git status --porcelain`` reports anything at all."""
    captured = runner.run("git", ["status", "--porcelain"], cwd=repo_dir, capture_output=True)
    return bool(captured.stdout.strip())
