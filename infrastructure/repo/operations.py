import logging
from pathlib import Path

from application.ports import ProcessRunner
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def _git(runner: ProcessRunner, repo_dir: Path, *args: str) -> None:
    runner.run("git", list(args), cwd=repo_dir)


def configure_identity(repo_dir: Path, name: str, email: str, *, runner: ProcessRunner) -> None:
    _git(runner, repo_dir, "config", "user.name", name)
    _git(runner, repo_dir, "config", "user.email", email)
    log_event(logger, logging.INFO, "repo.identity.configured", name=name, email=email)


def create_branch(repo_dir: Path, branch: str, *, runner: ProcessRunner) -> None:
    _git(runner, repo_dir, "checkout", "-b", branch)


def commit_all(repo_dir: Path, message: str, *, runner: ProcessRunner) -> None:
    _git(runner, repo_dir, "add", "-A")
    _git(runner, repo_dir, "commit", "-m", message)


def push(repo_dir: Path, branch: str | None = None, *, runner: ProcessRunner) -> None:
    if branch:
        _git(runner, repo_dir, "push", "origin", branch)
    else:
        _git(runner, repo_dir, "push")
    log_event(logger, logging.INFO, "repo.pushed", branch=branch or "current")
