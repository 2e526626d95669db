from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from domain.constants import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_NODE_VERSION,
    DEFAULT_PULL_REQUEST_BODY,
    DEFAULT_PULL_REQUEST_TITLE,
)
from domain.errors import TranslationSyncError
from domain.models import PullRequestRecord


def _noop_observe_stage(_: str, __: str, ___: str | None = None) -> None:
    return None


@dataclass(frozen=True)
class RunConfig:
    working_directory: Path
    api_key: str
    project_id: str | None = None
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    branch_name: str | None = None
    create_pull_request: bool = False
    pull_request_title: str = DEFAULT_PULL_REQUEST_TITLE
    pull_request_body: str = DEFAULT_PULL_REQUEST_BODY
    node_version: str = DEFAULT_NODE_VERSION
    repository: str | None = None
    ref: str | None = None
    github_token: str | None = None


@dataclass(frozen=True)
class SyncDependencies:
    install_tool: Callable[[Path], None]
    run_translations: Callable[[Path, str, str | None], None]
    configure_identity: Callable[[Path, str, str], None]
    has_pending_changes: Callable[[Path], bool]
    create_branch: Callable[[Path, str], None]
    commit_all: Callable[[Path, str], None]
    push: Callable[[Path, str | None], None]
    create_pull_request: Callable[..., PullRequestRecord]
    observe_stage: Callable[[str, str, str | None], None] = _noop_observe_stage


@dataclass(frozen=True)
class StageCompleted:
    detail: str | None = None
    pull_request: PullRequestRecord | None = None


@dataclass(frozen=True)
class StageHalted:
    """Successful outcome that ends the run early."""

    message: str


@dataclass(frozen=True)
class StageFailed:
    error: TranslationSyncError


StageOutcome = Union[StageCompleted, StageHalted, StageFailed]


def _always(_: RunConfig) -> bool:
    return True


@dataclass(frozen=True)
class Stage:
    name: str
    title: str
    run: Callable[[RunConfig, SyncDependencies], StageOutcome]
    error_type: type[TranslationSyncError]
    failure_message: str
    applies: Callable[[RunConfig], bool] = _always


@dataclass(frozen=True)
class SyncResult:
    status: str
    message: str
    stage: str | None = None
    error: str | None = None
    error_kind: str | None = None
    pull_request: PullRequestRecord | None = None

    @property
    def failed(self) -> bool:
        return self.status == "failed"
