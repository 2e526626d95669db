from functools import partial
from typing import Mapping

from application.ports import ProcessRunner, PullRequestPublisher
from application.translation_sync import SyncDependencies
from infrastructure.github.github_client import DEFAULT_API_URL
from infrastructure.github.pr_gateway import GitHubPullRequestPublisher
from infrastructure.observability.workflow_observer import StageObserver
from infrastructure.process import SubprocessRunner
from infrastructure.repo.operations import commit_all, configure_identity, create_branch, push
from infrastructure.repo.status import has_pending_changes
from infrastructure.translation.gtx_cli import install_gtx_cli, run_gtx_translate


def build_sync_dependencies(
    environ: Mapping[str, str],
    *,
    runner: ProcessRunner | None = None,
    publisher: PullRequestPublisher | None = None,
    observer: StageObserver | None = None,
) -> SyncDependencies:
    process_runner = runner or SubprocessRunner()
    pull_request_publisher = publisher or GitHubPullRequestPublisher(
        api_url=environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
    )
    return SyncDependencies(
        install_tool=partial(install_gtx_cli, runner=process_runner),
        run_translations=partial(run_gtx_translate, runner=process_runner),
        configure_identity=partial(configure_identity, runner=process_runner),
        has_pending_changes=partial(has_pending_changes, runner=process_runner),
        create_branch=partial(create_branch, runner=process_runner),
        commit_all=partial(commit_all, runner=process_runner),
        push=partial(push, runner=process_runner),
        create_pull_request=pull_request_publisher.create_pull_request,
        observe_stage=observer or StageObserver(),
    )
