from domain.errors import (
    ConfigurationError,
    GitConfigError,
    GitError,
    PublishError,
    ToolInstallError,
    TranslationError,
    TranslationSyncError,
)

from application.translation_sync.contracts import (
    RunConfig,
    Stage,
    StageCompleted,
    StageFailed,
    StageHalted,
    StageOutcome,
    SyncDependencies,
    SyncResult,
)
from application.translation_sync.steps import (
    commit_and_push,
    configure_git,
    create_branch,
    detect_changes,
    has_branch,
    install_tool,
    publish_pull_request,
    run_translations,
    validate_configuration,
    wants_pull_request,
)


COMPLETED_MESSAGE = "GT Translation action completed successfully!"

STAGES: tuple[Stage, ...] = (
    Stage(
        name="validate",
        title="Validating configuration",
        run=validate_configuration,
        error_type=ConfigurationError,
        failure_message="Invalid configuration",
    ),
    Stage(
        name="install_tool",
        title="Step 1: Installing gtx-cli",
        run=install_tool,
        error_type=ToolInstallError,
        failure_message="Failed to install gtx-cli",
    ),
    Stage(
        name="translate",
        title="Step 2: Running translations",
        run=run_translations,
        error_type=TranslationError,
        failure_message="Failed to run translations",
    ),
    Stage(
        name="configure_git",
        title="Step 3: Setting up git configuration",
        run=configure_git,
        error_type=GitConfigError,
        failure_message="Failed to configure git",
    ),
    Stage(
        name="detect_changes",
        title="Step 4: Checking for changes",
        run=detect_changes,
        error_type=GitError,
        failure_message="Failed to check for changes",
    ),
    Stage(
        name="create_branch",
        title="Step 5: Creating branch {branch_name}",
        run=create_branch,
        error_type=GitError,
        failure_message="Failed to create branch",
        applies=has_branch,
    ),
    Stage(
        name="commit_and_push",
        title="Step 6: Committing and pushing changes",
        run=commit_and_push,
        error_type=GitError,
        failure_message="Failed to commit and push changes",
    ),
    Stage(
        name="publish_pull_request",
        title="Step 7: Creating pull request",
        run=publish_pull_request,
        error_type=PublishError,
        failure_message="Failed to create pull request",
        applies=wants_pull_request,
    ),
)


def _wrap_error(stage: Stage, error: Exception) -> TranslationSyncError:
    if isinstance(error, TranslationSyncError):
        return error
    wrapped = stage.error_type(f"{stage.failure_message}: {error}")
    wrapped.__cause__ = error
    return wrapped


def _stage_title(stage: Stage, config: RunConfig) -> str:
    return stage.title.format(branch_name=config.branch_name or "")


def _run_stage(stage: Stage, config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    try:
        return stage.run(config, dependencies)
    except Exception as error:
        return StageFailed(error=_wrap_error(stage, error))


def run_translation_sync(
    config: RunConfig,
    dependencies: SyncDependencies,
    stages: tuple[Stage, ...] = STAGES,
) -> SyncResult:
    pull_request = None
    for stage in stages:
        if not stage.applies(config):
            dependencies.observe_stage(stage.name, "skipped", None)
            continue

        dependencies.observe_stage(stage.name, "start", _stage_title(stage, config))
        outcome = _run_stage(stage, config, dependencies)

        if isinstance(outcome, StageFailed):
            message = str(outcome.error)
            dependencies.observe_stage(stage.name, "error", message)
            return SyncResult(
                status="failed",
                message=message,
                stage=stage.name,
                error=message,
                error_kind=type(outcome.error).__name__,
            )

        if isinstance(outcome, StageHalted):
            dependencies.observe_stage(stage.name, "halted", outcome.message)
            return SyncResult(status="no_changes", message=outcome.message, stage=stage.name)

        dependencies.observe_stage(stage.name, "success", outcome.detail)
        if isinstance(outcome, StageCompleted) and outcome.pull_request is not None:
            pull_request = outcome.pull_request

    return SyncResult(
        status="completed",
        message=COMPLETED_MESSAGE,
        stage=stages[-1].name if stages else None,
        pull_request=pull_request,
    )
