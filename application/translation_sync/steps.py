from domain.constants import BOT_EMAIL, BOT_NAME, GT_CONFIG_FILENAME, MISSING_TOKEN_MESSAGE
from domain.errors import ConfigurationError, PublishError
from domain.refs import resolve_base_branch, split_repository_slug

from application.translation_sync.contracts import (
    RunConfig,
    StageCompleted,
    StageHalted,
    StageOutcome,
    SyncDependencies,
)


NO_CHANGES_MESSAGE = "No translation changes detected. Skipping commit."


def validate_configuration(config: RunConfig, _: SyncDependencies) -> StageOutcome:
    # Nothing external may run before these checks pass.
    if not config.api_key:
        raise ConfigurationError("GT_API_KEY is required")

    working_directory = config.working_directory
    if not working_directory.is_dir():
        raise ConfigurationError(f"Working directory does not exist: {working_directory}")

    if not (working_directory / GT_CONFIG_FILENAME).is_file():
        raise ConfigurationError(f"{GT_CONFIG_FILENAME} not found in {working_directory}")

    detail = f"GT_PROJECT_ID is set to {config.project_id}" if config.project_id else None
    return StageCompleted(detail=detail)


def install_tool(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    dependencies.install_tool(config.working_directory)
    return StageCompleted(detail="Successfully installed gtx-cli")


def run_translations(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    dependencies.run_translations(config.working_directory, config.api_key, config.project_id)
    return StageCompleted(detail="Successfully ran translations")


def configure_git(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    dependencies.configure_identity(config.working_directory, BOT_NAME, BOT_EMAIL)
    return StageCompleted(detail="Git configuration complete")


def detect_changes(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    if not dependencies.has_pending_changes(config.working_directory):
        return StageHalted(message=NO_CHANGES_MESSAGE)
    return StageCompleted(detail="Changes detected, proceeding with commit")


def create_branch(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    dependencies.create_branch(config.working_directory, config.branch_name)
    return StageCompleted(detail=f"Created branch: {config.branch_name}")


def commit_and_push(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    dependencies.commit_all(config.working_directory, config.commit_message)
    dependencies.push(config.working_directory, config.branch_name)
    target = config.branch_name or "current branch"
    return StageCompleted(detail=f"Pushed changes to {target}")


def publish_pull_request(config: RunConfig, dependencies: SyncDependencies) -> StageOutcome:
    if not config.github_token:
        raise PublishError(MISSING_TOKEN_MESSAGE)
    owner, repo = split_repository_slug(config.repository)
    pull_request = dependencies.create_pull_request(
        owner=owner,
        repo=repo,
        title=config.pull_request_title,
        body=config.pull_request_body,
        head=config.branch_name,
        base=resolve_base_branch(config.ref),
        token=config.github_token,
    )
    return StageCompleted(
        detail=f"Pull request created: {pull_request.url}",
        pull_request=pull_request,
    )


def has_branch(config: RunConfig) -> bool:
    return bool(config.branch_name)


def wants_pull_request(config: RunConfig) -> bool:
    # A pull request needs a head branch distinct from the one the run started on.
    return config.create_pull_request and bool(config.branch_name)
