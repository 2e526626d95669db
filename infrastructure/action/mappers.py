from pathlib import Path
from typing import Mapping

from application.translation_sync import RunConfig
from infrastructure.action.schemas import ActionInputs


def to_run_config(
    inputs: ActionInputs,
    environ: Mapping[str, str],
    *,
    base_directory: Path | None = None,
) -> RunConfig:
    working_directory = (base_directory or Path.cwd()) / inputs.working_directory
    return RunConfig(
        working_directory=working_directory.resolve(),
        api_key=inputs.api_key,
        project_id=inputs.project_id or None,
        commit_message=inputs.commit_message,
        branch_name=inputs.branch_name or None,
        create_pull_request=inputs.create_pull_request,
        pull_request_title=inputs.pull_request_title,
        pull_request_body=inputs.pull_request_body,
        node_version=inputs.node_version,
        repository=environ.get("GITHUB_REPOSITORY") or None,
        ref=environ.get("GITHUB_REF") or None,
        github_token=environ.get("GITHUB_TOKEN") or None,
    )
