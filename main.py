import logging
import os
from typing import Mapping

from dotenv import load_dotenv
from pydantic import ValidationError

from application.translation_sync import RunConfig, SyncDependencies, SyncResult, run_translation_sync
from domain.constants import PULL_REQUEST_NUMBER_OUTPUT, PULL_REQUEST_URL_OUTPUT
from infrastructure.action import workflow_commands
from infrastructure.action.inputs import read_action_inputs
from infrastructure.action.mappers import to_run_config
from infrastructure.action.sync_factory import build_sync_dependencies
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
)


logger = logging.getLogger(__name__)


def load_run_config(environ: Mapping[str, str]) -> RunConfig:
    inputs = read_action_inputs(environ)
    config = to_run_config(inputs, environ)
    register_sensitive_values(config.api_key, config.github_token)
    workflow_commands.add_mask(config.api_key)
    if config.github_token:
        workflow_commands.add_mask(config.github_token)
    return config


def emit_outputs(result: SyncResult, environ: Mapping[str, str]) -> None:
    pull_request = result.pull_request
    if pull_request is None:
        return

    outputs = {
        PULL_REQUEST_URL_OUTPUT: pull_request.url,
        PULL_REQUEST_NUMBER_OUTPUT: str(pull_request.number),
    }
    for name, value in outputs.items():
        if not workflow_commands.set_output(name, value, environ):
            workflow_commands.warning(f"GITHUB_OUTPUT is not set; output {name}={value} was not recorded")
        log_event(logger, logging.INFO, "action.output", name=name, value=value)


def run(
    environ: Mapping[str, str],
    dependencies: SyncDependencies | None = None,
) -> int:
    log_event(logger, logging.INFO, "action.start")
    try:
        config = load_run_config(environ)
    except ValidationError as error:
        message = safe_message(f"Invalid action inputs: {error}")
        log_event(logger, logging.ERROR, "action.inputs.invalid", error=message)
        workflow_commands.error(message)
        return 1

    log_event(logger, logging.INFO, "action.node_version", node_version=config.node_version)
    flow_dependencies = dependencies or build_sync_dependencies(environ)
    result = run_translation_sync(config, flow_dependencies)

    if result.failed:
        message = safe_message(result.message)
        log_event(logger, logging.ERROR, "action.failed", stage=result.stage, error=message)
        workflow_commands.error(message)
        return 1

    try:
        emit_outputs(result, environ)
    except OSError as error:
        message = safe_message(f"Failed to write action outputs: {error}")
        log_event(logger, logging.ERROR, "action.outputs.failed", error=message)
        workflow_commands.error(message)
        return 1

    log_event(logger, logging.INFO, "action.end", status=result.status, message=result.message)
    return 0


def main() -> None:
    load_dotenv()
    configure_logging()
    raise SystemExit(run(os.environ))


if __name__ == "__main__":
    main()
