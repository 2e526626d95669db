from pathlib import Path

from application.ports import ProcessRunner
from domain.constants import GTX_CLI_PACKAGE


def translation_environment(api_key: str, project_id: str | None) -> dict[str, str]:
    environment = {"GT_API_KEY": api_key}
    if project_id:
        environment["GT_PROJECT_ID"] = project_id
    return environment


def install_gtx_cli(working_directory: Path, *, runner: ProcessRunner) -> None:
    runner.run("npm", ["install", "-D", GTX_CLI_PACKAGE], cwd=working_directory)


def run_gtx_translate(
    working_directory: Path,
    api_key: str,
    project_id: str | None = None,
    *,
    runner: ProcessRunner,
) -> None:
    runner.run(
        "npx",
        [GTX_CLI_PACKAGE, "translate"],
        cwd=working_directory,
        env=translation_environment(api_key, project_id),
    )
