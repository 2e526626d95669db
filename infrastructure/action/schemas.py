from pydantic import BaseModel, ConfigDict, Field

from domain.constants import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_NODE_VERSION,
    DEFAULT_PULL_REQUEST_BODY,
    DEFAULT_PULL_REQUEST_TITLE,
    DEFAULT_WORKING_DIRECTORY,
)


class ActionInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_version: str = Field(default=DEFAULT_NODE_VERSION, min_length=1)
    working_directory: str = Field(default=DEFAULT_WORKING_DIRECTORY, min_length=1)
    api_key: str = ""
    project_id: str | None = None
    commit_message: str = Field(default=DEFAULT_COMMIT_MESSAGE, min_length=1)
    branch_name: str | None = None
    create_pull_request: bool = False
    pull_request_title: str = Field(default=DEFAULT_PULL_REQUEST_TITLE, min_length=1)
    pull_request_body: str = Field(default=DEFAULT_PULL_REQUEST_BODY, min_length=1)
