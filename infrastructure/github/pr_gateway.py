import logging

import requests

from domain.constants import MISSING_TOKEN_MESSAGE
from domain.errors import PublishError
from domain.models import PullRequestRecord
from infrastructure.github.github_client import DEFAULT_API_URL, GitHubClient
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


class GitHubPullRequestPublisher:
    def __init__(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url
        self.session = session

    def create_pull_request(
        self,
        *,
        owner: str,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
        token: str | None,
    ) -> PullRequestRecord:
        if not token:
            raise PublishError(MISSING_TOKEN_MESSAGE)

        client = GitHubClient(
            token=token,
            owner=owner,
            repo=repo,
            api_url=self.api_url,
            session=self.session,
        )
        response = client.create_pr(head=head, base=base, title=title, body=body)
        try:
            pull_request = PullRequestRecord(
                url=str(response["html_url"]),
                number=int(response["number"]),
            )
        except (KeyError, TypeError, ValueError) as error:
            raise RuntimeError(f"Unexpected pull request response from GitHub: {error}") from error

        log_event(
            logger,
            logging.INFO,
            "github.pr.created",
            url=pull_request.url,
            number=pull_request.number,
        )
        return pull_request
