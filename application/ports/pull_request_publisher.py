from typing import Protocol

from domain.models import PullRequestRecord


class PullRequestPublisher(Protocol):
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
        """Open a pull request, raising PublishError when it cannot be created."""
