from application.ports.process_runner import ProcessRunner
from application.ports.pull_request_publisher import PullRequestPublisher

__all__ = ["ProcessRunner", "PullRequestPublisher"]
