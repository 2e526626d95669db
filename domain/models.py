from dataclasses import dataclass


@dataclass(frozen=True)
class CapturedOutput:
    exit_code: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class PullRequestRecord:
    url: str
    number: int
