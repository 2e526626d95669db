from infrastructure.process.subprocess_runner import SubprocessRunner

__all__ = ["SubprocessRunner"]
