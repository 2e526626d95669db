from contextvars import ContextVar, Token

# Stage currently running; "-" outside of any stage.
_stage_ctx: ContextVar[str] = ContextVar("stage", default="-")


def set_current_stage(stage: str) -> Token[str]:
    return _stage_ctx.set(stage)


def get_current_stage() -> str:
    return _stage_ctx.get()


def reset_current_stage(token: Token[str]) -> None:
    _stage_ctx.reset(token)
