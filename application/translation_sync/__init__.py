from application.translation_sync.contracts import (
    RunConfig,
    Stage,
    StageCompleted,
    StageFailed,
    StageHalted,
    SyncDependencies,
    SyncResult,
)
from application.translation_sync.use_case import STAGES, run_translation_sync

__all__ = [
    "RunConfig",
    "STAGES",
    "Stage",
    "StageCompleted",
    "StageFailed",
    "StageHalted",
    "SyncDependencies",
    "SyncResult",
    "run_translation_sync",
]
