"""Play and batch harness for tombcrawler."""

from .models import (
    Marking,
    SolvedState,
    HintStatus,
    MoveDirection,
    CheckCase,
    BatchConfig,
    CaseResult,
    BatchResult,
)
from .session import PlaySession
from .runner import BatchRunner
from .play import run_play_loop, render_session

__all__ = [
    "Marking",
    "SolvedState",
    "HintStatus",
    "MoveDirection",
    "CheckCase",
    "BatchConfig",
    "CaseResult",
    "BatchResult",
    "PlaySession",
    "BatchRunner",
    "run_play_loop",
    "render_session",
]
