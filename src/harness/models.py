"""
Pydantic models for the harness layer.

This module contains the data models (markings, session states, batch
configurations and results) used by the play session and the batch runner.
The logic classes (PlaySession, BatchRunner) remain in their own files.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from ..checker.models import Failure, FailureReason


# Type aliases
Marking = Literal["WALL", "EMPTY"]
SolvedState = Literal["JUST_STARTED", "SUCCESS", "FAIL"]
HintStatus = Literal["MET", "OVER", "UNDER"]
MoveDirection = Literal["NORTH", "EAST", "SOUTH", "WEST"]


class CheckCase(BaseModel):
    """A single level/solution pair to check."""
    name: str
    level: str  # Path to a .ttc level file
    solution: str  # Path to a solution text file
    expect: Optional[FailureReason] = None  # None means the solution should pass


class BatchConfig(BaseModel):
    """Configuration for a batch checking run."""
    cases: List[CheckCase] = Field(default_factory=list)

    @property
    def num_cases(self) -> int:
        """Number of cases in the batch."""
        return len(self.cases)


class CaseResult(BaseModel):
    """Outcome of checking one case."""
    name: str
    solved: bool = False
    failure: Optional[Failure] = None
    expected: Optional[FailureReason] = None
    matched_expectation: bool = False
    error: Optional[str] = None  # Set when the case files could not be loaded


class BatchResult(BaseModel):
    """Result of a complete batch run."""
    config: BatchConfig
    results: List[CaseResult] = Field(default_factory=list)
    total_cases: int = 0
    solved_count: int = 0
    matched_count: int = 0
    error_count: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
