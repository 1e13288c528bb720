import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field

from .models import BatchConfig, BatchResult, CaseResult, CheckCase
from ..checker.check import check_solution
from ..checker.parsing import load_level
from ..checker.solution import WallGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class BatchRunner(BaseModel):
    """
    Checks a batch of level/solution pairs.

    Relative case paths resolve against ``base_dir``, normally the directory
    holding the batch config.

    Attributes:
        config: Batch configuration
        base_dir: Directory case paths are resolved against
        results: Outcomes of the cases checked so far
    """

    config: BatchConfig = Field(default_factory=BatchConfig)
    base_dir: Path = Path(".")
    results: List[CaseResult] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: BatchConfig,
        base_dir: Optional[Path] = None,
    ) -> "BatchRunner":
        """
        Factory method to create a runner for a config.

        Args:
            config: The batch configuration
            base_dir: Directory relative case paths resolve against

        Returns:
            Configured BatchRunner instance
        """
        return cls(config=config, base_dir=Path(base_dir) if base_dir else Path("."))

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.base_dir / candidate

    def check_case(self, case: CheckCase) -> CaseResult:
        """Load and check a single case. Unreadable files are recorded, not raised."""
        try:
            level = load_level(self._resolve(case.level).read_text())
            solution = WallGrid.from_text(self._resolve(case.solution).read_text())
        except (OSError, ValueError) as e:
            LOGGER.warning("could not load case %s: %s", case.name, e)
            return CaseResult(name=case.name, expected=case.expect, error=str(e))

        failure = check_solution(level.puzzle, solution)
        actual = failure.reason if failure else None
        return CaseResult(
            name=case.name,
            solved=failure is None,
            failure=failure,
            expected=case.expect,
            matched_expectation=actual == case.expect,
        )

    def run(self, verbose: bool = False) -> BatchResult:
        """
        Check every case in the config.

        Args:
            verbose: If True, print progress to stdout

        Returns:
            BatchResult with every case outcome
        """
        self.started_at = datetime.now()
        self.results = []

        if verbose:
            print(f"Checking {self.config.num_cases} cases")
            print("-" * 40)

        for case in self.config.cases:
            result = self.check_case(case)
            self.results.append(result)

            if verbose:
                if result.error:
                    print(f"❌ {case.name}: {result.error}")
                elif result.solved:
                    print(f"✓ {case.name}: solved")
                else:
                    print(f"✗ {case.name}: {result.failure.message}")
                if not result.error and not result.matched_expectation:
                    print(f"  ⚠ expected {case.expect or 'a solved board'}")

        return self.get_result()

    def get_result(self) -> BatchResult:
        """
        Get the batch result.

        Returns:
            BatchResult containing all case outcomes and totals
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return BatchResult(
            config=self.config,
            results=self.results,
            total_cases=len(self.results),
            solved_count=sum(1 for r in self.results if r.solved),
            matched_count=sum(1 for r in self.results if r.matched_expectation),
            error_count=sum(1 for r in self.results if r.error),
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the batch result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
