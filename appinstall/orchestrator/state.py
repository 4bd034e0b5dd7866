"""
Run state - per-unit outcomes and the batch summary
"""

import enum
import time
from dataclasses import dataclass, field
from typing import List, Optional


class RunStatus(enum.Enum):
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'
    SKIPPED_DRY_RUN = 'skipped-dry-run'


@dataclass(frozen=True)
class RunOutcome:
    identifier: str
    file_name: str
    status: RunStatus
    returncode: Optional[int] = None


@dataclass
class RunSummary:
    """Outcomes of one batch run, in execution order"""

    dry_run: bool = False
    continue_on_error: bool = False
    outcomes: List[RunOutcome] = field(default_factory=list)
    not_run: List[str] = field(default_factory=list)
    aborted: bool = False
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None

    def record(self, outcome: RunOutcome):
        self.outcomes.append(outcome)

    def finish(self):
        self.end_time = time.time()

    def _with_status(self, status) -> List[RunOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def succeeded(self) -> List[str]:
        return [o.identifier for o in self._with_status(RunStatus.SUCCEEDED)]

    @property
    def failed(self) -> List[str]:
        return [o.identifier for o in self._with_status(RunStatus.FAILED)]

    @property
    def skipped(self) -> List[str]:
        return [o.identifier for o in self._with_status(RunStatus.SKIPPED_DRY_RUN)]

    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @property
    def elapsed(self) -> float:
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time

    @property
    def exit_status(self) -> int:
        """0 on success; dry runs never invoke units and always succeed"""
        if self.dry_run:
            return 0
        if self.aborted or self.failed:
            return 1
        return 0

    def get_summary(self) -> dict:
        return {
            "elapsed": self.elapsed,
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "skipped": len(self.skipped),
            "not_run": len(self.not_run),
            "failed_units": list(self.failed),
            "aborted": self.aborted,
            "exit_status": self.exit_status,
        }
