"""
Run options passed explicitly to install units and the batch runner
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RunOptions:
    dry_run: bool = False
    force: bool = False
    continue_on_error: bool = False

    def unit_args(self) -> List[str]:
        """Flags forwarded to every install unit; --continue stays with the batch runner"""
        args = []
        if self.dry_run:
            args.append('--dry-run')
        if self.force:
            args.append('--force')
        return args
