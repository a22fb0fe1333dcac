"""
Core registry — the fixed set of execution units.

Cores are numbered 0..num_cores-1 at start-up and never added or removed.
Each core is either idle or owns exactly one running job.

Lowest index wins: when several cores are idle, an arrival takes the
lowest-numbered one.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from models.errors import ConfigurationError, InvalidCoreIndexError
from models.job import Job


@dataclass
class Core:
    core_id: int
    job: Optional[Job] = None

    @property
    def idle(self) -> bool:
        return self.job is None

    def assign(self, job: Job) -> None:
        self.job = job

    def release(self) -> Optional[Job]:
        """Take the running job off this core (the core becomes idle)."""
        job, self.job = self.job, None
        return job


class CoreRegistry:

    def __init__(self, num_cores: int):
        if isinstance(num_cores, bool) or not isinstance(num_cores, int) or num_cores <= 0:
            raise ConfigurationError(
                f"Core count must be a positive integer, got {num_cores!r}"
            )
        self._cores = [Core(core_id=i) for i in range(num_cores)]

    def __getitem__(self, core_index: int) -> Core:
        if isinstance(core_index, bool) or not isinstance(core_index, int) \
                or not 0 <= core_index < len(self._cores):
            raise InvalidCoreIndexError(core_index, len(self._cores))
        return self._cores[core_index]

    def __len__(self) -> int:
        return len(self._cores)

    def __iter__(self) -> Iterator[Core]:
        return iter(self._cores)

    def first_idle(self) -> Optional[Core]:
        return next((core for core in self._cores if core.idle), None)

    def busy(self) -> list[Core]:
        """Cores currently running a job, in index order."""
        return [core for core in self._cores if not core.idle]

    def release_all(self) -> list[Job]:
        return [job for core in self._cores if (job := core.release()) is not None]
