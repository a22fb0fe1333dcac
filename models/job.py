"""
Job model — the unit of work the scheduler moves between cores and the waiting list.

Key design decisions:
- Plain dataclass, no persistence: a job lives only as long as the scheduler run
- remaining_time is only decremented while the job holds a core, so
  0 <= remaining_time <= burst_time always holds
- first_dispatch_time is write-once: the first core assignment sets it,
  later resumes after preemption or quantum expiry leave it alone
- last_resumed_at is the instant the current run on a core began. It is
  cleared whenever the job goes back to the waiting list so elapsed time
  is never charged twice

Lifecycle:
    UNSCHEDULED → WAITING ⇄ RUNNING → FINISHED
    UNSCHEDULED → RUNNING  (an idle core or a preemption picks it up directly)
"""

from dataclasses import dataclass, field
from typing import Hashable, Optional

from models.enums import JobState


@dataclass(eq=False)
class Job:
    job_id: Hashable
    arrival_time: float
    burst_time: float
    priority: int = 0              # lower value = higher priority (PRI/PPRI only)
    remaining_time: float = field(init=False)
    first_dispatch_time: Optional[float] = field(default=None, init=False)
    last_resumed_at: Optional[float] = field(default=None, init=False)
    state: JobState = field(default=JobState.UNSCHEDULED, init=False)

    def __post_init__(self):
        self.remaining_time = self.burst_time

    def dispatch(self, now: float) -> None:
        """Give the job a core at `now`."""
        if self.first_dispatch_time is None:
            self.first_dispatch_time = now
        self.last_resumed_at = now
        self.state = JobState.RUNNING

    def charge_until(self, now: float) -> None:
        """
        Subtract the service received since the last resume, then restart the
        clock at `now`. Used when the engine needs an up-to-date remaining_time
        for a job that keeps running.
        """
        if self.last_resumed_at is not None:
            elapsed = now - self.last_resumed_at
            self.remaining_time = max(0.0, self.remaining_time - elapsed)
        self.last_resumed_at = now

    def suspend(self) -> None:
        """Take the job off its core and mark it as waiting."""
        self.last_resumed_at = None
        self.state = JobState.WAITING

    def finish(self) -> None:
        self.remaining_time = 0.0
        self.last_resumed_at = None
        self.state = JobState.FINISHED

    def __repr__(self) -> str:
        return (
            f"<Job {self.job_id} {self.state.value} "
            f"remaining={self.remaining_time}/{self.burst_time}>"
        )
