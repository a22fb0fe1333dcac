"""
Scheduler Engine — the dispatch core.

The engine is driven entirely by an external event source (the simulator,
the API, or a test). It never looks at a clock of its own: every entry
point receives the current time and must be called in non-decreasing
time order, one event at a time.

    on_arrival(job_id, t, burst, priority)  → core index or None
    on_completion(core, job_id, t)          → next job id on that core, or None
    on_quantum_expiry(core, t)              → next job id on that core, or None (RR only)

All the state a run needs (policy, cores, waiting list, statistics) lives
on the engine instance. There is no process-wide singleton: the caller
owns the engine and can run several side by side.

            on_arrival / on_completion / on_quantum_expiry
                               │
          ┌────────────────────┼─────────────────────┐
          ▼                    ▼                     ▼
    ┌──────────────┐     ┌──────────────┐     ┌──────────────┐
    │ CoreRegistry │<───>│ WaitingList  │     │ Statistics   │
    │ (who runs)   │     │ (who's next) │     │ (on finish)  │
    └──────────────┘     └──────────────┘     └──────────────┘

Tie-breaking is fixed so identical event sequences give identical schedules:
- several idle cores: the lowest index takes the arrival
- preemption victim: the running job that would sort last under the policy;
  among equally-ranked jobs the one on the highest core index is chosen,
  so lower-numbered cores keep their jobs
- equally-ranked waiting jobs: arrival order (stable insertion)
"""

import logging
from typing import Optional, Union

from models.enums import JobState, Preference, SchedulingScheme
from models.errors import (
    DuplicateJobError,
    JobNotRunningError,
    PrematureQueryError,
    QuantumNotSupportedError,
    SchedulerShutdownError,
)
from models.job import Job
from scheduler.base import Policy
from scheduler.cores import Core, CoreRegistry
from scheduler.registry import create_policy
from scheduler.stats import StatisticsAccumulator
from scheduler.waiting_list import OrderedWaitingList

logger = logging.getLogger(__name__)


class SchedulerEngine:
    """
    Decides which job occupies which core after every event.

    The engine doesn't execute jobs, it only ASSIGNS them. The event
    source is responsible for knowing when a job will actually finish
    or when its quantum runs out, and for calling back here.
    """

    def __init__(self, num_cores: int, scheme: Union[SchedulingScheme, str]):
        self.policy: Policy = create_policy(scheme)
        self.cores = CoreRegistry(num_cores)
        self.waiting = OrderedWaitingList(self.policy.compare)
        self.stats = StatisticsAccumulator()
        self._seen_job_ids: set = set()
        self._running = True
        logger.info(
            f"Scheduler started: {num_cores} core(s), scheme={self.policy.scheme.value}, "
            f"preemptive={self.policy.preemptive}"
        )

    @property
    def scheme(self) -> SchedulingScheme:
        return self.policy.scheme

    @property
    def preemptive(self) -> bool:
        return self.policy.preemptive

    # ── Event: arrival ──────────────────────────────────────────

    def on_arrival(self, job_id, arrival_time: float, burst_time: float,
                   priority: int = 0) -> Optional[int]:
        """
        A new job entered the system.

        Returns the index of the core it should run on (possibly a core
        whose previous job was just preempted), or None if it has to wait.
        """
        self._ensure_running()
        if job_id in self._seen_job_ids:
            raise DuplicateJobError(job_id)
        self._seen_job_ids.add(job_id)

        job = Job(job_id=job_id, arrival_time=arrival_time,
                  burst_time=burst_time, priority=priority)

        idle = self.cores.first_idle()
        if idle is not None:
            self._dispatch(idle, job, arrival_time)
            return idle.core_id

        if self.policy.preemptive:
            victim_core = self._find_preemption_victim(arrival_time)
            if self.policy.prefers(job, victim_core.job):
                self._preempt(victim_core, job, arrival_time)
                return victim_core.core_id

        job.state = JobState.WAITING
        position = self.waiting.insert(job)
        logger.debug(f"t={arrival_time}: job {job_id} waits at position {position}")
        return None

    def _find_preemption_victim(self, now: float) -> Core:
        """
        Bring every running job's remaining_time up to `now`, then return
        the core whose job is least preferred.

        Scanning in index order and moving the victim forward on anything
        that isn't strictly preferred means ties go to the highest index.
        """
        victim: Optional[Core] = None
        for core in self.cores.busy():
            core.job.charge_until(now)
            if victim is None or self.policy.compare(core.job, victim.job) is not Preference.LESS:
                victim = core
        return victim

    def _preempt(self, core: Core, job: Job, now: float) -> None:
        displaced = core.release()
        displaced.suspend()
        self.waiting.insert(displaced)
        self._dispatch(core, job, now)
        logger.debug(
            f"t={now}: job {job.job_id} preempted job {displaced.job_id} "
            f"on core {core.core_id} (remaining {displaced.remaining_time})"
        )

    # ── Event: completion ───────────────────────────────────────

    def on_completion(self, core_index: int, job_id, finish_time: float) -> Optional[int]:
        """
        The job on `core_index` finished at `finish_time`.

        Records its statistics, then returns the id of the job that takes
        over the core, or None if the core goes idle.
        """
        self._ensure_running()
        core = self.cores[core_index]
        if core.idle or core.job.job_id != job_id:
            running = None if core.idle else core.job.job_id
            raise JobNotRunningError(
                f"Core {core_index} is running {running}, not job {job_id}"
            )

        job = core.release()
        job.finish()
        self.stats.record(
            arrival_time=job.arrival_time,
            finish_time=finish_time,
            burst_time=job.burst_time,
            first_dispatch_time=job.first_dispatch_time,
        )
        logger.debug(f"t={finish_time}: job {job_id} finished on core {core_index}")

        return self._dispatch_next(core, finish_time)

    # ── Event: quantum expiry (Round Robin) ─────────────────────

    def on_quantum_expiry(self, core_index: int, expiry_time: float) -> Optional[int]:
        """
        The time slice of the job on `core_index` ran out.

        The job goes to the back of the waiting list and the front job
        takes the core. With nobody else waiting that is the same job again.
        """
        self._ensure_running()
        if not self.policy.uses_quantum:
            raise QuantumNotSupportedError(
                f"Quantum expiry is not defined for scheme {self.policy.scheme.value}"
            )
        core = self.cores[core_index]
        if core.idle:
            raise JobNotRunningError(f"Core {core_index} is idle, no quantum to expire")

        job = core.release()
        job.charge_until(expiry_time)
        job.suspend()
        self.waiting.insert(job)
        logger.debug(
            f"t={expiry_time}: quantum expired for job {job.job_id} on core {core_index} "
            f"(remaining {job.remaining_time})"
        )

        return self._dispatch_next(core, expiry_time)

    # ── Dispatch helpers ────────────────────────────────────────

    def _dispatch(self, core: Core, job: Job, now: float) -> None:
        job.dispatch(now)
        core.assign(job)
        logger.debug(f"t={now}: job {job.job_id} → core {core.core_id}")

    def _dispatch_next(self, core: Core, now: float) -> Optional[int]:
        job = self.waiting.pop_front()
        if job is None:
            logger.debug(f"t={now}: core {core.core_id} is idle")
            return None
        self._dispatch(core, job, now)
        return job.job_id

    # ── Statistics ──────────────────────────────────────────────

    def average_waiting_time(self) -> float:
        self._ensure_drained()
        return self.stats.average_waiting()

    def average_turnaround_time(self) -> float:
        self._ensure_drained()
        return self.stats.average_turnaround()

    def average_response_time(self) -> float:
        self._ensure_drained()
        return self.stats.average_response()

    def _ensure_drained(self) -> None:
        in_flight = len(self.cores.busy()) + self.waiting.size()
        if in_flight:
            raise PrematureQueryError(
                f"{in_flight} job(s) still running or waiting; averages would be partial"
            )

    # ── Introspection ───────────────────────────────────────────

    def running_job_id(self, core_index: int):
        """Id of the job on `core_index`, or None if the core is idle."""
        core = self.cores[core_index]
        return None if core.idle else core.job.job_id

    def render_queue(self) -> str:
        """
        One-line view of who runs where and who's next, e.g. "2(0) 4(1) 1(-1)".

        Running jobs come first with their core index, in core order;
        waiting jobs follow in queue order with -1.
        """
        parts = [f"{core.job.job_id}({core.core_id})" for core in self.cores.busy()]
        parts.extend(f"{job.job_id}(-1)" for job in self.waiting)
        return " ".join(parts)

    # ── Lifecycle ───────────────────────────────────────────────

    def shutdown(self) -> None:
        """Release every job reference. The engine refuses all calls afterwards."""
        if not self._running:
            return
        leftover = self.cores.release_all() + self.waiting.clear()
        if leftover:
            logger.warning(
                f"Shutting down with {len(leftover)} unfinished job(s): "
                f"{[job.job_id for job in leftover]}"
            )
        self._running = False
        logger.info(
            f"Scheduler shut down after {self.stats.completed_count} completed job(s)"
        )

    def _ensure_running(self) -> None:
        if not self._running:
            raise SchedulerShutdownError("Scheduler has been shut down")


def start(num_cores: int, scheme: Union[SchedulingScheme, str]) -> SchedulerEngine:
    """Create a scheduler for `num_cores` cores under `scheme`."""
    return SchedulerEngine(num_cores, scheme)
