"""
Discrete-event simulation — the event source that drives SchedulerEngine.

The engine only decides WHO runs WHERE. This module plays the part of the
hardware and the clock: it knows how long each job really needs, so it
knows when a job will finish or when its quantum runs out, and it calls
the engine back at exactly those instants.

Event loop:

    heap of (time, kind, seq) ──pop──> ARRIVAL          → engine.on_arrival
                                       COMPLETION       → engine.on_completion
                                       QUANTUM_EXPIRY   → engine.on_quantum_expiry
                   ▲                                           │
                   └──── push completion / expiry for ─────────┘
                         whatever job the engine dispatched

At equal timestamps completions go first, then quantum expiries, then
arrivals (see EventKind). Each core carries a dispatch generation: a
completion or expiry scheduled for a job that has since been preempted
carries an old generation and is discarded when popped.
"""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from config.settings import settings
from models.enums import EventKind, SchedulingScheme
from models.errors import ConfigurationError
from scheduler.engine import SchedulerEngine, start
from simulator.workload import JobSpec

logger = logging.getLogger(__name__)

_EPSILON = 1e-9


@dataclass(order=True)
class _Event:
    time: float
    kind: EventKind
    seq: int
    core_index: Optional[int] = field(default=None, compare=False)
    generation: int = field(default=0, compare=False)
    spec: Optional[JobSpec] = field(default=None, compare=False)


@dataclass
class JobOutcome:
    """What happened to one job, as observed by the event source."""
    job_id: int
    arrival_time: float
    burst_time: float
    priority: int
    first_start_time: Optional[float] = None
    finish_time: Optional[float] = None

    @property
    def turnaround_time(self) -> float:
        return self.finish_time - self.arrival_time

    @property
    def waiting_time(self) -> float:
        return self.turnaround_time - self.burst_time

    @property
    def response_time(self) -> float:
        return self.first_start_time - self.arrival_time


@dataclass
class SimulationResult:
    scheme: SchedulingScheme
    num_cores: int
    quantum: Optional[float]
    outcomes: list[JobOutcome]
    average_waiting_time: float
    average_turnaround_time: float
    average_response_time: float
    makespan: float
    dispatch_log: list[tuple[float, int, int]] = field(default_factory=list)

    def outcome(self, job_id) -> JobOutcome:
        for o in self.outcomes:
            if o.job_id == job_id:
                return o
        raise KeyError(f"No outcome for job {job_id}")


class Simulation:
    """
    Runs one workload through one scheduler, start to finish.

    A Simulation is single-use: run() returns the same result if called again.
    """

    def __init__(self, jobs: Sequence[JobSpec], num_cores: int,
                 scheme: Union[SchedulingScheme, str], quantum: Optional[float] = None):
        if not jobs:
            raise ConfigurationError("Workload is empty, nothing to simulate")

        self.engine: SchedulerEngine = start(num_cores, scheme)
        self._quantum: Optional[float] = None
        if self.engine.policy.uses_quantum:
            self._quantum = settings.ROUND_ROBIN_TIME_QUANTUM if quantum is None else quantum
            if not math.isfinite(self._quantum) or self._quantum <= 0:
                raise ConfigurationError(
                    f"Quantum must be a positive finite number, got {self._quantum}"
                )

        # Stable sort: jobs arriving together keep their trace order
        self._jobs = sorted(jobs, key=lambda spec: spec.arrival_time)
        self._num_cores = num_cores
        self._events: list[_Event] = []
        self._seq = itertools.count()

        self._remaining: dict = {}
        self._on_core: list = [None] * num_cores
        self._slice_start: list[Optional[float]] = [None] * num_cores
        self._generation: list[int] = [0] * num_cores
        self._outcomes: dict = {}
        self._dispatch_log: list[tuple[float, int, int]] = []
        self._result: Optional[SimulationResult] = None

    def run(self) -> SimulationResult:
        if self._result is not None:
            return self._result

        for spec in self._jobs:
            self._push(spec.arrival_time, EventKind.ARRIVAL, spec=spec)

        now = 0.0
        while self._events:
            event = heapq.heappop(self._events)
            now = event.time

            if event.kind is EventKind.ARRIVAL:
                self._handle_arrival(event.spec, now)
            elif event.generation != self._generation[event.core_index]:
                continue  # stale: the job was preempted after this was scheduled
            elif event.kind is EventKind.COMPLETION:
                self._handle_completion(event.core_index, now)
            else:
                self._handle_quantum_expiry(event.core_index, now)

            logger.debug(f"t={now}: {self.engine.render_queue()}")

        result = SimulationResult(
            scheme=self.engine.scheme,
            num_cores=self._num_cores,
            quantum=self._quantum,
            outcomes=[self._outcomes[spec.job_id] for spec in self._jobs],
            average_waiting_time=self.engine.average_waiting_time(),
            average_turnaround_time=self.engine.average_turnaround_time(),
            average_response_time=self.engine.average_response_time(),
            makespan=now,
            dispatch_log=self._dispatch_log,
        )
        self.engine.shutdown()
        logger.info(
            f"Simulated {len(self._jobs)} jobs under {result.scheme.value}: "
            f"avg wait={result.average_waiting_time:.3f} "
            f"turnaround={result.average_turnaround_time:.3f} "
            f"response={result.average_response_time:.3f}"
        )
        self._result = result
        return result

    # ── Event handlers ──────────────────────────────────────────

    def _handle_arrival(self, spec: JobSpec, now: float) -> None:
        core_index = self.engine.on_arrival(
            spec.job_id, now, spec.burst_time, spec.priority
        )
        self._remaining[spec.job_id] = spec.burst_time
        self._outcomes[spec.job_id] = JobOutcome(
            job_id=spec.job_id,
            arrival_time=spec.arrival_time,
            burst_time=spec.burst_time,
            priority=spec.priority,
        )
        if core_index is None:
            return

        displaced = self._on_core[core_index]
        if displaced is not None:
            self._charge(core_index, now)
            logger.debug(
                f"t={now}: job {displaced} displaced from core {core_index} "
                f"with {self._remaining[displaced]} left"
            )
        self._start(core_index, spec.job_id, now)

    def _handle_completion(self, core_index: int, now: float) -> None:
        job_id = self._on_core[core_index]
        self._remaining[job_id] = 0
        self._outcomes[job_id].finish_time = now
        self._vacate(core_index)

        next_id = self.engine.on_completion(core_index, job_id, now)
        if next_id is not None:
            self._start(core_index, next_id, now)

    def _handle_quantum_expiry(self, core_index: int, now: float) -> None:
        self._charge(core_index, now)
        self._vacate(core_index)

        next_id = self.engine.on_quantum_expiry(core_index, now)
        if next_id is not None:
            self._start(core_index, next_id, now)

    # ── Core bookkeeping ────────────────────────────────────────

    def _start(self, core_index: int, job_id, now: float) -> None:
        self._generation[core_index] += 1
        self._on_core[core_index] = job_id
        self._slice_start[core_index] = now
        self._dispatch_log.append((now, core_index, job_id))

        outcome = self._outcomes[job_id]
        if outcome.first_start_time is None:
            outcome.first_start_time = now

        generation = self._generation[core_index]
        remaining = self._remaining[job_id]
        if self._quantum is not None and remaining > self._quantum + _EPSILON:
            self._push(now + self._quantum, EventKind.QUANTUM_EXPIRY,
                       core_index=core_index, generation=generation)
        else:
            self._push(now + remaining, EventKind.COMPLETION,
                       core_index=core_index, generation=generation)

    def _charge(self, core_index: int, now: float) -> None:
        job_id = self._on_core[core_index]
        self._remaining[job_id] -= now - self._slice_start[core_index]

    def _vacate(self, core_index: int) -> None:
        self._on_core[core_index] = None
        self._slice_start[core_index] = None

    def _push(self, time: float, kind: EventKind, **payload) -> None:
        heapq.heappush(self._events, _Event(time, kind, next(self._seq), **payload))


def simulate(jobs: Sequence[JobSpec], num_cores: int,
             scheme: Union[SchedulingScheme, str],
             quantum: Optional[float] = None) -> SimulationResult:
    """Convenience wrapper: build a Simulation and run it."""
    return Simulation(jobs, num_cores, scheme, quantum).run()
