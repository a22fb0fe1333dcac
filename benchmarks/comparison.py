"""
Scheme comparison — runs one workload under each scheduling scheme.

How it works:
1. Load (or receive) a list of jobs
2. Simulate the workload once per scheme, each with a fresh scheduler
3. Collect the three averages plus the makespan for each scheme

This gives comparable numbers for the same input, e.g.:
"on proc2.csv with 2 cores, PSJF halves the average waiting time of FCFS".

Every run is deterministic, so there is no warm-up or repetition.
"""

import logging
from typing import Iterable, Optional, Sequence

from models.enums import SchedulingScheme
from simulator.runner import simulate
from simulator.workload import JobSpec

logger = logging.getLogger(__name__)


class SchemeComparison:

    def __init__(self, jobs: Sequence[JobSpec], num_cores: int = 1,
                 quantum: Optional[float] = None):
        self.jobs = list(jobs)
        self.num_cores = num_cores
        self.quantum = quantum

    def run(self, scheme: SchedulingScheme) -> dict:
        """Simulate the workload under a single scheme."""
        result = simulate(self.jobs, self.num_cores, scheme, self.quantum)
        return {
            "scheme": result.scheme.value,
            "num_cores": result.num_cores,
            "avg_waiting_time": round(result.average_waiting_time, 3),
            "avg_turnaround_time": round(result.average_turnaround_time, 3),
            "avg_response_time": round(result.average_response_time, 3),
            "makespan": result.makespan,
        }

    def run_all(self, schemes: Optional[Iterable[SchedulingScheme]] = None) -> list[dict]:
        """Simulate the workload under every scheme (or the given ones), in table order."""
        results = []
        for scheme in schemes or SchedulingScheme:
            logger.info(f"Simulating {len(self.jobs)} jobs under {scheme.value}")
            results.append(self.run(scheme))
        return results
