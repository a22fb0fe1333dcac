"""
Shortest Job First (SJF) and its preemptive variant (PSJF).

SJF ranks waiting jobs by their total burst_time: the shortest job gets
the next free core. This minimizes average waiting time across all jobs
when every job is known up front.

PSJF (a.k.a. Shortest Remaining Time First) ranks by remaining_time
instead, and is preemptive: when a job arrives and every core is busy,
the engine brings each running job's remaining_time up to date and
lets the newcomer take the core of the longest-remaining running job
if the newcomer is strictly shorter.

Equal keys are unordered, so ties fall back to arrival order.

Downside: starvation. A long job might never run if short jobs keep
arriving.
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.base import Policy, compare_keys


class SJFPolicy(Policy):

    def compare(self, a: Job, b: Job) -> Preference:
        return compare_keys(a.burst_time, b.burst_time)

    @property
    def preemptive(self) -> bool:
        return False

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.SJF


class PreemptiveSJFPolicy(Policy):

    def compare(self, a: Job, b: Job) -> Preference:
        return compare_keys(a.remaining_time, b.remaining_time)

    @property
    def preemptive(self) -> bool:
        return True

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.PSJF
