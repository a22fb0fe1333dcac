"""
First Come First Served (FCFS) policy.

The simplest scheduling policy: jobs run in the order they arrive.
The comparator ranks by arrival_time, so the waiting list behaves
as a FIFO queue. Jobs arriving at the same instant are unordered and
keep the order in which the engine saw them.

Non-preemptive: once a job has a core it keeps it until it finishes.

Downside: a long-running job blocks everything behind it
(the "convoy effect").
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.base import Policy, compare_keys


class FCFSPolicy(Policy):

    def compare(self, a: Job, b: Job) -> Preference:
        return compare_keys(a.arrival_time, b.arrival_time)

    @property
    def preemptive(self) -> bool:
        return False

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.FCFS
