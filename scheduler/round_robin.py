"""
Round Robin policy.

Each job runs for at most one time quantum. If it doesn't finish, the
event source reports a quantum expiry and the engine sends the job to
the back of the waiting list, then hands the core to whoever is at the
front.

The comparator never expresses a preference, so every insert into the
waiting list is an append:
- enqueue on arrival: back of the line
- requeue on quantum expiry: back of the line, behind everyone already waiting

Round Robin is flagged preemptive, but the preemption is driven by the
quantum timer, not by the comparator: an arrival can never displace a
running job because compare() never returns LESS.

Tradeoff: the quantum size controls fairness vs. switching overhead.
A very large quantum degenerates into FCFS.
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.base import Policy


class RoundRobinPolicy(Policy):

    def compare(self, a: Job, b: Job) -> Preference:
        return Preference.UNORDERED

    @property
    def preemptive(self) -> bool:
        return True

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.RR

    @property
    def uses_quantum(self) -> bool:
        return True
