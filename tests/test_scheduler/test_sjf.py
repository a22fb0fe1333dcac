"""
Tests for the SJF and PSJF policies.

SJF ranks by total burst time, PSJF by remaining time.
Ties are unordered, so the waiting list keeps arrival order.
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.sjf import SJFPolicy, PreemptiveSJFPolicy
from scheduler.waiting_list import OrderedWaitingList


def _make_job(job_id, burst: float, remaining: float = None) -> Job:
    job = Job(job_id=job_id, arrival_time=0, burst_time=burst, priority=5)
    if remaining is not None:
        job.remaining_time = remaining
    return job


def test_shortest_burst_first():
    """Core SJF guarantee: shortest burst comes out first."""
    waiting = OrderedWaitingList(SJFPolicy().compare)
    waiting.insert(_make_job("long", 10))
    waiting.insert(_make_job("short", 1))
    waiting.insert(_make_job("medium", 5))

    assert waiting.pop_front().job_id == "short"
    assert waiting.pop_front().job_id == "medium"
    assert waiting.pop_front().job_id == "long"


def test_equal_burst_preserves_insertion_order():
    waiting = OrderedWaitingList(SJFPolicy().compare)
    waiting.insert(_make_job("first", 3))
    waiting.insert(_make_job("second", 3))
    waiting.insert(_make_job("third", 3))

    assert [job.job_id for job in waiting] == ["first", "second", "third"]


def test_sjf_ignores_remaining_time():
    policy = SJFPolicy()
    nearly_done = _make_job("nearly_done", burst=10, remaining=1)
    fresh = _make_job("fresh", burst=5)

    assert policy.compare(fresh, nearly_done) is Preference.LESS


def test_psjf_ranks_by_remaining_time():
    policy = PreemptiveSJFPolicy()
    nearly_done = _make_job("nearly_done", burst=10, remaining=1)
    fresh = _make_job("fresh", burst=5)

    assert policy.compare(nearly_done, fresh) is Preference.LESS
    assert policy.compare(fresh, nearly_done) is Preference.GREATER


def test_psjf_equal_remaining_is_unordered():
    policy = PreemptiveSJFPolicy()
    a = _make_job("a", burst=5, remaining=3)
    b = _make_job("b", burst=3)

    assert policy.compare(a, b) is Preference.UNORDERED
    assert policy.prefers(b, a) is False


def test_flags():
    assert SJFPolicy().preemptive is False
    assert SJFPolicy().scheme is SchedulingScheme.SJF
    assert PreemptiveSJFPolicy().preemptive is True
    assert PreemptiveSJFPolicy().scheme is SchedulingScheme.PSJF
