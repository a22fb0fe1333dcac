"""
Tests for the Round Robin policy.

The comparator never expresses a preference, so the waiting list is a
plain FIFO queue and a requeued job always lands at the back.
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.round_robin import RoundRobinPolicy
from scheduler.waiting_list import OrderedWaitingList


def _make_job(job_id, **kwargs) -> Job:
    return Job(
        job_id=job_id,
        arrival_time=kwargs.get("arrival_time", 0),
        burst_time=kwargs.get("burst_time", 1),
        priority=kwargs.get("priority", 5),
    )


def test_every_insert_is_an_append():
    waiting = OrderedWaitingList(RoundRobinPolicy().compare)

    assert waiting.insert(_make_job("a", arrival_time=5, burst_time=9)) == 0
    assert waiting.insert(_make_job("b", arrival_time=0, burst_time=1)) == 1
    assert waiting.insert(_make_job("c", priority=0)) == 2
    assert [job.job_id for job in waiting] == ["a", "b", "c"]


def test_requeue_sends_to_back():
    """The core Round Robin behavior: requeue moves job to the end."""
    waiting = OrderedWaitingList(RoundRobinPolicy().compare)
    for job_id in ("a", "b", "c"):
        waiting.insert(_make_job(job_id))

    job_a = waiting.pop_front()
    assert job_a.job_id == "a"
    waiting.insert(job_a)

    assert [job.job_id for job in waiting] == ["b", "c", "a"]


def test_compare_is_always_unordered():
    policy = RoundRobinPolicy()
    a = _make_job("a", arrival_time=0, burst_time=1, priority=1)
    b = _make_job("b", arrival_time=9, burst_time=9, priority=9)

    assert policy.compare(a, b) is Preference.UNORDERED
    assert policy.compare(b, a) is Preference.UNORDERED
    assert policy.prefers(a, b) is False


def test_flags():
    policy = RoundRobinPolicy()
    assert policy.preemptive is True
    assert policy.uses_quantum is True
    assert policy.scheme is SchedulingScheme.RR
