"""
Error taxonomy for the scheduler.

Every operation is a pure in-memory state transition, so nothing here is
ever retried: errors are raised synchronously to whoever made the call.

Two of the errors also inherit a builtin (ValueError / IndexError) so
callers that only know the standard hierarchy still catch them.
"""


class SchedulerError(Exception):
    """Base class for everything the scheduler raises on purpose."""


class ConfigurationError(SchedulerError, ValueError):
    """Bad start-up input: non-positive core count, unknown scheme, bad quantum or trace row."""


class DuplicateJobError(SchedulerError):
    def __init__(self, job_id):
        super().__init__(f"Job {job_id} has already arrived")
        self.job_id = job_id


class InvalidCoreIndexError(SchedulerError, IndexError):
    def __init__(self, core_index, num_cores: int):
        super().__init__(
            f"Core index {core_index} is out of range (0..{num_cores - 1})"
        )
        self.core_index = core_index


class IndexOutOfRangeError(SchedulerError, IndexError):
    def __init__(self, index, size: int):
        super().__init__(f"Waiting list position {index} is out of range (size {size})")
        self.index = index


class JobNotRunningError(SchedulerError):
    """A completion or quantum expiry was addressed to a core that isn't running that job."""


class QuantumNotSupportedError(SchedulerError):
    """Quantum expiry only means something under Round Robin."""


class NoCompletedJobsError(SchedulerError):
    """Averages were requested before a single job completed."""


class PrematureQueryError(SchedulerError):
    """Averages were requested while jobs are still running or waiting."""


class SchedulerShutdownError(SchedulerError):
    """An entry point was called after shutdown()."""
