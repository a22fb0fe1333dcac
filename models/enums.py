"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("psjf", not "SchedulingScheme.PSJF")
- They work as FastAPI request fields and argparse choices
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingScheme(str, enum.Enum):
    FCFS = "fcfs"    # First Come First Served: ordered by arrival time
    RR = "rr"        # Round Robin: FIFO, rotated on quantum expiry
    SJF = "sjf"      # Shortest Job First: ordered by total burst time
    PSJF = "psjf"    # Preemptive SJF: ordered by remaining time, preempts on arrival
    PRI = "pri"      # Priority: lower value runs first
    PPRI = "ppri"    # Preemptive Priority: same ordering, preempts on arrival


class JobState(str, enum.Enum):
    UNSCHEDULED = "UNSCHEDULED"  # constructed, not yet placed anywhere
    WAITING = "WAITING"          # sitting in the ordered waiting list
    RUNNING = "RUNNING"          # owned by exactly one core
    FINISHED = "FINISHED"        # completed, counted in the statistics


class Preference(int, enum.Enum):
    """
    Result of a policy comparison between two jobs.

    UNORDERED means "no preference": the waiting list treats it as
    not-less and not-greater, so equally-ranked jobs keep arrival order.
    """
    LESS = -1       # left job is preferred (runs first)
    UNORDERED = 0
    GREATER = 1     # right job is preferred


class EventKind(int, enum.Enum):
    """
    Simulator event types. The integer value is the processing order for
    events that share a timestamp: a finishing job frees its core before a
    quantum expiry rotates the queue, and both happen before new arrivals.
    """
    COMPLETION = 0
    QUANTUM_EXPIRY = 1
    ARRIVAL = 2
