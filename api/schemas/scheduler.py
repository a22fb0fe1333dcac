"""
Pydantic schemas for the /scheduler endpoints.

SchemeInfo: one row of the policy table, as exposed over HTTP.
"""

from pydantic import BaseModel

from models.enums import SchedulingScheme


class SchemeInfo(BaseModel):
    """Response item for GET /scheduler/schemes."""

    scheme: SchedulingScheme
    preemptive: bool     # may an arrival take a busy core?
    uses_quantum: bool   # does the event source need to send quantum expiries?
