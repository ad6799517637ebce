from datetime import date as Date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# Input schema for the shift handover form; every field is optional free text
class HandoverLogForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: Optional[Date] = None
    time: Optional[str] = None
    outgoing_shift: Optional[str] = None
    outgoing_leader_first_name: Optional[str] = None
    outgoing_leader_last_name: Optional[str] = None
    emergency_equipment_status: Optional[str] = None
    hsse_incidents: Optional[str] = None
    permits_status: Optional[str] = None
    isolations_overrides_suppressions: Optional[str] = None
    reappraisal_needed: Optional[str] = None
    simops_issues: Optional[str] = None
    mocs_implemented: Optional[str] = None
    abnormal_operation_modes: Optional[str] = None
    changes_during_shift: Optional[str] = None
    changes_next_shift: Optional[str] = None
    equipment_availability_issues: Optional[str] = None
    personal_issues: Optional[str] = None
    general_communications: Optional[str] = None
    log_complete: Optional[str] = None
    briefing_leaders: Optional[str] = None
    briefing_workers: Optional[str] = None
    adequate_time: Optional[str] = None
    distraction_free_location: Optional[str] = None
    work_area_inspections: Optional[str] = None
    reappraisal_performed: Optional[str] = None
    leader_discussed_info: Optional[str] = None
    leader_signed_log: Optional[str] = None
    suggestions_for_improvement: Optional[str] = None
    incoming_shift: Optional[str] = None
    incoming_leader_first_name: Optional[str] = None
    incoming_leader_last_name: Optional[str] = None

    # Browsers submit untouched inputs as empty strings
    @field_validator("*", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        return _blank_to_none(v)


# Dashboard query parameters
class DashboardFilter(BaseModel):
    search: Optional[str] = None
    date: Optional[Date] = None

    @field_validator("search", mode="before")
    @classmethod
    def strip_search(cls, v):
        return _blank_to_none(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        v = _blank_to_none(v)
        if isinstance(v, str):
            # Raises ValueError for malformed dates
            return Date.fromisoformat(v.strip())
        return v
