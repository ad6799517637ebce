# backend/models/handover.py
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database import Base

# Column order of the submission form; the insert statement follows it
HANDOVER_FIELDS = (
    "date", "time", "outgoing_shift", "outgoing_leader_first_name",
    "outgoing_leader_last_name", "emergency_equipment_status", "hsse_incidents",
    "permits_status", "isolations_overrides_suppressions", "reappraisal_needed",
    "simops_issues", "mocs_implemented", "abnormal_operation_modes",
    "changes_during_shift", "changes_next_shift", "equipment_availability_issues",
    "personal_issues", "general_communications", "log_complete",
    "briefing_leaders", "briefing_workers", "adequate_time",
    "distraction_free_location", "work_area_inspections", "reappraisal_performed",
    "leader_discussed_info", "leader_signed_log", "suggestions_for_improvement",
    "incoming_shift", "incoming_leader_first_name", "incoming_leader_last_name",
)

# One submitted shift-handover form
class HandoverLog(Base):
    __tablename__ = "handover_logs"

    id = Column(Integer, primary_key=True, index=True)

    # Shift timing and the outgoing crew
    date = Column(Date, nullable=True, index=True)
    time = Column(String(20), nullable=True)
    outgoing_shift = Column(String(100), nullable=True)
    outgoing_leader_first_name = Column(String(100), nullable=True)
    outgoing_leader_last_name = Column(String(100), nullable=True)

    # Plant status and safety checklist
    emergency_equipment_status = Column(Text, nullable=True)
    hsse_incidents = Column(Text, nullable=True)
    permits_status = Column(Text, nullable=True)
    isolations_overrides_suppressions = Column(Text, nullable=True)
    reappraisal_needed = Column(String(50), nullable=True)
    simops_issues = Column(Text, nullable=True)
    mocs_implemented = Column(Text, nullable=True)
    abnormal_operation_modes = Column(Text, nullable=True)
    changes_during_shift = Column(Text, nullable=True)
    changes_next_shift = Column(Text, nullable=True)
    equipment_availability_issues = Column(Text, nullable=True)
    personal_issues = Column(Text, nullable=True)
    general_communications = Column(Text, nullable=True)

    # Handover quality sign-offs (yes/no style answers)
    log_complete = Column(String(50), nullable=True)
    briefing_leaders = Column(String(50), nullable=True)
    briefing_workers = Column(String(50), nullable=True)
    adequate_time = Column(String(50), nullable=True)
    distraction_free_location = Column(String(50), nullable=True)
    work_area_inspections = Column(String(50), nullable=True)
    reappraisal_performed = Column(String(50), nullable=True)
    leader_discussed_info = Column(String(50), nullable=True)
    leader_signed_log = Column(String(50), nullable=True)
    suggestions_for_improvement = Column(Text, nullable=True)

    # Incoming crew
    incoming_shift = Column(String(100), nullable=True)
    incoming_leader_first_name = Column(String(100), nullable=True)
    incoming_leader_last_name = Column(String(100), nullable=True)

    submitted_by_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    submitted_by = relationship("User", lazy="joined", uselist=False)
