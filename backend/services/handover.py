# services/handover.py
import logging
from datetime import date as Date
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from models.handover import HANDOVER_FIELDS, HandoverLog
from schemas.handover import HandoverLogForm
from utils.errors import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

MANAGER_ROLE = "manager"


# Persist one submitted form for the given user
def create_handover_log(db: Session, payload: HandoverLogForm, *, user_id: int) -> HandoverLog:
    values = {field: getattr(payload, field) for field in HANDOVER_FIELDS}
    log = HandoverLog(**values, submitted_by_user_id=user_id)
    try:
        db.add(log)
        db.commit()
        db.refresh(log)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error inserting form data: %s", e)
        raise PersistenceError("handover log insert failed") from e

    logger.info("Handover log %s submitted by user %s", log.id, user_id)
    return log


def build_dashboard_query(
    db: Session,
    *,
    role: Optional[str],
    user_id: int,
    search: Optional[str] = None,
    date: Optional[Date] = None,
) -> Query:
    query = db.query(HandoverLog)

    # Managers see every log, anyone else only their own
    if role != MANAGER_ROLE:
        query = query.filter(HandoverLog.submitted_by_user_id == user_id)

    if search:
        term = f"%{search}%"
        query = query.filter(or_(
            HandoverLog.outgoing_shift.like(term),
            HandoverLog.outgoing_leader_first_name.like(term),
            HandoverLog.outgoing_leader_last_name.like(term),
        ))

    if date:
        query = query.filter(HandoverLog.date == date)

    # Newest first; id breaks ties between rows created in the same second
    return query.order_by(HandoverLog.created_at.desc(), HandoverLog.id.desc())


def list_handover_logs(
    db: Session,
    *,
    role: Optional[str],
    user_id: int,
    search: Optional[str] = None,
    date: Optional[Date] = None,
) -> List[HandoverLog]:
    try:
        return build_dashboard_query(db, role=role, user_id=user_id, search=search, date=date).all()
    except SQLAlchemyError as e:
        logger.exception("Error retrieving logs: %s", e)
        raise PersistenceError("handover log query failed") from e


def get_handover_log(db: Session, log_id: int) -> HandoverLog:
    try:
        log = db.query(HandoverLog).filter(HandoverLog.id == log_id).first()
    except SQLAlchemyError as e:
        logger.exception("Error retrieving log %s: %s", log_id, e)
        raise PersistenceError("handover log lookup failed") from e

    if log is None:
        raise NotFoundError("Handover log", log_id)
    return log
