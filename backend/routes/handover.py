# backend/routes/handover.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.orm import Session

from database import get_db
from models.session import ServerSession
from schemas.handover import DashboardFilter, HandoverLogForm
from services.handover import create_handover_log, get_handover_log, list_handover_logs
from utils.errors import NotFoundError, PersistenceError
from utils.sessions import get_current_session, session_required

router = APIRouter(tags=["Handover"])
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


# Store a submitted handover form; checks the session itself instead of relying on the gate
@router.post("/submit-form")
async def submit_form(
    request: Request,
    db: Session = Depends(get_db),
    current: Optional[ServerSession] = Depends(get_current_session),
):
    if current is None:
        return PlainTextResponse("Unauthorized: Please log in.", status_code=status.HTTP_401_UNAUTHORIZED)

    form = await request.form()
    try:
        payload = HandoverLogForm.model_validate(dict(form))
    except ValidationError as e:
        logger.info("Rejected handover form from user %s: %s", current.user_id, e.errors())
        return PlainTextResponse("Invalid form data.", status_code=422)

    try:
        create_handover_log(db, payload, user_id=current.user_id)
    except PersistenceError:
        return PlainTextResponse("Error submitting form data.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)


# List handover logs visible to the current session
@router.get("/dashboard")
def dashboard(
    request: Request,
    search: Optional[str] = Query(None, description="Search outgoing shift or leader name"),
    date: Optional[str] = Query(None, description="Shift date (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    current: ServerSession = Depends(session_required),
):
    context = {"role": current.role, "search": search or "", "date": date or ""}

    try:
        filters = DashboardFilter(search=search, date=date)
    except ValidationError:
        # A date that cannot match any row narrows the result to nothing
        logger.info("Malformed dashboard date filter: %r", date)
        return templates.TemplateResponse(request, "dashboard.html", {**context, "logs": []})

    try:
        logs = list_handover_logs(
            db,
            role=current.role,
            user_id=current.user_id,
            search=filters.search,
            date=filters.date,
        )
    except PersistenceError:
        return PlainTextResponse("Error retrieving logs.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    context["search"] = filters.search or ""
    context["date"] = filters.date.isoformat() if filters.date else ""
    return templates.TemplateResponse(request, "dashboard.html", {**context, "logs": logs})


# Show a single handover log
@router.get("/log/{log_id}")
def log_details(
    log_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current: ServerSession = Depends(session_required),
):
    try:
        log = get_handover_log(db, log_id)
    except NotFoundError:
        return PlainTextResponse("Log not found.", status_code=status.HTTP_404_NOT_FOUND)
    except PersistenceError:
        return PlainTextResponse("Error retrieving log.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return templates.TemplateResponse(request, "log_details.html", {"log": log, "role": current.role})
