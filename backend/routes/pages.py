# backend/routes/pages.py
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from utils.sessions import session_required

router = APIRouter(tags=["Pages"])

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
# Pages kept out of the public static mount
PRIVATE_DIR = Path(__file__).resolve().parent.parent / "templates"


# Public landing page
@router.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


# Submission form, only for logged-in users
@router.get("/form.html", include_in_schema=False, dependencies=[Depends(session_required)])
def handover_form():
    return FileResponse(PRIVATE_DIR / "form.html")
