# backend/main.py
from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from dotenv import load_dotenv
import logging

load_dotenv()

from config import settings
from database import init_db
from utils.errors import LoginRequired

# Router imports
from routes.pages import router as pages_router
from routes.auth import router as auth_router
from routes.handover import router as handover_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)

# Initialization
init_db()

app = FastAPI(title="Shift Handover Log", version="1.0.0")


# Session gate: protected routes send anonymous visitors to the login page
@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse("/login.html", status_code=status.HTTP_302_FOUND)


# Router registration
app.include_router(pages_router)
app.include_router(auth_router)
app.include_router(handover_router)

# Remaining public files; mounted last so it never shadows a route
STATIC_DIR = Path(__file__).resolve().parent / "static"
app.mount("/", StaticFiles(directory=STATIC_DIR), name="static")


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running at http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
