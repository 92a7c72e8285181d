from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
from interfaces.api import router as task_router
import uvicorn
import os
import logging

# --- Basic Setup ---
HOST = os.getenv("TODO_HOST", "0.0.0.0")
PORT = int(os.getenv("TODO_PORT", "8080"))
LOG_LEVEL = os.getenv("TODO_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("TODO_CORS_ORIGINS", "*").split(",") if o.strip()]
TEMPLATES_DIR = os.getenv(
    "TODO_TEMPLATES_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
)

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="To-Do List")
app.include_router(task_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=TEMPLATES_DIR)

logger.info(f"TEMPLATES_DIR: {TEMPLATES_DIR}")
logger.info(f"CORS_ORIGINS: {CORS_ORIGINS}")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and non-integer ids are client errors, reported as 400."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Serves the single-page front end."""
    return templates.TemplateResponse(request, "index.html", {"title": "Todo List"})


def run():
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
