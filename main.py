from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from interfaces.api import router as task_router
from interfaces.errors import register_error_handlers
from application.use_cases import TaskUseCases
from infrastructure.database import Database
from infrastructure.seed import load_seed_tasks
from pathlib import Path
import logging
import os

# --- Basic Setup ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

TASKS_FILE = os.getenv("TASKS_FILE", str(Path(__file__).resolve().parent / "task.json"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))


def create_app(tasks_file: str | Path | None = None) -> FastAPI:
    """Build the API with a fresh task collection seeded from ``tasks_file``."""
    seed_path = tasks_file or TASKS_FILE
    logger.info(f"Seeding tasks from {seed_path}")
    db = Database(load_seed_tasks(seed_path))

    app = FastAPI(title="Tasks")
    app.state.use_cases = TaskUseCases(db)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(task_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server is listening on {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
