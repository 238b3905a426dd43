import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import alembic.config
import alembic.command
from statsapi.core.database import dispose_engines
from statsapi.core.exceptions import (
    InvalidRequestFileError,
    InvalidTitleError,
    MalformedDirectiveError,
    NotFoundError,
    QueryExecutionError,
    StatisticsError,
)
from statsapi.api.router import api_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run_migrations():
    """Sync function to run migrations"""
    alembic_cfg = alembic.config.Config("alembic.ini")
    alembic.command.upgrade(alembic_cfg, "head")


# Close the engines once everything is done and close all the sessions
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Apply any pending migrations automatically when the app starts
    try:
        await asyncio.to_thread(run_migrations)
        logger.info("Migrations applied successfully (or already up-to-date)")
    except Exception as e:
        logger.error(f"Migration error during startup: {e}")

    yield
    await dispose_engines()


app = FastAPI(title="Statistics API", lifespan=lifespan)

# Include the master router containing all our endpoints
app.include_router(api_router)


ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    MalformedDirectiveError: status.HTTP_400_BAD_REQUEST,
    InvalidTitleError: status.HTTP_400_BAD_REQUEST,
    QueryExecutionError: status.HTTP_502_BAD_GATEWAY,
    InvalidRequestFileError: 422,
}


@app.exception_handler(StatisticsError)
async def statistics_error_handler(request: Request, error: StatisticsError):
    status_code = ERROR_STATUS.get(
        type(error), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning(f"{request.method} {request.url.path} failed: {error.message}")
    return JSONResponse(status_code=status_code, content={"detail": error.message})


@app.get("/")
async def root():
    return {"message": "Welcome to the Statistics API"}
