# Standard library imports
from contextlib import asynccontextmanager
from typing import Optional

# Third-party imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

# Local application imports
from config import settings, logger
from errors import ValidationError, GoalNotFoundError, StorageError
from store import GoalStore, create_database_engine
from routers import goals, health


def create_app(store: Optional[GoalStore] = None) -> FastAPI:
    """
    Build the API application.

    The goal store is owned by the app. When none is given, one is created
    from settings on startup and disposed of on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        owns_store = store is None
        goal_store = store or GoalStore(create_database_engine(settings.DATABASE_URL))
        goal_store.create_tables()
        app.state.goal_store = goal_store
        logger.info("Application started with connection to the database")

        yield

        # Shutdown
        if owns_store:
            logger.info("Shutting down, closing connection to database")
            goal_store.dispose()

    app = FastAPI(lifespan=lifespan)
    app.title = "Goal Tracker - Backend"
    app.version = "0.1.0"

    # Include routers
    app.include_router(goals.router)
    app.include_router(health.router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Rejected goal: {exc}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request body: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})

    @app.exception_handler(GoalNotFoundError)
    async def not_found_handler(request: Request, exc: GoalNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Service Unavailable: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.get("/",
             tags=["Root"],
             summary="Welcome Endpoint",
             description="Returns a welcome message including the application title and version.")
    def root():
        return {"message": f"Welcome to {app.title} v{app.version}"}

    return app


def jsonable_errors(exc: RequestValidationError):
    return [{"loc": list(error.get("loc", [])), "msg": error.get("msg")} for error in exc.errors()]


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
