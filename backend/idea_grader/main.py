import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .constants import BAD_REQUEST_MESSAGE, DIMENSION_NAMES, IDEA_TOO_SHORT_MESSAGE
from .routers.evaluate import router as evaluate_router

config.configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    logger.info("Starting Idea Grader")
    logger.info("   Rubric dimensions: %d", len(DIMENSION_NAMES))
    logger.info("   Debug mode: %s", config.DEBUG)
    logger.info("   Ready to grade pitches!")

    yield

    logger.info("Shutting down Idea Grader")


app = FastAPI(
    title="Idea Grader",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(evaluate_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Idea Grader",
        "version": "0.1.0",
        "description": "Rubric-based business idea scoring",
        "docs": "/docs",
        "endpoints": {
            "evaluate": "POST /api/evaluate - Score a business idea",
            "sample": "GET /api/evaluate/sample - Example pitch",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "idea-grader",
        "version": "0.1.0"
    }


def _is_unreadable_body(err: dict) -> bool:
    """Undecodable JSON, or no body at all."""
    if err.get("type") == "json_invalid":
        return True
    return err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Collapse request validation failures into the 400 ``{"error": ...}`` contract."""
    errors = exc.errors()
    if any(_is_unreadable_body(err) for err in errors):
        message = BAD_REQUEST_MESSAGE
    else:
        message = IDEA_TOO_SHORT_MESSAGE
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if config.DEBUG else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "idea_grader.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
    )
