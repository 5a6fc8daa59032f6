from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from skill_checker.routers import roles, scans, sessions

# Import config, logging and middleware
from skill_checker.utils import config
from skill_checker.utils.logging_config import configure_for_environment, get_logger
from skill_checker.middleware.error_handlers import ExceptionHandlerMiddleware, RequestLoggingMiddleware
from skill_checker.services.session_manager import session_manager

# Configure logging first
configure_for_environment()
logger = get_logger(__name__)

VERSION = "1.0.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info("Resume Skill Checker starting up...")
    logger.info(f"Environment: {config.ENVIRONMENT}, max upload: {config.MAX_UPLOAD_MB}MB")

    yield

    logger.info(f"Resume Skill Checker shutting down, discarding {len(session_manager)} session(s)")

app = FastAPI(title="Resume Skill Checker", version=VERSION, lifespan=lifespan)

# Add middleware in order (LIFO - Last In, First Out)
# Exception handler should be the outermost middleware
app.add_middleware(RequestLoggingMiddleware, slow_request_threshold=config.SLOW_REQUEST_THRESHOLD)
app.add_middleware(ExceptionHandlerMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
@app.head("/")
async def root():
    """Root endpoint - handles both GET and HEAD requests for health checks"""
    logger.debug("Root endpoint accessed")
    return {"message": "Welcome to the Resume Skill Checker API", "version": VERSION, "status": "ok"}

@app.get("/health")
@app.head("/health")
async def health_check():
    """Health check endpoint - handles both GET and HEAD requests"""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

# Include routers
app.include_router(roles.router, prefix="/api", tags=["roles"])
app.include_router(scans.router, prefix="/api", tags=["scans"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])

logger.info("Resume Skill Checker initialized successfully")
