import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.core.errors import DomainError
from app.database import init_db, engine
from app.logging_config import setup_logging
from app.routers import applications, companies, interviews, job_offers, recruiters, recruits, users

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Talent Management API",
    description="Recruiters post job offers, recruits apply, interviews get scheduled.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(users.router)
app.include_router(recruiters.router)
app.include_router(recruits.router)
app.include_router(companies.router)
app.include_router(job_offers.router)
app.include_router(applications.router)
app.include_router(interviews.router)


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    if exc.status_code >= 500:
        logger.error("Domain error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"
PLACEHOLDER_DB_CREDENTIALS = "username:password@"


def placeholder_settings() -> list[str]:
    """Names of settings still holding the values shipped in .env.example."""
    found = []
    if settings.secret_key == PLACEHOLDER_SECRET_KEY:
        found.append("SECRET_KEY")
    if PLACEHOLDER_DB_CREDENTIALS in settings.database_url:
        found.append("DATABASE_URL")
    return found


@app.on_event("startup")
def on_startup():
    logger.info("Starting Talent Management API (env=%s)", settings.app_env)
    placeholders = placeholder_settings()
    if placeholders and settings.is_production:
        raise RuntimeError(f"Placeholder values are not allowed in production: {', '.join(placeholders)}")
    for name in placeholders:
        logger.warning("%s uses the .env.example placeholder. Set a real value before deploying.", name)
    init_db()


@app.get("/")
def root():
    return {"message": "Talent Management API. Browse open positions at /api/jobOffers."}
