import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import SessionLocal
from app.core.errors import register_error_handlers
from app.routers.auth import router as auth_router
from app.routers.employees import router as employees_router
from app.services.seed import seed_demo_employees

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("Starting Employee Directory API")
    if settings.seed_on_startup:
        db = SessionLocal()
        try:
            seed_demo_employees(db)
        finally:
            db.close()
    yield
    logger.info("Shutting down Employee Directory API")


app = FastAPI(title="Employee Directory API", lifespan=lifespan)

# Comma-separated list, e.g.:
# CORS_ORIGINS="http://localhost:3000,https://directory.example.com"
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are input errors like any other: 400, not 422."""
    errors = [
        {
            "field": ".".join(str(x) for x in err["loc"] if x != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Request validation failed", "code": "validation_failed", "errors": errors},
    )


app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(employees_router, prefix="/employees", tags=["employees"])

@app.get("/")
def root():
    return {"ok": True, "service": "employee-directory-api"}

@app.get("/health")
def health():
    return {"status": "ok"}
