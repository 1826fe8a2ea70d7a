import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.api import health, symptoms, mistral, medical_library
from app.config import settings, log_settings_summary
from app.middleware.request_logger import log_requests

# Logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(
    title="Baymax API",
    description="Relay for symptom analysis, AI answers and medical database lookups",
    version=API_VERSION
)

@app.on_event("startup")
async def startup_event():
    log_settings_summary()
    if not mistral.medical_companion.available:
        logger.warning("[STARTUP] AI answers disabled: set MISTRAL_API_KEY or ANTHROPIC_API_KEY")
    logger.info(f"[STARTUP] API accessible at http://localhost:{settings.BACKEND_PORT}/api/health")

# CORS middleware pre Baymax frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.middleware("http")(log_requests)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Chybný vstup vrátime ako 400 v rovnakom tvare ako ostatné chyby"""
    logger.warning(f"[VALIDATION] {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request"})

# Include routers
app.include_router(health.router, prefix="/api/health", tags=["health"])
app.include_router(symptoms.router)
app.include_router(mistral.router)
app.include_router(medical_library.router)

@app.get("/")
async def root():
    return {
        "message": "Baymax API",
        "version": API_VERSION,
        "status": "running"
    }

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
    )
