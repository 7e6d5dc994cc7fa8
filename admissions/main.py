"""Main FastAPI application"""
from fastapi import FastAPI
from admissions.config import get_settings
from admissions.middleware.cors import setup_cors
from admissions.middleware.error_handler import register_error_handlers
from contextlib import asynccontextmanager
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings = get_settings()
    if not settings.webhook_url:
        logger.warning("Webhook URL not configured - application submissions will be rejected")
    else:
        logger.info(f"Relaying applications ({settings.environment})")
    yield


# Create FastAPI app with lifespan
app = FastAPI(
    title="Admissions API",
    description="University admission application form and submission relay",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Setup CORS
setup_cors(app)

# Error handling middleware and request validation shape
register_error_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "admissions-backend",
        "webhook": "configured" if get_settings().webhook_url else "missing"
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Admissions Backend API",
        "version": "1.0.0",
        "docs": "/docs"
    }

# Import and include routers
from admissions.routers import applications, forms

app.include_router(applications.router, prefix="/api", tags=["Applications"])
app.include_router(forms.router, prefix="/api/forms", tags=["Forms"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
