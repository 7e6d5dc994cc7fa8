"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from admissions.config import get_settings


def setup_cors(app):
    """
    Allow the application pages to call the relay from their own origin

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
