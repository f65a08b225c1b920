"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from affordance_forms.config import get_settings
from affordance_forms.core.app_factory import create_app
from affordance_forms.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(get_settings().log_level)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "affordance_forms.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
