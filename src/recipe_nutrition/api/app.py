"""FastAPI application factory."""

import io
import logging

from fastapi import FastAPI, HTTPException, Request, status

from recipe_nutrition.api.models import ReportRequest, ReportResponse
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.config import parse_log_level
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.domain.errors import NutritionError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Recipe Nutrition")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/reports")
    def run_report(payload: ReportRequest, request: Request) -> ReportResponse:
        """Run a command script and return the rendered reports."""
        state_container: AppContainer = request.app.state.container
        buffer = io.StringIO()
        session = state_container.new_session(buffer, allow_files=False)
        try:
            session.run_script(payload.commands)
        except NutritionError as exc:
            logger.info("Report request rejected: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Malformed command: {exc}",
            ) from exc
        return ReportResponse(output=buffer.getvalue())

    return app
