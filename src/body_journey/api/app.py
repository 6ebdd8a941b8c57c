"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from body_journey.api.models import (
    ProgressRequest,
    ProgressResponse,
    TimeframeResponse,
    TimelineRequest,
)
from body_journey.app_logging import configure_logging
from body_journey.config import parse_allowed_origins
from body_journey.containers import AppContainer
from body_journey.services.goals import GoalValidationError, validate_generation_request
from body_journey.services.progress import goal_body_fat_percent


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Body Journey")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.allowed_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/timeline")
    async def timeline(
        payload: TimelineRequest, request: Request
    ) -> dict[str, TimeframeResponse | None]:
        """Estimate how long reaching the goal will take."""
        state_container: AppContainer = request.app.state.container
        estimate = state_container.timeline_service.estimate(
            payload.current.to_domain(), payload.goal.to_domain()
        )
        if estimate is None:
            return {"estimate": None}
        return {"estimate": TimeframeResponse.from_domain(estimate)}

    @app.post("/progress")
    async def progress(
        payload: ProgressRequest, request: Request
    ) -> dict[str, ProgressResponse | None]:
        """Return the statistics shown next to the generated image."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.progress_service.summarize(
            payload.current.to_domain(),
            payload.goal.to_domain(),
            payload.profile.to_domain(),
        )
        if summary is None:
            return {"summary": None}
        return {"summary": ProgressResponse.from_domain(summary)}

    @app.post("/generations")
    async def generation(
        payload: ProgressRequest, request: Request
    ) -> dict[str, object]:
        """Validate a goal image request and record it for statistics."""
        state_container: AppContainer = request.app.state.container
        current = payload.current.to_domain()
        goal = payload.goal.to_domain()
        profile = payload.profile.to_domain()
        try:
            validate_generation_request(profile, goal)
        except GoalValidationError as exc:
            logger.info("Rejected generation request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        state_container.analytics_service.record_generation(current, goal, profile)
        return {
            "status": "ok",
            "goal_body_fat_percent": goal_body_fat_percent(goal),
        }

    return app
