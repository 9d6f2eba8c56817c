"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status

from daily_tracker.api.models import (
    AddItemRequest,
    EatenRequest,
    FoodPayload,
    RatioRequest,
    StepRequest,
    TargetsPayload,
    ThemeRequest,
    ValueRequest,
)
from daily_tracker.app_logging import configure_logging
from daily_tracker.containers import AppContainer
from daily_tracker.domain.days import Day
from daily_tracker.domain.metrics import DailyReport
from daily_tracker.services.session import TrackerSession, open_session

NO_TEMPLATE_DETAIL = "No template found. Save a template first."


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    def session_for(request: Request, day: date) -> TrackerSession:
        state_container: AppContainer = request.app.state.container
        return open_session(state_container, on=day)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/library")
    async def get_library(request: Request) -> dict[str, object]:
        """Return the reusable food library."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.library_service.load_library()
        return {"foods": [asdict(food) for food in foods]}

    @app.post("/library")
    async def add_to_library(
        payload: FoodPayload, request: Request
    ) -> dict[str, object]:
        """Add a food to the library unless its name is already there."""
        state_container: AppContainer = request.app.state.container
        added = state_container.library_service.add_if_new(payload.to_definition())
        return {"added": added}

    @app.get("/targets")
    async def get_targets(request: Request) -> dict[str, float]:
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.preferences_service.get_targets())

    @app.put("/targets")
    async def put_targets(
        payload: TargetsPayload, request: Request
    ) -> dict[str, float]:
        """Persist new daily targets."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.preferences_service.save_targets(payload.to_targets())
        return asdict(saved)

    @app.get("/theme")
    async def get_theme(request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        return {"theme": state_container.preferences_service.get_theme()}

    @app.put("/theme")
    async def put_theme(payload: ThemeRequest, request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        return {"theme": state_container.preferences_service.set_theme(payload.theme)}

    @app.get("/template")
    async def get_template(request: Request) -> dict[str, object]:
        """Return the saved template."""
        state_container: AppContainer = request.app.state.container
        template = state_container.template_service.load_template()
        if template is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=NO_TEMPLATE_DETAIL
            )
        return {"entries": [asdict(entry) for entry in template]}

    @app.get("/days/{day}")
    async def get_day(day: date, request: Request) -> dict[str, object]:
        """Return the day's plan, creating it from the library on first access."""
        return _day_response(session_for(request, day))

    @app.post("/days/{day}/items")
    async def add_item(
        day: date, payload: AddItemRequest, request: Request
    ) -> dict[str, object]:
        """Add a manually entered food to the day and the library."""
        session = session_for(request, day)
        session.add_item(payload.to_definition(), payload.planned_servings)
        return _day_response(session)

    @app.delete("/days/{day}/items/{item_id}")
    async def remove_item(
        day: date, item_id: str, request: Request
    ) -> dict[str, object]:
        session = session_for(request, day)
        session.remove_item(item_id)
        return _day_response(session)

    @app.put("/days/{day}/items/{item_id}/planned")
    async def set_planned(
        day: date, item_id: str, payload: ValueRequest, request: Request
    ) -> dict[str, object]:
        session = session_for(request, day)
        session.set_planned(item_id, payload.value)
        return _day_response(session)

    @app.post("/days/{day}/items/{item_id}/planned/step")
    async def step_planned(
        day: date, item_id: str, payload: StepRequest, request: Request
    ) -> dict[str, object]:
        """Move planned servings one step up or down."""
        session = session_for(request, day)
        if payload.direction == "up":
            session.step_up(item_id)
        else:
            session.step_down(item_id)
        return _day_response(session)

    @app.put("/days/{day}/items/{item_id}/consumed")
    async def set_consumed(
        day: date, item_id: str, payload: ValueRequest, request: Request
    ) -> dict[str, object]:
        session = session_for(request, day)
        session.set_consumed(item_id, payload.value)
        return _day_response(session)

    @app.post("/days/{day}/items/{item_id}/consumed/ratio")
    async def mark_consumed_ratio(
        day: date, item_id: str, payload: RatioRequest, request: Request
    ) -> dict[str, object]:
        """Mark half or all of a line as eaten."""
        session = session_for(request, day)
        session.mark_consumed_ratio(item_id, payload.ratio)
        return _day_response(session)

    @app.put("/days/{day}/items/{item_id}/eaten")
    async def toggle_eaten(
        day: date, item_id: str, payload: EatenRequest, request: Request
    ) -> dict[str, object]:
        session = session_for(request, day)
        session.toggle_eaten(item_id, payload.eaten)
        return _day_response(session)

    @app.post("/days/{day}/reset")
    async def reset_day(day: date, request: Request) -> dict[str, object]:
        """Replace the day's plan with the full library."""
        session = session_for(request, day)
        session.reset_day()
        logger.info("Reset %s to the library", day.isoformat())
        return _day_response(session)

    @app.post("/days/{day}/template")
    async def save_template(day: date, request: Request) -> dict[str, object]:
        """Save the day's composition as the current template."""
        session = session_for(request, day)
        entries = session.save_template()
        return {"entries": [asdict(entry) for entry in entries]}

    @app.post("/days/{day}/template/apply")
    async def apply_template(day: date, request: Request) -> dict[str, object]:
        """Replace the day's plan with the saved template."""
        session = session_for(request, day)
        if session.apply_template() is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=NO_TEMPLATE_DETAIL
            )
        return _day_response(session)

    return app


def _day_response(session: TrackerSession) -> dict[str, object]:
    return {
        "day": _serialize_day(session.day),
        "report": _serialize_report(session.report()),
    }


def _serialize_day(day: Day) -> dict[str, object]:
    return {
        "date": day.key,
        "items": [asdict(item) for item in day.items],
    }


def _serialize_report(report: DailyReport) -> dict[str, object]:
    return {
        "totals": asdict(report.totals),
        "progress": {
            metric: {**asdict(progress), "label": progress.label}
            for metric, progress in report.progress.items()
        },
    }
