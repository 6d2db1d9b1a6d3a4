"""Weather dashboard: FastAPI backend serving city weather views."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, field_validator

from weatherboard.models.weather import CitySnapshot
from weatherboard.reporting.views import city_view, daily_cards
from weatherboard.state.store import DashboardState
from weatherboard.transform.chart import chart_payload, to_chart_series

logger = logging.getLogger(__name__)

DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class CityRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("city name must not be blank")
        return v


def create_app(state: DashboardState, initial_cities: list[str] | None = None) -> FastAPI:
    """Build the dashboard app around an injected state holder."""

    @asynccontextmanager
    async def _lifespan(_app: FastAPI):
        for name in initial_cities or []:
            state.add_city(name)
        yield

    app = FastAPI(title="Weather Dashboard", version="0.1.0", lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _tracked_snapshot(name: str) -> CitySnapshot | None:
        view = state.view()
        if name not in view.cities:
            raise HTTPException(status_code=404, detail=f"City not tracked: {name}")
        return view.snapshot_for(name)

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "cities": len(state.cities)}

    @app.get("/api/cities")
    async def list_cities():
        """Tracked cities in order, with a view per city."""
        view = state.view()
        return {
            "cities": list(view.cities),
            "views": [city_view(name, view.snapshot_for(name)) for name in view.cities],
        }

    @app.get("/api/cities/{name}")
    async def get_city(name: str):
        return city_view(name, _tracked_snapshot(name))

    @app.get("/api/cities/{name}/forecast")
    async def get_forecast(name: str):
        snapshot = _tracked_snapshot(name)
        return {"name": name, "days": daily_cards(snapshot) if snapshot else []}

    @app.get("/api/cities/{name}/chart")
    async def get_chart(name: str):
        snapshot = _tracked_snapshot(name)
        forecast = snapshot.forecast if snapshot else []
        return chart_payload(to_chart_series(forecast))

    # ── Controls ────────────────────────────────────────────────────

    @app.post("/api/cities")
    async def add_city(req: CityRequest, wait: bool = False):
        """Track a city. With wait=true, respond after its fetch settles."""
        task = state.add_city(req.name)
        if task is not None and wait:
            await task
        return {
            "added": task is not None,
            "cities": list(state.cities),
            "city": city_view(req.name, state.view().snapshot_for(req.name)),
        }

    @app.delete("/api/cities/{name}")
    async def remove_city(name: str):
        removed = state.remove_city(name)
        return {"removed": removed, "cities": list(state.cities)}

    # ── Serve dashboard ─────────────────────────────────────────────

    @app.get("/")
    async def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app
