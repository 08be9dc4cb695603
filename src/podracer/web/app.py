"""FastAPI decision inspection app.

Replays one controller decision from a JSON snapshot, without a running game.
Settings come from ``PODRACER_*`` environment variables (``.env`` supported).
"""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from podracer import __version__
from podracer.runtime.config import ControllerSettings
from podracer.web.schemas import DecideRequest, DecideResponse, HealthResponse
from podracer.web.service import DecisionService

load_dotenv()  # must run before settings are read from the environment

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Pod Racer Controller", version=__version__)

_SETTINGS = ControllerSettings.from_env()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/decide", response_model=DecideResponse)
def decide(req: DecideRequest) -> DecideResponse:
    """Return the command the controller would emit for the given snapshot."""
    svc = DecisionService(_SETTINGS)
    try:
        command, event = svc.decide(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return DecisionService.to_response(command, event)
