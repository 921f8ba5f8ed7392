"""HTTP surface for the preflop advisor.

``/api/decide`` reads query parameters for any verb and answers with either the
normalized decision (200) or an error payload (400, 500 or 502).
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import AppSettings
from ..errors import AdvisorError, UpstreamError
from ..state.model import DecisionRequest
from ..strategy.engine import DecisionEngine
from ..strategy.providers.base import ChatProvider
from ..telemetry.logger import get_logger


def create_app(
    settings: Optional[AppSettings] = None,
    provider: Optional[ChatProvider] = None,
) -> FastAPI:
    """Build the FastAPI app.

    Without explicit ``settings`` the environment is read again on each
    request, so the credential is picked up at call time.
    """
    app = FastAPI(title="Preflop Advisor", version=__version__)

    @app.get("/api/health", summary="Service health check")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route("/api/decide", methods=["GET", "POST"], summary="Preflop decision")
    def decide(request: Request) -> JSONResponse:
        logger = get_logger(settings)
        try:
            scenario = DecisionRequest.from_query(request.query_params)
            engine = DecisionEngine(settings or AppSettings(), provider=provider)
            decision = engine.decide(scenario)
        except AdvisorError as exc:
            if isinstance(exc, UpstreamError):
                logger.error("Upstream model error: status=%s", exc.upstream_status)
            logger.warning("Request rejected (%s): %s", exc.status_code, exc.error)
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
        except Exception as exc:
            logger.exception("Unexpected error while deciding: %s", exc)
            return JSONResponse(
                status_code=500,
                content={"error": "Server error", "detail": str(exc)},
            )
        return JSONResponse(status_code=200, content=decision.model_dump())

    return app
