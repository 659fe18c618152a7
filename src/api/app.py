"""HTTP surface: a single ``GET /api`` endpoint returning merged team stats."""

import json
from typing import Any, Awaitable, Callable, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from src.aggregation.pipeline import collect_team_stats
from src.config.settings import settings
from src.models.records import MergedRecord
from src.utils.misc_utils import replace_non_finite

Collector = Callable[[], Awaitable[List[MergedRecord]]]


class StatsJSONResponse(JSONResponse):
    """JSON response that writes NaN and infinities as null."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            replace_non_finite(content),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


def create_app(
    collector: Optional[Collector] = None,
    cors_allow_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Builds the API application.

    ``collector`` produces the merged records for one request; it defaults to
    the live scrape-and-aggregate pipeline.
    """
    collect = collector or collect_team_stats
    app = FastAPI(title="VEX Team Stats", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins or settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/api", response_class=StatsJSONResponse)
    async def get_team_stats() -> JSONResponse:
        """Scrape the team list, fetch every source and return one record per team."""
        try:
            data = await collect()
        except Exception as e:
            logger.exception(f"Request GET /api failed: {e!r}")
            return JSONResponse(
                status_code=500,
                content={"detail": "Failed to collect team statistics"},
            )
        return StatsJSONResponse(content=data)

    @app.on_event("startup")
    async def on_startup():
        logger.info(f"Server started on port {settings.port}")

    return app


app = create_app()
