from __future__ import annotations

import asyncio
import logging
import os
import time
import uuid
from pathlib import Path

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from models import MatchRequest, MatchResponse, Settings
from placement_matching import compute_matches, search_candidates, __version__


# Load environment from working directory .env and the project .env if present
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)


def get_settings() -> Settings:
    max_workers = os.getenv("MATCH_MAX_WORKERS")
    origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        match_max_workers=int(max_workers) if max_workers else None,
        max_candidates_per_request=int(os.getenv("MAX_CANDIDATES_PER_REQUEST", "5000")),
        cors_allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


_startup_settings = get_settings()
logging.basicConfig(
    level=_startup_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Placement Matching API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_startup_settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"status": "ok", "version": __version__}


@app.post("/api/matches", response_model=MatchResponse)
async def match_candidates(request: MatchRequest, settings: Settings = Depends(get_settings)):
    """Rank the submitted candidates against one opportunity's requirements."""
    request_id = uuid.uuid4().hex
    started = time.time()

    if len(request.candidates) > settings.max_candidates_per_request:
        raise HTTPException(
            status_code=413,
            detail=f"A maximum of {settings.max_candidates_per_request} candidates is allowed",
        )

    candidates = search_candidates(request.candidates, request.search)
    logger.info(f"[{request_id}] {len(candidates)} candidates, {len(request.requirements)} requirements")

    try:
        results = await asyncio.to_thread(
            compute_matches,
            request.requirements,
            candidates,
            settings.match_max_workers,
        )
    except Exception as e:
        logger.error(f"[{request_id}] Matching failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Matching failed: {str(e)}")

    return MatchResponse(
        request_id=request_id,
        results=results,
        candidates_evaluated=len(candidates),
        candidates_matched=len(results),
        processing_time=f"{time.time() - started:.3f}s",
    )

