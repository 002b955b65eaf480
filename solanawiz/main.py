# solanawiz/main.py — SolanaWiz API (OKX DEX + Ollama/OpenAI-compatible)
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import flows
from .errors import GenerationError
from .llm_client import LLMClient
from .models import (
    PriceHistory,
    PricePoint,
    SentimentQuery,
    SentimentResult,
    StrategyRequest,
    StrategyResult,
    TrendsRequest,
    TrendsResult,
)
from .okx_client import OkxDexClient
from .settings import settings

log = logging.getLogger("uvicorn.error")

app = FastAPI(
    title="SolanaWiz API",
    description="Solana market sentiment, strategy simulator and trending DEX tokens.",
    version="1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# State
llm = LLMClient.from_settings(settings)
dex = OkxDexClient.from_settings(settings)

if not dex.has_credentials:
    log.warning("OKX_API_KEY is not set; trending tokens will be empty.")

# Illustrative data; the analytics panel is not wired to a price API yet.
SAMPLE_SOL_PRICES = [
    ("Jan 23", 80), ("Feb 23", 85), ("Mar 23", 95), ("Apr 23", 90),
    ("May 23", 100), ("Jun 23", 110), ("Jul 23", 105), ("Aug 23", 120),
    ("Sep 23", 130), ("Oct 23", 125), ("Nov 23", 140), ("Dec 23", 150),
]


# ---- routes ----
@app.get("/")
def root():
    return {"app": "SolanaWiz", "message": "Welcome to SolanaWiz API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health():
    ok, models = llm.status()
    return {
        "app": "SolanaWiz",
        "status": "ok",
        "llm_ok": ok,
        "llm_models": models[:8],
        "model_in_use": llm.model,
        "base_url": llm.base_url,
        "okx_configured": dex.has_credentials,
    }


@app.get("/llm-status")
def llm_status():
    ok, models = llm.status()
    return {
        "app": "SolanaWiz",
        "model": llm.model,
        "llm": "online" if ok else "offline",
        "verified_models": models[:8],
        "base_url": llm.base_url,
    }


@app.post("/sentiment", response_model=SentimentResult)
def sentiment(body: SentimentQuery):
    try:
        return flows.analyze_sentiment(body, llm)
    except GenerationError as e:
        log.warning(f"/sentiment generation error: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.post("/strategy", response_model=StrategyResult)
def strategy(body: StrategyRequest):
    try:
        return flows.generate_strategy(body, llm)
    except GenerationError as e:
        log.warning(f"/strategy generation error: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.post("/trends", response_model=TrendsResult)
def trends(body: Optional[TrendsRequest] = None):
    try:
        return flows.get_trends(body or TrendsRequest(), llm, dex)
    except GenerationError as e:
        log.warning(f"/trends generation error: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.get("/analytics/sol-price", response_model=PriceHistory)
def sol_price_history():
    return PriceHistory(
        symbol="SOL",
        points=[PricePoint(date=d, price=p) for d, p in SAMPLE_SOL_PRICES],
        sample=True,
    )
