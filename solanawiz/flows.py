# solanawiz/flows.py — sentiment, strategy and token-curation operations
import logging
from typing import List, Union

from .errors import GenerationError
from .llm_client import LLMClient, PromptSpec
from .models import (
    CuratedToken,
    CurationInput,
    RawToken,
    SentimentQuery,
    SentimentResult,
    StrategyRequest,
    StrategyResult,
    TrendsRequest,
    TrendsResult,
)
from .okx_client import OkxDexClient
from .prompts import FALLBACK_TOKEN_DESCRIPTION, render_curation, render_sentiment, render_strategy

logger = logging.getLogger(__name__)

TRENDS_CHAIN = "Solana"
MAX_RAW_TOKENS = 20

SENTIMENT_PROMPT = PromptSpec(
    name="analyzeMarketSentimentPrompt",
    input_model=SentimentQuery,
    output_model=SentimentResult,
    render=render_sentiment,
)

STRATEGY_PROMPT = PromptSpec(
    name="generateTradingStrategyPrompt",
    input_model=StrategyRequest,
    output_model=StrategyResult,
    render=render_strategy,
)

CURATION_PROMPT = PromptSpec(
    name="curatePopularTokensPrompt",
    input_model=CurationInput,
    output_model=TrendsResult,
    render=render_curation,
)


def analyze_sentiment(query: Union[SentimentQuery, dict], llm: LLMClient) -> SentimentResult:
    """Summarize Solana market sentiment for `query`. Raises GenerationError on failure."""
    inp = query if isinstance(query, SentimentQuery) else SentimentQuery.model_validate(query)
    out = llm.generate(SENTIMENT_PROMPT, inp)
    if out is None:
        raise GenerationError("Sentiment analysis produced no output.")
    return out


def generate_strategy(request: Union[StrategyRequest, dict], llm: LLMClient) -> StrategyResult:
    inp = request if isinstance(request, StrategyRequest) else StrategyRequest.model_validate(request)
    out = llm.generate(STRATEGY_PROMPT, inp)
    if out is None:
        raise GenerationError("Strategy generation produced no output.")
    return out


def fallback_tokens(raw: List[RawToken], count: int) -> List[CuratedToken]:
    """First `count` raw tokens, in received order, with the placeholder description."""
    return [
        CuratedToken(**t.model_dump(), ai_description=FALLBACK_TOKEN_DESCRIPTION)
        for t in raw[:count]
    ]


def get_trends(request: Union[TrendsRequest, dict, None], llm: LLMClient, dex: OkxDexClient) -> TrendsResult:
    """Fetch popular Solana tokens and have the model pick and annotate a few.

    News is always empty: the DEX API category cannot supply it. When there
    are no raw tokens the model is not called. When the model returns no
    output object, the first `token_count` raw tokens are returned with a
    placeholder description.
    """
    if request is None:
        request = TrendsRequest()
    elif not isinstance(request, TrendsRequest):
        request = TrendsRequest.model_validate(request)

    dex.fetch_news()
    raw = dex.fetch_popular_tokens(TRENDS_CHAIN, MAX_RAW_TOKENS)
    if not raw:
        logger.warning("No popular token data from OKX; skipping curation.")
        return TrendsResult(news=[], tokens=[])

    logger.info("Passing %d raw tokens to curation (want %d).", len(raw), request.token_count)
    out = llm.generate(
        CURATION_PROMPT,
        CurationInput(raw_tokens=raw[:MAX_RAW_TOKENS], token_count=request.token_count),
    )

    if out is None:
        logger.warning("Curation produced no output; falling back to raw token data.")
        return TrendsResult(news=[], tokens=fallback_tokens(raw, request.token_count))

    tokens = list(out.tokens)[: request.token_count]
    logger.info("Curated %d tokens.", len(tokens))
    return TrendsResult(news=[], tokens=tokens)
