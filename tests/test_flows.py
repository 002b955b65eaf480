import pytest
from pydantic import ValidationError

from solanawiz import flows
from solanawiz.errors import GenerationError
from solanawiz.models import (
    CuratedToken,
    NewsItem,
    SentimentQuery,
    SentimentResult,
    StrategyResult,
    TrendsRequest,
    TrendsResult,
)
from solanawiz.prompts import FALLBACK_TOKEN_DESCRIPTION

from .conftest import FakeDex, FakeLLM, make_raw_tokens


# ---- sentiment ----

def test_analyze_sentiment_returns_model_output():
    llm = FakeLLM(SentimentResult(sentiment="Bullish: strong DEX volume."))

    result = flows.analyze_sentiment({"query": "Solana news"}, llm)

    assert result.sentiment == "Bullish: strong DEX volume."
    prompt, data = llm.calls[0]
    assert prompt is flows.SENTIMENT_PROMPT
    assert data == SentimentQuery(query="Solana news")


def test_analyze_sentiment_without_output_raises():
    with pytest.raises(GenerationError):
        flows.analyze_sentiment(SentimentQuery(query="Solana news"), FakeLLM(None))


def test_analyze_sentiment_propagates_generation_error():
    llm = FakeLLM(GenerationError("connection refused"))

    with pytest.raises(GenerationError, match="connection refused"):
        flows.analyze_sentiment(SentimentQuery(query="SOL"), llm)


@pytest.mark.parametrize("query", ["ab", "x" * 101])
def test_analyze_sentiment_rejects_bad_query_before_calling_model(query):
    llm = FakeLLM()

    with pytest.raises(ValidationError):
        flows.analyze_sentiment({"query": query}, llm)
    assert llm.calls == []


# ---- strategy ----

STRATEGY_BODY = {
    "investmentAmount": 1000,
    "riskTolerance": "medium",
    "marketConditions": "Current market is volatile with potential for SOL to break out.",
    "tradingGoals": "Aim for 20% return in 3 months.",
}


def test_generate_strategy_returns_all_three_fields():
    out = StrategyResult(
        strategy_description="DCA into SOL weekly.",
        risk_assessment="Moderate drawdown risk.",
        potential_profit="10-25% over 3 months.",
    )
    llm = FakeLLM(out)

    result = flows.generate_strategy(STRATEGY_BODY, llm)

    assert result == out
    _, data = llm.calls[0]
    assert data.risk_tolerance.value == "medium"
    assert data.investment_amount == 1000


def test_generate_strategy_without_output_raises():
    with pytest.raises(GenerationError):
        flows.generate_strategy(STRATEGY_BODY, FakeLLM(None))


@pytest.mark.parametrize("patch", [
    {"investmentAmount": 0},
    {"riskTolerance": "extreme"},
    {"marketConditions": "short"},
    {"tradingGoals": "y" * 501},
])
def test_generate_strategy_rejects_invalid_request(patch):
    llm = FakeLLM()
    with pytest.raises(ValidationError):
        flows.generate_strategy({**STRATEGY_BODY, **patch}, llm)
    assert llm.calls == []


# ---- trends ----

def test_get_trends_skips_generation_when_no_raw_tokens():
    llm = FakeLLM()
    dex = FakeDex(tokens=[])

    result = flows.get_trends(TrendsRequest(), llm, dex)

    assert result == TrendsResult(news=[], tokens=[])
    assert llm.calls == []
    assert dex.news_calls == 1
    assert dex.token_calls == [("Solana", 20)]


def test_get_trends_falls_back_to_first_raw_tokens_in_order():
    raw = make_raw_tokens(5)
    llm = FakeLLM(None)

    result = flows.get_trends(TrendsRequest(token_count=3), llm, FakeDex(raw))

    assert [t.id for t in result.tokens] == ["addr0", "addr1", "addr2"]
    assert all(t.ai_description == FALLBACK_TOKEN_DESCRIPTION for t in result.tokens)
    assert result.tokens[0].logo_url == raw[0].logo_url
    assert result.news == []


def test_fallback_description_text():
    assert FALLBACK_TOKEN_DESCRIPTION == "AI description could not be generated for this token."


def test_get_trends_sends_raw_tokens_and_count_to_model():
    raw = make_raw_tokens(25)
    llm = FakeLLM(TrendsResult(tokens=[]))

    flows.get_trends({"tokenItemsCount": 4}, llm, FakeDex(raw))

    prompt, data = llm.calls[0]
    assert prompt is flows.CURATION_PROMPT
    assert data.token_count == 4
    assert len(data.raw_tokens) == 20


def test_get_trends_caps_tokens_and_forces_empty_news():
    curated = [
        CuratedToken(id=f"addr{i}", name=f"Token {i}", symbol=f"TK{i}", chain="Solana",
                     address=f"addr{i}", ai_description=f"Token {i} is popular.")
        for i in range(4)
    ]
    news = [NewsItem(title="t", summary="s", url="https://x", source="x", published_at="2024-01-01")]
    llm = FakeLLM(TrendsResult(news=news, tokens=curated))

    result = flows.get_trends(TrendsRequest(token_count=2), llm, FakeDex(make_raw_tokens(6)))

    assert result.news == []
    assert [t.id for t in result.tokens] == ["addr0", "addr1"]
    assert result.tokens[0].ai_description == "Token 0 is popular."


def test_get_trends_propagates_generation_error():
    llm = FakeLLM(GenerationError("schema mismatch"))

    with pytest.raises(GenerationError):
        flows.get_trends(None, llm, FakeDex(make_raw_tokens(3)))


@pytest.mark.parametrize("count", [1, 3, 7, 30])
def test_get_trends_never_exceeds_token_count(count):
    result = flows.get_trends(TrendsRequest(token_count=count), FakeLLM(None), FakeDex(make_raw_tokens(10)))

    assert len(result.tokens) <= count
    assert len(result.tokens) == min(count, 10)
    assert result.news == []


def test_trends_request_rejects_zero_tokens():
    with pytest.raises(ValidationError):
        TrendsRequest(token_count=0)


@pytest.mark.parametrize("query", ["abc", "x" * 100])
def test_analyze_sentiment_accepts_length_bounds(query):
    llm = FakeLLM(SentimentResult(sentiment="Neutral: quiet market."))

    flows.analyze_sentiment({"query": query}, llm)

    assert llm.calls[0][1].query == query
