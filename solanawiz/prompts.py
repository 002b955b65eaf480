# solanawiz/prompts.py — LLM prompt templates

from typing import List

from .models import CurationInput, RawToken, SentimentQuery, StrategyRequest

FALLBACK_TOKEN_DESCRIPTION = "AI description could not be generated for this token."


SYSTEM = """You are a careful cryptocurrency market assistant focused on the Solana ecosystem.
Answer only with a single JSON object that matches the JSON schema you are given.
Do not wrap the JSON in code fences and do not add commentary outside it."""


SENTIMENT_TEMPLATE = """You are an AI assistant specializing in cryptocurrency market sentiment analysis.

Analyze the latest news, social media posts, and market data related to Solana (SOL) to determine the overall market sentiment.
Provide a concise summary of the sentiment, indicating whether it is primarily bullish, bearish, or neutral.
Include a brief explanation of the factors driving the sentiment.

Consider these factors:
- Recent price trends of Solana
- News articles and social media discussions about Solana
- Analyst ratings and predictions for Solana
- Overall market conditions and their potential impact on Solana

Write the "sentiment" field as "<Bullish|Bearish|Neutral>: <rationale>".

Query: {query}

Sentiment Summary:"""


STRATEGY_TEMPLATE = """You are an expert cryptocurrency trading strategist for the Solana (SOL) market.

Design a trading strategy for the following investor profile:
- Investment amount (USD): {investment_amount}
- Risk tolerance: {risk_tolerance}
- Current market conditions: {market_conditions}
- Trading goals: {trading_goals}

Fill in:
- strategyDescription: entry and exit rules, position sizing and time horizon.
- riskAssessment: the main risks of this strategy for a {risk_tolerance} risk tolerance.
- potentialProfit: a realistic profit range for the stated amount, with its assumptions.

This is an educational simulation, not financial advice."""


CURATE_TOKENS_TEMPLATE = """You are a Crypto Market Analyst. Your task is to curate popular tokens based on data provided from the OKX Web3 DEX API and generate a brief, insightful description for each.

Context:
- Token items count requested: {token_count}
- News is not available from this data source.

Raw Token Data (up to 20 items provided):
{token_lines}

Please select up to {token_count} of the most relevant or interesting tokens from the raw data.
For each selected token, provide its id, name, symbol, chain, address, logoUrl, and generate a concise 'aiDescription' (1-2 sentences highlighting something noteworthy like its primary use case, recent performance, or unique feature).
If no relevant token data is found, return an empty array for 'tokens'. The 'news' array should always be empty."""


def render_sentiment(inp: SentimentQuery) -> str:
    return SENTIMENT_TEMPLATE.format(query=inp.query.strip())


def render_strategy(inp: StrategyRequest) -> str:
    return STRATEGY_TEMPLATE.format(**inp.model_dump(mode="json"))


def _token_lines(tokens: List[RawToken]) -> str:
    if not tokens:
        return "No token data provided."
    lines = []
    for t in tokens:
        lines.append(f"- Name: {t.name} (Symbol: {t.symbol})")
        lines.append(f"  Id: {t.id}")
        lines.append(f"  Chain: {t.chain}")
        lines.append(f"  Address: {t.address}")
        lines.append(f"  Logo: {t.logo_url or ''}")
    return "\n".join(lines)


def render_curation(inp: CurationInput) -> str:
    return CURATE_TOKENS_TEMPLATE.format(
        token_count=inp.token_count,
        token_lines=_token_lines(inp.raw_tokens),
    )
