# solanawiz/models.py — Pydantic data schemas

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    # Accept both snake_case and the camelCase names the frontend posts.
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ---- sentiment ----

class SentimentQuery(_Schema):
    query: str = Field(
        ...,
        min_length=3,
        max_length=100,
        description="Search query for analyzing market sentiment, e.g. 'Solana news'.",
    )


class SentimentResult(_Schema):
    # Whitespace-only output fails min_length.
    model_config = ConfigDict(str_strip_whitespace=True)

    sentiment: str = Field(
        ...,
        min_length=1,
        description="Sentiment label (bullish, bearish or neutral), a colon, then the rationale.",
    )

    @property
    def label(self) -> str:
        return self.sentiment.split(":", 1)[0].strip()

    @property
    def rationale(self) -> str:
        _, sep, rest = self.sentiment.partition(":")
        return rest.strip() if sep else self.sentiment.strip()

    @property
    def direction(self) -> str:
        text = self.sentiment.lower()
        if "bullish" in text:
            return "bullish"
        if "bearish" in text:
            return "bearish"
        return "neutral"


# ---- strategy ----

class RiskTolerance(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class StrategyRequest(_Schema):
    investment_amount: float = Field(..., gt=0, alias="investmentAmount")
    risk_tolerance: RiskTolerance = Field(..., alias="riskTolerance")
    market_conditions: str = Field(..., min_length=10, max_length=500, alias="marketConditions")
    trading_goals: str = Field(..., min_length=10, max_length=500, alias="tradingGoals")


class StrategyResult(_Schema):
    model_config = ConfigDict(str_strip_whitespace=True)

    strategy_description: str = Field(..., min_length=1, alias="strategyDescription",
                                      description="The trading strategy, step by step.")
    risk_assessment: str = Field(..., min_length=1, alias="riskAssessment",
                                 description="Risks of the strategy for the given tolerance.")
    potential_profit: str = Field(..., min_length=1, alias="potentialProfit",
                                  description="Expected profit range and the assumptions behind it.")


# ---- tokens / trends ----

class RawToken(_Schema):
    id: str = Field(..., description="Unique identifier (contract address).")
    name: str
    symbol: str
    chain: str
    address: str = ""
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class CuratedToken(RawToken):
    ai_description: str = Field(
        ...,
        alias="aiDescription",
        description="A brief generated description of the token (1-2 sentences).",
    )


class NewsItem(_Schema):
    title: str
    summary: str
    url: str
    source: str
    published_at: str = Field(..., alias="publishedAt")


class TrendsRequest(_Schema):
    news_count: int = Field(default=0, ge=0, alias="newsItemsCount")
    token_count: int = Field(default=3, ge=1, alias="tokenItemsCount")


class TrendsResult(_Schema):
    news: List[NewsItem] = Field(default_factory=list)
    tokens: List[CuratedToken] = Field(default_factory=list)


class CurationInput(_Schema):
    raw_tokens: List[RawToken]
    token_count: int = Field(..., ge=1)


# ---- analytics ----

class PricePoint(_Schema):
    date: str
    price: float


class PriceHistory(_Schema):
    symbol: str
    points: List[PricePoint]
    sample: bool = True
