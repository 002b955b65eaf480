# solanawiz/okx_client.py — OKX Web3 DEX API (popular token listings)
"""Client for the OKX Web3 DEX API.

Only the ``token-list/popular`` endpoint is used. The Web3 DEX API category
has no news or announcements, so :meth:`OkxDexClient.fetch_news` exists only
to keep the data-access contract uniform and always returns an empty list.

Every failure on the token path (missing key, network error, non-2xx status,
non-JSON body, non-zero envelope code) is logged and turned into ``[]``.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from .errors import ConfigurationError, UpstreamHTTPError, UpstreamParseError
from .models import NewsItem, RawToken
from .settings import Settings

logger = logging.getLogger(__name__)

POPULAR_TOKENS_PATH = "/api/v5/web3/dex/token-list/popular"
API_KEY_HEADER = "Okc-Apikey"
USER_AGENT = "SolanaWiz/1.0"
SUCCESS_CODE = "0"


def normalize_token(record: dict) -> RawToken:
    """Map an OKX token record onto RawToken."""
    symbol = record.get("symbol") or ""
    chain_short = record.get("chainShortName") or ""
    address = record.get("tokenContractAddress") or ""
    return RawToken(
        id=address or f"{symbol}-{chain_short}",
        name=record.get("tokenFullName") or symbol,
        symbol=symbol,
        chain=record.get("chainFullName") or chain_short,
        address=address,
        logo_url=record.get("logoLink") or None,
    )


class OkxDexClient:
    def __init__(
        self,
        api_key: str = "",
        base_url: str = "https://www.okx.com",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, s: Settings) -> "OkxDexClient":
        return cls(api_key=s.okx_api_key, base_url=s.okx_base_url, timeout=s.http_timeout)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.strip())

    def _get(self, path: str, params: dict) -> dict:
        if not self.has_credentials:
            raise ConfigurationError("OKX_API_KEY is not configured")
        logger.info("OKX key found (first 5 chars): %s...", self.api_key[:5])

        url = f"{self.base_url}{path}"
        headers = {"User-Agent": USER_AGENT, API_KEY_HEADER: self.api_key}
        logger.info("OKX GET %s params=%s", url, params)
        try:
            r = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UpstreamHTTPError(f"OKX request to {path} failed: {e}") from e

        logger.info("OKX GET %s -> %s", path, r.status_code)
        if not r.ok:
            detail = r.text[:200]
            raise UpstreamHTTPError(f"OKX API returned {r.status_code}: {detail}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamParseError(f"OKX response for {path} was not valid JSON: {r.text[:200]}") from e
        if not isinstance(data, dict):
            raise UpstreamParseError(f"OKX response for {path} was not a JSON object")
        return data

    def fetch_popular_tokens(self, chain: str = "Solana", limit: int = 20) -> List[RawToken]:
        try:
            envelope = self._get(POPULAR_TOKENS_PATH, {"chainShortName": chain, "limit": limit})
        except ConfigurationError as e:
            logger.warning("%s; cannot fetch popular tokens, returning []", e)
            return []
        except (UpstreamHTTPError, UpstreamParseError) as e:
            logger.error("Error fetching popular tokens for chain %s: %s", chain, e)
            return []

        code = str(envelope.get("code"))
        if code != SUCCESS_CODE:
            logger.warning(
                "OKX popular tokens returned code %s with message %r", code, envelope.get("msg")
            )
            return []

        records = envelope.get("data") or []
        if not isinstance(records, list) or not records:
            logger.warning("OKX popular tokens returned no token data for chain %s", chain)
            return []

        try:
            tokens = [normalize_token(rec) for rec in records if isinstance(rec, dict)]
        except ValidationError as e:
            logger.error("Malformed token record from OKX for chain %s: %s", chain, e)
            return []
        logger.info("Received %d raw tokens for chain %s", len(tokens), chain)
        return tokens

    def fetch_news(self) -> List[NewsItem]:
        logger.info("OKX Web3 DEX API has no news endpoint; returning []")
        return []
