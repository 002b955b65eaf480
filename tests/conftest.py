from unittest.mock import MagicMock

import pytest

from solanawiz.models import RawToken


class FakeLLM:
    """Stands in for LLMClient: returns queued outputs and records every call."""

    model = "fake-model"
    base_url = "http://fake-llm/v1"

    def __init__(self, *outputs):
        self.outputs = list(outputs)
        self.calls = []

    def generate(self, prompt, data):
        self.calls.append((prompt, data))
        out = self.outputs.pop(0) if self.outputs else None
        if isinstance(out, Exception):
            raise out
        return out

    def status(self):
        return True, ["fake-model"]


class FakeDex:
    def __init__(self, tokens=None, has_credentials=True):
        self.tokens = list(tokens or [])
        self.has_credentials = has_credentials
        self.token_calls = []
        self.news_calls = 0

    def fetch_popular_tokens(self, chain="Solana", limit=20):
        self.token_calls.append((chain, limit))
        return list(self.tokens)

    def fetch_news(self):
        self.news_calls += 1
        return []


def make_raw_tokens(n):
    return [
        RawToken(
            id=f"addr{i}",
            name=f"Token {i}",
            symbol=f"TK{i}",
            chain="Solana",
            address=f"addr{i}",
            logo_url=f"https://static.okx.com/logo{i}.png",
        )
        for i in range(n)
    ]


def make_response(status_code=200, json_data=None, text=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text if text is not None else str(json_data)
    if json_error:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def okx_records():
    return [
        {
            "tokenFullName": "Wrapped SOL",
            "symbol": "SOL",
            "tokenContractAddress": "So11111111111111111111111111111111111111112",
            "chainFullName": "Solana",
            "chainShortName": "SOL",
            "logoLink": "https://static.okx.com/sol.png",
        },
        {
            "tokenFullName": "",
            "symbol": "BONK",
            "tokenContractAddress": "",
            "chainFullName": "",
            "chainShortName": "SOL",
            "logoLink": "",
        },
    ]
