# lab/sanity_trends.py
from solanawiz.flows import get_trends
from solanawiz.llm_client import LLMClient
from solanawiz.models import TrendsRequest
from solanawiz.okx_client import OkxDexClient
from solanawiz.settings import settings


def main() -> None:
    dex = OkxDexClient.from_settings(settings)
    llm = LLMClient.from_settings(settings)

    raw = dex.fetch_popular_tokens("Solana", 5)
    print(f"raw tokens: {len(raw)} (key configured: {dex.has_credentials})")
    for t in raw:
        print(" ", t.id, t.symbol, t.name)

    result = get_trends(TrendsRequest(token_count=3), llm, dex)
    for t in result.tokens:
        print(f"{t.symbol:>8}  {t.ai_description}")


if __name__ == "__main__":
    main()
