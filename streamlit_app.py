# streamlit_app.py
import os

import pandas as pd
import requests
import streamlit as st
from pydantic import ValidationError

from solanawiz import ui_state
from solanawiz.models import (
    PriceHistory,
    RiskTolerance,
    SentimentQuery,
    SentimentResult,
    StrategyRequest,
    StrategyResult,
    TrendsResult,
)

st.set_page_config(page_title="SolanaWiz", layout="centered")

API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

# ---------- HTTP helpers ----------
def api_get(path, **params):
    try:
        r = requests.get(f"{API_URL}{path}", params=params, timeout=20)
        r.raise_for_status()
        return r.json(), None
    except requests.exceptions.RequestException as e:
        return None, e

def api_post(path, body):
    try:
        r = requests.post(f"{API_URL}{path}", json=body, timeout=120)
        r.raise_for_status()
        return r.json(), None
    except requests.exceptions.RequestException as e:
        return None, e

def backend_ok():
    try:
        requests.get(f"{API_URL}/openapi.json", timeout=3)
        return True
    except requests.exceptions.RequestException:
        return False

def error_message(err) -> str:
    """Prefer the API's `detail` over the bare HTTP error text."""
    resp = getattr(err, "response", None)
    if resp is not None:
        try:
            detail = resp.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, str) and detail:
            return detail
    return str(err) or "An unknown error occurred."

def first_validation_error(e: ValidationError) -> str:
    err = e.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    return f"{field}: {err.get('msg')}" if field else err.get("msg", "Invalid input")

# ------------ CSS ------------
st.markdown("""
<style>
  .center-title { text-align:center; font-size:3em; font-weight:700; margin-bottom:.3em; }
  .center-caption { text-align:center; color:#9ca3af; font-size:1.05em; margin-bottom:1.2em; }
  .token-card { background:rgba(255,255,255,0.04); border:1px solid rgba(255,255,255,0.1);
                border-radius:14px; padding:12px 16px; margin-bottom:10px; }
  .muted { color:#9ca3af; font-size:.9em; }
</style>
""", unsafe_allow_html=True)

# ------------ Backend status ------------
st.caption(f"Backend: {'✅ connected' if backend_ok() else '❌ offline'} · API_URL={API_URL}")

# ------------ Session defaults ------------
ui_state.init(st.session_state)

# ------------ Header ------------
st.markdown("<div class='center-title'>SolanaWiz</div>", unsafe_allow_html=True)
st.markdown(
    "<div class='center-caption'>AI market sentiment, strategy simulation and trending tokens for Solana</div>",
    unsafe_allow_html=True,
)

tab_sentiment, tab_strategy, tab_trends, tab_analytics = st.tabs(
    ["Sentiment", "Strategy Simulator", "Trending Tokens", "Token Analytics"]
)

# ---------- Submit callbacks (run before the rerun, so buttons render disabled) ----------
def _submit_sentiment():
    try:
        payload = SentimentQuery(query=st.session_state.sentiment_query)
    except ValidationError as e:
        ui_state.reject(st.session_state, "sentiment", first_validation_error(e))
        return
    ui_state.begin(st.session_state, "sentiment", payload.model_dump(by_alias=True))

def _submit_strategy():
    try:
        payload = StrategyRequest(
            investment_amount=st.session_state.strategy_amount,
            risk_tolerance=st.session_state.strategy_risk,
            market_conditions=st.session_state.strategy_conditions,
            trading_goals=st.session_state.strategy_goals,
        )
    except ValidationError as e:
        ui_state.reject(st.session_state, "strategy", first_validation_error(e))
        return
    ui_state.begin(st.session_state, "strategy", payload.model_dump(mode="json", by_alias=True))

def _refresh_trends():
    ui_state.begin(st.session_state, "trends",
                   {"newsItemsCount": 0, "tokenItemsCount": st.session_state.trends_count})

def _send(section, path, spinner):
    payload = ui_state.pending(st.session_state, section)
    if payload is None:
        return
    with st.spinner(spinner):
        data, err = api_post(path, payload)
    ui_state.finish(st.session_state, section, result=data, error=error_message(err) if err else None)
    st.rerun()

# =========================
# SENTIMENT
# =========================
DIRECTION_ICON = {"bullish": "📈", "bearish": "📉", "neutral": "❔"}

with tab_sentiment:
    st.subheader("AI Market Sentiment")
    st.caption("Get bullish/bearish signals for Solana powered by AI.")

    with st.form("sentiment_form"):
        st.text_input(
            "Search Query",
            value="Solana price action",
            placeholder="e.g., 'Solana news' or 'SOL price prediction'",
            key="sentiment_query",
        )
        st.form_submit_button(
            "Analyze Sentiment", use_container_width=True,
            on_click=_submit_sentiment, disabled=ui_state.is_busy(st.session_state, "sentiment"),
        )

    if st.session_state.sentiment_warning:
        st.warning(st.session_state.sentiment_warning)
    _send("sentiment", "/sentiment", "Analyzing sentiment…")

    if st.session_state.sentiment_error:
        st.error(f"Error: {st.session_state.sentiment_error}")

    if st.session_state.sentiment_result:
        result = SentimentResult.model_validate(st.session_state.sentiment_result)
        with st.container(border=True):
            st.markdown(f"### {DIRECTION_ICON[result.direction]} Sentiment Analysis Result")
            st.markdown(f"**{result.label}**")
            st.write(result.rationale)

# =========================
# STRATEGY
# =========================
with tab_strategy:
    st.subheader("AI Strategy Simulator")
    st.caption("Generate AI-powered trading strategies tailored to your preferences.")

    risk_options = [r.value for r in RiskTolerance]
    with st.form("strategy_form"):
        c1, c2 = st.columns(2)
        with c1:
            st.number_input("Investment Amount (USD)", min_value=1.0, value=1000.0, step=100.0,
                            key="strategy_amount")
        with c2:
            st.selectbox(
                "Risk Tolerance", risk_options, index=risk_options.index("medium"),
                format_func=str.capitalize, key="strategy_risk",
            )
        st.text_area(
            "Current Market Conditions",
            value="Current market is volatile with potential for SOL to break out.",
            height=90,
            key="strategy_conditions",
        )
        st.text_area("Trading Goals", value="Aim for 20% return in 3 months.", height=90,
                     key="strategy_goals")
        st.form_submit_button(
            "Generate Strategy", use_container_width=True,
            on_click=_submit_strategy, disabled=ui_state.is_busy(st.session_state, "strategy"),
        )

    if st.session_state.strategy_warning:
        st.warning(st.session_state.strategy_warning)
    _send("strategy", "/strategy", "Generating strategy…")

    if st.session_state.strategy_error:
        st.error(f"Error: {st.session_state.strategy_error}")

    if st.session_state.strategy_result:
        result = StrategyResult.model_validate(st.session_state.strategy_result)
        with st.container(border=True):
            st.markdown("### Generated Trading Strategy")
            st.markdown("**Strategy Description**")
            st.write(result.strategy_description)
            st.markdown("**Risk Assessment**")
            st.write(result.risk_assessment)
            st.markdown("**Potential Profit**")
            st.write(result.potential_profit)

# =========================
# TRENDING TOKENS
# =========================
with tab_trends:
    st.subheader("Trending Solana Tokens")
    st.caption("Popular DEX tokens from OKX, picked and described by AI.")

    st.slider("How many tokens", min_value=1, max_value=10, value=3, key="trends_count")
    st.button("Refresh trends", use_container_width=True,
              on_click=_refresh_trends, disabled=ui_state.is_busy(st.session_state, "trends"))
    _send("trends", "/trends", "Curating tokens…")

    # Data-layer problems never block rendering: an error shows as an empty list.
    if st.session_state.trends_result is not None or st.session_state.trends_error:
        trends = TrendsResult.model_validate(st.session_state.trends_result or {"news": [], "tokens": []})
        if not trends.tokens:
            st.info("No trending tokens available right now.")
        for tok in trends.tokens:
            with st.container(border=True):
                c1, c2 = st.columns([0.15, 0.85])
                with c1:
                    if tok.logo_url:
                        st.image(tok.logo_url, width=48)
                with c2:
                    st.markdown(f"**{tok.name}** ({tok.symbol}) · <span class='muted'>{tok.chain}</span>",
                                unsafe_allow_html=True)
                    st.write(tok.ai_description)
                    if tok.address:
                        st.caption(tok.address)

# =========================
# TOKEN ANALYTICS
# =========================
with tab_analytics:
    st.subheader("Token Analytics")
    st.caption("Visualize token price histories and other key metrics. (OKX API integration coming soon)")

    data, err = api_get("/analytics/sol-price")
    if err:
        st.caption("Price history unavailable.")
    else:
        history = PriceHistory.model_validate(data)
        st.markdown(f"**{history.symbol} Price History{' (Sample)' if history.sample else ''}**")
        df = pd.DataFrame([p.model_dump() for p in history.points])
        df["date"] = pd.to_datetime(df["date"], format="%b %y")  # "Jan 23" -> 2023-01-01
        st.line_chart(df.set_index("date"), y="price")

    c1, c2 = st.columns(2)
    with c1:
        with st.container(border=True):
            st.markdown("**Trading Volume**")
            st.caption("Placeholder for trading volume chart.")
    with c2:
        with st.container(border=True):
            st.markdown("**Market Cap Dominance**")
            st.caption("Placeholder for market cap chart.")
