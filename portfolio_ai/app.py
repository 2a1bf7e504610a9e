"""
Portfolio AI – Streamlit preview of the public page's two AI widgets.
No business logic in layout; validation, prompts and model calls live in agents/services.
"""

import asyncio
from typing import Any, Coroutine, List

import streamlit as st

from portfolio_ai.agents.chat_agent import run_chat_agent
from portfolio_ai.agents.fit_agent import run_fit_agent
from portfolio_ai.config import (
    MAX_MESSAGES,
    MAX_TOTAL_CONTENT_LENGTH,
    MIN_JD_LENGTH,
    OPENAI_API_KEY,
    SUPABASE_URL,
)
from portfolio_ai.errors import PortfolioAIError
from portfolio_ai.schemas.fit_analysis import FitAnalysis

VERDICT_DISPLAY = {
    "strong_fit": ("Strong fit", "success"),
    "worth_conversation": ("Worth a conversation", "info"),
    "probably_not": ("Probably not your person", "warning"),
}

SUGGESTED_QUESTIONS = [
    "What's your biggest weakness?",
    "Why did you leave your last role?",
    "What kind of team do you work best in?",
]


def _run(coro: Coroutine) -> Any:
    """Run an agent coroutine from Streamlit's sync script context."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _verdict_display(verdict: str) -> tuple:
    return VERDICT_DISPLAY.get(verdict, (verdict.replace("_", " ").title(), "info"))


def conversation_window(history: List[dict]) -> List[dict]:
    """
    Most recent turns that fit the chat limits: at most MAX_MESSAGES messages
    and MAX_TOTAL_CONTENT_LENGTH characters. The latest message is always kept.
    """
    window = history[-MAX_MESSAGES:]
    total = sum(len(m["content"]) for m in window)
    while len(window) > 1 and total > MAX_TOTAL_CONTENT_LENGTH:
        total -= len(window[0]["content"])
        window = window[1:]
    return list(window)


def _render_chat_tab() -> None:
    if "chat_history" not in st.session_state:
        st.session_state["chat_history"] = []
    history: List[dict] = st.session_state["chat_history"]

    for msg in history:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    if not history:
        st.caption("Try: " + " · ".join(f"*{q}*" for q in SUGGESTED_QUESTIONS))

    prompt = st.chat_input("Ask me anything about my experience")
    if not prompt:
        return
    history.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)
    with st.chat_message("assistant"):
        with st.spinner("Thinking…"):
            try:
                reply = _run(run_chat_agent(conversation_window(history)))
            except PortfolioAIError as e:
                history.pop()
                st.error(e.public_message)
                return
        st.markdown(reply)
    history.append({"role": "assistant", "content": reply})


def _render_analysis(analysis: FitAnalysis) -> None:
    label, kind = _verdict_display(analysis.verdict)
    getattr(st, kind)(f"**{label}** – {analysis.headline}")
    st.markdown(analysis.opening)
    if analysis.gaps:
        st.markdown("#### Where I don't match")
        for gap in analysis.gaps:
            with st.expander(gap.gap_title):
                st.caption(f"**They ask for:** {gap.requirement}")
                st.markdown(gap.explanation)
    st.markdown("#### What transfers")
    st.markdown(analysis.transfers)
    st.markdown("#### My recommendation")
    st.markdown(analysis.recommendation)


def _render_fit_tab() -> None:
    jd = st.text_area(
        "Job description",
        height=260,
        placeholder="Paste the full job description here…",
        key="jd_text",
        help=f"At least {MIN_JD_LENGTH} characters.",
    )
    if st.button("Analyze fit", type="primary", key="analyze_btn"):
        with st.spinner("Assessing fit honestly…"):
            try:
                st.session_state["analysis"] = _run(run_fit_agent(jd))
                st.session_state["analysis_error"] = None
            except PortfolioAIError as e:
                st.session_state["analysis"] = None
                st.session_state["analysis_error"] = e.public_message

    if st.session_state.get("analysis_error"):
        st.error(st.session_state["analysis_error"])
    analysis = st.session_state.get("analysis")
    if analysis:
        _render_analysis(analysis)


def render_layout() -> None:
    st.set_page_config(page_title="Portfolio AI", layout="centered")
    st.title("Portfolio AI")
    st.markdown("*Ask about my background, or check a role against it. Honest answers only.*")
    if not OPENAI_API_KEY or not SUPABASE_URL:
        st.warning("OPENAI_API_KEY and SUPABASE_URL must be set in your .env file.")
    st.divider()

    chat_tab, fit_tab = st.tabs(["Ask me anything", "Fit check"])
    with chat_tab:
        _render_chat_tab()
    with fit_tab:
        _render_fit_tab()


if __name__ == "__main__":
    render_layout()
