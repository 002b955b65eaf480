# solanawiz/ui_state.py — per-section request state for the Streamlit frontend
"""Busy/pending bookkeeping for one outstanding request per UI section.

`state` is ``st.session_state`` in the app and a plain dict in tests.
``begin`` runs from a button's ``on_click`` callback, so the rerun that
follows already renders that button disabled. The script then sends the
pending payload, records the outcome with ``finish`` and reruns.
"""
from typing import Any, MutableMapping, Optional

SECTIONS = ("sentiment", "strategy", "trends")


def _key(section: str, name: str) -> str:
    return f"{section}_{name}"


def init(state: MutableMapping[str, Any]) -> None:
    for section in SECTIONS:
        for name in ("busy", "pending", "result", "error", "warning"):
            state.setdefault(_key(section, name), False if name == "busy" else None)


def is_busy(state: MutableMapping[str, Any], section: str) -> bool:
    return bool(state.get(_key(section, "busy")))


def begin(state: MutableMapping[str, Any], section: str, payload: dict) -> bool:
    """Queue `payload` and mark the section busy. Ignored while a request is outstanding."""
    if is_busy(state, section):
        return False
    state[_key(section, "busy")] = True
    state[_key(section, "pending")] = payload
    state[_key(section, "result")] = None
    state[_key(section, "error")] = None
    state[_key(section, "warning")] = None
    return True


def reject(state: MutableMapping[str, Any], section: str, message: str) -> None:
    """Form input failed validation; nothing is sent."""
    state[_key(section, "warning")] = message


def pending(state: MutableMapping[str, Any], section: str) -> Optional[dict]:
    return state.get(_key(section, "pending")) if is_busy(state, section) else None


def finish(state: MutableMapping[str, Any], section: str, result: Optional[Any] = None,
           error: Optional[str] = None) -> None:
    state[_key(section, "result")] = result
    state[_key(section, "error")] = error
    state[_key(section, "pending")] = None
    state[_key(section, "busy")] = False
