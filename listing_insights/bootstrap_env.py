"""
Make dashboard settings visible through os.environ before anything reads them.

Top-level scalar entries of `.streamlit/secrets.toml` (e.g. LISTINGS_CSV_PATH,
LOG_LEVEL) are copied into the environment, then `.env` is loaded. Neither
step overrides a variable that is already set.
"""

from __future__ import annotations

import os

import streamlit as st
from dotenv import load_dotenv


def _copy_secrets_to_env() -> None:
    try:
        secrets = st.secrets.to_dict()
    except Exception:
        # No secrets.toml locally or outside the Streamlit runtime
        return
    for key, value in secrets.items():
        if not isinstance(value, dict):
            os.environ.setdefault(key.upper(), str(value))


def ensure_env() -> None:
    """Idempotent; safe inside and outside the Streamlit runtime."""
    _copy_secrets_to_env()
    load_dotenv()


ensure_env()
