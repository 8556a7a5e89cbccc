import os
from pathlib import Path

import streamlit as st

# Streamlit page config should be set by the app entrypoint, not here.


def _secret(name: str, default: str = "") -> str:
    # st.secrets raises when no secrets.toml exists (tests, plain imports)
    try:
        value = st.secrets.get(name)
    except Exception:
        value = None
    return value if value is not None else os.getenv(name, default)


# Secrets / env
GEMINI_API_KEY: str = _secret("GEMINI_API_KEY", os.getenv("API_KEY", ""))
GEMINI_BASE_URL: str = _secret("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")

# One fixed model for both content features
GENERATION_MODEL = _secret("GENERATION_MODEL", "gemini-2.5-flash")

# EasyStore REST API
EASYSTORE_API_PREFIX = "/api/1.0"
ACCESS_TOKEN_HEADER  = "EasyStore-Access-Token"
PRODUCTS_LIMIT       = 250
ORDERS_LIMIT         = 50
CUSTOMERS_LIMIT      = 50
ORDERS_FINANCIAL_STATUS = "paid"

# None means no timeout on store calls
HTTP_TIMEOUT_S: float | None = None
LLM_TIMEOUT_S: float | None = None

# Demo mode
MOCK_DELAY_S = float(_secret("STOREFRONT_MOCK_DELAY_S", "0.5"))

# Prompt budget: only the most recent orders go into the analysis prompt
ANALYSIS_ORDER_SAMPLE = 30
PRODUCT_TONE_DEFAULT  = "persuasive"
PRODUCT_TONE_UI       = "enthusiastic"

# Local persistence of the shop URL + access token
CONFIG_PATH = Path(
    _secret("STOREFRONT_CONFIG_PATH", str(Path.home() / ".storefront_ai" / "config.json"))
).expanduser()

LOG_LEVEL = _secret("STOREFRONT_LOG_LEVEL", "INFO")
