# pages/01_About_the_Project.py
# Streamlit "About / Docs" page for Storefront AI

import os
import sys
import streamlit as st
import pandas as pd
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))
from storefront_ai import settings as cfg
from storefront_ai.domain import models

# ---------------------------
# Page config (safe to keep per-page)
# ---------------------------
st.set_page_config(page_title="About — Storefront AI", layout="wide")

# ---------------------------
# Minimal CSS for polished docs
# ---------------------------
def _inject_docs_css():
    st.markdown("""
    <style>
      .hero {
        padding: 1.2rem 1.2rem .9rem;
        border: 1px solid rgba(0,0,0,0.06);
        background: linear-gradient(180deg, #ffffff 0%, #f7fbff 100%);
        border-radius: 14px;
        margin: 0 0 1rem 0;
      }
      .hero h1 { font-size: 2.1rem; line-height: 1.15; margin: 0 0 .3rem; letter-spacing: -0.02rem; }
      .hero p.lead { font-size: 1.05rem; color:#334155; margin:.25rem 0 .7rem; }
      .badges { display:flex; gap:.5rem; flex-wrap:wrap; }
      .badge {
        font-size:.78rem; border:1px solid rgba(15,118,110,.25);
        padding:.25rem .6rem; border-radius:999px; background:#ecfeff; color:#0f766e; white-space:nowrap;
      }
      .grid-3 { display:grid; grid-template-columns: 1fr 1fr 1fr; gap: .9rem; }
      @media (max-width: 900px) { .grid-3 { grid-template-columns: 1fr; }}
      .tile {
        border: 1px solid rgba(0,0,0,0.06);
        background: #fff;
        border-radius: 12px;
        padding: .9rem;
        height: 100%;
      }
      .tile h3 { margin: 0 0 .4rem; font-size: 1.05rem; }
      .muted { color:#475569; }
    </style>
    """, unsafe_allow_html=True)

_inject_docs_css()

# ---------------------------
# Data model, generated from the record classes
# ---------------------------
RECORDS = {
    "Product": models.Product,
    "ProductVariant": models.ProductVariant,
    "ProductImage": models.ProductImage,
    "Order": models.Order,
    "Customer": models.Customer,
    "Shop": models.Shop,
}


def record_dictionary(model) -> pd.DataFrame:
    rows = []
    for name, field in model.model_fields.items():
        rows.append({
            "Field": name,
            "Type": getattr(field.annotation, "__name__", str(field.annotation)),
            "Required": field.is_required(),
        })
    return pd.DataFrame(rows, columns=["Field", "Type", "Required"])


# ---------------------------
# Hero
# ---------------------------
st.markdown(f"""
<div class="hero">
  <h1>🛍️ Storefront AI</h1>
  <p class="lead">An EasyStore dashboard with two Gemini-powered helpers: product copy and store analysis.</p>
  <div class="badges">
    <span class="badge">Streamlit</span>
    <span class="badge">httpx</span>
    <span class="badge">pydantic</span>
    <span class="badge">{cfg.GENERATION_MODEL}</span>
  </div>
</div>
""", unsafe_allow_html=True)

st.markdown(f"""
<div class="grid-3">
  <div class="tile">
    <h3>📊 Dashboard</h3>
    <div class="muted">Revenue, orders and customers from the last {cfg.ORDERS_LIMIT} paid orders, a sales trend chart,
    and an AI read on recent performance.</div>
  </div>
  <div class="tile">
    <h3>📦 Products</h3>
    <div class="muted">Catalog table (up to {cfg.PRODUCTS_LIMIT} products) with an assistant that drafts an SEO title,
    an HTML description and tags.</div>
  </div>
  <div class="tile">
    <h3>⚙️ Settings</h3>
    <div class="muted">Shop URL and access token, validated against the shop endpoint before they replace the
    active connection. Demo mode needs no credentials.</div>
  </div>
</div>
""", unsafe_allow_html=True)

st.divider()

# ---------------------------
# Data model
# ---------------------------
st.subheader("Data model")
st.caption("Money fields are decimal strings as sent by the API; they are only converted for display and totals.")
tabs = st.tabs(list(RECORDS))
for tab, (name, model) in zip(tabs, RECORDS.items()):
    with tab:
        st.dataframe(record_dictionary(model), use_container_width=True, hide_index=True)

# ---------------------------
# Limitations
# ---------------------------
with st.expander("Limitations", expanded=False):
    st.markdown(f"""
- Only the first page of each resource is read (products {cfg.PRODUCTS_LIMIT}, orders {cfg.ORDERS_LIMIT}, customers {cfg.CUSTOMERS_LIMIT}).
- Nothing is written back to the store; **Apply Changes** is a placeholder.
- The analysis prompt carries at most {cfg.ANALYSIS_ORDER_SAMPLE} orders.
- No retries: a failed call has to be triggered again.
""")

with st.expander("Deployment & configuration", expanded=False):
    st.markdown("""
Set `GEMINI_API_KEY` in `.streamlit/secrets.toml` or the environment. Optional:
`GENERATION_MODEL`, `STOREFRONT_CONFIG_PATH` (where the shop connection is saved),
`STOREFRONT_LOG_LEVEL`, `STOREFRONT_MOCK_DELAY_S`.
""")
