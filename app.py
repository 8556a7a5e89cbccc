# app.py: Storefront AI (EasyStore dashboard + Gemini content tools)
import html
import os
import sys
import altair as alt
import streamlit as st
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))
from storefront_ai import settings as cfg
from storefront_ai.domain import metrics
from storefront_ai.domain.models import StoreConfig
from storefront_ai.logging_config import configure_logging
from storefront_ai.services import content_service
from storefront_ai.services.runner import run_sync
from storefront_ai.services.session import StoreSession

# =========================
# App config
# =========================
st.set_page_config(page_title="🛍️ Storefront AI", layout="wide")
configure_logging()

VIEWS = {"dashboard": "📊 Dashboard", "products": "📦 Products", "settings": "⚙️ Settings"}


def _inject_base_css():
    st.markdown("""
    <style>
      .hero {
        padding: 1rem 1.2rem .7rem;
        border: 1px solid rgba(0,0,0,0.06);
        background: linear-gradient(180deg, #ffffff 0%, #f7fbff 100%);
        border-radius: 14px;
        margin: 0 0 1rem 0;
      }
      .hero h1 { font-size: 1.9rem; margin: 0 0 .2rem 0; letter-spacing: -0.02rem; }
      .hero p.lead { font-size: 1rem; margin: .2rem 0 .4rem; color: #334155; }
      .badge {
        font-size: .78rem;
        border: 1px solid rgba(15,118,110,0.25);
        padding: .25rem .6rem;
        border-radius: 999px;
        background: #ecfeff;
        color: #0f766e;
        white-space: nowrap;
      }
      .badge.demo { border-color: rgba(180,83,9,.25); background: #fffbeb; color: #b45309; }
      .insights {
        border-radius: 12px;
        padding: 1rem;
        background: linear-gradient(135deg, #312e81 0%, #0f172a 100%);
        color: #e2e8f0;
      }
      .insights h3 { color: #fff; margin: 0 0 .4rem; font-size: 1.1rem; }
      .chips { display: flex; gap: .4rem; flex-wrap: wrap; margin-top: .3rem; }
      .chip {
        border: 1px solid rgba(2,132,199,.25);
        background: #f0f9ff; color: #075985;
        border-radius: 999px; padding: .2rem .6rem; font-size: .85rem;
      }
      .copy-box {
        border: 1px solid rgba(0,0,0,0.08); background: #fff;
        border-radius: 10px; padding: .8rem; color: #475569;
      }
    </style>
    """, unsafe_allow_html=True)


_inject_base_css()

# =========================
# Session
# =========================
if "store" not in st.session_state:
    st.session_state["store"] = StoreSession.from_saved()
store: StoreSession = st.session_state["store"]

if not store.loaded:
    with st.spinner("Loading store data..."):
        run_sync(store.load())

data = store.data

# =========================
# Sidebar
# =========================
with st.sidebar:
    st.header("🛍️ Storefront AI")
    view = st.radio(
        "Navigate",
        options=list(VIEWS),
        format_func=VIEWS.get,
        key="view",
        label_visibility="collapsed",
    )
    st.divider()
    if store.demo or not store.config:
        st.markdown('<span class="badge demo">● Demo Mode</span>', unsafe_allow_html=True)
    else:
        st.markdown(f'<span class="badge">● {html.escape(store.config.display_host)}</span>', unsafe_allow_html=True)
    if data.shop:
        st.caption(f"Shop: **{data.shop.name}** • {data.shop.currency} • {data.shop.timezone}")


# =========================
# AI calls
# =========================
def _start(flag: str):
    # callback: the flag is already set when the next pass renders the button
    st.session_state[flag] = True


def _show_error(key: str):
    if st.session_state.get(key):
        st.error(st.session_state.pop(key))


# =========================
# Dashboard
# =========================
def _render_dashboard():
    st.markdown("""
    <div class="hero">
      <h1>Store Overview</h1>
      <p class="lead">Real-time metrics and AI insights</p>
    </div>
    """, unsafe_allow_html=True)

    c1, c2, c3 = st.columns(3)
    c1.metric("Total Revenue", f"${metrics.total_revenue(data.orders):,.2f}")
    c2.metric("Orders Fetched", len(data.orders), help=f"Last {cfg.ORDERS_LIMIT} paid orders")
    c3.metric("Customers", len(data.customers), help="Total base")

    left, right = st.columns([2, 1])
    with left:
        st.subheader("Sales Trend")
        trend = metrics.sales_trend_frame(data.orders)
        if trend.empty:
            st.caption("No orders to chart yet.")
        else:
            area = alt.Chart(trend).mark_area(
                line={"color": "#3b82f6"}, color="#3b82f6", opacity=0.15
            ).encode(
                x=alt.X("date:T", title=None, axis=alt.Axis(format="%b %d")),
                y=alt.Y("amount:Q", title=None, axis=alt.Axis(format="$,.0f")),
                tooltip=["order:N", alt.Tooltip("amount:Q", format="$,.2f"), "label:N"],
            )
            st.altair_chart(area, use_container_width=True)

    with right:
        st.markdown(
            '<div class="insights"><h3>✨ AI Insights</h3>'
            "Get a strategic read on recent orders and your customer base.</div>",
            unsafe_allow_html=True,
        )
        analyzing = st.session_state.get("analyzing", False)
        st.button(
            "Analyze store performance",
            disabled=analyzing,
            use_container_width=True,
            on_click=_start,
            args=("analyzing",),
        )
        if analyzing:
            try:
                with st.spinner("Analyzing..."):
                    payload = run_sync(content_service.analyze_store_performance(data.orders, data.customers))
                st.session_state["analysis"] = content_service.as_store_analysis(payload)
            except Exception:
                st.session_state["analysis_error"] = "Analysis failed. Please try again."
            finally:
                st.session_state["analyzing"] = False
            st.rerun()
        _show_error("analysis_error")

        analysis = st.session_state.get("analysis")
        if analysis:
            st.write(analysis.summary)
            if analysis.trends:
                st.markdown("**Key trends**")
                st.markdown("\n".join(f"- {t}" for t in analysis.trends))
            if analysis.recommendations:
                st.markdown("**Recommendations**")
                st.markdown("\n".join(f"{i}. {r}" for i, r in enumerate(analysis.recommendations, 1)))


# =========================
# Products
# =========================
def _close_enhancer():
    st.session_state["enhance_id"] = None
    st.session_state["product_copy"] = None


def _render_products():
    h1, h2 = st.columns([6, 1.4], vertical_alignment="center")
    with h1:
        st.markdown("## Products")
        st.caption("Manage and enhance your catalog")
    with h2:
        if st.button("🔄 Sync Products", use_container_width=True):
            with st.spinner("Loading store data..."):
                run_sync(store.load())
            st.rerun()

    df = metrics.products_frame(data.products)
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Image": st.column_config.ImageColumn(width="small"),
            "Status": st.column_config.TextColumn(width="small"),
        },
    )

    if not data.products:
        st.info("No products found.")
        return

    by_id = {p.id: p for p in data.products}
    sel1, sel2 = st.columns([6, 1.4], vertical_alignment="bottom")
    with sel1:
        chosen = st.selectbox(
            "Enhance a product",
            options=list(by_id),
            format_func=lambda pid: by_id[pid].title,
        )
    with sel2:
        if st.button("✨ Enhance", use_container_width=True):
            st.session_state["enhance_id"] = chosen
            st.session_state["product_copy"] = None

    product = by_id.get(st.session_state.get("enhance_id"))
    if not product:
        return

    st.divider()
    t1, t2 = st.columns([8, 1])
    t1.subheader("AI Product Assistant")
    t2.button("✕", key="close_enhancer", on_click=_close_enhancer)

    p1, p2 = st.columns([1, 5])
    if product.image_url:
        p1.image(product.image_url, width=96)
    with p2:
        st.markdown(f"**{product.title}**")
        st.markdown(product.body_html or "", unsafe_allow_html=True)

    copy = st.session_state.get("product_copy")
    if not copy:
        st.caption("Use Gemini AI to generate SEO-optimized titles, persuasive descriptions, and relevant tags.")
        generating = st.session_state.get("generating", False)
        st.button(
            "✨ Generate with Gemini",
            disabled=generating,
            type="primary",
            use_container_width=True,
            on_click=_start,
            args=("generating",),
        )
        if generating:
            try:
                with st.spinner("Generating..."):
                    payload = run_sync(content_service.generate_product_description(
                        product.title,
                        f"{product.product_type}, {product.tags}",
                        cfg.PRODUCT_TONE_UI,
                    ))
                st.session_state["product_copy"] = content_service.as_product_copy(payload)
            except Exception:
                st.session_state["generate_error"] = "Failed to generate description. Please check your AI quota."
            finally:
                st.session_state["generating"] = False
            st.rerun()
        _show_error("generate_error")
        return

    st.markdown("**Suggested Title**")
    st.markdown(f'<div class="copy-box">{html.escape(copy.title)}</div>', unsafe_allow_html=True)
    st.markdown("**Description HTML**")
    st.markdown(f'<div class="copy-box">{copy.description}</div>', unsafe_allow_html=True)
    st.markdown("**SEO Tags**")
    chips = "".join(f'<span class="chip">🏷️ {html.escape(t)}</span>' for t in copy.tag_list)
    st.markdown(f'<div class="chips">{chips}</div>', unsafe_allow_html=True)

    b1, b2 = st.columns(2)
    if b1.button("Discard", use_container_width=True):
        st.session_state["product_copy"] = None
        st.rerun()
    b2.button(
        "Apply Changes",
        disabled=True,
        use_container_width=True,
        help="Writing product changes back to EasyStore is not supported yet.",
    )


# =========================
# Settings
# =========================
def _use_demo():
    # callback: runs before the next script pass, so the nav widget can still be changed
    run_sync(store.use_demo())
    st.session_state["view"] = "dashboard"
    st.session_state["analysis"] = None


def _render_settings():
    st.markdown("## EasyStore Connection")
    st.caption("Configure your API credentials to access store data")
    if st.session_state.get("flash"):
        st.success(st.session_state.pop("flash"))

    with st.container(border=True):
        st.markdown("**Don't have an API Key?**")
        st.caption("You can explore the application using mock data generated for demonstration purposes.")
        st.button("Use Demo Mode", on_click=_use_demo)

    current = store.config or StoreConfig()
    with st.form(key="settings_form"):
        shop_url = st.text_input("Shop URL", value=current.shop_url, placeholder="https://your-shop.easystore.co")
        access_token = st.text_input(
            "Access Token",
            value=current.access_token,
            type="password",
            placeholder="easystore_token_...",
            help="Your access token is stored locally on this machine.",
        )
        submitted = st.form_submit_button("💾 Save Connection")

    if submitted:
        if not shop_url.strip() or not access_token.strip():
            st.warning("Please enter both the shop URL and the access token.")
        else:
            try:
                with st.spinner("Connecting..."):
                    ok = run_sync(store.apply_settings(StoreConfig(shop_url=shop_url.strip(), access_token=access_token.strip())))
            except OSError as e:
                st.error(f"Connected, but the settings could not be saved: {e}")
                return
            if ok:
                st.session_state["flash"] = f"Connected to {store.config.display_host}."
                st.session_state["analysis"] = None
                st.rerun()
            else:
                st.error("Could not connect to EasyStore with these credentials. Please check URL and Token.")

    with st.expander("ℹ️ How to get your API Key", expanded=False):
        st.markdown(
            "1. Log in to your EasyStore admin panel.\n"
            "2. Navigate to **Apps** > **Private Apps**.\n"
            "3. Create a new private app and enable read permissions for Products, Orders and Customers.\n"
            "4. Copy the generated **Access Token**."
        )


if view == "dashboard":
    _render_dashboard()
elif view == "products":
    _render_products()
else:
    _render_settings()
