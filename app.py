"""
Lotto 6/45 Set Generator -- Streamlit Web Application

Generates frequency-weighted number sets from past draws, one card per set,
with a frequency dashboard and a history browser.
"""
import os
import sys
import warnings

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
warnings.filterwarnings("ignore")

from lottogen.analysis import build_tiers, compute_frequency, frequency_table
from lottogen.generator import generate
from lottogen.rng import new_seed
from lottogen.scraper import DRAWS_PATH, META_PATH, load_draws, load_meta
from lottogen.stats import band_of, set_stats

# -- Page Config ----------------------------------------------------------

st.set_page_config(
    page_title="Lotto 6/45 Set Generator",
    page_icon="🎱",
    layout="wide",
    initial_sidebar_state="expanded",
)

BAND_COLORS = ["#FBC400", "#69C8F2", "#FF7272", "#AAAAAA", "#B0D840"]
TIER_COLORS = {"top": "#2ECC71", "mid": "#3498DB", "low": "#E74C3C"}

# -- Custom CSS -----------------------------------------------------------

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        text-align: center;
        padding: 1rem 0;
    }
    .set-card {
        background: linear-gradient(135deg, #1A1F2E, #2D3548);
        border-radius: 16px;
        padding: 1.25rem;
        margin: 0.5rem 0;
        border: 1px solid #3D4663;
    }
    .set-title { font-size: 1.1rem; font-weight: 600; color: #FFE66D; }
    .type-badge {
        float: right;
        background: #3D4663;
        border-radius: 999px;
        padding: 2px 10px;
        font-size: 0.8rem;
        color: #eee;
    }
    .number-ball {
        display: inline-block;
        width: 44px;
        height: 44px;
        border-radius: 50%;
        text-align: center;
        line-height: 44px;
        font-size: 1.1rem;
        font-weight: 700;
        margin: 4px;
        color: white;
    }
    .set-hint { margin-top: 0.5rem; color: #aaa; font-size: 0.85rem; }
    .disclaimer {
        background: #2D1B1B;
        border: 1px solid #FF6B6B;
        border-radius: 8px;
        padding: 1rem;
        margin: 1rem 0;
        font-size: 0.9rem;
    }
</style>
""", unsafe_allow_html=True)


# -- Data Loading (Cached) ------------------------------------------------

@st.cache_data(ttl=3600)
def get_data():
    return load_draws()


@st.cache_data(ttl=3600)
def get_meta():
    return load_meta()


def render_set_card(idx, gen_set, seed):
    balls = " ".join(
        f'<span class="number-ball" style="background:{BAND_COLORS[band_of(n)]}" '
        f'title="{n}">{n}</span>'
        for n in gen_set.numbers
    )
    stats = set_stats(gen_set.numbers)
    return f"""
    <div class="set-card">
        <div class="set-title">Set {idx + 1}
            <span class="type-badge">{gen_set.type.label}</span>
        </div>
        <div style="margin: 0.75rem 0;">{balls}</div>
        <div class="set-hint">{gen_set.type.explanation}</div>
        <div class="set-hint">Sum {stats['sum']} | Odd/Even {stats['odd_even']} |
            Bands {stats['band_count']} | Seed {seed}</div>
    </div>
    """


def run_generation(df, count, include_bonus, cross_set_dedup, seed_supplier=new_seed):
    """Generate `count` sets with a fresh seed and remember the request."""
    seed = seed_supplier()
    st.session_state["last_count"] = count
    st.session_state["last_seed"] = seed
    st.session_state["sets"] = generate(
        df, count, seed,
        include_bonus=include_bonus,
        cross_set_dedup=cross_set_dedup,
    )


# -- Sidebar --------------------------------------------------------------

st.sidebar.markdown("## Lotto 6/45 Generator")

page = st.sidebar.radio("Navigate", ["Generate", "Frequency", "Historical Results"])

st.sidebar.markdown("---")
include_bonus = st.sidebar.checkbox("Include bonus numbers in frequency", value=False)
cross_set_dedup = st.sidebar.checkbox("Reduce repeats across sets", value=True)

st.sidebar.markdown("---")
st.sidebar.markdown(
    "**Disclaimer:** Frequency weighting is a presentation heuristic. "
    "Every combination has the same odds of being drawn."
)


# -- Load Data ------------------------------------------------------------

df = get_data()
meta = get_meta()


# ==========================================================================
# PAGE 1: GENERATE
# ==========================================================================

if page == "Generate":
    st.markdown('<div class="main-header">Frequency-Weighted Sets</div>', unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Draws Loaded", f"{len(df):,}")
    with col2:
        updated = (meta.get("updated_at") or "-").replace("T", " ").replace("Z", " UTC")
        st.metric("Last Updated", updated)

    if len(df) == 0:
        st.error(
            f"No draw history loaded. Check {DRAWS_PATH} and {META_PATH}; "
            "sets below use uniform weights."
        )

    col_a, col_b, col_c = st.columns(3)
    with col_a:
        if st.button("Generate 5 sets", use_container_width=True):
            run_generation(df, 5, include_bonus, cross_set_dedup)
    with col_b:
        if st.button("Generate 10 sets", use_container_width=True):
            run_generation(df, 10, include_bonus, cross_set_dedup)
    with col_c:
        if st.button("Re-roll", use_container_width=True):
            run_generation(df, st.session_state.get("last_count", 5),
                           include_bonus, cross_set_dedup)

    if "sets" not in st.session_state:
        run_generation(df, 5, include_bonus, cross_set_dedup)

    sets = st.session_state["sets"]
    seed = st.session_state["last_seed"]
    cols = st.columns(2)
    for i, gen_set in enumerate(sets):
        with cols[i % 2]:
            st.markdown(render_set_card(i, gen_set, seed), unsafe_allow_html=True)


# ==========================================================================
# PAGE 2: FREQUENCY
# ==========================================================================

elif page == "Frequency":
    st.markdown('<div class="main-header">Number Frequency</div>', unsafe_allow_html=True)

    freq = compute_frequency(df, include_bonus)
    tiers = build_tiers(freq)
    freq_df = frequency_table(freq, tiers)

    fig = go.Figure(go.Bar(
        x=freq_df["Number"],
        y=freq_df["Count"],
        marker_color=[TIER_COLORS[t] for t in freq_df["Tier"]],
        hovertemplate="Number %{x}<br>Count: %{y}<extra></extra>",
    ))
    fig.update_layout(
        title="Draw Count per Number" + (" (incl. bonus)" if include_bonus else ""),
        xaxis_title="Number",
        yaxis_title="Count",
        template="plotly_dark",
        height=400,
    )
    fig.add_annotation(x=0.02, y=0.98, xref="paper", yref="paper",
                       text="Green=High tier | Blue=Mid tier | Red=Low tier",
                       showarrow=False, font=dict(size=11))
    st.plotly_chart(fig, use_container_width=True)

    col_t, col_m, col_l = st.columns(3)
    for col, name in ((col_t, "top"), (col_m, "mid"), (col_l, "low")):
        with col:
            st.markdown(f"**{name.capitalize()} tier:** {', '.join(str(n) for n in sorted(tiers[name]))}")


# ==========================================================================
# PAGE 3: HISTORICAL RESULTS
# ==========================================================================

elif page == "Historical Results":
    st.markdown('<div class="main-header">Historical Results Browser</div>', unsafe_allow_html=True)

    search_num = st.number_input("Search by number (1-45)", min_value=0, max_value=45, value=0)

    filtered = df.copy()
    if search_num > 0:
        mask = pd.Series(False, index=filtered.index)
        for i in range(1, 7):
            mask = mask | (filtered[f"num{i}"] == search_num)
        mask = mask | (filtered["bonus"] == search_num)
        filtered = filtered[mask]

    st.markdown(f"**Showing {len(filtered)} draws**")
    st.dataframe(
        filtered.sort_values("draw_number", ascending=False),
        use_container_width=True,
        height=600,
    )
