# app/streamlit_app.py

import os
import sys
from datetime import date

import streamlit as st

# =====================
# Path setup (must run first)
# =====================
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# =====================
# Page config
# =====================
st.set_page_config(
    page_title="AI Budget Advisor",
    page_icon="👛",
    layout="wide",
)

from budget_advisor.advisor import get_budget_advice
from budget_advisor.config import configure_logging
from budget_advisor.ui import (
    complete_pending_analysis,
    get_state,
    init_advisor_state,
    inject_css,
    render_input_form,
    render_results,
)

from app.charts import draw_allocation_pie, draw_prediction_bars
from app.styles import GRAY_800, NEEDS_COLOR

configure_logging()
init_advisor_state()
inject_css()

# =====================
# Header
# =====================
st.markdown(
    f"""
    <h1 style="font-size:26px; font-weight:800; color:{GRAY_800}; margin-bottom:0;">
      👛 AI Budget <span style="color:{NEEDS_COLOR};">Advisor</span>
    </h1>
    """,
    unsafe_allow_html=True,
)
st.markdown("<br>", unsafe_allow_html=True)

col_form, col_result = st.columns([4, 8], gap="large", vertical_alignment="top")

with col_form:
    state = render_input_form(get_state())

with col_result:
    status = render_results(state, draw_pie=draw_allocation_pie, draw_bars=draw_prediction_bars)
    if status == "loading":
        # the button is disabled on this run; finish the request, then show the outcome
        with st.spinner("Consulting Gemini..."):
            complete_pending_analysis(get_budget_advice)
        st.rerun()

# =====================
# Footer
# =====================
st.markdown("<br><br>", unsafe_allow_html=True)
st.caption(f"© {date.today().year} AI Budget Advisor • Intelligence by Gemini")
