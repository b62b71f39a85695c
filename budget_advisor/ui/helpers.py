# budget_advisor/ui/helpers.py
from __future__ import annotations

import html

import streamlit as st


# ────────────────────────────────────────────────────
# CSS
# ────────────────────────────────────────────────────
_CSS = """
<style>
.ba-card {
    background:#fff; border:1px solid #F3F4F6; border-radius:24px;
    padding:24px; box-shadow:0 1px 4px rgba(0,0,0,.04); margin-bottom:12px;
}
.ba-label { font-size:12px; font-weight:700; color:#9CA3AF; text-transform:uppercase; letter-spacing:.1em; margin-bottom:4px; }
.ba-value { font-size:30px; font-weight:900; color:#111827; }
.ba-pos { color:#059669; }
.ba-neg { color:#E11D48; }
.ba-accent { color:#4F46E5; }
.ba-note { font-size:10px; color:#9CA3AF; font-weight:700; text-transform:uppercase; margin-top:8px; }
.ba-track { margin-top:8px; height:4px; width:100%; background:#F3F4F6; border-radius:999px; overflow:hidden; }
.ba-fill  { height:100%; }

.ba-item {
    display:flex; gap:12px; padding:14px 16px; border-radius:16px;
    font-size:14px; font-weight:500; margin-bottom:10px; border:1px solid;
}
.ba-alert   { background:#FFF1F2; border-color:#FFE4E6; color:#BE123C; }
.ba-ok      { background:#ECFDF5; border-color:#D1FAE5; color:#059669; font-weight:700; }
.ba-suggest { background:#EEF2FF; border-color:#E0E7FF; color:#4338CA; }

.ba-tile { padding:14px 16px; border-radius:16px; border:1px solid #F3F4F6; background:#F9FAFB; }
.ba-tile-label { font-size:10px; font-weight:900; color:#9CA3AF; text-transform:uppercase; letter-spacing:.1em; margin-bottom:4px; }
.ba-tile-value { font-size:19px; font-weight:900; color:#111827; }
.ba-tile.wants   { background:#FFFBEB; border-color:#FEF3C7; }
.ba-tile.wants .ba-tile-label { color:#F59E0B; }
.ba-tile.wants .ba-tile-value { color:#D97706; }
.ba-tile.savings { background:#ECFDF5; border-color:#D1FAE5; }
.ba-tile.savings .ba-tile-label { color:#10B981; }
.ba-tile.savings .ba-tile-value { color:#047857; }
</style>
"""


def inject_css() -> None:
    # st.markdown output does not survive a rerun, so inject on every run
    st.markdown(_CSS, unsafe_allow_html=True)


def esc(text) -> str:
    """Model text goes into raw HTML blocks; escape it."""
    return html.escape(str(text))


def progress_bar_html(width: float, color: str) -> str:
    return (
        '<div class="ba-track">'
        f'<div class="ba-fill" style="width:{width:.1f}%; background:{color};"></div>'
        "</div>"
    )


def section_title(title: str, icon: str = "") -> None:
    st.markdown(f"#### {icon} {title}" if icon else f"#### {title}")
