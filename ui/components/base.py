import streamlit as st

PRIMARY_ACCENT = "#667eea"
PRIMARY_DEEP = "#764ba2"
RED = "#e74c3c"
TEXT = "#333"
MUTED = "#666"


def inject_base_css():
    # Streamlit redraws the page on every rerun, so the style block goes out each time.
    st.markdown(
        f"""
        <style>
        .page-title {{font-size:28px; font-weight:700; color:{TEXT}; text-align:center; margin:0 0 10px 0;}}
        .page-subtitle {{font-size:14px; color:{MUTED}; text-align:center; margin:0 0 24px 0;}}
        .field-error {{color:{RED}; font-size:12px; margin-top:-8px; margin-bottom:10px; display:block;}}
        .table-head {{font-weight:600; color:#fff; background:{PRIMARY_ACCENT}; padding:6px 10px; border-radius:4px;}}
        div[data-testid="stButton"] button[kind="primary"] {{
            background:linear-gradient(135deg, {PRIMARY_ACCENT} 0%, {PRIMARY_DEEP} 100%); border:none;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def page_header(title: str, subtitle: str):
    inject_base_css()
    st.markdown(f"<div class='page-title'>{title}</div>", unsafe_allow_html=True)
    st.markdown(f"<div class='page-subtitle'>{subtitle}</div>", unsafe_allow_html=True)


def field_error(message: str):
    if message:
        st.markdown(f"<span class='field-error'>{message}</span>", unsafe_allow_html=True)


def table_head(label: str) -> str:
    return f"<div class='table-head'>{label}</div>"
