import streamlit as st

def render() -> None:
    st.markdown(
        """
        <style>
        .pa-header{background:linear-gradient(90deg,#c2410c,#f97316);padding:12px;border-radius:8px;margin:8px 0 16px}
        .pa-header h1{color:#fff;margin:0;text-align:center;font-weight:700}
        .pa-header p{color:#ffedd5;margin:0;text-align:center;font-size:.9rem}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(
        '<div class="pa-header"><h1>🛕 Pura Admin</h1><p>CMS Dashboard</p></div>',
        unsafe_allow_html=True,
    )
