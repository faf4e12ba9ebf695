import requests
import streamlit as st

from pura_admin.app import routing, state
from pura_admin.services.resources import RESOURCES
from pura_admin.utils.errors import ApiError, error_message
from pura_admin.utils.logging import logger

GROUPS = ["Manage Content", "Configuration"]

def _nav_button(label: str, view: str, current: str) -> None:
    if st.button(label, key=f"nav_{view}", use_container_width=True,
                 type="primary" if view == current else "secondary"):
        if view != current:
            routing.set_view(view)
            st.rerun()

def render(ctx) -> None:
    current = routing.get_current_view()
    with st.sidebar:
        st.header("Navigation")
        _nav_button("📊 Dashboard", routing.HOME, current)

        for group in GROUPS:
            st.caption(group.upper())
            for spec in sorted((r for r in RESOURCES if r.group == group), key=lambda r: r.title):
                _nav_button(f"{spec.icon} {spec.title}", spec.slug, current)

        st.caption("ACCOUNT")
        _nav_button("🔒 Change Password", routing.PROFILE, current)

        st.divider()
        if ctx.auth.user:
            st.caption(f"Signed in as **{ctx.auth.user.email}**")
        if st.button("🚪 Logout", use_container_width=True, disabled=ctx.auth.loading):
            try:
                ctx.auth.logout()
                # next run builds a fresh context with an empty cookie jar
                state.teardown()
            except (ApiError, requests.RequestException) as e:
                logger.error("Logout failed: %s", e)
                ctx.notifier.error("Logout failed", error_message(e, "Please try again."))
            st.rerun()
