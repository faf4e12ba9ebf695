import streamlit as st

from pura_admin.services.auth import AuthController
from pura_admin.services.resources import BY_SLUG

HOME = "overview"
PROFILE = "profile"
LOGIN = "login"
LOADING = "loading"
MOUNTED_KEY = "_mounted_view"

def get_current_view() -> str:
    return st.session_state.get("current_view", HOME)

def set_view(view_name: str) -> None:
    if view_name not in BY_SLUG and view_name not in (HOME, PROFILE):
        raise ValueError(f"Unknown view: {view_name}")
    if st.session_state.get("current_view") != view_name:
        # re-entering a section fetches its list again
        st.session_state.pop(MOUNTED_KEY, None)
    st.session_state["current_view"] = view_name

def resolve(auth: AuthController, requested: str) -> str:
    """Route gate: unauthenticated sessions only ever see the login view."""
    if auth.loading:
        return LOADING
    if not auth.is_authenticated:
        return LOGIN
    if requested in BY_SLUG or requested == PROFILE:
        return requested
    return HOME
