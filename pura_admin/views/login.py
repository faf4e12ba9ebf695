from typing import Optional

import requests
import streamlit as st

from pura_admin.app import routing
from pura_admin.services.auth import AuthController
from pura_admin.utils.errors import ApiError, AuthenticationError, ValidationError, ui_error_boundary
from pura_admin.utils.logging import logger
from pura_admin.utils.validation import validate_email, validate_password

CAPTCHA_MISSING = "reCAPTCHA is not loaded yet. Please try again in a moment."

def submit_login(auth: AuthController, email: str, password: str,
                 captcha_token: Optional[str]) -> Optional[str]:
    """Run the login flow; returns the message to show, or None on success."""
    try:
        validate_email(email)
        validate_password(password)
    except ValidationError as e:
        return e.message
    if not captcha_token:
        return CAPTCHA_MISSING
    try:
        auth.login(email, password, captcha_token)
    except (AuthenticationError, ApiError, requests.RequestException) as e:
        logger.info("login failed: %s", e)
        return AuthenticationError.GENERIC_MESSAGE
    return None

@ui_error_boundary
def render(ctx) -> None:
    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.title("🛕 Pura Admin")
        st.caption("Manage your temple website content")
        st.subheader("Sign in to the dashboard")

        error_box = st.empty()
        if st.session_state.get("login_error"):
            error_box.error(st.session_state["login_error"])

        with st.form("login_form"):
            email = st.text_input("Email", placeholder="admin@example.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button(
                "Processing..." if ctx.auth.loading else "Sign in",
                type="primary", use_container_width=True, disabled=ctx.auth.loading,
            )

        if submitted:
            with st.spinner("Signing in..."):
                message = submit_login(ctx.auth, email.strip(), password, ctx.settings.recaptcha_token)
            if message:
                st.session_state["login_error"] = message
                error_box.error(message)
                return
            st.session_state.pop("login_error", None)
            routing.set_view(routing.HOME)
            st.rerun()
