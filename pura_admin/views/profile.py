import requests
import streamlit as st

from pura_admin.utils.errors import ApiError, ValidationError, error_message, ui_error_boundary

@ui_error_boundary
def render(ctx) -> None:
    st.header("🔒 Change Password")
    if ctx.auth.user:
        st.text_input("Email", value=ctx.auth.user.email, disabled=True)

    with st.form("change_password", clear_on_submit=False):
        password = st.text_input("New Password", type="password")
        confirm = st.text_input("Confirm New Password", type="password")
        submitted = st.form_submit_button("Update Password", type="primary",
                                          disabled=ctx.auth.loading)

    if not submitted:
        return
    try:
        ctx.auth.update_password(password, confirm)
    except ValidationError as e:
        st.error(e.message)
        return
    except (ApiError, requests.RequestException) as e:
        message = error_message(e, "Failed to update password")
        st.error(message)
        ctx.notifier.error("Error", message)
        return
    ctx.notifier.success("Success", "Password updated successfully!")
    st.rerun()
