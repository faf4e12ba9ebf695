"""
Pura Admin - content dashboard entry point
"""
import os, sys
import streamlit as st

# Ensure package imports resolve when running via 'streamlit run pura_admin/app/main.py'
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from pura_admin.utils import errors, logging as app_logging, notify  # noqa: E402
from pura_admin.services.config import get_settings  # noqa: E402
from pura_admin.app import routing, state  # noqa: E402
from pura_admin.components import header, sidebar  # noqa: E402
from pura_admin.views import login, overview, profile, resources  # noqa: E402

def configure_page() -> None:
    st.set_page_config(
        page_title="Pura Admin",
        page_icon="🛕",
        layout="wide",
        initial_sidebar_state="expanded",
    )

@errors.ui_error_boundary
def main() -> None:
    settings = get_settings()
    app_logging.init(settings.log_dir, settings.log_level)
    configure_page()
    ctx = state.initialize()

    view = routing.resolve(ctx.auth, routing.get_current_view())
    if view == routing.LOADING:
        st.info("Checking session...")
        return
    if view == routing.LOGIN:
        login.render(ctx)
        return

    header.render()
    sidebar.render(ctx)
    notify.render(ctx.notifier)

    if view == routing.PROFILE:
        profile.render(ctx)
    elif view == routing.HOME:
        overview.render(ctx)
    else:
        resources.render(ctx, view)

if __name__ == "__main__":
    main()
