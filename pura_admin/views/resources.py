import streamlit as st

from pura_admin.app.routing import MOUNTED_KEY
from pura_admin.components import resource_list
from pura_admin.utils.errors import ui_error_boundary

@ui_error_boundary
def render(ctx, slug: str) -> None:
    ctl = ctx.list_controller(slug)
    # fetch on entering the section, not on every rerun inside it
    if st.session_state.get(MOUNTED_KEY) != slug:
        st.session_state[MOUNTED_KEY] = slug
        with st.spinner("Loading..."):
            ctl.mount()
    resource_list.render(ctl)
