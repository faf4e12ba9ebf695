import pandas as pd
import plotly.express as px
import streamlit as st

from pura_admin.app import routing
from pura_admin.services.overview import load_overview, time_ago
from pura_admin.services.resources import OVERVIEW_SECTIONS, get_resource
from pura_admin.utils.errors import ui_error_boundary

@ui_error_boundary
def render(ctx) -> None:
    st.header("📊 Dashboard")
    st.markdown("Overview of the content published on the website.")

    with st.spinner("Loading statistics..."):
        overview = load_overview(ctx.client)
    if overview.error:
        st.warning(f"Could not load statistics: {overview.error}")

    cols = st.columns(len(OVERVIEW_SECTIONS))
    for col, (slug, _) in zip(cols, OVERVIEW_SECTIONS):
        spec = get_resource(slug)
        with col:
            st.metric(f"{spec.icon} {spec.title}", overview.counts.get(slug, 0))
            if st.button(f"Add {spec.label}", key=f"quick_add_{slug}", use_container_width=True):
                routing.set_view(slug)
                ctl = ctx.list_controller(slug)
                ctl.start_create()
                st.session_state[routing.MOUNTED_KEY] = slug
                st.rerun()

    counts = pd.DataFrame(
        [{"Section": get_resource(slug).title, "Records": overview.counts.get(slug, 0)}
         for slug, _ in OVERVIEW_SECTIONS]
    )
    fig = px.bar(counts, x="Section", y="Records", title="Content per section")
    fig.update_layout(height=320, xaxis_title="", yaxis_title="Records", showlegend=False)
    st.plotly_chart(fig, use_container_width=True)

    st.markdown("---")
    st.subheader("🕒 Recent Activity")
    if not overview.recent:
        st.info("No recent activity yet.")
        return

    df = pd.DataFrame(
        [
            {"Type": item.kind, "Content": item.summary, "Created": time_ago(item.created_at)}
            for item in overview.recent
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)
