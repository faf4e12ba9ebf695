import streamlit as st

from pura_admin.components import resource_form
from pura_admin.services.crud import ListController
from pura_admin.utils.errors import ui_error_boundary
from pura_admin.utils.typing import Record

COLUMNS = 3

def _render_confirm(ctl: ListController) -> None:
    record = ctl.find(ctl.pending_delete)
    what = ctl.spec.summary(record) if record is not None else ctl.pending_delete
    with st.container(border=True):
        st.warning(f"**Delete {ctl.spec.label}**: are you sure you want to delete "
                   f"\"{what}\"? This action cannot be undone.")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Yes, delete it!", type="primary", key=f"{ctl.spec.slug}_confirm_delete",
                         use_container_width=True):
                with st.spinner("Deleting..."):
                    ctl.confirm_delete()
                st.rerun()
        with col2:
            if st.button("Cancel", key=f"{ctl.spec.slug}_cancel_delete", use_container_width=True):
                ctl.cancel_delete()
                st.rerun()

def _render_card(ctl: ListController, record: Record) -> None:
    spec = ctl.spec
    with st.container(border=True):
        if record.media_url:
            st.image(record.media_url, use_container_width=True)
        st.markdown(f"**{spec.summary(record) or '(untitled)'}**")
        for line in spec.details(record):
            if line:
                st.caption(line)
        col1, col2 = st.columns(2)
        with col1:
            if st.button("✏️ Edit", key=f"{spec.slug}_edit_{record.id}", use_container_width=True):
                ctl.start_edit(record.id)
                st.rerun()
        with col2:
            if st.button("🗑️ Delete", key=f"{spec.slug}_delete_{record.id}", use_container_width=True):
                ctl.request_delete(record.id)
                st.rerun()

def _render_pager(ctl: ListController, total_pages: int) -> None:
    if total_pages <= 1:
        return
    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("◀ Previous", key=f"{ctl.spec.slug}_prev", disabled=ctl.page == 1):
            ctl.set_page(ctl.page - 1)
            st.rerun()
    with col2:
        st.markdown(f"<div style='text-align:center'>Page {ctl.page} of {total_pages}</div>",
                    unsafe_allow_html=True)
    with col3:
        if st.button("Next ▶", key=f"{ctl.spec.slug}_next", disabled=ctl.page == total_pages):
            ctl.set_page(ctl.page + 1)
            st.rerun()

@ui_error_boundary
def render(ctl: ListController) -> None:
    spec = ctl.spec
    if ctl.form is not None:
        resource_form.render(ctl.form)
        return

    col1, col2 = st.columns([3, 1])
    with col1:
        st.header(f"{spec.icon} {spec.title}")
    with col2:
        if st.button(f"➕ Add {spec.label}", type="primary", key=f"{spec.slug}_add",
                     use_container_width=True):
            ctl.start_create()
            st.rerun()

    if ctl.error:
        st.error(ctl.error)
        if st.button("🔄 Retry", key=f"{spec.slug}_retry"):
            ctl.refresh()
            st.rerun()
        return

    if ctl.pending_delete is not None:
        _render_confirm(ctl)

    if not ctl.items:
        st.info(spec.empty_text)
        return

    if spec.search_fields:
        term = st.text_input("🔍 Search", value=ctl.search, key=f"{spec.slug}_search",
                             placeholder="Search " + ", ".join(spec.search_fields))
        ctl.set_search(term)

    rows, total_pages = ctl.visible()
    if not rows:
        st.info(f"No {spec.title.lower()} match '{ctl.search}'.")
        return

    cols = st.columns(COLUMNS)
    for i, record in enumerate(rows):
        with cols[i % COLUMNS]:
            _render_card(ctl, record)

    _render_pager(ctl, total_pages)
