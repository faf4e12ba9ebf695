import streamlit as st

from pura_admin.services.crud import FormController

def render(form: FormController) -> None:
    """Editable value rows of an about section; saved with the section."""
    st.markdown("#### Values")
    values = form.values
    if not values:
        st.caption("No values added yet.")

    remove_at = None
    for index, value in enumerate(values):
        # keyed by object identity so rows keep their widgets when one is removed
        key = f"about_value_{id(value)}"
        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                title = st.text_input(f"Value #{index + 1} title", value=value.title,
                                      key=f"{key}_title", disabled=form.loading)
            with col2:
                order = st.number_input("Order", min_value=0, value=int(value.order_index or 0),
                                        step=1, key=f"{key}_order", disabled=form.loading)
            text = st.text_area("Value", value=value.value, key=f"{key}_value",
                                disabled=form.loading)
            form.update_value(index, "title", title)
            form.update_value(index, "value", text)
            form.update_value(index, "order_index", int(order))
            if st.button("🗑️ Remove", key=f"{key}_remove", disabled=form.loading):
                remove_at = index

    if remove_at is not None:
        form.remove_value(remove_at)
        st.rerun()

    if st.button("➕ Add Value", key=f"about_add_value_{id(form)}", disabled=form.loading):
        form.add_value()
        st.rerun()
