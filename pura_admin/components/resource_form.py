import streamlit as st

from pura_admin.components import about_values
from pura_admin.services.crud import FormController
from pura_admin.services.resources import FieldSpec
from pura_admin.utils.errors import ui_error_boundary
from pura_admin.utils.typing import AboutSection, StagedFile

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "webp"]

def _key(form: FormController, name: str) -> str:
    return f"{form.spec.slug}_{id(form)}_{name}"

def clamp_int(value, min_value=None, max_value=None) -> int:
    """Widget start value: stored numbers outside the field bounds would make number_input raise."""
    number = int(value or 0)
    if min_value is not None:
        number = max(min_value, number)
    if max_value is not None:
        number = min(max_value, number)
    return number

def _render_field(form: FormController, f: FieldSpec) -> None:
    value = getattr(form.record, f.name)
    key = _key(form, f.name)
    disabled = form.loading

    if f.kind == "bool":
        new = st.checkbox(f.label, value=bool(value), key=key, disabled=disabled)
    elif f.kind == "rating":
        new = st.slider(f.label, min_value=f.min_value or 1, max_value=f.max_value or 5,
                        value=clamp_int(value, f.min_value or 1, f.max_value or 5), key=key,
                        disabled=disabled)
    elif f.kind == "int":
        new = st.number_input(f.label, min_value=f.min_value, max_value=f.max_value,
                              value=clamp_int(value, f.min_value, f.max_value), step=1, key=key,
                              disabled=disabled)
        new = int(new)
    elif f.kind == "textarea":
        new = st.text_area(f.label, value=value or "", key=key, disabled=disabled,
                           placeholder=f.placeholder)
    else:
        new = st.text_input(f.label, value=value or "", key=key, disabled=disabled,
                            placeholder=f.placeholder)
    form.set_field(f.name, new)

def _render_image(form: FormController) -> None:
    label = form.spec.media_label
    uploaded = st.file_uploader(
        f"{label} (JPEG, PNG or WebP, max {form.max_upload_mb:g}MB)",
        type=IMAGE_EXTENSIONS, key=_key(form, "image"), disabled=form.loading,
    )
    # a file already uploaded by a failed save stays in the widget; stage it only once
    seen_key = _key(form, "image_seen")
    if uploaded is None:
        form.clear_staged()
        st.session_state.pop(seen_key, None)
    elif st.session_state.get(seen_key) != (uploaded.name, uploaded.size):
        st.session_state[seen_key] = (uploaded.name, uploaded.size)
        form.stage_file(StagedFile(uploaded.name, uploaded.type, uploaded.getvalue()))

    if form.staged is not None:
        st.image(form.staged.data, caption="New image (uploaded on save)", width=240)
    elif form.record.media_url:
        st.image(form.record.media_url, caption=f"Current {label.lower()}", width=240)
    else:
        st.caption(f"No {label.lower()} yet.")

@ui_error_boundary
def render(form: FormController) -> None:
    spec = form.spec
    if st.button("← Back", key=_key(form, "back"), disabled=form.loading):
        form.close()
        st.rerun()

    st.subheader(f"{'Edit' if form.editing else 'New'} {spec.label}")

    if form.editing and not form.loaded:
        st.error(form.error or f"Failed to load {spec.label.lower()}")
        return

    with st.container(border=True):
        for f in spec.fields:
            _render_field(form, f)
        if spec.media_label:
            _render_image(form)

    if isinstance(form.record, AboutSection):
        about_values.render(form)

    if form.error:
        st.error(form.error)

    label = "💾 Save Changes" if form.editing else f"➕ Create {spec.label}"
    if st.button(label, type="primary", key=_key(form, "submit"), disabled=form.loading):
        with st.spinner("Saving..."):
            form.submit()
        st.rerun()
