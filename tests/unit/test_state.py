from pura_admin.app import state
from pura_admin.components.resource_form import clamp_int
from pura_admin.services.config import Settings

def test_context_uses_configured_key_prefix(client):
    ctx = state.build_context(Settings(storage_key_prefix="uploads/", page_size=4), client=client)
    assert ctx.replacer.key_for("http://cdn.test/uploads/abc.jpg") == "uploads/abc.jpg"
    ctl = ctx.list_controller("gallery")
    assert ctl.page_size == 4 and ctx.list_controller("gallery") is ctl

def test_teardown_drops_context_and_closes_session(client, session, monkeypatch):
    ctx = state.build_context(Settings(), client=client)
    ctx.auth.loading = False
    store = {state.CTX_KEY: ctx}
    monkeypatch.setattr(state.st, "session_state", store)
    state.teardown()
    assert state.CTX_KEY not in store
    assert session.closed and ctx.auth.user is None
    state.teardown()

def test_number_widget_start_value_stays_in_bounds():
    assert clamp_int(0, 1) == 1
    assert clamp_int(None, 1) == 1
    assert clamp_int(7, 1, 5) == 5
    assert clamp_int("3", 1, 5) == 3
    assert clamp_int(4) == 4
