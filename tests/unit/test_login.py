from pura_admin.services.auth import AuthController
from pura_admin.views.login import CAPTCHA_MISSING, submit_login

def test_invalid_input_makes_no_request(client, session):
    auth = AuthController(client)
    assert submit_login(auth, "not-an-email", "secret1", "tok") == "Invalid email format"
    assert submit_login(auth, "admin@example.com", "123", "tok") == "Password must be at least 6 characters"
    assert session.calls == []

def test_missing_captcha(client, session):
    auth = AuthController(client)
    assert submit_login(auth, "admin@example.com", "secret1", None) == CAPTCHA_MISSING
    assert session.calls == []

def test_wrong_password_shows_generic_message(client, session):
    session.on("POST", "/api/users/_login", status=401, body={"errors": "user not found"})
    auth = AuthController(client)
    assert submit_login(auth, "admin@example.com", "secret1", "tok") == "Email or password is wrong"
    assert not auth.loading and not auth.is_authenticated

def test_network_error_shows_generic_message(client, session, network_down):
    session.on("POST", "/api/users/_login", exc=network_down)
    auth = AuthController(client)
    assert submit_login(auth, "admin@example.com", "secret1", "tok") == "Email or password is wrong"
    assert not auth.loading

def test_success(client, session):
    session.on("POST", "/api/users/_login", body={"data": {}})
    session.on("GET", "/api/users/_current", body={"data": {"id": "u1", "email": "admin@example.com"}})
    auth = AuthController(client)
    assert submit_login(auth, "admin@example.com", "secret1", "tok") is None
    assert auth.is_authenticated
