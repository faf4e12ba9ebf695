import os

from pura_admin.services import config

def test_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", {})
    s = config.load_settings(str(tmp_path / "missing.env"))
    assert s.api_url == "" and s.request_timeout == 30.0
    assert s.max_upload_mb == 2.0 and s.max_upload_bytes == 2 * 1024 * 1024
    assert s.page_size == 9 and s.storage_key_prefix == ""
    assert s.recaptcha_token is None

def test_env_file_and_overrides(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", {"CMS_PAGE_SIZE": "12"})
    env = tmp_path / ".env"
    env.write_text(
        "CMS_API_URL=http://localhost:3000/\n"
        "CMS_PAGE_SIZE=6\n"
        "CMS_STORAGE_KEY_PREFIX=uploads/\n"
        "CMS_RECAPTCHA_TOKEN=tok\n"
    )
    s = config.load_settings(str(env))
    assert s.api_url == "http://localhost:3000"
    assert s.page_size == 12
    assert s.storage_key_prefix == "uploads/" and s.recaptcha_token == "tok"

def test_bad_numbers_fall_back(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", {"CMS_REQUEST_TIMEOUT": "soon", "CMS_MAX_UPLOAD_MB": "-1"})
    s = config.load_settings(str(tmp_path / "missing.env"))
    assert s.request_timeout == 30.0 and s.max_upload_mb == 2.0

def test_settings_are_cached(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_settings", lambda: calls.append(1) or config.Settings())
    config.reset_settings()
    first = config.get_settings()
    assert config.get_settings() is first and len(calls) == 1
    config.reset_settings()
