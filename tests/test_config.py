import pytest

from app.core.config import Settings

_OVERRIDDEN = [
    "DATABASE_URL",
    "SESSION_SECRET",
    "DEBUG",
    "BASE_URL",
    "PASSWORD_HASH_ROUNDS",
    "ADMIN_EMAIL",
    "ADMIN_PASSWORD",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in _OVERRIDDEN:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    cfg = Settings(_env_file=None)
    assert cfg.DATABASE_URL == "sqlite:///./affiliate.db"
    assert cfg.SESSION_SECRET == "changeme"
    assert cfg.BACKEND_PORT == 3000
    assert cfg.BASE_URL == "http://localhost:3000"
    assert cfg.PASSWORD_HASH_ROUNDS == 10
    assert cfg.CLICK_LIST_LIMIT == 100
    assert cfg.admin_bootstrap_configured is False


def test_settings_env_overrides(clean_env):
    clean_env.setenv("ADMIN_EMAIL", "boss@example.com")
    clean_env.setenv("ADMIN_PASSWORD", "hunter2")
    clean_env.setenv("BACKEND_PORT", "8080")
    clean_env.setenv("session_secret", "lowercase-works")

    cfg = Settings(_env_file=None)
    assert cfg.admin_bootstrap_configured is True
    assert cfg.BACKEND_PORT == 8080
    assert cfg.SESSION_SECRET == "lowercase-works"


@pytest.mark.parametrize(
    "base_url,prefix,expected",
    [
        ("https://aff.example.com", "/r/", "https://aff.example.com/r/"),
        ("https://aff.example.com/", "r", "https://aff.example.com/r/"),
        ("https://aff.example.com", "/go/ref", "https://aff.example.com/go/ref/"),
    ],
)
def test_referral_base(clean_env, base_url, prefix, expected):
    cfg = Settings(_env_file=None, BASE_URL=base_url, REFERRAL_PATH_PREFIX=prefix)
    assert cfg.referral_base == expected


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["adminBootstrapConfigured"] is False
    assert resp.headers["X-Request-ID"]
