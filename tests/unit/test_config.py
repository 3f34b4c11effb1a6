from __future__ import annotations

import pytest
from pydantic import ValidationError

from es_httpclient.config import DEFAULT_BACKEND_URL, DEFAULT_TIMEOUT_S, ClientSettings, env_bool, env_float

_CUSTOM_TIMEOUT = 12.5


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), (" ON ", True), ("0", False), ("off", False), ("maybe", True)],
)
def test_env_bool_parses_common_spellings(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: bool,  # noqa: FBT001
) -> None:
    monkeypatch.setenv("ES_HTTPCLIENT_FLAG", raw)

    assert env_bool("ES_HTTPCLIENT_FLAG", default_value=True) is expected


def test_env_float_falls_back_on_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ES_HTTPCLIENT_NUMBER", "not-a-number")

    assert env_float("ES_HTTPCLIENT_NUMBER", default_value=1.5) == 1.5  # noqa: PLR2004
    assert env_float("ES_HTTPCLIENT_UNSET_NUMBER", default_value=2.0) == 2.0  # noqa: PLR2004


def test_client_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ES_HTTPCLIENT_URL", "ES_HTTPCLIENT_TIMEOUT_S", "ES_HTTPCLIENT_VERIFY_CERTS"):
        monkeypatch.delenv(name, raising=False)

    settings = ClientSettings.from_env()

    assert settings.url == DEFAULT_BACKEND_URL
    assert settings.timeout_s == DEFAULT_TIMEOUT_S
    assert settings.verify_certs is True


def test_client_settings_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ES_HTTPCLIENT_URL", "https://search.internal:9243")
    monkeypatch.setenv("ES_HTTPCLIENT_TIMEOUT_S", str(_CUSTOM_TIMEOUT))
    monkeypatch.setenv("ES_HTTPCLIENT_VERIFY_CERTS", "false")

    settings = ClientSettings.from_env()

    assert settings.url == "https://search.internal:9243"
    assert settings.timeout_s == _CUSTOM_TIMEOUT
    assert settings.verify_certs is False


def test_client_settings_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(timeout_s=0)
