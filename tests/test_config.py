import pytest

from ytrss.config import DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT_SECONDS, load_settings


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings(environ={})
    assert settings.request_timeout_seconds == DEFAULT_REQUEST_TIMEOUT_SECONDS == 30.0
    assert settings.max_concurrency == DEFAULT_MAX_CONCURRENCY == 10
    assert settings.log_level == "WARNING"


def test_environment_overrides_are_stripped_and_parsed() -> None:
    env = {
        "YTRSS_REQUEST_TIMEOUT_SECONDS": " 5.5 ",
        "YTRSS_MAX_CONCURRENCY": "3",
        "YTRSS_LOG_LEVEL": "debug",
    }
    settings = load_settings(environ=env)
    assert settings.request_timeout_seconds == 5.5
    assert settings.max_concurrency == 3
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"YTRSS_MAX_CONCURRENCY": "0"},
        {"YTRSS_MAX_CONCURRENCY": "many"},
        {"YTRSS_REQUEST_TIMEOUT_SECONDS": "-1"},
        {"YTRSS_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values_raise_value_error(env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        load_settings(environ=env)
