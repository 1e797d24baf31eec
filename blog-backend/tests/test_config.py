# File: tests/test_config.py

import pytest

from app.core.config import Settings
from app.core.exceptions import ConfigurationError

REQUIRED = {"DATABASE_URL": "sqlite://", "JWT_SECRET": "s3cret"}


def test_required_values_are_loaded():
    settings = Settings.from_env(REQUIRED)
    assert settings.database_url == "sqlite://"
    assert settings.jwt_secret == "s3cret"
    assert settings.algorithm == "HS256"
    assert settings.access_token_expire_minutes is None


@pytest.mark.parametrize("missing", ["DATABASE_URL", "JWT_SECRET"])
def test_missing_required_value_fails(missing):
    env = {k: v for k, v in REQUIRED.items() if k != missing}
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env(env)
    assert missing in exc_info.value.message


def test_empty_required_value_fails():
    with pytest.raises(ConfigurationError):
        Settings.from_env({**REQUIRED, "JWT_SECRET": ""})


def test_optional_values():
    settings = Settings.from_env(
        {
            **REQUIRED,
            "JWT_EXPIRE_MINUTES": "30",
            "BACKEND_CORS_ORIGINS": "http://localhost:5173, http://127.0.0.1:5173",
            "LOG_LEVEL": "debug",
            "DEBUG": "true",
        }
    )
    assert settings.access_token_expire_minutes == 30
    assert settings.backend_cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
    assert settings.log_level == "DEBUG"
    assert settings.debug is True


def test_blank_expiry_means_no_expiry():
    assert Settings.from_env({**REQUIRED, "JWT_EXPIRE_MINUTES": ""}).access_token_expire_minutes is None


@pytest.mark.parametrize(
    "override, field",
    [
        ({"JWT_EXPIRE_MINUTES": "soon"}, "access_token_expire_minutes"),
        ({"JWT_EXPIRE_MINUTES": "-5"}, "access_token_expire_minutes"),
        ({"DEBUG": "maybe"}, "debug"),
    ],
)
def test_unparseable_optional_value_is_configuration_error(override, field):
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env({**REQUIRED, **override})
    assert exc_info.value.details["invalid"] == [field]
