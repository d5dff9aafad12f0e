import os

import pytest

from fast_rules import EnvInvalidException
from fast_rules.utils.env_utils import configure_env, get_bool_env


def test_get_bool_env_parses_flags(monkeypatch):
    monkeypatch.setenv("RULES_FLAG", "Yes")
    assert get_bool_env("RULES_FLAG") is True
    monkeypatch.setenv("RULES_FLAG", "off")
    assert get_bool_env("RULES_FLAG", True) is False
    monkeypatch.delenv("RULES_FLAG")
    assert get_bool_env("RULES_FLAG", True) is True


def test_get_bool_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("RULES_FLAG", "maybe")
    with pytest.raises(EnvInvalidException) as exc:
        get_bool_env("RULES_FLAG")
    assert "RULES_FLAG" in str(exc.value)


def test_configure_env_loads_explicit_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env.test"
    env_file.write_text("RULES_PATH_SEPARATOR=/\n")
    monkeypatch.delenv("RULES_PATH_SEPARATOR", raising=False)

    configure_env(str(env_file))

    assert os.environ["RULES_PATH_SEPARATOR"] == "/"


def test_configure_env_prefers_environment_specific_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENV", "staging")
    monkeypatch.delenv("RULES_FAILURE_TYPE", raising=False)
    (tmp_path / ".env.staging").write_text("RULES_FAILURE_TYPE=staging_error\n")
    (tmp_path / ".env").write_text("RULES_FAILURE_TYPE=default_error\n")

    configure_env()

    assert os.environ["RULES_FAILURE_TYPE"] == "staging_error"
