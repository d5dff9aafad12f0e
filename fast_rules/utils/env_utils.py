import os
from typing import Optional

from dotenv import load_dotenv

from fast_rules.exceptions.common_exceptions import EnvInvalidException
from fast_rules.utils.logging import logger

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Load environment variables used by the rule engine.

    Args:
        env_file_name: Optional environment file name. If None, tries `.env.<ENV>` and then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logger.debug(f"☑️ Loaded {env_file} file successfully")
            return

    logger.debug("No .env file found, using process environment only")


def get_bool_env(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment.

    Raises:
        EnvInvalidException: If the value is not a recognised boolean literal.
    """
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    raise EnvInvalidException(name, raw, supported_values=[*_TRUE_VALUES, *[v for v in _FALSE_VALUES if v]])
