import logging
import os

logger = logging.getLogger(__name__)


def _parse_positive_int(env_var: str, default: int) -> int:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid integer (got %r); defaulting to %d",
            env_var,
            raw_value,
            default,
        )
        return default

    if value <= 0:
        logger.warning("%s must be positive; defaulting to %d", env_var, default)
        return default

    return value


DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = _parse_positive_int("PLAYERS_DEFAULT_PAGE_SIZE", 3)
