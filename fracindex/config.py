import logging
import os
from functools import lru_cache

from .alphabets import ALPHABETS, DEFAULT_DIGITS
from .models import Keyspace

logger = logging.getLogger(__name__)

DIGITS_ENV = "FRACINDEX_DIGITS"


def resolve_digits(value: str) -> str:
    """Turn a preset name like ``base95`` or a literal alphabet into digits."""
    if not value:
        return DEFAULT_DIGITS
    return ALPHABETS.get(value.lower(), value)


@lru_cache()
def get_default_keyspace() -> Keyspace:
    """Keyspace for callers that do not pass one, read once from the environment."""
    raw = os.getenv(DIGITS_ENV, "")
    digits = resolve_digits(raw)
    logger.debug("default keyspace uses %d digits (%s=%r)", len(digits), DIGITS_ENV, raw)
    return Keyspace(digits=digits)
