"""Root logger setup."""
import logging
from typing import Union

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"


def coerce_level(value: Union[str, int, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level."""
    if value is None:
        return fallback
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)

    candidate = getattr(logging, text.upper(), None)
    if isinstance(candidate, int):
        return candidate
    return fallback


def configure_logging(level: Union[str, int, None] = logging.INFO) -> int:
    """
    Configure the root logger with a compact format.

    Streamlit re-executes the script on every interaction, so handlers are
    only installed the first time; later calls just adjust the level.

    Returns:
        The effective level.
    """
    effective = coerce_level(level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective
