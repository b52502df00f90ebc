"""Logging utilities for the conics kernel.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All conics code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'conics'


def _ensure_conics_root() -> logging.Logger:
    """Ensure the 'conics' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'conics' logger.
    """
    conics_root = logging.getLogger(_ROOT_NAME)
    # Only the NullHandler installed by the package facade: swap it for stdout
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in conics_root.handlers)
    if not has_non_null:
        for h in list(conics_root.handlers):
            conics_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        conics_root.addHandler(handler)
    conics_root.propagate = False
    return conics_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> logging.Logger:
    """Configure the 'conics' logger family level and optionally quiet matplotlib.

    This does NOT modify the process root logger.
    """
    conics_root = _ensure_conics_root()
    lvl = _to_level(level)
    conics_root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)
    return conics_root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'conics' namespace.

    Names outside the namespace are prefixed (``'viz'`` becomes
    ``'conics.viz'``). Without an explicit level the logger inherits from the
    'conics' parent configured via configure_logging().
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
