# profbook/client/notify.py

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

_LEVELS = {
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass
class Notifier:
    """Non-blocking notification sink, the toast of the web clients.

    Notifications are logged and kept in ``history`` so a caller (or a test)
    can render or inspect them afterwards.
    """

    history: List[Tuple[str, str]] = field(default_factory=list)

    def _push(self, kind: str, message: str):
        self.history.append((kind, message))
        logger.log(_LEVELS[kind], "[%s] %s", kind, message)

    def success(self, message: str):
        self._push("success", message)

    def warning(self, message: str):
        self._push("warning", message)

    def error(self, message: str):
        self._push("error", message)

    @property
    def last(self):
        return self.history[-1] if self.history else None


@dataclass
class Navigator:
    """Records route changes; ``on_navigate`` lets a shell react to them."""

    path: str = "/"
    visited: List[str] = field(default_factory=list)
    on_navigate: Optional[Callable[[str], None]] = None

    def __call__(self, path: str):
        logger.debug("Navigate %s -> %s", self.path, path)
        self.path = path
        self.visited.append(path)
        if self.on_navigate is not None:
            self.on_navigate(path)
