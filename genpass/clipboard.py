"""
genpass.clipboard
Put a password to the system clipboard and keep it there.

On Windows and macOS the clipboard keeps its content after the owning
process exits. On X11/Wayland the content disappears together with its
owner, so a detached holder process is forked that owns the clipboard
until something else replaces it.
"""

import abc
import enum
import logging
import os
import sys
from typing import Callable, Optional

from .errors import (
    ClipboardInitFailed,
    ClipboardStoreFailed,
    ForkFailed,
    SessionCreateFailed,
)

logger = logging.getLogger(__name__)

PERSISTENT_CLIPBOARD_PLATFORMS = ("win32", "cygwin", "darwin")


class Delivery(enum.Enum):
    COPIED = "copied"
    # parent side of a fork: the holder process owns the clipboard now
    DETACHED = "detached"
    # holder side: the password was replaced by something else
    SUPERSEDED = "superseded"


class QtClipboard:
    """Thin wrapper around the Qt application clipboard."""

    def __init__(self, app, clipboard):
        self._app = app
        self._clipboard = clipboard
        self._clipboard.changed.connect(self._on_changed)

    def _mode(self):
        from PySide6.QtGui import QClipboard
        return QClipboard.Mode.Clipboard

    def store(self, text: str) -> None:
        try:
            self._clipboard.setText(text, self._mode())
            stored = self._clipboard.text(self._mode())
        except RuntimeError as e:
            raise ClipboardStoreFailed() from e
        if stored != text:
            raise ClipboardStoreFailed("Clipboard rejected the password")

    def owns_clipboard(self) -> bool:
        return self._clipboard.ownsClipboard()

    def wait_until_replaced(self) -> None:
        """Block in the Qt event loop until another client takes the clipboard."""
        if not self.owns_clipboard():
            return
        self._app.exec()

    def _on_changed(self, mode):
        if mode == self._mode() and not self.owns_clipboard():
            self._app.quit()


def _has_display() -> bool:
    return bool(
        os.environ.get("QT_QPA_PLATFORM")
        or os.environ.get("DISPLAY")
        or os.environ.get("WAYLAND_DISPLAY")
    )


def open_clipboard() -> QtClipboard:
    """
    Create the Qt application and return its clipboard.
    Qt is imported here, never at module level, so a forked holder
    process is the first one to touch any Qt state.
    """
    if sys.platform not in PERSISTENT_CLIPBOARD_PLATFORMS and not _has_display():
        raise ClipboardInitFailed("Unable to initialize clipboard: no display server found")
    try:
        from PySide6.QtGui import QGuiApplication
    except ImportError as e:
        raise ClipboardInitFailed() from e

    try:
        app = QGuiApplication.instance() or QGuiApplication(["genpass"])
        clipboard = app.clipboard()
    except RuntimeError as e:
        raise ClipboardInitFailed() from e
    if clipboard is None:
        raise ClipboardInitFailed()
    return QtClipboard(app, clipboard)


class ClipboardDeliverer(abc.ABC):
    def __init__(self, clipboard_factory: Callable[[], QtClipboard] = open_clipboard):
        self._clipboard_factory = clipboard_factory

    @abc.abstractmethod
    def deliver(self, password: str) -> Delivery:
        """Place `password` to the clipboard."""


class DirectClipboardDeliverer(ClipboardDeliverer):
    """Stores the password and returns; the platform keeps it after exit."""

    def deliver(self, password: str) -> Delivery:
        clipboard = self._clipboard_factory()
        clipboard.store(password)
        logger.debug("Password stored to the clipboard")
        return Delivery.COPIED


class DetachedClipboardDeliverer(ClipboardDeliverer):
    """
    Forks a holder process that owns the clipboard until it is superseded.

    The parent returns DETACHED straight after the fork. The child becomes a
    session leader so it outlives the shell, stores the password and blocks
    with no timeout until another client takes the clipboard over.
    """

    def __init__(self, clipboard_factory: Callable[[], QtClipboard] = open_clipboard):
        super().__init__(clipboard_factory)
        self.holder_pid: Optional[int] = None

    def deliver(self, password: str) -> Delivery:
        try:
            pid = os.fork()
        except OSError as e:
            raise ForkFailed() from e

        if pid:
            self.holder_pid = pid
            logger.debug("Process daemonized and now running with pid %d", pid)
            return Delivery.DETACHED

        try:
            os.setsid()
        except OSError as e:
            raise SessionCreateFailed() from e
        logger.debug("Session created")

        clipboard = self._clipboard_factory()
        clipboard.store(password)
        clipboard.wait_until_replaced()
        logger.debug("Lost clipboard ownership; terminating")
        return Delivery.SUPERSEDED


def select_deliverer(
    platform: Optional[str] = None,
    clipboard_factory: Callable[[], QtClipboard] = open_clipboard,
) -> ClipboardDeliverer:
    platform = platform or sys.platform
    if platform.startswith(PERSISTENT_CLIPBOARD_PLATFORMS):
        return DirectClipboardDeliverer(clipboard_factory)
    return DetachedClipboardDeliverer(clipboard_factory)
