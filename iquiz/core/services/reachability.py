"""Network availability channel shared by the remote source and the refresh timer."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtNetwork import QNetworkInformation

logger = logging.getLogger(__name__)


class ReachabilityMonitor(QObject):
    """Holds the latest "network available" state and broadcasts changes.

    The state is pushed in from outside, either by a platform monitor via
    ``attach_network_information`` or directly through ``set_available``.
    Subscribers connect to ``availability_changed``; it only fires when the
    value actually flips.
    """

    availability_changed = Signal(bool)

    def __init__(self, available: bool = False, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._available = available
        self._network_information: QNetworkInformation | None = None

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        available = bool(available)
        if available == self._available:
            return
        self._available = available
        logger.info("Network %s", "available" if available else "unavailable")
        self.availability_changed.emit(available)

    def attach_network_information(self) -> bool:
        """Follow Qt's platform reachability backend. Returns False if none can be loaded."""
        if self._network_information is not None:
            return True
        if not QNetworkInformation.loadDefaultBackend():
            logger.warning("No network information backend available; reachability stays manual.")
            return False
        info = QNetworkInformation.instance()
        if info is None:
            return False
        self._network_information = info
        info.reachabilityChanged.connect(self._on_reachability_changed)
        self._on_reachability_changed(info.reachability())
        return True

    def _on_reachability_changed(self, reachability: QNetworkInformation.Reachability) -> None:
        self.set_available(reachability == QNetworkInformation.Reachability.Online)
