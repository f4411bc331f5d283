from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class AppSignals(QObject):
    """Global Qt signals for app-wide events.

    Panels can subscribe to these to stay in sync with character state.
    """

    # Emitted after a refresh pass changed at least one certificate; provides the character
    certificatesUpdated = Signal(object)
    # Emitted when a reference catalog is loaded; provides the catalog version
    catalogLoaded = Signal(str)


# Global singleton instance
app_signals = AppSignals()


__all__ = ["app_signals", "AppSignals"]
