"""Periodic ticker that drives display refreshes."""

from __future__ import annotations

import threading

DEFAULT_INTERVAL = 0.02


class GraphicTicker:
    """Calls ``callback`` every ``interval`` seconds until terminated."""

    def __init__(self, callback, interval: float = DEFAULT_INTERVAL):
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.callback = callback
        self.interval = interval
        self._stopped = threading.Event()
        self._stopped.set()

    @property
    def is_alive(self) -> bool:
        return not self._stopped.is_set()

    def run(self) -> None:
        """Tick until :meth:`terminate` is called."""
        self._stopped.clear()
        while not self._stopped.is_set():
            self.callback()
            self._stopped.wait(self.interval)

    def terminate(self) -> None:
        self._stopped.set()