"""Deferred warning delivery."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from fontfinder.i18n import DEFAULT_CATALOG, Localize

Sink = Callable[[str], None]


class ReadinessGate:
    """Runs callbacks now when ready, otherwise once readiness is signalled."""

    def __init__(self, ready: bool = False) -> None:
        self._ready = ready
        self._pending: list[Callable[[], None]] = []

    @property
    def is_ready(self) -> bool:
        return self._ready

    def do_once_ready(self, callback: Callable[[], None]) -> None:
        """Run callback immediately when ready, or queue it until ready."""
        if self._ready:
            callback()
        else:
            self._pending.append(callback)

    def signal_ready(self) -> None:
        """Mark the gate ready and run queued callbacks in queue order."""
        if self._ready:
            return
        self._ready = True
        pending, self._pending = self._pending, []
        for callback in pending:
            callback()


class WarningNotifier:
    """Builds invalid directory warnings and delivers them through a gate."""

    def __init__(
        self,
        gate: ReadinessGate,
        sink: Sink | None = None,
        localize: Localize = DEFAULT_CATALOG.format,
        module_id: str = "font-finder",
    ) -> None:
        self.gate = gate
        self.sink = sink
        self.localize = localize
        self.module_id = module_id

    def _deliver(self, message: str) -> None:
        if self.sink is not None:
            self.sink(message)
        logger.warning(message)

    def invalid_directory(self, error: object) -> str:
        """Queue an invalid directory warning and return its text."""
        detail = self.localize("notifications.invalidDirectory", {"error": error})
        message = f"{self.module_id} | {detail}"
        self.gate.do_once_ready(lambda: self._deliver(message))
        return message

    def invalid_target(self) -> str:
        """Queue a warning for a listing that did not match its request."""
        return self.invalid_directory(
            self.localize("notifications.invalidFilePickerTarget", None)
        )
