"""Progress and status sink interfaces used by the scanner.

The scanner only talks to these protocols; the CLI supplies
Rich-backed implementations and library callers may pass nothing.
"""

from typing import Protocol


class ProgressSink(Protocol):
    """Receives per-candidate progress during size aggregation."""

    def start(self, total: int, start_value: int = 0) -> None: ...

    def increment(self) -> None: ...

    def stop(self) -> None: ...


class StatusSink(Protocol):
    """Receives free-form status text during discovery."""

    text: str

    def stop(self) -> None: ...


class NullProgress:
    """Progress sink that discards all updates."""

    def start(self, total: int, start_value: int = 0) -> None:
        pass

    def increment(self) -> None:
        pass

    def stop(self) -> None:
        pass


class NullStatus:
    """Status sink that discards all updates."""

    def __init__(self) -> None:
        self.text = ""

    def stop(self) -> None:
        pass
