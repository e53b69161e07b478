"""Exceptions raised while collecting simulation inputs."""

from __future__ import annotations

from typing import Any, Optional


class SimulatorError(Exception):
    """Base class for simulator errors."""


class InvalidInput(SimulatorError, ValueError):
    """A single field failed parsing or range validation."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.value = value


class InputAbandoned(SimulatorError):
    """The user cancelled input collection before every field was valid."""

    def __init__(self, field: Optional[str] = None):
        detail = f" at {field}" if field else ""
        super().__init__(f"input collection abandoned{detail}")
        self.field = field
