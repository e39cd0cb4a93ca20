"""Visualizer interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Visualizer(ABC):
    """Contract for visualizers that render a data structure to HTML output."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable visualizer identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable visualizer name for output and logs."""

    def render_options_schema(self) -> dict[str, Any] | None:
        """Return the render options this visualizer understands, if any."""
        return None

    @abstractmethod
    def render(self, structure: Any, **options: Any) -> str:
        """Render the provided structure and return HTML output."""
