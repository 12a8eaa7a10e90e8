"""Base class for all shape generators.

A generator is a frozen parameter set. Calling ``path`` with a bounding
rectangle is a pure function of those parameters and the bounds, so one
generator can be drawn into any number of rects, from any thread.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..geometry import Path, Rect


class ShapeGenerator(ABC):
    """Abstract base class for all shape generators.

    Subclasses must implement:
    - path(): Build the shape's Path inside the given bounds

    ``fill_rule`` tells a renderer how to fill overlapping subpaths
    ("nonzero" or "evenodd").
    """

    fill_rule: ClassVar[str] = "nonzero"

    @abstractmethod
    def path(self, bounds: Rect) -> Path:
        """Generate the shape's path inside ``bounds``."""

    def path_in(self, width: float, height: float) -> Path:
        """Generate the path inside a rect of the given size at the origin."""
        return self.path(Rect.of_size(width, height))

    @property
    def name(self) -> str:
        """Short lowercase name, e.g. 'arrow' for ArrowGenerator."""
        return type(self).__name__.replace("Generator", "").lower()
