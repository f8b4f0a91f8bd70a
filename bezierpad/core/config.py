"""
Session configuration.

Everything here is supplied once, when the session is built, and stays fixed
for its lifetime. An invalid configuration is the only fatal error the editor
core knows about: `EditorConfig.validate` raises before a session exists.
"""
from dataclasses import dataclass, field
from typing import Optional

from .events import Key
from .math import Point


class ConfigurationError(ValueError):
    """Raised for a configuration no session can be built from."""


@dataclass(frozen=True)
class EditorConfig:
    viewport_width: int = 900
    viewport_height: int = 600
    hit_threshold: float = 10.0     # pixels, pointer space
    sample_count: int = 100         # curve has sample_count + 1 samples
    max_points: Optional[int] = None
    clear_keys: frozenset[Key] = field(default_factory=lambda: frozenset({Key.ENTER, Key.SPACE}))
    initial_points: tuple[Point, ...] = ()

    def validate(self) -> None:
        if not (self.viewport_width > 0 and self.viewport_height > 0):
            raise ConfigurationError(
                f"Viewport dimensions must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if isinstance(self.sample_count, bool) or not isinstance(self.sample_count, int) or self.sample_count <= 0:
            raise ConfigurationError(f"sample_count must be a positive int, got {self.sample_count!r}")
        if not self.hit_threshold > 0:
            raise ConfigurationError(f"hit_threshold must be positive, got {self.hit_threshold!r}")
        if self.max_points is not None:
            if self.max_points < 1:
                raise ConfigurationError(f"max_points must be at least 1, got {self.max_points!r}")
            if len(self.initial_points) > self.max_points:
                raise ConfigurationError(
                    f"{len(self.initial_points)} initial points exceed max_points={self.max_points}"
                )
