from dataclasses import dataclass

Point = tuple[float, float]


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def lerp(a: Point, b: Point, t: float) -> Point:
    u = 1.0 - t
    return u * a[0] + t * b[0], u * a[1] + t * b[1]


def to_normalized(x: float, y: float, viewport_width: float, viewport_height: float) -> Point:
    """
    Pointer space (origin top-left, y down, pixels) -> normalized space
    (origin center, y up, roughly [-1, 1] on each axis).
    """
    return 2.0 * x / viewport_width - 1.0, 1.0 - 2.0 * y / viewport_height


def from_normalized(nx: float, ny: float, viewport_width: float, viewport_height: float) -> Point:
    """Inverse of `to_normalized`."""
    return (nx + 1.0) * viewport_width / 2.0, (1.0 - ny) * viewport_height / 2.0


@dataclass(frozen=True)
class CoordinateMapper:
    """
    Binds `to_normalized` / `from_normalized` to one viewport.
    The viewport is fixed for the lifetime of a session.
    """
    width: float
    height: float

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def to_normalized(self, p: Point) -> Point:
        return to_normalized(p[0], p[1], self.width, self.height)

    def from_normalized(self, p: Point) -> Point:
        return from_normalized(p[0], p[1], self.width, self.height)

    def normalize_all(self, pts) -> tuple[Point, ...]:
        return tuple(self.to_normalized(p) for p in pts)
