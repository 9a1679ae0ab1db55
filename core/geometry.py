import math

# Absolute tolerance for comparing derived coordinates. Projection and corner
# selection branch on these comparisons, so exact float equality would flip
# between branches on near-symmetric geometry.
EPSILON = 1e-6


def nearly_equal(a, b, tolerance=EPSILON):
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tolerance)


class Viewport:
    """Axis-aligned rectangle that shadow rays are clipped to.

    Built fresh every frame from the display surface; the shadow code only
    reads it.
    """

    def __init__(self, min_x, min_y, max_x, max_y):
        self.min_x = float(min_x)
        self.min_y = float(min_y)
        self.max_x = float(max_x)
        self.max_y = float(max_y)

    @classmethod
    def from_rect(cls, rect):
        """Build from a pygame.Rect (or anything with left/top/right/bottom)."""
        return cls(rect.left, rect.top, rect.right, rect.bottom)

    def __repr__(self):
        return (f"Viewport({self.min_x}, {self.min_y}, "
                f"{self.max_x}, {self.max_y})")

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return self.bounds == other.bounds

    @property
    def bounds(self):
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def center(self):
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains_x(self, x):
        return self.min_x - EPSILON <= x <= self.max_x + EPSILON

    def contains_y(self, y):
        return self.min_y - EPSILON <= y <= self.max_y + EPSILON

    def contains(self, point):
        return self.contains_x(point[0]) and self.contains_y(point[1])

    def clamp_y(self, y):
        return max(self.min_y, min(self.max_y, y))

    def on_horizontal_edge(self, point):
        y = point[1]
        return nearly_equal(y, self.min_y) or nearly_equal(y, self.max_y)

    def on_vertical_edge(self, point):
        x = point[0]
        return nearly_equal(x, self.min_x) or nearly_equal(x, self.max_x)

    def closest_corner(self, point):
        """Corner of the quadrant that ``point`` falls in.

        Ties on the centre lines resolve to the max side.
        """
        cx, cy = self.center
        x = self.min_x if point[0] < cx else self.max_x
        y = self.min_y if point[1] < cy else self.max_y
        return (x, y)


def cross(o, a, b):
    """Z component of (a - o) x (b - o)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def is_convex(points):
    """True for a simple convex polygon in either winding.

    Collinear vertices are tolerated. A polygon whose turns all share a sign
    but wind more than once (a star) is rejected.
    """
    n = len(points)
    if n < 3:
        return False

    sign = 0
    turning = 0.0
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        c = points[(i + 2) % n]
        z = cross(a, b, c)

        e1 = (b[0] - a[0], b[1] - a[1])
        e2 = (c[0] - b[0], c[1] - b[1])
        if e1 == (0, 0) or e2 == (0, 0):
            return False
        turning += math.atan2(e1[0] * e2[1] - e1[1] * e2[0],
                              e1[0] * e2[0] + e1[1] * e2[1])

        if abs(z) <= EPSILON:
            continue
        current = 1 if z > 0 else -1
        if sign == 0:
            sign = current
        elif current != sign:
            return False

    # All collinear
    if sign == 0:
        return False
    return nearly_equal(abs(turning), 2 * math.pi, 1e-3)


def point_in_polygon(x, y, polygon):
    """Ray-casting point-in-polygon test."""
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside
