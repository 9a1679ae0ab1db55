from core.geometry import is_convex


def _as_point(position):
    return (float(position[0]), float(position[1]))


class Wall:
    """A committed, convex, opaque polygon. Points are never mutated."""

    def __init__(self, points, stats):
        if len(points) < 3:
            raise ValueError(
                f"a wall needs at least 3 points, got {len(points)}"
            )
        self.points = tuple(_as_point(p) for p in points)
        self.color = stats["color"]

    def __repr__(self):
        return f"Wall({list(self.points)})"

    def __len__(self):
        return len(self.points)


class WallBuilder:
    """Points collected for a wall that has not been committed yet.

    No closure or convexity guarantee until ``can_commit`` says so.
    """

    MIN_PATH_POINTS = 2
    MIN_WALL_POINTS = 3

    def __init__(self, first_point):
        self.points = [_as_point(first_point)]

    def __len__(self):
        return len(self.points)

    def add_point(self, position):
        self.points.append(_as_point(position))

    def can_draw_path(self):
        return len(self.points) >= self.MIN_PATH_POINTS

    def can_commit(self):
        return len(self.points) >= self.MIN_WALL_POINTS and is_convex(self.points)

    def build(self, stats):
        return Wall(self.points, stats)
