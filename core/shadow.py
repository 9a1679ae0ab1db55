import logging
import math

from core.geometry import EPSILON, nearly_equal, point_in_polygon

logger = logging.getLogger(__name__)


def slope_to_light(point, light_pos):
    """Slope of the line through the light and ``point``.

    A point straight above or below the light gets an infinite slope signed
    by its direction; a point on the light gets 0.
    """
    dx = point[0] - light_pos[0]
    dy = point[1] - light_pos[1]
    if dx == 0:
        if dy == 0:
            return 0.0
        return math.copysign(math.inf, dy)
    return dy / dx


def find_silhouette_edge(light_pos, wall_points):
    """Pick the two wall vertices whose rays from the light graze the wall.

    Returns (left, right) as (x, y) tuples, or None when the wall is
    degenerate from this light (light inside the wall, or no vertex on one
    side of the light's vertical line).
    """
    lx, ly = light_pos[0], light_pos[1]
    points = [(float(p[0]), float(p[1])) for p in wall_points]
    if not points:
        return None

    if point_in_polygon(lx, ly, points):
        return None

    slopes = [slope_to_light(p, (lx, ly)) for p in points]

    # Slopes are monotonic in angle only while every vertex stays on one side
    # of the light's vertical line. Otherwise split the candidates by sign so
    # the scan never crosses the jump at infinite slope.
    all_within = all(p[0] > lx for p in points) or all(p[0] < lx for p in points)

    left_candidates = [
        (s, p) for s, p in zip(slopes, points) if all_within or s < 0
    ]
    right_candidates = [
        (s, p) for s, p in zip(slopes, points) if all_within or s > 0
    ]
    if not left_candidates or not right_candidates:
        return None

    # max()/min() keep the first element on ties
    left = max(left_candidates, key=lambda item: item[0])[1]
    right = min(right_candidates, key=lambda item: item[0])[1]
    return left, right


def project_to_viewport(point, light_pos, viewport):
    """Continue the ray from the light through ``point`` to the viewport edge."""
    px, py = float(point[0]), float(point[1])
    lx, ly = light_pos[0], light_pos[1]
    edge_y = viewport.max_y if py > ly else viewport.min_y

    # Vertical ray
    if abs(px - lx) < EPSILON:
        return (px, edge_y)

    slope = slope_to_light((px, py), (lx, ly))
    intercept = py - slope * px

    x = viewport.max_x if px > lx else viewport.min_x
    y = slope * x + intercept
    if viewport.contains_y(y):
        return (x, viewport.clamp_y(y))

    # Horizontal ray that misses the vertical extent: the point itself lies
    # above or below the viewport.
    if abs(slope) < EPSILON:
        return (x, viewport.clamp_y(y))

    return ((edge_y - intercept) / slope, edge_y)


def _chord_side_x(left_proj, right_proj, light_pos, viewport):
    """Vertical viewport edge beyond the chord left_proj-right_proj."""
    (x0, y0), (x1, y1) = left_proj, right_proj
    chord_x = x0 + (light_pos[1] - y0) * (x1 - x0) / (y1 - y0)
    return viewport.max_x if light_pos[0] < chord_x else viewport.min_x


def _chord_side_y(left_proj, right_proj, light_pos, viewport):
    """Horizontal viewport edge beyond the chord left_proj-right_proj."""
    (x0, y0), (x1, y1) = left_proj, right_proj
    chord_y = y0 + (light_pos[0] - x0) * (y1 - y0) / (x1 - x0)
    return viewport.max_y if light_pos[1] < chord_y else viewport.min_y


def _wrap_corners(left_proj, right_proj, light_pos, viewport):
    """Viewport corners the shadow has to pass between its two far points."""
    # Same edge: the boundary between them is a straight run
    if nearly_equal(left_proj[1], right_proj[1]) and \
            viewport.on_horizontal_edge(left_proj):
        return []
    if nearly_equal(left_proj[0], right_proj[0]) and \
            viewport.on_vertical_edge(left_proj):
        return []

    # Opposite top/bottom edges: walk down the far vertical edge
    if viewport.on_horizontal_edge(left_proj) and \
            viewport.on_horizontal_edge(right_proj):
        side_x = _chord_side_x(left_proj, right_proj, light_pos, viewport)
        return [(side_x, left_proj[1]), (side_x, right_proj[1])]

    # Opposite left/right edges: walk along the far horizontal edge
    if viewport.on_vertical_edge(left_proj) and \
            viewport.on_vertical_edge(right_proj):
        side_y = _chord_side_y(left_proj, right_proj, light_pos, viewport)
        return [(left_proj[0], side_y), (right_proj[0], side_y)]

    # Adjacent edges: the corner nearest the span of the two far points
    center = (
        (left_proj[0] + right_proj[0]) / 2,
        (left_proj[1] + right_proj[1]) / 2,
    )
    return [viewport.closest_corner(center)]


def build_shadow_polygon(light_pos, wall_points, viewport):
    """Build the occluded region behind one wall, clipped to the viewport.

    Returns a list of (x, y) points ordered around the polygon:
    far point of the left ray, any wrapped viewport corners, far point of the
    right ray, then back through the silhouette edge. Returns None when the
    wall has no usable silhouette from this light.
    """
    edge = find_silhouette_edge(light_pos, wall_points)
    if edge is None:
        return None
    left, right = edge

    left_proj = project_to_viewport(left, light_pos, viewport)
    right_proj = project_to_viewport(right, light_pos, viewport)

    points = [left_proj]
    points.extend(_wrap_corners(left_proj, right_proj, light_pos, viewport))
    points.append(right_proj)
    points.append(right)
    points.append(left)
    return points


def compute_shadow_polygons(light_pos, walls, viewport):
    """One shadow polygon per wall, skipping walls with no silhouette.

    ``walls`` may hold Wall objects or plain point sequences.
    """
    shadows = []
    for wall in walls:
        points = getattr(wall, "points", wall)
        polygon = build_shadow_polygon(light_pos, points, viewport)
        if polygon is None:
            logger.debug("No silhouette for wall %s from light at (%.1f, %.1f)",
                         points, light_pos[0], light_pos[1])
            continue
        shadows.append(polygon)
    return shadows
