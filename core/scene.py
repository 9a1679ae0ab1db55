import logging

from core.shadow import compute_shadow_polygons
from core.wall import Wall, WallBuilder

logger = logging.getLogger(__name__)


class Scene:
    """Everything the frame loop mutates: one light, the walls, and the wall
    being built. Passed explicitly to the input manager and the renderer.
    """

    def __init__(self, light, wall_stats):
        self.light = light
        self.wall_stats = wall_stats
        self.walls = []
        self.wall_building = None

        # Recomputed by update_shadows() every frame
        self.shadows = []

    @classmethod
    def with_walls(cls, light, wall_stats, wall_points):
        """Scene pre-populated with walls from a list of point lists."""
        scene = cls(light, wall_stats)
        for points in wall_points:
            scene.walls.append(Wall(points, wall_stats))
        return scene

    # =====================================================
    # LIGHT
    # =====================================================

    def place_light(self, position):
        self.light.move_to(position)

    def drag_light(self, position):
        self.light.move_to(position)

    # =====================================================
    # WALL CONSTRUCTION
    # =====================================================

    def add_wall_point(self, position):
        if self.wall_building is None:
            self.wall_building = WallBuilder(position)
        else:
            self.wall_building.add_point(position)

    def commit_wall(self):
        """Turn the wall under construction into a committed wall.

        Outlines that are too short or not convex are left in place so the
        user can keep adding points or discard them. Returns the new Wall,
        or None when nothing was committed.
        """
        builder = self.wall_building
        if builder is None:
            return None

        if not builder.can_commit():
            logger.warning(
                "Refusing to commit wall with %d point(s): need at least %d "
                "points forming a convex polygon",
                len(builder), builder.MIN_WALL_POINTS,
            )
            return None

        wall = builder.build(self.wall_stats)
        self.walls.append(wall)
        self.wall_building = None
        logger.info("Committed wall %d with %d points", len(self.walls), len(wall))
        return wall

    def discard_wall(self):
        if self.wall_building is not None:
            logger.info("Discarded wall under construction (%d points)",
                        len(self.wall_building))
        self.wall_building = None

    def clear_walls(self):
        if self.walls:
            logger.info("Cleared %d wall(s)", len(self.walls))
        self.walls = []

    # =====================================================
    # PER-FRAME
    # =====================================================

    def update_shadows(self, viewport):
        """Compute the shadow polygons for the current frame."""
        light_pos = (self.light.pos.x, self.light.pos.y)
        self.shadows = compute_shadow_polygons(light_pos, self.walls, viewport)
        return self.shadows
