import pygame


class Renderer:
    """Draws a Scene back to front: shadows, walls, light, wall in progress."""

    def __init__(self, colors, path_width=2):
        self.background_color = colors["background"]
        self.shadow_color = colors["shadow"]
        self.path_color = colors["wall_path"]
        self.path_width = path_width

    def draw(self, screen, scene):
        screen.fill(self.background_color)
        self.draw_shadows(screen, scene.shadows)
        self.draw_walls(screen, scene.walls)
        self.draw_light(screen, scene.light)
        self.draw_wall_building(screen, scene.wall_building)

    def draw_shadows(self, screen, shadows):
        for polygon in shadows:
            pygame.draw.polygon(screen, self.shadow_color, polygon)

    def draw_walls(self, screen, walls):
        for wall in walls:
            pygame.draw.polygon(screen, wall.color, wall.points)

    def draw_light(self, screen, light):
        pygame.draw.circle(screen, light.color, light.pos, light.radius)

    def draw_wall_building(self, screen, wall_building):
        # A single point has no path to stroke yet
        if wall_building is None or not wall_building.can_draw_path():
            return
        pygame.draw.lines(screen, self.path_color, False,
                          wall_building.points, self.path_width)
