import pygame


class Light:
    def __init__(self, position, stats):
        self.pos = pygame.Vector2(position)

        # Rendering only; the shadow geometry treats the light as a point
        self.radius = stats["radius"]
        self.color = stats["color"]

    def move_to(self, position):
        """Reposition in place so anything holding ``pos`` sees the update."""
        self.pos.update(position)
