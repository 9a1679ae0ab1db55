import pygame


class InputManager:
    def __init__(self):
        # -------------------------
        # Action → Key bindings
        # -------------------------
        self.keymap = {
            "commit_wall": pygame.K_LSHIFT,
            "discard_wall": pygame.K_ESCAPE,
            "clear_walls": pygame.K_DELETE,
            "clear_walls_alt": pygame.K_BACKSPACE,
        }

        # -------------------------
        # Action → Mouse button bindings
        # -------------------------
        self.mousemap = {
            "place_light": 1,
            "wall_point": 3,
        }

        # Initialize key states safely
        self.keys = pygame.key.get_pressed()
        self.prev_keys = self.keys

        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # UPDATE (call once per frame after the event loop)
    # =====================================================

    def update(self):
        self.prev_keys = self.keys
        self.keys = pygame.key.get_pressed()
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # HELD DOWN (continuous)
    # =====================================================

    def is_down(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False
        return self.keys[key]

    # =====================================================
    # PRESSED THIS FRAME (edge detection)
    # =====================================================

    def is_pressed(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False

        return self.keys[key] and not self.prev_keys[key]

    # =====================================================
    # RELEASED THIS FRAME
    # =====================================================

    def is_released(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False

        return not self.keys[key] and self.prev_keys[key]

    # =====================================================
    # MOUSE
    # =====================================================

    def get_mouse_pos(self):
        return pygame.Vector2(self.mouse_pos)

    def handle_event(self, event, scene):
        """Apply one pygame mouse event to the scene."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == self.mousemap["place_light"]:
                scene.place_light(event.pos)
            elif event.button == self.mousemap["wall_point"]:
                if self.is_down("commit_wall"):
                    scene.commit_wall()
                else:
                    scene.add_wall_point(event.pos)

        elif event.type == pygame.MOUSEMOTION:
            # buttons is (left, middle, right)
            if event.buttons[self.mousemap["place_light"] - 1]:
                scene.drag_light(event.pos)

    def apply_keys(self, scene):
        """Apply this frame's key presses to the scene."""
        if self.is_pressed("discard_wall"):
            scene.discard_wall()
        if self.is_pressed("clear_walls") or self.is_pressed("clear_walls_alt"):
            scene.clear_walls()
