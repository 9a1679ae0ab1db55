WIDTH = 1024
HEIGHT = 768
FPS = 60

BACKGROUND_COLOR = (255, 255, 255)

COLORS = {
    "background": BACKGROUND_COLOR,
    "shadow": (0, 0, 0),
    "wall_path": (0, 0, 0),
}

# Stroke width of the wall under construction
WALL_PATH_WIDTH = 2

LOG_LEVEL = "INFO"
