# data/demo_walls.py
# Preset walls for --demo, in screen coordinates of the default window size.

DEMO_WALLS = [
    # Square
    [(300, 200), (380, 200), (380, 280), (300, 280)],
    # Triangle
    [(650, 150), (740, 290), (580, 260)],
    # Thin horizontal slab
    [(420, 520), (620, 520), (620, 540), (420, 540)],
    # Hexagon
    [(200, 500), (240, 470), (290, 480), (300, 530), (260, 570), (210, 560)],
    # Diamond
    [(820, 450), (870, 520), (820, 590), (770, 520)],
]
