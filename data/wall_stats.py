# data/wall_stats.py

WALL_STATS = {
    "color": (169, 169, 169),
}
