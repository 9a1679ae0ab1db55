# data/light_stats.py

LIGHT_STATS = {
    "radius": 10,
    "color": (255, 255, 0),
}
