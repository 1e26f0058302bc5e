# utils/stats.py
# Base stat percentages + radar chart polygon for the SVG on the index page

import math
from dataclasses import dataclass

# highest base stat a pokemon can have
MAX_BASE_STAT = 255

# radar layout (svg viewBox is 0 0 120 120)
CENTER_X = 60.0
CENTER_Y = 60.0
MAX_RADIUS = 45.0


@dataclass(frozen=True)
class Stat:
    name: str
    base: int
    percent: int


def normalize_stat(base: int) -> int:
    """base stat -> 0..100, truncating like integer division"""
    if base <= 0:
        return 0
    return min(base * 100 // MAX_BASE_STAT, 100)


def build_stats(pairs) -> list[Stat]:
    return [Stat(name=name, base=base, percent=normalize_stat(base)) for name, base in pairs]


def radar_points(stats) -> list[tuple[float, float]]:
    """
    One vertex per stat, first one straight up (-90deg), then clockwise.
    Accepts Stat objects or bare percent ints.
    """
    count = len(stats)
    points = []
    for i, s in enumerate(stats):
        percent = s.percent if isinstance(s, Stat) else s
        angle = -math.pi / 2 + 2 * math.pi * i / count
        r = percent / 100.0 * MAX_RADIUS
        points.append((CENTER_X + r * math.cos(angle), CENTER_Y + r * math.sin(angle)))
    return points


def format_points(points) -> str:
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in points)


def radar_points_string(stats) -> str:
    """svg polygon points attribute, empty string when there are no stats"""
    return format_points(radar_points(stats))


def radar_grid_string(count: int, percent: int = 100) -> str:
    """reference polygon (outer frame / rings) for a chart with `count` axes"""
    if count <= 0:
        return ""
    return format_points(radar_points([percent] * count))


def stat_color(percent: int) -> str:
    """heat colour for a stat bar (0 -> red, 50 -> yellow, 100 -> green)"""
    value = max(0, min(int(percent), 100))
    if value <= 50:
        r, g = 255, int((value / 50) * 255)
    else:
        r, g = int((1 - ((value - 50) / 50)) * 255), 255
    return f"rgb({r},{g},0)"


def labelize(s: str) -> str:
    """consistent labels for stat names ('special-attack' -> 'SpAtk')"""
    s = (s or "").replace("-", " ")
    overrides = {"hp": "HP", "sp atk": "Sp. Atk", "sp def": "Sp. Def",
                 "special attack": "SpAtk", "special defense": "SpDef"}
    t = s.strip().title()
    return overrides.get(s.strip().lower(), overrides.get(t.lower(), t))
