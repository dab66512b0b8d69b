"""
Reports derived from a finished survey.

Discovery and finish times are one-to-one maps from vertices to clock
values, so inverting them yields level order (BFS), preorder and
postorder (DFS). Only BLACK vertices take part; a partial survey simply
yields a shorter order.
"""

from .base import Color
from .breadth_first import BreadthFirstSurvey
from .depth_first import DepthFirstSurvey

# Column widths for write_data()
_WIDTHS = (8, 10, 11, 12, 13)


def _order_by(times: list[int | None], color: list[Color]) -> list[int]:
    finished = [v for v, c in enumerate(color) if c is Color.BLACK]
    return sorted(finished, key=lambda v: times[v])


def level_order(bfs: BreadthFirstSurvey) -> list[int]:
    """Finished vertices in BFS discovery order."""
    return _order_by(bfs.discovery_time, bfs.color)


def level_groups(bfs: BreadthFirstSurvey) -> list[list[list[int]]]:
    """
    Level order grouped by search tree, then by distance.

    A new tree starts at every distance-0 vertex. For a single-source
    survey the result has one tree whose i-th group is the set of vertices
    at distance i, in discovery order.

    Raises:
        ValueError: If distances decrease within a tree (corrupt survey)
    """
    trees: list[list[list[int]]] = []
    current = None
    for v in level_order(bfs):
        d = bfs.distance[v]
        if d == 0:
            trees.append([[v]])
            current = 0
        elif d == current:
            trees[-1][-1].append(v)
        elif current is not None and d > current:
            trees[-1].append([v])
            current = d
        else:
            raise ValueError(f"distance grouping error at vertex {v}")
    return trees


def preorder(dfs: DepthFirstSurvey) -> list[int]:
    """Finished vertices in DFS discovery order."""
    return _order_by(dfs.discovery_time, dfs.color)


def postorder(dfs: DepthFirstSurvey) -> list[int]:
    """Finished vertices in DFS finishing order."""
    return _order_by(dfs.finish_time, dfs.color)


def write_data(survey: BreadthFirstSurvey | DepthFirstSurvey) -> str:
    """
    Fixed-width table of a survey's per-vertex state.

    Unset values print as the survey's numeric sentinels and a missing
    parent prints as NULL.
    """
    c1, c2, c3, c4, c5 = _WIDTHS
    if isinstance(survey, BreadthFirstSurvey):
        title = "bf survey data"
        headers = ("vertex", "distance", "dtime", "parent", "color")
        second = [
            survey.infinite_distance if d is None else d for d in survey.distance
        ]
        third = [survey.infinite_time if t is None else t for t in survey.discovery_time]
    else:
        title = "df survey data"
        headers = ("vertex", "dtime", "ftime", "parent", "color")
        second = [survey.infinite_time if t is None else t for t in survey.discovery_time]
        third = [survey.infinite_time if t is None else t for t in survey.finish_time]

    lines = [
        "",
        title.rjust(c1 + c2 - 2),
        ("=" * len(title)).rjust(c1 + c2 - 2),
        "".join(h.rjust(w) for h, w in zip(headers, _WIDTHS)),
        "".join(("-" * len(h)).rjust(w) for h, w in zip(headers, _WIDTHS)),
    ]
    for v in range(len(survey.color)):
        p = survey.parent[v]
        lines.append(
            f"{v:>{c1}}{second[v]:>{c2}}{third[v]:>{c3}}"
            f"{('NULL' if p is None else p):>{c4}}{survey.color[v].value:>{c5}}"
        )
    return "\n".join(lines)
