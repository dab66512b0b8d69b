"""
Graph survey engine.

This package provides breadth-first and depth-first surveys over an
AdjacencyGraph:
- breadth_first: level-order survey with distances (FIFO control queue)
- depth_first: iterative survey with discovery/finish times (LIFO stack)
- orders: level order, preorder, postorder and tabular survey reports
"""

from .base import Color, Survey, TraceCallback, tree_path
from .breadth_first import BreadthFirstSurvey
from .depth_first import DepthFirstSurvey
from .orders import (
    level_groups,
    level_order,
    postorder,
    preorder,
    write_data,
)

__all__ = [
    # State vocabulary
    "Color",
    "Survey",
    "TraceCallback",
    "tree_path",
    # Strategies
    "BreadthFirstSurvey",
    "DepthFirstSurvey",
    # Reports
    "level_groups",
    "level_order",
    "postorder",
    "preorder",
    "write_data",
]
