"""Orthogonal (right-angle) connector synthesis.

The side tag of each anchor fixes its exit direction, so the number of bends
follows from the pair of sides:

  left/right -> left/right   two bends through the horizontal midpoint (Z)
  top/bottom -> top/bottom   two bends through the vertical midpoint
  mixed                      a single bend (L)

Coincident waypoints are kept rather than simplified away, so every path has
a fixed shape for its side combination.
"""

from __future__ import annotations

from connectflow.routing.path import LineTo, MoveTo, PathCommand
from connectflow.routing.types import AnchorPoint, Point


def orthogonal(start: AnchorPoint, end: AnchorPoint) -> list[PathCommand]:
    x1, y1 = start.x, start.y
    x2, y2 = end.x, end.y
    start_horizontal = start.side is not None and start.side.is_horizontal
    start_vertical = start.side is not None and start.side.is_vertical
    end_horizontal = end.side is not None and end.side.is_horizontal
    end_vertical = end.side is not None and end.side.is_vertical

    if start_horizontal and end_horizontal:
        mid_x = x1 + (x2 - x1) / 2
        waypoints = [Point(mid_x, y1), Point(mid_x, y2)]
    elif start_vertical and end_vertical:
        mid_y = y1 + (y2 - y1) / 2
        waypoints = [Point(x1, mid_y), Point(x2, mid_y)]
    elif start_horizontal and end_vertical:
        waypoints = [Point(x2, y1)]
    elif start_vertical and end_horizontal:
        waypoints = [Point(x1, y2)]
    elif abs(x2 - x1) > abs(y2 - y1):
        # Untagged anchor: bend according to the dominant axis of travel.
        waypoints = [Point(x2, y1)]
    else:
        waypoints = [Point(x1, y2)]

    commands: list[PathCommand] = [MoveTo(Point(x1, y1))]
    commands.extend(LineTo(p) for p in waypoints)
    commands.append(LineTo(Point(x2, y2)))
    return commands
