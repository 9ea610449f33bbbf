"""Anchor model and selector.

Every shape exposes exactly four anchors, the midpoints of its bounding box
edges. Selection picks one anchor per shape:

  1. both sides pinned      -> use the pinned anchors as-is
  2. only the start pinned  -> nearest anchor of shape B to the pinned start
  3. only the end pinned    -> nearest anchor of shape A to the pinned end
  4. nothing pinned         -> globally closest of the 16 anchor pairs

Ties always go to the first candidate in top/right/bottom/left order.
"""

from __future__ import annotations

import logging
import math

from connectflow.routing.types import AnchorPoint, Point, RoutingRequest, ShapeBox
from connectflow.types import SIDE_ORDER, Side

logger = logging.getLogger(__name__)


def anchor_of(box: ShapeBox, side: Side) -> AnchorPoint:
    """The canonical anchor of box on the given side."""
    center_x = box.x + box.width / 2
    center_y = box.y + box.height / 2
    if side == Side.Top:
        return AnchorPoint(center_x, box.y, Side.Top)
    if side == Side.Right:
        return AnchorPoint(box.right(), center_y, Side.Right)
    if side == Side.Bottom:
        return AnchorPoint(center_x, box.bottom(), Side.Bottom)
    return AnchorPoint(box.x, center_y, Side.Left)


def anchors_of(box: ShapeBox) -> tuple[AnchorPoint, AnchorPoint, AnchorPoint, AnchorPoint]:
    """The four anchors of box, in top/right/bottom/left order."""
    top, right, bottom, left = (anchor_of(box, side) for side in SIDE_ORDER)
    return (top, right, bottom, left)


def distance(p: AnchorPoint | Point, q: AnchorPoint | Point) -> float:
    return math.hypot(q.x - p.x, q.y - p.y)


def closest_anchor(box: ShapeBox, target: AnchorPoint | Point) -> AnchorPoint:
    """The anchor of box nearest to target."""
    first, *rest = anchors_of(box)
    best = first
    best_dist = distance(first, target)
    for anchor in rest:
        d = distance(anchor, target)
        if d < best_dist:
            best_dist = d
            best = anchor
    return best


def closest_pair(box_a: ShapeBox, box_b: ShapeBox) -> tuple[AnchorPoint, AnchorPoint]:
    """The (start, end) anchor pair with the smallest distance over all 16 combinations."""
    pairs = [(a, b) for a in anchors_of(box_a) for b in anchors_of(box_b)]
    best = pairs[0]
    best_dist = distance(*best)
    for anchor_a, anchor_b in pairs[1:]:
        d = distance(anchor_a, anchor_b)
        if d < best_dist:
            best_dist = d
            best = (anchor_a, anchor_b)
    return best


def resolve_anchors(request: RoutingRequest) -> tuple[AnchorPoint, AnchorPoint]:
    """Pick the start anchor on shape A and the end anchor on shape B."""
    start_side = Side.parse(request.manual_start_side)
    end_side = Side.parse(request.manual_end_side)

    if start_side is not None and end_side is not None:
        start = anchor_of(request.shape_a, start_side)
        end = anchor_of(request.shape_b, end_side)
        logger.debug("Using pinned anchors: %s -> %s", start_side.value, end_side.value)
    elif start_side is not None:
        start = anchor_of(request.shape_a, start_side)
        end = closest_anchor(request.shape_b, start)
        logger.debug("Using pinned start %s and closest end %s", start_side.value, _side_name(end))
    elif end_side is not None:
        end = anchor_of(request.shape_b, end_side)
        start = closest_anchor(request.shape_a, end)
        logger.debug("Using pinned end %s and closest start %s", end_side.value, _side_name(start))
    else:
        start, end = closest_pair(request.shape_a, request.shape_b)
        logger.debug("Using closest anchors: %s -> %s", _side_name(start), _side_name(end))
    return start, end


def _side_name(anchor: AnchorPoint) -> str:
    return anchor.side.value if anchor.side is not None else "-"
