"""Connector routing engine: anchor selection and path synthesis."""

from __future__ import annotations

from connectflow.routing.anchors import (
    anchor_of,
    anchors_of,
    closest_anchor,
    closest_pair,
    distance,
    resolve_anchors,
)
from connectflow.routing.curve import CurveStrategy, DominantAxisCurve, SideAwareCurve, curve, curve_factor
from connectflow.routing.engine import RoutedConnector, direct, generate_path, route, route_scene
from connectflow.routing.orthogonal import orthogonal
from connectflow.routing.path import CubicCurveTo, LineTo, MoveTo, PathCommand, PathResult, path_bounds
from connectflow.routing.types import AnchorPoint, BoundingBox, Point, RoutingRequest, ShapeBox

__all__ = [
    "AnchorPoint",
    "BoundingBox",
    "CubicCurveTo",
    "CurveStrategy",
    "DominantAxisCurve",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "PathResult",
    "Point",
    "RoutedConnector",
    "RoutingRequest",
    "ShapeBox",
    "SideAwareCurve",
    "anchor_of",
    "anchors_of",
    "closest_anchor",
    "closest_pair",
    "curve",
    "curve_factor",
    "direct",
    "distance",
    "generate_path",
    "orthogonal",
    "path_bounds",
    "resolve_anchors",
    "route",
    "route_scene",
]
