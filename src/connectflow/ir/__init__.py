"""Intermediate representation: scene AST and SceneGraph."""

from connectflow.ir.ast import ConnectorDecl, Scene, ShapeDecl
from connectflow.ir.graph import ConnectorData, SceneGraph, ShapeData

__all__ = [
    "ConnectorData",
    "ConnectorDecl",
    "Scene",
    "SceneGraph",
    "ShapeData",
    "ShapeDecl",
]
