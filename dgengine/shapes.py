"""Application states that each draw a fixed coloured shape and switch on arrow keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dgengine import colors
from dgengine.app import AppState, main_app
from dgengine.colors import Color
from dgengine.debug import check
from dgengine.graphics import GraphicsSystem
from dgengine.input import InputSystem, KeyCode
from dgengine.vectors import Vector3


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position and an RGBA colour."""

    position: Vector3
    color: Color


class ShapeState(AppState):
    """Draws a single triangle; arrow keys switch to the other shape states."""

    def __init__(self):
        self.vertices: list[Vertex] = []
        self.vertex_buffer: Optional[tuple[Vertex, ...]] = None

    def initialize(self) -> None:
        self.create_shape()
        self.vertex_buffer = tuple(self.vertices)

    def terminate(self) -> None:
        self.vertices.clear()
        self.vertex_buffer = None

    def update(self, delta_time: float) -> None:
        self._switch_on(KeyCode.UP, "TriangleShapeState")
        self._switch_on(KeyCode.RIGHT, "SquareShapeState")
        self._switch_on(KeyCode.LEFT, "HouseShapeState")
        self._switch_on(KeyCode.DOWN, "RombusShapeState")

    def render(self) -> None:
        """Submit the vertex buffer as a triangle list."""
        check(self.vertex_buffer is not None, "ShapeState: not initialized")
        GraphicsSystem.get().draw(self.vertex_buffer)

    def create_shape(self) -> None:
        self._add(-0.5, 0.0, colors.ALICE_BLUE)
        self._add(0.0, 0.75, colors.CRIMSON)
        self._add(0.5, 0.0, colors.GOLDENROD)

    def _add(self, x: float, y: float, color: Color) -> None:
        self.vertices.append(Vertex(Vector3(x, y, 0.0), color))

    @staticmethod
    def _switch_on(key: KeyCode, state_name: str) -> None:
        if InputSystem.get().is_key_pressed(key):
            main_app().change_state(state_name)


class TriangleShapeState(ShapeState):
    """Three triangles side by side; UP returns to the base state."""

    def update(self, delta_time: float) -> None:
        self._switch_on(KeyCode.UP, "ShapeState")

    def create_shape(self) -> None:
        self._add(-0.75, -0.75, colors.ALICE_BLUE)
        self._add(-0.5, 0.0, colors.CRIMSON)
        self._add(-0.25, -0.75, colors.GOLDENROD)

        self._add(-0.5, 0.0, colors.ALICE_BLUE)
        self._add(0.0, 0.75, colors.CRIMSON)
        self._add(0.5, 0.0, colors.GOLDENROD)

        self._add(0.25, -0.75, colors.ALICE_BLUE)
        self._add(0.5, 0.0, colors.CRIMSON)
        self._add(0.75, -0.75, colors.GOLDENROD)


class SquareShapeState(ShapeState):
    """A square made of two triangles; RIGHT returns to the base state."""

    def update(self, delta_time: float) -> None:
        self._switch_on(KeyCode.RIGHT, "ShapeState")

    def create_shape(self) -> None:
        self._add(-0.5, -0.5, colors.ALICE_BLUE)
        self._add(-0.5, 0.5, colors.CRIMSON)
        self._add(0.5, 0.5, colors.GOLDENROD)

        self._add(-0.5, -0.5, colors.ALICE_BLUE)
        self._add(0.5, 0.5, colors.CRIMSON)
        self._add(0.5, -0.5, colors.GOLDENROD)


class HouseShapeState(ShapeState):
    """A brown wall under a green roof; LEFT returns to the base state."""

    def update(self, delta_time: float) -> None:
        self._switch_on(KeyCode.LEFT, "ShapeState")

    def create_shape(self) -> None:
        self._add(-0.5, 0.5, colors.BROWN)
        self._add(0.5, 0.5, colors.BROWN)
        self._add(-0.5, -0.5, colors.BROWN)

        self._add(-0.5, -0.5, colors.BROWN)
        self._add(0.5, 0.5, colors.BROWN)
        self._add(0.5, -0.5, colors.BROWN)

        self._add(-0.5, 0.5, colors.GREEN)
        self._add(0.0, 1.0, colors.GREEN)
        self._add(0.5, 0.5, colors.GREEN)


class RombusShapeState(ShapeState):
    """A rhombus made of two triangles; DOWN returns to the base state."""

    def update(self, delta_time: float) -> None:
        self._switch_on(KeyCode.DOWN, "ShapeState")

    def create_shape(self) -> None:
        self._add(-0.5, 0.0, colors.ALICE_BLUE)
        self._add(0.0, 0.5, colors.CRIMSON)
        self._add(0.5, 0.0, colors.GOLDENROD)
        self._add(0.0, -0.5, colors.ALICE_BLUE)
        self._add(-0.5, 0.0, colors.CRIMSON)
        self._add(0.5, 0.0, colors.GOLDENROD)