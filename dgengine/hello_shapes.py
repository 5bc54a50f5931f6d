"""Demo that switches between coloured shapes with the arrow keys."""

from __future__ import annotations

from dgengine.app import AppConfig, main_app
from dgengine.shapes import (
    HouseShapeState,
    RombusShapeState,
    ShapeState,
    SquareShapeState,
    TriangleShapeState,
)


def main(argv=None) -> int:
    config = AppConfig(app_name="Hello Shapes")
    app = main_app()
    app.add_state("ShapeState", ShapeState)
    app.add_state("TriangleShapeState", TriangleShapeState)
    app.add_state("SquareShapeState", SquareShapeState)
    app.add_state("HouseShapeState", HouseShapeState)
    app.add_state("RombusShapeState", RombusShapeState)
    app.run(config)
    return 0