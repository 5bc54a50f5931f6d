"""State-driven application framework with 3D math, named colours, input and a simulated window and render loop."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "colors",
    "debug",
    "graphics",
    "hello_shapes",
    "hello_window",
    "input",
    "matrix",
    "quaternion",
    "scalar",
    "shapes",
    "timeutil",
    "vectors",
    "window",
]