import io

import pytest

from wire_cube.config import CubeConfig
from wire_cube.terminal import Canvas


class RecordingCanvas:
    """Stands in for Canvas where only the painted logical points matter."""

    def __init__(self):
        self.points = []

    def paint(self, p):
        self.points.append(p)


@pytest.fixture
def config():
    return CubeConfig()


@pytest.fixture
def stream():
    return io.BytesIO()


@pytest.fixture
def canvas(config, stream):
    return Canvas(config, stream)


@pytest.fixture
def recorder():
    return RecordingCanvas()
