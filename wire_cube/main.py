# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "numpy",
# ]
# ///
"""
Wire Cube - a tumbling wireframe cube drawn with cursor escape sequences.
"""

import signal
import sys

from .animation import AnimationState, install_interrupt_handler, run
from .config import CubeConfig
from .geometry import Cube
from .terminal import Canvas, enable_windows_ansi


def main():
    config = CubeConfig()
    state = AnimationState(cube=Cube.centered(config.cube_size))
    canvas = Canvas(config, sys.stdout.buffer)

    enable_windows_ansi()
    canvas.enter()
    previous = install_interrupt_handler(state)
    try:
        code = run(state, canvas, config)
    finally:
        signal.signal(signal.SIGINT, previous)

    print(f"Wire Cube ended after {state.frames} frames.")
    return code


if __name__ == "__main__":
    sys.exit(main())
