"""
The fixed-rate frame loop.

The loop owns nothing global: the cube and the stop flag live on an
``AnimationState`` handed in by the caller. The stop flag may be set from a
signal handler at any time but is only looked at between frames.
"""

import signal
import threading
import time
from dataclasses import dataclass, field

from .geometry import Cube
from .rasterizer import draw_axes, draw_cube
from .transform import rotate_cube


@dataclass
class AnimationState:
    cube: Cube
    stop: threading.Event = field(default_factory=threading.Event)
    frames: int = 0

    @property
    def running(self) -> bool:
        return not self.stop.is_set()


def install_interrupt_handler(state: AnimationState):
    """Route SIGINT to the stop flag. Returns the handler it replaced."""

    def handle_sigint(signum, frame):
        state.stop.set()

    return signal.signal(signal.SIGINT, handle_sigint)


def render_frame(state: AnimationState, canvas, config):
    canvas.clear()
    canvas.borders()

    rotate_cube(state.cube, config.rotation_step)
    if config.draw_axes:
        draw_axes(canvas, config)
    draw_cube(canvas, state.cube)

    canvas.flush()
    state.frames += 1


def run(state: AnimationState, canvas, config, sleep=time.sleep) -> int:
    """Draw frames until the stop flag is set, then restore the terminal."""
    try:
        while state.running:
            render_frame(state, canvas, config)
            sleep(config.frame_delay)
    except KeyboardInterrupt:
        state.stop.set()
    finally:
        canvas.restore()
    return 0
