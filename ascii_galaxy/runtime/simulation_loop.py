import logging
import time
from typing import Callable, List, Optional

from ..config import FRAME_DURATION, TIMESTEP
from ..core.galaxy import GalaxyField
from ..runtime import output_manager
from ..runtime.terminal import Terminal

logger = logging.getLogger(__name__)


def run_loop(
    field: GalaxyField,
    terminal: Terminal,
    dt: float = TIMESTEP,
    frame_duration: float = FRAME_DURATION,
    max_frames: Optional[int] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    frame_times: Optional[List[float]] = None,
) -> int:
    """Render, write, update and sleep until interrupted or max_frames is reached.

    Returns the number of frames drawn. The cursor is shown again on the way
    out however the loop ends.
    """
    terminal.hide_cursor()
    terminal.clear_screen()
    start = clock()
    frames = 0
    try:
        while max_frames is None or frames < max_frames:
            before = clock()
            buffer = field.render(before - start)
            if frame_times is not None:
                frame_times.append(clock() - before)
            output_manager.write_frame(terminal, buffer)
            field.update(dt)
            frames += 1
            sleep(frame_duration)
    finally:
        terminal.show_cursor()
        logger.info("Loop stopped after %d frames (simulated %.1fs)", frames, field.time)
    return frames

__all__ = ["run_loop"]
