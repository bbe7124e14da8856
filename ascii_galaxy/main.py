"""Console entry point for ascii-galaxy."""
import logging
import sys

from ascii_galaxy.core.galaxy import GalaxyField
from ascii_galaxy.logging_config import setup_logging
from ascii_galaxy.runtime.simulation_loop import run_loop
from ascii_galaxy.runtime.terminal import Terminal, grid_size
from ascii_galaxy.utils.metrics import compute_frame_stats

logger = logging.getLogger("ascii_galaxy.main")


def main() -> int:
    setup_logging("ascii_galaxy")
    terminal = Terminal(sys.stdout)
    term_width, term_height = terminal.size()
    width, height = grid_size(term_width, term_height)
    logger.info("Terminal %dx%d, grid %dx%d", term_width, term_height, width, height)

    field = GalaxyField(width, height)
    frame_times = []
    try:
        run_loop(field, terminal, frame_times=frame_times)
    except KeyboardInterrupt:
        # newline so the shell prompt starts below the footer
        terminal.stream.write("\n")
        terminal.stream.flush()
    stats = compute_frame_stats(frame_times)
    if stats:
        logger.info(
            "%d frames, render time min=%.4fs max=%.4fs mean=%.4fs (%.0f fps)",
            stats["frames"], stats["min"], stats["max"], stats["mean"], stats["render_fps"],
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
