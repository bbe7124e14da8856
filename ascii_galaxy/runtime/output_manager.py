from ..runtime.terminal import Terminal


def write_frame(terminal: Terminal, buffer: str):
    """Home the cursor and write a frame so it overwrites the previous one in place."""
    terminal.home()
    terminal.stream.write(buffer)
    terminal.stream.flush()

__all__ = ["write_frame"]
