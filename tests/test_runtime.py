"""Tests for the terminal runtime: sizing, frame output and the frame loop."""

import io
import logging
import logging.handlers

import pytest

from ascii_galaxy import main as main_module
from ascii_galaxy.core.galaxy import GalaxyField
from ascii_galaxy.logging_config import setup_logging
from ascii_galaxy.runtime import output_manager
from ascii_galaxy.runtime.simulation_loop import run_loop
from ascii_galaxy.runtime.terminal import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    HIDE_CURSOR,
    SHOW_CURSOR,
    Terminal,
    grid_size,
)
from ascii_galaxy.utils.metrics import compute_frame_stats


class TestGridSize:
    @pytest.mark.parametrize(
        "term, expected",
        [((200, 60), (120, 35)), ((80, 24), (80, 21)), ((120, 38), (120, 35)), ((0, 2), (1, 1))],
    )
    def test_sizing_policy(self, term, expected):
        assert grid_size(*term) == expected


class TestTerminal:
    def test_control_codes(self):
        stream = io.StringIO()
        term = Terminal(stream)
        term.hide_cursor()
        term.clear_screen()
        term.home()
        term.show_cursor()
        assert stream.getvalue() == HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME + SHOW_CURSOR

    def test_size_fallback(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "91")
        monkeypatch.setenv("LINES", "27")
        assert Terminal(io.StringIO()).size() == (91, 27)

    def test_write_frame_homes_first(self):
        stream = io.StringIO()
        output_manager.write_frame(Terminal(stream), "abc\n\n Time: 0s")
        assert stream.getvalue() == CURSOR_HOME + "abc\n\n Time: 0s"


class TestRunLoop:
    def test_runs_fixed_number_of_frames(self, empty_field):
        stream = io.StringIO()
        sleeps = []
        frames = run_loop(
            empty_field,
            Terminal(stream),
            max_frames=3,
            clock=lambda: 0.0,
            sleep=sleeps.append,
        )
        out = stream.getvalue()
        assert frames == 3
        assert sleeps == [0.05, 0.05, 0.05]
        assert empty_field.time == pytest.approx(0.3)
        assert out.startswith(HIDE_CURSOR + CLEAR_SCREEN)
        assert out.endswith(SHOW_CURSOR)
        assert out.count(CURSOR_HOME + "          \n") == 3

    def test_clock_drives_footer(self, empty_field):
        stream = io.StringIO()
        ticks = iter([100.0, 100.0, 112.2])
        run_loop(empty_field, Terminal(stream), max_frames=2, clock=lambda: next(ticks), sleep=lambda s: None)
        out = stream.getvalue()
        assert " Time: 0s" in out
        assert " Time: 12s" in out

    def test_render_times_recorded(self, empty_field):
        times = []
        run_loop(
            empty_field,
            Terminal(io.StringIO()),
            max_frames=4,
            sleep=lambda s: None,
            frame_times=times,
        )
        assert len(times) == 4
        assert all(t >= 0.0 for t in times)

    def test_cursor_restored_on_interrupt(self, empty_field):
        stream = io.StringIO()

        def interrupt(_):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            run_loop(empty_field, Terminal(stream), sleep=interrupt)
        assert stream.getvalue().endswith(SHOW_CURSOR)
        assert empty_field.time == pytest.approx(0.1)


class TestMain:
    def test_interrupt_exits_cleanly(self, monkeypatch, capsys):
        calls = {}

        def fake_run_loop(field, terminal, frame_times=None):
            calls["size"] = (field.width, field.height)
            frame_times.extend([0.01, 0.03])
            raise KeyboardInterrupt

        monkeypatch.setenv("COLUMNS", "100")
        monkeypatch.setenv("LINES", "30")
        monkeypatch.setattr(main_module, "setup_logging", lambda *a, **k: None)
        monkeypatch.setattr(main_module, "run_loop", fake_run_loop)

        assert main_module.main() == 0
        assert calls["size"] == (100, 27)
        assert capsys.readouterr().out == "\n"


class TestLogging:
    def test_file_handler_only_by_default(self, tmp_path):
        logger = setup_logging("ascii_galaxy_test", level="DEBUG", log_file=tmp_path / "g.log")
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)
            logger.debug("hello")
            logger.handlers[0].flush()
            assert "hello" in (tmp_path / "g.log").read_text()
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()

    def test_repeat_setup_does_not_stack_handlers(self, tmp_path):
        setup_logging("ascii_galaxy_test", log_file=tmp_path / "g.log")
        logger = setup_logging("ascii_galaxy_test", log_file=tmp_path / "g.log", console=True)
        try:
            assert len(logger.handlers) == 2
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()

    def test_unwritable_log_dir_falls_back(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        logger = setup_logging("ascii_galaxy_test", log_file=blocker / "logs" / "g.log")
        try:
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], logging.NullHandler)
            logger.info("still fine")
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()

    def test_unwritable_log_dir_keeps_console(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        logger = setup_logging("ascii_galaxy_test", log_file=blocker / "g.log", console=True)
        try:
            assert len(logger.handlers) == 1
            assert type(logger.handlers[0]) is logging.StreamHandler
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()


class TestFrameStats:
    def test_empty(self):
        assert compute_frame_stats([]) == {}

    def test_summary(self):
        stats = compute_frame_stats([0.01, 0.02, 0.03])
        assert stats["frames"] == 3
        assert stats["min"] == 0.01
        assert stats["max"] == 0.03
        assert stats["mean"] == pytest.approx(0.02)
        assert stats["render_fps"] == pytest.approx(50.0)

    def test_zero_durations(self):
        assert compute_frame_stats([0.0, 0.0])["render_fps"] == 0.0
