import io
import os
import sys

import pytest

from framefit import FrameSize, FrameSizer, HostAction, HostError
from framefit.hosts import XtermHost
from framefit.termio import TermIO, parse_report


class FakeTerm:
    """Answers xterm report requests from a table and records output."""

    def __init__(self, reports=None, grid=(80, 24)):
        self.reports = reports or {}
        self.grid = grid
        self.output = io.StringIO()

    def is_terminal(self) -> bool:
        return True

    def query_size(self):
        return self.grid

    def escape(self, *parts):
        self.output.write("".join(str(p) for p in parts))
        return self

    def flush(self):
        return self

    def request_numbers(self, *query, prefix, suffix):
        request = "".join(str(p) for p in query)
        report = self.reports.get(request)
        if report is None:
            return []
        return parse_report(report, prefix, suffix)


def test_display_and_cell_size_from_reports():
    term = FakeTerm({
        "\x1b[15t": b"\x1b[5;1200;1600t",
        "\x1b[16t": b"\x1b[6;18;9t",
    })
    host = XtermHost(term=term)

    assert host.display_size() == (1600, 1200)
    assert host.char_cell_size() == (9, 18)


def test_cell_size_falls_back_to_text_area():
    term = FakeTerm({
        "\x1b[15t": b"\x1b[5;1080;1920t",
        "\x1b[14t": b"\x1b[4;384;640t",
    }, grid=(80, 24))
    host = XtermHost(term=term)

    assert host.char_cell_size() == (8, 16)


def test_missing_screen_report_raises():
    host = XtermHost(term=FakeTerm({}))

    with pytest.raises(HostError):
        host.display_size()


def test_missing_cell_reports_raise():
    host = XtermHost(term=FakeTerm({"\x1b[15t": b"\x1b[5;1080;1920t"}))

    with pytest.raises(HostError):
        host.char_cell_size()


def test_maximize_writes_resize_then_move():
    term = FakeTerm({
        "\x1b[15t": b"\x1b[5;1200;1600t",
        "\x1b[16t": b"\x1b[6;18;9t",
    })
    host = XtermHost(term=term, scroll_bar_width=15, left_fringe_width=8, right_fringe_width=8)

    result = FrameSizer().maximize(host)

    assert result.action == HostAction.RESIZE
    assert result.size == FrameSize(174, 64)
    assert term.output.getvalue() == "\x1b[8;64;174t\x1b[3;0;0t"


def test_dry_run_writes_nothing():
    term = FakeTerm({
        "\x1b[15t": b"\x1b[5;1200;1600t",
        "\x1b[16t": b"\x1b[6;18;9t",
    })

    FrameSizer().maximize(XtermHost(term=term), dry_run=True)

    assert term.output.getvalue() == ""


def test_parse_report():
    assert parse_report(b"\x1b[5;1080;1920t", b"\x1b[5;", b"t") == [1080, 1920]
    assert parse_report(b"\x1b[6;16;8t", b"\x1b[5;", b"t") == []
    assert parse_report(b"\x1b[5;abc;1920t", b"\x1b[5;", b"t") == []


posix_only = pytest.mark.skipif(sys.platform == "win32", reason="select() on pipes")


@posix_only
def test_read_escape_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"\x1b[6;16;8tleftover")
        with os.fdopen(read_fd, "r", closefd=False) as stream:
            term = TermIO(input=stream, output=io.StringIO(), timeout=0.5)
            term._cbreak_mode = True
            assert term.read_escape() == b"\x1b[6;16;8t"
    finally:
        os.close(read_fd)
        os.close(write_fd)


@posix_only
def test_read_times_out_when_silent():
    read_fd, write_fd = os.pipe()
    try:
        with os.fdopen(read_fd, "r", closefd=False) as stream:
            term = TermIO(input=stream, output=io.StringIO(), timeout=0.05)
            term._cbreak_mode = True
            with pytest.raises(TimeoutError):
                term.read()
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_termio_not_a_terminal():
    term = TermIO(input=io.StringIO(), output=io.StringIO())

    assert not term.is_terminal()
    assert not XtermHost(term=term).is_available()


@posix_only
def test_closed_input_gives_no_report():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    try:
        with os.fdopen(read_fd, "r", closefd=False) as stream:
            term = TermIO(input=stream, output=io.StringIO(), timeout=0.5)
            term._cbreak_mode = True
            assert term.request_numbers("\x1b[15t", prefix=b"\x1b[5;", suffix=b"t") == []
            with pytest.raises(HostError):
                XtermHost(term=term).display_size()
    finally:
        os.close(read_fd)


@posix_only
def test_cbreak_failure_raises_host_error():
    """A pipe is not a terminal, so its attributes cannot be changed."""
    read_fd, write_fd = os.pipe()
    try:
        with os.fdopen(read_fd, "r", closefd=False) as stream:
            term = TermIO(input=stream, output=io.StringIO(), timeout=0.05)
            with pytest.raises(HostError):
                term.request_numbers("\x1b[16t", prefix=b"\x1b[6;", suffix=b"t")
            assert not term.is_cbreak_mode()
    finally:
        os.close(read_fd)
        os.close(write_fd)
