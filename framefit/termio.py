"""
Terminal I/O for Framefit.

Just enough of a terminal interface to send xterm window manipulation
sequences and read back their reports.
"""

import os
import select
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from .errors import HostError

if sys.platform != "win32":
    import termios
    import tty


CSI = "\x1b["
bCSI = b"\x1b["


def parse_report(report: bytes, prefix: bytes, suffix: bytes) -> list[int]:
    """
    Split a report such as ``ESC [ 5 ; 1080 ; 1920 t`` into its numbers.

    Args:
        report: Raw report bytes.
        prefix: Expected leading bytes, e.g. ``ESC [ 5 ;``.
        suffix: Expected final bytes, e.g. ``t``.

    Returns:
        The numbers between prefix and suffix, or an empty list if the report
        does not have the expected shape.
    """
    if not report.startswith(prefix) or not report.endswith(suffix):
        return []
    body = report[len(prefix):len(report) - len(suffix)]
    try:
        return [int(num) for num in body.split(b";")]
    except ValueError:
        return []


class TermIO:
    """
    Minimal terminal interface.

    Writes are not flushed except by request methods, which flush before
    waiting for the report.
    """

    def __init__(
        self,
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        timeout: float = 0.5
    ):
        """
        Initialize terminal.

        Args:
            input: Stream reports are read from. Defaults to stdin.
            output: Stream sequences are written to. Defaults to stdout.
            timeout: Seconds to wait for each byte of a report.
        """
        self._input = input or sys.__stdin__
        self._output = output or sys.__stdout__
        self.timeout = timeout
        self._cbreak_mode = False

    def is_terminal(self) -> bool:
        """Check that both streams are attached to a terminal."""
        try:
            return self._input.isatty() and self._output.isatty()
        except (AttributeError, ValueError):
            return False

    def query_size(self) -> tuple[int, int]:
        """Get the terminal grid size as (columns, rows)."""
        return tuple(os.get_terminal_size(self._output.fileno()))

    # ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~
    # Reading

    def is_cbreak_mode(self) -> bool:
        return self._cbreak_mode

    @contextmanager
    def cbreak_mode(self) -> Iterator["TermIO"]:
        """
        Put the terminal into cbreak mode, which forwards individual bytes
        without waiting for the end of line. Reports can only be read in
        cbreak mode. Re-entering is a no-op.
        """
        if sys.platform == "win32":
            raise AssertionError("Windows does not support cbreak mode")
        if self._cbreak_mode:
            yield self
            return

        fileno = self._input.fileno()
        try:
            settings = termios.tcgetattr(fileno)
            tty.setcbreak(fileno)
        except termios.error as e:
            raise HostError(f"cannot put terminal into cbreak mode: {e}") from e
        self._cbreak_mode = True
        try:
            yield self
        finally:
            termios.tcsetattr(fileno, termios.TCSADRAIN, settings)
            self._cbreak_mode = False

    def check_cbreak_mode(self) -> "TermIO":
        if not self._cbreak_mode:
            raise AssertionError("terminal not in cbreak mode")
        return self

    def read(self, length: int = 1) -> bytes:
        """Read from the terminal, raising TimeoutError if nothing arrives."""
        self.check_cbreak_mode()
        fileno = self._input.fileno()
        if self.timeout > 0:
            ready, _, _ = select.select([fileno], [], [], self.timeout)
            if not ready:
                raise TimeoutError()
        data = os.read(fileno, length)
        if not data:
            raise EOFError("terminal input closed")
        return data

    def read_escape(self) -> bytes:
        """Read one CSI control sequence."""
        buffer = bytearray()

        def next_byte() -> int:
            b = self.read(1)[0]
            buffer.append(b)
            return b

        def bad_byte(b: int):
            raise ValueError(f"unexpected byte 0x{b:02X} in report")

        b = next_byte()
        if b != 0x1B:
            bad_byte(b)
        b = next_byte()
        if b != 0x5B:  # [
            bad_byte(b)

        b = next_byte()
        while 0x30 <= b <= 0x3F:  # Parameters
            b = next_byte()
        while 0x20 <= b <= 0x2F:  # Intermediates
            b = next_byte()
        if 0x40 <= b <= 0x7E:
            return bytes(buffer)
        bad_byte(b)

    # ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~ ~
    # Writing

    def escape(self, *parts) -> "TermIO":
        """Write the stringified and joined escape sequence. Do not flush."""
        self._output.write("".join(str(p) for p in parts))
        return self

    def flush(self) -> "TermIO":
        self._output.flush()
        return self

    def request_numbers(self, *query, prefix: bytes, suffix: bytes) -> list[int]:
        """
        Submit a request and return the numbers of its report.

        Returns an empty list when the terminal does not answer in time,
        closes its input, or answers with something unexpected. Raises
        HostError if the terminal cannot be put into cbreak mode.
        """
        with self.cbreak_mode():
            self.escape(*query).flush()
            try:
                report = self.read_escape()
            except (TimeoutError, EOFError, ValueError):
                return []
        return parse_report(report, prefix, suffix)
