"""
conventions/sql_text_writer.py
------------------------------
Text stream wrapper that keeps informational output inside SQL comments.

Informational lines written with :meth:`SqlTextWriter.write_line` are
collected into ``/** ... */`` blocks; SQL written with
:meth:`SqlTextWriter.write_line_direct` closes the open block first and is
emitted verbatim, so the combined output is a runnable SQL script::

    /**
     * 20180101000000: Create orders
     */

    CREATE TABLE Orders (...);
"""
from __future__ import annotations

from types import TracebackType
from typing import TextIO


class SqlTextWriter:
    """
    Wraps *inner* and comments out everything except direct writes.

    Closing the writer closes an open comment block but leaves *inner*
    open; the caller owns the wrapped stream.
    """

    def __init__(self, inner: TextIO) -> None:
        self._inner = inner
        self._comment_started = False
        self._had_empty_line = True

    @property
    def encoding(self) -> str | None:
        return getattr(self._inner, "encoding", None)

    def write_line(self, value: str = "") -> None:
        if value:
            if not self._comment_started:
                if not self._had_empty_line:
                    self._inner.write("\n")
                    self._had_empty_line = True
                self._inner.write("/**\n")
                self._comment_started = True
            self._inner.write(f" * {value}\n")
        elif self._comment_started:
            self._inner.write(" *\n")
        elif not self._had_empty_line:
            self._inner.write("\n")
            self._had_empty_line = True

    def write_line_direct(self, message: str) -> None:
        if self._comment_started:
            self._close_comment()
        self._inner.write(f"{message}\n")
        self._had_empty_line = not message

    def close(self) -> None:
        self._close_comment(add_empty_line=False)

    def _close_comment(self, add_empty_line: bool = True) -> None:
        if not self._comment_started:
            return
        self._inner.write(" */\n")
        if add_empty_line:
            self._inner.write("\n")
        self._comment_started = False
        self._had_empty_line = add_empty_line

    def __enter__(self) -> "SqlTextWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
