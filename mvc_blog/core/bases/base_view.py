"""Base view."""

import sys
from typing import Optional, TextIO

from mvc_blog.core.exceptions import ViewException


class BaseView:
    """Base view class writing rendered text to a sink.

    The sink defaults to standard output and is looked up on every write, so a
    view built before stdout is redirected still follows the redirect.
    """

    def __init__(self, sink: Optional[TextIO] = None):
        self._sink = sink

    @property
    def sink(self) -> TextIO:
        return self._sink if self._sink is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text to the sink."""
        try:
            self.sink.write(text)
            self.sink.flush()
        except OSError as e:
            raise ViewException(f"Could not write to view sink: {e}") from e

    def write_lines(self, *lines: str) -> None:
        """Write each line followed by a newline."""
        self.write("".join(f"{line}\n" for line in lines))
