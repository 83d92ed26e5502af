"""In-memory line source for strings, lists of lines and open streams."""

from collections.abc import Iterable, Iterator

from .base import LineSource


class TextLineSource(LineSource):
    """Line source wrapping text that is already in memory.

    Accepts either a single string, which is split on ``"\\n"`` with one
    trailing ``"\\r"`` removed per line (the same lines a file yields), or
    any iterable of lines such as a list or ``sys.stdin``.

    Example:
        >>> source = TextLineSource("## Title: MyAddon\\n## APIVersion: 101041")
        >>> list(source.read_lines())
        ['## Title: MyAddon', '## APIVersion: 101041']
    """

    def __init__(self, text: str | Iterable[str], name: str = "<text>"):
        self.text = text
        self.name = name

    def read_lines(self) -> Iterator[str]:
        if isinstance(self.text, str):
            # Only "\n" ends a line; form feeds and Unicode separators stay in values
            lines = self.text.split("\n")
            if lines[-1] == "":
                lines.pop()
            for line in lines:
                yield line.removesuffix("\r")
            return

        for line in self.text:
            yield line.removesuffix("\n").removesuffix("\r")

    def describe(self) -> str:
        return self.name
