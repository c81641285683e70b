# mdrender/markdown/codeblocks/writer.py
"""Line-oriented HTML output buffer used by the code block renderer."""

from typing import Callable, Iterable, List, Optional

from .models import HtmlAttributes


def escape_html(text: str, soft: bool = False) -> str:
    """
    Escape text for HTML content.

    Soft escaping only touches ``&`` and ``<`` so that diagram sources such
    as ``A --> B`` stay readable for client-side renderers.
    """
    text = text.replace("&", "&amp;").replace("<", "&lt;")
    if soft:
        return text
    return text.replace(">", "&gt;").replace('"', "&quot;")


class HtmlWriter:
    """
    Accumulates raw HTML writes and tracks whether output sits at a line start.

    ``enable_html_for_block`` mirrors the host renderer's switch for emitting
    tags; when it is off, renderers write only the block text.
    """

    def __init__(self, enable_html_for_block: bool = True):
        self.enable_html_for_block = enable_html_for_block
        self._parts: List[str] = []
        self._at_line_start = True

    def write(self, content: str) -> "HtmlWriter":
        if content:
            self._parts.append(content)
            self._at_line_start = content.endswith("\n")
        return self

    def write_line(self, content: str = "") -> "HtmlWriter":
        return self.write(content + "\n")

    def ensure_line(self) -> "HtmlWriter":
        """Start a fresh line unless the output already ends with one."""
        if not self._at_line_start:
            self.write_line()
        return self

    def write_escape(self, content: str, soft: bool = False) -> "HtmlWriter":
        return self.write(escape_html(content, soft=soft))

    def write_attributes(
        self,
        attributes: Optional[HtmlAttributes],
        class_filter: Optional[Callable[[str], str]] = None,
    ) -> "HtmlWriter":
        """
        Write ``attributes`` as `` id="..." class="..." key="..."``.

        Args:
            attributes: Attributes to write; None or empty writes nothing
            class_filter: Optional mapping applied to each class name
        """
        if not attributes:
            return self

        if attributes.id:
            self.write(' id="').write_escape(attributes.id).write('"')

        if attributes.classes:
            classes = attributes.classes
            if class_filter is not None:
                classes = [class_filter(cls) for cls in classes]
            self.write(' class="').write_escape(" ".join(classes)).write('"')

        for key, value in attributes.properties:
            self.write(" ").write(key)
            if value is not None:
                self.write('="').write_escape(value).write('"')

        return self

    def write_leaf_raw_lines(
        self,
        lines: Iterable[str],
        write_end_of_lines: bool = True,
        escape: bool = False,
        soft_escape: bool = False,
    ) -> "HtmlWriter":
        """
        Write block body lines.

        Trailing blank lines are dropped. With ``write_end_of_lines`` every
        remaining line ends with exactly one newline.
        """
        lines = list(lines)
        while lines and not lines[-1].strip():
            lines.pop()

        for i, line in enumerate(lines):
            if escape:
                self.write_escape(line, soft=soft_escape)
            else:
                self.write(line)

            if write_end_of_lines:
                self.write_line()
            elif i < len(lines) - 1:
                self.write("\n")

        return self

    def getvalue(self) -> str:
        return "".join(self._parts)
