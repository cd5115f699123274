"""Text-mode widgets that render themselves into boxes of characters."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _lines(text: str) -> list[str]:
    """Split ``text`` into lines, without a trailing empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` columns; odd padding goes to the right."""
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(ABC):
    """Something that can be drawn as text."""

    @abstractmethod
    def width(self) -> int:
        """Return the natural width of the widget."""

    @abstractmethod
    def render(self) -> str:
        """Return the widget drawn as text, each line ending in a newline."""

    def draw(self) -> str:
        """Write the rendered widget and a blank line to standard output.

        Returns the text that was written.
        """
        text = self.render() + "\n"
        sys.stdout.write(text)
        sys.stdout.flush()
        return text


class Label(Widget):
    """A piece of text, possibly spanning several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def render(self) -> str:
        return f"{self.label}\n"


class Button(Widget):
    """A label drawn inside a box with some padding."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def render(self) -> str:
        width = self.width()
        border = "+" + "-" * width + "+\n"
        body = "".join(
            f"|{_center(line, width)}|\n" for line in _lines(self.label.render())
        )
        return border + body + border


class Window(Widget):
    """A titled frame holding other widgets stacked vertically."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append ``widget`` below the widgets already in the window."""
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self.widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        # Two columns of border and padding on each side.
        return self._inner_width() + 4

    def render(self) -> str:
        inner = "".join(widget.render() for widget in self.widgets)
        inner_width = self._inner_width()
        rule = "+-" + "-" * inner_width + "-+\n"
        parts = [
            rule,
            f"| {_center(self.title, inner_width)} |\n",
            "+=" + "=" * inner_width + "=+\n",
        ]
        parts.extend(f"| {line.ljust(inner_width)} |\n" for line in _lines(inner))
        parts.append(rule)
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Draw a small demonstration window."""
    window = Window("GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())