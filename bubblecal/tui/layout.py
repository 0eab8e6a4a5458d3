"""Minimal terminal styling and block layout built on ANSI escape codes."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from wcwidth import wcwidth

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
_ANSI_CAPTURE = re.compile(r"(\x1b\[[0-9;?]*[A-Za-z])")
_RESET = "\x1b[0m"
_ALIGNMENTS = ("left", "center", "right")

# horizontal top, horizontal bottom, left, right, corners tl, tr, bl, br
BORDERS = {
    "rounded": ("─", "─", "│", "│", "╭", "╮", "╰", "╯"),
    "normal": ("─", "─", "│", "│", "┌", "┐", "└", "┘"),
}


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _line_width(line: str) -> int:
    return sum(_char_width(ch) for ch in _ANSI.sub("", line))


def visible_width(text: str) -> int:
    """Return the widest line of ``text`` in terminal cells, ignoring escapes."""
    return max((_line_width(line) for line in text.split("\n")), default=0)


def _wrap_line(line: str, width: int) -> list[str]:
    if width <= 0 or _line_width(line) <= width:
        return [line]
    pieces: list[str] = []
    current, current_width = "", 0
    for position, part in enumerate(_ANSI_CAPTURE.split(line)):
        if position % 2:
            current += part
            continue
        for ch in part:
            w = _char_width(ch)
            if current_width + w > width and current_width > 0:
                pieces.append(current)
                current, current_width = "", 0
            current += ch
            current_width += w
    pieces.append(current)
    return pieces


def _align(line: str, width: int, align: str) -> str:
    gap = width - _line_width(line)
    if gap <= 0:
        return line
    if align == "right":
        return " " * gap + line
    if align == "center":
        left = gap // 2
        return " " * left + line + " " * (gap - left)
    return line + " " * gap


def _box(value: int | Sequence[int]) -> tuple[int, int, int, int]:
    if isinstance(value, int):
        return (value,) * 4
    values = tuple(value)
    if len(values) == 1:
        return values * 4
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 3:
        return (values[0], values[1], values[2], values[1])
    if len(values) == 4:
        return values  # type: ignore[return-value]
    raise ValueError("box values take one to four integers")


def _color_code(color: str | None, background: bool) -> str | None:
    if not color:
        return None
    base = 48 if background else 38
    if color.startswith("#") and len(color) == 7:
        try:
            r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            return None
        return f"{base};2;{r};{g};{b}"
    if color.isdigit():
        return f"{base};5;{int(color)}"
    return None


def _sgr(foreground: str | None, background: str | None, bold: bool) -> str:
    codes = []
    if bold:
        codes.append("1")
    for code in (_color_code(foreground, False), _color_code(background, True)):
        if code:
            codes.append(code)
    return f"\x1b[{';'.join(codes)}m" if codes else ""


def _painter(prefix: str):
    def paint(text: str) -> str:
        if not prefix or not text:
            return text
        return prefix + text.replace(_RESET, _RESET + prefix) + _RESET

    return paint


@dataclass(frozen=True)
class Style:
    """Visual attributes applied to a block of text.

    ``width`` and ``height`` include padding but not border or margin;
    zero means "as large as the content".
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    width: int = 0
    height: int = 0
    max_height: int = 0
    align: str = "left"
    padding: int | Sequence[int] = 0
    margin: int | Sequence[int] = 0
    border: str | None = None
    border_foreground: str | None = None
    border_sides: tuple[bool, bool, bool, bool] = (True, True, True, True)

    def __post_init__(self) -> None:
        if self.align not in _ALIGNMENTS:
            raise ValueError(f"unknown alignment: {self.align!r}")
        if self.border is not None and self.border not in BORDERS:
            raise ValueError(f"unknown border: {self.border!r}")
        object.__setattr__(self, "padding", _box(self.padding))
        object.__setattr__(self, "margin", _box(self.margin))

    def render(self, text: str) -> str:
        """Apply the style to ``text`` and return the resulting block."""
        pad_top, pad_right, pad_bottom, pad_left = self.padding
        lines = text.replace("\t", "    ").split("\n")
        if self.width > 0:
            inner = max(self.width - pad_left - pad_right, 1)
            lines = [piece for line in lines for piece in _wrap_line(line, inner)]
        else:
            inner = max(_line_width(line) for line in lines)
        paint = _painter(_sgr(self.foreground, self.background, self.bold))

        full = inner + pad_left + pad_right
        blank = paint(" " * full)
        body = [
            paint(" " * pad_left + _align(line, inner, self.align) + " " * pad_right)
            for line in lines
        ]
        block = [blank] * pad_top + body + [blank] * pad_bottom
        block.extend([blank] * (self.height - len(block)))

        if self.border is not None:
            block = self._add_border(block, full)

        m_top, m_right, m_bottom, m_left = self.margin
        if any(self.margin):
            width = visible_width("\n".join(block))
            block = (
                [" " * (width + m_left + m_right)] * m_top
                + [" " * m_left + line + " " * m_right for line in block]
                + [" " * (width + m_left + m_right)] * m_bottom
            )

        if self.max_height > 0:
            block = block[: self.max_height]
        return "\n".join(block)

    def _add_border(self, block: list[str], width: int) -> list[str]:
        top_h, bottom_h, left_v, right_v, tl, tr, bl, br = BORDERS[self.border]
        top, right, bottom, left = self.border_sides
        paint = _painter(_sgr(self.border_foreground, None, False))
        result = []
        if top:
            result.append(paint((tl if left else "") + top_h * width + (tr if right else "")))
        result.extend(
            (paint(left_v) if left else "") + line + (paint(right_v) if right else "")
            for line in block
        )
        if bottom:
            result.append(paint((bl if left else "") + bottom_h * width + (br if right else "")))
        return result


def join_horizontal(blocks: Sequence[str]) -> str:
    """Place blocks side by side, aligned at the top."""
    split = [block.split("\n") for block in blocks]
    if not split:
        return ""
    widths = [visible_width(block) for block in blocks]
    height = max(len(lines) for lines in split)
    rows = []
    for row in range(height):
        parts = []
        for lines, width in zip(split, widths):
            line = lines[row] if row < len(lines) else ""
            parts.append(_align(line, width, "left"))
        rows.append("".join(parts))
    return "\n".join(rows)


def join_vertical(blocks: Sequence[str], align: str = "left") -> str:
    """Stack blocks, padding every line to the widest one."""
    if align not in _ALIGNMENTS:
        raise ValueError(f"unknown alignment: {align!r}")
    lines = [line for block in blocks for line in block.split("\n")]
    if not lines:
        return ""
    width = max(_line_width(line) for line in lines)
    return "\n".join(_align(line, width, align) for line in lines)


def place(width: int, height: int, block: str) -> str:
    """Centre ``block`` in an area of the given size."""
    lines = block.split("\n")
    area_width = max(width, visible_width(block))
    centred = [_align(line, area_width, "center") for line in lines]
    gap = max(height - len(centred), 0)
    top = gap // 2
    filler = " " * area_width
    return "\n".join([filler] * top + centred + [filler] * (gap - top))