"""
Terminal rendering of KMP search results.

Every function here takes the match positions produced by
``kmp_search`` as a plain list and returns a string; nothing is printed
and the inputs are never modified.
"""
import textwrap
from typing import List, Optional, Sequence

from termcolor import colored

BOX_WIDTH = 50
ROW_INDENT = 9

BANNER = """
╔═══════════════════════════════════════════╗
║     ╦╔═╔╦╗╔═╗  ╔═╗╦  ╔═╗╔═╗╦═╗╦╔╦╗╦ ╦╔╦╗ ║
║     ╠╩╗║║║╠═╝  ╠═╣║  ║ ╦║ ║╠╦╝║ ║ ╠═╣║║║ ║
║     ╩ ╩╩ ╩╩    ╩ ╩╩═╝╚═╝╚═╝╩╚═╩ ╩ ╩ ╩╩ ╩ ║
╚═══════════════════════════════════════════╝"""

# one visible cell per character in the alignment rows
_VISIBLE_CHARS = {'\n': '↵', '\t': '→'}


def _paint(text: str, color: Optional[str], use_color: Optional[bool]) -> str:
    """
    Color a piece of text with termcolor.

    :param use_color: None - let termcolor decide (tty, NO_COLOR, FORCE_COLOR),
                      True - always emit ANSI codes, False - never.
    """
    if use_color is None:
        return colored(text, color)
    if use_color:
        return colored(text, color, force_color=True)
    return colored(text, color, no_color=True)


def _visible(char: str) -> str:
    return _VISIBLE_CHARS.get(char, char)


def render_banner(use_color: Optional[bool] = None) -> str:
    """Returns the program banner."""
    return _paint(BANNER.lstrip('\n'), 'magenta', use_color)


def render_summary(positions: Sequence[int], use_color: Optional[bool] = None) -> str:
    """
    Returns a box with the number of matches and their positions.

    Positions are wrapped onto as many lines as needed. Padding is
    computed from the plain text, so the right border stays aligned for
    any number of matches.
    """
    inner = BOX_WIDTH - 1  # one leading space inside the border
    border = _paint('│', 'cyan', use_color)

    # (plain text, colored text) for every line inside the box
    lines = []
    if positions:
        times = 'time' if len(positions) == 1 else 'times'
        plain = f'Pattern found {len(positions)} {times} at positions:'
        painted = (_paint('Pattern found ', 'yellow', use_color)
                   + _paint(str(len(positions)), 'green', use_color)
                   + _paint(f' {times} at positions:', 'yellow', use_color))
        lines.append((plain, painted))
        for chunk in textwrap.wrap(' '.join(str(pos) for pos in positions), width=inner - 1):
            lines.append((chunk, _paint(chunk, 'green', use_color)))
    else:
        plain = 'Pattern not found'
        lines.append((plain, _paint(plain, 'yellow', use_color)))

    result = [_paint('╭' + '─' * BOX_WIDTH + '╮', 'cyan', use_color)]
    for plain, painted in lines:
        result.append(f"{border} {painted}{' ' * (inner - len(plain))}{border}")
    result.append(_paint('╰' + '─' * BOX_WIDTH + '╯', 'cyan', use_color))
    return '\n'.join(result)


def render_visualization(text: str,
                         pattern: str,
                         positions: Sequence[int],
                         use_color: Optional[bool] = None) -> str:
    """
    Returns the alignment view of every match.

    The text is printed one character per cell with an index row below
    it (``i % 10``); each match adds a row of arrows under the matched
    span and a row with the pattern characters.
    """
    indent = ' ' * ROW_INDENT
    rows = [
        _paint('Pattern Matching Visualization:', 'blue', use_color),
        '━' * 37,
        '',
        _paint('Text:'.ljust(ROW_INDENT), 'cyan', use_color)
        + ' '.join(_visible(char) for char in text),
        indent + ' '.join(_paint(str(i % 10), 'blue', use_color) for i in range(len(text))),
        '',
    ]

    m = len(pattern)
    for pos in positions:
        arrows = []
        letters = []
        for i in range(len(text)):
            if pos <= i < pos + m:
                arrows.append(_paint('↑', 'red', use_color))
                letters.append(_paint(_visible(pattern[i - pos]), 'green', use_color))
            else:
                arrows.append(' ')
                letters.append(' ')
        rows.append((indent + ' '.join(arrows)).rstrip())
        rows.append((indent + ' '.join(letters)).rstrip())
        rows.append('')

    return '\n'.join(rows)


def highlight_text(text: str,
                   pattern: str,
                   positions: Sequence[int],
                   color: str = 'red',
                   use_color: Optional[bool] = None) -> str:
    """
    Returns the text with the found occurrences highlighted.

    Overlapping occurrences are merged into a single highlighted run.
    Positions that do not fit into the text are skipped.
    """
    m = len(pattern)
    if not positions or not m:
        return text

    # Merge [start, end) spans of the occurrences
    spans: List[List[int]] = []
    for start in sorted(positions):
        end = start + m
        if start < 0 or end > len(text):
            continue
        if spans and start <= spans[-1][1]:
            spans[-1][1] = max(spans[-1][1], end)
        else:
            spans.append([start, end])

    result_text = ''
    last_idx = 0
    for start, end in spans:
        result_text += text[last_idx:start]
        result_text += _paint(text[start:end], color, use_color)
        last_idx = end

    result_text += text[last_idx:]
    return result_text


def render_report(text: str,
                  pattern: str,
                  positions: Sequence[int],
                  visualize: bool = True,
                  use_color: Optional[bool] = None) -> str:
    """Returns banner, summary and, optionally, the alignment view."""
    parts = [render_banner(use_color), render_summary(positions, use_color)]
    if visualize:
        parts.append('')
        parts.append(render_visualization(text, pattern, positions, use_color))
    return '\n'.join(parts)
