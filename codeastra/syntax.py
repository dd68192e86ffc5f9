"""Rule-based syntax highlighting driven by YAML configuration."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

Color = tuple[int, int, int, int]

FONT_WEIGHT_NORMAL = 400
FONT_WEIGHT_BOLD = 700

_SVG_COLORS = """
aliceblue f0f8ff antiquewhite faebd7 aqua 00ffff aquamarine 7fffd4
azure f0ffff beige f5f5dc bisque ffe4c4 black 000000
blanchedalmond ffebcd blue 0000ff blueviolet 8a2be2 brown a52a2a
burlywood deb887 cadetblue 5f9ea0 chartreuse 7fff00 chocolate d2691e
coral ff7f50 cornflowerblue 6495ed cornsilk fff8dc crimson dc143c
cyan 00ffff darkblue 00008b darkcyan 008b8b darkgoldenrod b8860b
darkgray a9a9a9 darkgreen 006400 darkgrey a9a9a9 darkkhaki bdb76b
darkmagenta 8b008b darkolivegreen 556b2f darkorange ff8c00
darkorchid 9932cc darkred 8b0000 darksalmon e9967a darkseagreen 8fbc8f
darkslateblue 483d8b darkslategray 2f4f4f darkslategrey 2f4f4f
darkturquoise 00ced1 darkviolet 9400d3 deeppink ff1493
deepskyblue 00bfff dimgray 696969 dimgrey 696969 dodgerblue 1e90ff
firebrick b22222 floralwhite fffaf0 forestgreen 228b22 fuchsia ff00ff
gainsboro dcdcdc ghostwhite f8f8ff gold ffd700 goldenrod daa520
gray 808080 grey 808080 green 008000 greenyellow adff2f
honeydew f0fff0 hotpink ff69b4 indianred cd5c5c indigo 4b0082
ivory fffff0 khaki f0e68c lavender e6e6fa lavenderblush fff0f5
lawngreen 7cfc00 lemonchiffon fffacd lightblue add8e6
lightcoral f08080 lightcyan e0ffff lightgoldenrodyellow fafad2
lightgray d3d3d3 lightgreen 90ee90 lightgrey d3d3d3 lightpink ffb6c1
lightsalmon ffa07a lightseagreen 20b2aa lightskyblue 87cefa
lightslategray 778899 lightslategrey 778899 lightsteelblue b0c4de
lightyellow ffffe0 lime 00ff00 limegreen 32cd32 linen faf0e6
magenta ff00ff maroon 800000 mediumaquamarine 66cdaa
mediumblue 0000cd mediumorchid ba55d3 mediumpurple 9370db
mediumseagreen 3cb371 mediumslateblue 7b68ee mediumspringgreen 00fa9a
mediumturquoise 48d1cc mediumvioletred c71585 midnightblue 191970
mintcream f5fffa mistyrose ffe4e1 moccasin ffe4b5 navajowhite ffdead
navy 000080 oldlace fdf5e6 olive 808000 olivedrab 6b8e23
orange ffa500 orangered ff4500 orchid da70d6 palegoldenrod eee8aa
palegreen 98fb98 paleturquoise afeeee palevioletred db7093
papayawhip ffefd5 peachpuff ffdab9 peru cd853f pink ffc0cb
plum dda0dd powderblue b0e0e6 purple 800080 red ff0000
rosybrown bc8f8f royalblue 4169e1 saddlebrown 8b4513 salmon fa8072
sandybrown f4a460 seagreen 2e8b57 seashell fff5ee sienna a0522d
silver c0c0c0 skyblue 87ceeb slateblue 6a5acd slategray 708090
slategrey 708090 snow fffafa springgreen 00ff7f steelblue 4682b4
tan d2b48c teal 008080 thistle d8bfd8 tomato ff6347
turquoise 40e0d0 violet ee82ee wheat f5deb3 white ffffff
whitesmoke f5f5f5 yellow ffff00 yellowgreen 9acd32
"""


def _build_named_colors() -> dict[str, Color]:
    words = _SVG_COLORS.split()
    table = {
        name: (int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16), 255)
        for name, code in zip(words[::2], words[1::2])
    }
    table["transparent"] = (0, 0, 0, 0)
    return table


_NAMED_COLORS = _build_named_colors()
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_color(value: str) -> Color:
    """Parse a colour name or hex code into an (r, g, b, a) tuple.

    Accepts ``#RGB``, ``#RRGGBB``, ``#AARRGGBB``, ``#RRRGGGBBB``,
    ``#RRRRGGGGBBBB`` and SVG colour names. Raises ValueError otherwise.
    """
    if not isinstance(value, str):
        raise ValueError(f"invalid colour: {value!r}")
    text = value.strip()
    if text.startswith("#"):
        digits = text[1:]
        if not digits or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid colour: {value!r}")
        size = len(digits)
        if size == 3:
            r, g, b = (int(c, 16) * 17 for c in digits)
            return (r, g, b, 255)
        if size == 6:
            r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 6, 2))
            return (r, g, b, 255)
        if size == 8:
            a, r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
            return (r, g, b, a)
        if size == 9:
            r, g, b = (int(digits[i:i + 3], 16) >> 4 for i in range(0, 9, 3))
            return (r, g, b, 255)
        if size == 12:
            r, g, b = (int(digits[i:i + 4], 16) >> 8 for i in range(0, 12, 4))
            return (r, g, b, 255)
        raise ValueError(f"invalid colour: {value!r}")
    name = "".join(text.split()).lower()
    try:
        return _NAMED_COLORS[name]
    except KeyError:
        raise ValueError(f"invalid colour: {value!r}") from None


@dataclass(frozen=True)
class TextFormat:
    """Character format applied to highlighted text."""

    foreground: Color
    bold: bool = False
    italic: bool = False

    @property
    def font_weight(self) -> int:
        return FONT_WEIGHT_BOLD if self.bold else FONT_WEIGHT_NORMAL


@dataclass(frozen=True)
class SyntaxRule:
    """A compiled pattern and the format given to its matches."""

    pattern: re.Pattern[str]
    text_format: TextFormat


def _scalar_text(value: Any) -> str:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        raise ValueError(f"expected a scalar value, got {value!r}")
    return str(value)


def _flag(rule: Mapping[str, Any], key: str) -> bool:
    if key not in rule:
        return False
    value = rule[key]
    if not isinstance(value, bool):
        raise ValueError(f"{key!r} must be a boolean, got {value!r}")
    return value


class Syntax:
    """Highlighter holding an ordered list of syntax rules."""

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.rules: list[SyntaxRule] = []
        logger.debug("Syntax highlighter created")
        self.load_syntax_rules(config)

    def add_pattern(self, pattern: str, text_format: TextFormat) -> None:
        """Append a rule; raises ValueError for an invalid pattern."""
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc
        self.rules.append(SyntaxRule(compiled, text_format))

    def load_syntax_rules(self, config: Mapping[str, Any] | None) -> None:
        """Replace the rules with those under ``keywords`` in *config*."""
        self.rules.clear()
        if not isinstance(config, Mapping) or config.get("keywords") is None:
            return
        keywords = config["keywords"]
        if not isinstance(keywords, Mapping):
            return

        for category, rules in keywords.items():
            if not isinstance(rules, list):
                continue
            for rule in rules:
                if not isinstance(rule, Mapping):
                    logger.warning("Skipping malformed rule in category %s", category)
                    continue
                try:
                    regex = _scalar_text(rule.get("regex"))
                except ValueError as exc:
                    logger.warning("Bad regex in syntax file: %s", exc)
                    continue
                try:
                    color = parse_color(_scalar_text(rule.get("color")))
                except ValueError as exc:
                    logger.warning("Invalid colour, skipping: %s", exc)
                    continue
                text_format = TextFormat(
                    foreground=color,
                    bold=_flag(rule, "bold"),
                    italic=_flag(rule, "italic"),
                )
                try:
                    self.add_pattern(regex, text_format)
                except ValueError as exc:
                    logger.warning("Skipping rule: %s", exc)

    def highlight_block(self, text: str) -> list[tuple[int, int, TextFormat]]:
        """Return (start, length, format) spans in application order.

        Later spans take precedence over earlier ones where they overlap.
        """
        return [
            (match.start(), match.end() - match.start(), rule.text_format)
            for rule in self.rules
            for match in rule.pattern.finditer(text)
            if match.end() > match.start()
        ]