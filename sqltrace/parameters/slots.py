"""Canonicalization of positional placeholders.

Every unnamed ``?`` marker in a statement becomes ``:slot0``, ``:slot1`` ...
in left-to-right order. Question marks inside string literals, comments and
the PostgreSQL JSON operators are not placeholders and are left alone, as are
markers that already carry a name.
"""

import re
from typing import Final

from mypy_extensions import mypyc_attr

from sqltrace.parameters.types import slot_name
from sqltrace.surface import Surface

__all__ = ("SlotNormalizer",)


_QMARK_REGEX: Final = re.compile(
    r"""
    (?P<dquote>"(?:[^"]|"")*") |
    (?P<squote>'(?:[^']|'')*') |
    (?P<dollar_quoted_string>\$(?P<dollar_quote_tag_inner>\w*)?\$[\s\S]*?\$(?P=dollar_quote_tag_inner)\$) |
    (?P<line_comment>--[^\r\n]*) |
    (?P<block_comment>/\*(?:[^*]|\*(?!/))*\*/) |
    (?P<pg_q_operator>\?\?|\?\||\?&) |
    (?P<qmark>\?)
    """,
    re.VERBOSE | re.MULTILINE | re.DOTALL,
)


@mypyc_attr(allow_interpreted_subclasses=False)
class SlotNormalizer:
    """Rewrites positional markers into canonical slot names for one surface."""

    __slots__ = ("_highlight", "_surface")

    def __init__(self, surface: Surface, highlight: bool = True) -> None:
        self._surface = surface
        self._highlight = highlight

    @property
    def surface(self) -> Surface:
        return self._surface

    def normalize(self, sql: str) -> tuple[str, int]:
        """Replace each positional marker with its canonical slot.

        Args:
            sql: Statement template.

        Returns:
            Tuple of (rewritten statement, number of slots assigned). A template
            without positional markers is returned unchanged with a count of 0.
        """
        parts: list[str] = []
        last_end = 0
        ordinal = 0

        for match in _QMARK_REGEX.finditer(sql):
            if match.group("qmark") is None:
                continue
            parts.append(sql[last_end : match.start()])
            parts.append(self._marker(ordinal))
            last_end = match.end()
            ordinal += 1

        if ordinal == 0:
            return sql, 0

        parts.append(sql[last_end:])
        return "".join(parts), ordinal

    def _marker(self, ordinal: int) -> str:
        slot = slot_name(ordinal)
        return self._surface.wrap_slot(slot) if self._highlight else slot
