"""Substitution of rendered values into a canonical statement."""

import re
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Optional

from sqltrace.parameters.bindings import iter_bindings
from sqltrace.utils.type_guards import is_slot_key

if TYPE_CHECKING:
    from sqltrace.parameters.renderer import ValueRenderer

__all__ = ("assemble_query",)


def assemble_query(
    sql: str,
    bindings: "dict[Any, Any]",
    renderer: "ValueRenderer",
    decorate: Optional[Callable[[str], str]] = None,
    decorated_slots: Iterable[str] = (),
) -> str:
    """Fill every named slot in ``sql`` with its rendered value.

    Keys are matched longest first, so ``:slot1`` can never be replaced
    inside ``:slot10``. The statement is scanned once: text placed by one
    substitution is never matched again. Keys that do not start with ``:``
    are ignored and slots without a binding stay in the output as written.

    Args:
        sql: Statement with canonical or named slot markers.
        bindings: Normalized bindings keyed by slot name.
        renderer: Renders each bound value.
        decorate: Wraps the text placed at each slot in ``decorated_slots``.
        decorated_slots: Slots whose output, bound or not, is passed to ``decorate``.

    Returns:
        The statement with values filled in.
    """
    rendered = {key: renderer.render_binding(value) for key, value in iter_bindings(bindings) if is_slot_key(key)}
    marked = set(decorated_slots) if decorate is not None else set()
    slots = sorted(set(rendered) | marked, key=len, reverse=True)
    if not slots:
        return sql

    pattern = re.compile("|".join(re.escape(slot) for slot in slots))

    def substitute(match: "re.Match[str]") -> str:
        slot = match.group(0)
        text = rendered.get(slot, slot)
        if decorate is not None and slot in marked:
            return decorate(text)
        return text

    return pattern.sub(substitute, sql)
