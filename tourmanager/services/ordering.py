"""Ordering protocol for manually ranked collections.

Items in an ordering scope (siblings under one parent, items attached to one
owner, ...) carry a dense integer ``ordering``. A reorder command moves one
item; the server applies it and reports only that item's new value.
:func:`reorder` applies the same rules to a local ``id -> ordering`` map.
"""

from typing import Dict, Mapping, Union

from ..schemas.common import ReorderCommand, ReorderDirection


def parse_command(command: ReorderCommand) -> Union[ReorderDirection, int]:
    """
    Normalize a reorder command.

    Args:
        command: ``up``/``down``/``first``/``last`` (string or enum), an
            integer position, or a string of digits

    Returns:
        The direction, or the explicit target position

    Raises:
        ValueError: If the command is not recognized
    """
    if isinstance(command, ReorderDirection):
        return command
    if isinstance(command, bool):
        raise ValueError(f"Invalid reorder command: {command!r}")
    if isinstance(command, int):
        return command
    if isinstance(command, str):
        try:
            return ReorderDirection(command.lower())
        except ValueError:
            pass
        if command.strip().isdigit():
            return int(command.strip())
    raise ValueError(f"Invalid reorder command: {command!r}")


def wire_value(command: ReorderCommand) -> Union[str, int]:
    """The JSON value sent as ``{"ordering": ...}`` for a command."""
    parsed = parse_command(command)
    return parsed.value if isinstance(parsed, ReorderDirection) else parsed


def reorder(scope: Mapping[str, int], item_id: str, command: ReorderCommand) -> Dict[str, int]:
    """
    Apply a reorder command to one item of a scope.

    ``up``/``down`` swap the item with its predecessor/successor. ``first``,
    ``last`` and explicit positions relocate it and shift every item in
    between by one. Explicit positions are ordering values and are clamped
    to the scope's range. A move past either end is a no-op.

    Args:
        scope: Ordering value of every item in the scope
        item_id: Item to move
        command: Reorder command

    Returns:
        New ``id -> ordering`` map for the whole scope, dense from the
        scope's lowest value

    Raises:
        KeyError: If ``item_id`` is not in the scope
        ValueError: If the command is not recognized
    """
    if item_id not in scope:
        raise KeyError(item_id)

    parsed = parse_command(command)
    ranked = sorted(scope, key=lambda key: (scope[key], key))
    base = scope[ranked[0]]
    last = len(ranked) - 1
    index = ranked.index(item_id)

    if parsed is ReorderDirection.UP:
        target = max(index - 1, 0)
    elif parsed is ReorderDirection.DOWN:
        target = min(index + 1, last)
    elif parsed is ReorderDirection.FIRST:
        target = 0
    elif parsed is ReorderDirection.LAST:
        target = last
    else:
        target = min(max(parsed - base, 0), last)

    if target == index:
        return dict(scope)

    ranked.insert(target, ranked.pop(index))
    return {key: base + position for position, key in enumerate(ranked)}
