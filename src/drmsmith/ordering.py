"""Decide the note order written to the ``# Grouped order`` block.

Two modes are supported:

* ``explicit`` replays the ``Order`` list stored in the drum map, dropping
  references to notes the map does not define.
* ``inferred`` groups entries by the bracketed tag in their name
  (``"Kick In [Kick 1]"`` -> ``"[Kick 1]"``) and orders the groups by
  :data:`~drmsmith.preferred_orders.PREFERRED_ORDERS`.  Groups whose tag
  matches no preference come first so REAPER draws them at the bottom.
  Entries without a tag are left out of the grouped block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .drummap import NoteEntry
from .preferred_orders import PREFERRED_ORDERS

EXPLICIT = "explicit"
INFERRED = "inferred"
MODES = (EXPLICIT, INFERRED)

UNRANKED = -1

_DIGITS = re.compile(r"[0-9]+")


@dataclass
class Group:
    key: str
    order: int
    notes: List[str] = field(default_factory=list)


def extract_tag(name: str) -> Optional[str]:
    """Return the first ``[...]`` span of ``name`` including the brackets.

    The span runs from the first ``[`` to the next ``]`` after it, so
    ``"Tom [Rack] [2]"`` yields ``"[Rack]"``.
    """

    start = name.find("[")
    if start < 0:
        return None
    end = name.find("]", start + 1)
    if end < 0:
        return None
    return name[start:end + 1]


def _first_digits(text: str) -> Optional[str]:
    m = _DIGITS.search(text)
    return m.group(0) if m else None


def token_matches(token: str, key: str) -> bool:
    base = _DIGITS.sub("", token)
    if base.lower() not in key.lower():
        return False
    if base == token:
        return True
    return _first_digits(key) == _first_digits(token)


def preference_rank(key: str, table: Sequence[str] = PREFERRED_ORDERS) -> int:
    """Index of the first token in ``table`` matching ``key``, else ``UNRANKED``."""
    for idx, token in enumerate(table):
        if token_matches(token, key):
            return idx
    return UNRANKED


def group_by_preferred(
    entries: Sequence[NoteEntry], table: Sequence[str] = PREFERRED_ORDERS
) -> List[Group]:
    """Group tagged entries and return the groups in output order.

    Group keys are compared case-sensitively, so ``[Kick]`` and ``[kick]``
    form two groups even though they rank the same.
    """

    groups: Dict[str, Group] = {}
    for entry in entries:
        key = extract_tag(entry.name)
        if key is None:
            continue
        group = groups.get(key)
        if group is None:
            group = Group(key=key, order=preference_rank(key, table))
            groups[key] = group
        group.notes.append(entry.note)
    # UNRANKED is below every table index, so unranked groups lead
    return sorted(groups.values(), key=lambda g: g.order)


def filter_explicit_order(entries: Sequence[NoteEntry], explicit_order: Sequence[str]) -> List[str]:
    known = {e.note for e in entries}
    return [note for note in explicit_order if note in known]


def resolve_order(
    entries: Sequence[NoteEntry],
    explicit_order: Optional[Sequence[str]],
    mode: str,
    table: Sequence[str] = PREFERRED_ORDERS,
) -> List[str]:
    if mode == EXPLICIT:
        return filter_explicit_order(entries, explicit_order or [])
    if mode == INFERRED:
        out: List[str] = []
        for group in group_by_preferred(entries, table):
            out.extend(group.notes)
        return out
    raise ValueError(f"unknown ordering mode {mode!r}; expected one of {', '.join(MODES)}")


__all__ = [
    "EXPLICIT",
    "INFERRED",
    "MODES",
    "UNRANKED",
    "Group",
    "extract_tag",
    "token_matches",
    "preference_rank",
    "group_by_preferred",
    "filter_explicit_order",
    "resolve_order",
]
