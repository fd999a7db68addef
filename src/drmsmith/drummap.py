"""Read Cubase-style ``.drm`` drum map documents.

A drum map is an XML document roughly shaped like::

    <DrumMap>
      <string name="Name" value="GM Map" wide="true"/>
      <list name="Map" type="list">
        <item>
          <int name="INote" value="36"/>
          <string name="Name" value="Kick [Kick]" wide="true"/>
        </item>
        ...
      </list>
      <list name="Order" type="int">
        <item value="36"/>
        ...
      </list>
    </DrumMap>

Only the fields needed to build note names are pulled out; everything else in
the document (quantize settings, output ports, ...) is ignored.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class NoteEntry:
    note: str
    name: str


@dataclass
class DrumMap:
    header: Optional[str] = None
    entries: List[NoteEntry] = field(default_factory=list)
    explicit_order: List[str] = field(default_factory=list)


MAP_ITEMS = "list[@name='Map'][@type='list']/item"
ORDER_ITEMS = "list[@name='Order'][@type='int']/item"


def _attr_of(item: ET.Element, path: str) -> str:
    el = item.find(path)
    if el is None:
        return ""
    return el.get("value") or ""


def extract_entries(root: ET.Element) -> List[NoteEntry]:
    entries: List[NoteEntry] = []
    for item in root.findall(MAP_ITEMS):
        name = _attr_of(item, ".//string[@name='Name']")
        note = _attr_of(item, ".//int[@name='INote']")
        if not name or not note:
            continue
        entries.append(NoteEntry(note=note, name=name))
    return entries


def extract_explicit_order(root: ET.Element) -> List[str]:
    order: List[str] = []
    for item in root.findall(ORDER_ITEMS):
        value = item.get("value")
        if value is not None:
            order.append(value)
    return order


def extract_drum_map(root: ET.Element) -> DrumMap:
    """Pull header, note entries and the explicit order out of a parsed document.

    Missing optional fields never raise: an absent header yields ``None`` and
    absent lists yield empty sequences.
    """

    header_el = root.find("string")
    header = header_el.get("value") if header_el is not None else None
    return DrumMap(
        header=header,
        entries=extract_entries(root),
        explicit_order=extract_explicit_order(root),
    )


def parse_drum_map(text: str) -> DrumMap:
    return extract_drum_map(ET.fromstring(text))


def load_drum_map(path: str) -> DrumMap:
    """Parse the drum map at ``path``.

    :class:`xml.etree.ElementTree.ParseError` and :class:`OSError` propagate to
    the caller.
    """

    return extract_drum_map(ET.parse(path).getroot())


__all__ = [
    "NoteEntry",
    "DrumMap",
    "extract_entries",
    "extract_explicit_order",
    "extract_drum_map",
    "parse_drum_map",
    "load_drum_map",
]
