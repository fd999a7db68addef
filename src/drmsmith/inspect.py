from typing import Optional
import argparse

from . import enable_verbose, le, li
from .drummap import load_drum_map
from .ordering import UNRANKED, extract_tag, group_by_preferred
from .preferred_orders import PREFERRED_ORDERS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Summarize a drum map and its inferred tag groups.")
    p.add_argument("path", type=str, help="Path to a .drm file")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        enable_verbose()
    try:
        drum_map = load_drum_map(args.path)
    except Exception as e:
        le(f"Could not read {args.path}: {e}")
        return 1

    li(f"Drum map: {args.path}")
    li(f"Header: {drum_map.header or '-'}")
    li(f"Entries: {len(drum_map.entries)} explicit order: {len(drum_map.explicit_order)}")

    groups = group_by_preferred(drum_map.entries)
    li(f"Groups: {len(groups)}")
    for g in groups:
        token = PREFERRED_ORDERS[g.order] if g.order != UNRANKED else "unranked"
        li(f"  {g.order:3d} {g.key} ({token}): {' '.join(g.notes)}")

    untagged = [e for e in drum_map.entries if extract_tag(e.name) is None]
    if untagged:
        li(f"Untagged (left out of grouped order): {len(untagged)}")
        for e in untagged:
            li(f"  {e.note} {e.name}")
    return 0


__all__ = ["main"]
