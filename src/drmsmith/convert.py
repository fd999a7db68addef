import argparse
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import enable_verbose, ld, le, li, lw
from .drummap import DrumMap, load_drum_map
from .errors import OrderMismatchError
from .ordering import EXPLICIT, INFERRED, MODES, resolve_order

DEFAULT_EXT = ".drm"
OUTPUT_EXT = ".txt"
OUTPUT_SUFFIX = " - output"
ORDER_MARKER = "NO"


@dataclass
class ConvertOptions:
    input_dir: str
    output_dir: str
    mode: str = EXPLICIT
    ext: str = DEFAULT_EXT
    dry_run: bool = False


@dataclass
class ConvertStats:
    converted: int = 0
    failed: int = 0
    dirs_created: int = 0


def default_output_dir(input_dir: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """Sibling of ``input_dir`` named ``<input name><suffix>``."""
    norm = os.path.normpath(os.path.abspath(input_dir))
    return os.path.join(os.path.dirname(norm), os.path.basename(norm) + suffix)


def render_text(drum_map: DrumMap, order: Sequence[str]) -> str:
    names = "\n".join(f"{e.note} {e.name}" for e in drum_map.entries)
    grouped = "\n".join(f"{ORDER_MARKER} {note}" for note in order)
    return f"# {drum_map.header or ''}\n{names}\n# Grouped order\n{grouped}\n"


def convert_drum_map(drum_map: DrumMap, mode: str) -> str:
    order = resolve_order(drum_map.entries, drum_map.explicit_order, mode)
    if mode == EXPLICIT and len(order) != len(drum_map.entries):
        raise OrderMismatchError(len(order), len(drum_map.entries))
    return render_text(drum_map, order)


def convert_file(src: str, dst: str, mode: str) -> None:
    text = convert_drum_map(load_drum_map(src), mode)
    with open(dst, "w", encoding="utf-8") as f:
        f.write(text)


def ensure_output_dir(path: str, stats: ConvertStats, dry_run: bool = False) -> None:
    if os.path.isdir(path):
        ld(f"output dir found at \"{path}\"")
        return
    lw(f"creating output directory \"{path}\"")
    stats.dirs_created += 1
    if not dry_run:
        os.makedirs(path, exist_ok=True)


def scan_for_drum_maps(
    input_dir: str,
    output_dir: str,
    opts: ConvertOptions,
    stats: Optional[ConvertStats] = None,
) -> ConvertStats:
    """Convert every drum map under ``input_dir`` into ``output_dir``, depth first.

    A failure on one file is logged and counted; the walk carries on.
    """

    if stats is None:
        stats = ConvertStats()
    ensure_output_dir(output_dir, stats, opts.dry_run)
    skip = os.path.abspath(opts.output_dir)
    for fn in sorted(os.listdir(input_dir)):
        path = os.path.join(input_dir, fn)
        if os.path.isdir(path):
            if os.path.abspath(path) == skip:
                continue
            scan_for_drum_maps(path, os.path.join(output_dir, fn), opts, stats)
            continue
        base, ext = os.path.splitext(fn)
        if ext != opts.ext:
            continue
        out_path = os.path.join(output_dir, base + OUTPUT_EXT)
        ld(f"Converting \"{path}\" to \"{out_path}\"")
        if opts.dry_run:
            stats.converted += 1
            continue
        try:
            convert_file(path, out_path, opts.mode)
            stats.converted += 1
        except Exception as e:
            le(f"{path}: {type(e).__name__}: {e}")
            stats.failed += 1
    return stats


def resolve_mode(args: argparse.Namespace) -> str:
    if args.mode:
        return args.mode
    return INFERRED if args.preferred_grouping else EXPLICIT


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Convert .drm drum maps into REAPER piano roll note name files."
    )
    p.add_argument("input_dir", help="Directory searched recursively for drum maps.")
    p.add_argument(
        "preferred_grouping",
        nargs="?",
        default=None,
        help="Any non-empty value groups notes by name tag instead of the map's own order.",
    )
    p.add_argument("--mode", choices=MODES, default=None, help="Ordering mode (overrides preferred_grouping).")
    p.add_argument("--output-dir", type=str, default=None, help="Output root (default: '<input_dir> - output' beside it).")
    p.add_argument("--suffix", type=str, default=OUTPUT_SUFFIX, help="Suffix for the derived output root.")
    p.add_argument("--ext", type=str, default=DEFAULT_EXT, help="Source file extension.")
    p.add_argument("--dry-run", action="store_true", help="List conversions without writing anything.")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        enable_verbose()

    input_dir = args.input_dir
    if not os.path.isdir(input_dir):
        le(f"Input directory not found: {input_dir}")
        sys.exit(1)

    opts = ConvertOptions(
        input_dir=input_dir,
        output_dir=args.output_dir or default_output_dir(input_dir, args.suffix),
        mode=resolve_mode(args),
        ext=args.ext,
        dry_run=bool(args.dry_run),
    )
    li(f"Input dir: {opts.input_dir}")
    li(f"Output dir: {opts.output_dir}")
    li(f"Ordering mode: {opts.mode}")

    start_t = time.monotonic()
    stats = scan_for_drum_maps(opts.input_dir, opts.output_dir, opts)
    li(
        "Run complete. "
        f"converted={stats.converted} "
        f"failed={stats.failed} "
        f"elapsed={time.monotonic() - start_t:.1f}s"
    )
    if opts.dry_run:
        li("Dry run complete. No files written.")
    return 0


__all__ = [
    "ConvertOptions",
    "ConvertStats",
    "default_output_dir",
    "render_text",
    "convert_drum_map",
    "convert_file",
    "scan_for_drum_maps",
    "build_parser",
    "main",
]
