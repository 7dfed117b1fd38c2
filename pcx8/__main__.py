"""
__main__.py – CLI entry-point for the pcx8 package.

Usage:  python -m pcx8 [-v] <command> [options] <files…>

Commands
--------
info     FILE…              Print the header fields of PCX files.
pcx2png  FILE… [-o DIR]     Decode 8-bit PCX files and save them as PNG.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

log = logging.getLogger("pcx8")


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    from pcx8.header import read_header

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            with open(fp, "rb") as f:
                hdr = read_header(f)
        except (ValueError, OSError) as exc:
            print(f"Error reading {fp.name}: {exc}", file=sys.stderr)
            errors += 1
            continue
        if not hdr.looks_valid():
            log.warning("%s: unexpected marker byte %#04x", fp.name, hdr.marker)
        print(f"{fp.name}:")
        print(f"  version        {hdr.version}")
        print(f"  encoding       {hdr.encoding}")
        print(f"  bits/pixel     {hdr.bits_per_pixel_per_plane}")
        print(f"  planes         {hdr.num_planes}")
        print(f"  window         ({hdr.window_xmin}, {hdr.window_ymin})"
              f"-({hdr.window_xmax}, {hdr.window_ymax})")
        print(f"  size           {hdr.width}x{hdr.height}")
        print(f"  bytes/line     {hdr.bytes_per_plane_line}")
        print(f"  dpi            {hdr.horizontal_dpi}x{hdr.vertical_dpi}")
        print(f"  palette info   {hdr.palette_info}")
    return 1 if errors else 0


def cmd_pcx2png(args: argparse.Namespace) -> int:
    """Convert PCX files to PNG."""
    from pcx8.pcx import read_pcx

    outdir = Path(args.outdir) if args.outdir else None
    if outdir:
        outdir.mkdir(parents=True, exist_ok=True)
    errors = 0
    for fp in (Path(f) for f in args.files):
        dest = (outdir or fp.parent) / (fp.stem + ".png")
        log.info("Converting %s → %s", fp.name, dest.name)
        try:
            img = read_pcx(fp, legacy_bounds=args.legacy_bounds)
            img.save(str(dest))
        except (ValueError, OSError) as exc:
            print(f"Error converting {fp.name}: {exc}", file=sys.stderr)
            errors += 1
    return 1 if errors else 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pcx8",
        description="Decoder for 8-bit, 256-colour PCX images.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print progress messages.")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    # info
    p_info = sub.add_parser("info", help="Print PCX header fields.")
    p_info.add_argument("files", nargs="+", metavar="FILE")

    # pcx2png
    p_png = sub.add_parser("pcx2png", help="Convert 8-bit PCX files to PNG.")
    p_png.add_argument("files", nargs="+", metavar="FILE",
                       help=".pcx files to convert.")
    p_png.add_argument("-o", "--outdir", metavar="DIR",
                       help="Output directory (default: same as input).")
    p_png.add_argument("--legacy-bounds", action="store_true", dest="legacy_bounds",
                       help="Derive the image width from the Y window bound, "
                            "like older decoders.")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

_COMMANDS = {
    "info":    cmd_info,
    "pcx2png": cmd_pcx2png,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
