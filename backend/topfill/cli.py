"""topfill CLI — batch-generate pattern fills for a folder of top silhouettes.

Usage:
    topfill bars --in-dir jsons --out-dir out --seed 123
    topfill bars --colors 6 --angle 45 --density 1.6 --minify 1
    topfill faces --faces 42 --ascii-only 0
    topfill manifest --in-dir out --out out/manifest.json hoodieTopBars.svg hoodieTopFaces.svg
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from topfill.config import settings
from topfill.engine.config import GenerationConfig
from topfill.engine.generator import generate
from topfill.engine.registry import get_registry
from topfill.engine.rng import Mulberry32
from topfill.manifest import write_manifest
from topfill.svg.path_source import PathDataError, load_path_document

DEFAULT_TOPS = ["hoodieTop", "shirtTop", "tankTop", "turtleTop"]


def finite_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be finite: {value!r}")
    return number


def _flag(value: str) -> bool:
    return str(value) != "0"


def config_from_args(args: argparse.Namespace) -> GenerationConfig:
    return GenerationConfig(
        canvas=args.canvas,
        decimals=args.decimals,
        minify=_flag(args.minify),
        seed=args.seed,
        colors=getattr(args, "colors", None),
        angle=getattr(args, "angle", None),
        density=getattr(args, "density", settings.default_density),
        faces=getattr(args, "faces", settings.default_faces),
        ascii_only=_flag(getattr(args, "ascii_only", "1")),
        fill=getattr(args, "fill", None),
    )


def _describe(pattern_name: str, meta: dict, target: int) -> str:
    if pattern_name == "bars":
        return (
            f"  rects={meta['rect_count']} w=[{meta['w_min']:.2f},{meta['w_max']:.2f}] "
            f"gap<={meta['gap_max']:.2f} chunkProb={meta['chunk_prob']:.2f}\n"
            f"  colors={meta['colors_n']} angle={meta['angle']:.2f} palette={','.join(meta['colors'])}"
        )
    return (
        f"  placed={meta['placed']}/{target} attempts={meta['attempts']} "
        f"symbols={meta['symbols']} fill={meta['fill']}"
    )


def run_batch(pattern_name: str, args: argparse.Namespace) -> int:
    in_dir = Path(args.in_dir)
    out_dir = Path(args.out_dir)
    if not in_dir.is_dir():
        print(f"Input folder not found: {in_dir}")
        return 1
    out_dir.mkdir(parents=True, exist_ok=True)

    config = config_from_args(args)
    suffix = args.suffix if args.suffix is not None else pattern_name.capitalize()
    # One stream for the whole batch: a seeded run reproduces every file
    rng = Mulberry32(config.seed)

    print(
        f"pattern={pattern_name} canvas={config.canvas} decimals={config.decimals} "
        f"minify={int(config.minify)} seed={config.seed if config.seed is not None else 'none'}"
    )
    print(f"reading from: {in_dir}")
    print(f"writing to:   {out_dir}\n")

    written = 0
    for top in args.tops:
        src = in_dir / f"{top}.json"
        if not src.exists():
            print(f"- missing {src.name} (skipping)")
            continue

        try:
            d = load_path_document(src)
            result = generate(pattern_name, d, config, rng=rng, name=top)
        except PathDataError as e:
            print(f"- {top}: unusable path data ({e}), skipping")
            continue

        out_path = out_dir / f"{top}{suffix}.svg"
        out_path.write_text(result.svg, encoding="utf-8")
        written += 1

        print(f"- {top}: wrote {out_path} bytes={result.bytes}")
        print(_describe(pattern_name, result.meta, config.faces) + "\n")

    print(f"done. {written}/{len(args.tops)} written.")
    return 0


def run_manifest(args: argparse.Namespace) -> int:
    try:
        manifest = write_manifest(args.in_dir, args.files, args.out)
    except FileNotFoundError as e:
        print(str(e))
        return 1
    for item in manifest["items"]:
        print(f"ok: {item['name']} bytes={item['bytes']}")
    print(f"wrote: {args.out}")
    return 0


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in-dir", default="jsons", help="Folder of <top>.json path documents")
    parser.add_argument("--out-dir", default="out", help="Output folder for SVGs")
    parser.add_argument("--tops", nargs="+", default=DEFAULT_TOPS, help="Top names to process, in order")
    parser.add_argument("--suffix", default=None, help="Output filename suffix (default: pattern name)")
    parser.add_argument("--canvas", type=int, default=settings.default_canvas)
    parser.add_argument("--decimals", type=int, default=settings.default_decimals)
    parser.add_argument("--minify", default="1" if settings.default_minify else "0", help="0 to keep indentation")
    parser.add_argument("--seed", type=int, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="topfill", description="Seeded pattern fills for top silhouettes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug-level engine logging")
    sub = parser.add_subparsers(dest="command", required=True)

    bars = sub.add_parser("bars", help=get_registry().get("bars").description)
    _add_common(bars)
    bars.add_argument("--colors", type=int, default=None, help="Palette size: 3, 6 or 9")
    bars.add_argument("--angle", type=finite_float, default=None, help="Stripe angle in degrees")
    bars.add_argument("--density", type=finite_float, default=settings.default_density, help="0.6–3.0, higher = thinner bars")

    faces = sub.add_parser("faces", help=get_registry().get("faces").description)
    _add_common(faces)
    faces.add_argument("--faces", type=int, default=settings.default_faces, help="Target glyph count")
    faces.add_argument("--ascii-only", default="1", help="0 enables the full Unicode glyph set")
    faces.add_argument("--fill", default=None, help="Background colour override")

    manifest = sub.add_parser("manifest", help="Hex-encode SVGs into manifest.json")
    manifest.add_argument("--in-dir", default="out_top/optimized_fixed")
    manifest.add_argument("--out", default="out_top/manifest.json")
    manifest.add_argument("files", nargs="+", help="SVG filenames, in index order")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.topfill_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "manifest":
        return run_manifest(args)
    return run_batch(args.command, args)


if __name__ == "__main__":
    sys.exit(main())
