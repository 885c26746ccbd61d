#!/usr/bin/env python3
"""Convert a blockstate + block model into Java VoxelShape constants.

Usage:
    python scripts/convert_blockstate.py blockstates/lamp.json models/block/lamp.json
    python scripts/convert_blockstate.py blockstates/lamp.json --assets-root src/main/resources/assets -o LampBB.java
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxelshape.contracts import ConversionConfig, JavaStyle
from voxelshape.emitter import render_java_class
from voxelshape.errors import VoxelShapeError
from voxelshape.loader import assets_resolver, fixed_resolver, load_blockstate, load_model
from voxelshape.pipeline import convert_blockstate
from voxelshape.preview import export_preview

logger = logging.getLogger("convert_blockstate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Approximate block models with merged axis-aligned boxes and emit Java VoxelShapes"
    )
    parser.add_argument("blockstate", help="Path to the blockstate JSON file")
    parser.add_argument(
        "model",
        nargs="?",
        default=None,
        help="Model JSON used for every variant (overrides variant model references)",
    )
    parser.add_argument(
        "--assets-root",
        default=None,
        help="Assets directory used to resolve variant model references (<ns>/models/<path>.json)",
    )
    parser.add_argument("-o", "--output", default=None, help="Target Java file (default: stdout)")
    parser.add_argument(
        "--package", default="com.example.examplemod.block", help="Java package of the generated class"
    )
    parser.add_argument(
        "--class-name",
        default=None,
        help="Generated class name (default: output file stem, else GeneratedBlockBB)",
    )
    parser.add_argument("--indent", type=int, default=4, help="Spaces per indent level")
    parser.add_argument("--tabs", action="store_true", help="Indent with tabs instead of spaces")
    parser.add_argument(
        "--no-merge", action="store_true", help="Emit one box per element without merging"
    )
    parser.add_argument(
        "--preview-stl", default=None, help="Also export an STL preview of the boxes"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logs"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.model is None and args.assets_root is None:
        parser.error("either a MODEL file or --assets-root is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    class_name = args.class_name
    if class_name is None:
        class_name = Path(args.output).stem if args.output else "GeneratedBlockBB"

    config = ConversionConfig(merge=not args.no_merge)
    style = JavaStyle(
        package=args.package,
        class_name=class_name,
        indent_width=max(0, int(args.indent)),
        expand_tab=not args.tabs,
    )

    try:
        blockstate = load_blockstate(args.blockstate)
        if args.model is not None:
            resolver = fixed_resolver(load_model(args.model))
        else:
            resolver = assets_resolver(args.assets_root)
        result = convert_blockstate(blockstate, resolver, config)
    except VoxelShapeError as e:
        logger.error("%s", e)
        return 1

    java = render_java_class(result, style)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(java, encoding="utf-8")
        logger.info("Wrote %s", out_path)
    else:
        sys.stdout.write(java)

    if args.preview_stl:
        try:
            export_preview(result, args.preview_stl)
        except VoxelShapeError as e:
            logger.error("%s", e)
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
