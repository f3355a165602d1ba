#!/usr/bin/env python3
"""
CLI entrypoint for adding unlit material variants to a .gltf file.

Workflow:
1) Load settings from config/unlit.yml (CLI flags take precedence).
2) Run the external unlit texture generator on the input glTF.
3) Save the patched glTF to <output_dir>/<input filename>.

Usage:
    gltf-unlit scene.gltf --output_dir out/
    gltf-unlit scene.gltf --output_dir out/ --lighten 0.3 --summary
"""

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from .config_utils import CONFIG_PATH, check_lighten, load_config
from .generator import UnlitTextureGenerator
from .gltf_io import load_document
from .inspect_gltf import summarize
from .pipeline import generate_unlit_variants


def setup_logging(logfile: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Configure logging to console and optional file.

    Args:
        logfile: Optional path to save logs.
        verbose: Whether to emit info-level logs (True) or only warnings (False).

    Returns:
        Configured logger instance.
    """
    level = logging.INFO if verbose else logging.WARNING
    fmt = "[%(asctime)s] [%(levelname)s] %(message)s"

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile))

    logging.basicConfig(level=level, format=fmt, handlers=handlers)
    logger = logging.getLogger(__name__)
    return logger


def _lighten_arg(value: str) -> float:
    try:
        return check_lighten(float(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate unlit textures for a .gltf file and add MOZ_alt_materials variants."
    )

    parser.add_argument("input", type=Path,
                        help="Input .gltf file")
    parser.add_argument("-o", "--output_dir", required=True, type=Path,
                        help="Directory for generated textures and the patched .gltf")
    parser.add_argument("-l", "--lighten", type=_lighten_arg, default=None,
                        help="Lighten scalar (0.0-1.0) passed to the generator")

    parser.add_argument("--generator", default=None,
                        help="Generator binary (default: from config, else gltf_unlit_generator)")
    parser.add_argument("--config", type=Path, default=CONFIG_PATH,
                        help="YAML config file (default: config/unlit.yml)")
    parser.add_argument("--dedupe_extensions", action="store_true",
                        help="Do not append extension names already in extensionsUsed")
    parser.add_argument("--indent", type=int, default=None,
                        help="Indent the written JSON (default: compact)")
    parser.add_argument("--summary", action="store_true",
                        help="Print the unlit material links of the written file")

    parser.add_argument("--log", type=Path, default=None,
                        help="Optional log file")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log warnings and errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run unlit generation for the input file.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log, verbose=not args.quiet)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid config {args.config}: {e}")
        return 1

    binary = args.generator or config.generator_binary
    lighten = args.lighten if args.lighten is not None else config.lighten
    indent = args.indent if args.indent is not None else config.indent
    dedupe = args.dedupe_extensions or config.dedupe_extensions

    logger.info("---------------------------------------------------")
    logger.info("           glTF Unlit Variant Generation           ")
    logger.info("---------------------------------------------------")
    logger.info(f"Input glTF:        {args.input}")
    logger.info(f"Output directory:  {args.output_dir}")
    logger.info(f"Generator:         {binary}")
    logger.info(f"Lighten:           {lighten}")
    logger.info(f"Dedupe extensions: {dedupe}")
    logger.info("---------------------------------------------------")

    generator = UnlitTextureGenerator(binary)
    if not generator.is_available():
        logger.warning(f"Generator '{binary}' was not found on PATH")

    try:
        out_path = generate_unlit_variants(
            args.input,
            args.output_dir,
            generator,
            lighten=lighten,
            dedupe_extensions=dedupe,
            indent=indent,
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except subprocess.CalledProcessError as e:
        logger.error(f"Generator command failed with exit code {e.returncode}")
        return 1
    except ValueError as e:
        logger.error(f"Could not patch {args.input}: {e}")
        return 1

    if out_path is not None and args.summary:
        print(summarize(load_document(out_path)))

    logger.info("---------------------------------------------------")
    logger.info("           Unlit variant generation done.          ")
    logger.info("---------------------------------------------------")
    return 0


if __name__ == "__main__":
    sys.exit(main())
