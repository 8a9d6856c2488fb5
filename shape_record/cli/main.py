"""CLI main entry point."""

import argparse
import logging
import sys
from typing import List, Optional
from shape_record.errors import InsufficientParametersError
from shape_record.io.byte_source import FileByteSource
from shape_record.io.record_io import BYTE_ORDERS, TAG_WIDTHS, write_record
from shape_record.pipeline import RecordPipeline
from shape_record.render.manager import RENDER_MODES, RenderManager
from shape_record.shapes.kinds import ShapeKind
from shape_record.shapes.registry import default_registry
from shape_record.utils.config import Config, LOG_LEVELS, load_config
from shape_record.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_config(args) -> Config:
    """Merge the optional config file with command line overrides."""
    config = load_config(args.config) if args.config else Config()

    overrides = {
        'input_path': args.input,
        'tag_width': args.tag_width,
        'byte_order': args.byte_order,
        'render_mode': args.render_mode,
        'output_path': args.output,
        'log_level': args.log_level.upper() if args.log_level else None,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.strict:
        config.short_params_policy = "error"

    config.validate()
    return config


def list_kinds():
    """Print the registered shape kinds."""
    registry = default_registry()
    print("Registered shape kinds:")
    for kind in registry.list_registered():
        print(f"  - {kind.name.lower():<10} tag={int(kind)}  params={kind.required_param_count}")


def write_input(config: Config, kind_name: str, params: List[float]) -> int:
    """Encode a record into the configured input file."""
    try:
        kind = ShapeKind.from_name(kind_name)
        write_record(config.input_path, kind, params,
                     tag_width=config.tag_width, byte_order=config.byte_order)
    except (ValueError, OSError) as exc:
        logger.error("Cannot write record: %s", exc)
        return 1
    print(f"Wrote {kind.name.lower()} record to {config.input_path}")
    return 0


def run(config: Config) -> int:
    """Decode the input record, render it and return the exit status."""
    pipeline = RecordPipeline.from_config(config)

    try:
        with FileByteSource(config.input_path) as source:
            pipeline.try_decode(source)
    except OSError as exc:
        logger.error("Cannot open input %s: %s", config.input_path, exc)

    surface_kwargs = {}
    if config.render_mode == "2d":
        surface_kwargs = {'figsize': config.figsize, 'dpi': config.dpi}
    renderer = RenderManager(mode=config.render_mode, **surface_kwargs)
    try:
        pipeline.render(renderer)
        if config.render_mode == "2d" and pipeline.is_loaded:
            if config.output_path:
                renderer.save(config.output_path)
                print(f"Saved drawing to {config.output_path}")
            else:
                renderer.surface.show()
    except InsufficientParametersError as exc:
        logger.error("Cannot render record: %s", exc)
    finally:
        renderer.close()

    return 0 if pipeline.is_loaded else 1


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Shape Record - decode and render a binary shape record")

    parser.add_argument('input', nargs='?', default=None,
                        help='Record file to read (default: features.dat)')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')

    # Wire format
    parser.add_argument('--tag-width', type=int, default=None, choices=list(TAG_WIDTHS),
                        help='Width of the kind tag in bytes (default: 4)')
    parser.add_argument('--byte-order', type=str, default=None, choices=list(BYTE_ORDERS),
                        help='Byte order of tag and parameters (default: little)')

    # Rendering
    parser.add_argument('--render-mode', type=str, default=None, choices=list(RENDER_MODES),
                        help='Render surface (default: null)')
    parser.add_argument('--output', type=str, default=None,
                        help='Image file to save the drawing to (2d mode)')
    parser.add_argument('--strict', action='store_true',
                        help='Fail rendering when a shape has too few parameters instead of skipping it')

    # Record writing
    parser.add_argument('--write', type=str, default=None, metavar='KIND',
                        choices=[kind.name.lower() for kind in ShapeKind],
                        help='Write a record of this kind to the input file and exit')
    parser.add_argument('--params', type=float, nargs='+', default=None,
                        help='Parameters for --write')

    # Info
    parser.add_argument('--list-kinds', action='store_true',
                        help='List registered shape kinds and exit')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=list(LOG_LEVELS) + [level.lower() for level in LOG_LEVELS],
                        help='Logging level (default: INFO)')

    args = parser.parse_args(argv)

    if args.list_kinds:
        list_kinds()
        return 0

    try:
        config = build_config(args)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    setup_logging(config.log_level)

    if args.write:
        if not args.params:
            parser.error("--write requires --params")
        return write_input(config, args.write, args.params)

    return run(config)


if __name__ == '__main__':
    sys.exit(main())
