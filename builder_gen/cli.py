"""
Command-line interface for builder generation.

Reads a JSON class description, applies the builder pattern and prints
(or writes) the transformed class.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import (
    ConfigError,
    GenerationResult,
    __version__,
    apply_to_model,
    generate_builder,
    load_config,
)
from .core.config import get_config_manager
from .languages.java.types import get_type_renderer
from .logging_config import get_logger, setup_logging
from .utils import DescriptorLoadError, load_class_description, parse_class_model

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="builder-gen",
        description="Generate the classic immutable Builder pattern for a Java class",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  builder-gen point.json
  builder-gen point.json --output Point.java
  builder-gen point.json --fragments --indent-size 2
  builder-gen --stdin < point.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="JSON class description")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the class description from stdin"
    )

    parser.add_argument("--output", "-o", help="Write the transformed class to FILE")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Also save the effective configuration to FILE (JSON)",
    )
    parser.add_argument(
        "--fragments",
        action="store_true",
        help="Only print the generated members, leave the class untouched",
    )

    style_group = parser.add_argument_group("generation options")
    style_group.add_argument(
        "--conflict-policy",
        choices=["replace", "keep", "fail"],
        help="What to do with existing methods that a generated method would duplicate",
    )
    style_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )
    style_group.add_argument(
        "--tabs", action="store_true", help="Indent with tabs instead of spaces"
    )
    style_group.add_argument(
        "--signatures",
        action="store_true",
        help="Field types are JVM type signatures (e.g. 'I', 'QString;')",
    )
    style_group.add_argument(
        "--no-advisories",
        action="store_true",
        help="Don't warn about non-final or static fields",
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _build_overrides(args: argparse.Namespace) -> dict:
    """Collect configuration overrides given on the command line."""
    overrides = {}

    if args.conflict_policy:
        overrides["conflict_policy"] = args.conflict_policy
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.tabs:
        overrides["use_tabs"] = True
    if args.signatures:
        overrides["type_rendering"] = "signature"
    if args.no_advisories:
        overrides["final_advisory"] = False

    return overrides


def _print_warnings(result: GenerationResult):
    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {warning}[/yellow]")


def _print_metadata(result: GenerationResult):
    table = Table(title="📋 Generation Metadata", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Key", style="bold green", no_wrap=True)
    table.add_column("Value")

    for key, value in result.metadata.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "[dim]none[/dim]"
        table.add_row(key, str(value))

    console.print(table)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.fragments and args.output:
        parser.error("--fragments cannot be combined with --output")
    setup_logging(args.log_level)

    try:
        config = load_config(
            custom_config=_build_overrides(args), config_file=args.config
        )
        if args.save_config:
            get_config_manager().save_config(config, args.save_config)
            console.print(f"[green]✓[/green] Saved configuration to {args.save_config}")
        data = load_class_description("-" if args.stdin else args.file)
        output_path = Path(args.output) if args.output else None
        model = parse_class_model(
            data,
            indent=config.indent,
            path=output_path,
            type_renderer=get_type_renderer(config.type_rendering),
        )
    except (ConfigError, DescriptorLoadError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    if args.fragments:
        result = generate_builder(model.describe(), config)
    else:
        result = apply_to_model(model, config)

    if not result.success:
        console.print(f"[red]✗ Error:[/red] {result.error_message}")
        return 1

    _print_warnings(result)

    if output_path:
        console.print(f"[green]✓[/green] Wrote {model.class_name} to {output_path}")
    else:
        console.print(
            Panel(
                Syntax(result.code, "java", theme="ansi_dark", word_wrap=True),
                title=f"☕ {model.class_name}",
                border_style="green",
            )
        )

    if args.verbose:
        _print_metadata(result)

    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())
