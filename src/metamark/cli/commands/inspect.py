"""Inspect commands for the metamark CLI."""

import importlib
import json
from typing import Any

from ...collectors.registry import get_default_collector_registry
from ...core.config import Config
from ...core.exceptions import TargetImportError, UnknownStrategyError
from ...model.mapping import MarkerMapping, get_mapping_factory
from ...resolution.element import RepeatableMetaMarkedElement

OUTPUT_FORMATS = ("tree", "json")


def add_inspect_arguments(parser) -> None:
    """Add arguments shared by inspect commands.

    Args:
        parser: Subcommand parser to extend.
    """
    parser.add_argument("target", help="Element to inspect, as module:qualname")
    parser.add_argument(
        "-c",
        "--collector",
        help="Repeatable collector (standard, full, none)",
    )
    parser.add_argument(
        "-m",
        "--mapping",
        help="Mapping factory (generic, resolved)",
    )


def load_target(target: str) -> Any:
    """Import the object named by ``module:qualname``.

    A bare module name returns the module itself.

    Raises:
        TargetImportError: If the module or attribute cannot be found.
    """
    module_name, _, qualname = target.partition(":")
    if not module_name:
        raise TargetImportError(target, "missing module name")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetImportError(target, str(e)) from e

    for part in qualname.split(".") if qualname else []:
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetImportError(target, f"no attribute '{part}'") from e
    return obj


def build_element(args, config: Config) -> RepeatableMetaMarkedElement:
    """Resolve the target using command-line overrides over ``config``.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    collector_name = args.collector or config.collector
    mapping_name = args.mapping or config.mapping

    collector = get_default_collector_registry().get(collector_name)
    factory = get_mapping_factory(mapping_name)
    return RepeatableMetaMarkedElement(collector, load_target(args.target), factory)


def handle_inspect(args, config: Config) -> None:
    """Handle inspect command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    output_format = args.format or config.output_format
    if output_format not in OUTPUT_FORMATS:
        raise UnknownStrategyError("output format", output_format, list(OUTPUT_FORMATS))

    element = build_element(args, config)
    mappings = list(element.closure.declared if args.declared else element)

    if output_format == "json":
        print(json.dumps(mappings_to_records(mappings), indent=2))
    else:
        _print_tree(args.target, mappings)


def handle_types(args, config: Config) -> None:
    """Handle types command: print mapping counts per marker type.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    element = build_element(args, config)
    closure = element.closure

    for marker_type, mappings in closure.by_type.items():
        declared = len(closure.declared_by_type.get(marker_type, ()))
        print(f"{marker_type.__qualname__}: {len(mappings)} ({declared} declared)")
    print(f"Total: {len(closure)}")


def mappings_to_records(mappings: list[MarkerMapping]) -> list[dict[str, Any]]:
    """Convert mappings to JSON-serializable records.

    Sources are referenced by their index in ``mappings``; a source that
    is not part of the list is reported as None.
    """
    positions = {id(m): i for i, m in enumerate(mappings)}
    return [
        {
            "index": i,
            "type": mapping.marker_type.__qualname__,
            "marker": repr(mapping.marker),
            "source": (
                positions.get(id(mapping.source))
                if mapping.source is not None
                else None
            ),
            "declared": mapping.is_root,
        }
        for i, mapping in enumerate(mappings)
    ]


def _print_tree(target: str, mappings: list[MarkerMapping]) -> None:
    """Print mappings indented by discovery depth.

    Args:
        target: Target name for the header line.
        mappings: Mappings to print, in discovery order.
    """
    print(target)
    if not mappings:
        print("  (no markers)")
        return

    for mapping in mappings:
        depth = sum(1 for _ in mapping.lineage())
        print(f"{'  ' * depth}{mapping.marker!r}")
