"""CLI for depflow."""

import argparse
import json
from pathlib import Path

from .config import code_options_from, layout_config_from, load_config
from .contributors import build_contributor_graph, pull_requests_from_payload
from .graph import build_code_graph
from .layout import layout
from .models import Graph, LayoutConfig
from .sources import DEFAULT_EXTENSIONS, collect_sources
from .visualize import generate_json, generate_summary


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument(
        "--direction",
        choices=["LR", "RL", "TB", "BT"],
        help="Flow direction of the layout (default: LR)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory (default: results)",
    )


def resolve_common_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> tuple[dict, LayoutConfig]:
    """Load the config file and resolve the output directory and layout options."""
    config: dict = {}
    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, ValueError) as e:
            parser.error(f"Cannot load config: {e}")

    if args.output is None:
        args.output = Path(config.get("output", "results"))
    args.output = args.output.resolve()

    try:
        layout_config = layout_config_from(config, direction=args.direction)
    except ValueError as e:
        parser.error(str(e))

    return config, layout_config


def write_outputs(graph: Graph, layout_config: LayoutConfig, output: Path) -> None:
    """Lay out the graph and write graph.json and summary.txt."""
    result = layout(graph, layout_config)
    print(f"Laid out {len(result.nodes)} nodes in {len({n.rank for n in result.nodes})} ranks")
    if result.back_edges:
        print(f"Ignored {len(result.back_edges)} back edges while ranking (cycles)")

    output.mkdir(parents=True, exist_ok=True)
    generate_json(result, output / "graph.json")
    print("Wrote graph.json")
    generate_summary(graph, result, output / "summary.txt")
    print("Wrote summary.txt")
    print(f"\nAll outputs written to {output}/")


def cmd_code(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Run the code subcommand: file dependency graph of a local checkout."""
    config, layout_config = resolve_common_args(args, parser)

    if not args.root.is_dir():
        parser.error(f"{args.root} is not a directory")
    try:
        options = code_options_from(config)
    except ValueError as e:
        parser.error(f"Invalid config: {e}")

    if args.local_only is None:
        args.local_only = bool(options["local_only"])
    if args.max_files is None:
        args.max_files = options["max_files"]
    if args.max_file_size is None:
        args.max_file_size = options["max_file_size"]
    extensions = DEFAULT_EXTENSIONS if options["extensions"] is None else options["extensions"]

    print(f"Scanning {args.root}...")
    records = collect_sources(
        args.root,
        extensions=extensions,
        max_files=args.max_files,
        max_file_size=args.max_file_size,
    )
    print(f"Found {len(records)} source files")

    graph = build_code_graph(records, local_only=args.local_only)
    print(f"Built graph with {len(graph.nodes)} nodes and {len(graph.edges)} edges")

    write_outputs(graph, layout_config, args.output)


def cmd_contributors(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Run the contributors subcommand: reviewer -> author graph from PR history."""
    _, layout_config = resolve_common_args(args, parser)

    try:
        with open(args.pull_requests) as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"Cannot read pull requests from {args.pull_requests}: {e}")

    pull_requests = pull_requests_from_payload(payload)
    if not pull_requests:
        print("No contributor data available for this repository.")
    else:
        print(f"Loaded {len(pull_requests)} pull requests")

    graph = build_contributor_graph(pull_requests)
    print(f"Built graph with {len(graph.nodes)} contributors and {len(graph.edges)} review edges")

    write_outputs(graph, layout_config, args.output)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="depflow",
        description="Build and lay out file dependency and code review graphs",
    )
    subparsers = parser.add_subparsers(dest="command")

    code_parser = subparsers.add_parser(
        "code",
        help="Graph import/include dependencies between files of a checkout",
    )
    code_parser.add_argument("root", type=Path, help="Directory to scan")
    add_common_args(code_parser)
    code_parser.add_argument(
        "--local-only",
        action="store_true",
        default=None,
        help="Only keep relative or path-like imports, dropping bare package names",
    )
    code_parser.add_argument("--max-files", type=int, help="Maximum number of files to scan")
    code_parser.add_argument(
        "--max-file-size",
        type=int,
        metavar="BYTES",
        help="Skip files larger than this many bytes",
    )

    contributors_parser = subparsers.add_parser(
        "contributors",
        help="Graph who reviews whose pull requests",
    )
    contributors_parser.add_argument(
        "pull_requests",
        type=Path,
        help="JSON file with a GraphQL pull request response or a list of pull requests",
    )
    add_common_args(contributors_parser)

    args = parser.parse_args(argv)

    if args.command == "code":
        cmd_code(args, code_parser)
    elif args.command == "contributors":
        cmd_contributors(args, contributors_parser)
    else:
        # No subcommand provided - show help
        parser.print_help()


if __name__ == "__main__":
    main()
