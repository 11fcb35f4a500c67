#!/usr/bin/env python3
"""htmldeps_cli - CLI for rendering and staging HTML dependencies.

Usage:
    python scripts/htmldeps_cli.py render --in <deps.json> [--out <head.html>] [--src-type href,file] [--self-contained]
    python scripts/htmldeps_cli.py stage  --in <deps.json> [--out-dir <dir>] [--relative-to <base>] [--lenient] [--out <deps.staged.json>]

Subcommands:
    render   Render the <head> markup for every dependency in the manifest.
             Writes to --out, or stdout when --out is omitted.
    stage    Copy disk-based dependencies into --out-dir (default: the
             HTMLDEPS_OUTPUT_DIR env var), optionally make their paths relative
             to --relative-to, and write the updated manifest.

Exit codes:
    0  - success
    1  - manifest, resolution or staging error
    2  - invalid usage or missing input file
"""
import argparse
import json
import sys
from pathlib import Path

import jsonschema
import pydantic

# Ensure project root is on sys.path so htmldeps/* is importable when the
# script is invoked from a checkout without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from htmldeps.config import (  # noqa: E402
    log_level_from_env,
    output_dir_from_env,
    parse_src_type,
    src_type_from_env,
)
from htmldeps.encoding import identity_encode  # noqa: E402
from htmldeps.errors import DependencyError  # noqa: E402
from htmldeps.models.manifest import dependencies_to_manifest, parse_manifest  # noqa: E402
from htmldeps.render.data_uri import data_uri_filter  # noqa: E402
from htmldeps.render.renderer import DependencyRenderer  # noqa: E402
from htmldeps.staging.copy import copy_dependency_to_dir  # noqa: E402
from htmldeps.staging.relative import make_dependency_relative  # noqa: E402
from htmldeps.utils.logging import configure_logging  # noqa: E402

_USAGE = """\
Usage:
  python scripts/htmldeps_cli.py render --in <path> [--out <path>] [--src-type href,file] [--self-contained]
  python scripts/htmldeps_cli.py stage  --in <path> [--out-dir <dir>] [--relative-to <dir>] [--lenient] [--out <path>]
"""


def _error(message: str) -> None:
    if not message.startswith("ERROR:"):
        message = f"ERROR: {message}"
    print(message, file=sys.stderr)


def _parse(parser: argparse.ArgumentParser, argv: list[str]):
    try:
        return parser.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code) if exc.code is not None else 2


def _load_dependencies(input_path: Path):
    """Load, schema-validate and build the dependencies listed in *input_path*.

    Returns the dependency list, or an exit code on failure.
    """
    if not input_path.exists():
        _error(f"input file not found: {input_path}")
        return 2

    try:
        data = json.loads(input_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        _error(f"failed to load {input_path}: {exc}")
        return 1

    try:
        return parse_manifest(data).to_dependencies()
    except jsonschema.ValidationError as exc:
        _error(f"manifest does not conform to HtmlDependencyManifest.v1.json: {exc.message}")
        return 1
    except (DependencyError, pydantic.ValidationError) as exc:
        _error(str(exc))
        return 1


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

def cmd_render(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(prog="htmldeps render", add_help=True)
    parser.add_argument("--in", dest="input", required=True, metavar="PATH",
                        help="Input HtmlDependencyManifest JSON")
    parser.add_argument("--out", dest="output", metavar="PATH",
                        help="Write markup here instead of stdout")
    parser.add_argument("--src-type", dest="src_type", metavar="KINDS",
                        help="Comma separated source preference, e.g. 'file,href' "
                             "(default: HTMLDEPS_SRC_TYPE, then 'href,file')")
    parser.add_argument("--self-contained", action="store_true",
                        help="Inline every asset as a data: URI (file sources only)")

    args = _parse(parser, argv)
    if isinstance(args, int):
        return args

    deps = _load_dependencies(Path(args.input))
    if isinstance(deps, int):
        return deps

    src_type = parse_src_type(args.src_type) if args.src_type else src_type_from_env()
    try:
        if args.self_contained:
            renderer = DependencyRenderer(
                src_type=["file"],
                encode_func=identity_encode,
                href_filter=data_uri_filter,
            )
        else:
            renderer = DependencyRenderer(src_type=src_type)
        markup = renderer.render(deps)
    except (DependencyError, OSError) as exc:
        _error(str(exc))
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markup + "\n", encoding="utf-8")
    else:
        print(markup)
    return 0


# ---------------------------------------------------------------------------
# stage
# ---------------------------------------------------------------------------

def cmd_stage(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(prog="htmldeps stage", add_help=True)
    parser.add_argument("--in", dest="input", required=True, metavar="PATH",
                        help="Input HtmlDependencyManifest JSON")
    parser.add_argument("--out-dir", dest="out_dir", metavar="DIR",
                        help="Staging directory (default: HTMLDEPS_OUTPUT_DIR)")
    parser.add_argument("--relative-to", dest="relative_to", metavar="DIR",
                        help="Rewrite staged paths relative to this directory")
    parser.add_argument("--lenient", action="store_true",
                        help="Pass URL-only dependencies through instead of failing")
    parser.add_argument("--out", dest="output", metavar="PATH",
                        help="Write the staged manifest here instead of stdout")

    args = _parse(parser, argv)
    if isinstance(args, int):
        return args

    out_dir = args.out_dir or output_dir_from_env()
    if not out_dir:
        _error("no staging directory; pass --out-dir or set HTMLDEPS_OUTPUT_DIR")
        return 2

    deps = _load_dependencies(Path(args.input))
    if isinstance(deps, int):
        return deps

    must_work = not args.lenient
    staged = []
    try:
        for dep in deps:
            dep = copy_dependency_to_dir(dep, out_dir, must_work=must_work)
            if args.relative_to:
                dep = make_dependency_relative(dep, args.relative_to, must_work=must_work)
            staged.append(dep)
    except (DependencyError, OSError) as exc:
        _error(str(exc))
        return 1

    text = json.dumps(dependencies_to_manifest(staged), indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 0


# ---------------------------------------------------------------------------
# entry point
# ---------------------------------------------------------------------------

def main() -> None:
    if len(sys.argv) < 2:
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    configure_logging(log_level_from_env())
    subcmd, rest = sys.argv[1], sys.argv[2:]

    if subcmd == "render":
        sys.exit(cmd_render(rest))
    elif subcmd == "stage":
        sys.exit(cmd_stage(rest))
    else:
        print(f"Unknown subcommand: {subcmd!r}\n{_USAGE}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
