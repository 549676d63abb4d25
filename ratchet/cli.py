"""Command-line interface for ratchet."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from jinja2 import TemplateError

from .io_utils import load_data, warn, write_text
from .models import RenderSettings, load_settings
from .renderer import Renderer


def _load_template(path: Path) -> str:
    if not path.exists():
        raise SystemExit(f"Template not found: {path}")
    return path.read_text(encoding="utf-8")


def _load_data(path: Optional[str]) -> Any:
    if path is None:
        return {}
    try:
        return load_data(Path(path))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid data file {path}: {exc}") from exc


def _settings(args: argparse.Namespace) -> RenderSettings:
    settings = load_settings(Path(args.config)) if args.config else RenderSettings()
    if args.marker:
        settings = settings.model_copy(update={"marker": args.marker})
    return settings


def _emit(output: str, out: Optional[str]) -> None:
    if out is None:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
        return
    path = write_text(Path(out), output)
    print(f"Wrote {len(output)} characters to {path}.")


def _handle_render(args: argparse.Namespace) -> None:
    template_path = Path(args.template)
    template = _load_template(template_path)
    data = _load_data(args.data)
    settings = _settings(args)
    if args.command == "transform":
        settings = settings.model_copy(update={"evaluate": False})

    try:
        output = Renderer(settings).render(template, data)
    except TemplateError as exc:
        warn(f"{template_path}: {exc}")
        raise SystemExit(1) from exc

    _emit(output, args.out)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("template", help="Path to the HTML template.")
    parser.add_argument(
        "--data",
        help="JSON or YAML file with the data to bind (defaults to an empty mapping).",
    )
    parser.add_argument(
        "--config",
        help="YAML file with render settings.",
    )
    parser.add_argument(
        "--marker",
        help="Override the attribute that names bound data properties.",
    )
    parser.add_argument(
        "--out",
        help="Write output to this file instead of stdout.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratchet",
        description="Transform plain HTML templates with data.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log binding decisions to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a template with data.",
        description="Bind data to the template and evaluate embedded expressions.",
    )
    _add_common_arguments(render_parser)
    render_parser.set_defaults(func=_handle_render)

    transform_parser = subparsers.add_parser(
        "transform",
        help="Bind data without evaluating expressions.",
        description="Bind data to the template and print the resulting markup as-is.",
    )
    _add_common_arguments(transform_parser)
    transform_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
