"""
Dump a class from the command line.

Usage:
    python -m reflectdump methods pkg.mod:Class [--returns int]
    python -m reflectdump fields pkg.mod:Class [--type str]
    python -m reflectdump stack
"""

from __future__ import annotations

import argparse
import builtins
import importlib
import sys
from typing import Any

from .introspection import capture_stack, get_introspector
from .observability.logging import configure_logging, get_logger
from .settings import get_settings

log = get_logger("cli")


def resolve_target(spec: str) -> Any:
    """Resolve `pkg.mod:Attr.Nested` to the named object."""
    module_name, _, attr_path = spec.partition(":")
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split(".") if attr_path else []:
        obj = getattr(obj, part)
    return obj


def resolve_type(name: str) -> Any:
    """Resolve a type name as rendered in dump lines (`int`, `None`, `numbers.Number`)."""
    if name == "None":
        return type(None)
    if "." not in name:
        return getattr(builtins, name)
    module_name, _, attr = name.rpartition(".")
    return getattr(importlib.import_module(module_name), attr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="reflectdump", description="Dump declared fields/methods or the current stack")
    sub = parser.add_subparsers(dest="command", required=True)

    p_methods = sub.add_parser("methods", help="Dump methods declared on a class")
    p_methods.add_argument("target", help="pkg.module:Class")
    p_methods.add_argument("--returns", type=str, help="Only methods with this return type name")

    p_fields = sub.add_parser("fields", help="Dump fields of a default-constructed instance")
    p_fields.add_argument("target", help="pkg.module:Class")
    p_fields.add_argument("--type", dest="type_name", type=str, help="Only fields with this type name")

    sub.add_parser("stack", help="Dump the stack of this call")

    args = parser.parse_args(argv)

    settings = get_settings()
    # Dumps go to stdout; keep log records off that stream.
    configure_logging(level=settings.log_level, json=settings.log_json, stream=sys.stderr)
    introspector = get_introspector()

    if args.command == "stack":
        introspector.write_stack_trace(capture_stack(), sys.stdout)
        return 0

    try:
        target = resolve_target(args.target)
        type_filter = None
        filter_name = args.returns if args.command == "methods" else args.type_name
        if filter_name:
            type_filter = resolve_type(filter_name)
    except (ImportError, AttributeError) as e:
        log.warning("target_not_resolved", target=args.target, error=str(e))
        print(f"reflectdump: cannot resolve {e}", file=sys.stderr)
        return 2

    if not isinstance(target, type):
        print(f"reflectdump: {args.target} is not a class", file=sys.stderr)
        return 2

    if args.command == "methods":
        introspector.write_methods(target, sys.stdout, type_filter)
    else:
        introspector.write_fields(target(), sys.stdout, type_filter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
