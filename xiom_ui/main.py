#!/usr/bin/env python3
"""xiom-ui: add UI components to your project.

Usage:
  xiom-ui init [-y]
  xiom-ui add button card
  xiom-ui add --all --yes
  REGISTRY_URL=http://localhost:3000/api/registry xiom-ui add dialog
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from xiom_ui.adapters import console
from xiom_ui.models.project_config import Style
from xiom_ui.services import settings
from xiom_ui.services.add_service import AddOptions, add_components
from xiom_ui.services.init_service import InitAnswers, InitError, init_project
from xiom_ui.services.project_config_service import ProjectConfigError
from xiom_ui.services.registry_client import RegistryError

log = logging.getLogger(__name__)


def _ask_init_answers() -> InitAnswers:
    return InitAnswers(
        components_dir=console.ask_text(
            "Where would you like to install components?", settings.DEFAULT_COMPONENTS_DIR
        ),
        utils_path=console.ask_text(
            "Where is your utils file? (we'll create cn helper)", settings.DEFAULT_UTILS_PATH
        ),
        style=Style(
            console.ask_select(
                "Which style would you like to use?",
                [("Default", Style.DEFAULT.value), ("New York", Style.NEW_YORK.value)],
            )
        ),
        tailwind_css=console.ask_text("Where is your global CSS file?", settings.DEFAULT_TAILWIND_CSS),
    )


def cmd_init(args: argparse.Namespace) -> int:
    print("Welcome to xiom-ui!")
    answers = InitAnswers() if args.yes else _ask_init_answers()
    print("Initializing project...")
    try:
        _config, result = init_project(answers, cwd=args.cwd)
    except InitError as e:
        print(str(e))
        return 1
    if not result.ok:
        print(f"Failed to install dependencies: {result.detail}")
    print("Project initialized successfully!")
    print("Next steps:")
    print("  xiom-ui add button")
    print("  xiom-ui add card input")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    options = AddOptions(yes=args.yes, overwrite=args.overwrite, all=args.all)
    try:
        add_components(
            args.components,
            options,
            cwd=args.cwd,
            confirm=console.confirm_overwrite,
            select=console.ask_components,
        )
    except ProjectConfigError as e:
        print(str(e))
        return 1
    except RegistryError as e:
        print(f"Could not load the component registry: {e}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="xiom-ui", description="Add beautiful UI components to your project")
    ap.add_argument("--version", action="version", version=settings.VERSION)
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Project directory (default: current directory)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="Initialize your project and install dependencies")
    p_init.add_argument("-y", "--yes", action="store_true", help="Accept defaults without prompting")
    p_init.set_defaults(func=cmd_init)

    p_add = sub.add_parser("add", help="Add components to your project")
    p_add.add_argument("components", nargs="*", help="Components to add")
    p_add.add_argument("-y", "--yes", action="store_true", help="Skip confirmation prompt")
    p_add.add_argument("-o", "--overwrite", action="store_true", help="Overwrite existing files")
    p_add.add_argument("-a", "--all", action="store_true", help="Add all available components")
    p_add.set_defaults(func=cmd_add)
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s %(message)s",
    )
    load_dotenv((args.cwd or Path.cwd()) / ".env")
    log.debug("registry: %s", settings.registry_url())
    return args.func(args)


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
