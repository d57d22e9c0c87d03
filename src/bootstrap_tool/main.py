"""CLI entrypoint for bootstrap-tool."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bootstrap_tool import __version__
from bootstrap_tool.config import BootstrapSettings, RunOptions
from bootstrap_tool.errors import BootstrapError
from bootstrap_tool.logging import configure_logging
from bootstrap_tool.pipeline import run_bootstrap
from bootstrap_tool.report import Reporter
from bootstrap_tool.runner import SubprocessRunner

logger = logging.getLogger(__name__)

PROGRAM_VERSION = f"bootstrap-tool {__version__}"


class _VersionOrOverrideAction(argparse.Action):
    """`--version` alone prints the program version; `--version X` overrides the manifest."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if values is None:
            sys.stdout.write(PROGRAM_VERSION + "\n")
            parser.exit()
        setattr(namespace, self.dest, values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootstrap-tool",
        description="Bootstrap a node project",
    )
    parser.add_argument("-V", action="version", version=PROGRAM_VERSION)

    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Target directory (default: current directory)",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=None,
        help="Package name (defaults to directory name)",
    )
    parser.add_argument(
        "--version",
        dest="package_version",
        nargs="?",
        default=None,
        action=_VersionOrOverrideAction,
        metavar="VERSION",
        help="Package version (defaults to 1.0.0); without a value, print the program version",
    )
    parser.add_argument(
        "-v",
        "--package-version",
        dest="package_version",
        default=None,
        metavar="VERSION",
        help="Same as --version VERSION",
    )
    parser.add_argument(
        "--packages",
        nargs="+",
        action="extend",
        default=[],
        metavar="PACKAGE",
        help="Packages to install, space or comma separated, e.g. 'left-pad,lodash@4'",
    )
    parser.add_argument(
        "--type",
        dest="module_type",
        default="module",
        metavar="MODULE_SYSTEM",
        help="module or commonjs (default: module)",
    )
    parser.add_argument("--no-editorconfig", action="store_true", help="Skip the editorconfig preset")
    parser.add_argument("--no-eslint", action="store_true", help="Skip the eslint preset")
    parser.add_argument("--no-readme", action="store_true", help="Do not write README.md")
    parser.add_argument("--no-git", action="store_true", help="Do not initialize a git repository")
    parser.add_argument("--no-gitignore", action="store_true", help="Do not generate .gitignore")
    parser.add_argument("--no-prettier", action="store_true", help="Skip the prettier preset")

    return parser


def options_from_args(args: argparse.Namespace) -> RunOptions:
    return RunOptions(
        directory=Path(args.directory),
        name=args.name,
        version=args.package_version,
        module_type=args.module_type,
        packages=args.packages,
        editorconfig=not args.no_editorconfig,
        eslint=not args.no_eslint,
        readme=not args.no_readme,
        git=not args.no_git,
        gitignore=not args.no_gitignore,
        prettier=not args.no_prettier,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    reporter = Reporter()

    try:
        settings = BootstrapSettings()
        options = options_from_args(args)
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        reporter.error("Configuration error (check your options and .env):")
        reporter.error(str(e))
        return 1

    configure_logging(settings.log_level)

    try:
        outcome = run_bootstrap(
            options,
            settings=settings,
            runner=SubprocessRunner(console=reporter.console),
            reporter=reporter,
        )
        logger.info(
            "Bootstrap finished",
            extra={"directory": outcome.directory, "steps": outcome.completed_steps},
        )
        return 0

    except BootstrapError as e:
        logger.error(str(e), extra={"error_type": type(e).__name__})
        reporter.error(str(e))
        return 1

    except Exception as e:
        logger.exception("Bootstrap failed")
        reporter.error(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
