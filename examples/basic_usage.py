#!/usr/bin/env python3
"""Programmatic bootstrap example.

This demonstrates using the bootstrap components directly instead of the CLI:

* load settings from the environment / `.env`
* build `RunOptions` in code
* run the pipeline with the real subprocess runner

Only the steps named on the command line are skipped; everything else runs
with its defaults.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from bootstrap_tool.config import BootstrapSettings, RunOptions
from bootstrap_tool.errors import BootstrapError
from bootstrap_tool.logging import configure_logging
from bootstrap_tool.pipeline import run_bootstrap
from bootstrap_tool.report import Reporter
from bootstrap_tool.runner import SubprocessRunner


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bootstrap a node project (programmatic example).")
    parser.add_argument("directory", help="Directory to create the project in")
    parser.add_argument(
        "--packages",
        default="",
        help='Comma-separated packages, e.g. "left-pad,lodash" (optional)',
    )
    parser.add_argument("--commonjs", action="store_true", help='Use "commonjs" instead of "module"')
    parser.add_argument("--skip-presets", action="store_true", help="Do not run any mrm preset")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = BootstrapSettings()
    configure_logging(settings.log_level)

    options = RunOptions(
        directory=args.directory,
        packages=args.packages,
        module_type="commonjs" if args.commonjs else "module",
        editorconfig=not args.skip_presets,
        prettier=not args.skip_presets,
        eslint=not args.skip_presets,
    )

    reporter = Reporter()
    try:
        outcome = run_bootstrap(
            options,
            settings=settings,
            runner=SubprocessRunner(console=reporter.console),
            reporter=reporter,
        )
    except BootstrapError as exc:
        print(str(exc))
        return 1

    print(f"Steps run: {', '.join(outcome.completed_steps)}")
    print(f"Project directory: {outcome.directory}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
