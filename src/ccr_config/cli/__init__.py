"""ccr-config CLI — one-shot installer for the claude-code-router setup.

Entry point: ``ccr-config`` (or ``python -m ccr_config``)

Behavior is driven by environment variables and interactive answers only:
    DASHSCOPE_API_KEY     — skip the API key prompt when set
    LANG / LANGUAGE / LC_ALL — message language (zh or en)
    CCR_CONFIG_LOG_LEVEL  — diagnostic log level on stderr
"""

from __future__ import annotations

import argparse
import sys

from ccr_config import __version__


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ccr-config",
        description="Configure claude-code-router to use Alibaba Cloud DashScope (Qwen)",
        epilog=f"ccr-config {__version__}",
    )
    parser.parse_args()

    from ccr_config.cli.setup import run_setup

    sys.exit(run_setup())


if __name__ == "__main__":
    main()
