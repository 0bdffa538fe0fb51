"""First-run setup — writes the claude-code-router config and DashScope plugin.

Sequence: detect locale → pick region → source the API key → create
``~/.claude-code-router/`` (and ``plugins/``) → write ``config.json`` →
write the transformer plugin → print a summary.  Any failure prints one
localized line and yields exit status 1; files written before the
failure are left in place.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import structlog
from pydantic import ValidationError

from ccr_config.cli.output import err, header, info, ok, say, warn
from ccr_config.cli.prompts import PromptSession, SessionFactory, prompt_api_key, prompt_region
from ccr_config.config import Settings
from ccr_config.generator import (
    CONFIG_DIRNAME,
    PLUGIN_FILENAME,
    Region,
    build_config,
    build_plugin_source,
)
from ccr_config.i18n import resolve_locale
from ccr_config.logging import setup_logging
from ccr_config.messages import MessageSet, get_messages

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SetupPaths:
    """Filesystem locations the installer writes to."""

    config_dir: Path

    @classmethod
    def for_home(cls, home: Path) -> SetupPaths:
        return cls(config_dir=home / CONFIG_DIRNAME)

    @property
    def plugins_dir(self) -> Path:
        return self.config_dir / "plugins"

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.json"

    @property
    def transformer_file(self) -> Path:
        return self.plugins_dir / PLUGIN_FILENAME


# ---------------------------------------------------------------------------
# Individual steps (OSError propagates)
# ---------------------------------------------------------------------------


def create_directories(paths: SetupPaths, messages: MessageSet) -> None:
    """Create the config and plugins directories if missing."""
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    paths.plugins_dir.mkdir(parents=True, exist_ok=True)
    info(messages.create_dir, paths.config_dir)
    logger.info("directories_created", config_dir=str(paths.config_dir))


def write_config_file(paths: SetupPaths, messages: MessageSet, api_key: str, region: Region) -> None:
    """Write ``config.json``, replacing any previous file."""
    document = build_config(api_key, region, transformer_path=paths.transformer_file)
    paths.config_file.write_text(
        json.dumps(document, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    info(messages.create_config, paths.config_file)
    logger.info("config_written", path=str(paths.config_file), region=region.value, api_key=api_key)


def write_transformer_file(paths: SetupPaths, messages: MessageSet) -> None:
    """Write the DashScope transformer plugin verbatim."""
    paths.transformer_file.write_text(build_plugin_source(), encoding="utf-8")
    info(messages.create_plugin, paths.transformer_file)
    logger.info("plugin_written", path=str(paths.transformer_file))


def _print_summary(paths: SetupPaths, messages: MessageSet, key_from_env: bool) -> None:
    print()
    ok(messages.config_complete)
    say(messages.config_location, paths.config_dir)
    print()
    header(messages.usage_title)
    say(messages.usage_install_claude)
    say(messages.usage_install_router)
    say(messages.usage_key_from_env if key_from_env else messages.usage_key_entered)
    say(messages.usage_run)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def run_setup(
    settings: Settings | None = None,
    *,
    home: Path | None = None,
    session_factory: SessionFactory = PromptSession,
    ask_region: bool = True,
) -> int:
    """Run the installer and return the process exit status (0 or 1)."""
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            # Settings never loaded, so read the locale variables directly
            err(get_messages(resolve_locale(os.environ)).setup_failed, e)
            return 1
    setup_logging(settings.log_level)

    locale = resolve_locale(settings.locale_env)
    messages = get_messages(locale)
    paths = SetupPaths.for_home(home if home is not None else Path.home())
    logger.info("setup_started", locale=locale.value, config_dir=str(paths.config_dir))

    try:
        say(messages.configuring)

        region = prompt_region(messages, session_factory) if ask_region else Region.CN
        if ask_region:
            option = messages.region_option_intl if region is Region.INTL else messages.region_option_cn
            ok(messages.region_selected, option.strip())

        if settings.has_api_key:
            info(messages.env_key_detected)
            api_key = settings.dashscope_api_key.get_secret_value()
        else:
            warn(messages.env_key_missing)
            api_key = prompt_api_key(messages, session_factory)

        create_directories(paths, messages)
        write_config_file(paths, messages, api_key, region)
        write_transformer_file(paths, messages)
    except (Exception, KeyboardInterrupt) as e:
        err(messages.setup_failed, e)
        logger.error("setup_failed", error=str(e), error_type=type(e).__name__)
        return 1

    _print_summary(paths, messages, key_from_env=settings.has_api_key)
    return 0
