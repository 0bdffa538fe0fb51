"""Display-language detection from the process locale variables."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

# Checked in priority order; the first non-empty one wins.
LOCALE_VARIABLES: tuple[str, ...] = ("LANG", "LANGUAGE", "LC_ALL")
LOCALE_FALLBACK = "en_US"


class Locale(str, Enum):
    ZH = "zh"
    EN = "en"


def resolve_locale(env: Mapping[str, str]) -> Locale:
    """Pick ``zh`` when the effective locale mentions Chinese, else ``en``."""
    source = next((env[name] for name in LOCALE_VARIABLES if env.get(name)), LOCALE_FALLBACK)
    return Locale.ZH if "zh" in source.lower() else Locale.EN
