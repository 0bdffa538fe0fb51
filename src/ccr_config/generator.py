"""Router configuration and DashScope transformer plugin generation.

Both builders are pure: they never touch the filesystem and accept any
input as-is (no API key validation happens here).
"""

from __future__ import annotations

import textwrap
from enum import Enum
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Upstream constants
# ---------------------------------------------------------------------------

PROVIDER_NAME = "dashscope"
TRANSFORMER_NAME = "dashscope"
DEFAULT_MODEL = "qwen3-235b-a22b"
PLUGIN_FILENAME = "dashscope-transformer.js"
CONFIG_DIRNAME = ".claude-code-router"

ROUTER_CLASSES: tuple[str, ...] = ("default", "think", "background", "longContext")


class Region(str, Enum):
    CN = "cn"
    INTL = "intl"


BASE_URLS: dict[Region, str] = {
    Region.CN: "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions",
    Region.INTL: "https://dashscope-intl.aliyuncs.com/compatible-mode/v1/chat/completions",
}

MODELS: dict[Region, list[str]] = {
    Region.CN: [DEFAULT_MODEL],
    Region.INTL: [DEFAULT_MODEL],
}


def resolve_base_url(region: Region | str) -> str:
    """Map a region to its base URL; anything but ``intl`` means China."""
    if region == Region.INTL:
        return BASE_URLS[Region.INTL]
    return BASE_URLS[Region.CN]


def default_transformer_path() -> Path:
    return Path.home() / CONFIG_DIRNAME / "plugins" / PLUGIN_FILENAME


# ---------------------------------------------------------------------------
# config.json
# ---------------------------------------------------------------------------


def build_config(
    api_key: str | None,
    region: Region | str,
    *,
    transformer_path: Path | str | None = None,
) -> dict[str, Any]:
    """Build the claude-code-router ``config.json`` document.

    The key spelling (``LOG``, ``Providers``, ``Router``, ...) is what the
    router reads, so it is kept verbatim.
    """
    region_key = Region.INTL if region == Region.INTL else Region.CN
    models = list(MODELS[region_key])
    route = f"{PROVIDER_NAME},{models[0]}"
    path = transformer_path if transformer_path is not None else default_transformer_path()

    return {
        "LOG": True,
        "OPENAI_API_KEY": "",
        "OPENAI_BASE_URL": "",
        "OPENAI_MODEL": "",
        "transformers": [
            {
                "path": str(path),
                "options": {
                    "enable_thinking": False,
                    "stream": True,
                },
            },
        ],
        "Providers": [
            {
                "name": PROVIDER_NAME,
                "api_base_url": resolve_base_url(region),
                "api_key": api_key,
                "models": models,
                "transformer": {
                    "use": [TRANSFORMER_NAME],
                },
            },
        ],
        "Router": {name: route for name in ROUTER_CLASSES},
    }


# ---------------------------------------------------------------------------
# Transformer plugin (loaded by the router, so this is JavaScript)
# ---------------------------------------------------------------------------

_PLUGIN_SOURCE = textwrap.dedent("""\
    class DashScopeTransformer {
      name = "dashscope";

      constructor(options) {
        this.max_tokens = options.max_tokens || 8192;
        this.enable_thinking = options.enable_thinking || false;
        this.stream = options.stream || true;
      }

      async transformRequestIn(request, provider) {
        request.max_tokens = this.max_tokens;
        request.enable_thinking = this.enable_thinking;
        request.stream = this.stream;
        return request;
      }
    }

    module.exports = DashScopeTransformer;""")


def build_plugin_source() -> str:
    """Return the fixed transformer plugin text."""
    return _PLUGIN_SOURCE
