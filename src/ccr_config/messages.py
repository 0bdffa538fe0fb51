"""Localized display strings for the installer.

Each locale gets one complete :class:`MessageSet`.  Every field is
required, so a locale that forgets a key fails at import time rather
than when the string is first printed.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from ccr_config.i18n import Locale


@dataclass(frozen=True)
class MessageSet:
    # --- Start ---
    configuring: str
    env_key_detected: str
    env_key_missing: str

    # --- Region prompt ---
    region_prompt: str
    region_option_cn: str
    region_option_intl: str
    region_input: str
    invalid_region: str
    region_selected: str

    # --- API key prompt ---
    api_key_prompt: str
    invalid_api_key: str
    api_key_set: str

    # --- File output (callers append the path) ---
    create_dir: str
    create_config: str
    create_plugin: str

    # --- Summary ---
    config_complete: str
    config_location: str
    usage_title: str
    usage_install_claude: str
    usage_install_router: str
    usage_key_from_env: str
    usage_key_entered: str
    usage_run: str

    # --- Failure ---
    setup_failed: str


ZH = MessageSet(
    configuring="🚀 正在配置 claude-code-router...",
    env_key_detected="🔑 检测到环境变量 DASHSCOPE_API_KEY，将使用环境变量中的 API Key",
    env_key_missing="⚠️  未检测到环境变量 DASHSCOPE_API_KEY，需要手动输入 API Key",
    region_prompt="🌏 请选择 DashScope 服务区域:",
    region_option_cn="  1) 中国大陆 (dashscope.aliyuncs.com)",
    region_option_intl="  2) 国际 (dashscope-intl.aliyuncs.com)",
    region_input="请输入 1 或 2: ",
    invalid_region="❌ 输入无效，请输入 1 或 2",
    region_selected="✅ 已选择服务区域:",
    api_key_prompt="🔑 请输入你的 DashScope API Key: ",
    invalid_api_key="❌ API Key 不能为空，请重新输入",
    api_key_set="✅ API Key 已设置",
    create_dir="📁 创建目录:",
    create_config="📄 创建配置文件:",
    create_plugin="🔧 创建插件文件:",
    config_complete="✅ claude-code-router 配置完成！",
    config_location="📁 配置文件位置:",
    usage_title="📝 使用说明:",
    usage_install_claude="1. 请确保已安装 @anthropic-ai/claude-code",
    usage_install_router="2. 请确保已安装 @musistudio/claude-code-router",
    usage_key_from_env="3. ✅ API Key 已从环境变量自动配置",
    usage_key_entered="3. ✅ API Key 已写入配置文件",
    usage_run="4. 运行 claude-code 开始使用",
    setup_failed="❌ 配置失败:",
)

EN = MessageSet(
    configuring="🚀 Configuring claude-code-router...",
    env_key_detected="🔑 DASHSCOPE_API_KEY environment variable detected, using API Key from environment",
    env_key_missing="⚠️  DASHSCOPE_API_KEY environment variable not found, please enter your API Key",
    region_prompt="🌏 Please select the DashScope service region:",
    region_option_cn="  1) China (dashscope.aliyuncs.com)",
    region_option_intl="  2) International (dashscope-intl.aliyuncs.com)",
    region_input="Please enter 1 or 2: ",
    invalid_region="❌ Invalid input, please enter 1 or 2",
    region_selected="✅ Selected region:",
    api_key_prompt="🔑 Please enter your DashScope API Key: ",
    invalid_api_key="❌ API Key cannot be empty, please try again",
    api_key_set="✅ API Key set",
    create_dir="📁 Created directory:",
    create_config="📄 Created config file:",
    create_plugin="🔧 Created plugin file:",
    config_complete="✅ claude-code-router configuration completed!",
    config_location="📁 Configuration location:",
    usage_title="📝 Usage instructions:",
    usage_install_claude="1. Make sure @anthropic-ai/claude-code is installed",
    usage_install_router="2. Make sure @musistudio/claude-code-router is installed",
    usage_key_from_env="3. ✅ API Key configured automatically from environment variable",
    usage_key_entered="3. ✅ API Key written to the config file",
    usage_run="4. Run claude-code to get started",
    setup_failed="❌ Configuration failed:",
)

MESSAGES: dict[Locale, MessageSet] = {
    Locale.ZH: ZH,
    Locale.EN: EN,
}

MESSAGE_KEYS: tuple[str, ...] = tuple(f.name for f in fields(MessageSet))


def get_messages(locale: Locale) -> MessageSet:
    """Return the complete message set for *locale*."""
    return MESSAGES[locale]
