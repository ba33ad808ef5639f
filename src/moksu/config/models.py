"""Settings document schema for the agent CLI ``settings.json``.

Every field is optional: an absent key means "use the CLI's own default".
The models validate plain JSON objects (the live document stays a ``dict``),
so field defaults only describe absence and are never serialized.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

PermissionMode = Literal["default", "acceptEdits", "plan", "dontAsk", "bypassPermissions"]
UpdatesChannel = Literal["stable", "latest"]
LoginMethod = Literal["claudeai", "console"]
SpinnerVerbsMode = Literal["replace", "append"]
HandlerType = Literal["command", "prompt", "agent"]

HANDLER_TYPES: tuple[str, ...] = get_args(HandlerType)

Port = Annotated[StrictInt, Field(ge=1, le=65535)]
TimeoutSeconds = Annotated[StrictInt, Field(ge=1)]
NonNegativeCount = Annotated[StrictInt, Field(ge=0)]

# Known lifecycle events; any other event name is still accepted.
HOOK_EVENTS: tuple[str, ...] = (
    "PreToolUse",
    "PostToolUse",
    "PostToolUseFailure",
    "PermissionRequest",
    "UserPromptSubmit",
    "Notification",
    "Stop",
    "SubagentStart",
    "SubagentStop",
    "PreCompact",
    "SessionStart",
    "SessionEnd",
)


class SettingsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="allow",
    )


class Permissions(SettingsModel):
    allow: list[StrictStr] | None = None
    ask: list[StrictStr] | None = None
    deny: list[StrictStr] | None = None
    additional_directories: list[StrictStr] | None = None
    default_mode: PermissionMode | None = None
    disable_bypass_permissions_mode: Literal["disable"] | None = None
    allow_managed_hooks_only: StrictBool | None = None
    allow_managed_permission_rules_only: StrictBool | None = None


class SandboxNetwork(SettingsModel):
    allow_unix_sockets: list[StrictStr] | None = None
    allow_all_unix_sockets: StrictBool | None = None
    allow_local_binding: StrictBool | None = None
    allowed_domains: list[StrictStr] | None = None
    http_proxy_port: Port | None = None
    socks_proxy_port: Port | None = None


class Sandbox(SettingsModel):
    enabled: StrictBool | None = None
    auto_allow_bash_if_sandboxed: StrictBool | None = None
    excluded_commands: list[StrictStr] | None = None
    allow_unsandboxed_commands: StrictBool | None = None
    enable_weaker_nested_sandbox: StrictBool | None = None
    network: SandboxNetwork | None = None


class StatusLine(SettingsModel):
    type: Literal["command"] | None = None
    command: StrictStr | None = None
    padding: NonNegativeCount | None = None


class FileSuggestion(SettingsModel):
    type: Literal["command"] | None = None
    command: StrictStr | None = None


class Attribution(SettingsModel):
    commit: StrictStr | None = None
    pr: StrictStr | None = None


class SpinnerVerbs(SettingsModel):
    mode: SpinnerVerbsMode | None = None
    verbs: list[StrictStr] | None = None


class HookHandlerBase(SettingsModel):
    timeout: TimeoutSeconds | None = None
    status_message: StrictStr | None = None
    once: StrictBool | None = None


class CommandHandler(HookHandlerBase):
    """Runs a shell command when the event fires."""

    type: Literal["command"]
    command: StrictStr
    async_: StrictBool | None = Field(default=None, alias="async")


class PromptHandler(HookHandlerBase):
    """Asks a model to evaluate ``prompt`` when the event fires."""

    type: Literal["prompt"]
    prompt: StrictStr
    model: StrictStr | None = None


class AgentHandler(HookHandlerBase):
    """Hands ``prompt`` to a subagent when the event fires."""

    type: Literal["agent"]
    prompt: StrictStr
    model: StrictStr | None = None


HookHandler = Annotated[
    Union[CommandHandler, PromptHandler, AgentHandler],
    Field(discriminator="type"),
]


class MatcherGroup(SettingsModel):
    matcher: StrictStr | None = None
    hooks: list[HookHandler] | None = None


class ClaudeSettings(SettingsModel):
    schema_: StrictStr | None = Field(default=None, alias="$schema")

    # general
    api_key_helper: StrictStr | None = None
    cleanup_period_days: NonNegativeCount | None = None
    company_announcements: list[StrictStr] | None = None
    env: dict[str, StrictStr] | None = None
    model: StrictStr | None = None
    language: StrictStr | None = None
    auto_updates_channel: UpdatesChannel | None = None
    show_turn_duration: StrictBool | None = None
    spinner_tips_enabled: StrictBool | None = None
    terminal_progress_bar_enabled: StrictBool | None = None
    always_thinking_enabled: StrictBool | None = None
    plans_directory: StrictStr | None = None
    output_style: StrictStr | None = None
    respect_gitignore: StrictBool | None = None
    prefers_reduced_motion: StrictBool | None = None
    teammate_mode: StrictStr | None = None
    spinner_verbs: SpinnerVerbs | None = None
    otel_headers_helper: StrictStr | None = None
    file_suggestion: FileSuggestion | None = None

    attribution: Attribution | None = None
    permissions: Permissions | None = None
    sandbox: Sandbox | None = None

    # mcp
    enable_all_project_mcp_servers: StrictBool | None = None
    enabled_mcpjson_servers: list[StrictStr] | None = None
    disabled_mcpjson_servers: list[StrictStr] | None = None
    allowed_mcp_servers: list[StrictStr] | None = None
    denied_mcp_servers: list[StrictStr] | None = None

    # hooks
    hooks: dict[str, list[MatcherGroup]] | None = None
    disable_all_hooks: StrictBool | None = None

    status_line: StatusLine | None = None

    # auth
    force_login_method: LoginMethod | None = None
    force_login_org_uuid: StrictStr | None = Field(default=None, alias="forceLoginOrgUUID")
    aws_auth_refresh: StrictStr | None = None
    aws_credential_export: StrictStr | None = None

    # plugins
    enabled_plugins: dict[str, StrictBool] | None = None
    extra_known_marketplaces: dict[str, StrictStr] | None = None
    strict_known_marketplaces: list[StrictStr] | None = None
