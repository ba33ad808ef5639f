"""Descriptive entries for every editable setting, keyed by dotted path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

FieldType = Literal["string", "number", "boolean", "array", "object", "enum"]
Section = Literal[
    "general",
    "permissions",
    "sandbox",
    "mcp",
    "hooks",
    "statusLine",
    "attribution",
    "auth",
    "plugins",
]

SECTIONS: tuple[Section, ...] = (
    "general",
    "permissions",
    "sandbox",
    "mcp",
    "hooks",
    "statusLine",
    "attribution",
    "auth",
    "plugins",
)


@dataclass(frozen=True, slots=True)
class SchemaEntry:
    key: str
    label: str
    description: str
    type: FieldType
    section: Section
    enum_values: tuple[str, ...] | None = None
    default: Any = None
    example: str | None = None
    placeholder: str | None = None
    advanced: bool = False
    managed_only: bool = False

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "type": self.type,
            "section": self.section,
        }
        if self.enum_values is not None:
            payload["enumValues"] = list(self.enum_values)
        if self.default is not None:
            payload["default"] = self.default
        if self.example is not None:
            payload["example"] = self.example
        if self.placeholder is not None:
            payload["placeholder"] = self.placeholder
        if self.advanced:
            payload["advanced"] = True
        if self.managed_only:
            payload["managedOnly"] = True
        return payload


SCHEMA_ENTRIES: tuple[SchemaEntry, ...] = (
    # general
    SchemaEntry(
        key="$schema",
        label="JSON Schema",
        description="URL of the JSON schema editors use for completion and inline validation.",
        type="string",
        section="general",
        example="https://json.schemastore.org/claude-code-settings.json",
        placeholder="https://json.schemastore.org/claude-code-settings.json",
        advanced=True,
    ),
    SchemaEntry(
        key="model",
        label="Model",
        description=(
            "The model to use. Can be an alias (default, sonnet, opus, haiku, opusplan) "
            "or a full model name."
        ),
        type="string",
        section="general",
        example="opus",
        placeholder="e.g., opus, sonnet, haiku",
    ),
    SchemaEntry(
        key="language",
        label="Response Language",
        description="Preferred response language. Responses use this language by default.",
        type="string",
        section="general",
        example="japanese",
        placeholder="e.g., japanese, spanish, french",
    ),
    SchemaEntry(
        key="autoUpdatesChannel",
        label="Auto Updates Channel",
        description=(
            'Release channel for updates. "stable" for tested versions (typically about '
            'one week old), "latest" for most recent.'
        ),
        type="enum",
        section="general",
        enum_values=("stable", "latest"),
        default="latest",
    ),
    SchemaEntry(
        key="cleanupPeriodDays",
        label="Cleanup Period (Days)",
        description=(
            "Sessions inactive for longer than this period are deleted at startup. "
            "Setting to 0 immediately deletes all sessions."
        ),
        type="number",
        section="general",
        default=30,
        example="30",
    ),
    SchemaEntry(
        key="showTurnDuration",
        label="Show Turn Duration",
        description='Show turn duration messages after responses (e.g., "Cooked for 1m 6s").',
        type="boolean",
        section="general",
        default=True,
    ),
    SchemaEntry(
        key="spinnerTipsEnabled",
        label="Spinner Tips",
        description="Show tips in the spinner while the agent is working.",
        type="boolean",
        section="general",
        default=True,
    ),
    SchemaEntry(
        key="terminalProgressBarEnabled",
        label="Terminal Progress Bar",
        description=(
            "Enable the terminal progress bar in supported terminals like Windows Terminal "
            "and iTerm2."
        ),
        type="boolean",
        section="general",
        default=True,
    ),
    SchemaEntry(
        key="alwaysThinkingEnabled",
        label="Extended Thinking",
        description="Enable extended thinking by default for all sessions.",
        type="boolean",
        section="general",
        default=False,
    ),
    SchemaEntry(
        key="plansDirectory",
        label="Plans Directory",
        description="Where plan files are stored. Path is relative to project root.",
        type="string",
        section="general",
        default="~/.claude/plans",
        placeholder="./plans",
    ),
    SchemaEntry(
        key="outputStyle",
        label="Output Style",
        description="Output style used to adjust the system prompt.",
        type="string",
        section="general",
        example="Explanatory",
        placeholder="e.g., Explanatory, Concise",
    ),
    SchemaEntry(
        key="respectGitignore",
        label="Respect Gitignore",
        description=(
            "Whether the @ file picker respects .gitignore patterns. When true, matching "
            "files are excluded."
        ),
        type="boolean",
        section="general",
        default=True,
    ),
    SchemaEntry(
        key="prefersReducedMotion",
        label="Reduced Motion",
        description="Reduce UI animations such as the spinner.",
        type="boolean",
        section="general",
        default=False,
    ),
    SchemaEntry(
        key="teammateMode",
        label="Teammate Mode",
        description="How teammate sessions are displayed.",
        type="string",
        section="general",
        example="tmux",
        advanced=True,
    ),
    SchemaEntry(
        key="spinnerVerbs.mode",
        label="Spinner Verbs Mode",
        description="Replace the built-in spinner verbs or append to them.",
        type="enum",
        section="general",
        enum_values=("replace", "append"),
    ),
    SchemaEntry(
        key="spinnerVerbs.verbs",
        label="Spinner Verbs",
        description="Custom verbs shown in the spinner.",
        type="array",
        section="general",
        example="Analyzing, Processing",
    ),
    SchemaEntry(
        key="fileSuggestion.type",
        label="File Suggestion Type",
        description='Source of @ file suggestions. Currently only "command" is supported.',
        type="enum",
        section="general",
        enum_values=("command",),
        advanced=True,
    ),
    SchemaEntry(
        key="fileSuggestion.command",
        label="File Suggestion Command",
        description="Command that produces file suggestions for the @ picker.",
        type="string",
        section="general",
        example="~/.claude/file-suggest.sh",
        advanced=True,
    ),
    SchemaEntry(
        key="apiKeyHelper",
        label="API Key Helper",
        description=(
            "Custom script to generate an auth value. The value is sent as X-Api-Key and "
            "Authorization headers."
        ),
        type="string",
        section="general",
        example="/bin/generate_temp_api_key.sh",
        advanced=True,
    ),
    SchemaEntry(
        key="otelHeadersHelper",
        label="OpenTelemetry Headers Helper",
        description="Script that outputs dynamic OpenTelemetry headers.",
        type="string",
        section="general",
        example="/bin/generate_otel_headers.sh",
        advanced=True,
    ),
    SchemaEntry(
        key="companyAnnouncements",
        label="Company Announcements",
        description=(
            "Announcements displayed at startup. Multiple announcements are cycled "
            "through randomly."
        ),
        type="array",
        section="general",
        example='["Welcome to Acme Corp!"]',
        advanced=True,
    ),
    SchemaEntry(
        key="env",
        label="Environment Variables",
        description="Environment variables applied to every session.",
        type="object",
        section="general",
        example='{"FOO": "bar"}',
        advanced=True,
    ),
    # permissions
    SchemaEntry(
        key="permissions.defaultMode",
        label="Default Mode",
        description="Default permission mode on startup. Controls how tools are approved.",
        type="enum",
        section="permissions",
        enum_values=("default", "acceptEdits", "plan", "dontAsk", "bypassPermissions"),
    ),
    SchemaEntry(
        key="permissions.allow",
        label="Allow Rules",
        description=(
            "Permission rules that allow tool use without prompting. Format: Tool or "
            "Tool(specifier)."
        ),
        type="array",
        section="permissions",
        example="Bash(npm run *), Bash(git commit *)",
    ),
    SchemaEntry(
        key="permissions.ask",
        label="Ask Rules",
        description="Permission rules that prompt for confirmation upon tool use.",
        type="array",
        section="permissions",
        example="Bash(git push *)",
    ),
    SchemaEntry(
        key="permissions.deny",
        label="Deny Rules",
        description="Permission rules that deny tool use, e.g. to exclude sensitive files.",
        type="array",
        section="permissions",
        example="Read(./.env), WebFetch",
    ),
    SchemaEntry(
        key="permissions.additionalDirectories",
        label="Additional Directories",
        description="Additional working directories the agent has access to.",
        type="array",
        section="permissions",
        example="../docs/, /shared/libs",
    ),
    SchemaEntry(
        key="permissions.disableBypassPermissionsMode",
        label="Disable Bypass Permissions",
        description='Set to "disable" to prevent bypassPermissions mode from being activated.',
        type="enum",
        section="permissions",
        enum_values=("disable",),
        managed_only=True,
    ),
    SchemaEntry(
        key="permissions.allowManagedHooksOnly",
        label="Managed Hooks Only",
        description="Only run hooks defined in managed settings.",
        type="boolean",
        section="permissions",
        default=False,
        managed_only=True,
    ),
    SchemaEntry(
        key="permissions.allowManagedPermissionRulesOnly",
        label="Managed Permission Rules Only",
        description="Only apply permission rules defined in managed settings.",
        type="boolean",
        section="permissions",
        default=False,
        managed_only=True,
    ),
    # sandbox
    SchemaEntry(
        key="sandbox.enabled",
        label="Enable Sandbox",
        description="Enable bash sandboxing for filesystem and network isolation.",
        type="boolean",
        section="sandbox",
        default=False,
    ),
    SchemaEntry(
        key="sandbox.autoAllowBashIfSandboxed",
        label="Auto-allow Bash in Sandbox",
        description="Auto-approve bash commands when sandboxed.",
        type="boolean",
        section="sandbox",
        default=True,
    ),
    SchemaEntry(
        key="sandbox.excludedCommands",
        label="Excluded Commands",
        description="Commands that should run outside of the sandbox.",
        type="array",
        section="sandbox",
        example="git, docker",
    ),
    SchemaEntry(
        key="sandbox.allowUnsandboxedCommands",
        label="Allow Unsandboxed Commands",
        description=(
            "Allow commands to run outside the sandbox via the dangerouslyDisableSandbox "
            "parameter."
        ),
        type="boolean",
        section="sandbox",
        default=True,
    ),
    SchemaEntry(
        key="sandbox.enableWeakerNestedSandbox",
        label="Weaker Nested Sandbox",
        description=(
            "Enable a weaker sandbox for unprivileged Docker environments (Linux/WSL2 only). "
            "Reduces security."
        ),
        type="boolean",
        section="sandbox",
        default=False,
        advanced=True,
    ),
    SchemaEntry(
        key="sandbox.network.allowedDomains",
        label="Allowed Domains",
        description=(
            "Domains allowed for outbound network traffic. Supports wildcards "
            "(e.g., *.example.com)."
        ),
        type="array",
        section="sandbox",
        example="github.com, *.npmjs.org",
    ),
    SchemaEntry(
        key="sandbox.network.httpProxyPort",
        label="HTTP Proxy Port",
        description="HTTP proxy port, when bringing your own proxy.",
        type="number",
        section="sandbox",
        example="8080",
    ),
    SchemaEntry(
        key="sandbox.network.socksProxyPort",
        label="SOCKS5 Proxy Port",
        description="SOCKS5 proxy port, when bringing your own proxy.",
        type="number",
        section="sandbox",
        example="8081",
    ),
    SchemaEntry(
        key="sandbox.network.allowUnixSockets",
        label="Allowed Unix Sockets",
        description="Unix socket paths accessible in the sandbox (for SSH agents, etc.).",
        type="array",
        section="sandbox",
        example="~/.ssh/agent-socket",
        advanced=True,
    ),
    SchemaEntry(
        key="sandbox.network.allowAllUnixSockets",
        label="Allow All Unix Sockets",
        description="Allow all Unix socket connections in the sandbox.",
        type="boolean",
        section="sandbox",
        default=False,
        advanced=True,
    ),
    SchemaEntry(
        key="sandbox.network.allowLocalBinding",
        label="Allow Local Binding",
        description="Allow binding to localhost ports (macOS only).",
        type="boolean",
        section="sandbox",
        default=False,
        advanced=True,
    ),
    # mcp
    SchemaEntry(
        key="enableAllProjectMcpServers",
        label="Enable All Project MCP Servers",
        description="Automatically approve all MCP servers defined in project .mcp.json files.",
        type="boolean",
        section="mcp",
        default=False,
    ),
    SchemaEntry(
        key="enabledMcpjsonServers",
        label="Enabled MCP Servers",
        description="Specific MCP servers from .mcp.json files to approve.",
        type="array",
        section="mcp",
        example="memory, github",
    ),
    SchemaEntry(
        key="disabledMcpjsonServers",
        label="Disabled MCP Servers",
        description="Specific MCP servers from .mcp.json files to reject.",
        type="array",
        section="mcp",
        example="filesystem",
    ),
    SchemaEntry(
        key="allowedMcpServers",
        label="Allowed MCP Servers",
        description="Allowlist of MCP servers users may configure.",
        type="array",
        section="mcp",
        example="github, memory",
        managed_only=True,
    ),
    SchemaEntry(
        key="deniedMcpServers",
        label="Denied MCP Servers",
        description="Denylist of MCP servers users may not configure.",
        type="array",
        section="mcp",
        example="filesystem",
        managed_only=True,
    ),
    # hooks
    SchemaEntry(
        key="hooks",
        label="Hooks Configuration",
        description=(
            "Commands, prompts or agents to run at lifecycle events, grouped by event "
            "and tool matcher."
        ),
        type="object",
        section="hooks",
        advanced=True,
    ),
    SchemaEntry(
        key="disableAllHooks",
        label="Disable All Hooks",
        description="Disable all hooks.",
        type="boolean",
        section="hooks",
        default=False,
    ),
    # status line
    SchemaEntry(
        key="statusLine.type",
        label="Status Line Type",
        description='The type of status line. Currently only "command" is supported.',
        type="enum",
        section="statusLine",
        enum_values=("command",),
    ),
    SchemaEntry(
        key="statusLine.command",
        label="Status Line Command",
        description="Command or script path executed to generate the status line.",
        type="string",
        section="statusLine",
        example="~/.claude/statusline.sh",
    ),
    SchemaEntry(
        key="statusLine.padding",
        label="Status Line Padding",
        description="Padding value. Set to 0 to let the status line reach the edge.",
        type="number",
        section="statusLine",
        default=0,
        example="0",
    ),
    # attribution
    SchemaEntry(
        key="attribution.commit",
        label="Commit Attribution",
        description="Attribution text for git commits.",
        type="string",
        section="attribution",
        example="Generated with an agent",
    ),
    SchemaEntry(
        key="attribution.pr",
        label="PR Attribution",
        description="Attribution text for pull request descriptions.",
        type="string",
        section="attribution",
        example="Generated with an agent",
    ),
    # auth
    SchemaEntry(
        key="forceLoginMethod",
        label="Force Login Method",
        description=(
            'Restrict login to specific account types. "claudeai" for consumer accounts, '
            '"console" for API billing accounts.'
        ),
        type="enum",
        section="auth",
        enum_values=("claudeai", "console"),
    ),
    SchemaEntry(
        key="forceLoginOrgUUID",
        label="Force Login Org UUID",
        description=(
            "UUID of an organization to select automatically during login. Requires "
            "forceLoginMethod."
        ),
        type="string",
        section="auth",
        placeholder="xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
    ),
    SchemaEntry(
        key="awsAuthRefresh",
        label="AWS Auth Refresh",
        description="Script that refreshes AWS credentials, e.g. an SSO login.",
        type="string",
        section="auth",
        example="aws sso login --profile myprofile",
        advanced=True,
    ),
    SchemaEntry(
        key="awsCredentialExport",
        label="AWS Credential Export",
        description="Script that outputs AWS credentials as JSON.",
        type="string",
        section="auth",
        example="~/.aws/export.sh",
        advanced=True,
    ),
    # plugins
    SchemaEntry(
        key="enabledPlugins",
        label="Enabled Plugins",
        description="Plugins to enable or disable, keyed by plugin identifier.",
        type="object",
        section="plugins",
        example='{"formatter@acme-tools": true}',
    ),
    SchemaEntry(
        key="extraKnownMarketplaces",
        label="Extra Marketplaces",
        description="Additional plugin marketplaces, keyed by source.",
        type="object",
        section="plugins",
        advanced=True,
    ),
    SchemaEntry(
        key="strictKnownMarketplaces",
        label="Strict Marketplaces",
        description="Only these plugin marketplaces may be added.",
        type="array",
        section="plugins",
        managed_only=True,
    ),
)

_ENTRIES_BY_KEY: dict[str, SchemaEntry] = {entry.key: entry for entry in SCHEMA_ENTRIES}


def lookup(path: str) -> SchemaEntry | None:
    return _ENTRIES_BY_KEY.get(path)


def entries_for_section(section: str) -> list[SchemaEntry]:
    return [entry for entry in SCHEMA_ENTRIES if entry.section == section]
