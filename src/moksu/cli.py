"""CLI entrypoint for moksu."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import click

from moksu.config.cleaning import reject_json_constant
from moksu.config.metadata import SECTIONS, entries_for_section, lookup
from moksu.config.models import HOOK_EVENTS
from moksu.config.store import SettingsStore
from moksu.config.validation import format_validation_error, validate_field
from moksu.paths import settings_path
from moksu.persistence.state_file import StateFile
from moksu.runtime_logging import RuntimeLogger, configure_runtime_logging
from moksu.version import __version__


@dataclass(slots=True)
class Session:
    logger: RuntimeLogger
    state_file: StateFile
    _store: SettingsStore | None = None

    @property
    def store(self) -> SettingsStore:
        if self._store is None:
            self._store = SettingsStore(logger=self.logger)
            self.state_file.load_into(self._store)
        return self._store

    def save(self) -> None:
        self.state_file.save(self.store)


def _parse_value(raw: str, as_string: bool) -> object:
    if as_string:
        return raw
    try:
        return json.loads(raw, parse_constant=reject_json_constant)
    except ValueError:
        return raw


def _print_issues(store: SettingsStore) -> None:
    for issue in store.validation_errors:
        label = issue.path or "(document)"
        click.echo(f"{label}: {format_validation_error(issue.message)}", err=True)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--state-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Persisted editor state (defaults to the platform state directory)",
)
@click.option("--log-level", help="Runtime log level: off, error, warning, info, debug")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def main(
    ctx: click.Context,
    state_file: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """moksu: schema-driven editor for agent CLI settings.json files."""
    logger = configure_runtime_logging(level=log_level, log_file=log_file)
    ctx.obj = Session(logger=logger, state_file=StateFile(state_file))
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@main.command()
@click.pass_obj
def show(session: Session) -> None:
    """Print the cleaned settings document."""
    click.echo(session.store.export_settings())


@main.command()
@click.argument("path")
@click.pass_obj
def get(session: Session, path: str) -> None:
    """Print the value stored at a dotted PATH."""
    value = session.store.get(path)
    if value is None:
        raise click.ClickException(f"Not set: {path}")
    click.echo(json.dumps(value, indent=2, ensure_ascii=False))


@main.command("set")
@click.argument("path")
@click.argument("value")
@click.option("--string", "as_string", is_flag=True, help="Store VALUE verbatim instead of parsing JSON")
@click.pass_obj
def set_command(session: Session, path: str, value: str, as_string: bool) -> None:
    """Set PATH to VALUE (parsed as JSON when possible)."""
    parsed = _parse_value(value, as_string)
    check = validate_field(path, parsed)
    if not check.valid:
        raise click.ClickException(f"{path}: {format_validation_error(check.error or 'Invalid')}")

    session.store.update_nested_setting(path, parsed)
    session.save()
    if session.store.get(path) is None:
        click.echo(f"Cleared {path}")
    else:
        click.echo(f"Set {path}")


@main.command()
@click.argument("path")
@click.pass_obj
def unset(session: Session, path: str) -> None:
    """Remove the value at PATH."""
    session.store.update_nested_setting(path, None)
    session.save()
    click.echo(f"Cleared {path}")


@main.command()
@click.argument("file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, file: Path | None) -> None:
    """Validate the stored settings, or FILE when given."""
    session: Session = ctx.obj
    if file is None:
        store = session.store
    else:
        store = SettingsStore(logger=session.logger)
        if not store.import_settings(file.read_text(encoding="utf-8")):
            raise click.ClickException(f"Not a JSON object: {file}")

    if store.validate_settings():
        click.echo("Settings are valid.")
        return
    _print_issues(store)
    ctx.exit(1)


@main.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to a file")
@click.option("--default-path", is_flag=True, help="Write to the default settings.json location")
@click.pass_obj
def export_command(session: Session, output: Path | None, default_path: bool) -> None:
    """Export the cleaned settings as JSON."""
    text = session.store.export_settings()
    target = settings_path() if default_path else output
    if target is None:
        click.echo(text)
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(f"{text}\n", encoding="utf-8")
    click.echo(str(target))


@main.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--validate/--no-validate", "run_validation", default=True, show_default=True)
@click.pass_context
def import_command(ctx: click.Context, file: Path, run_validation: bool) -> None:
    """Replace the stored settings with the contents of FILE."""
    session: Session = ctx.obj
    store = session.store
    if not store.import_settings(file.read_text(encoding="utf-8")):
        raise click.ClickException(f"Not a JSON object: {file}")
    session.save()
    click.echo(f"Imported {len(store.settings)} top-level settings from {file}")

    if run_validation and not store.validate_settings():
        _print_issues(store)
        ctx.exit(1)


@main.command()
@click.confirmation_option(prompt="Clear all stored settings?")
@click.pass_obj
def reset(session: Session) -> None:
    """Clear every stored setting."""
    session.store.reset_settings()
    session.save()
    click.echo("Settings cleared.")


@main.command()
@click.argument("path")
def describe(path: str) -> None:
    """Show the schema entry for a dotted PATH."""
    entry = lookup(path)
    if entry is None:
        raise click.ClickException(f"No schema entry for {path}")
    click.echo(json.dumps(entry.to_dict(), indent=2))


@main.command()
@click.argument("section", required=False, type=click.Choice(SECTIONS))
@click.option("--advanced/--no-advanced", default=True, show_default=True, help="Include advanced settings")
def sections(section: str | None, advanced: bool) -> None:
    """List settings, grouped by section."""
    for name in ([section] if section else SECTIONS):
        entries = [entry for entry in entries_for_section(name) if advanced or not entry.advanced]
        if not entries:
            continue
        click.echo(f"[{name}]")
        for entry in entries:
            click.echo(f"  {entry.key}  ({entry.type}) {entry.label}")


@main.command()
def events() -> None:
    """List known hook events."""
    for event in HOOK_EVENTS:
        click.echo(event)


@main.command("state-path")
@click.pass_obj
def state_path_command(session: Session) -> None:
    """Print the persisted state file path."""
    click.echo(str(session.state_file.path))


@main.command("settings-path")
def settings_path_command() -> None:
    """Print the default settings.json export path."""
    click.echo(str(settings_path()))


@main.command()
def about() -> None:
    """Show version and project summary."""
    payload = {
        "name": "moksu",
        "version": __version__,
        "description": "Schema-driven editor for agent CLI settings",
    }
    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
