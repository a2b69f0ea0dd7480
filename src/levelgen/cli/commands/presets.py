"""Preset commands operating on the saved editor session.

Each command restores the session from a JSON preference file, performs
one preset action and saves the session back. Confirmation state does not
survive between invocations, so overwrite and delete ask for confirmation
interactively (or take ``--yes``) and issue the confirming second request
within the same run.
"""

from pathlib import Path
from typing import Annotated

import typer

from levelgen.application import DEFAULT_PRESET_NAME, EditorSession
from levelgen.application.config import (
    ConfigError,
    config_to_layout,
    layout_to_config,
    load_config,
)
from levelgen.cli.commands.validate import display_load_error
from levelgen.domain import DeleteOutcome, PresetIndexError, PresetNameError, SaveOutcome
from levelgen.infrastructure import (
    FileAssetResolver,
    JsonFilePreferenceStore,
    PreferenceStoreError,
    SessionPersistenceAdapter,
)

DEFAULT_STORE = Path("~/.levelgen/preferences.json")

presets_app = typer.Typer(
    name="presets",
    help="Save, load and delete named layout presets.",
)

StoreOption = Annotated[
    Path | None,
    typer.Option(
        "--store",
        envvar="LEVELGEN_STORE",
        help="Preference file holding the saved session",
    ),
]
SlotOption = Annotated[
    int,
    typer.Option("--slot", "-s", min=0, help="Preset slot index"),
]
YesOption = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Confirm overwrite/delete without prompting"),
]


def _adapter(store: Path | None) -> SessionPersistenceAdapter:
    path = (store or DEFAULT_STORE).expanduser()
    return SessionPersistenceAdapter(
        JsonFilePreferenceStore(path), FileAssetResolver(Path.cwd())
    )


def _restore(adapter: SessionPersistenceAdapter) -> EditorSession:
    try:
        return adapter.restore()
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except PreferenceStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _select(session: EditorSession, slot: int) -> None:
    try:
        session.select(slot)
    except PresetIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@presets_app.command(name="list")
def list_presets(store: StoreOption = None) -> None:
    """List every preset slot; the selected slot is marked with '*'.

    Example:
        levelgen presets list
    """
    session = _restore(_adapter(store))
    for index, label in enumerate(session.labels):
        marker = "*" if index == session.selected_index else " "
        typer.echo(f"{marker} {index}: {label}")


@presets_app.command(name="save")
def save_preset(
    config_file: Annotated[
        Path,
        typer.Argument(help="Layout configuration file to store"),
    ],
    slot: SlotOption,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Preset name (default: preset_name from the file)"),
    ] = None,
    yes: YesOption = False,
    store: StoreOption = None,
) -> None:
    """Save a configuration file into a preset slot.

    Saving over an occupied slot asks for confirmation. Saving under a name
    another slot already uses selects that slot instead of writing.

    Example:
        levelgen presets save level-01.json --slot 2 --name "Castle"
    """
    try:
        schema = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    resolver = FileAssetResolver(config_file.parent)
    if schema.image:
        schema = schema.model_copy(
            update={"image": str(resolver.resolve_path(schema.image).resolve())}
        )

    adapter = _adapter(store)
    session = _restore(adapter)
    _select(session, slot)
    session.config = config_to_layout(schema, resolver)
    session.preset_name = name or schema.preset_name or DEFAULT_PRESET_NAME

    label = session.labels[slot]
    try:
        result = session.save()
        if result.outcome == SaveOutcome.PENDING_CONFIRMATION:
            if yes or typer.confirm(f"Slot {slot} holds '{label}'. Overwrite?"):
                result = session.save()
    except PresetNameError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if result.outcome == SaveOutcome.SAVED:
        typer.echo(f"Saved preset '{session.preset_name}' to slot {slot}.")
    elif result.outcome == SaveOutcome.OVERWRITTEN:
        typer.echo(f"Overwrote preset '{label}' in slot {slot}.")
    elif result.outcome == SaveOutcome.REDIRECTED_TO_EXISTING:
        typer.echo(
            f"Warning: Preset '{session.preset_name}' already exists in slot "
            f"{result.index}. Run save with --slot {result.index} to overwrite it.",
            err=True,
        )
    else:
        typer.echo("Not saved.")

    adapter.save(session)


@presets_app.command(name="load")
def load_preset(
    slot: SlotOption,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the preset as a config file"),
    ] = None,
    store: StoreOption = None,
) -> None:
    """Load a preset and make it the current configuration.

    Example:
        levelgen presets load --slot 2 --output castle.json
    """
    adapter = _adapter(store)
    session = _restore(adapter)
    _select(session, slot)
    config = session.load()
    if config is None:
        typer.echo(f"Error: Slot {slot} is empty.", err=True)
        raise typer.Exit(code=1)

    text = layout_to_config(config, preset_name=session.preset_name).model_dump_json(
        by_alias=True, indent=2
    )
    if output is not None:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Loaded preset '{session.preset_name}' to {output}")
    else:
        typer.echo(text)

    adapter.save(session)


@presets_app.command(name="delete")
def delete_preset(
    slot: SlotOption,
    yes: YesOption = False,
    store: StoreOption = None,
) -> None:
    """Delete a preset (asks for confirmation).

    Example:
        levelgen presets delete --slot 2 --yes
    """
    adapter = _adapter(store)
    session = _restore(adapter)
    _select(session, slot)
    label = session.labels[slot]

    outcome = session.delete()
    if outcome == DeleteOutcome.PENDING_CONFIRMATION:
        if yes or typer.confirm(f"Delete preset '{label}' in slot {slot}?"):
            outcome = session.delete()

    if outcome == DeleteOutcome.DELETED:
        typer.echo(f"Deleted preset '{label}' from slot {slot}.")
    elif outcome == DeleteOutcome.EMPTY_SLOT:
        typer.echo(f"Slot {slot} is already empty.")
    else:
        typer.echo("Not deleted.")

    adapter.save(session)


@presets_app.command(name="show")
def show_preset(slot: SlotOption, store: StoreOption = None) -> None:
    """Show the settings stored in a preset slot.

    Example:
        levelgen presets show --slot 0
    """
    session = _restore(_adapter(store))
    try:
        preset = session.registry.slot(slot)
    except PresetIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not preset.occupied:
        typer.echo(f"Slot {slot}: {preset.label}")
        return
    config = preset.config
    assert config is not None

    axes = ", ".join(config.rotation.axes.to_names()) or "none"
    typer.echo(f"Slot {slot}: {preset.name}")
    typer.echo(f"  Level name:  {config.name}")
    typer.echo(f"  Image:       {config.image_ref or '(none)'}")
    typer.echo(f"  Build axes:  {config.build_axes.value}")
    typer.echo(f"  Spacing:     {config.spacing}")
    typer.echo(
        f"  Rotation:    {'enabled' if config.rotation.enabled else 'disabled'} ({axes})"
    )
    typer.echo(f"  Rules:       {len(config.rules)}")
    for rule in config.rules:
        status = "" if rule.is_resolved else " (unresolved)"
        typer.echo(f"    {rule.color.to_hex()} -> {rule.object_key}{status}")
