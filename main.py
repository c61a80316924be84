#!/usr/bin/env python3
"""
Main CLI for the Font Selector
==============================

Terminal front end for the font editor. Every command is one user intent;
the selection is kept in a JSON store so it carries over between runs.
"""

import logging
import sys
from pathlib import Path

import click

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from src.fontselector.core.config import FontSelectorConfig  # noqa: E402
from src.fontselector.core.exceptions import FontSelectorError  # noqa: E402
from src.fontselector.fonts.catalog import load_catalog  # noqa: E402
from src.fontselector.selection.editor import FontEditor  # noqa: E402
from src.fontselector.storage.json_store import JsonFileStore  # noqa: E402


def _echo_selection(editor: FontEditor) -> None:
    selection = editor.selection
    style = editor.style

    click.echo(f"Font:    {selection.font.family if selection.font else '(none)'}")
    click.echo(f"Variant: {selection.variant.label if selection.variant else '(none)'}")
    click.echo(f"Italic:  {'on' if selection.italic_override else 'off'}")
    css = "; ".join(f"{name}: {value}" for name, value in style.as_css().items())
    click.echo(f"Style:   {css}")
    if selection.text:
        click.echo()
        click.echo(selection.text)


def _run(ctx: click.Context, action) -> None:
    """Run an intent against the session editor and show the result."""
    try:
        editor = ctx.obj["editor_factory"]()
        action(editor)
        _echo_selection(editor)
    except FontSelectorError as e:
        logger.exception(f"Font selector failed: {e}")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file",
)
@click.option(
    "--catalog",
    type=click.Path(path_type=Path),
    help="Raw font catalog (JSON or YAML), overrides the configured one",
)
@click.option(
    "--store",
    type=click.Path(path_type=Path),
    help="JSON store file, overrides the configured one",
)
@click.pass_context
def cli(ctx, verbose, config, catalog, store):
    """Font Selector CLI."""
    try:
        settings = FontSelectorConfig.from_env_and_yaml(yaml_path=config)
    except FontSelectorError as e:
        logger.exception(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(logging.DEBUG if verbose else settings.log_level)

    catalog_path = catalog or settings.catalog_path
    store_path = store or settings.store_path

    def editor_factory() -> FontEditor:
        return FontEditor(
            load_catalog(catalog_path),
            JsonFileStore(store_path),
            autosave=settings.autosave,
        )

    ctx.ensure_object(dict)
    ctx.obj["editor_factory"] = editor_factory


@cli.command(name="fonts")
@click.pass_context
def list_fonts(ctx):
    """List the catalog font families and their variants."""
    editor = ctx.obj["editor_factory"]()
    for font in editor.catalog:
        variants = ", ".join(variant.label for variant in font.variants)
        click.echo(f"{font.family}: {variants}")


@cli.command()
@click.pass_context
def show(ctx):
    """Show the current selection and preview text."""
    _run(ctx, lambda editor: None)


@cli.command(name="font")
@click.argument("family")
@click.pass_context
def select_font(ctx, family):
    """Select a font family."""
    _run(ctx, lambda editor: editor.pick_font(family))


@cli.command(name="variant")
@click.argument("weight", type=int)
@click.pass_context
def select_variant(ctx, weight):
    """Select a variant of the current font by weight."""
    _run(ctx, lambda editor: editor.pick_variant(weight))


@cli.command(name="italic")
@click.pass_context
def toggle_italic(ctx):
    """Toggle italic.

    When the current font has no variant with the new italic flag the
    variant becomes unresolved. Unresolved selections are not autosaved,
    so run `save` to keep them for the next command.
    """
    _run(ctx, lambda editor: editor.toggle_italic())


@cli.command(name="text")
@click.argument("value")
@click.pass_context
def set_text(ctx, value):
    """Set the preview text."""
    _run(ctx, lambda editor: editor.edit_text(value))


@cli.command()
@click.pass_context
def save(ctx):
    """Save the current selection and text."""
    _run(ctx, lambda editor: editor.save())


@cli.command()
@click.pass_context
def reset(ctx):
    """Reset to the catalog defaults and clear the saved selection."""
    _run(ctx, lambda editor: editor.reset())


if __name__ == "__main__":
    cli()
