"""Point d'entrée en ligne de commande de démonstration.

Charge un fichier INI, l'interroge ou le modifie, puis le sauvegarde.
Les erreurs passent par une chaîne de handlers (console + logger).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from ini_store import __version__
from ini_store.config import StoreSettings, load_settings
from ini_store.document import IniDocumentStore
from ini_store.errors import (ApplicationError,
                              ConsoleErrorHandler,
                              ErrorHandlerChain,
                              LoggerErrorHandler)
from ini_store.logging import FileLogger, Logger, StandardLogger

app = typer.Typer(
    name="ini-store",
    help="Lire, modifier et réécrire des fichiers de configuration INI.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliContext:
    """Dépendances partagées par les commandes."""

    settings: StoreSettings
    logger: Logger
    errors: ErrorHandlerChain

    def new_store(self) -> IniDocumentStore:
        return IniDocumentStore(self.logger, self.settings)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ini-store {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    settings_file: Optional[Path] = typer.Option(
        None, "--settings", dir_okay=False,
        help="Réglages du magasin (TOML ou JSON)."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Fichier de log."
    ),
    version: bool = typer.Option(
        False, "--version", help="Affiche la version et quitte.",
        callback=_version_callback, is_eager=True
    ),
) -> None:
    errors = ErrorHandlerChain([ConsoleErrorHandler()])
    try:
        settings = load_settings(settings_file)
    except ApplicationError as e:
        errors.handle_and_exit(e)

    if log_file is not None:
        logger: Logger = FileLogger(str(log_file), settings.model_dump())
    else:
        logger = StandardLogger()
    errors.add_handler(LoggerErrorHandler(logger))

    ctx.obj = CliContext(settings=settings, logger=logger, errors=errors)


def _load(cli: CliContext, path: Path) -> IniDocumentStore:
    store = cli.new_store()
    store.load_from_file(path)
    return store


@app.command("sections")
def sections_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Fichier INI à lire."),
) -> None:
    """Affiche les noms de section."""
    cli: CliContext = ctx.obj
    try:
        store = _load(cli, path)
    except ApplicationError as e:
        cli.errors.handle_and_exit(e)
    for name in store.list_section_names():
        typer.echo(name)


@app.command("get")
def get_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Fichier INI à lire."),
    section: str = typer.Argument(..., help="Nom de la section."),
    key: str = typer.Argument(..., help="Nom de la clé."),
) -> None:
    """Affiche la valeur d'une clé."""
    cli: CliContext = ctx.obj
    try:
        value = _load(cli, path).get(section, key)
    except ApplicationError as e:
        cli.errors.handle_and_exit(e)
    typer.echo(value)


@app.command("set")
def set_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Fichier INI à modifier."),
    section: str = typer.Argument(..., help="Nom de la section."),
    key: str = typer.Argument(..., help="Nom de la clé existante."),
    value: str = typer.Argument(..., help="Nouvelle valeur."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", dir_okay=False,
        help="Fichier de destination (le fichier source par défaut)."
    ),
) -> None:
    """Remplace la valeur d'une clé existante et sauvegarde."""
    cli: CliContext = ctx.obj
    try:
        store = _load(cli, path)
        store.set(section, key, value)
        store.save_to_file(output or path)
    except ApplicationError as e:
        cli.errors.handle_and_exit(e)


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source: Path = typer.Argument(..., help="Fichier INI source."),
    destination: Path = typer.Argument(..., help="Fichier INI cible."),
) -> None:
    """Recharge un fichier INI et le réécrit sous forme normalisée."""
    cli: CliContext = ctx.obj
    try:
        _load(cli, source).save_to_file(destination)
    except ApplicationError as e:
        cli.errors.handle_and_exit(e)


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Fichier INI à afficher."),
) -> None:
    """Affiche le document rendu."""
    cli: CliContext = ctx.obj
    try:
        store = _load(cli, path)
    except ApplicationError as e:
        cli.errors.handle_and_exit(e)
    typer.echo(store.render(), nl=False)
