from __future__ import annotations
import logging
from typing import Final
import typer
from rich.console import Console

from .client import Client
from .config import (
    Option,
    Settings,
    assume_preauthentication,
    disable_pafx_fast,
    new_settings,
    pre_auth_etype,
    socks_addr,
)
from .config import logger as logger_option
from .errors import SerializationError
from .etypes import etype_name, parse_etype
from .reporter import Reporter

app = typer.Typer(add_completion=False, no_args_is_help=True)
settings_app = typer.Typer(add_completion=False, no_args_is_help=True)

log: Final = logging.getLogger(__name__)

DISABLE_FAST_OPTION = typer.Option(False, "--disable-pafx-fast", help="Do not use PA_FX_FAST.")
ASSUME_PREAUTH_OPTION = typer.Option(False, "--assume-preauth", help="Send pre-authentication data up front.")
ETYPE_OPTION = typer.Option(None, "--preauth-etype", help="Pre-authentication etype, name or number.")
SOCKS_OPTION = typer.Option("", "--socks-addr", help="SOCKS5 proxy as host:port.")
PRINCIPAL_OPTION = typer.Option("user@EXAMPLE.COM", "--principal", help="Principal used for diagnostics.")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _settings(
    disable_fast: bool,
    assume_preauth: bool,
    etype: str | None,
    socks: str,
    debug: bool,
) -> Settings:
    options: list[Option] = [
        disable_pafx_fast(disable_fast),
        assume_preauthentication(assume_preauth),
        socks_addr(socks),
    ]
    if etype is not None:
        try:
            options.append(pre_auth_etype(parse_etype(etype)))
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--preauth-etype")
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s",
        )
        options.append(logger_option(logging.getLogger("krbclient.client")))
    return new_settings(*options)


def _client(principal: str, settings: Settings) -> Client:
    username, _, realm = principal.partition("@")
    client = Client(username, realm, settings)
    client.log(
        "settings for %s: disable PA_FX_FAST=%s, assume pre-auth=%s, etype=%s, proxy=%s",
        client.principal,
        settings.disable_pafx_fast,
        settings.assume_preauthentication,
        etype_name(settings.pre_auth_etype),
        settings.socks_addr or "none",
    )
    return client


@app.callback()
def main() -> None:
    pass


@settings_app.command("json")
def settings_json(
    disable_fast: bool = DISABLE_FAST_OPTION,
    assume_preauth: bool = ASSUME_PREAUTH_OPTION,
    etype: str | None = ETYPE_OPTION,
    socks: str = SOCKS_OPTION,
    principal: str = PRINCIPAL_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Print the JSON form of the client settings."""
    client = _client(principal, _settings(disable_fast, assume_preauth, etype, socks, debug))
    try:
        text = client.settings.to_json()
    except SerializationError as e:
        log.debug("serialization failed: %s", e.original_error)
        Reporter(Console(stderr=True)).error(f"Cannot encode settings: {e}")
        raise typer.Exit(code=1)
    typer.echo(text)


@settings_app.command("show")
def settings_show(
    disable_fast: bool = DISABLE_FAST_OPTION,
    assume_preauth: bool = ASSUME_PREAUTH_OPTION,
    etype: str | None = ETYPE_OPTION,
    socks: str = SOCKS_OPTION,
    principal: str = PRINCIPAL_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Render the client settings as a table."""
    client = _client(principal, _settings(disable_fast, assume_preauth, etype, socks, debug))
    Reporter(Console()).settings(client.settings, title=client.principal)


app.add_typer(settings_app, name="settings")

if __name__ == "__main__":
    app()
