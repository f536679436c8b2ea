"""Command-line interface for registering SAS Logon OAuth clients."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Settings
from .exceptions import ClientRegistrationFailure, RegistrationError
from .logging_config import setup_logging
from .models import GrantType, RegistrationParameters
from .orchestrator import (
    RegistrationOrchestrator,
    build_authorize_url,
    derive_authorize_host,
    instructions,
)
from .output import write_result
from .payload import parse_autoapprove, parse_list

console = Console()
err_console = Console(stderr=True)


def load_settings(
    base_url: Optional[str],
    token_file: Optional[str],
    session_url: Optional[str],
    hostname: Optional[str],
    timeout: Optional[float],
    no_ssl_verify: bool,
    verbose: bool,
) -> Settings:
    """Environment settings with command-line overrides applied."""
    settings = Settings.from_env().override(
        base_url=base_url,
        token_file=Path(token_file) if token_file else None,
        session_url=session_url,
        hostname=hostname,
        timeout=timeout,
        log_level="DEBUG" if verbose else None,
    )
    if no_ssl_verify:
        settings = settings.override(verify_ssl=False)
    setup_logging(settings.log_level)
    return settings


@click.group()
@click.version_option(version=__version__, prog_name="viya-client-register")
def cli():
    """Register OAuth clients with SAS Logon using the Consul bootstrap token."""
    pass


@cli.command()
@click.option("--client-id", default="", help="Client ID (generated when omitted)")
@click.option("--client-secret", default="", help="Client secret (generated when omitted)")
@click.option("--client-name", default=None, help="Display name of the client")
@click.option("--scopes", default="", help="Space or comma separated scopes (default: openid)")
@click.option(
    "--grant-type",
    type=click.Choice([g.value for g in GrantType]),
    default=GrantType.AUTHORIZATION_CODE.value,
    show_default=True,
    help="OAuth grant type the client will use",
)
@click.option(
    "--authorized-grant-types",
    default="",
    help="Grant types to authorize (default: the selected grant type)",
)
@click.option("--required-user-groups", default="", help="Space or comma separated group IDs")
@click.option("--autoapprove", default=None, help="true, false, or a list of scopes to auto-approve")
@click.option("--use-session/--no-use-session", default=None, help="Allow the client to use the user's SAS Logon session")
@click.option("--access-token-validity", type=click.IntRange(min=0), default=None, help="Access token lifetime in seconds (default: platform default)")
@click.option("--refresh-token-validity", type=click.IntRange(min=0), default=None, help="Refresh token lifetime in seconds (default: platform default)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write client id/secret to a .env or .json file")
@click.option("--base-url", envvar="SAS_SERVICES_ENDPOINT", default=None, help="Viya services endpoint")
@click.option("--token-file", type=click.Path(dir_okay=False), default=None, help="Consul bootstrap token file")
@click.option("--session-url", default=None, help="Current SAS Studio session URL")
@click.option("--hostname", default=None, help="Host name for the authorize URL")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--no-ssl-verify", is_flag=True, help="Disable SSL certificate verification")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def register(
    client_id: str,
    client_secret: str,
    client_name: Optional[str],
    scopes: str,
    grant_type: str,
    authorized_grant_types: str,
    required_user_groups: str,
    autoapprove: Optional[str],
    use_session: Optional[bool],
    access_token_validity: Optional[int],
    refresh_token_validity: Optional[int],
    output: Optional[str],
    base_url: Optional[str],
    token_file: Optional[str],
    session_url: Optional[str],
    hostname: Optional[str],
    timeout: Optional[float],
    no_ssl_verify: bool,
    verbose: bool,
):
    """Register a new OAuth client with SAS Logon.

    Example:
        viya-client-register register --base-url https://viya.example.com
        viya-client-register register --client-id app1 --client-secret s3cret \\
            --scopes "openid profile" --access-token-validity 3600
    """
    try:
        settings = load_settings(base_url, token_file, session_url, hostname, timeout, no_ssl_verify, verbose)
    except ClientRegistrationFailure as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    params = RegistrationParameters(
        client_id=client_id,
        client_secret=client_secret,
        client_name=client_name,
        scopes=parse_list(scopes),
        grant_type=GrantType(grant_type),
        authorized_grant_types=parse_list(authorized_grant_types),
        required_user_groups=parse_list(required_user_groups),
        autoapprove=parse_autoapprove(autoapprove),
        use_session=use_session,
        access_token_validity=access_token_validity,
        refresh_token_validity=refresh_token_validity,
    )

    try:
        result = RegistrationOrchestrator(settings).register(params)
    except RegistrationError as e:
        err_console.print(f"[red]✗[/red] SAS Logon rejected the registration: {escape(e.message)}", soft_wrap=True)
        sys.exit(1)
    except ClientRegistrationFailure as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    console.print("[green]✓[/green] Client registered")
    for line in instructions(result):
        console.print(line, markup=False, highlight=False, soft_wrap=True)

    if output:
        try:
            path = write_result(result, output)
        except OSError as e:
            err_console.print(
                f"[red]Error: client {escape(result.client_id)} was registered, but its credentials "
                f"could not be written to {escape(output)}: {escape(str(e))}[/red]",
                soft_wrap=True,
            )
            sys.exit(1)
        console.print(f"[green]Credentials saved to {path}[/green]")


@cli.command("authorize-url")
@click.argument("client_id")
@click.option("--session-url", default=None, help="Current SAS Studio session URL")
@click.option("--hostname", default=None, help="Host name for the authorize URL")
def authorize_url(client_id: str, session_url: Optional[str], hostname: Optional[str]):
    """Print the authorization-code URL for an already registered client."""
    try:
        settings = Settings.from_env().override(session_url=session_url, hostname=hostname)
        host = derive_authorize_host(settings.session_url, settings.hostname)
    except ClientRegistrationFailure as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)
    click.echo(build_authorize_url(host, client_id))


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
