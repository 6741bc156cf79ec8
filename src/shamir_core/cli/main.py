"""Typer-based command line interface for shamir-core."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, NoReturn, Optional

import click
import typer

from ..config import AppConfig, SharingConfig, load_config
from ..exceptions import ShamirError
from ..logging import configure_logging
from ..primes import mersenne_prime, validate_prime
from ..reconstruct import reconstruct
from ..session import ShamirSession
from ..utils.codec import secret_to_bytes
from ..utils.validation import parse_share_token

app = typer.Typer(help="shamir-core command line interface")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    ctx.obj = load_config(config)
    configure_logging(ctx.obj.logging.normalized_level())


def _sharing_config() -> SharingConfig:
    ctx = click.get_current_context()
    config: AppConfig = ctx.find_root().obj
    return config.sharing


def _resolve_prime(sharing: SharingConfig, prime: Optional[str], exponent: Optional[int]) -> int:
    if prime is not None:
        return int(prime, 0)
    if exponent is not None:
        return mersenne_prime(exponent)
    return sharing.resolved_prime()


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def split(
    secret: str = typer.Argument(..., help="Secret to share, UTF-8 text unless --hex is given"),
    hex_input: bool = typer.Option(False, "--hex", help="Treat SECRET as hexadecimal bytes"),
    shares: Optional[int] = typer.Option(None, "-n", "--shares", min=1, help="Total shares to create"),
    threshold: Optional[int] = typer.Option(None, "-t", "--threshold", min=1, help="Shares needed to reconstruct"),
    prime: Optional[str] = typer.Option(None, "--prime", help="Explicit field modulus"),
    exponent: Optional[int] = typer.Option(None, "--exponent", min=2, help="Use the Mersenne prime 2**EXPONENT - 1"),
    validate: bool = typer.Option(False, "--validate", help="Check every threshold-sized subset before printing"),
) -> None:
    sharing = _sharing_config()
    session = ShamirSession.from_config(sharing)
    try:
        secret_bytes = bytes.fromhex(secret) if hex_input else secret.encode("utf-8")
        session.validate_and_set_prime(_resolve_prime(sharing, prime, exponent))
        if shares is not None:
            session.set_total_shares(shares)
        if threshold is not None:
            session.set_required_shares(threshold)
        values = session.init_secrets(secret_bytes).create_shares()
        checked = session.validate_share_combinations(values) if validate else None
    except (ShamirError, ValueError) as exc:
        _fail(exc)
    finally:
        session.clear_secrets()

    payload = {
        "prime": str(session.prime),
        "threshold": session.required_shares,
        "shares": [{"position": index + 1, "value": str(value)} for index, value in enumerate(values)],
    }
    if checked is not None:
        payload["combinations_checked"] = checked
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def combine(
    share: List[str] = typer.Option(..., "--share", "-s", help="Share as POSITION:VALUE, repeatable"),
    prime: Optional[str] = typer.Option(None, "--prime", help="Explicit field modulus"),
    exponent: Optional[int] = typer.Option(None, "--exponent", min=2, help="Use the Mersenne prime 2**EXPONENT - 1"),
    output: str = typer.Option("text", "--output", "-o", help="Render the secret as text, hex or int"),
) -> None:
    sharing = _sharing_config()
    try:
        points = [parse_share_token(token) for token in share]
        secret = reconstruct(points, _resolve_prime(sharing, prime, exponent))
        if output == "int":
            rendered = str(secret)
        elif output == "hex":
            rendered = secret_to_bytes(secret).hex()
        elif output == "text":
            rendered = secret_to_bytes(secret).decode("utf-8")
        else:
            raise ValueError(f"Unknown output format '{output}'")
    except (ShamirError, ValueError) as exc:
        _fail(exc)
    typer.echo(rendered)


@app.command("check-prime")
def check_prime(
    prime: Optional[str] = typer.Option(None, "--prime", help="Modulus to test"),
    exponent: Optional[int] = typer.Option(None, "--exponent", min=2, help="Test 2**EXPONENT - 1"),
) -> None:
    sharing = _sharing_config()
    try:
        candidate = _resolve_prime(sharing, prime, exponent)
        validate_prime(candidate, sharing.primality_rounds)
    except (ShamirError, ValueError) as exc:
        _fail(exc)
    typer.echo(f"prime ({candidate.bit_length()} bits)")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
