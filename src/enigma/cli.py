from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from enigma.core.errors import EnigmaError
from enigma.core.utils import group_text
from enigma.frontend.config import MachineConfig, load_config, load_default_config
from enigma.frontend.session import process
from enigma.frontend.settings import configure
from enigma.log import configure_logging, log_trace

app = typer.Typer(help="Enigma CLI: rotor cipher machine simulator.")


@app.callback()
def _init(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every rotor step to stderr."),
):
    configure_logging(verbose)
    ctx.obj = {"verbose": verbose}


def _fail(e: Exception) -> NoReturn:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _load(config: Optional[Path]) -> MachineConfig:
    return load_default_config() if config is None else load_config(config)


@app.command()
def run(
    ctx: typer.Context,
    config: Path = typer.Argument(..., help="Machine configuration file."),
    input_file: Optional[Path] = typer.Argument(None, metavar="INPUT", help="Messages to process (default: stdin)."),
    output_file: Optional[Path] = typer.Argument(None, metavar="OUTPUT", help="Where to write results (default: stdout)."),
):
    """Process a stream of settings lines and messages."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    try:
        cfg = load_config(config)
        machine = cfg.build_machine(trace=log_trace if verbose else None)

        if input_file is not None:
            try:
                lines = input_file.read_text(encoding="utf-8").splitlines()
            except OSError:
                raise EnigmaError(f"could not open {input_file}") from None
        else:
            lines = sys.stdin

        if output_file is None:
            # Lines before a failing message are still printed
            for line in process(machine, lines):
                typer.echo(line)
            return

        results = list(process(machine, lines))
        try:
            output_file.write_text("".join(line + "\n" for line in results), encoding="utf-8")
        except OSError:
            raise EnigmaError(f"could not open {output_file}") from None
    except EnigmaError as e:
        _fail(e)


@app.command()
def convert(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Message to encrypt or decrypt."),
    settings: str = typer.Option(..., "--settings", "-s", help='Settings line, e.g. "* B Beta III IV I AXLE (HQ) (EX)".'),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: packaged Enigma rotors)."),
    group: bool = typer.Option(True, "--group/--no-group", help="Print in groups of five."),
):
    """Convert one message with one settings line."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    try:
        machine = _load(config).build_machine(trace=log_trace if verbose else None)
        configure(machine, settings)
        out = machine.convert_text(text)
    except EnigmaError as e:
        _fail(e)
    typer.echo(group_text(out) if group else out)


@app.command()
def rotors(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (default: packaged Enigma rotors)."),
):
    """List the rotors a configuration provides."""
    try:
        cfg = _load(config)
    except EnigmaError as e:
        _fail(e)

    typer.echo(f"alphabet: {cfg.alphabet.chars}")
    typer.echo(f"slots: {cfg.num_rotors}  pawls: {cfg.pawls}")
    width = max((len(r.name) for r in cfg.pool), default=0)
    for rotor in cfg.pool:
        typer.echo(f"{rotor.name:<{width}}  {rotor.type_tag():<4}  {rotor.permutation}")


def main():
    app()


if __name__ == "__main__":
    main()
