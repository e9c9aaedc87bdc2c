from __future__ import annotations

import logging
import random
import signal
import sys
from typing import Optional

import click

from .config import ensure_config_dir, default_config_dir, load_config
from .content import VocabularyKind, generate
from .errors import GerfError, InputError
from .logs import setup_logging, show_log_file
from .policy import Verdict, enforce
from .units import SizeSpec, format_size, parse_magnitude, unit_from_flags
from .writer import check_destination, populate_file

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def _report(err: GerfError) -> None:
    logger.log(err.level, err.message)
    if err.hint:
        logger.info(err.hint)


def _let_user_confirm() -> bool:
    click.echo(f"This could produce {click.style('VERY LARGE', fg='red', bold=True)} files!")
    try:
        return click.confirm("Are you sure you want to exceed the default maximum filesize?", default=False)
    except click.Abort:
        return False


def _vocabulary_from_flags(words: bool, numbers: bool) -> VocabularyKind:
    if words and numbers:
        raise InputError("Only one content kind may be given: --words or --numbers")
    return VocabularyKind.NUMBERS if numbers else VocabularyKind.WORDS


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, prog_name="gerf")
@click.option("-b", "--byte", "unit_byte", is_flag=True, help="Size is given in bytes (default).")
@click.option("-k", "--kb", "unit_kb", is_flag=True, help="Size is given in kilobytes (1024 bytes).")
@click.option("-m", "--mb", "unit_mb", is_flag=True, help="Size is given in megabytes.")
@click.option("-g", "--gb", "unit_gb", is_flag=True, help="Size is given in gigabytes.")
@click.option("-t", "--tb", "unit_tb", is_flag=True, help="Size is given in terabytes.")
@click.option("-w", "--words", is_flag=True, help="Fill the file with words (default).")
@click.option("-n", "--numbers", is_flag=True, help="Fill the file with numbers.")
@click.option("-e", "--exceed", is_flag=True, help="Exceed the warning threshold without confirmation. DANGER: can produce very large files.")
@click.option("-f", "--force", "-o", "--override", "force", is_flag=True, help="Override an existing file.")
@click.option("-p", "--path", "--name", "path", type=click.Path(dir_okay=False), default=None, help="Custom filepath / filename [default: gerf.txt].")
@click.option("--seed", type=int, default=None, help="Seed the random source for reproducible content.")
@click.option("-L", "--log", "show_log", is_flag=True, help="Show content of the log file.")
@click.argument("size", required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    unit_byte: bool,
    unit_kb: bool,
    unit_mb: bool,
    unit_gb: bool,
    unit_tb: bool,
    words: bool,
    numbers: bool,
    exceed: bool,
    force: bool,
    path: Optional[str],
    seed: Optional[int],
    show_log: bool,
    size: Optional[str],
) -> None:
    """Generate a file of SIZE bytes filled with random (or not so random) content.

    SIZE is read in bytes unless one of the unit flags is given.
    `gerf log` shows the log file, same as --log.
    """
    try:
        config_dir = ensure_config_dir(default_config_dir())
        config = load_config(config_dir)
        setup_logging(config_dir, config.log_level)

        # `gerf log` works like -L/--log
        if show_log or size == "log":
            click.echo(show_log_file(config_dir))
            return

        if size is None:
            click.echo(ctx.get_help())
            return

        unit = unit_from_flags(unit_byte, unit_kb, unit_mb, unit_gb, unit_tb)
        vocabulary = _vocabulary_from_flags(words, numbers)
        target = SizeSpec(parse_magnitude(size), unit).to_bytes()

        verdict = enforce(target, config.policy(), exceed, _let_user_confirm)
        if verdict is Verdict.CONFIRM:
            logger.info("Exceeding the warning threshold of %s", format_size(config.warn_size))

        dest = check_destination(path or config.default_path, force)
        rng = random.Random(seed) if seed is not None else None
        content = generate(target, vocabulary, rng=rng)
        written = populate_file(dest, content)
        logger.info("Created '%s' with %d bytes (%s) of %s", dest, written, format_size(written), vocabulary.value)
    except GerfError as e:
        _report(e)
        ctx.exit(e.exit_code)


def _handle_sigint(_sig, _frm) -> None:
    click.echo(click.style("Received Ctrl-C!", italic=True))
    sys.exit(0)


def main() -> None:  # pragma: no cover
    signal.signal(signal.SIGINT, _handle_sigint)
    cli(prog_name="gerf")
