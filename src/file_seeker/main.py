# src/file_seeker/main.py
import logging
from pathlib import Path
from typing import List, Optional

import typer
from platformdirs import user_config_dir
from typing_extensions import Annotated

from . import __version__
from .check_path import validate_directory, validate_file
from .errors import JobsFileError, MissingExtensionError, NotAFileError
from .logging_config import setup_logging
from .models import load_jobs_file
from .seek_file import seek_file_by_extension

logger = logging.getLogger(__name__)

DEFAULT_JOBS_FILE = Path(user_config_dir("fseek")) / "fseek.yaml"


# --- Typer app ---
app = typer.Typer(
    name="fseek",
    help="Validates paths and lists the files in a directory that have a given extension.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool):
    if value:
        typer.echo(f"fseek version: {__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    version: Annotated[Optional[bool], typer.Option(
        "--version", "-V",
        help="Show the application's version and exit.",
        callback=version_callback,
        is_eager=True,
    )] = None,
    verbose: Annotated[bool, typer.Option(
        "--verbose", "-v",
        help="Log debug messages to stderr.",
    )] = False,
):
    """
    fseek: path checks and extension lookup.
    """
    setup_logging(verbose=verbose)


def _fail(message: str, code: int = 1):
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


# --- 'check-dir' ---
@app.command("check-dir")
def check_dir(
    path: Annotated[str, typer.Argument(help="Path that must be an existing directory.")],
):
    """
    Prints the canonical form of PATH if it is a directory.
    """
    try:
        typer.echo(validate_directory(path))
    except NotADirectoryError as e:
        _fail(f"{e.filename} is not a directory")
    except OSError as e:
        _fail(f"Cannot resolve {path}: {e}")


# --- 'check-file' ---
@app.command("check-file")
def check_file(
    path: Annotated[str, typer.Argument(help="Path that must be an existing regular file.")],
):
    """
    Prints the canonical form of PATH if it is a regular file.
    """
    try:
        typer.echo(validate_file(path))
    except NotAFileError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot resolve {path}: {e}")


# --- 'seek' ---
@app.command()
def seek(
    directory: Annotated[str, typer.Argument(help="Directory to look in (not searched recursively).")],
    extension: Annotated[str, typer.Argument(help="Extension without the leading dot, e.g. 'pdf'.")],
    output_path: Annotated[Optional[Path], typer.Option(
        "--output", "-o",
        help="Write the matching paths to this file instead of stdout.",
        resolve_path=True,
    )] = None,
):
    """
    Lists the files directly inside DIRECTORY whose extension is exactly EXTENSION.
    """
    files = _run_seek(directory, extension)
    lines = [str(p) for p in sorted(files)]

    if output_path is None:
        for line in lines:
            typer.echo(line)
        return

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("".join(f"{line}\n" for line in lines), encoding='utf-8')
    except OSError as e:
        _fail(f"Could not write output file {output_path}: {e}", code=2)
    typer.secho(f"Wrote {len(lines)} path(s) to {output_path}", fg=typer.colors.GREEN, err=True)


def _run_seek(directory: str, extension: str) -> List[Path]:
    try:
        return seek_file_by_extension(directory, extension)
    except MissingExtensionError as e:
        _fail(str(e))
    except NotADirectoryError as e:
        _fail(f"{e.filename} is not a directory")
    except OSError as e:
        _fail(f"Cannot read {directory}: {e}")


# --- 'batch' ---
@app.command()
def batch(
    jobs_path: Annotated[Path, typer.Argument(
        help="YAML file listing the directories and extensions to look up.",
    )] = DEFAULT_JOBS_FILE,
):
    """
    Runs every job in a jobs file and prints the matches grouped per job.
    """
    try:
        jobs_file = load_jobs_file(jobs_path)
    except JobsFileError as e:
        _fail(str(e))

    failed = 0
    for job in jobs_file.jobs:
        typer.secho(f"# {job.directory} (.{job.extension})", bold=True)
        try:
            files = seek_file_by_extension(job.directory, job.extension)
        except (MissingExtensionError, OSError) as e:
            failed += 1
            typer.secho(f"  Error: {e}", fg=typer.colors.RED, err=True)
            continue
        for p in sorted(files):
            typer.echo(f"  {p}")
        logger.debug(f"Job {job.directory} matched {len(files)} file(s)")

    if failed:
        typer.secho(f"{failed} of {len(jobs_file.jobs)} job(s) failed.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
