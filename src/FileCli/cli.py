import typer
import sys
import logging
from pathlib import Path
from typing import List, Optional
from typing_extensions import Annotated

# Add the project root's 'src' directory to the Python path
# This allows for absolute imports from 'src' when running as a script
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from Configuration import ConfigLoader, FileServiceConfig, FileServiceSettings
from Events import EventDispatcher
from FileSystem import FileService
from Utils.logging import setup_logging

# Create a Typer app instance
app = typer.Typer(
    name="filecli",
    help="Run file operations through the configured file service adapter.",
    add_completion=False
)

# Get a logger instance for this module
logger = logging.getLogger(__name__)


def _report_error(source: FileService, message: str) -> None:
    typer.echo(f"Error: {message}", err=True)


def _service(ctx: typer.Context) -> FileService:
    return ctx.obj


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[Optional[Path], typer.Option(
        help="YAML file selecting the adapter and its options.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel="Configuration"
    )] = None,
    log_dir: Annotated[Optional[Path], typer.Option(
        help="Directory to store log files. Will be created if it doesn't exist.",
        file_okay=False,
        dir_okay=True,
        writable=True,
        resolve_path=True,
        rich_help_panel="Logging Configuration"
    )] = None,
    log_level: Annotated[str, typer.Option(
        help="Set the logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        case_sensitive=False,
        rich_help_panel="Logging Configuration"
    )] = "WARNING"
):
    """Set up logging and the file service before running a command."""
    numeric_log_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_log_level, int):
        typer.echo(f"Warning: Invalid log level '{log_level}'. Defaulting to WARNING.", err=True)
        numeric_log_level = logging.WARNING

    if log_dir is not None:
        try:
            setup_logging(log_dir=str(log_dir), log_level=numeric_log_level)
        except OSError as e:
            logging.basicConfig(level=numeric_log_level, format='%(asctime)s - %(levelname)s - %(message)s')
            logger.error(f"Error setting up log file in {log_dir}: {e}. Switched to basicConfig.")
    else:
        logging.basicConfig(level=numeric_log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    settings = ConfigLoader().load_settings(config) if config is not None else FileServiceSettings()

    dispatcher = EventDispatcher()
    dispatcher.subscribe(FileServiceConfig.ERROR_EVENT, _report_error)

    service = FileService.from_settings(settings, dispatcher)
    if not service.init():
        raise typer.Exit(code=1)
    ctx.obj = service


@app.command("ls")
def list_files(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to list recursively.")],
    exclude: Annotated[Optional[List[Path]], typer.Option(
        "--exclude", "-x",
        help="Directory to skip, matched against its resolved path. Repeatable."
    )] = None
):
    """List every file below PATH, sorted."""
    restrict = [str(p.resolve()) for p in exclude] if exclude else None
    for file_path in _service(ctx).dir(path, restrict):
        typer.echo(file_path)


@app.command("cp")
def copy(
    ctx: typer.Context,
    src: Annotated[Path, typer.Argument(help="Source file or directory.")],
    dst: Annotated[Path, typer.Argument(help="Destination file path, or existing directory.")]
):
    """Copy a file to a file path, or a directory's content into a directory."""
    if not _service(ctx).copy_path(src, dst):
        _fail(f"Cannot copy {src} to {dst}")


@app.command("mkdir")
def make_directory(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to create, with missing parents.")]
):
    """Create a directory."""
    service = _service(ctx)
    if service.exists(path):
        _fail(f"Already exists: {path}")
    if not service.mkdir(path):
        _fail(f"Cannot create directory {path}")


@app.command("cat")
def cat(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to print.")]
):
    """Print the content of a file."""
    data = _service(ctx).read(path)
    if data is None:
        _fail(f"Cannot read {path}")
    typer.echo(data, nl=False)


@app.command("write")
def write(
    ctx: typer.Context,
    directory: Annotated[Path, typer.Argument(help="Existing directory to write into.")],
    filename: Annotated[str, typer.Argument(help="Name of the file to create or overwrite.")],
    content: Annotated[Optional[str], typer.Argument(help="Text to write. Read from stdin when omitted.")] = None
):
    """Write text, or stdin, to DIRECTORY/FILENAME."""
    data = content if content is not None else sys.stdin.buffer.read()
    result = _service(ctx).write(data, filename, directory)
    if result is None:
        _fail(f"Cannot write {filename} to {directory}")
    typer.echo(result)


@app.command("rm")
def remove(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File to delete.")]
):
    """Delete a file."""
    if not _service(ctx).delete(path):
        _fail(f"Cannot delete {path}")


@app.command("info")
def info(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Path to describe.")]
):
    """Show whether PATH exists, its type, extension and mime type."""
    service = _service(ctx)
    typer.echo(f"path: {path}")
    typer.echo(f"exists: {service.exists(path)}")
    typer.echo(f"directory: {service.is_dir(path)}")
    typer.echo(f"extension: {service.extension(path) or '-'}")
    typer.echo(f"mime: {service.mime(path) or '-'}")


if __name__ == "__main__":
    app()
