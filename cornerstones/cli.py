import logging
import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import uvicorn
import yaml  # type: ignore
from dotenv import load_dotenv

from cornerstones import parser
from cornerstones.json_utils import json_dumps
from cornerstones.parser.types import BlockList
from cornerstones.progress import (
    DEFAULT_PROGRESS_PATH,
    INTRO_SLUG,
    ProgressStore,
    checklist_prefix,
    progress_key,
)

try:
    __version__ = version("cornerstones")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

SOURCE_ARGUMENT = click.Path(exists=True, file_okay=True, dir_okay=False)

progress_option = click.option(
    "--progress",
    "progress_path",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="CORNERSTONES_PROGRESS",
    default=str(DEFAULT_PROGRESS_PATH),
    show_default=True,
    help="JSON file holding checklist progress.",
)


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="CORNERSTONES_LOG_FILE",
)
@click.version_option(__version__, prog_name="cornerstones")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load_progress(progress_path: str) -> ProgressStore:
    """Load the progress store, reporting corrupt files as CLI errors."""

    try:
        return ProgressStore.load(Path(progress_path))
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("parse")
@click.argument("source", type=SOURCE_ARGUMENT)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
def parse_command(
    source: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Convert a markdown source to structured data.

    Args:
        source: Path of the markdown document.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is derived from the
            source file name.
        output_format: Format of the converted data.
    """

    source_path = Path(source)
    data = parser.document_to_dict(parser.load_document(source_path))

    if output_format == "json":
        content = json_dumps(data, indent=True)
    else:
        content = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    if not output_path:
        click.echo(content)
        return

    final_path = Path(output_path)

    # When the user passes a directory, name the file after the source.
    if final_path.is_dir():
        final_path = final_path / f"{source_path.stem}.{output_format}"

    final_path.write_text(content, encoding="utf-8")
    logging.info("Wrote %d sections to %s", len(data), final_path)


@cli.command("sections")
@click.argument("source", type=SOURCE_ARGUMENT)
def sections_command(source: str) -> None:
    """List section and subsection slugs with their titles."""

    for section in parser.load_document(Path(source)):
        click.echo(f"{section.slug}\t{section.title}")
        for sub in section.subsections:
            click.echo(f"  {sub.slug}\t{sub.title}")


def _format_blocks(
    blocks: BlockList,
    section_slug: str,
    container_slug: str,
    progress: ProgressStore,
) -> list[str]:
    """Render content blocks as plain text lines.

    Args:
        blocks: Blocks of one container.
        section_slug: Slug of the section holding the blocks.
        container_slug: Subsection slug or the intro slug.
        progress: Store used to mark completed checklist items.

    Returns:
        Lines of text, checklist items prefixed by a check mark.
    """

    lines: list[str] = []
    for index, block in enumerate(blocks):
        if isinstance(block, parser.TextBlock):
            lines.append(block.content)
        elif isinstance(block, parser.RuleBlock):
            lines.append("-" * 40)
        elif isinstance(block, parser.ChecklistBlock):
            prefix = checklist_prefix(section_slug, container_slug, index)
            for item in block.items:
                key = progress_key(prefix, item)
                done = progress.is_completed(key)
                mark = "x" if done else " "
                lines.append(f"[{mark}] {item.text}  ({key})")
        elif isinstance(block, parser.LinksBlock):
            for link in block.items:
                suffix = f" - {link.description}" if link.description else ""
                lines.append(f"* {link.text} <{link.url}>{suffix}")
        elif isinstance(block, parser.CodeBlock):
            lines.append(f"```{block.language}")
            lines.append(block.code)
            lines.append("```")
    return lines


@cli.command("show")
@click.argument("source", type=SOURCE_ARGUMENT)
@click.argument("slug")
@progress_option
def show_command(source: str, slug: str, progress_path: str) -> None:
    """Print one section as text, marking completed checklist items."""

    sections = parser.load_document(Path(source))
    section = parser.find_section(sections, slug)
    if section is None:
        raise click.ClickException(f"Section not found: {slug}")

    progress = _load_progress(progress_path)

    lines = [parser.display_title(section.title), ""]
    lines.extend(
        _format_blocks(section.intro, section.slug, INTRO_SLUG, progress)
    )
    for sub in section.subsections:
        lines.extend(["", f"## {sub.title}", ""])
        lines.extend(
            _format_blocks(sub.blocks, section.slug, sub.slug, progress)
        )

    click.echo("\n".join(lines))


@cli.command("toggle")
@click.argument("key")
@progress_option
def toggle_command(key: str, progress_path: str) -> None:
    """Flip the completion flag stored under KEY."""

    completed = _load_progress(progress_path).toggle(key)
    click.echo(f"{key}: {'completed' if completed else 'not completed'}")


@cli.command("reset")
@click.option("--prefix", default=None, help="Only clear keys with PREFIX.")
@progress_option
def reset_command(prefix: Optional[str], progress_path: str) -> None:
    """Clear stored progress."""

    cleared = _load_progress(progress_path).reset(prefix)
    click.echo(f"Cleared {cleared} entries")


@cli.command("progress")
@click.argument("source", type=SOURCE_ARGUMENT)
@progress_option
def progress_command(source: str, progress_path: str) -> None:
    """Report completed and total checklist items per section."""

    sections = parser.load_document(Path(source))
    summary = _load_progress(progress_path).summary(sections)

    for section in sections:
        done, total = summary[section.slug]
        click.echo(f"{section.slug}\t{done}/{total}")


@cli.command("serve")
@click.option(
    "--source",
    type=SOURCE_ARGUMENT,
    envvar="CORNERSTONES_SOURCE",
    default=None,
    help="Markdown document to serve.",
)
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, default=8000, show_default=True)
@click.option("--reload", is_flag=True, help="Reload on code changes.")
def serve_command(
    source: Optional[str], host: str, port: int, reload: bool
) -> None:
    """Serve the document as one web page per section."""

    # The application reads its configuration from the environment.
    if source:
        os.environ["CORNERSTONES_SOURCE"] = source

    logging.info("Starting cornerstones on %s:%d", host, port)
    uvicorn.run("cornerstones.web:app", host=host, port=port, reload=reload)
