"""Command-line interface for the comment normalizer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from comment_normalizer.config.settings import settings
from comment_normalizer.core.emoji_dictionary import EmojiDictionary
from comment_normalizer.core.exceptions import NormalizerError
from comment_normalizer.core.normalizer import CommentNormalizer
from comment_normalizer.storage.tabular import errors_to_dataframe, read_comments, write_table
from comment_normalizer.utils.logging_utils import setup_logging

app = typer.Typer(help="Comment Normalizer - Extract URLs, timestamps, mentions, emoticons and emoji from YouTube comments")

logger = logging.getLogger(__name__)


def _default_errors_path(output: Path) -> Path:
    return output.with_name(f"{output.stem}_errors{output.suffix}")


def _resolve_log_level(loglevel: str, verbose: bool = False) -> str:
    return "DEBUG" if verbose or settings.DEBUG else loglevel


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{settings.APP_NAME} {settings.APP_VERSION}")
        raise typer.Exit()


@app.callback()
def cli(
    version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit")] = None,
) -> None:
    """Comment Normalizer command-line interface."""


@app.command()
def normalize(
    input_path: Annotated[Path, typer.Argument(help="Raw comment table (.csv or .json records)")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Processed comment table (.csv or .json)")],
    schema: Annotated[str, typer.Option("--schema", "-s", help="Source schema: schemaA (tuber) or schemaB (vosonSML)")] = settings.SOURCE_SCHEMA,
    errors: Annotated[Optional[Path], typer.Option("--errors", "-e", help="Where to write per-record errors (default: <output>_errors)")] = None,
    dictionary: Annotated[Path, typer.Option("--dictionary", "-d", help="Emoji dictionary CSV")] = Path(settings.EMOJI_DICTIONARY_PATH),
    library: Annotated[bool, typer.Option("--library/--no-library", help="Describe emoji missing from the dictionary with names from the emoji package")] = settings.EMOJI_DICTIONARY_INCLUDE_LIBRARY,
    workers: Annotated[int, typer.Option("--workers", "-w", min=1, help="Worker threads")] = settings.NORMALIZER_MAX_WORKERS,
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Emit logs as JSON")] = False,
) -> None:
    """
    Normalize a table of YouTube comments.

    Writes the processed records and, if any record failed, an error table.
    """
    setup_logging(log_level=_resolve_log_level(loglevel, verbose), json_format=json_logs)

    try:
        emoji_dictionary = EmojiDictionary.load(dictionary, include_library=library)
        normalizer = CommentNormalizer(emoji_dictionary, schema_kind=schema, max_workers=workers)
        df = read_comments(input_path)
        processed_df, record_errors = normalizer.normalize_dataframe(df)
        write_table(processed_df, output)
    except (NormalizerError, OSError, ValueError) as e:
        logger.error(f"Normalization failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if record_errors:
        errors_path = errors or _default_errors_path(output)
        write_table(errors_to_dataframe(record_errors), errors_path)
        typer.echo(f"{len(record_errors)} record(s) failed; see {errors_path}", err=True)

    typer.echo(f"Processed {len(processed_df)} of {len(df)} comment(s) -> {output}")


@app.command("build-dictionary")
def build_dictionary(
    output: Annotated[Path, typer.Option("--output", "-o", help="Where to write the dictionary CSV")] = Path(settings.EMOJI_DICTIONARY_PATH),
    merge: Annotated[Optional[Path], typer.Option("--merge", "-m", help="Existing dictionary whose entries take precedence")] = None,
    language: Annotated[str, typer.Option("--language", help="Language of the descriptions")] = "en",
    loglevel: Annotated[str, typer.Option("--loglevel", "-l", help="Logging level")] = "INFO",
) -> None:
    """
    Regenerate the emoji dictionary from the emoji package's data.

    With --merge, descriptions from an existing table are kept for the glyphs it lists.
    """
    setup_logging(log_level=_resolve_log_level(loglevel))

    try:
        dictionary = EmojiDictionary.from_emoji_library(language=language)
        if merge is not None:
            dictionary = dictionary.merged(EmojiDictionary.from_csv(merge))
        output.parent.mkdir(parents=True, exist_ok=True)
        dictionary.to_csv(output)
    except (NormalizerError, OSError) as e:
        logger.error(f"Building the emoji dictionary failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {len(dictionary)} emoji descriptions to {output}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
