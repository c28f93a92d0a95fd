"""CLI entry point for gitfame.

Counts, for every contributor, the lines they last touched at a revision,
the distinct commits those lines come from, and the distinct files they
appear in. Results go to stdout; progress and diagnostics go to stderr.
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from gitfame_core.config import FORMAT_CHOICES, ORDER_BY_CHOICES, load_config, split_list, validate_config
from gitfame_core.errors import ConfigError, GitFameError
from gitfame_core.fame import run_fame
from gitfame_core.git import is_repository
from gitfame_render.base import BaseRenderer
from gitfame_render.models import AuthorRow

console = Console(stderr=True)


def _build_renderer(fmt: str) -> BaseRenderer:
    """Instantiate the renderer for an output format name.

    The format set is closed: anything not listed here is a configuration
    error, caught earlier by validate_config and click.Choice.
    """
    if fmt == "tabular":
        from gitfame_render.tabular import TabularRenderer

        return TabularRenderer()

    if fmt == "csv":
        from gitfame_render.delimited import CsvRenderer

        return CsvRenderer()

    if fmt == "json":
        from gitfame_render.jsonfmt import JsonRenderer

        return JsonRenderer()

    if fmt == "json-lines":
        from gitfame_render.jsonfmt import JsonLinesRenderer

        return JsonLinesRenderer()

    raise ConfigError(f"{fmt!r} is not a formatting option. Choose one of: {', '.join(FORMAT_CHOICES)}.")


def _records_to_rows(ranked) -> list[AuthorRow]:
    """Map run_fame()'s ranked (identity, AuthorRecord) pairs to output rows.

    The CLI owns this mapping: gitfame_core has no renderer knowledge and
    gitfame_render has no core knowledge.
    """
    return [
        AuthorRow(name=identity, lines=record.lines, commits=record.commit_count, files=record.file_count)
        for identity, record in ranked
    ]


def _split_option(ctx, param, value):
    if value is None:
        return None
    return split_list(value)


@click.command()
@click.version_option(package_name="gitfame", prog_name="gitfame")
@click.option(
    "--config",
    "config_path",
    default=".gitfame.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="GITFAME_CONFIG",
)
@click.option("--repository", default=None, help="Path to the git repository. Defaults to the current directory.")
@click.option("--revision", default=None, help="Commit to attribute. Defaults to HEAD.")
@click.option(
    "--order-by",
    "order_by",
    type=click.Choice(ORDER_BY_CHOICES),
    default=None,
    help="Primary sort key. Defaults to lines.",
)
@click.option("--use-committer", is_flag=True, help="Attribute lines to the committer instead of the author.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format. Defaults to tabular.",
)
@click.option(
    "--extensions",
    callback=_split_option,
    default=None,
    help="Comma-separated extensions to count, e.g. '.go,.md'.",
)
@click.option(
    "--languages",
    callback=_split_option,
    default=None,
    help="Comma-separated languages to count, e.g. 'go,markdown'.",
)
@click.option(
    "--exclude",
    callback=_split_option,
    default=None,
    help="Comma-separated glob patterns of files to skip, e.g. 'foo/*,bar/*'.",
)
@click.option(
    "--restrict-to",
    "restrict_to",
    callback=_split_option,
    default=None,
    help="Comma-separated glob patterns; only files matching one of them are counted.",
)
@click.option("--jobs", "-j", type=int, default=None, help="Number of files to blame in parallel. Defaults to 1.")
@click.option("--progress", is_flag=True, help="Print per-file progress to stderr.")
def main(
    config_path: str,
    repository: str | None,
    revision: str | None,
    order_by: str | None,
    use_committer: bool,
    fmt: str | None,
    extensions: list[str] | None,
    languages: list[str] | None,
    exclude: list[str] | None,
    restrict_to: list[str] | None,
    jobs: int | None,
    progress: bool,
):
    """Contributor statistics for a git repository.

    Blames every selected file at --revision and ranks contributors by the
    lines they own, the commits those lines come from, and the files they
    appear in.
    """
    try:
        config = load_config(
            config_path,
            cli_overrides={
                "repository": repository,
                "revision": revision,
                "order_by": order_by,
                "use_committer": True if use_committer else None,
                "format": fmt,
                "extensions": extensions,
                "languages": languages,
                "exclude": exclude,
                "restrict_to": restrict_to,
                "jobs": jobs,
            },
        )
        validate_config(config)
    except ConfigError as e:
        raise click.UsageError(str(e))

    if not is_repository(config["repository"]):
        raise click.UsageError(f"{config['repository']!r} is not a git repository.")

    renderer = _build_renderer(config["format"])

    on_progress = None
    if progress:

        def on_progress(i: int, total: int, path: str) -> None:
            console.print(f"[dim]({i}/{total})[/dim] {escape(path)}", highlight=False)

    try:
        summary = run_fame(config, on_progress=on_progress)
    except GitFameError as e:
        raise click.ClickException(str(e))

    if progress:
        console.print(
            f"[dim]{len(summary.files)} file(s) at {escape(summary.revision)} in {escape(summary.repository)}, "
            f"ranked by {summary.order_by}.[/dim]",
            highlight=False,
        )
        if summary.empty_files:
            console.print(f"[dim]{len(summary.empty_files)} empty file(s) attributed via history.[/dim]")

    # Nothing reaches stdout until the whole run has succeeded.
    click.echo(renderer.render(_records_to_rows(summary.ranked)), nl=False)
