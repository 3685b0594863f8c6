"""
typstgen command line

Generates a Typst document from a builtin or custom template.

Examples:\n

    typstgen                                  # output.typ from the default template

    typstgen notes article                    # notes.typ from the builtin article template

    typstgen thesis my_thesis -a "Jane Roe"   # thesis.typ from <config_dir>/templates/my_thesis.typ

    typstgen paper --orcid 0000-0002-1825-0097 --lang de
"""

from typing import Optional

import typer
from typing_extensions import Annotated

from typstgen import __version__
from typstgen.contexts.configuration.config_resolver import (
    RawFlags,
    config_path,
    load_config,
    resolve_options,
)
from typstgen.contexts.configuration.defaults import DEFAULT_LANG
from typstgen.contexts.configuration.logger import log_resolved_options
from typstgen.contexts.templating.assembler import generate_document
from typstgen.contexts.templating.exceptions import TemplatingError
from typstgen.contexts.templating.template_source import resolve_template_source
from typstgen.utils.logger import setup_logger

app = typer.Typer(
    help="Generate Typst documents from templates",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"typstgen {__version__}")
        raise typer.Exit()


def _fail(error: TemplatingError):
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def generate(
    output: Annotated[
        Optional[str],
        typer.Argument(help="Output file name (.typ is appended if missing)"),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Argument(help="'report', 'article' or the name of a custom template"),
    ] = None,
    author: Annotated[
        Optional[str],
        typer.Option("--author", "-a", help="Author name"),
    ] = None,
    orcid: Annotated[
        Optional[str],
        typer.Option("--orcid", help="Author ORCID iD, e.g. 0000-0002-1825-0097"),
    ] = None,
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Document language code"),
    ] = DEFAULT_LANG,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Log resolved options and the generated document"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
):
    """
    Generate a Typst document.

    Values not given on the command line come from <config_dir>/config.toml,
    then from built-in defaults.
    """
    setup_logger(debug=debug, extra_provenance={"typstgen": __version__})

    try:
        template_source = resolve_template_source(template)
    except TemplatingError as e:
        _fail(e)

    flags = RawFlags(
        output=output,
        template=template_source,
        author=author,
        orcid=orcid,
        lang=lang,
        debug=debug,
    )
    options = resolve_options(flags, load_config(config_path()))
    if options.debug:
        log_resolved_options(options)

    try:
        result = generate_document(options)
    except TemplatingError as e:
        _fail(e)

    typer.secho(f"✓ Wrote {result.output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
