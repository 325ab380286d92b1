import json
import logging
import sys
from pathlib import Path

import click

from .config import FORMATTERS, LANGUAGES, GeneratorOptions
from .driver import convert_dir, convert_file
from .errors import JsonToCodeError


@click.command()
@click.option("--package", "-p", default=None, type=str, help="Package (Python) or namespace (C#), derived from the output directory by default")
@click.option("--type", "-t", "type_name", default=None, type=str, help="Root type name, derived from the output file name by default")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--language", "-l", default=None, type=click.Choice(LANGUAGES))
@click.option("--use-decimal", is_flag=True, default=False, help="Keep numbers as Decimal instead of float")
@click.option("--singularize", is_flag=True, default=False, help="Name array element types after the singular of the field")
@click.option("--sort-fields", is_flag=True, default=False, help="Sort fields by JSON key")
@click.option("--formatter", "-f", default=None, type=click.Choice(FORMATTERS))
@click.option("--keep-going", "-k", is_flag=True, default=False, help="Continue a directory conversion after a failed file")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def json_to_code(package, type_name, config, language, use_decimal, singularize, sort_fields, formatter, keep_going, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if config is not None:
            with open(config) as f:
                options = GeneratorOptions.from_dict(json.load(f))
        else:
            options = GeneratorOptions()

        # CLI flags override the config file
        if package:
            options.package = package
        if type_name:
            options.type_name = type_name
        if language:
            options.language = language
        if formatter:
            options.formatter.name = formatter
        options.use_decimal = options.use_decimal or use_decimal
        options.singularize = options.singularize or singularize
        options.sort_fields = options.sort_fields or sort_fields

        if Path(path).is_dir():
            result = convert_dir(path, output, options, keep_going=keep_going)
            for failed, error in result.failures.items():
                click.echo(f"{failed}: {error}", err=True)
            if not result.ok:
                sys.exit(1)
        else:
            convert_file(path, output, options)
    except (JsonToCodeError, ValueError) as e:
        raise click.ClickException(str(e)) from e
