import sys
import logging

import click
from dotenv import load_dotenv

from json2ts.config.loader import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    ConversionConfig,
    load_config_if_present,
)
from json2ts.core.analysis import analyze_table
from json2ts.core.engine import build_table, convert as convert_json, read_json_file
from json2ts.core.utils.fs import create_file_if_missing, write_output

# Load .env file automatically
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def _read_source(json_string, input_path) -> str:
    """Pick the JSON source: input file first, then the literal argument."""
    if input_path:
        return read_json_file(input_path)
    return json_string


def _resolve_config(config_path, as_class, union_null, prefix) -> tuple[ConversionConfig, str | None]:
    """Merge the project config file with command-line flags (flags win)."""
    project = load_config_if_present(config_path)
    conversion = project.conversion.merged(
        as_class=True if as_class else None,
        union_null=True if union_null else None,
        prefix=prefix,
    )
    return conversion, project.output


def _fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="json2ts")
def cli():
    """json2ts: Turn JSON samples into TypeScript types."""
    pass


@cli.command()
@click.argument("json_string", required=False, metavar="[JSON]")
@click.option("--input", "-i", "input_path", help="Input JSON file path")
@click.option("--output", "-o", "output_path", help="Output TypeScript file path")
@click.option("--class", "as_class", is_flag=True, help="Generate TypeScript classes instead of interfaces")
@click.option("--union-null", is_flag=True, help="Type null fields as `null` instead of optional `any`")
@click.option("--prefix", default=None, help="Prepend a custom prefix to all interface/class names")
@click.option("--config", "-c", "config_path", help=f"Config file (default: {DEFAULT_CONFIG_PATH} if present)")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed progress")
@click.pass_context
def convert(ctx, json_string, input_path, output_path, as_class, union_null, prefix, config_path, verbose):
    """Convert JSON to TypeScript interfaces.

    Examples:

        json2ts convert '{"name": "John", "age": 25}'

        json2ts convert -i response.json -o types.ts --prefix I

        json2ts convert -i response.json --class --union-null
    """
    if verbose:
        logging.getLogger("json2ts").setLevel(logging.DEBUG)

    if not input_path and not json_string:
        click.echo(ctx.get_help())
        return

    try:
        json_text = _read_source(json_string, input_path)
        conversion, default_output = _resolve_config(config_path, as_class, union_null, prefix)
        code = convert_json(json_text, conversion)

        output_path = output_path or default_output
        if output_path:
            write_output(output_path, code)
            click.echo(f"TypeScript code written to {output_path}")
        else:
            click.echo(code)

    except Exception as e:
        _fail(str(e))


@cli.command()
@click.argument("json_string", required=False, metavar="[JSON]")
@click.option("--input", "-i", "input_path", help="Input JSON file path")
@click.option("--prefix", default=None, help="Prepend a custom prefix to all interface/class names")
@click.option("--config", "-c", "config_path", help=f"Config file (default: {DEFAULT_CONFIG_PATH} if present)")
@click.pass_context
def preview(ctx, json_string, input_path, prefix, config_path):
    """Preview the types that would be generated."""
    if not input_path and not json_string:
        click.echo(ctx.get_help())
        return

    try:
        json_text = _read_source(json_string, input_path)
        conversion, _ = _resolve_config(config_path, False, False, prefix)
        table = build_table(json_text, conversion)

        click.echo(f"\n--- Preview ({'classes' if conversion.as_class else 'interfaces'}) ---")
        click.echo(analyze_table(table).format_summary())

    except Exception as e:
        _fail(str(e))


@cli.command()
def init():
    """Create a default json2ts.yml in the current directory."""
    if create_file_if_missing(DEFAULT_CONFIG_PATH, DEFAULT_CONFIG):
        click.echo(f"Created {DEFAULT_CONFIG_PATH}")
    else:
        click.echo(f"{DEFAULT_CONFIG_PATH} already exists.")


if __name__ == "__main__":
    cli()
