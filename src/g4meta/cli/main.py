"""
Main CLI entry point.
"""

import json
import logging

import click

from g4meta import __version__
from g4meta.errors import G4MetaError, error_handler
from g4meta.project.diagnostics import Severity
from g4meta.targets import available_targets


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _log_diagnostic(logger, diagnostic):
    if diagnostic.severity is Severity.INFO:
        logger.info(diagnostic.message)
    else:
        logger.warning(diagnostic.message)


def _derived(fn) -> str:
    try:
        return fn()
    except G4MetaError:
        return "n/a"


target_option = click.option(
    "--target", "-t",
    default="go",
    type=click.Choice(available_targets()),
    help="Code generation target",
)


@click.group()
@click.version_option(version=__version__)
def main():
    """g4meta: extract ANTLR4 grammar project metadata from build descriptors."""
    pass


@main.command()
@click.argument("descriptor", type=click.Path(exists=True, dir_okay=False))
@target_option
@click.option("--json", "as_json", is_flag=True, help="Print the project as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@error_handler
def inspect(descriptor, target, as_json, verbose):
    """Show the grammars and generated files of one descriptor."""
    from g4meta.project import parse_descriptor
    from g4meta.targets import get_target

    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    target_config = get_target(target)
    project, warnings = parse_descriptor(descriptor, target=target_config)
    for warning in warnings:
        _log_diagnostic(logger, warning)

    if as_json:
        data = project.to_dict(extension=target_config.generated_extension)
        data["warnings"] = [w.message for w in warnings]
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Project:        {project.file_name}")
    click.echo(f"Long name:      {project.long_name}")
    click.echo(f"ANTLR plugin:   {'yes' if project.found_antlr4_maven_plugin else 'no'}")
    click.echo(f"Entry point:    {project.entry_point}")
    click.echo(f"Parser:         {_derived(project.parser_name)}")
    click.echo(f"Lexer:          {_derived(project.lexer_name)}")
    click.echo(f"Listener:       {_derived(project.listener_name)}")
    click.echo(f"Examples:       {len(project.examples)} (root {project.example_root or '.'})")
    click.echo("Grammars:")
    for g in project.grammars:
        click.echo(f"  {g.type.value:<9} {g.name:<24} {g.filename}")
    click.echo("Generated files:")
    try:
        files = project.generated_filenames(target_config.generated_extension)
    except G4MetaError as e:
        click.echo(f"  n/a ({e})")
    else:
        for name in files:
            click.echo(f"  {name}")


@main.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@target_option
@click.option("--name", "-n", default="pom.xml", help="Descriptor filename to look for")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@error_handler
def scan(root, target, name, verbose):
    """Summarise every descriptor found below ROOT."""
    from g4meta.project import find_descriptors, parse_descriptor
    from g4meta.targets import get_target

    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    target_config = get_target(target)
    descriptors = find_descriptors(root, name=name)
    logger.info(f"Found {len(descriptors)} descriptors under {root}")

    failed = 0
    for path in descriptors:
        try:
            project, warnings = parse_descriptor(path, target=target_config)
        except (G4MetaError, OSError) as e:
            failed += 1
            logger.error(f"{path}: {e}")
            continue

        for warning in warnings:
            _log_diagnostic(logger, warning)

        try:
            parser = project.parser_name()
        except G4MetaError as e:
            parser = f"({e})"

        plugin = "plugin" if project.found_antlr4_maven_plugin else "-"
        click.echo(f"{path}\t{plugin}\t{len(project.grammars)}\t{parser}")

    if failed:
        logger.info(f"{failed} of {len(descriptors)} descriptors could not be read")


if __name__ == "__main__":
    main()
