"""CLI entry point for sel4-xml-gen."""

import json
import logging
from pathlib import Path

import click
import yaml

from sel4_xml_gen.generator.invocation import InvocationHeaderGenerator
from sel4_xml_gen.generator.syscall import SyscallHeaderGenerator
from sel4_xml_gen.parser.detect import detect_format
from sel4_xml_gen.parser.errors import GeneratorError
from sel4_xml_gen.parser.invocations import parse_invocations
from sel4_xml_gen.parser.syscalls import parse_syscalls


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    click.echo(f"  Created {path}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """sel4-xml-gen — generate seL4 syscall and invocation headers from XML."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("--xml", "xml_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Interface XML file.")
@click.option("--dest", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output header path.")
@click.option("--libsel4", is_flag=True, help="Generate the libsel4 flavour of the header.")
@click.option("--arch", is_flag=True, help="Generate the arch invocation header.")
@click.option("--sel4-arch", "sel4_arch", is_flag=True, help="Generate the sel4_arch invocation header.")
def invocations(xml_path: Path, dest: Path, libsel4: bool, arch: bool, sel4_arch: bool):
    """Generate an invocation label header from an interface XML file."""
    if arch and sel4_arch:
        raise click.UsageError("--arch and --sel4-arch are mutually exclusive.")
    variant = "arch" if arch else "sel4_arch" if sel4_arch else "generic"
    click.echo(f"Parsing {xml_path}...")
    try:
        api = parse_invocations(xml_path)
        text = InvocationHeaderGenerator(variant=variant, libsel4=libsel4).generate(api)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    methods = sum(len(i.methods) for i in api.interfaces)
    click.echo(f"Found {len(api.interfaces)} interfaces with {methods} methods.")
    _write(dest, text)


@main.command()
@click.option("--xml", "xml_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Syscall XML file.")
@click.option("--kernel-header", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Kernel header output path.")
@click.option("--libsel4-header", type=click.Path(dir_okay=False, path_type=Path), default=None, help="libsel4 header output path.")
@click.option("-m", "--mcs", is_flag=True, help="Generate the MCS api.")
def syscalls(xml_path: Path, kernel_header: Path | None, libsel4_header: Path | None, mcs: bool):
    """Generate syscall number headers from a syscall XML file."""
    click.echo(f"Parsing {xml_path}...")
    try:
        gen = SyscallHeaderGenerator(parse_syscalls(xml_path), mcs=mcs)
        # Render everything before writing anything.
        outputs = []
        if kernel_header is not None:
            outputs.append((kernel_header, gen.generate_kernel_header()))
        if libsel4_header is not None:
            outputs.append((libsel4_header, gen.generate_libsel4_header()))
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    if not outputs:
        click.echo("No output requested; pass --kernel-header and/or --libsel4-header.")
    for path, text in outputs:
        _write(path, text)


@main.command()
@click.argument("xml_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="yaml", type=click.Choice(["yaml", "json"]), help="Output format.")
def dump(xml_path: Path, fmt: str):
    """Print the parsed model of an XML description file."""
    try:
        if detect_format(xml_path) == "syscalls":
            model = parse_syscalls(xml_path)
        else:
            model = parse_invocations(xml_path)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    data = model.model_dump(mode="json")
    if fmt == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
