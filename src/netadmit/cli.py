from __future__ import annotations

from pathlib import Path

import typer

from netadmit.core.errors import SpecLoadError
from netadmit.core.field_path import FieldPath
from netadmit.core.logging import configure_logging
from netadmit.core.results import ValidationReport
from netadmit.render.report_json import write_json_report
from netadmit.render.report_md import write_markdown_report
from netadmit.spec.loader import load_manifest
from netadmit.validators.engine import validate_networks
from netadmit.validators.interface_fields import VALID_INTERFACE_MODELS

app = typer.Typer(add_completion=False)


def _print_console(report: ValidationReport) -> None:
    for cause in report.causes:
        typer.echo(f"{cause.type.value:22} {cause.field} - {cause.message}")
    typer.echo(f"Exit code: {report.exit_code}")


@app.command()
def validate(
    spec: Path = typer.Option(..., "--spec"),
    field_prefix: str | None = typer.Option(None, "--field-prefix"),
    json_out: Path | None = typer.Option(None, "--json-out"),
    md_out: Path | None = typer.Option(None, "--md-out"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    try:
        loaded = load_manifest(spec)
    except SpecLoadError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    field = loaded.field
    if field_prefix is not None:
        try:
            field = FieldPath.parse(field_prefix)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--field-prefix")

    report = ValidationReport()
    report.extend(validate_networks(field, loaded.spec))
    _print_console(report)

    payload = report.to_dict()
    payload["source"] = {"kind": loaded.kind, "name": loaded.name, "field": str(field)}
    if json_out:
        write_json_report(payload, json_out)
    if md_out:
        write_markdown_report(payload, md_out)
    raise typer.Exit(code=report.exit_code)


@app.command()
def models() -> None:
    for model in sorted(VALID_INTERFACE_MODELS):
        typer.echo(model)


if __name__ == "__main__":
    app()
