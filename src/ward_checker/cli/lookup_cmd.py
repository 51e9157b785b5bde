"""Postal code and province lookup commands."""

import typer

from ward_checker.lib.za_lookup import suggest_postal_code_corrections, validate_postal_code, validate_province

lookup_app = typer.Typer()


@lookup_app.command("postal-code")
def lookup_postal_code(
    code: str = typer.Argument(..., help="Four-digit South African postal code"),
) -> None:
    """Validate a postal code and show its province and region."""
    result = validate_postal_code(code)
    if not result.valid:
        typer.echo(f"Invalid: {result.error}", err=True)
        for suggestion in suggest_postal_code_corrections(code):
            typer.echo(f"  Did you mean {suggestion.code} ({suggestion.province})?", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Postal code: {result.code}")
    typer.echo(f"Province:    {result.province}")
    typer.echo(f"Region:      {result.region}")


@lookup_app.command("province")
def lookup_province(
    name: str = typer.Argument(..., help="Province name, code or alias"),
) -> None:
    """Resolve a province name, code or alias."""
    result = validate_province(name)
    if result.province is None:
        typer.echo(f"Invalid: {result.error}", err=True)
        if result.suggestions:
            typer.echo(f"  Suggestions: {', '.join(result.suggestions)}", err=True)
        raise typer.Exit(code=1)

    province = result.province
    typer.echo(f"Province: {province.name} ({province.code})")
    typer.echo(f"Capital:  {province.capital}")
