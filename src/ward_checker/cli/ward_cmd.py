"""Ward boundary summary command."""

import typer

from ward_checker.cli.console import load_registry_or_exit, load_settings_or_exit


def ward(
    vertices: bool = typer.Option(False, "--vertices", help="Print every boundary vertex"),  # noqa: FBT001
) -> None:
    """Show the target ward's configured boundary."""
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings)
    boundary = registry.require(settings.target_ward)

    (min_lat, min_lng), (max_lat, max_lng) = boundary.bounds
    center_lat, center_lng = boundary.center
    typer.echo(f"Ward:     {boundary.name} ({boundary.key})")
    typer.echo(f"Source:   {settings.ward_boundaries_path}")
    typer.echo(f"Vertices: {len(boundary.vertices)}")
    typer.echo(f"Center:   {center_lat:.6f}, {center_lng:.6f}")
    typer.echo(f"Bounds:   {min_lat:.6f}, {min_lng:.6f} -> {max_lat:.6f}, {max_lng:.6f}")
    typer.echo(f"Wards configured: {', '.join(registry.keys())}")

    if vertices:
        for lat, lng in boundary.vertices:
            typer.echo(f"  {lat:.6f}, {lng:.6f}")
