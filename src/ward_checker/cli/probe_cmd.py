"""Manual map-location check command."""

import typer

from ward_checker.cli.console import ConsolePresenter, load_registry_or_exit, load_settings_or_exit
from ward_checker.services.session_factory import build_manual_session


def _parse_point(text: str) -> tuple[float, float]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:  # noqa: PLR2004
        msg = f"Expected 'LAT,LNG', got {text!r}"
        raise typer.BadParameter(msg)
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as e:
        msg = f"Expected numeric 'LAT,LNG', got {text!r}"
        raise typer.BadParameter(msg) from e


def probe(
    latitude: float | None = typer.Argument(None, help="Latitude of the map location"),
    longitude: float | None = typer.Argument(None, help="Longitude of the map location"),
    point: list[str] | None = typer.Option(None, "--point", help="Extra location as LAT,LNG (repeatable)"),
) -> None:
    """Check map locations against the target ward. Nothing is submitted.

    Negative coordinates follow ``--`` or use ``--point=LAT,LNG``.
    """
    points: list[tuple[float, float]] = []
    if latitude is not None or longitude is not None:
        if latitude is None or longitude is None:
            msg = "Both LAT and LNG are required"
            raise typer.BadParameter(msg)
        points.append((latitude, longitude))
    points.extend(_parse_point(p) for p in point or [])
    if not points:
        typer.echo("Error: provide LAT LNG or at least one --point", err=True)
        raise typer.Exit(code=1)

    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings)
    session = build_manual_session(settings, registry, ConsolePresenter())

    for lat, lng in points:
        try:
            session.probe(lat, lng)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e
