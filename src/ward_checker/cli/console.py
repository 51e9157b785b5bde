"""Console presentation layer and shared CLI helpers."""

import typer
from pydantic import ValidationError

from ward_checker.core.config import Settings, get_settings
from ward_checker.lib.analyzer.eligibility import EligibilityResult
from ward_checker.lib.boundary_loader import BoundaryConfigurationError, BoundaryRegistry
from ward_checker.lib.geocoder.base import ResolvedLocation
from ward_checker.schemas.eligibility import AddressInput
from ward_checker.services.presentation import BasePresenter, StatusKind
from ward_checker.services.session_factory import load_registry

CONFIG_ERROR_EXIT_CODE = 2

_STATUS_COLORS = {
    StatusKind.LOADING: typer.colors.CYAN,
    StatusKind.SUCCESS: typer.colors.GREEN,
    StatusKind.WARNING: typer.colors.YELLOW,
    StatusKind.ERROR: typer.colors.RED,
}


class ConsolePresenter(BasePresenter):
    """Renders session events as terminal lines."""

    def show_status(self, message: str, kind: StatusKind) -> None:
        typer.secho(message, fg=_STATUS_COLORS.get(kind))

    def show_validation_error(self, missing_fields: list[str]) -> None:
        typer.secho(f"Missing required fields: {', '.join(missing_fields)}", fg=typer.colors.RED, err=True)

    def show_resolved(self, location: ResolvedLocation, result: EligibilityResult, ward_id: str) -> None:
        typer.echo(f"Home address: {location.display_label}")
        typer.echo(f"Coordinates:  {location.latitude:.6f}, {location.longitude:.6f}")
        typer.echo(f"Ward {ward_id}:     {result.upper()}")

    def show_unresolved(self, address: AddressInput, ward_id: str) -> None:
        typer.echo(f"Could not locate '{address.street_address}, {address.suburb}' automatically.")
        typer.echo(f"Use 'ward-checker probe LAT LNG' to check a map location against ward {ward_id}.")

    def enable_manual_probing(self, ward_id: str) -> None:
        typer.echo(f"Manual check against ward {ward_id}")

    def show_probe_result(self, point: tuple[float, float], result: EligibilityResult, ward_id: str) -> None:
        typer.echo(f"{point[0]:.6f}, {point[1]:.6f}: {result.upper()}")

    def confirm(self, message: str) -> None:
        typer.echo("")
        typer.echo(message)
        typer.echo("")


def load_settings_or_exit() -> Settings:
    """Settings from the environment; exits with code 2 when invalid."""
    try:
        return get_settings()
    except ValidationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from e


def load_registry_or_exit(settings: Settings) -> BoundaryRegistry:
    """Boundary registry for the target ward; exits with code 2 when unusable."""
    try:
        return load_registry(settings)
    except BoundaryConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from e
