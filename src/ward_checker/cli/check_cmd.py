"""Automatic address check command."""

import asyncio

import typer

from ward_checker.cli.console import ConsolePresenter, load_registry_or_exit, load_settings_or_exit
from ward_checker.lib.submission import SubmissionError
from ward_checker.schemas.eligibility import AddressInput, InputValidationError
from ward_checker.services.eligibility_service import AutomaticOutcome
from ward_checker.services.session_factory import build_resolver, build_session, build_submission_sink

VALIDATION_ERROR_EXIT_CODE = 1
SUBMISSION_ERROR_EXIT_CODE = 3


def _print_outcome(outcome: AutomaticOutcome) -> None:
    typer.echo(f"Result:    {outcome.eligibility.upper()}")
    typer.echo(f"GPS pin:   {outcome.gps_pin}")
    typer.echo(f"Submitted: {'yes' if outcome.submitted else 'no'}")


def check(
    first_name: str = typer.Option("", "--first-name", prompt="First name"),
    last_name: str = typer.Option("", "--last-name", prompt="Last name"),
    street_address: str = typer.Option("", "--street-address", prompt="Street address"),
    suburb: str = typer.Option("", "--suburb", prompt="Suburb"),
    cellphone: str = typer.Option("", "--cellphone", prompt="Cellphone"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log the submission instead of sending it"),  # noqa: FBT001
) -> None:
    """Check whether a home address is inside the target ward and record it."""
    settings = load_settings_or_exit()
    registry = load_registry_or_exit(settings)

    session = build_session(
        settings,
        registry,
        ConsolePresenter(),
        resolver=build_resolver(settings),
        sink=build_submission_sink(settings, dry_run=dry_run),
    )
    address = AddressInput(
        first_name=first_name,
        last_name=last_name,
        street_address=street_address,
        suburb=suburb,
        cellphone=cellphone,
    )

    try:
        outcome = asyncio.run(session.submit(address))
    except InputValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=VALIDATION_ERROR_EXIT_CODE) from e
    except SubmissionError as e:
        if session.last_outcome is not None:
            _print_outcome(session.last_outcome)
        typer.echo(f"Submission failed: {e}", err=True)
        raise typer.Exit(code=SUBMISSION_ERROR_EXIT_CODE) from e

    _print_outcome(outcome)
