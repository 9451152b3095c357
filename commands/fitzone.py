#!/usr/bin/env python3
"""
FitZone+ Manager Commands

Interactive menu and one-shot commands over the in-memory gym state.
State lives only for the duration of one invocation.
"""

import sys
import logging
from functools import partial
from typing import Any, Callable, Optional

import click
from dotenv import load_dotenv

from config import get_config
from domain.models.fitness_class import FitnessClass
from domain.models.trainer import EmploymentKind
from logging_config import configure_logging
from services.gym_service import GymService
from services.text_render import (
    render_breakdown,
    render_class_choices,
    render_classes,
    render_report,
    render_subscriptions,
    render_trainers,
)
from shared.constants import MAX_MONTHS
from shared.exceptions import ConfigurationError, DataValidationError, FitZoneError
from shared.validators import (
    optional_choice,
    validate_amount,
    validate_choice,
    validate_email,
    validate_intensity,
    validate_months,
    validate_name,
    validate_plan,
    validate_trainer_kind,
)
from startup import build_service

_LOG = logging.getLogger(__name__)


def _echo_lines(lines) -> None:
    for line in lines:
        click.echo(line)


def _ask(text: str, parser: Callable[[str], Any]) -> Any:
    """Prompt until ``parser`` accepts the input."""
    while True:
        raw = click.prompt(text)
        try:
            return parser(raw)
        except DataValidationError as exc:
            click.echo(f"{exc.message}. Try again.")


def _choose_class_optional(service: GymService) -> Optional[FitnessClass]:
    classes = service.catalog.list()
    if not classes:
        click.echo("No class types yet (add one first).")
        return None

    click.echo("Choose a class (or leave empty for none):")
    _echo_lines(render_class_choices(classes))
    raw = click.prompt("Number (or Enter)", default="", show_default=False)
    chosen = optional_choice(raw, classes)
    if chosen is None and raw.strip():
        click.echo("Invalid choice; no class assigned.")
    return chosen


def _choose_class_required(service: GymService) -> Optional[FitnessClass]:
    classes = service.catalog.list()
    if not classes:
        click.echo("No class types exist. Add one first.")
        return None

    click.echo("Choose the class:")
    _echo_lines(render_class_choices(classes))
    return _ask("Number", partial(validate_choice, options=classes, field_name="class number"))


# =================== MENU ACTIONS ===================

def _add_trainer(service: GymService) -> None:
    click.echo("--- Add trainer ---")
    name = _ask("Name", validate_name)
    email = _ask("Email", validate_email)
    kind = _ask("Trainer type: 1) Permanent  2) External", validate_trainer_kind)
    chosen = _choose_class_optional(service)
    spec = chosen.name if chosen is not None else None

    if kind is EmploymentKind.PERMANENT:
        salary = _ask("Monthly salary (e.g. 2500)", partial(validate_amount, field_name="salary"))
        trainer = service.add_permanent_trainer(name, email, spec, salary)
        click.echo(f"Permanent trainer added: {trainer.summary()}")
    else:
        company = _ask("Company", partial(validate_name, field_name="company"))
        rate = _ask("Hourly rate (e.g. 50)", partial(validate_amount, field_name="hourly rate"))
        trainer = service.add_external_trainer(name, email, spec, company, rate)
        click.echo(f"External trainer added: {trainer.summary()}")


def _add_class(service: GymService) -> None:
    click.echo("--- Add class type ---")
    name = _ask("Class name (e.g. Spinning)", partial(validate_name, field_name="class name"))
    intensity = _ask("Intensity: 1) LIGHT  2) MEDIUM  3) HARD", validate_intensity)
    base_price = _ask("Monthly base price (e.g. 40.0)", partial(validate_amount, field_name="base price"))
    fitness_class = service.add_class(name, intensity, base_price)
    click.echo(f"Class type added: {fitness_class.summary()}")


def _create_subscription(service: GymService) -> None:
    click.echo("--- Create subscription ---")
    subscriber = _ask("Client name", partial(validate_name, field_name="client name"))
    chosen = _choose_class_required(service)
    if chosen is None:
        return
    months = _ask("Number of months (e.g. 1, 6, 12)", validate_months)
    is_premium = _ask("Plan: 1) Standard  2) Premium", validate_plan)
    subscription = service.subscribe(subscriber, chosen.name, months, is_premium)
    click.echo(f"Subscription created: {subscription.brief()}")


MENU_ACTIONS = {
    "1": ("Add trainer", _add_trainer),
    "2": ("Add class type", _add_class),
    "3": ("Create client subscription", _create_subscription),
    "4": ("List trainers", lambda s: _echo_lines(render_trainers(s.trainers.list()))),
    "5": ("List class types", lambda s: _echo_lines(render_classes(s.catalog.list()))),
    "6": ("List subscriptions", lambda s: _echo_lines(render_subscriptions(s.ledger.list()))),
    "7": ("Summary report (classes + trainers)", lambda s: _echo_lines(render_report(s.trainers_by_class()))),
}


def _print_menu() -> None:
    click.echo("=== FitZone+ Manager ===")
    for key, (label, _) in MENU_ACTIONS.items():
        click.echo(f"{key}) {label}")
    click.echo("0) Exit")


# =================== CLI ===================

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--no-seed', is_flag=True, help='Start without the sample classes and trainers')
@click.pass_context
def cli(ctx, verbose, no_seed):
    """FitZone+ Manager Commands."""
    load_dotenv()
    configure_logging("DEBUG" if verbose else None)

    ctx.ensure_object(dict)
    if "service" not in ctx.obj:
        try:
            ctx.obj["service"] = build_service(seed=False if no_seed else None)
        except ConfigurationError as exc:
            click.echo(f"❌ Error: {exc.message}", err=True)
            sys.exit(1)


@cli.command()
@click.pass_obj
def menu(obj):
    """Interactive management menu."""
    service: GymService = obj["service"]
    while True:
        _print_menu()
        choice = click.prompt("Choose an option", default="", show_default=False).strip()
        if choice == "0":
            break

        entry = MENU_ACTIONS.get(choice)
        if entry is None:
            click.echo("Invalid option.")
        else:
            try:
                entry[1](service)
            except FitZoneError as exc:
                _LOG.debug("Menu action %s failed: %s", choice, exc.code)
                click.echo(f"Error: {exc.message}")
        click.echo("")

    click.echo("Goodbye!")


@cli.command()
@click.argument('class_name')
@click.argument('months', type=click.IntRange(min=1, max=MAX_MONTHS))
@click.option('--premium', is_flag=True, help='Price the premium plan')
@click.pass_obj
def quote(obj, class_name, months, premium):
    """Price a subscription without creating it."""
    service: GymService = obj["service"]
    try:
        breakdown = service.quote(class_name, months, premium)
    except FitZoneError as exc:
        click.echo(f"❌ Error: {exc.message}", err=True)
        sys.exit(1)
    _echo_lines(render_breakdown(breakdown))


@cli.command()
@click.pass_obj
def report(obj):
    """Show trainers grouped by class type."""
    _echo_lines(render_report(obj["service"].trainers_by_class()))


@cli.command()
@click.pass_obj
def classes(obj):
    """List class types."""
    _echo_lines(render_classes(obj["service"].catalog.list()))


@cli.command()
@click.pass_obj
def trainers(obj):
    """List trainers."""
    _echo_lines(render_trainers(obj["service"].trainers.list()))


@cli.command()
@click.option('--host', default=None, help='Bind address (defaults to FITZONE_API_HOST)')
@click.option('--port', default=None, type=int, help='Port (defaults to FITZONE_API_PORT)')
def serve(host, port):
    """Run the HTTP API."""
    import uvicorn

    api = get_config().api
    uvicorn.run("app:app", host=host or api.host, port=port or api.port)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
