"""
Text rendering for the CLI.

Each function returns the lines to print, so callers decide where they go.
"""

from __future__ import annotations

from typing import Iterable, List

from domain.models.fitness_class import FitnessClass
from domain.models.subscription import Subscription
from domain.models.trainer import Trainer
from services.pricing import PriceBreakdown
from services.report_builder import TrainerReport


def _listing(title: str, rows: List[str], empty: str) -> List[str]:
    lines = [f"--- {title} ---"]
    lines.extend(rows or [empty])
    return lines


def render_classes(classes: Iterable[FitnessClass]) -> List[str]:
    return _listing("Class types", [c.summary() for c in classes], "No class types defined.")


def render_trainers(trainers: Iterable[Trainer]) -> List[str]:
    return _listing("Trainers", [t.summary() for t in trainers], "No trainers registered.")


def render_subscriptions(subscriptions: Iterable[Subscription]) -> List[str]:
    return _listing("Subscriptions", [s.brief() for s in subscriptions], "No subscriptions created.")


def render_class_choices(classes: Iterable[FitnessClass]) -> List[str]:
    """Numbered class list for menu selection (1-based)."""
    return [f"{i}) {c.summary()}" for i, c in enumerate(classes, start=1)]


def render_report(report: TrainerReport) -> List[str]:
    lines = ["=== Summary report: class types and trainers ==="]
    for class_name, trainers in report.items():
        lines.append(f"Class: {class_name}")
        if not trainers:
            lines.append("  (no trainers)")
            continue
        lines.extend(f"  - {t.brief()}" for t in trainers)
    return lines


def render_breakdown(b: PriceBreakdown) -> List[str]:
    """Step-by-step quote, one line per pricing step."""
    return [
        f"Class: {b.class_name or 'N/A'}",
        f"Base price: {b.base_price:.2f} x intensity {b.intensity_factor} = {b.monthly:.2f}/month",
        f"Subtotal: {b.monthly:.2f} x {b.months} months = {b.subtotal:.2f}",
        f"Duration factor {b.duration_factor}: {b.discounted:.4f}",
        f"Premium factor {b.premium_factor}: {b.total:.4f}",
        f"Price: {b.price}",
    ]
