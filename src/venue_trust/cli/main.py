"""CLI entry point for venue-trust.

Invoked as::

    venue-trust [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m venue_trust.cli.main

Commands
--------
version   Show version information
levels    Show trust level thresholds and descriptions
score     Compute the trust score for a venue snapshot
impact    Rank a snapshot's incidents by impact
summary   Summarize a snapshot's reviews and incidents

Snapshot files are JSON objects with ``verification``, ``reviews``,
``incidents`` and optional ``venue_created_at``, ``last_check_in`` and
``now`` keys.
"""
from __future__ import annotations

import datetime
import json
import sys
from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

console = Console()

_DATETIME_ADAPTER: TypeAdapter[datetime.datetime] = TypeAdapter(datetime.datetime)


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="venue-trust")
def cli() -> None:
    """Safety-credibility trust scoring for dining venues"""


# ------------------------------------------------------------------
# Shared options
# ------------------------------------------------------------------

_snapshot_argument = click.argument(
    "snapshot_file", type=click.Path(exists=True, dir_okay=False)
)
_now_option = click.option(
    "--now",
    default=None,
    help="Evaluation time as ISO-8601. Overrides the snapshot's 'now'; "
    "defaults to the current UTC time.",
)
_policy_option = click.option(
    "--policy-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a JSON scoring policy.",
)


# ------------------------------------------------------------------
# version
# ------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from venue_trust import __version__

    console.print(f"[bold]venue-trust[/bold] v{__version__}")


# ------------------------------------------------------------------
# levels
# ------------------------------------------------------------------


@cli.command(name="levels")
@_policy_option
def levels_command(policy_file: str | None) -> None:
    """Show trust level thresholds and what each level means."""
    from venue_trust.trust import TrustLevel

    policy = _load_policy(policy_file)
    thresholds = policy.thresholds()

    table = Table(title="Trust Levels", show_header=True)
    table.add_column("Level", style="cyan")
    table.add_column("Min Total", justify="right")
    table.add_column("Meaning")

    for level in sorted(TrustLevel, reverse=True):
        minimum = max(0.0, thresholds[level])
        table.add_row(level.label, f"{minimum:.0f}", level.description)

    console.print(table)


# ------------------------------------------------------------------
# score
# ------------------------------------------------------------------


@cli.command(name="score")
@_snapshot_argument
@_now_option
@_policy_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the score as JSON instead of a table.",
)
def score_command(
    snapshot_file: str,
    now: str | None,
    policy_file: str | None,
    as_json: bool,
) -> None:
    """Compute the trust score for the venue in SNAPSHOT_FILE."""
    from venue_trust.records import RecordValidationError
    from venue_trust.trust import TrustScorer

    snapshot = _load_snapshot(snapshot_file)
    evaluated_at = _resolve_now(now, snapshot.now)
    policy = _load_policy(policy_file)

    try:
        scorer = TrustScorer(policy)
        trust_score = scorer.score(
            snapshot.verification.to_record(),
            snapshot.review_records(),
            snapshot.incident_records(),
            evaluated_at,
            venue_created_at=snapshot.venue_created_at,
            last_check_in=snapshot.last_check_in,
        )
    except RecordValidationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    if as_json:
        payload = dict(trust_score.to_dict(), now=evaluated_at.isoformat())
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"Trust Score: {Path(snapshot_file).name}", show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Max", justify="right")

    for title, component_score, max_score in trust_score.breakdown():
        table.add_row(title, str(component_score), str(max_score))

    console.print(table)
    console.print(f"\n  Total:     [bold]{trust_score.total}[/bold]/100")
    console.print(f"  Level:     [bold]{trust_score.level.label}[/bold]")
    console.print(f"  Meaning:   {trust_score.level.short_description}")
    console.print(f"  Evaluated: {evaluated_at.isoformat()}")


# ------------------------------------------------------------------
# impact
# ------------------------------------------------------------------


@cli.command(name="impact")
@_snapshot_argument
@_now_option
@_policy_option
def impact_command(snapshot_file: str, now: str | None, policy_file: str | None) -> None:
    """Rank the incidents in SNAPSHOT_FILE by impact, highest first."""
    from venue_trust.records import RecordValidationError, rank_incidents

    snapshot = _load_snapshot(snapshot_file)
    evaluated_at = _resolve_now(now, snapshot.now)
    policy = _load_policy(policy_file)

    try:
        incidents = snapshot.incident_records()
    except RecordValidationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    if not incidents:
        console.print("[yellow]No incidents in snapshot.[/yellow]")
        return

    table = Table(title="Incidents by Impact", show_header=True)
    table.add_column("Reported", style="cyan")
    table.add_column("Severity")
    table.add_column("Status")
    table.add_column("Impact", justify="right")

    for incident, impact in rank_incidents(
        incidents, evaluated_at, policy.recency_window_days
    ):
        table.add_row(
            incident.reported_at.date().isoformat(),
            incident.severity.value.capitalize(),
            incident.status.value.capitalize(),
            str(impact),
        )

    console.print(table)


# ------------------------------------------------------------------
# summary
# ------------------------------------------------------------------


@cli.command(name="summary")
@_snapshot_argument
@_now_option
@_policy_option
def summary_command(snapshot_file: str, now: str | None, policy_file: str | None) -> None:
    """Summarize the reviews and incidents in SNAPSHOT_FILE."""
    from venue_trust.records import (
        RecordValidationError,
        recent_safe_experiences,
        summarize_incidents,
        summarize_reviews,
    )

    snapshot = _load_snapshot(snapshot_file)
    evaluated_at = _resolve_now(now, snapshot.now)
    policy = _load_policy(policy_file)

    try:
        reviews = snapshot.review_records()
        incidents = snapshot.incident_records()
    except RecordValidationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    reviews_summary = summarize_reviews(reviews)
    incidents_summary = summarize_incidents(
        incidents, evaluated_at, policy.recency_window_days
    )

    table = Table(title="Reviews", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Reviews", str(reviews_summary.count))
    table.add_row("Average rating", f"{reviews_summary.avg_rating:.2f}")
    table.add_row("Average safety rating", f"{reviews_summary.avg_safety_rating:.2f}")
    table.add_row("Safe experiences", f"{reviews_summary.safe_percentage:.1f}%")
    table.add_row("Reaction reports", str(reviews_summary.reaction_count))
    table.add_row("Verified reviewers", str(reviews_summary.verified_reviewer_count))
    table.add_row(
        "Recent safe experiences", str(recent_safe_experiences(reviews, evaluated_at))
    )
    console.print(table)

    table = Table(title="Incidents", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Incidents", str(incidents_summary.total))
    table.add_row("Recent", str(incidents_summary.recent_count))
    table.add_row("Unresolved", str(incidents_summary.unresolved_count))
    table.add_row("Average severity", f"{incidents_summary.avg_severity:.2f}")
    console.print(table)

    if incidents_summary.has_recent_issues:
        console.print("\n[red]Recent issues reported at this venue.[/red]")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _load_snapshot(snapshot_file: str):  # type: ignore[no-untyped-def]
    """Parse a JSON snapshot file into a VenueSnapshot, exiting on error."""
    from venue_trust.server.models import VenueSnapshot

    try:
        data = json.loads(Path(snapshot_file).read_text(encoding="utf-8"))
        return VenueSnapshot.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Error:[/red] Could not load snapshot: {exc}")
        sys.exit(1)


def _load_policy(policy_file: str | None):  # type: ignore[no-untyped-def]
    """Return the ScoringPolicy from *policy_file*, or the default policy."""
    from venue_trust.trust import ScoringPolicy

    if not policy_file:
        return ScoringPolicy()
    try:
        policy = ScoringPolicy.model_validate_json(
            Path(policy_file).read_text(encoding="utf-8")
        )
        policy.validate_bounds()
    except (ValidationError, ValueError) as exc:
        console.print(f"[red]Error:[/red] Invalid policy file: {exc}")
        sys.exit(1)
    return policy


def _resolve_now(
    option_value: str | None,
    snapshot_now: datetime.datetime | None,
) -> datetime.datetime:
    """Pick the evaluation time: --now, then the snapshot, then the clock."""
    if option_value:
        try:
            parsed = _DATETIME_ADAPTER.validate_python(option_value)
        except ValidationError:
            console.print(f"[red]Error:[/red] --now is not an ISO-8601 datetime: {option_value!r}")
            sys.exit(1)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=datetime.timezone.utc)
    if snapshot_now is not None:
        return snapshot_now
    return datetime.datetime.now(datetime.timezone.utc)


if __name__ == "__main__":
    cli()
