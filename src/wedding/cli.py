"""
Wedding RSVP CLI
Inspect how guest searches resolve against the invite database.
"""

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from wedding.config import settings
from wedding.db import DatabaseManager
from wedding.matching import GuestMatcher, SimilarityScorer
from wedding.matching.repository import CandidateRepository


console = Console()


@click.group()
@click.option("--database-url", "-d", default=None, help="Database URL (defaults to settings)")
@click.pass_context
def cli(ctx, database_url: str | None):
    """Wedding RSVP CLI - check which guest a search would find."""
    ctx.ensure_object(dict)
    ctx.obj["database_url"] = database_url or settings.database_url


@cli.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the invite and guest tables."""
    db_manager = DatabaseManager(database_url=ctx.obj["database_url"])
    try:
        db_manager.init_db()
        console.print("✅ [green]Database ready[/green]")
    finally:
        db_manager.close()


@cli.command()
@click.argument("name")
@click.option("--limit", "-n", default=10, help="Number of matches to show")
@click.option("--min-score", default=None, type=float, help="Acceptance threshold (0-100)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search(ctx, name: str, limit: int, min_score: float | None, as_json: bool):
    """Rank the guests matching NAME, best first."""
    if not name.strip():
        raise click.BadParameter("Guest name is required", param_hint="NAME")

    matcher = GuestMatcher(
        min_score=min_score if min_score is not None else settings.match_min_score
    )
    db_manager = DatabaseManager(database_url=ctx.obj["database_url"])

    try:
        with db_manager.get_session() as session:
            candidates = CandidateRepository(session).list_candidates()
            matches = matcher.find_all_matches(name.strip(), candidates, max_results=limit)

            if not matches:
                console.print(f"❌ [red]No invite found for {name!r}[/red]")
                sys.exit(1)

            if as_json:
                data = [
                    {
                        "rank": i + 1,
                        "guest": m.guest_name,
                        "guest_id": m.guest.id,
                        "invite": m.invite.name,
                        "invite_id": m.invite.id,
                        "score": round(m.score, 2),
                        "tier": m.tier.value,
                    }
                    for i, m in enumerate(matches)
                ]
                click.echo(json.dumps(data, indent=2, ensure_ascii=False))
                return

            table = Table(title=f"Matches for {name!r} ({matches[0].total_matches} total)")
            table.add_column("#", style="dim", width=4)
            table.add_column("Guest", style="cyan")
            table.add_column("Invite")
            table.add_column("Score", justify="right")
            table.add_column("Tier")

            for i, m in enumerate(matches):
                score_color = "green" if m.score >= 90 else "yellow" if m.score >= 70 else "red"
                table.add_row(
                    str(i + 1),
                    m.guest_name,
                    m.invite.name,
                    f"[{score_color}]{m.score:.1f}[/{score_color}]",
                    m.tier.value,
                )

            console.print(table)
    finally:
        db_manager.close()


@cli.command()
@click.argument("term")
@click.argument("guest_name")
def score(term: str, guest_name: str):
    """Show the score TERM gets against a single GUEST_NAME."""
    result = SimilarityScorer().evaluate(term, guest_name)
    console.print(f"{result.score:.2f} [dim]({result.tier.value})[/dim]")


def main():
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
