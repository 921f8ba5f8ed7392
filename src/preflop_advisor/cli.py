"""Command-line interface for preflop advisor."""

import sys
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import AppSettings
from .errors import AdvisorError
from .state.model import DecisionRequest
from .strategy.engine import DecisionEngine
from .strategy.prompts import build_messages


app = typer.Typer(
    name="preflop-advisor",
    help="Preflop decision advisor backed by a chat-completion model",
    no_args_is_help=True,
)

console = Console()


def _scenario(
    players: Optional[str],
    position: Optional[str],
    hand: Optional[str],
    situation: Optional[str],
    limpers: Optional[str],
    open_size: Optional[str],
    open_pos: Optional[str],
    open_callers: Optional[str],
    three_bet_size: Optional[str],
    three_bet_ip: Optional[str],
    three_bet_callers: Optional[str],
    style: Optional[str],
    bluffing: Optional[str],
) -> DecisionRequest:
    params: Dict[str, Optional[str]] = {
        "players": players,
        "position": position,
        "hand": hand,
        "situation": situation,
        "limpers": limpers,
        "openSize": open_size,
        "openPos": open_pos,
        "openCallers": open_callers,
        "threeBetSize": three_bet_size,
        "threeBetIP": three_bet_ip,
        "threeBetCallers": three_bet_callers,
        "style": style,
        "bluffing": bluffing,
    }
    return DecisionRequest.from_query(params)


PlayersOpt = typer.Option(None, "--players", "-n", help="Players at the table")
PositionOpt = typer.Option(None, "--position", "-p", help="Hero seat (BTN, CO, ...)")
HandOpt = typer.Option(None, "--hand", help="Hero hand, e.g. AKo")
SituationOpt = typer.Option(None, "--situation", "-s", help='e.g. "facing open"')
LimpersOpt = typer.Option(None, "--limpers")
OpenSizeOpt = typer.Option(None, "--open-size", help="Open size in BB")
OpenPosOpt = typer.Option(None, "--open-pos")
OpenCallersOpt = typer.Option(None, "--open-callers")
ThreeBetSizeOpt = typer.Option(None, "--three-bet-size", help="3-bet size in BB")
ThreeBetIPOpt = typer.Option(None, "--three-bet-ip")
ThreeBetCallersOpt = typer.Option(None, "--three-bet-callers")
StyleOpt = typer.Option(None, "--style", help="aggressive|passive|standard")
BluffingOpt = typer.Option(None, "--bluffing", help="high|normal|low")


@app.command()
def decide(
    players: Optional[str] = PlayersOpt,
    position: Optional[str] = PositionOpt,
    hand: Optional[str] = HandOpt,
    situation: Optional[str] = SituationOpt,
    limpers: Optional[str] = LimpersOpt,
    open_size: Optional[str] = OpenSizeOpt,
    open_pos: Optional[str] = OpenPosOpt,
    open_callers: Optional[str] = OpenCallersOpt,
    three_bet_size: Optional[str] = ThreeBetSizeOpt,
    three_bet_ip: Optional[str] = ThreeBetIPOpt,
    three_bet_callers: Optional[str] = ThreeBetCallersOpt,
    style: Optional[str] = StyleOpt,
    bluffing: Optional[str] = BluffingOpt,
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
) -> None:
    """Ask the model for a preflop decision."""
    try:
        scenario = _scenario(
            players, position, hand, situation, limpers, open_size, open_pos,
            open_callers, three_bet_size, three_bet_ip, three_bet_callers, style, bluffing,
        )
        decision = DecisionEngine.from_config(AppSettings()).decide(scenario)
    except AdvisorError as e:
        console.print_json(data=e.to_payload())
        raise typer.Exit(1)

    if as_json:
        console.print_json(decision.model_dump_json())
        return

    table = Table(title=f"{scenario.hand} @ {scenario.position} ({scenario.situation})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("decision", decision.decision)
    table.add_row("confidence", f"{decision.confidence:.2f}")
    table.add_row("rationale", decision.rationale)
    for name in ("when_fold", "when_call", "when_raise", "risk_flags"):
        table.add_row(name, "\n".join(getattr(decision, name)) or "-")
    console.print(table)


@app.command()
def prompt(
    players: Optional[str] = PlayersOpt,
    position: Optional[str] = PositionOpt,
    hand: Optional[str] = HandOpt,
    situation: Optional[str] = SituationOpt,
    limpers: Optional[str] = LimpersOpt,
    open_size: Optional[str] = OpenSizeOpt,
    open_pos: Optional[str] = OpenPosOpt,
    open_callers: Optional[str] = OpenCallersOpt,
    three_bet_size: Optional[str] = ThreeBetSizeOpt,
    three_bet_ip: Optional[str] = ThreeBetIPOpt,
    three_bet_callers: Optional[str] = ThreeBetCallersOpt,
    style: Optional[str] = StyleOpt,
    bluffing: Optional[str] = BluffingOpt,
) -> None:
    """Show the messages that would be sent, without calling the model."""
    try:
        scenario = _scenario(
            players, position, hand, situation, limpers, open_size, open_pos,
            open_callers, three_bet_size, three_bet_ip, three_bet_callers, style, bluffing,
        )
    except AdvisorError as e:
        console.print_json(data=e.to_payload())
        raise typer.Exit(1)

    for message in build_messages(scenario):
        console.print(Panel(Text(message["content"]), title=message["role"], border_style="blue"))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    console.print(f"[blue]Serving preflop advisor on http://{host}:{port}/api/decide[/blue]")
    uvicorn.run("preflop_advisor.api:app", host=host, port=port)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    panel = Panel(
        f"[bold blue]Preflop Advisor[/bold blue]\n"
        f"Version: {__version__}\n"
        f"Python: {sys.version.split()[0]}\n"
        f"Platform: {sys.platform}",
        title="Version Info",
        border_style="blue"
    )
    console.print(panel)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
