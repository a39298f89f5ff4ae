"""
Command-line interface for the hybrid search agent.

Commands:
- list-games: Show available games
- match: Play match series of the hybrid agent against a baseline
- play: Play against the hybrid agent
- analyze: Run one decision and show the search statistics
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="hybridsearch",
    help="Hybrid minimax / Monte Carlo game agent",
    no_args_is_help=True,
)

console = Console()


def _load_config(config_path: Optional[Path]):
    from .utils.config import Config, get_default_config

    if config_path is None:
        return get_default_config()
    return Config.load(str(config_path))


def _get_game_or_exit(game_name: str):
    from .games import get_game

    try:
        return get_game(game_name)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command("list-games")
def list_games_cmd() -> None:
    """List all available games."""
    from .games import list_games, get_game

    table = Table(title="Available Games")
    table.add_column("Name", style="cyan")
    table.add_column("Board", style="green")
    table.add_column("Actions", style="yellow")

    for name in list_games():
        game = get_game(name)
        spec = game.spec
        board_str = "x".join(str(d) for d in spec.board_shape)
        table.add_row(name, board_str, str(spec.num_actions))

    console.print(table)


@app.command()
def match(
    games: Optional[List[str]] = typer.Argument(None, help="Games to play (default: from config)"),
    num_games: Optional[int] = typer.Option(None, "--games", "-n", help="Matches per game"),
    thinking_time: Optional[float] = typer.Option(None, "--time", "-t", help="Seconds per move"),
    max_steps: Optional[int] = typer.Option(None, "--max-steps", help="Move cap per match"),
    playouts: Optional[int] = typer.Option(None, "--playouts", "-p", help="Playouts per leaf"),
    playout_depth: Optional[int] = typer.Option(None, "--playout-depth", help="Plies per playout"),
    opponent: Optional[str] = typer.Option(None, "--opponent", "-o", help="uct or random"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for JSONL logs"),
) -> None:
    """Play match series: hybrid agent vs a baseline opponent."""
    from dataclasses import replace
    from .agents import HybridMinimaxAgent, RandomAgent, UCTAgent
    from .eval import Arena
    from .utils import MatchLogger, create_progress, make_rng, print_config

    try:
        config = _load_config(config_path)
        config.agent = replace(
            config.agent,
            evaluation_playouts=playouts if playouts is not None else config.agent.evaluation_playouts,
            max_playout_depth=playout_depth if playout_depth is not None else config.agent.max_playout_depth,
        )
        config.match = replace(
            config.match,
            games=games or config.match.games,
            num_games=num_games if num_games is not None else config.match.num_games,
            thinking_time=thinking_time if thinking_time is not None else config.match.thinking_time,
            max_steps=max_steps if max_steps is not None else config.match.max_steps,
            opponent=opponent or config.match.opponent,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    if seed is not None:
        config.seed = seed
    if log_dir is not None:
        config.log_dir = str(log_dir)

    print_config(config)

    hybrid = HybridMinimaxAgent(config.agent, rng=make_rng(config.seed))
    if config.match.opponent == "uct":
        opponent_agent = UCTAgent(
            exploration=config.uct.exploration,
            max_playout_depth=config.uct.max_playout_depth,
            max_iterations=config.uct.max_iterations,
            rng=make_rng(config.seed, offset=1),
        )
    else:
        opponent_agent = RandomAgent(rng=make_rng(config.seed, offset=1))

    logger = MatchLogger(config.log_dir)
    arena = Arena(
        hybrid,
        opponent_agent,
        max_steps=config.match.max_steps,
        thinking_time=config.match.thinking_time,
        logger=logger,
    )

    summary = Table(title="Summary")
    summary.add_column("Game", style="cyan")
    summary.add_column("W", style="green")
    summary.add_column("L", style="red")
    summary.add_column("D", style="yellow")
    summary.add_column("Unfinished")
    summary.add_column("Score")

    for game_name in config.match.games:
        game = _get_game_or_exit(game_name)
        logger.log_info(f"Game: {game_name} ({hybrid.name} vs {opponent_agent.name})")

        with create_progress() as progress:
            task = progress.add_task(game_name, total=config.match.num_games)
            result = arena.evaluate(
                game,
                config.match.num_games,
                progress_callback=lambda n, outcome: progress.update(task, completed=n),
            )
        if result.unfinished:
            logger.log_warning(f"{result.unfinished} match(es) hit the {config.match.max_steps}-step cap")
        summary.add_row(
            game_name,
            str(result.wins),
            str(result.losses),
            str(result.draws),
            str(result.unfinished),
            f"{result.score:.2f}",
        )

    console.print(summary)
    if logger.log_file is not None:
        logger.log_success(f"Match log written to {logger.log_file}")


@app.command()
def play(
    game_name: str = typer.Argument("tictactoe", help="Game to play"),
    thinking_time: float = typer.Option(2.0, "--time", "-t", help="AI seconds per move"),
    playouts: int = typer.Option(25, "--playouts", "-p", help="Playouts per leaf"),
    playout_depth: int = typer.Option(50, "--playout-depth", help="Plies per playout"),
    human_first: bool = typer.Option(True, "--first/--second", help="Human plays first"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play against the hybrid agent."""
    from .agents import HybridMinimaxAgent
    from .utils import AgentConfig, make_rng, print_board

    game = _get_game_or_exit(game_name)

    try:
        agent_config = AgentConfig(evaluation_playouts=playouts, max_playout_depth=playout_depth)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    human = 0 if human_first else 1
    agent = HybridMinimaxAgent(agent_config, rng=make_rng(seed))
    agent.initialize(game, 1 - human)

    state = game.initial_state()

    console.print(f"\n[bold]Playing {game_name}[/]")
    console.print(f"You are player {human}, AI is player {1 - human}\n")

    while True:
        print_board(game.render(state), title=game_name)

        if game.is_terminal(state):
            winners = game.winners(state)
            if human in winners:
                console.print("[green]You win![/]")
            elif winners:
                console.print("[red]AI wins![/]")
            else:
                console.print("[yellow]Draw![/]")
            break

        if game.current_player(state) == human:
            legal = game.legal_actions(state)
            while True:
                try:
                    action = game.parse_action(typer.prompt(f"Your move {legal}"))
                    if action in legal:
                        break
                    console.print("[red]Invalid move[/]")
                except ValueError:
                    console.print("[red]Enter a number[/]")

            state = game.next_state(state, action)
        else:
            console.print("[cyan]AI thinking...[/]")
            result = agent.search(game, state, thinking_time)
            state = game.next_state(state, result.move)
            console.print(
                f"AI played: {result.move} "
                f"(score {result.score:+.2f}, depth {result.depth}, {result.elapsed_seconds:.2f}s)\n"
            )


@app.command()
def analyze(
    game_name: str = typer.Argument("tictactoe", help="Game to analyze"),
    moves: str = typer.Option("", "--moves", "-m", help="Comma-separated moves from the start"),
    thinking_time: float = typer.Option(1.0, "--time", "-t", help="Seconds to think"),
    playouts: int = typer.Option(25, "--playouts", "-p", help="Playouts per leaf"),
    playout_depth: int = typer.Option(50, "--playout-depth", help="Plies per playout"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run a single decision and show what the search found."""
    from .agents import HybridMinimaxAgent
    from .search import NoLegalMovesError
    from .utils import AgentConfig, make_rng, print_board

    game = _get_game_or_exit(game_name)

    try:
        state = game.initial_state()
        for token in filter(None, (t.strip() for t in moves.split(","))):
            state = game.next_state(state, game.parse_action(token))
        agent_config = AgentConfig(evaluation_playouts=playouts, max_playout_depth=playout_depth)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    print_board(game.render(state), title=game_name)

    agent = HybridMinimaxAgent(agent_config, rng=make_rng(seed))
    agent.initialize(game, game.current_player(state))

    try:
        result = agent.search(game, state, thinking_time)
    except NoLegalMovesError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    table = Table(title="Decision", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Player", str(agent.player))
    table.add_row("Move", str(result.move))
    table.add_row("Score", f"{result.score:+.3f}")
    table.add_row("Reached depth", str(result.depth))
    table.add_row("Nodes", str(result.nodes))
    table.add_row("Time", f"{result.elapsed_seconds:.3f}s")
    table.add_row(
        "Iterations",
        ", ".join(f"{t * 1000:.1f}ms" for t in result.iteration_times),
    )
    console.print(table)


if __name__ == "__main__":
    app()
