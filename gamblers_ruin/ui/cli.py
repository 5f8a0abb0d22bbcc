"""Typer-based command line interface for running ruin simulations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from .. import config
from ..core.theory import compute_ruin_probability
from ..core.validator import InvalidParameters
from ..engine import RuinEngine
from ..models.progress import BatchProgressEvent
from ..models.results import RuinAnalysis
from ..utils.numbers import decimalize
from ..visualization import build_convergence_figure, build_path_figure

app = typer.Typer(help="Gambler's Ruin Monte Carlo simulator")
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _format_percent(value: Optional[float]) -> str:
    return f"{value * 100:.3f}%" if value is not None else "N/A"


def _parameter_table(analysis: RuinAnalysis) -> Table:
    summary = analysis.summary()
    table = Table(title="Gambler's Ruin Summary", show_lines=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Initial capital", f"${summary['initial_capital']}")
    table.add_row("Target capital", f"${summary['target_capital']}")
    table.add_row("Win probability (p)", f"{summary['success_probability']:.3f}")
    table.add_row("Simulations", str(summary["simulation_count"]))
    table.add_row("Step cap", str(summary["max_steps"]))
    table.add_row("Theoretical success", _format_percent(summary["theoretical_probability"]))
    table.add_row("Theoretical ruin", _format_percent(summary["theoretical_ruin_probability"]))
    table.add_row("Empirical success", _format_percent(summary["empirical_probability"]))
    table.add_row("Absolute error", _format_percent(summary["absolute_error"]))
    table.add_row("Truncated walks", str(summary["truncated_walks"]))
    return table


def _export_figures(analysis: RuinAnalysis, output_dir: Path) -> Dict[str, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    figures = {
        "paths": build_path_figure(analysis.batch),
        "convergence": build_convergence_figure(
            analysis.convergence,
            analysis.theoretical_probability,
            display_range=analysis.display_range,
        ),
    }
    exported: Dict[str, Path] = {}
    for name, figure in figures.items():
        path = output_dir / f"{name}.html"
        figure.write_html(str(path), include_plotlyjs="cdn")
        exported[name] = path
    return exported


@app.command()
def run(
    initial_capital: int = typer.Option(config.DEFAULT_INITIAL_CAPITAL, help="Starting bankroll ($)"),
    target_capital: int = typer.Option(config.DEFAULT_TARGET_CAPITAL, help="Bankroll at which play stops ($)"),
    probability: float = typer.Option(
        config.DEFAULT_PROBABILITY, help="Probability of winning each bet (decimal or percent)"
    ),
    simulations: int = typer.Option(config.DEFAULT_SIMULATIONS, help="Number of simulated walks"),
    seed: Optional[int] = typer.Option(config.RANDOM_SEED, help="Random seed (omit for a fresh run)"),
    max_steps: int = typer.Option(config.MAX_STEPS, help="Maximum bets per walk"),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for HTML chart exports"),
    log_level: str = typer.Option(config.LOG_LEVEL, help="Logging level"),
) -> None:
    """Run a Monte Carlo batch and compare it with the closed-form probability."""
    _configure_logging(log_level)
    engine = RuinEngine()
    try:
        engine.set_parameters(
            initial_capital,
            target_capital,
            decimalize(probability),
            simulations,
            max_steps=max_steps,
            random_seed=seed,
        )
    except InvalidParameters as exc:
        raise typer.BadParameter(str(exc)) from exc

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Running simulations...", total=simulations)

        def _advance(event: BatchProgressEvent) -> None:
            progress.update(task_id, completed=event.completed)

        analysis = engine.run_analysis(progress_callback=_advance)

    console.print(_parameter_table(analysis))
    for warning in analysis.validation.get("warnings", []):
        console.print(f"[yellow]Validation warning: {warning}[/yellow]")
    for failure in analysis.validation.get("failed_checks", []):
        console.print(f"[red]Validation failure: {failure}[/red]")

    if output_dir is not None:
        exported = _export_figures(analysis, output_dir)
        console.print("Generated charts:")
        for name, path in exported.items():
            console.print(f"  - {name}: {path}")

    console.print("\n[bold green]Simulation complete![/bold green]")


@app.command()
def theory(
    initial_capital: int = typer.Option(config.DEFAULT_INITIAL_CAPITAL, help="Starting bankroll ($)"),
    target_capital: int = typer.Option(config.DEFAULT_TARGET_CAPITAL, help="Bankroll at which play stops ($)"),
    probability: float = typer.Option(
        config.DEFAULT_PROBABILITY, help="Probability of winning each bet (decimal or percent)"
    ),
) -> None:
    """Print the closed-form probability of reaching the target."""
    try:
        value = compute_ruin_probability(decimalize(probability), initial_capital, target_capital)
    except InvalidParameters as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"[bold]Theoretical Probability of Success:[/bold] {_format_percent(value)}")
    console.print(f"[bold]Theoretical Probability of Ruin:[/bold] {_format_percent(1.0 - value)}")


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
