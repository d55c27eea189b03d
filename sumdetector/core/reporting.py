"""
Terminal rendering of analysis results.

Formats combinations and metrics the way the interactive front end shows
them and prints them with rich.
"""

from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from ..algorithms.selector import AlgorithmStrategy
from ..performance.benchmark import BenchmarkReport
from ..performance.profiler import PerformanceReport
from .analyzer import AnalysisResult
from .types import Combination


NO_RESULTS_MESSAGE = "No valid combinations found"


def format_combination(combination: Combination) -> str:
    """Render as '0 + 1 = 2  (A[0] + A[1] = A[2])'."""
    c = combination
    return f"{c.p_a} + {c.p_b} = {c.sum_index}  (A[{c.p_a}] + A[{c.p_b}] = A[{c.sum_index}])"


def format_memory(memory_used: int) -> str:
    """Kilobytes with two decimals, 'N/A' when nothing was measured."""
    if memory_used > 0:
        return f"{memory_used / 1024:.2f}KB"
    return "N/A"


def format_time(execution_time: float) -> str:
    return f"{execution_time:.2f}ms"


def metric_rows(report: PerformanceReport) -> List[Sequence[str]]:
    """Label/value pairs for the metrics table."""
    complexity = report.complexity
    return [
        ("Algorithm", report.algorithm),
        ("Execution Time", format_time(report.execution_time)),
        ("Memory Used", format_memory(report.memory_used)),
        ("Memory Probe", report.memory_probe or "none"),
        ("Time Complexity", complexity["time"] if complexity else "unknown"),
        ("Space Complexity", complexity["space"] if complexity else "unknown"),
        ("Input Size", f"{report.input_size} elements"),
        ("Results", str(report.result_count)),
    ]


class ResultRenderer:
    """Prints analysis results, comparisons and benchmarks to a console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, analysis: AnalysisResult) -> None:
        """Print results and metrics, or the error if the analysis failed."""
        if analysis.error:
            self.render_error(analysis.error)
            return

        self.console.print(f"[bold]Input:[/bold] {escape(str(list(analysis.input)))}")
        self.render_combinations(analysis)
        if analysis.performance_metrics is not None:
            self.render_metrics(analysis.performance_metrics)

    def render_error(self, message: str) -> None:
        self.console.print(Panel(Text(message, style="red"), title="[red]Error[/red]", border_style="red"))

    def render_combinations(self, analysis: AnalysisResult) -> None:
        if not analysis.result:
            self.console.print(f"[yellow]{NO_RESULTS_MESSAGE}[/yellow]")
            return

        self.console.print(f"[bold green]Found {len(analysis.result)} combination(s):[/bold green]")
        for combination in analysis.result:
            self.console.print(f"  {format_combination(combination)}")

    def render_metrics(self, report: PerformanceReport) -> None:
        table = Table(title="Performance Analysis", box=box.SIMPLE, show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")
        for label, value in metric_rows(report):
            table.add_row(f"{label}:", value)
        self.console.print(table)

    def render_comparison(self, reports: Dict[str, PerformanceReport], consistent: bool) -> None:
        """Side-by-side metrics for several strategies on one input."""
        table = Table(title="Strategy Comparison", box=box.ROUNDED)
        table.add_column("Strategy", style="cyan")
        table.add_column("Results", justify="right")
        table.add_column("Time", justify="right")
        table.add_column("Memory", justify="right")
        table.add_column("Complexity")
        table.add_column("Error", style="red")

        for identifier, report in reports.items():
            complexity = report.complexity
            table.add_row(
                f"{identifier} ({report.algorithm})",
                str(report.result_count),
                format_time(report.execution_time),
                format_memory(report.memory_used),
                f"{complexity['time']} / {complexity['space']}" if complexity else "unknown",
                report.error or "",
            )
        self.console.print(table)

        if consistent:
            self.console.print("[green]✓ Strategies agree on the set of combinations[/green]")
        else:
            self.console.print("[red]✗ Strategies disagree on the set of combinations[/red]")

    def render_benchmark(self, report: BenchmarkReport) -> None:
        """Timing table per size plus fitted growth exponents."""
        table = Table(title=f"Benchmark (seed={report.seed}, best of {report.repeat})", box=box.ROUNDED)
        table.add_column("Size", justify="right")
        for strategy in AlgorithmStrategy:
            table.add_column(strategy.display_name, justify="right")
        table.add_column("Results", justify="right")
        table.add_column("Agree", justify="center")

        for size, consistent in report.consistency.items():
            rows = {row.strategy: row for row in report.rows if row.size == size}
            cells = [str(size)]
            for strategy in AlgorithmStrategy:
                row = rows.get(strategy)
                cells.append(format_time(row.best_time_ms) if row else "-")
            counts = {row.result_count for row in rows.values()}
            cells.append("/".join(str(c) for c in sorted(counts)))
            cells.append("[green]✓[/green]" if consistent else "[red]✗[/red]")
            table.add_row(*cells)
        self.console.print(table)

        for strategy, exponent in report.growth_exponents().items():
            if exponent is None:
                continue
            self.console.print(f"  {strategy.display_name} runtime grows like n^{exponent:.2f}")
