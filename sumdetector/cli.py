"""
Command-line interface for the sum combination detector.

Every command is a thin caller of `sumdetector.analyze` or the benchmark
harness; input size caps live here, not in the core.
"""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console

from . import __version__
from .algorithms.selector import AlgorithmStrategy, DEFAULT_STRATEGY
from .config import ConfigManager, DetectorConfig, create_default_config_file
from .core.analyzer import analyze
from .core.parser import format_input, quick_validate
from .core.reporting import ResultRenderer
from .core.types import key_set
from .engine.errors import ConfigurationError
from .performance.benchmark import run_benchmark
from .performance.complexity import get_complexity_info
from .performance.memory import get_memory_probe
from .performance.profiler import PerformanceProfiler
from .utils.logging_setup import log_operation, setup_logging


console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

EXIT_ANALYSIS_ERROR = 1
EXIT_USAGE_ERROR = 2


def _load_config(ctx: click.Context) -> DetectorConfig:
    config = ctx.obj.get("config")
    if config is None:
        for problem in ctx.obj.get("problems", []):
            err_console.print(f"[red]  • {problem}[/red]")
        sys.exit(EXIT_USAGE_ERROR)
    return config


def _profiler_for(ctx: click.Context, config: DetectorConfig) -> PerformanceProfiler:
    """Build the configured profiler; its probe is released when the command ends."""
    profiler = PerformanceProfiler(memory_probe=get_memory_probe(config.memory_probe))
    ctx.call_on_close(profiler.close)
    return profiler


def _prepare_input(raw: str, config: DetectorConfig, normalize: Optional[bool]) -> str:
    """Apply optional normalisation and the configured size cap."""
    text = raw
    if normalize if normalize is not None else config.normalize_input:
        text = format_input(raw)
        hint = quick_validate(text)
        if hint:
            err_console.print(f"[yellow]{hint}[/yellow]")

    if config.max_input_size is not None and text.strip():
        size = text.count(",") + 1
        if size > config.max_input_size:
            err_console.print(
                f"[red]Input has {size} values, limit is {config.max_input_size}[/red]"
            )
            sys.exit(EXIT_USAGE_ERROR)
    return text


def _parse_sizes(value: Optional[str]) -> Optional[List[int]]:
    if value is None:
        return None
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"sizes must be comma-separated integers, got '{value}'")
    if not sizes or any(size < 1 for size in sizes):
        raise click.BadParameter("sizes must be positive")
    return sizes


@click.group()
@click.version_option(__version__, prog_name="sumdetector")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write JSON-lines log records to this file")
@click.pass_context
def cli(ctx, config_path, verbose, log_file):
    """Find index triples where two elements sum to a third."""
    ctx.ensure_object(dict)
    try:
        config = ConfigManager(config_path).load()
        problems = config.validate()
    except ConfigurationError as e:
        config, problems = None, [e.message]

    ctx.obj["config"] = None if problems else config
    ctx.obj["problems"] = problems
    ctx.obj["config_path"] = config_path

    # config subcommands report or repair problems themselves
    if problems and ctx.invoked_subcommand != "config":
        _load_config(ctx)

    valid = config is not None and not problems
    level = "DEBUG" if verbose else (config.log_level if valid else "WARNING")
    setup_logging(level=level, log_file=log_file or (config.log_file if valid else None))


@cli.command(name="analyze")
@click.argument("numbers")
@click.option("--algorithm", "-a", default=None,
              help="time-efficient or memory-efficient (unknown names use time-efficient)")
@click.option("--json/--text", "as_json", default=None, help="Output format (defaults to the configured one)")
@click.option("--normalize/--no-normalize", default=None,
              help="Tidy spacing and stray commas before parsing")
@click.pass_context
def analyze_command(ctx, numbers, algorithm, as_json, normalize):
    """Detect sum combinations in comma-separated NUMBERS."""
    config = _load_config(ctx)
    algorithm = algorithm or config.default_algorithm
    log_operation(logger, "analyze", algorithm=algorithm)

    text = _prepare_input(numbers, config, normalize)
    result = analyze(text, algorithm, profiler=_profiler_for(ctx, config))

    if as_json or (as_json is None and config.output_format == "json"):
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        ResultRenderer(console).render(result)

    if not result.ok:
        sys.exit(EXIT_ANALYSIS_ERROR)


@cli.command(name="compare")
@click.argument("numbers")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option("--normalize/--no-normalize", default=None,
              help="Tidy spacing and stray commas before parsing")
@click.pass_context
def compare_command(ctx, numbers, as_json, normalize):
    """Run every strategy on NUMBERS and check they agree."""
    config = _load_config(ctx)
    log_operation(logger, "compare")

    text = _prepare_input(numbers, config, normalize)
    profiler = _profiler_for(ctx, config)
    results = {
        strategy.value: analyze(text, strategy.value, profiler=profiler)
        for strategy in AlgorithmStrategy
    }

    first = next(iter(results.values()))
    if first.error and first.performance_metrics is None:
        if as_json:
            click.echo(json.dumps(first.to_dict(), indent=2, ensure_ascii=False))
        else:
            ResultRenderer(console).render_error(first.error)
        sys.exit(EXIT_ANALYSIS_ERROR)

    key_sets = [key_set(r.input, r.result) for r in results.values()]
    consistent = all(keys == key_sets[0] for keys in key_sets)

    if as_json:
        payload = {
            "consistent": consistent,
            "results": {identifier: r.to_dict() for identifier, r in results.items()},
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        renderer = ResultRenderer(console)
        renderer.render(first)
        renderer.render_comparison(
            {identifier: r.performance_metrics for identifier, r in results.items()},
            consistent,
        )

    if not consistent or not all(r.ok for r in results.values()):
        sys.exit(EXIT_ANALYSIS_ERROR)


@cli.command(name="algorithms")
def algorithms_command():
    """List available detection strategies."""
    for strategy in AlgorithmStrategy:
        info = get_complexity_info(strategy.display_name)
        default = " (default)" if strategy is DEFAULT_STRATEGY else ""
        console.print(f"[bold cyan]{strategy.value}[/bold cyan]{default} - {strategy.label}")
        if info:
            console.print(f"    time {info['time']}, space {info['space']}: {info['description']}")


@cli.command(name="benchmark")
@click.option("--sizes", default=None, help="Comma-separated input sizes, e.g. 10,20,40")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--repeat", type=click.IntRange(min=1), default=3, help="Runs per size and strategy")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def benchmark_command(ctx, sizes, seed, repeat, as_json):
    """Time both strategies on random inputs of growing size."""
    config = _load_config(ctx)
    sizes = _parse_sizes(sizes) or config.benchmark_sizes
    seed = config.benchmark_seed if seed is None else seed
    log_operation(logger, "benchmark", sizes=sizes, seed=seed, repeat=repeat)

    report = run_benchmark(
        sizes,
        seed=seed,
        repeat=repeat,
        value_range=config.benchmark_value_range,
        profiler=_profiler_for(ctx, config),
    )

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        ResultRenderer(console).render_benchmark(report)

    if not report.consistent:
        sys.exit(EXIT_ANALYSIS_ERROR)


@cli.group(name="config")
def config_group():
    """Manage sum detector configuration."""
    pass


@config_group.command(name="init")
@click.option("--path", type=click.Path(dir_okay=False, path_type=Path),
              default=Path(ConfigManager.DEFAULT_CONFIG_FILE), help="Path for config file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(path, force):
    """Write a default configuration file."""
    if path.exists() and not force:
        if not click.confirm(f"Config file {path} already exists. Overwrite?"):
            console.print("[yellow]Aborted[/yellow]")
            return

    if not create_default_config_file(path):
        sys.exit(EXIT_USAGE_ERROR)


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display the effective configuration."""
    config = _load_config(ctx)
    ConfigManager(ctx.obj.get("config_path")).display(config, console=console)


@config_group.command(name="validate")
@click.pass_context
def config_validate(ctx):
    """Validate the effective configuration."""
    _load_config(ctx)
    console.print("[green]✓ Configuration is valid[/green]")


def main():
    """Main CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
