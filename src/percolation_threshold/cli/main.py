"""
Command-line interface for percolation_threshold.

Commands:
    percolation-threshold stats N T [--seed 42] [--sampler permutation] [--output trials.csv]
    percolation-threshold run --config run.yaml
    percolation-threshold grid N --open 0,0 --open 1,0 ...
"""

import click

from ..percolation.stats import SAMPLERS


def _echo_report(estimator):
    """Print mean, standard deviation and confidence interval, in that order."""
    click.echo(f"mean = {estimator.mean()}")
    click.echo(f"standard deviation = {estimator.stddev()}")
    click.echo(
        f"95% confidence interval = {estimator.confidence_lo()} , {estimator.confidence_hi()}"
    )


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte Carlo estimation of the site percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=click.IntRange(min=1))
@click.argument('trials', type=click.IntRange(min=1))
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed for reproducible runs')
@click.option('--sampler', default='permutation', type=click.Choice(SAMPLERS),
              help='Site selection strategy')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Optional CSV file for per-trial results')
@click.option('--verbose', '-v', is_flag=True, help='Print every trial fraction')
def stats(n, trials, seed, sampler, output_file, verbose):
    """Estimate the threshold on an N-by-N grid over TRIALS trials."""
    from ..percolation.stats import ThresholdEstimator

    if verbose:
        click.echo(f"Running {trials} trials on a {n}x{n} grid (sampler={sampler})")

    estimator = ThresholdEstimator(n, trials, seed=seed, sampler=sampler, verbose=verbose)
    _echo_report(estimator)

    if output_file:
        path = estimator.save_results(output_file)
        click.echo(f"Saved per-trial results to {path}")


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Simulation config YAML')
@click.option('--verbose', '-v', is_flag=True, help='Print every trial fraction')
def run(config_path, verbose):
    """Run a simulation defined in a YAML config."""
    from ..run.config import SimulationConfig

    try:
        config = SimulationConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}")

    click.echo(f"Loaded config: {config_path}")
    click.echo(f"  grid_size={config.grid_size}, trials={config.trials}, "
               f"seed={config.seed}, sampler={config.sampler}")

    estimator = config.build_estimator(verbose=verbose)
    _echo_report(estimator)

    if config.output is not None:
        path = estimator.save_results(config.output)
        click.echo(f"Saved per-trial results to {path}")


def _parse_site(value):
    parts = value.split(',')
    if len(parts) != 2:
        raise click.BadParameter(f"expected ROW,COL, got '{value}'", param_hint='--open')
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise click.BadParameter(f"expected integers ROW,COL, got '{value}'", param_hint='--open')


@cli.command('grid')
@click.argument('n', type=click.IntRange(min=1))
@click.option('--open', '-s', 'sites', multiple=True,
              help='Site to open as ROW,COL (0-indexed, repeatable)')
def grid(n, sites):
    """Open sites on an N-by-N grid and show which are full."""
    from ..percolation.grid import PercolationGrid

    coords = [_parse_site(s) for s in sites]
    for row, col in coords:
        if not (0 <= row < n and 0 <= col < n):
            raise click.BadParameter(f"site {row},{col} is outside the {n}x{n} grid",
                                     param_hint='--open')

    percolation = PercolationGrid(n)
    for row, col in coords:
        percolation.open(row, col)

    click.echo(percolation.render())
    click.echo(f"open sites = {percolation.number_of_open_sites()}")
    click.echo(f"percolates = {percolation.percolates()}")


if __name__ == '__main__':
    cli()
