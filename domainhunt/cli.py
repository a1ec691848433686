"""CLI interface for domainhunt."""

import logging
import signal
from itertools import islice

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Keep library chatter out of the hunt output
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("dns").setLevel(logging.CRITICAL)

from . import __version__
from .checkers import AvailabilityService
from .config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from .generators import generate_domains
from .hunter import DomainHunter
from .pricing import format_price, is_affordable, tld_of
from .utils import CheckpointStore, ConsoleReporter


console = Console()


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_config(config_path: str):
    try:
        return load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def make_stop_handler(hunter: DomainHunter):
    """First Ctrl+C asks the hunt to stop; a second one aborts immediately.

    The handler only flips the hunter's flag. It must not print or take
    locks, since it can interrupt the main thread while those are held.
    """
    def handle_sigint(signum, frame):
        if hunter.stop_requested:
            raise KeyboardInterrupt
        hunter.stop()

    return handle_sigint


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """domainhunt - Find registrable domain names."""
    setup_logging(verbose)


@cli.command()
@click.option('--config', '-c', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to config YAML')
def hunt(config_path):
    """Generate candidates and check them until stopped or exhausted."""
    config = _load_config(config_path)
    reporter = ConsoleReporter(console)
    reporter.banner(config)

    store = CheckpointStore(config.results_file)
    stats = store.load()
    if stats['checked'] > 0:
        reporter.resuming(stats)

    service = AvailabilityService()
    with console.status("[bold green]Loading RDAP bootstrap..."):
        tld_count = service.warmup()
    console.print(f"  RDAP servers known for {tld_count} TLDs\n")

    console.print("  [dim]Ctrl+C stops after the current lookup, twice aborts.[/dim]\n")
    hunter = DomainHunter(config, service=service, store=store, reporter=reporter)
    previous_handler = signal.signal(signal.SIGINT, make_stop_handler(hunter))
    try:
        summary = hunter.run()
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    reporter.stats(summary.total_checked, summary.total_found)
    if summary.exhausted:
        console.print("  All domain combinations exhausted. Edit the config to add more!\n")


@cli.command()
@click.argument('domains', nargs=-1, required=True)
def check(domains):
    """Check availability of specific domains."""
    service = AvailabilityService()
    verdicts = []

    with console.status("[bold green]Checking..."):
        for domain in domains:
            verdicts.append(service.resolve(domain.strip().lower()))

    ConsoleReporter(console).verdict_table(verdicts)


@cli.command()
@click.option('--config', '-c', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to config YAML')
@click.option('--count', '-n', default=20, help='Number of candidates to show')
@click.option('--all-prices', is_flag=True, help='Include TLDs above the price limit')
def generate(config_path, count, all_prices):
    """Preview the candidate stream without checking anything."""
    config = _load_config(config_path)

    candidates = generate_domains(config)
    if not all_prices:
        candidates = (
            c for c in candidates
            if is_affordable(tld_of(c.domain), config.max_price_per_year)
        )

    table = Table(title="Candidates")
    table.add_column("Domain", style="cyan")
    table.add_column("Strategy")
    table.add_column("Price", justify="right", style="green")

    for candidate in islice(candidates, count):
        table.add_row(candidate.domain, candidate.strategy, format_price(tld_of(candidate.domain)))

    console.print(table)


@cli.command()
@click.option('--config', '-c', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to config YAML')
@click.option('--results-file', '-r', default=None, help='Results file (overrides config)')
@click.option('--limit', '-n', default=50, help='Number of results to show')
def results(config_path, results_file, limit):
    """Show domains found so far."""
    if results_file is None:
        results_file = _load_config(config_path).results_file

    store = CheckpointStore(results_file)
    stats = store.load()

    console.print("\n[bold]Hunt Statistics:[/bold]")
    console.print(f"  Domains checked: {stats['checked']}")
    console.print(f"  Available found: [green]{stats['found']}[/green]")

    if store.found:
        ConsoleReporter(console).found_table(reversed(store.found), limit=limit)
    else:
        console.print("[yellow]No available domains found yet.[/yellow]")


def main():
    cli()


if __name__ == '__main__':
    main()
