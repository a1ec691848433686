"""Console output for hunt progress."""

from typing import Any, Dict, Iterable, Optional

from rich.console import Console
from rich.table import Table

from ..checkers.models import AvailabilityVerdict


class ConsoleReporter:
    """Prints hunt events with rich markup. Output only, never read back."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def banner(self, config):
        self.console.print("\n[bold cyan]domainhunt[/bold cyan] - hunting for available domains\n")
        self.console.print(f"  TLDs:       {', '.join(config.tlds)}")
        self.console.print(f"  Max price:  ${config.max_price_per_year}/yr")
        self.console.print(f"  Keywords:   {', '.join(config.keywords) or '-'}")
        self.console.print(f"  Names:      {', '.join(config.personal_names) or '-'}")
        self.console.print(f"  Strategies: {', '.join(config.strategies)}\n")

    def resuming(self, stats: Dict[str, int]):
        self.console.print(
            f"  Resuming: {stats['checked']} already checked, {stats['found']} found so far\n"
        )

    def available(self, domain: str, strategy: str, price: str):
        self.console.print(f"  [bold green]AVAILABLE[/bold green] {domain} [dim]({strategy})[/dim] {price}")

    def taken(self, domain: str):
        self.console.print(f"  [dim]taken     {domain}[/dim]")

    def error(self, domain: str, reason: str):
        self.console.print(f"  [yellow]unknown[/yellow]   {domain} [dim]{reason}[/dim]")

    def stopping(self):
        self.console.print("\n  [yellow]Stop requested, finishing up...[/yellow]")

    def saving(self):
        self.console.print("\n  [dim]Saving progress...[/dim]")

    def saved(self, found: int):
        self.console.print(f"  [green]Saved.[/green] {found} available domains on record.")

    def stats(self, checked: int, found: int):
        self.console.print(f"\n[bold]Checked:[/bold] {checked}   [bold green]Found:[/bold green] {found}\n")

    def verdict_table(self, verdicts: Iterable[AvailabilityVerdict], title: str = "Availability"):
        table = Table(title=title)
        table.add_column("Domain", style="cyan")
        table.add_column("Available", justify="center")
        table.add_column("Method", style="dim")
        table.add_column("Details")

        for v in verdicts:
            icon = "[green]Y[/green]" if v.available is True else "[red]N[/red]" if v.available is False else "[yellow]?[/yellow]"
            details = "; ".join(filter(None, [v.price and f"{v.price} premium", v.note, v.reason]))
            table.add_row(v.domain, icon, v.method.value, details or "-")

        self.console.print(table)

    def found_table(self, entries: Iterable[Dict[str, Any]], limit: int = 50):
        table = Table(title="Available Domains")
        table.add_column("Domain", style="cyan")
        table.add_column("Strategy")
        table.add_column("Price", justify="right", style="green")
        table.add_column("Method", style="dim")
        table.add_column("Found", style="dim")

        for entry in list(entries)[:limit]:
            price = (entry.get('price') or '-') + (" (premium)" if entry.get('premium') else "")
            table.add_row(
                entry.get('domain', '-'),
                entry.get('strategy', '-'),
                price,
                entry.get('method', '-'),
                entry.get('checked_at', '-'),
            )

        self.console.print(table)
