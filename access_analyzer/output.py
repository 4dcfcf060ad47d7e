"""Access Log Analyzer - Report output"""

from typing import Dict, Iterable, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Report key, table title, key column heading
RANKED_SECTIONS = [
    ('hosts', 'TOP HOSTS', 'Host'),
    ('requests', 'TOP REQUESTS', 'Request'),
    ('pages', 'TOP PAGES', 'Page'),
    ('referrers', 'TOP REFERRERS', 'Referrer'),
    ('ref_domains', 'TOP REFERRING DOMAINS', 'Domain'),
    ('errors', '404 ERRORS', 'Request'),
]


def ranked_table(rows: Iterable[Sequence], heading: str, limit: int = None) -> Table:
    table = Table(box=box.ROUNDED)
    table.add_column("Rank", style="dim", justify="right")
    table.add_column(heading, style="cyan", overflow="fold")
    table.add_column("Hits", style="white", justify="right")
    for rank, (key, count) in enumerate(rows, 1):
        if limit is not None and rank > limit:
            break
        table.add_row(str(rank), key, f"{count:,}")
    return table


def traffic_table(traffic: Iterable[Dict]) -> Table:
    table = Table(box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column("Hits", style="white", justify="right")
    table.add_column("Bandwidth (MB)", style="green", justify="right")
    for day in traffic:
        table.add_row(day['date'], f"{day['hits']:,}", f"{day['bandwidth_mb']:.2f}")
    return table


def _section(console: Console, title: str, style: str = "bold"):
    console.print("\n" + "─" * 70, style="cyan")
    console.print(title, style=style)


def print_report(report: Dict, console: Console, limit: int = None):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              ACCESS LOG REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    summary = report['summary']
    dates = "-"
    if summary['first_date']:
        dates = f"{summary['first_date']} - {summary['last_date']}"
    console.print(Panel.fit(
        f"Total Entries: [cyan]{summary['total_entries']:,}[/]\n"
        f"Unique Hosts: [cyan]{summary['unique_hosts']:,}[/]\n"
        f"Unique Requests: [cyan]{summary['unique_requests']:,}[/]\n"
        f"Bandwidth: [cyan]{summary['total_bandwidth_mb']:,.2f} MB[/]\n"
        f"Dates: [cyan]{dates}[/]",
        title="Summary",
        border_style="cyan"
    ))

    _section(console, "DAILY TRAFFIC")
    console.print(traffic_table(report['traffic']))

    for key, title, heading in RANKED_SECTIONS:
        rows = report[key]
        _section(console, title, style="bold red" if key == 'errors' else "bold")
        if not rows:
            console.print("  (none)", style="dim")
            continue
        console.print(ranked_table(rows, heading, limit))

    console.print("\n" + "═" * 70, style="cyan")
    console.print(f"Script Execution Time: {summary['parse_time']}s", style="dim")


def print_drill_down(view: Dict, console: Console):
    console.print(Panel.fit(
        f"[bold]{view['section']}:[/] [cyan]{view['key']}[/]",
        border_style="cyan"
    ))

    if view['section'] == 'hosts':
        console.print(f"User Agent: [cyan]{view['user_agent'] or '-'}[/]")
        _section(console, "TOP REQUESTS")
        console.print(ranked_table(view['requests'], 'Request'))
        _section(console, "TOP PAGES")
        console.print(ranked_table(view['pages'], 'Page'))
        return

    _section(console, "TOP HOSTS")
    console.print(ranked_table(view['hosts'], 'Host'))
    _section(console, "DAILY TRAFFIC")
    console.print(traffic_table(view['traffic']))
