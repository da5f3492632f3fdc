from rich.table import Table
from rich.console import Console


def _human_size(size):
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024


def print_daily_log_table(log_rows, current=None):
    """
    Print a table of daily log files using rich.
    log_rows: list of (path, date, size) tuples
    current: path of the file currently being written, highlighted
    """
    console = Console()
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("DATE", style="bold", justify="center")
    table.add_column("SIZE", style="dim", justify="right")
    table.add_column("FILE", style="", overflow="fold")

    for path, date, size in log_rows:
        name = f"[green]{path}[/green]" if current and path == current else path
        table.add_row(date, _human_size(size), name)
    console.print(table)
