"""
FILE: skilog/cli/commands/system.py
PURPOSE: System commands (version, help)
"""

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, __version__


@app.command()
def version():
    """Show skilog version."""
    console.print(f"skilog v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]skilog[/bold cyan] - Water-ski training log reports\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  skilog \\[global options] \\[command] \\[options]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("insights", "Season overview and monthly progress", "skilog insights [--season ID] [--months N]"),
        ("history", "Sets inside a time window", "skilog history [--range week] [--start D --end D]"),
        ("slalom", "Best/average slalom result", "skilog slalom [--speed-unit kmh] [--rope-unit feet]"),
        ("jump", "Jump distances and cuts", "skilog jump [--range month]"),
        ("trick-stats", "Tricks time and hands/toes split", "skilog trick-stats [--range week]"),
        ("tasks", "Ordered task list", "skilog tasks [--open]"),
        ("tricks", "Search the trick catalog", "skilog tricks [QUERY] [--learned]"),
        ("prefs", "Show or save display units", "skilog prefs [--rope-unit feet] [--speed-unit kmh]"),
        ("version", "Show version", "skilog version"),
        ("help", "Show this help message", "skilog help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:11}[/green] {desc}")
        console.print(f"              [dim]{example}[/dim]\n")

    console.print("[bold]Global Options:[/bold]")
    console.print("  [yellow]--snapshot[/yellow] Snapshot JSON file (default ~/.skilog/snapshot.json)")
    console.print("  [yellow]--now[/yellow]      Report date YYYY-MM-DD (default today)")
    console.print("  [yellow]--verbose[/yellow]  Show debug logs\n")

    console.print("[bold]Command Options:[/bold]")
    console.print("  [yellow]--json[/yellow]    Output as JSON (for scripting)")
    console.print("  [yellow]--raw[/yellow]     Plain text output (no colors)")
    console.print("  [yellow]--help[/yellow]    Show detailed help for a command\n")
