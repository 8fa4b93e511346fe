"""CLI commands for the ICT Learning Hub.

Commands:
- serve: Run the Web API with uvicorn
- topics: Show topics with the demo student's progress
- convert: Convert a number between binary, decimal and hexadecimal
- ip-info: Break down an IPv4 address and mask
- subnets: Split a /24 into equal subnets (or VLSM with --hosts)
- gate: Evaluate a logic gate or print its truth table
"""

import os
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from ictlearn.config.app_config import ENV_PREFIX, load_app_config
from ictlearn.core import lessons
from ictlearn.core.seed import DEFAULT_USER_ID
from ictlearn.core.storage import get_storage
from ictlearn.logging_config import configure_logging

app = typer.Typer(
    name="ictlearn",
    help="ICT Learning Hub: lesson tools and API server.",
    no_args_is_help=True,
)

console = Console()


def _fail(message: str) -> NoReturn:
    """Print an error and exit with code 1."""
    console.print(f"[red]✗ {message}[/red]")
    raise typer.Exit(code=1)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
    seed: bool | None = typer.Option(
        None, "--seed/--no-seed", help="Start with or without the demo data (default from config)"
    ),
) -> None:
    """Run the Web API server."""
    import uvicorn

    if seed is not None:
        # Read by the app module, also inside the reloader subprocess
        os.environ[f"{ENV_PREFIX}SEED"] = "1" if seed else "0"

    config = load_app_config(force_reload=True)
    configure_logging(config.logging)

    effective_host = host or config.server.host
    effective_port = port or config.server.port

    console.print(
        f"[green]Starting ICT Learning Hub API on http://{effective_host}:{effective_port}[/green]"
    )
    if not config.seed_demo_data:
        console.print("[dim]Demo data disabled: starting with an empty store[/dim]")
    uvicorn.run(
        "ictlearn.web.api:app",
        host=effective_host,
        port=effective_port,
        reload=reload,
        log_config=None,
    )


@app.command()
def topics(
    user_id: int = typer.Option(DEFAULT_USER_ID, "--user", "-u", help="User whose progress to show"),
) -> None:
    """Show topics with progress."""
    storage = get_storage()

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right", width=4)
    table.add_column("Topic", style="cyan")
    table.add_column("Difficulty", width=12)
    table.add_column("Minutes", justify="right", width=8)
    table.add_column("Rating", justify="center", width=7)
    table.add_column("Progress", justify="right", width=9)

    for topic in storage.get_all_topics():
        row = storage.get_topic_progress(user_id, topic.id)
        progress = f"{row.progress}%" if row else "-"
        title = f"{topic.title} [dim](locked)[/dim]" if topic.is_locked else topic.title
        table.add_row(
            str(topic.id),
            title,
            topic.difficulty,
            str(topic.duration),
            f"{topic.rating / 10:.1f}",
            progress,
        )

    console.print(table)


@app.command()
def convert(
    value: str = typer.Argument(..., help="Number to convert (e.g. 1010, 255, FF)"),
    from_base: int = typer.Option(10, "--from", "-f", help="Input base: 2, 10 or 16"),
    to_base: int = typer.Option(2, "--to", "-t", help="Output base: 2, 10 or 16"),
) -> None:
    """Convert a number between bases."""
    try:
        result = lessons.convert_number(value, from_base, to_base)
    except lessons.ConversionError as e:
        _fail(str(e))

    console.print(f"{value} (base {from_base}) = [bold green]{result}[/bold green] (base {to_base})")


@app.command(name="ip-info")
def ip_info(
    ip: str = typer.Argument(..., help="IPv4 address"),
    mask: str = typer.Option("255.255.255.0", "--mask", "-m", help="Subnet mask"),
) -> None:
    """Show class, network and broadcast address."""
    try:
        info = lessons.get_network_info(ip, mask)
    except lessons.InvalidAddressError as e:
        _fail(str(e))

    console.print(f"[bold]Address:[/bold]   {info.ip}/{info.prefix_length}")
    console.print(f"[bold]Class:[/bold]     {info.ip_class}")
    console.print(f"[bold]Network:[/bold]   {info.network}")
    console.print(f"[bold]Broadcast:[/bold] {info.broadcast}")
    console.print(f"[bold]Range:[/bold]     {info.first_host} - {info.last_host}")
    console.print(f"[bold]Usable:[/bold]    {info.usable_hosts}")
    console.print(f"[bold]Private:[/bold]   {'yes' if info.is_private else 'no'}")


@app.command()
def subnets(
    network: str = typer.Argument(..., help="Base network (e.g. 192.168.1.0)"),
    bits: int = typer.Option(2, "--bits", "-b", help="Bits to borrow for equal subnets"),
    hosts: list[int] | None = typer.Option(
        None, "--hosts", help="Host requirement for VLSM (repeatable)"
    ),
) -> None:
    """Plan subnets of a /24."""
    try:
        if hosts:
            plan = lessons.calculate_vlsm(network, hosts)
        else:
            plan = lessons.calculate_subnets(network, bits)
    except (lessons.InvalidAddressError, lessons.SubnetError) as e:
        _fail(str(e))

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", width=3)
    table.add_column("Network", style="cyan")
    table.add_column("First host")
    table.add_column("Last host")
    table.add_column("Broadcast")
    table.add_column("Mask")
    table.add_column("Usable", justify="right")

    for i, subnet in enumerate(plan, start=1):
        table.add_row(
            str(i),
            f"{subnet.network}/{subnet.prefix_length}",
            subnet.first_host,
            subnet.last_host,
            subnet.broadcast,
            subnet.subnet_mask,
            str(subnet.usable_hosts),
        )

    console.print(table)


@app.command()
def gate(
    name: str = typer.Argument(..., help="Gate: AND, OR, NOT, NAND, NOR, XOR"),
    inputs: list[int] | None = typer.Argument(None, help="Inputs as 0/1; omit for the truth table"),
) -> None:
    """Evaluate a logic gate or print its truth table."""
    try:
        if inputs:
            output = lessons.evaluate_gate(name, [bool(i) for i in inputs])
            console.print(f"{name.upper()}({', '.join(str(i) for i in inputs)}) = [bold]{int(output)}[/bold]")
            return
        rows = lessons.truth_table(name)
    except lessons.GateError as e:
        _fail(str(e))

    gate_name = name.strip().upper()
    console.print(f"[bold]{gate_name}[/bold]: {lessons.GATE_DESCRIPTIONS[gate_name]}")

    table = Table(show_header=True, header_style="bold")
    for i in range(len(rows[0]["inputs"])):
        table.add_column(chr(ord("A") + i), justify="center")
    table.add_column("Out", justify="center", style="green")
    for row in rows:
        table.add_row(*[str(int(v)) for v in row["inputs"]], str(int(row["output"])))

    console.print(table)


if __name__ == "__main__":
    app()
