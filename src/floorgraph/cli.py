"""Command Line Interface for Floorgraph.

This module provides a simple CLI for detecting rooms in a wall snapshot and
inspecting how walls intersect and join.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import MIN_ROOM_AREA
from .engine.detection import detect_rooms
from .engine.validators import InvalidWallSnapshot
from .geom.intersection import (
    calculate_wall_joining,
    get_wall_snap_points_with_intersections,
    join_walls_at_intersection,
)
from .geom.joints import classify_joints
from .io.parser import (
    detection_to_dict,
    join_outcome_to_dict,
    join_result_to_dict,
    load_walls,
    save_json,
)

app = typer.Typer(
    name="floorgraph",
    help="Detect rooms and resolve wall intersections in floor-plan wall snapshots",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(walls: Path):
    wall_list = load_walls(str(walls))
    console.print(f"[green]✓[/green] Loaded {len(wall_list)} walls from {walls}")
    return wall_list


def _find_wall(wall_list, wall_id: str):
    for wall in wall_list:
        if wall.id == wall_id:
            return wall
    raise ValueError(f"Wall '{wall_id}' does not exist")


@app.command()
def detect(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall snapshot JSON file"),
    min_area: float = typer.Option(MIN_ROOM_AREA, "--min-area", help="Minimum room area"),
    output: Optional[Path] = typer.Option(None, "--out", help="Write rooms and closed shapes as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Detect the rooms enclosed by a wall snapshot."""
    _configure_logging(verbose)
    try:
        wall_list = _load(walls)
        result = detect_rooms(wall_list, min_area=min_area)

        table = Table(title="Rooms")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Walls")
        table.add_column("Area", justify="right")
        table.add_column("Perimeter", justify="right")
        table.add_column("Center", justify="right")

        for room in result.rooms:
            table.add_row(
                room.id,
                room.name,
                ", ".join(room.wall_ids),
                f"{room.area:.2f}",
                f"{room.perimeter:.2f}",
                f"({room.center.x:.1f}, {room.center.y:.1f})",
            )

        console.print(table)
        console.print(
            f"[blue]ℹ[/blue] {len(result.rooms)} rooms, {len(result.closed_shapes)} closed shapes"
        )

        if output:
            save_json(detection_to_dict(result), str(output))
            console.print(f"[green]✓[/green] Rooms saved to {output}")

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON - {e}[/red]")
        raise typer.Exit(1)
    except (InvalidWallSnapshot, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def join(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall snapshot JSON file"),
    wall: str = typer.Option(..., "--wall", help="ID of the new or edited wall"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Show how existing walls change where one wall crosses them."""
    _configure_logging(verbose)
    try:
        wall_list = _load(walls)
        target = _find_wall(wall_list, wall)
        others = [w for w in wall_list if w.id != target.id]
        result = calculate_wall_joining(target, others)

        if not result.should_join:
            console.print(f"[blue]ℹ[/blue] Wall {wall} crosses no other wall")
            return

        console.print_json(data=join_result_to_dict(result))

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def connect(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall snapshot JSON file"),
    wall_a: str = typer.Option(..., "--a", help="ID of the first wall"),
    wall_b: str = typer.Option(..., "--b", help="ID of the second wall"),
):
    """Join two walls at the point where their lines meet."""
    try:
        wall_list = _load(walls)
        outcome = join_walls_at_intersection(
            _find_wall(wall_list, wall_a), _find_wall(wall_list, wall_b)
        )

        if not outcome.success:
            console.print(f"[red]✗[/red] {outcome.error}")
            raise typer.Exit(1)

        console.print_json(data=join_outcome_to_dict(outcome))

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command("snap-points")
def snap_points(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall snapshot JSON file"),
    midpoints: bool = typer.Option(False, "--midpoints", help="Include wall midpoints"),
):
    """List the snap targets offered while drawing."""
    try:
        wall_list = _load(walls)
        points = get_wall_snap_points_with_intersections(wall_list, include_midpoints=midpoints)

        table = Table(title="Snap points")
        table.add_column("X", justify="right")
        table.add_column("Y", justify="right")
        for point in points:
            table.add_row(f"{point.x:.2f}", f"{point.y:.2f}")
        console.print(table)

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def joints(
    walls: Path = typer.Option(..., "--walls", "-w", help="Path to wall snapshot JSON file"),
):
    """Classify the joints where walls meet."""
    try:
        wall_list = _load(walls)

        table = Table(title="Joints")
        table.add_column("ID", style="cyan")
        table.add_column("Type")
        table.add_column("Position", justify="right")
        table.add_column("Walls")
        table.add_column("Angle", justify="right")

        for joint in classify_joints(wall_list):
            table.add_row(
                joint.id,
                joint.type,
                f"({joint.position.x:.1f}, {joint.position.y:.1f})",
                ", ".join(joint.wall_ids),
                f"{joint.angle:.1f}",
            )
        console.print(table)

    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
