"""Character-grid rendering of the board for terminals and text streams."""

from typing import IO, List, Optional, Sequence

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..domain.types import Cell, RunStats
from ..app.simulation import Simulation

CELL_CHARS = {
    Cell.EMPTY: " ",
    Cell.AGENT: "O",
    Cell.FOOD: "X",
}

# Glyph styles for the live view
CELL_STYLES = {
    "O": "bold cyan",
    "X": "bold yellow",
}


def render_frame(cells: Sequence[Sequence[Cell]], score: int,
                 extra: Optional[str] = None) -> List[str]:
    """
    Draw the board as lines of text.

    A row of '-' sits above and below the grid, '|' on both sides. The agent
    is 'O', the food 'X'. The score follows on the line below the grid, then
    the optional extra status line.
    """
    width = len(cells[0]) if cells else 0
    border = "-" * (width + 2)

    lines = [border]
    for row in cells:
        lines.append("|" + "".join(CELL_CHARS[Cell(value)] for value in row) + "|")
    lines.append(border)
    lines.append(str(score))
    if extra:
        lines.append(extra)
    return lines


def frame_text(lines: Sequence[str]) -> Text:
    """Turn frame lines into a rich Text with the agent and food highlighted."""
    text = Text()
    for index, line in enumerate(lines):
        if index:
            text.append("\n")
        for char in line:
            text.append(char, style=CELL_STYLES.get(char))
    return text


def format_status(stats: RunStats, state_description: str = "") -> str:
    """Short status line shown under the score."""
    status = (f"tick {stats.ticks}  captures {stats.captures}  walls {stats.wall_hits}  "
              f"recent {stats.recent_capture_rate:.1%}")
    if state_description:
        status += f"  [{state_description}]"
    return status


class StreamRenderer:
    """Writes one frame per tick to a text stream, for pipes and logs."""

    def __init__(self, simulation: Simulation, stream: IO[str], show_status: bool = True):
        self.simulation = simulation
        self.stream = stream
        self.show_status = show_status

    def draw(self, *_):
        board = self.simulation.board
        extra = format_status(self.simulation.stats) if self.show_status else None
        for line in render_frame(board.cells(), board.score, extra):
            self.stream.write(line + "\n")
        self.stream.write("=" * (board.width + 2) + "\n")
        self.stream.flush()


class LiveRenderer:
    """Redraws the board inside a rich Live display after every tick."""

    def __init__(self, simulation: Simulation, live: Live):
        self.simulation = simulation
        self.live = live

    def renderable(self) -> Text:
        board = self.simulation.board
        status = format_status(self.simulation.stats,
                               self.simulation.state_machine.get_state_description())
        lines = render_frame(board.cells(), board.score, status)
        lines.append("Ctrl-C: quit")
        return frame_text(lines)

    def draw(self, *_):
        self.live.update(self.renderable(), refresh=True)


def run_in_terminal(simulation: Simulation, ticks: Optional[int] = None,
                    delay: float = 0.05, console: Optional[Console] = None) -> RunStats:
    """Run the simulation in a full-screen live view until Ctrl-C or the tick limit."""
    console = console or Console()
    with Live(console=console, auto_refresh=False, screen=True) as live:
        renderer = LiveRenderer(simulation, live)
        renderer.draw()
        try:
            simulation.run(ticks=ticks, delay=delay, on_tick=renderer.draw)
        except KeyboardInterrupt:
            simulation.stop()
    return simulation.stats
