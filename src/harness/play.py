"""
Line-driven play loop.

Controls (one command per line):
- h/j/k/l or left/down/up/right to move the cursor. Uppercase H/J/K/L snap
  to the edge of the grid.
- q to toggle a wall.
- w to toggle a known free space (a note to yourself).
- r to redraw the board.
- quit (or end of input) to leave.
"""

from typing import Callable, Dict, Tuple

from .models import MoveDirection
from .session import PlaySession
from ..utils.board_renderer import render_board


MOVES: Dict[str, Tuple[MoveDirection, bool]] = {
    "h": ("WEST", False),
    "j": ("SOUTH", False),
    "k": ("NORTH", False),
    "l": ("EAST", False),
    "H": ("WEST", True),
    "J": ("SOUTH", True),
    "K": ("NORTH", True),
    "L": ("EAST", True),
    "left": ("WEST", False),
    "down": ("SOUTH", False),
    "up": ("NORTH", False),
    "right": ("EAST", False),
}

QUIT_COMMANDS = {"quit", "exit"}


def render_status(session: PlaySession) -> str:
    """One-line verdict for the current board."""
    if session.solved == "SUCCESS":
        return "Solved!"
    if session.solved == "FAIL" and session.failure is not None:
        return f"{session.failure.reason} at {session.failure.pos}"
    return ""


def render_session(session: PlaySession) -> str:
    """Render the board with markings, cursor, hint feedback and verdict."""
    col_status, row_status = session.hint_status()
    board = render_board(
        session.level,
        markings=session.markings,
        cursor=session.cursor,
        col_status=col_status,
        row_status=row_status,
    )
    status = render_status(session)
    return f"{board}\n{status}" if status else board


def handle_command(session: PlaySession, command: str) -> bool:
    """
    Apply one command to the session.

    Returns:
        False if the command was not recognised
    """
    if command in MOVES:
        direction, snap = MOVES[command]
        session.move(direction, snap=snap)
    elif command == "q":
        session.toggle_wall()
    elif command == "w":
        session.toggle_empty()
    elif command == "r":
        pass
    else:
        return False
    return True


def run_play_loop(
    session: PlaySession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> PlaySession:
    """
    Transfer control to the play loop.

    Only returns once the player quits or input runs out.
    """
    write(render_session(session))
    while True:
        try:
            command = read_line("> ").strip()
        except EOFError:
            break

        if command in QUIT_COMMANDS:
            break
        if not command:
            continue

        if not handle_command(session, command):
            write(f"Unknown command: '{command}'")
            continue
        write(render_session(session))

    return session
