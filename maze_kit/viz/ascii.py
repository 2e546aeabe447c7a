from typing import List

from maze_kit.core.direction import Direction


def render_grid(grid) -> str:
    """
    Box drawing of a grid, diagnostics only:
        +---+---+
        |       |
        +---+   +
    """
    lines: List[str] = []
    w, h = grid.width, grid.height

    top = ["+"]
    for x in range(w):
        top.append("---+" if grid.is_wall(x, 0, Direction.NORTH) else "   +")
    lines.append("".join(top))

    for y in range(h):
        row = ["|" if grid.is_wall(0, y, Direction.WEST) else " "]
        floor = ["+"]
        for x in range(w):
            row.append("   |" if grid.is_wall(x, y, Direction.EAST) else "    ")
            floor.append("---+" if grid.is_wall(x, y, Direction.SOUTH) else "   +")
        lines.append("".join(row))
        lines.append("".join(floor))

    return "\n".join(lines) + "\n"


def render_tiles(tiles) -> str:
    """One '# ' per wall tile, two spaces per open tile."""
    lines = []
    for y in range(tiles.height):
        lines.append("".join("# " if tiles.is_wall(x, y) else "  " for x in range(tiles.width)))
    return "\n".join(lines) + "\n"
