"""API dependencies for dependency injection."""

import logging
from typing import Annotated

from fastapi import Depends

from maze_search.config import Settings, get_settings
from maze_search.core import ParsedMaze, load_all_mazes

logger = logging.getLogger("maze_search.api")


def get_maze_catalog(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, ParsedMaze]:
    """Load the mazes directory, keyed by slug. Missing directory means no mazes.

    The directory is read on every request so edited maze files are picked up
    without a restart. When two files share a slug the first by filename wins.
    """
    if not settings.mazes_dir.is_dir():
        return {}

    catalog: dict[str, ParsedMaze] = {}
    for maze in load_all_mazes(settings.mazes_dir):
        if maze.slug in catalog:
            logger.warning(
                f"Duplicate maze slug '{maze.slug}' in {settings.mazes_dir}, "
                f"keeping the first file by name"
            )
            continue
        catalog[maze.slug] = maze
    return catalog


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
MazeCatalog = Annotated[dict[str, ParsedMaze], Depends(get_maze_catalog)]
