"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_search.main import app
from maze_search.config import Settings, get_settings


# Rows 1 and 3 fully open, joined through row 2 at columns 1 and 3
OPEN_MAZE = "#####\n     \n# # #\n     \n#####"

TUTORIAL_MAZE = "\n".join([
    "##########",
    "         #",
    "# ###### #",
    "# #    # #",
    "# # ## # #",
    "# # ## # #",
    "# #    # #",
    "# ###### #",
    "#         ",
    "##########",
])

# Start region and destination region are separated by the wall in column 4
UNSOLVABLE_MAZE = "\n".join([
    "#######",
    "    # #",
    "### # #",
    "#   #  ",
    "#######",
])


@pytest.fixture
def mazes_dir(tmp_path: Path) -> Path:
    """Directory with a solvable and an unsolvable maze."""
    (tmp_path / "tutorial.txt").write_text(TUTORIAL_MAZE)
    (tmp_path / "dead_end.txt").write_text(UNSOLVABLE_MAZE)
    return tmp_path


@pytest.fixture
def test_settings(mazes_dir: Path) -> Settings:
    """Settings pointing at the temporary mazes directory."""
    return Settings(mazes_dir=mazes_dir, default_algorithm="bfs")


@pytest_asyncio.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
