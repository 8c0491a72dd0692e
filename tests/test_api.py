"""Tests for maze and solve endpoints."""

import inspect

import pytest
from httpx import AsyncClient

from maze_search.api.deps import get_maze_catalog
from maze_search.api.routes import maze as maze_routes
from maze_search.api.routes import solve as solve_routes
from maze_search.config import Settings


OPEN_MAZE = "#####\n     \n# # #\n     \n#####"

UNSOLVABLE_MAZE = "\n".join([
    "#######",
    "    # #",
    "### # #",
    "#   #  ",
    "#######",
])


def open_field(size: int) -> str:
    """Square maze with a wall row above and below an open interior."""
    rows = ["#" * size] + [" " * size] * (size - 2) + ["#" * size]
    return "\n".join(rows)


class TestSolveEndpoint:
    """Tests for POST /v1/solve."""

    @pytest.mark.asyncio
    async def test_solve_bfs(self, client: AsyncClient):
        response = await client.post("/v1/solve", json={"maze_text": OPEN_MAZE})
        assert response.status_code == 200
        data = response.json()

        assert data["algorithm"] == "bfs"
        assert data["status"] == "found"
        assert data["found"] is True
        assert data["path_length"] == 7
        assert data["path"][0] == {"row": 1, "col": 0}
        assert data["path"][-1] == {"row": 3, "col": 4}
        assert data["counts"] == {"solution": 7, "visited": 12, "frontier": 0}
        assert data["width"] == 5
        assert data["height"] == 5
        assert data["rendered"].split("\n")[1] == "@@@@V"

    @pytest.mark.asyncio
    async def test_solve_dfs(self, client: AsyncClient):
        response = await client.post(
            "/v1/solve", json={"maze_text": OPEN_MAZE, "algorithm": "dfs"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["algorithm"] == "dfs"
        assert data["counts"] == {"solution": 7, "visited": 11, "frontier": 1}
        assert data["rendered"].split("\n")[1] == "@@FVV"

    @pytest.mark.asyncio
    async def test_solve_unsolvable(self, client: AsyncClient):
        """Test that an unreachable destination is not an error."""
        response = await client.post("/v1/solve", json={"maze_text": UNSOLVABLE_MAZE})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "exhausted"
        assert data["found"] is False
        assert data["path"] == []
        assert data["counts"]["solution"] == 0

    @pytest.mark.asyncio
    async def test_solve_malformed_maze(self, client: AsyncClient):
        response = await client.post("/v1/solve", json={"maze_text": "#####\n     "})
        assert response.status_code == 422
        assert "at least 3 rows" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_solve_walled_destination(self, client: AsyncClient):
        response = await client.post(
            "/v1/solve", json={"maze_text": "#####\n    #\n#####"}
        )
        assert response.status_code == 422
        assert "Destination position" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_solve_unknown_algorithm(self, client: AsyncClient):
        response = await client.post(
            "/v1/solve", json={"maze_text": OPEN_MAZE, "algorithm": "astar"}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_solve_empty_text(self, client: AsyncClient):
        response = await client.post("/v1/solve", json={"maze_text": ""})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_solve_too_large(self, client: AsyncClient, test_settings: Settings):
        test_settings.max_maze_chars = 10
        response = await client.post("/v1/solve", json={"maze_text": OPEN_MAZE})
        assert response.status_code == 413

    @pytest.mark.asyncio
    async def test_solve_at_size_cap(self, client: AsyncClient, test_settings: Settings):
        """Test that a maze exactly at the character cap is solved."""
        maze_text = open_field(200)
        test_settings.max_maze_chars = len(maze_text)

        response = await client.post("/v1/solve", json={"maze_text": maze_text})
        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        # Shortest path from (1, 0) to (198, 199)
        assert data["path_length"] == 397

        response = await client.post("/v1/solve", json={"maze_text": maze_text + " "})
        assert response.status_code == 413

    def test_solve_handlers_run_in_threadpool(self):
        """Test that CPU-bound solve handlers are sync so they run off the event loop."""
        assert not inspect.iscoroutinefunction(solve_routes.solve_maze_text)
        assert not inspect.iscoroutinefunction(maze_routes.solve_maze)


class TestMazeEndpoints:
    """Tests for the stored maze endpoints."""

    @pytest.mark.asyncio
    async def test_list_mazes(self, client: AsyncClient):
        response = await client.get("/v1/maze")
        assert response.status_code == 200
        data = response.json()

        assert data["total"] == 2
        assert [m["slug"] for m in data["mazes"]] == ["dead-end", "tutorial"]
        for maze in data["mazes"]:
            assert "name" in maze
            assert "width" in maze
            assert "height" in maze
            # Grid data should NOT be in list response
            assert "grid_data" not in maze

    @pytest.mark.asyncio
    async def test_list_mazes_missing_directory(
        self, client: AsyncClient, test_settings: Settings, tmp_path
    ):
        test_settings.mazes_dir = tmp_path / "missing"
        response = await client.get("/v1/maze")
        assert response.status_code == 200
        assert response.json() == {"mazes": [], "total": 0}

    @pytest.mark.asyncio
    async def test_get_maze(self, client: AsyncClient):
        response = await client.get("/v1/maze/tutorial")
        assert response.status_code == 200
        data = response.json()

        assert data["name"] == "Tutorial"
        assert data["width"] == 10
        assert data["height"] == 10
        assert data["start"] == {"row": 1, "col": 0}
        assert data["destination"] == {"row": 8, "col": 9}
        assert data["grid_data"].startswith("##########\n         #")

    @pytest.mark.asyncio
    async def test_get_maze_not_found(self, client: AsyncClient):
        response = await client.get("/v1/maze/nope")
        assert response.status_code == 404
        assert "Maze not found" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_solve_stored_maze_default_algorithm(self, client: AsyncClient):
        response = await client.get("/v1/maze/tutorial/solve")
        assert response.status_code == 200
        data = response.json()
        assert data["algorithm"] == "bfs"
        assert data["found"] is True
        assert data["path_length"] == 17

    @pytest.mark.asyncio
    async def test_solve_stored_maze_dfs(self, client: AsyncClient):
        response = await client.get("/v1/maze/tutorial/solve?algorithm=dfs")
        assert response.status_code == 200
        data = response.json()
        assert data["algorithm"] == "dfs"
        assert data["path_length"] >= 17

    @pytest.mark.asyncio
    async def test_solve_stored_maze_repeatable(self, client: AsyncClient):
        """Test that each request searches a fresh grid."""
        first = await client.get("/v1/maze/tutorial/solve")
        second = await client.get("/v1/maze/tutorial/solve")
        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_solve_stored_unsolvable(self, client: AsyncClient):
        response = await client.get("/v1/maze/dead-end/solve")
        assert response.status_code == 200
        assert response.json()["status"] == "exhausted"

    @pytest.mark.asyncio
    async def test_solve_stored_maze_not_found(self, client: AsyncClient):
        response = await client.get("/v1/maze/nope/solve")
        assert response.status_code == 404


class TestMazeCatalog:
    """Tests for loading the maze catalog dependency."""

    def test_duplicate_slug_keeps_first_file(self, tmp_path, caplog):
        """Test that files mapping to the same slug are reported, not silently replaced."""
        (tmp_path / "a-b.txt").write_text(OPEN_MAZE)
        (tmp_path / "a_b.txt").write_text(UNSOLVABLE_MAZE)

        catalog = get_maze_catalog(Settings(mazes_dir=tmp_path))

        assert list(catalog) == ["a-b"]
        assert catalog["a-b"].width == 5
        assert "Duplicate maze slug 'a-b'" in caplog.text
