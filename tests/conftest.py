"""
Shared test fixtures.

- write_jobs_file: writes job lines to a temp file (tmp_path, cleaned up by pytest)
- client: httpx.AsyncClient with ASGI transport — talks to the FastAPI app
  in-process, no HTTP server or network involved
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app


@pytest.fixture
def write_jobs_file(tmp_path):
    """Return a function that writes lines to a job file and returns its path."""

    def _write(*lines: str) -> str:
        path = tmp_path / "jobs.txt"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)

    return _write


@pytest_asyncio.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
