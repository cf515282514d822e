"""Shared pytest fixtures for the setmystack test suite.

Provides reusable fixtures for:
- A ``Config`` rooted in a temporary directory
- Project requests for each template choice
- A mocked ``run_checked`` so no git/npm processes are spawned
- Rich consoles that read from / write to in-memory buffers
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from setmystack.config import Config
from setmystack.models import TEMPLATE_CHOICES, ProjectRequest


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config whose output directory is the test's tmp_path."""
    return Config(output_dir=tmp_path)


@pytest.fixture
def project_request() -> ProjectRequest:
    """Request for the default TypeScript template."""
    return ProjectRequest(name="my-next-app", template=TEMPLATE_CHOICES[0])


@pytest.fixture(params=TEMPLATE_CHOICES)
def any_template(request: pytest.FixtureRequest) -> str:
    """Each of the three template labels in turn."""
    return request.param


# ---------------------------------------------------------------------------
# Subprocess mocking
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_checked():
    """Patch the pipeline's ``run_checked`` so git/npm never run."""
    with patch("setmystack.pipeline.run_checked", new_callable=AsyncMock) as mock:
        mock.return_value = ""
        yield mock


# ---------------------------------------------------------------------------
# Consoles
# ---------------------------------------------------------------------------

@pytest.fixture
def record_console() -> Console:
    """Non-interactive console that writes into a StringIO buffer."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)
