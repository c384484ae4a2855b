import os
import sys

import pytest

# Add the ``src`` directory to Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Pygame is only needed by the preview tests
try:
    import pygame
except Exception:  # pragma: no cover - pygame may be missing
    pygame = None  # type: ignore[assignment]


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    if pygame:
        pygame.init()
    yield
    if pygame:
        pygame.quit()



@pytest.fixture
def cli_log(tmp_path, monkeypatch):
    """Run in ``tmp_path`` and send the CLI log file there."""
    import logging

    from elastic_ease import cli

    monkeypatch.chdir(tmp_path)
    log_path = tmp_path / cli.LOG_FILE
    handlers = [h for h in cli.logger.handlers if isinstance(h, logging.FileHandler)]
    for h in handlers:
        h.close()
        monkeypatch.setattr(h, "baseFilename", str(log_path))
    yield log_path
    for h in handlers:
        h.close()
