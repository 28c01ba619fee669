import os
import subprocess
import sys
from pathlib import Path

from api.main import create_fastapi_app

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_importing_settings_does_not_read_the_environment():
    env = {**os.environ, "PORT": "abc", "PYTHONPATH": str(PROJECT_ROOT)}

    result = subprocess.run(
        [sys.executable, "-c", "from core.settings import Settings"],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr


def test_explicit_settings_ignore_a_broken_environment(settings, monkeypatch):
    monkeypatch.setenv("PORT", "abc")

    app = create_fastapi_app(settings)
    try:
        assert app.container.config.APP.PORT() == 5000
    finally:
        app.container.unwire()
