import os, sys
import warnings
from pathlib import Path

# src/ layout: make the package importable without an install
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Config is read at import time; keep the suite independent of the caller's shell.
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")
os.environ.pop("COMMAND_PREFIX", None)
os.environ.pop("REPORT_STATUS", None)


def pytest_configure(config):
    # discord.voice_client pulls in audioop on import
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
