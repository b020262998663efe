"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import shlex
import stat
import sys
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


# Minimal UCI responder: logs every command it receives to argv[1] and
# answers ``go`` with ``bestmove <argv[2]>``.
_FAKE_ENGINE_SOURCE = """\
import sys

log_path = sys.argv[1]
reply = sys.argv[2] if len(sys.argv) > 2 else "e2e4"

with open(log_path, "a", encoding="utf-8") as log:
    for line in sys.stdin:
        cmd = line.strip()
        log.write(cmd + "\\n")
        log.flush()
        if cmd == "uci":
            print("id name FakeFish")
            print("option name Skill Level type spin default 20 min 0 max 20")
            print("uciok", flush=True)
        elif cmd == "isready":
            print("readyok", flush=True)
        elif cmd.startswith("go"):
            print("info depth 1 score cp 13")
            print(("bestmove " + reply).strip(), flush=True)
        elif cmd == "quit":
            break
"""


class FakeEngine:
    """Paths and argv for launching the fake UCI engine script."""

    def __init__(self, tmp_path: Path) -> None:
        self.script = tmp_path / "fake_engine.py"
        self.script.write_text(_FAKE_ENGINE_SOURCE, encoding="utf-8")
        self.log = tmp_path / "commands.log"

    def command(self, reply: str = "e2e4") -> list[str]:
        return [sys.executable, str(self.script), str(self.log), reply]

    def commands(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text(encoding="utf-8").splitlines()

    def executable(self, reply: str = "e2e4") -> str:
        """Wrapper script runnable by path alone (for settings-driven startup)."""
        wrapper = self.script.with_name("fake_engine_wrapper")
        wrapper.write_text(
            "#!/bin/sh\nexec "
            + " ".join(
                shlex.quote(part)
                for part in (sys.executable, str(self.script), str(self.log), reply)
            )
            + "\n",
            encoding="utf-8",
        )
        wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR)
        return str(wrapper)


@pytest.fixture
def fake_engine(tmp_path: Path) -> FakeEngine:
    return FakeEngine(tmp_path)

