"""Running commands as the current user and through a privileged shell."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ROOT_COMMAND: tuple[str, ...] = ("pkexec", "bash")


class RootShell:
    """A long-lived privileged shell that reads commands from its stdin.

    Output of the commands goes straight to this process's stdout and stderr.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_ROOT_COMMAND) -> None:
        self._process = subprocess.Popen(list(command), stdin=subprocess.PIPE)
        self._closed = False

    def execute(self, command: str) -> bool:
        """Send one command line to the shell; True if it was delivered."""
        if self._closed:
            raise ValueError("root shell is closed")
        stdin = self._process.stdin
        try:
            stdin.write(f"{command}\n".encode())
            stdin.flush()
        except BrokenPipeError:
            return False
        return True

    def close(self) -> None:
        """Ask the shell to exit and wait for it."""
        if self._closed:
            return
        try:
            self.execute("exit")
        except (OSError, ValueError):
            pass
        self._closed = True
        try:
            self._process.stdin.close()
        except OSError:
            pass
        self._process.wait()

    def __enter__(self) -> RootShell:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _run(command: str) -> subprocess.CompletedProcess:
    return subprocess.run(["sh", "-c", command], capture_output=True)


def execute(command: str) -> bool:
    """Run a command through ``sh -c``; True if it exited successfully."""
    print(f"Executing: {command}")
    return _run(command).returncode == 0


def execute_with_output(command: str) -> str:
    """Run a command through ``sh -c`` and return what it wrote to stdout."""
    print(f"Executing: {command}")
    return _run(command).stdout.decode("utf-8", errors="replace")


def is_root() -> bool:
    """True if the current user is root."""
    output = _run("whoami").stdout.decode("utf-8", errors="replace")
    return output.strip() == "root"


def user_home_dir_path() -> Path:
    """The home directory of the current user, as reported by the shell."""
    output = _run("echo $HOME").stdout.decode("utf-8", errors="replace")
    return Path(output.strip())


def get_current_user() -> str:
    """The name of the current user."""
    return execute_with_output("whoami").strip()