"""Installing and removing packages with pacman."""

from __future__ import annotations

import time

from . import shell
from .shell import RootShell

POLL_INTERVAL = 0.5


def install(package_name: str, root_shell: RootShell) -> bool:
    """Install packages and wait until pacman reports them installed."""
    ok = root_shell.execute(f"pacman -Sy --noconfirm {package_name}")
    while not is_installed(package_name):
        print("Waiting for package installation...")
        time.sleep(POLL_INTERVAL)
    return ok


def uninstall(package_name: str, root_shell: RootShell) -> bool:
    """Remove packages and wait until pacman no longer reports them."""
    ok = root_shell.execute(f"pacman -Rs --noconfirm {package_name}")
    while is_installed(package_name):
        print("Waiting for package uninstallation...")
        time.sleep(POLL_INTERVAL)
    return ok


def is_installed(package_name: str) -> bool:
    """True if pacman knows every named package as installed."""
    return shell.execute(f"pacman -Q {package_name}")