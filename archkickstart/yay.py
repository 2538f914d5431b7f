"""Installing and removing AUR packages with yay."""

from __future__ import annotations

import time

from . import shell

POLL_INTERVAL = 0.5


def install(package_name: str) -> bool:
    """Install packages through yay and wait until they show up."""
    ok = shell.execute(f"yay -Sy --sudo pkexec --noconfirm {package_name}")
    while not is_installed(package_name):
        print("Waiting for package installation...")
        time.sleep(POLL_INTERVAL)
    return ok


def uninstall(package_name: str) -> bool:
    """Remove packages through yay and wait until they are gone."""
    ok = shell.execute(f"yay -Rs --sudo pkexec --noconfirm {package_name}")
    while is_installed(package_name):
        print("Waiting for package uninstallation...")
        time.sleep(POLL_INTERVAL)
    return ok


def is_installed(package_name: str) -> bool:
    """True if yay reports every named package as installed."""
    return shell.execute(f"yay -Q {package_name}")