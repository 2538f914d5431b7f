import subprocess
import time

import pytest

from archkickstart.packages import (
    PacmanPackage,
    PacmanPackageService,
    PacmanPamac,
    RemoveEosWelcome,
    RustToolchain,
    YayPackage,
    is_service_enabled,
)


class FakeSystem:
    def __init__(self):
        self.installed = set()
        self.enabled = set()
        self.commands = []
        self.failing = set()

    def run(self, args, **kwargs):
        command = args[-1]
        self.commands.append(command)
        words = command.split()
        ok = command not in self.failing
        if command.startswith("pacman -Q ") or command.startswith("yay -Q "):
            ok = all(word in self.installed for word in words[2:])
        elif command.startswith("systemctl is-enabled -q "):
            ok = words[-1] in self.enabled
        elif command.startswith("yay -Sy "):
            self.installed.update(words[5:])
        elif command.startswith("yay -Rs "):
            self.installed.difference_update(words[5:])
        return subprocess.CompletedProcess(args, 0 if ok else 1, stdout=b"", stderr=b"")


class FakeRootShell:
    def __init__(self, system):
        self.system = system
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        words = command.split()
        if command.startswith("pacman -Sy --noconfirm "):
            self.system.installed.update(words[3:])
        elif command.startswith("pacman -Rs --noconfirm "):
            self.system.installed.difference_update(words[3:])
        elif command.startswith("systemctl enable "):
            self.system.enabled.add(words[-1])
        elif command.startswith("systemctl disable "):
            self.system.enabled.discard(words[-1])
        return True


@pytest.fixture
def system(monkeypatch):
    fake = FakeSystem()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    return fake


@pytest.fixture
def root(system):
    return FakeRootShell(system)


def test_pacman_package_round_trip(system, root):
    feature = PacmanPackage("htop", "Install htop")
    assert feature.name == "Install htop"
    assert feature.is_installed() is False
    assert feature.install(root) is True
    assert feature.is_installed() is True
    assert feature.uninstall(root) is True
    assert feature.is_installed() is False
    assert root.commands == ["pacman -Sy --noconfirm htop", "pacman -Rs --noconfirm htop"]


def test_pacman_package_is_not_group():
    assert PacmanPackage("vlc", "Install Vlc").is_group is False


def test_is_service_enabled(system):
    system.enabled.add("cups.service")
    assert is_service_enabled("cups.service") is True
    assert is_service_enabled("bluetooth.service") is False
    assert system.commands[-1] == "systemctl is-enabled -q bluetooth.service"


def test_service_install_enables_and_starts(system, root):
    feature = PacmanPackageService("cups cups-pdf", "cups.service", "Install CUPS service")
    assert feature.install(root) is True
    assert root.commands == [
        "pacman -Sy --noconfirm cups cups-pdf",
        "systemctl enable cups.service",
        "systemctl start cups.service",
    ]
    assert feature.is_installed() is True


def test_service_installed_needs_both_package_and_service(system):
    feature = PacmanPackageService("bluez", "bluetooth.service", "Install Bluetooth")
    system.installed.add("bluez")
    assert feature.is_installed() is False
    system.enabled.add("bluetooth.service")
    assert feature.is_installed() is True


def test_service_uninstall_stops_disables_and_removes(system, root):
    feature = PacmanPackageService("bluez", "bluetooth.service", "Install Bluetooth")
    feature.install(root)
    root.commands.clear()
    result = feature.uninstall(root)
    assert root.commands == [
        "systemctl stop bluetooth.service",
        "systemctl disable bluetooth.service",
        "pacman -Rs --noconfirm bluez",
    ]
    # The result combines with the service still being enabled, which it is not.
    assert result is False
    assert feature.is_installed() is False


def test_yay_package_round_trip(system, root):
    feature = YayPackage("emblem", "Install Emblem (Generate icons)")
    assert feature.install(root) is True
    assert feature.is_installed() is True
    assert feature.uninstall(root) is True
    assert feature.is_installed() is False
    assert root.commands == []
    assert feature.name == "Install Emblem (Generate icons)"


def test_pamac(system, root):
    feature = PacmanPamac()
    assert feature.name == "Install Pamac"
    feature.install(root)
    assert root.commands == ["pacman -Sy --noconfirm pamac"]
    assert feature.is_installed() is True


def test_remove_eos_welcome_is_inverted(system, root):
    feature = RemoveEosWelcome()
    system.installed.add("welcome")
    assert feature.is_installed() is False
    assert feature.install(root) is True
    assert root.commands == ["pacman -Rs --noconfirm welcome"]
    assert feature.is_installed() is True
    feature.uninstall(root)
    assert feature.is_installed() is False
    assert feature.name == "Remove EOS welcome"


def test_rust_toolchain_sets_default_stable(system, root):
    feature = RustToolchain()
    assert feature.install(root) is True
    assert "rustup default stable" in system.commands
    assert feature.is_installed() is True
    assert feature.name == "Install Rust"


def test_rust_toolchain_reports_rustup_failure(system, root):
    system.failing.add("rustup default stable")
    assert RustToolchain().install(root) is False