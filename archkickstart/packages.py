"""Features that install a package, optionally with a service."""

from __future__ import annotations

from dataclasses import dataclass

from . import pacman, shell, yay
from .feature import Feature
from .shell import RootShell


def is_service_enabled(service_name: str) -> bool:
    """True if systemd reports the service as enabled."""
    return shell.execute(f"systemctl is-enabled -q {service_name}")


@dataclass(frozen=True)
class PacmanPackage(Feature):
    """One or more repository packages installed with pacman."""

    package_name: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        return pacman.install(self.package_name, root_shell)

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return self.description


@dataclass(frozen=True)
class PacmanPackageService(Feature):
    """Packages installed with pacman together with a systemd service."""

    package_name: str
    service_name: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        package_status = pacman.install(self.package_name, root_shell)
        root_shell.execute(f"systemctl enable {self.service_name}")
        root_shell.execute(f"systemctl start {self.service_name}")
        service_status = is_service_enabled(self.service_name)
        return package_status and service_status

    def uninstall(self, root_shell: RootShell) -> bool:
        root_shell.execute(f"systemctl stop {self.service_name}")
        root_shell.execute(f"systemctl disable {self.service_name}")
        service_status = is_service_enabled(self.service_name)
        package_status = pacman.uninstall(self.package_name, root_shell)
        return package_status and service_status

    def is_installed(self) -> bool:
        package_status = pacman.is_installed(self.package_name)
        service_status = is_service_enabled(self.service_name)
        return package_status and service_status

    @property
    def name(self) -> str:
        return self.description


@dataclass(frozen=True)
class YayPackage(Feature):
    """One or more AUR packages installed with yay."""

    package_name: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        return yay.install(self.package_name)

    def uninstall(self, root_shell: RootShell) -> bool:
        return yay.uninstall(self.package_name)

    def is_installed(self) -> bool:
        return yay.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return self.description


class PacmanPamac(Feature):
    """The pamac package manager front-end."""

    package_name = "pamac"

    def install(self, root_shell: RootShell) -> bool:
        return pacman.install(self.package_name, root_shell)

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return "Install Pamac"


class RemoveEosWelcome(Feature):
    """Removes the distribution's welcome application; installed means absent."""

    package_name = "welcome"

    def install(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.install(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return not pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return "Remove EOS welcome"


class RustToolchain(Feature):
    """rustup with the stable toolchain as default."""

    package_name = "rustup"

    def install(self, root_shell: RootShell) -> bool:
        pacman.install(self.package_name, root_shell)
        return shell.execute("rustup default stable")

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return "Install Rust"