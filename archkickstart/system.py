"""System-level features: repositories, services, journald and editor setup."""

from __future__ import annotations

import time
import urllib.request
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup

from . import pacman, shell
from .feature import Feature
from .shell import RootShell

PACMAN_CONFIG_FILE = "/etc/pacman.conf"
ENVIRONMENT_FILE = "/etc/environment"
JOURNALD_LIMIT_FILE = "/etc/systemd/journald.conf.d/limit.conf"

CHAOTIC_AUR_URL = "https://aur.chaotic.cx/"
CHAOTIC_AUR_SECTION_HEAD = "[chaotic-aur]"
CHAOTIC_AUR_SECTION_DATA = "Include = /etc/pacman.d/chaotic-mirrorlist"
CHAOTIC_AUR_SECTION = f"\n\n{CHAOTIC_AUR_SECTION_HEAD}\n{CHAOTIC_AUR_SECTION_DATA}\n"

PACCACHE_TIMER = """
[Unit]
Description=Clean-up old pacman pkg cache

[Timer]
OnCalendar=monthly
Persistent=true

[Install]
WantedBy=multi-user.target
"""

JOURNALD_LIMITS = (
    "[Journal]",
    "SystemMaxUse=50M",
    "SystemMaxFileSize=10M",
    "SystemKeepFree=100M",
    "SystemMaxFiles=5",
)

_SETTLE_DELAY = 0.1


def extract_install_commands(html: str) -> list[str]:
    """Pull the setup commands out of the repository's install page."""
    document = BeautifulSoup(html, "html.parser")
    commands = []
    for element in document.select("code.command"):
        command = element.decode_contents().replace("\n", "").strip()
        if command.startswith("pacman -U"):
            command = f"{command} --noconfirm"
        commands.append(command)
    return commands


def fetch_install_commands(url: str = CHAOTIC_AUR_URL) -> list[str]:
    """Download the install page and return the commands it lists."""
    with urllib.request.urlopen(url) as response:
        html = response.read().decode("utf-8", errors="replace")
    return extract_install_commands(html)


def pacman_config_contains_chaotic(config_path: str = PACMAN_CONFIG_FILE) -> bool:
    """True if the pacman configuration holds the repository section."""
    content = Path(config_path).read_text(encoding="utf-8")
    return CHAOTIC_AUR_SECTION_HEAD in content and CHAOTIC_AUR_SECTION_DATA in content


def remove_chaotic_from_pacman_conf(config_path: str = PACMAN_CONFIG_FILE) -> None:
    """Strip the repository section from the pacman configuration."""
    path = Path(config_path)
    content = path.read_text(encoding="utf-8")
    content = content.replace(CHAOTIC_AUR_SECTION_HEAD, "")
    content = content.replace(CHAOTIC_AUR_SECTION_DATA, "")
    path.write_text(content.strip(), encoding="utf-8")


@dataclass(frozen=True)
class ChaoticAur(Feature):
    """The Chaotic AUR binary repository."""

    url: str = CHAOTIC_AUR_URL
    config_path: str = PACMAN_CONFIG_FILE

    def install(self, root_shell: RootShell) -> bool:
        for command in fetch_install_commands(self.url):
            root_shell.execute(command)
        if not pacman_config_contains_chaotic(self.config_path):
            root_shell.execute(f"echo '{CHAOTIC_AUR_SECTION}' >> {self.config_path}")
        root_shell.execute("pacman -Sc --noconfirm")
        return True

    def uninstall(self, root_shell: RootShell) -> bool:
        remove_chaotic_from_pacman_conf(self.config_path)
        response = root_shell.execute("pacman -Rns chaotic-keyring chaotic-mirrorlist")
        root_shell.execute("rm -rf /etc/pacman.d/chaotic-mirrorlist")
        root_shell.execute("pacman -Sc --noconfirm")
        return response

    def is_installed(self) -> bool:
        return pacman_config_contains_chaotic(self.config_path)

    @property
    def name(self) -> str:
        return "Install Chaotic AUR"


@dataclass(frozen=True)
class CommonSystemFixes(Feature):
    """Wayland for Firefox and a size limit for the systemd journal."""

    environment_file: str = ENVIRONMENT_FILE
    limit_file: str = JOURNALD_LIMIT_FILE

    def install(self, root_shell: RootShell) -> bool:
        if not root_shell.execute(f"grep -q MOZ_ENABLE_WAYLAND=1 {self.environment_file}"):
            root_shell.execute(f"echo 'MOZ_ENABLE_WAYLAND=1' >> {self.environment_file}")
        self._limit_journald_log_size(root_shell)
        return self.is_installed()

    def uninstall(self, root_shell: RootShell) -> bool:
        root_shell.execute(f"sed -i '/MOZ_ENABLE_WAYLAND=1/d' {self.environment_file}")
        root_shell.execute(f"rm -rf {self.limit_file}")
        return not self.is_installed()

    def is_installed(self) -> bool:
        contents = Path(self.environment_file).read_text(encoding="utf-8")
        return Path(self.limit_file).exists() and "MOZ_ENABLE_WAYLAND=1" in contents

    @property
    def name(self) -> str:
        return "Apply common system fixes"

    def _limit_journald_log_size(self, root_shell: RootShell) -> None:
        root_shell.execute(f"rm -rf {self.limit_file}")
        root_shell.execute(f"mkdir -p {Path(self.limit_file).parent}/")
        first, *rest = JOURNALD_LIMITS
        root_shell.execute(f"echo '{first}' > {self.limit_file}")
        for line in rest:
            root_shell.execute(f"echo '{line}' >> {self.limit_file}")


class Docker(Feature):
    """Docker with its service enabled and the user in the docker group."""

    package_name = "docker"
    service_name = "docker.service"

    def install(self, root_shell: RootShell) -> bool:
        pacman.install(self.package_name, root_shell)
        username = shell.get_current_user()
        root_shell.execute(f"usermod -aG docker {username}")
        time.sleep(_SETTLE_DELAY)
        root_shell.execute(f"systemctl enable {self.service_name}")
        time.sleep(_SETTLE_DELAY)
        return root_shell.execute(f"systemctl start {self.service_name}")

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        package_installed = pacman.is_installed(self.package_name)
        status_active = shell.execute(f"systemctl status {self.service_name}")
        return package_installed and status_active

    @property
    def name(self) -> str:
        return "Setup Docker"


class PeriodicTrim(Feature):
    """The periodic fstrim timer."""

    def install(self, root_shell: RootShell) -> bool:
        timers = shell.execute_with_output("systemctl list-timers")
        if "fstrim.timer" in timers:
            root_shell.execute("systemctl enable fstrim.timer")
            root_shell.execute("systemctl start fstrim.timer")
        return True

    def uninstall(self, root_shell: RootShell) -> bool:
        root_shell.execute("systemctl stop fstrim.timer")
        return root_shell.execute("systemctl disable fstrim.timer")

    def is_installed(self) -> bool:
        return shell.execute("systemctl status fstrim.timer")

    @property
    def name(self) -> str:
        return "Setup PeriodicTRIM"


@dataclass(frozen=True)
class PacmanImprovements(Feature):
    """Coloured pacman output and a monthly package cache clean-up."""

    config_path: str = PACMAN_CONFIG_FILE

    def install(self, root_shell: RootShell) -> bool:
        root_shell.execute(f"sed -i 's/#Color/Color/' {self.config_path}")
        pacman.install("pacman-contrib", root_shell)
        root_shell.execute(f"echo '{PACCACHE_TIMER}' > /etc/systemd/system/paccache.timer")
        root_shell.execute("systemctl enable paccache.timer")
        root_shell.execute("systemctl start paccache.timer")
        return True

    def uninstall(self, root_shell: RootShell) -> bool:
        root_shell.execute(f"sed -i 's/Color/#Color/' {self.config_path}")
        pacman.uninstall("pacman-contrib", root_shell)
        root_shell.execute("rm -rf /etc/systemd/system/paccache.timer")
        return True

    def is_installed(self) -> bool:
        contents = Path(self.config_path).read_text(encoding="utf-8")
        color_enabled = "Color" in contents
        contrib_installed = pacman.is_installed("pacman-contrib")
        timer_enabled = shell.execute("systemctl status paccache.timer")
        return color_enabled and contrib_installed and timer_enabled

    @property
    def name(self) -> str:
        return "Setup PacmanConfig"


@dataclass(frozen=True)
class Micro(Feature):
    """The micro editor, set as the default EDITOR."""

    environment_file: str = ENVIRONMENT_FILE
    package_name: str = "micro"

    def install(self, root_shell: RootShell) -> bool:
        pacman.install(self.package_name, root_shell)
        contents = Path(self.environment_file).read_text(encoding="utf-8")
        if "EDITOR=micro" not in contents:
            root_shell.execute(f"echo 'EDITOR=micro' >> {self.environment_file}")
        return True

    def uninstall(self, root_shell: RootShell) -> bool:
        pacman.uninstall(self.package_name, root_shell)
        return root_shell.execute(f"sed -i '/EDITOR=micro/d' {self.environment_file}")

    def is_installed(self) -> bool:
        package_installed = pacman.is_installed(self.package_name)
        contents = Path(self.environment_file).read_text(encoding="utf-8")
        return package_installed and "EDITOR=micro" in contents

    @property
    def name(self) -> str:
        return "Setup Micro"