"""GNOME features: settings, shell extensions and the Dracula theme."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import pacman, shell, yay
from .feature import Feature
from .shell import RootShell

ENVIRONMENT_FILE = "/etc/environment"

DRACULA_THEME_PACKAGE = "dracula-gtk-theme-git"
DRACULA_ICONS_PACKAGE = "dracula-icons-git"
DRACULA_CURSOR_PACKAGE = "dracula-cursors-git"
DRACULA_PACKAGES = (DRACULA_THEME_PACKAGE, DRACULA_ICONS_PACKAGE, DRACULA_CURSOR_PACKAGE)
GTK_THEME_INSTALL_PATH = "/usr/share/themes/Dracula/gnome-shell"
GTK_THEME_INSTALL_PATH_V40 = "/usr/share/themes/Dracula/gnome-shell/v40"

DRACULA_GSETTINGS = (
    "gsettings set org.gnome.desktop.interface gtk-theme 'Dracula'",
    "gsettings set org.gnome.desktop.wm.preferences theme 'Dracula'",
    "gsettings set org.gnome.shell.extensions.user-theme name 'Dracula'",
    "gsettings set org.gnome.desktop.interface icon-theme 'Dracula'",
    "gsettings set org.gnome.desktop.interface cursor-theme 'Dracula-cursors'",
)


def _enable_extension(uuid: str) -> bool:
    return shell.execute(f"gnome-extensions enable {uuid}")


@dataclass(frozen=True)
class GnomeSetting(Feature):
    """A single gsettings key set to a preferred value."""

    key: str
    value: str
    default_value: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        return shell.execute(f"gsettings set {self.key} {self.value}")

    def uninstall(self, root_shell: RootShell) -> bool:
        return shell.execute(f"gsettings set {self.key} {self.default_value}")

    def is_installed(self) -> bool:
        output = shell.execute_with_output(f"gsettings get {self.key}")
        return self.value in output

    @property
    def name(self) -> str:
        return self.description


class GnomeDarkMode(Feature):
    """The dark colour scheme for the desktop."""

    def install(self, root_shell: RootShell) -> bool:
        return shell.execute(
            "gsettings set org.gnome.desktop.interface color-scheme 'prefer-dark'"
        )

    def uninstall(self, root_shell: RootShell) -> bool:
        return shell.execute(
            "gsettings set org.gnome.desktop.interface color-scheme 'prefer-light'"
        )

    def is_installed(self) -> bool:
        output = shell.execute_with_output(
            "gsettings get org.gnome.desktop.interface color-scheme"
        )
        return "prefer-dark" in output

    @property
    def name(self) -> str:
        return "Enable Dark mode"


@dataclass(frozen=True)
class PacmanShellExtension(Feature):
    """A shell extension packaged in the repositories, enabled after install."""

    package_name: str
    extension_uuid: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        pacman.install(self.package_name, root_shell)
        return _enable_extension(self.extension_uuid)

    def uninstall(self, root_shell: RootShell) -> bool:
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return self.description


@dataclass(frozen=True)
class AurShellExtension(Feature):
    """A shell extension from the AUR, with optional repository dependencies."""

    package_name: str
    extension_uuid: str
    description: str
    dependencies: str = ""

    def install(self, root_shell: RootShell) -> bool:
        if self.dependencies:
            pacman.install(self.dependencies, root_shell)
        yay.install(self.package_name)
        return _enable_extension(self.extension_uuid)

    def uninstall(self, root_shell: RootShell) -> bool:
        return yay.uninstall(self.package_name)

    def is_installed(self) -> bool:
        return yay.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return self.description


@dataclass(frozen=True)
class WebShellExtension(Feature):
    """A shell extension installed by opening its page on the extensions site."""

    url: str
    extension_uuid: str
    description: str

    def install(self, root_shell: RootShell) -> bool:
        return shell.execute(f"xdg-open {self.url}")

    def uninstall(self, root_shell: RootShell) -> bool:
        return shell.execute(f"gnome-extensions uninstall {self.extension_uuid}")

    def is_installed(self) -> bool:
        return shell.execute(f"gnome-extensions info {self.extension_uuid}")

    @property
    def name(self) -> str:
        return self.description


@dataclass(frozen=True)
class GnomeDraculaGtkTheme(Feature):
    """The Dracula GTK theme, icons and cursors, applied everywhere."""

    environment_file: str = ENVIRONMENT_FILE
    theme_path: str = GTK_THEME_INSTALL_PATH
    theme_path_v40: str = GTK_THEME_INSTALL_PATH_V40

    def install(self, root_shell: RootShell) -> bool:
        for package in DRACULA_PACKAGES:
            pacman.install(package, root_shell)

        contents = Path(self.environment_file).read_text(encoding="utf-8")
        if "GTK_THEME=Dracula" not in contents:
            root_shell.execute(f"echo 'GTK_THEME=Dracula' >> {self.environment_file}")

        if Path(self.theme_path_v40).exists():
            root_shell.execute(f"cp -r {self.theme_path_v40}/* {self.theme_path}")

        for command in DRACULA_GSETTINGS:
            root_shell.execute(command)

        return self.is_installed()

    def uninstall(self, root_shell: RootShell) -> bool:
        for package in DRACULA_PACKAGES:
            pacman.uninstall(package, root_shell)
        root_shell.execute(f"sed -i '/GTK_THEME=Dracula/d' {self.environment_file}")
        return not self.is_installed()

    def is_installed(self) -> bool:
        packages_installed = all(yay.is_installed(package) for package in DRACULA_PACKAGES)
        contents = Path(self.environment_file).read_text(encoding="utf-8")
        return packages_installed and "GTK_THEME=Dracula" in contents

    @property
    def name(self) -> str:
        return "Gnome Dracula GTK Theme"


def gnome_extensions() -> list[Feature]:
    """The shell extensions offered, in display order."""
    return [
        WebShellExtension(
            url="https://extensions.gnome.org/extension/19/user-themes/",
            extension_uuid="[email]",
            description="Gnome Shell User Themes",
        ),
        WebShellExtension(
            url="https://extensions.gnome.org/extension/4655/date-menu-formatter/",
            extension_uuid="[email]",
            description="Gnome Shell date menu formatter",
        ),
        AurShellExtension(
            package_name="gnome-shell-extension-system-monitor-next-git",
            extension_uuid="[email]",
            description="Gnome Shell Extension System Monitor Next",
            dependencies="libgtop networkmanager gnome-system-monitor clutter",
        ),
        PacmanShellExtension(
            package_name="gnome-shell-extension-dash-to-panel",
            extension_uuid="[email]",
            description="Gnome Shell Extension Dash To Panel",
        ),
        PacmanShellExtension(
            package_name="gnome-shell-extension-appindicator",
            extension_uuid="[email]",
            description="Gnome Shell Extension App Indicator",
        ),
        PacmanShellExtension(
            package_name="gnome-shell-extension-blur-my-shell",
            extension_uuid="blur-my-shell@aunetx",
            description="Gnome Shell Extension Blur my Shell",
        ),
        AurShellExtension(
            package_name="gnome-shell-extension-just-perfection-desktop",
            extension_uuid="just-perfection-desktop@just-perfection",
            description="Gnome Shell Extension Just Perfection",
        ),
        PacmanShellExtension(
            package_name="gnome-shell-extension-tiling-assistant-git",
            extension_uuid="tiling-assistant@leleat-on-github",
            description="Gnome Shell Extension Tiling Assistant",
        ),
    ]