"""Shell and terminal features: fish as login shell and the kitty terminal."""

from __future__ import annotations

import time
from os import PathLike
from pathlib import Path

from . import filesystem, pacman, shell, yay
from .feature import Feature
from .shell import RootShell

FISH_CONFIG = """

# Greeting text
set fish_greeting

# Expand path
set -x PATH $HOME/.local/bin $PATH

# Alias-Definitionen
alias ll 'ls -l'
alias l 'ls -la'

# Fix ssh issues
alias ssh="kitty +kitten ssh"

"""

KITTY_CONFIG_URL = (
    "https://sw.kovidgoyal.net/kitty/_downloads/433dadebd0bf504f8b008985378086ce/kitty.conf"
)
KITTY_OPEN_DESKTOP = "/usr/share/applications/kitty-open.desktop"

KITTY_REPLACEMENTS = (
    ("# map kitty_mod+] next_window", "map kitty_mod+down next_window"),
    ("# map kitty_mod+[ previous_window", "map kitty_mod+up previous_window"),
    ("# tab_bar_style powerline", "tab_bar_style powerline"),
    ("# background_opacity 1.0", "background_opacity 0.9"),
    ("# wayland_titlebar_color system", "wayland_titlebar_color #555555"),
)


def fish_config_path() -> Path:
    """Location of the user's fish configuration file."""
    return shell.user_home_dir_path() / ".config" / "fish" / "config.fish"


def append_to_fish_config(text: str) -> bool:
    """Append text on a new line to the fish configuration; True if written."""
    config_file = fish_config_path()
    content = config_file.read_text(encoding="utf-8")
    try:
        config_file.write_text(f"{content}\n{text}", encoding="utf-8")
    except OSError:
        return False
    return True


def remove_from_fish_config(text: str) -> bool:
    """Remove every occurrence of text from the fish configuration.

    Returns False only if the file could not be read.
    """
    config_file = fish_config_path()
    try:
        content = config_file.read_text(encoding="utf-8")
    except OSError:
        return False
    try:
        config_file.write_text(content.replace(text, ""), encoding="utf-8")
    except OSError:
        pass
    return True


class FishDefaultShell(Feature):
    """fish with fisher and tide as the user's login shell."""

    def install(self, root_shell: RootShell) -> bool:
        pacman.install("fish fisher ttf-meslo-nerd", root_shell)

        config_file = fish_config_path()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("", encoding="utf-8")
        append_to_fish_config(FISH_CONFIG)

        shell.execute("fish -c 'fisher install IlanCosman/tide@v5'")
        username = shell.get_current_user()
        shell.execute(f"pkexec chsh --shell $(which fish) {username}")
        shell.execute("kgx --command \"fish -c 'tide configure'\"")

        return yay.is_installed("fish fisher")

    def uninstall(self, root_shell: RootShell) -> bool:
        remove_from_fish_config(FISH_CONFIG)
        pacman.uninstall("fish fisher", root_shell)
        username = shell.get_current_user()
        return shell.execute(f"pkexec chsh --shell $(which bash) {username}")

    def is_installed(self) -> bool:
        username = shell.get_current_user()
        is_default_shell = shell.execute(f"cat /etc/passwd | grep {username} | grep /fish")
        return pacman.is_installed("fish") and is_default_shell

    @property
    def name(self) -> str:
        return "Set FISH as default shell"


def kitty_config_path() -> Path:
    """Location of the user's kitty configuration file."""
    return shell.user_home_dir_path() / ".config" / "kitty" / "kitty.conf"


def configure_kitty(config_file: str | PathLike[str] | None = None) -> None:
    """Enable the preferred options in a stock kitty configuration."""
    path = kitty_config_path() if config_file is None else Path(config_file)
    for search, replacement in KITTY_REPLACEMENTS:
        filesystem.replace_string_in_file(path, search, replacement)


class Kitty(Feature):
    """The kitty terminal with a tuned configuration."""

    package_name = "kitty"

    def install(self, root_shell: RootShell) -> bool:
        ok = pacman.install(self.package_name, root_shell)

        config_file = kitty_config_path()
        shell.execute(f"mkdir -p {config_file.parent}")
        filesystem.download_file(KITTY_CONFIG_URL, config_file)
        configure_kitty(config_file)

        # kitty rewrites this launcher on update; keep it empty and immutable.
        root_shell.execute(f"chattr -i {KITTY_OPEN_DESKTOP}")
        time.sleep(0.1)
        root_shell.execute(f'echo "[Desktop Entry]" > {KITTY_OPEN_DESKTOP}')
        root_shell.execute(f"chattr +i {KITTY_OPEN_DESKTOP}")

        return ok

    def uninstall(self, root_shell: RootShell) -> bool:
        root_shell.execute(f"chattr -i {KITTY_OPEN_DESKTOP}")
        return pacman.uninstall(self.package_name, root_shell)

    def is_installed(self) -> bool:
        return pacman.is_installed(self.package_name)

    @property
    def name(self) -> str:
        return "Install Kitty"