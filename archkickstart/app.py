"""Entry point: checks the system, prepares package tools and opens the window."""

from __future__ import annotations

import argparse

from . import pacman, shell, ui
from .feature import Feature, FeatureGroup
from .gnome import GnomeDraculaGtkTheme, GnomeSetting, gnome_extensions
from .packages import (
    PacmanPackage,
    PacmanPackageService,
    PacmanPamac,
    RemoveEosWelcome,
    RustToolchain,
    YayPackage,
)
from .shell import RootShell
from .shells import FishDefaultShell, Kitty
from .system import (
    ChaoticAur,
    CommonSystemFixes,
    Docker,
    Micro,
    PacmanImprovements,
    PeriodicTrim,
)

YAY_BUILD_PACKAGES = "git base-devel curl sed tar"
YAY_LATEST_TAG_COMMAND = (
    "curl -L -s -H 'Accept: application/json' https://github.com/Jguer/yay/releases/latest"
    " | sed -e 's/.*\"tag_name\":\"\\([^\"]*\\)\".*/\\1/ '"
)


def _pacman(package_name: str, description: str) -> PacmanPackage:
    return PacmanPackage(package_name=package_name, description=description)


def _yay(package_name: str, description: str) -> YayPackage:
    return YayPackage(package_name=package_name, description=description)


def _service(package_name: str, service_name: str, description: str) -> PacmanPackageService:
    return PacmanPackageService(
        package_name=package_name, service_name=service_name, description=description
    )


def _setting(key: str, value: str, default_value: str, description: str) -> GnomeSetting:
    return GnomeSetting(key=key, value=value, default_value=default_value, description=description)


def default_features() -> list[Feature]:
    """Every feature offered, with group headers, in display order."""
    tap_to_click = _setting(
        "org.gnome.desktop.peripherals.touchpad tap-to-click",
        "true",
        "false",
        "Enable Tap to Click",
    )
    return [
        PacmanPamac(),
        FeatureGroup("System"),
        _service("bluez bluez-utils", "bluetooth.service", "Install Bluetooth"),
        PacmanImprovements(),
        PeriodicTrim(),
        Docker(),
        _pacman("noto-fonts-emoji", "Install emoji support"),
        _pacman("ttf-fira-code", "Install fira code font"),
        _pacman("appimagelauncher", "Install AppImageLauncher"),
        _pacman("cpupower-gui", "Install cpupower-gui"),
        _service(
            "power-profiles-daemon",
            "power-profiles-daemon.service",
            "Install power-profiles-daemon",
        ),
        CommonSystemFixes(),
        RemoveEosWelcome(),
        FeatureGroup("Shell"),
        FishDefaultShell(),
        Kitty(),
        FeatureGroup("Gnome"),
        _setting(
            "org.gnome.desktop.interface color-scheme",
            "'prefer-dark'",
            "'prefer-light'",
            "Enable Dark mode",
        ),
        tap_to_click,
        tap_to_click,
        _setting(
            "org.gnome.desktop.peripherals.mouse accel-profile",
            "'flat'",
            "'default'",
            "Disable mouse acceleration",
        ),
        _setting(
            "org.gnome.mutter check-alive-timeout",
            "30000",
            "5000",
            "Set app check alive timeout to 30s",
        ),
        _setting(
            "org.gnome.desktop.wm.preferences button-layout",
            "'appmenu:minimize,maximize,close'",
            "'appmenu:close'",
            "Enable minimize, maximize and close buttons",
        ),
        _setting(
            "org.gnome.desktop.sound allow-volume-above-100-percent",
            "true",
            "false",
            "Enable audio over amplification",
        ),
        _pacman("gnome-browser-connector", "Install Gnome Browser connector"),
        *gnome_extensions(),
        GnomeDraculaGtkTheme(),
        _pacman("gnome-tweaks", "Install gnome tweaks"),
        _pacman("gnome-power-manager", "Install gnome power manager"),
        FeatureGroup("Common Packages"),
        _pacman("firefox", "Install Firefox"),
        _pacman("vlc", "Install Vlc"),
        _pacman("gnome-firmware", "Install gnome firmware updater"),
        _pacman("via-bin", "Install VIA for keyboards"),
        _pacman("topgrade", "Install topgrade"),
        _pacman("menulibre", "Install menulibre (Menu editor)"),
        _pacman("bottles", "Install bottles (Wine Manager)"),
        _pacman("htop", "Install htop"),
        _pacman("btop", "Install btop"),
        _pacman("timeshift", "Install timeshift"),
        _pacman("sublime-text-4", "Install Sublime"),
        _pacman("bitwarden", "Install Bitwarden"),
        _pacman("mc", "Install Midnight commander"),
        _pacman("solaar", "Install Solaar (Logitech)"),
        Micro(),
        _pacman("thunderbird", "Install Thunderbird"),
        _pacman("signal-desktop", "Install signal desktop"),
        _pacman("impression", "Install Impression (USB Image writer)"),
        _pacman("deja-dup", "Install Déjà Dup"),
        _pacman("apostrophe", "Install apostrophe (Markdown editor)"),
        _pacman("amberol", "Install amberol (Music player)"),
        _pacman("fragments", "Install Fragments (BitTorrent client)"),
        _pacman("shortwave", "Install Shortwave (Internet radio player)"),
        FeatureGroup("Software Development"),
        RustToolchain(),
        _pacman("vscodium", "Install VS Codium"),
        _pacman("python", "Install Python"),
        _pacman("jdk-openjdk", "Install OpenJDK"),
        _pacman("maven", "Install Maven"),
        _pacman(
            "intellij-idea-ultimate-edition intellij-idea-ultimate-edition-jre",
            "Install intelliJ IDEA Ultimate",
        ),
        _pacman("qemu-user-static", "Install QEMU static"),
        _yay("emblem", "Install Emblem (Generate icons)"),
        _service(
            "wireguard-tools systemd-resolvconf",
            "systemd-resolved.service",
            "Install Wireguard",
        ),
        _pacman("wireless_tools", "Install Wireless tools"),
        FeatureGroup("Gaming"),
        _pacman("linux-zen linux-zen-headers", "Install Linux Zen Kernel"),
        _pacman("corectrl", "Install Corectrl"),
        _yay("cartridges", "Install cartridges (Game launcher)"),
        _pacman("tuxclocker", "Install Tuxclocker"),
        _pacman("steam steam-native-runtime", "Install Steam"),
        _pacman(
            "lutris gamemode lib32-gamemode innoextract gvfs lib32-vkd3d "
            "lib32-vulkan-icd-loader vkd3d vulkan-icd-loader vulkan-tools wine winetricks",
            "Install Lutris",
        ),
        _pacman("vulkan-radeon vulkan-mesa-layers", "Install vulkan-radeon"),
        _pacman("dxvk-gplasync-bin", "Install Async DXVK"),
        _pacman("gamemode", "Install Feral GameMode"),
        _pacman("gamescope", "Install Gamescope"),
        _pacman("vkbasalt", "Install vkBasalt"),
        _pacman("protonplus", "Install Proton Plus"),
        _pacman("mangohud", "Install MangoHud"),
        _yay("goverlay-bin", "Install Goverlay"),
        _pacman("piper", "Install Piper"),
        _pacman("openrgb", "Install OpenRGB"),
        _yay("lug-helper", "Install Star Citizen LUG Helper"),
        _pacman("liquidctl", "Install Liquidctl"),
        FeatureGroup("Printing"),
        _service("cups cups-pdf", "cups.service", "Install CUPS service"),
        _pacman("system-config-printer", "Install Graphical user interface for CUPS"),
        _yay("brother-mfc-j430w", "Install Brother MFC-J430W driver"),
        _pacman("brscan4", "Install brscan4"),
    ]


def ensure_non_root_privileges() -> None:
    """Exit with status 1 when running as root."""
    if shell.is_root():
        print("❌ Please run this app without root privileges")
        raise SystemExit(1)
    print(f"✔️ Running as {shell.execute_with_output('whoami').strip()}")


def ensure_arch_based_distro() -> None:
    """Exit with status 1 unless the system is Arch based."""
    if not shell.execute_with_output("cat /etc/os-release | grep -i arch").strip():
        print("❌ This app only works on arch based distros")
        raise SystemExit(1)
    pretty_name = shell.execute_with_output(
        "cat /etc/os-release | grep -i name | grep PRETTY_NAME | cut -d '=' -f 2"
    ).strip()
    print(f"✔️ Running on {pretty_name}")


def ensure_yay_is_installed(root_shell: RootShell) -> None:
    """Install yay if missing; exit with status 1 if that fails."""
    if shell.execute("yay --version"):
        print("✔️ yay is already installed")
        return
    print("💫 Installing yay")
    if not install_yay(root_shell):
        print("❌ Could not automatically install yay, please install it manually.")
        raise SystemExit(1)


def ensure_chaotic_aur_is_installed(root_shell: RootShell) -> None:
    """Add the Chaotic AUR repository unless it is already configured."""
    aur = ChaoticAur()
    if aur.is_installed():
        print("✔️ Chaotic AUR is already installed")
    else:
        print("💫 Installing Chaotic AUR")
        aur.install(root_shell)


def install_yay(root_shell: RootShell) -> bool:
    """Download the latest yay release and use it to install yay-bin."""
    if not pacman.is_installed(YAY_BUILD_PACKAGES):
        pacman.install(YAY_BUILD_PACKAGES, root_shell)

    latest_tag = shell.execute_with_output(YAY_LATEST_TAG_COMMAND).strip()
    latest_version = latest_tag.replace("v", "")
    shell.execute_with_output(
        "curl -L -o /tmp/yay.tar.gz https://github.com/Jguer/yay/releases/download/"
        f"{latest_tag}/yay_{latest_version}_x86_64.tar.gz"
    )
    shell.execute("tar -xzf /tmp/yay.tar.gz -C /tmp/")
    shell.execute(f"/tmp/yay_{latest_version}_x86_64/yay -Sy --sudo pkexec --noconfirm yay-bin")
    shell.execute("rm -rf /tmp/yay*")
    return shell.execute("yay --version")


def main(argv: list[str] | None = None) -> int:
    """Check the system, set up package tools and show the feature window."""
    parser = argparse.ArgumentParser(
        prog="archkickstart",
        description="Set up an Arch based desktop with a few clicks.",
    )
    parser.parse_args(argv)

    ensure_non_root_privileges()
    ensure_arch_based_distro()

    with RootShell() as root_shell:
        ensure_yay_is_installed(root_shell)
        ensure_chaotic_aur_is_installed(root_shell)
        ui.show(root_shell, default_features())
    return 0