import subprocess

import pytest

from archkickstart.gnome import (
    AurShellExtension,
    GnomeDarkMode,
    GnomeDraculaGtkTheme,
    GnomeSetting,
    PacmanShellExtension,
    WebShellExtension,
    gnome_extensions,
)


class _RecordingShell:
    def __init__(self):
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        return True


class _FakeRunner:
    """Stands in for subprocess.run; answers by command prefix."""

    def __init__(self, rules=None, default=(0, "")):
        self.rules = rules or {}
        self.default = default
        self.commands = []

    def __call__(self, args, capture_output=False, **kwargs):
        command = args[-1]
        self.commands.append(command)
        returncode, stdout = self.default
        for prefix, answer in self.rules.items():
            if command.startswith(prefix):
                returncode, stdout = answer
                break
        return subprocess.CompletedProcess(args, returncode, stdout=stdout.encode(), stderr=b"")


@pytest.fixture
def runner(monkeypatch):
    fake = _FakeRunner()
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr("time.sleep", lambda seconds: None)
    return fake


def _setting():
    return GnomeSetting(
        key="org.gnome.mutter check-alive-timeout",
        value="30000",
        default_value="5000",
        description="Set app check alive timeout to 30s",
    )


def test_setting_install_sets_value(runner):
    assert _setting().install(_RecordingShell()) is True
    assert runner.commands == ["gsettings set org.gnome.mutter check-alive-timeout 30000"]


def test_setting_install_reports_failure(runner):
    runner.default = (1, "")
    assert _setting().install(_RecordingShell()) is False


def test_setting_uninstall_restores_default(runner):
    assert _setting().uninstall(_RecordingShell()) is True
    assert runner.commands == ["gsettings set org.gnome.mutter check-alive-timeout 5000"]


@pytest.mark.parametrize("output, expected", [("uint32 30000\n", True), ("uint32 5000\n", False)])
def test_setting_is_installed_reads_value(runner, output, expected):
    runner.default = (0, output)
    assert _setting().is_installed() is expected
    assert runner.commands == ["gsettings get org.gnome.mutter check-alive-timeout"]


def test_setting_name_is_description():
    assert _setting().name == "Set app check alive timeout to 30s"
    assert _setting().is_group is False


def test_dark_mode_install_and_name(runner):
    feature = GnomeDarkMode()
    assert feature.install(_RecordingShell()) is True
    assert runner.commands == [
        "gsettings set org.gnome.desktop.interface color-scheme 'prefer-dark'"
    ]
    assert feature.name == "Enable Dark mode"


@pytest.mark.parametrize("output, expected", [("'prefer-dark'\n", True), ("'prefer-light'\n", False)])
def test_dark_mode_is_installed(runner, output, expected):
    runner.default = (0, output)
    assert GnomeDarkMode().is_installed() is expected


def test_dark_mode_uninstall(runner):
    assert GnomeDarkMode().uninstall(_RecordingShell()) is True
    assert runner.commands == [
        "gsettings set org.gnome.desktop.interface color-scheme 'prefer-light'"
    ]


def test_pacman_extension_install_enables(runner):
    root = _RecordingShell()
    feature = PacmanShellExtension(
        package_name="gnome-shell-extension-blur-my-shell",
        extension_uuid="blur-my-shell@aunetx",
        description="Gnome Shell Extension Blur my Shell",
    )
    assert feature.install(root) is True
    assert root.commands == ["pacman -Sy --noconfirm gnome-shell-extension-blur-my-shell"]
    assert runner.commands[-1] == "gnome-extensions enable blur-my-shell@aunetx"


def test_pacman_extension_uninstall_waits_until_gone(runner):
    runner.rules = {"pacman -Q": (1, "")}
    root = _RecordingShell()
    feature = PacmanShellExtension("pkg-a", "uuid-a", "desc")
    assert feature.uninstall(root) is True
    assert root.commands == ["pacman -Rs --noconfirm pkg-a"]
    assert feature.is_installed() is False


def test_aur_extension_installs_dependencies_first(runner):
    root = _RecordingShell()
    feature = AurShellExtension(
        package_name="gnome-shell-extension-system-monitor-next-git",
        extension_uuid="uuid-b",
        description="desc",
        dependencies="libgtop networkmanager gnome-system-monitor clutter",
    )
    assert feature.install(root) is True
    assert root.commands == [
        "pacman -Sy --noconfirm libgtop networkmanager gnome-system-monitor clutter"
    ]
    assert (
        "yay -Sy --sudo pkexec --noconfirm gnome-shell-extension-system-monitor-next-git"
        in runner.commands
    )
    assert runner.commands[-1] == "gnome-extensions enable uuid-b"


def test_aur_extension_without_dependencies_uses_no_root_shell(runner):
    root = _RecordingShell()
    feature = AurShellExtension("pkg-c", "uuid-c", "desc")
    feature.install(root)
    assert root.commands == []
    assert runner.commands[0] == "yay -Sy --sudo pkexec --noconfirm pkg-c"


def test_web_extension_commands(runner):
    feature = WebShellExtension("https://extensions.example.com/1/", "uuid-d", "desc")
    feature.install(_RecordingShell())
    feature.uninstall(_RecordingShell())
    runner.default = (2, "")
    assert feature.is_installed() is False
    assert runner.commands == [
        "xdg-open https://extensions.example.com/1/",
        "gnome-extensions uninstall uuid-d",
        "gnome-extensions info uuid-d",
    ]


def test_gnome_extensions_order_and_uniqueness():
    names = [feature.name for feature in gnome_extensions()]
    assert names[0] == "Gnome Shell User Themes"
    assert names[-1] == "Gnome Shell Extension Tiling Assistant"
    assert len(names) == len(set(names))
    assert not any(feature.is_group for feature in gnome_extensions())


def _dracula(tmp_path, environment="PATH=/usr/bin\n"):
    env = tmp_path / "environment"
    env.write_text(environment)
    theme = tmp_path / "gnome-shell"
    return GnomeDraculaGtkTheme(
        environment_file=str(env),
        theme_path=str(theme),
        theme_path_v40=str(theme / "v40"),
    )


def test_dracula_is_installed_needs_environment_entry(runner, tmp_path):
    assert _dracula(tmp_path, "GTK_THEME=Dracula\n").is_installed() is True
    assert _dracula(tmp_path).is_installed() is False


def test_dracula_is_installed_needs_packages(runner, tmp_path):
    runner.rules = {"yay -Q dracula-icons-git": (1, "")}
    assert _dracula(tmp_path, "GTK_THEME=Dracula\n").is_installed() is False


def test_dracula_install_sets_environment_and_copies_v40(runner, tmp_path):
    feature = _dracula(tmp_path)
    (tmp_path / "gnome-shell" / "v40").mkdir(parents=True)
    root = _RecordingShell()
    assert feature.install(root) is False
    assert f"echo 'GTK_THEME=Dracula' >> {feature.environment_file}" in root.commands
    assert f"cp -r {feature.theme_path_v40}/* {feature.theme_path}" in root.commands
    assert root.commands[-1] == (
        "gsettings set org.gnome.desktop.interface cursor-theme 'Dracula-cursors'"
    )


def test_dracula_install_skips_existing_entry_and_missing_v40(runner, tmp_path):
    feature = _dracula(tmp_path, "GTK_THEME=Dracula\n")
    root = _RecordingShell()
    assert feature.install(root) is True
    assert not any(command.startswith("echo") for command in root.commands)
    assert not any(command.startswith("cp -r") for command in root.commands)


def test_dracula_uninstall_removes_entry(runner, tmp_path):
    runner.rules = {"pacman -Q": (1, ""), "yay -Q": (1, "")}
    feature = _dracula(tmp_path)
    root = _RecordingShell()
    assert feature.uninstall(root) is True
    assert root.commands[-1] == f"sed -i '/GTK_THEME=Dracula/d' {feature.environment_file}"
    assert feature.name == "Gnome Dracula GTK Theme"


def test_dracula_missing_environment_file_raises(runner, tmp_path):
    feature = GnomeDraculaGtkTheme(environment_file=str(tmp_path / "absent"))
    with pytest.raises(FileNotFoundError):
        feature.is_installed()