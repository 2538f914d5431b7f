# archkickstart

A post-install helper for Arch-based distributions. It opens a small Tk
window that lists features grouped by topic: System, Shell, Gnome, Common
Packages, Software Development, Gaming and Printing. Each feature has a button
labelled with its name, which installs it, and an `X` button, which removes
it. After every action the feature is checked again. The install button is
enabled only while the feature is missing, and `X` only while it is present.

## Requirements

- An Arch-based system with `pacman`, `pkexec` and `systemctl`.
- Python 3.10 or later with `tkinter` available. Some distributions package it
  separately as `tk`.
- `beautifulsoup4`, which is installed automatically.

## Installing

```
pip install .
```

## Running

```
archkickstart
```

Start it as your normal user. On start, `archkickstart.app.main`:

1. Exits with status 1 if the current user is root.
2. Exits with status 1 unless `/etc/os-release` mentions Arch. Otherwise it
   prints the distribution's pretty name.
3. Opens a privileged shell, `RootShell`, by running `pkexec bash`. You are
   asked for your password once. Commands that need root are written to this
   shell's stdin, and their output goes to the terminal.
4. Runs `yay --version`. If that fails, it installs the build tools, downloads
   the latest yay release and uses it to install `yay-bin`. If yay still does
   not run afterwards, it exits with status 1.
5. Checks `/etc/pacman.conf` for the `[chaotic-aur]` section. If the section
   is missing, it fetches the install commands from the repository's web page,
   runs them, and appends the section.
6. Shows the window. When the window is closed, the privileged shell is told to
   exit.

The only command-line option is `--help`.

## Features

The full list, in display order, comes from
`archkickstart.app.default_features()`. The building blocks are:

- `archkickstart.packages`
  - `PacmanPackage`: one or more packages installed with `pacman`.
  - `PacmanPackageService`: pacman packages plus a systemd service to enable
    and start.
  - `YayPackage`: AUR packages installed with `yay`.
  - `PacmanPamac`.
  - `RemoveEosWelcome`: counts as installed when the `welcome` package is
    absent.
  - `RustToolchain`: installs `rustup` and sets the stable toolchain.
- `archkickstart.system`
  - `ChaoticAur`.
  - `CommonSystemFixes`: `MOZ_ENABLE_WAYLAND=1` in `/etc/environment` and a
    journald size limit in `/etc/systemd/journald.conf.d/limit.conf`.
  - `Docker`: the package, the service, and the user added to the `docker`
    group.
  - `PeriodicTrim`: the `fstrim.timer`.
  - `PacmanImprovements`: coloured pacman output and a monthly `paccache.timer`.
  - `Micro`: the `micro` editor, set as `EDITOR` in `/etc/environment`.
- `archkickstart.shells`
  - `FishDefaultShell`: fish, fisher and tide, with fish made the login shell.
  - `Kitty`: downloads the stock `kitty.conf` and enables a few options with
    `configure_kitty`.
- `archkickstart.gnome`
  - `GnomeSetting`: one `gsettings` key with a preferred value and a default
    value.
  - `GnomeDarkMode`.
  - `PacmanShellExtension`, `AurShellExtension` and `WebShellExtension`: Gnome
    Shell extensions, listed by `gnome_extensions()`.
  - `GnomeDraculaGtkTheme`.
- `archkickstart.feature`
  - `FeatureGroup`: a section header in the list.

Every feature is a subclass of `archkickstart.feature.Feature`. It provides
`install(root_shell)`, `uninstall(root_shell)`, `is_installed()`, a `name`
property and an `is_group` property. You can show your own list of features
with `archkickstart.ui.show(root_shell, features)`.

## What it does not do

- It has no non-interactive mode. Features cannot be installed or removed from
  the command line, only through the window.
- The feature list is fixed in code. There is no configuration file for it.
- It does not set Gnome keyboard shortcuts and does not set up the Terminator
  terminal.

## Running the tests

```
pip install .[test]
pytest
```