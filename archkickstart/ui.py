"""The window listing every feature with install and remove buttons."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable

from .feature import Feature
from .shell import RootShell

WINDOW_TITLE = "Rouvens arch kickstart"
WINDOW_SIZE = "480x720"
UNINSTALL_LABEL = "X"


class FeatureToggle:
    """Install/uninstall state of one feature, shared by its two buttons.

    Every action on the privileged shell runs while holding ``lock``.
    """

    def __init__(self, feature: Feature, root_shell: RootShell, lock: threading.Lock) -> None:
        self.feature = feature
        self.root_shell = root_shell
        self.lock = lock
        self.install_enabled = False
        self.uninstall_enabled = False
        self._listeners: list[Callable[[FeatureToggle], None]] = []
        self.refresh()

    def add_listener(self, callback: Callable[[FeatureToggle], None]) -> None:
        """Call ``callback`` with this toggle whenever its state is refreshed."""
        self._listeners.append(callback)

    def refresh(self) -> bool:
        """Re-check the feature and update which action is available."""
        installed = self.feature.is_installed()
        self.install_enabled = not installed
        self.uninstall_enabled = installed
        for callback in self._listeners:
            callback(self)
        return installed

    def install(self) -> bool:
        """Install the feature, then refresh; returns the new installed state."""
        with self.lock:
            self.feature.install(self.root_shell)
            return self.refresh()

    def uninstall(self) -> bool:
        """Remove the feature, then refresh; returns the new installed state."""
        with self.lock:
            self.feature.uninstall(self.root_shell)
            return self.refresh()


def _button_state(enabled: bool) -> str:
    return "normal" if enabled else "disabled"


def build_window(root, root_shell: RootShell, features: Iterable[Feature]) -> list[FeatureToggle]:
    """Fill a Tk root window with the feature list; returns the toggles created."""
    import tkinter as tk

    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_SIZE)

    canvas = tk.Canvas(root, highlightthickness=0)
    scrollbar = tk.Scrollbar(root, orient="vertical", command=canvas.yview)
    content = tk.Frame(canvas)
    window_id = canvas.create_window((0, 0), window=content, anchor="nw")
    canvas.configure(yscrollcommand=scrollbar.set)

    content.bind("<Configure>", lambda _event: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda event: canvas.itemconfigure(window_id, width=event.width))

    scrollbar.pack(side="right", fill="y")
    canvas.pack(side="left", fill="both", expand=True)

    lock = threading.Lock()
    toggles: list[FeatureToggle] = []

    for feature in features:
        name = feature.name
        if feature.is_group:
            header = tk.Label(content, text=name, anchor="w")
            header.pack(fill="x", padx=10, pady=10)
            continue

        toggle = FeatureToggle(feature, root_shell, lock)
        row = tk.Frame(content)
        btn_install = tk.Button(row, text=name, command=toggle.install)
        btn_uninstall = tk.Button(row, text=UNINSTALL_LABEL, command=toggle.uninstall)
        btn_install.pack(side="left", fill="x", expand=True, padx=(0, 5))
        btn_uninstall.pack(side="left")
        row.pack(fill="x")

        def update(state: FeatureToggle, install=btn_install, uninstall=btn_uninstall) -> None:
            install.configure(state=_button_state(state.install_enabled))
            uninstall.configure(state=_button_state(state.uninstall_enabled))

        update(toggle)
        toggle.add_listener(update)
        toggles.append(toggle)

    return toggles


def show(root_shell: RootShell, features: Iterable[Feature]) -> None:
    """Open the main window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    build_window(root, root_shell, list(features))
    root.mainloop()