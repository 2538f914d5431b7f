"""A Tk window for installing and configuring packages, services and Gnome settings on Arch-based systems."""

__version__ = "0.1.0"