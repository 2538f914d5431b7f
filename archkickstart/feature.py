"""The interface shared by every installable feature."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .shell import RootShell


class Feature(ABC):
    """Something that can be installed, uninstalled and checked."""

    @abstractmethod
    def install(self, root_shell: RootShell) -> bool:
        """Install the feature; True on success."""

    @abstractmethod
    def uninstall(self, root_shell: RootShell) -> bool:
        """Remove the feature; True on success."""

    @abstractmethod
    def is_installed(self) -> bool:
        """True if the feature is present on the system."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Label shown to the user."""

    @property
    def is_group(self) -> bool:
        """True for section headers that only group other features."""
        return False


@dataclass(frozen=True)
class FeatureGroup(Feature):
    """A section header in the feature list; it installs nothing."""

    label: str

    def install(self, root_shell: RootShell) -> bool:
        return True

    def uninstall(self, root_shell: RootShell) -> bool:
        return True

    def is_installed(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return self.label

    @property
    def is_group(self) -> bool:
        return True