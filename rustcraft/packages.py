"""Software package descriptions and a builder for them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Language(Enum):
    """A programming language a package is written in."""

    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    """A reference to another package at a given version."""

    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Optional[Language] = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency for use by other packages."""
        return Dependency(name=self.name, version_expression=self.version)


class PackageBuilder:
    """Builds a :class:`Package` step by step; call :meth:`build` at the end."""

    def __init__(self, name: str) -> None:
        self._name = str(name)
        self._version = "0.1"
        self._authors: list[str] = []
        self._dependencies: list[Dependency] = []
        self._language: Optional[Language] = None

    def version(self, version: str) -> PackageBuilder:
        """Set the package version."""
        self._version = str(version)
        return self

    def authors(self, authors: Iterable[str]) -> PackageBuilder:
        """Set the package authors, replacing any set before."""
        self._authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> PackageBuilder:
        """Add one more dependency."""
        self._dependencies.append(dependency)
        return self

    def language(self, language: Language) -> PackageBuilder:
        """Set the language; without this it stays ``None``."""
        self._language = language
        return self

    def build(self) -> Package:
        """Return the package described so far."""
        return Package(
            name=self._name,
            version=self._version,
            authors=list(self._authors),
            dependencies=list(self._dependencies),
            language=self._language,
        )