"""Catalog models for declarative application lists.

A catalog is a TOML file mapping application names to how they are
installed, e.g.::

    [apps.lazygit]
    method = "github-binary"
    source = "https://example.com/lazygit"
    group = "development"

    [apps.vim]
    method = "apt"
    source = "vim"
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wsctl.core.errors import UnsupportedMethodError, WsctlError
from wsctl.models.package import LATEST, InstallMethod, Package


class CatalogError(WsctlError):
    """A catalog file could not be loaded."""


class CatalogEntry(BaseModel):
    """How a single application is installed.

    Attributes:
        method: Installation method name (e.g. "apt", "github-bundle").
        source: Method-specific locator. Defaults to the application name.
        version: Requested version, "latest" by default.
        group: Catalog group, informational.
        description: Human-readable description.
    """

    model_config = ConfigDict(extra="forbid")

    method: Annotated[str, Field(description="Installation method")]
    source: Annotated[str | None, Field(description="Method-specific locator")] = None
    version: Annotated[str, Field(description="Requested version")] = LATEST
    group: Annotated[str, Field(description="Catalog group")] = ""
    description: Annotated[str, Field(description="Application description")] = ""

    @field_validator("method")
    @classmethod
    def validate_method(cls, value: str) -> str:
        """Reject method names that are not InstallMethod values."""
        try:
            InstallMethod.parse(value)
        except UnsupportedMethodError as e:
            raise ValueError(str(e)) from e
        return value.strip().lower()

    def to_package(self, name: str) -> Package:
        """Build the Package for this entry."""
        return Package(
            name=name,
            source=self.source or name,
            method=InstallMethod.parse(self.method),
            version=self.version,
            group=self.group,
            description=self.description,
        )


class Catalog(BaseModel):
    """A set of applications keyed by name."""

    model_config = ConfigDict(extra="forbid")

    apps: Annotated[
        dict[str, CatalogEntry],
        Field(default_factory=dict, description="Applications by name"),
    ]

    def to_packages(self, group: str | None = None) -> list[Package]:
        """Return packages in file order, optionally filtered by group."""
        return [
            entry.to_package(name)
            for name, entry in self.apps.items()
            if group is None or entry.group == group
        ]


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a TOML file.

    Raises:
        CatalogError: If the file is missing, not valid TOML or fails validation.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Catalog not found: {path}"
        raise CatalogError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in catalog {path}: {e}"
        raise CatalogError(msg) from e

    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid catalog {path}: {e}"
        raise CatalogError(msg) from e
