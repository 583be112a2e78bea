"""PURL model and helpers."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from .canonical import canonicalize
from .serializer import format_purl


class PackageURL(BaseModel):
    """Represents a Package URL (purl).

    A purl is a URI that represents a software package in a mostly
    unambiguous way:

        scheme:type/namespace/name@version?qualifiers#subpath

    See: https://github.com/package-url/purl-spec

    Instances are immutable. Building one from components performs no
    validation; only parsing from text does. Two purls are equal when their
    canonical string forms are equal, and they sort by that string.

    When used with pydantic serialization a purl is encoded as its canonical
    string, and a string is accepted (and parsed) wherever a purl is expected.

    Attributes:
        scheme: Always "pkg".
        type: The package "type" or package management system.
        namespace: Some name prefix such as a Maven groupid, a Docker image owner, etc.
        name: The name of the package.
        version: The version of the package.
        qualifiers: Extra qualifying data for a package such as an OS, architecture, etc.
        subpath: Extra subpath within a package, relative to the package root.
    """

    model_config = ConfigDict(frozen=True)

    scheme: ClassVar[str] = "pkg"

    type: str
    namespace: Optional[str] = None
    name: str
    version: Optional[str] = None
    qualifiers: Optional[Dict[str, str]] = None
    subpath: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def parse_string_input(cls, data: Any) -> Any:
        """Accepts a purl string in place of a mapping of components."""
        if isinstance(data, str):
            from .parser import parse_strict  # parser imports this module

            return parse_strict(data).components()
        return data

    @model_serializer(mode="plain")
    def serialize_as_string(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> PackageURL:
        """Parses a purl string.

        Args:
            text: The string to parse, e.g. "pkg:npm/%40angular/animation@12.3.1".

        Returns:
            The parsed PackageURL.

        Raises:
            InvalidPackageURLError: If `text` is not a well-formed purl.
        """
        from .parser import parse_strict

        return parse_strict(text)

    def to_string(self) -> str:
        """Returns the canonical string form of this purl."""
        return format_purl(self)

    def canonicalized(self) -> PackageURL:
        """Returns a copy with type-specific name and namespace normalization applied."""
        return canonicalize(self)

    def components(self) -> Dict[str, Any]:
        """Returns the six components as a plain dictionary."""
        return {
            "type": self.type,
            "namespace": self.namespace,
            "name": self.name,
            "version": self.version,
            "qualifiers": dict(self.qualifiers) if self.qualifiers is not None else None,
            "subpath": self.subpath,
        }

    def __str__(self) -> str:
        return self.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageURL):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageURL):
            return NotImplemented
        return self.to_string() < other.to_string()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PackageURL):
            return NotImplemented
        return self.to_string() <= other.to_string()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PackageURL):
            return NotImplemented
        return self.to_string() > other.to_string()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PackageURL):
            return NotImplemented
        return self.to_string() >= other.to_string()
