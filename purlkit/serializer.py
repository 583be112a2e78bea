"""Builds the canonical string form of a PackageURL."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .encoding import is_valid_subpath_segment, percent_encode

if TYPE_CHECKING:
    from .purl import PackageURL


def _format_namespace(namespace: Optional[str]) -> Optional[str]:
    if not namespace:
        return None
    segments = [percent_encode(segment) for segment in namespace.strip("/").split("/") if segment]
    return "/".join(segments) or None


def _format_subpath(subpath: Optional[str]) -> Optional[str]:
    if not subpath:
        return None
    segments = [
        percent_encode(segment)
        for segment in subpath.strip("/").split("/")
        if is_valid_subpath_segment(segment)
    ]
    return "/".join(segments) or None


def format_purl(purl: PackageURL) -> str:
    """Encodes a PackageURL into its canonical string form.

    Never fails: components are encoded as they are, without validation.
    Qualifiers with an empty value are dropped and the remaining ones are
    sorted by key; empty, "." and ".." subpath segments are dropped.

    Args:
        purl: The PackageURL to encode.

    Returns:
        The canonical purl string, e.g. "pkg:rpm/fedora/curl@7.50.3-1.fc25?arch=i386&distro=fedora-25".
    """
    parts: List[str] = [f"{purl.scheme}:", percent_encode(purl.type), "/"]

    namespace = _format_namespace(purl.namespace)
    if namespace:
        parts.append(f"{namespace}/")
        parts.append(percent_encode(purl.name.strip("/")))
    else:
        parts.append(percent_encode(purl.name))

    if purl.version:
        parts.append(f"@{percent_encode(purl.version)}")

    if purl.qualifiers:
        pairs = sorted(
            (key.lower(), percent_encode(value))
            for key, value in purl.qualifiers.items()
            if value
        )
        if pairs:
            parts.append("?" + "&".join(f"{key}={value}" for key, value in pairs))

    subpath = _format_subpath(purl.subpath)
    if subpath:
        parts.append(f"#{subpath}")

    return "".join(parts)
