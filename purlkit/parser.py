"""Parses purl strings into PackageURL objects.

Components are split off in a fixed order: subpath and qualifiers from the
right, then scheme and type from the left, then version and name from the
right. Whatever is left between type and name is the namespace.

See: https://github.com/package-url/purl-spec/blob/master/PURL-SPECIFICATION.rst#how-to-parse-a-purl-string-in-its-components
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .encoding import (
    is_valid_qualifier_key,
    is_valid_subpath_segment,
    percent_decode,
)
from .errors import InvalidPackageURLError
from .purl import PackageURL

logger = logging.getLogger(__name__)


def _parse_subpath(raw_subpath: str) -> Optional[str]:
    segments = [
        percent_decode(segment)
        for segment in raw_subpath.strip("/").split("/")
        if is_valid_subpath_segment(segment)
    ]
    return "/".join(segment for segment in segments if segment is not None) or None


def _parse_qualifiers(text: str, raw_qualifiers: str) -> Optional[Dict[str, str]]:
    qualifiers: Dict[str, str] = {}
    for pair in raw_qualifiers.split("&"):
        raw_key, separator, raw_value = pair.partition("=")
        if not separator:
            continue
        key = percent_decode(raw_key)
        value = percent_decode(raw_value)
        if key is None or value is None:
            logger.debug(f"Dropping qualifier {pair!r} of {text!r}: invalid percent-encoding")
            continue
        key = key.lower()
        if not key or not value:
            continue
        if not is_valid_qualifier_key(key):
            raise InvalidPackageURLError(text, f"invalid qualifier key {key!r}")
        qualifiers[key] = value
    return qualifiers or None


def _parse_name(text: str, raw_name: str) -> str:
    name = percent_decode(raw_name)
    if not name:
        raise InvalidPackageURLError(text, "a name is required")
    return name


def _parse_namespace(raw_namespace: str) -> Optional[str]:
    segments = [percent_decode(segment) for segment in raw_namespace.split("/") if segment]
    return "/".join(segment for segment in segments if segment is not None) or None


def _split_scheme(text: str, remainder: str) -> str:
    scheme, separator, remainder = remainder.partition(":")
    if not separator:
        raise InvalidPackageURLError(text, "a scheme is required")
    if scheme.lower() != PackageURL.scheme:
        raise InvalidPackageURLError(text, f"unsupported scheme {scheme!r}")
    # 'pkg://' is accepted and the '//' ignored.
    if remainder.startswith("//"):
        remainder = remainder[2:]
    return remainder


def _split_type(text: str, remainder: str) -> Tuple[str, str]:
    package_type, separator, remainder = remainder.lstrip("/").partition("/")
    if not separator:
        raise InvalidPackageURLError(text, "a type is required")
    return package_type.lower(), remainder


def parse_strict(text: str) -> PackageURL:
    """Parses a purl string, raising on malformed input.

    Args:
        text: The string to parse.

    Returns:
        The parsed PackageURL. Names and namespaces are returned as found;
        use `canonicalize` for type-specific normalization.

    Raises:
        InvalidPackageURLError: If the scheme is missing or not "pkg", the
            type or name is missing, or a qualifier key holds whitespace or
            non-ASCII characters.
    """
    remainder = text

    subpath = None
    if "#" in remainder:
        remainder, raw_subpath = remainder.rsplit("#", 1)
        subpath = _parse_subpath(raw_subpath)

    qualifiers = None
    if "?" in remainder:
        remainder, raw_qualifiers = remainder.rsplit("?", 1)
        qualifiers = _parse_qualifiers(text, raw_qualifiers)

    remainder = _split_scheme(text, remainder)
    package_type, remainder = _split_type(text, remainder)

    version = None
    if "@" in remainder:
        remainder, raw_version = remainder.rsplit("@", 1)
        version = percent_decode(raw_version)

    namespace = None
    if "/" in remainder:
        raw_namespace, raw_name = remainder.rsplit("/", 1)
        name = _parse_name(text, raw_name)
        namespace = _parse_namespace(raw_namespace)
    else:
        name = _parse_name(text, remainder)

    return PackageURL(
        type=package_type,
        namespace=namespace,
        name=name,
        version=version,
        qualifiers=qualifiers,
        subpath=subpath,
    )


def parse(text: str) -> Optional[PackageURL]:
    """Parses a purl string.

    Args:
        text: The string to parse, e.g. "pkg:maven/org.apache.commons/io@1.3.4".

    Returns:
        The parsed PackageURL, or None if `text` is not a well-formed purl.
    """
    try:
        return parse_strict(text)
    except InvalidPackageURLError as e:
        logger.debug(f"Rejected package url: {e}")
        return None
