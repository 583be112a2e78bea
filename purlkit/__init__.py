"""purlkit: parse, build and canonicalize package URLs."""

from .canonical import NORMALIZATION_RULES, NormalizationRule, canonicalize
from .encoding import percent_decode, percent_encode
from .errors import InvalidPackageURLError, PurlError
from .parser import parse, parse_strict
from .purl import PackageURL
from .serializer import format_purl

__all__ = [
    "canonicalize",
    "format_purl",
    "InvalidPackageURLError",
    "NORMALIZATION_RULES",
    "NormalizationRule",
    "PackageURL",
    "parse",
    "parse_strict",
    "percent_decode",
    "percent_encode",
    "PurlError",
]
