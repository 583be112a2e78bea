"""Type-specific normalization of purl names and namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .purl import PackageURL


class NormalizationRule(BaseModel):
    """How one package type normalizes its name and namespace.

    Attributes:
        lowercase_name: Names of this type are case-insensitive.
        lowercase_namespace: Namespaces of this type are case-insensitive.
        underscores_to_dashes: `_` and `-` are interchangeable in names.
    """

    model_config = ConfigDict(frozen=True)

    lowercase_name: bool = False
    lowercase_namespace: bool = False
    underscores_to_dashes: bool = False


NORMALIZATION_RULES: Dict[str, NormalizationRule] = {
    "bitbucket": NormalizationRule(lowercase_name=True, lowercase_namespace=True),
    "deb": NormalizationRule(lowercase_name=True, lowercase_namespace=True),
    "github": NormalizationRule(lowercase_name=True, lowercase_namespace=True),
    "golang": NormalizationRule(lowercase_name=True),
    "hex": NormalizationRule(lowercase_name=True, lowercase_namespace=True),
    "npm": NormalizationRule(lowercase_name=True),
    "pypi": NormalizationRule(lowercase_name=True, underscores_to_dashes=True),
    "rpm": NormalizationRule(lowercase_namespace=True),
}


def normalize_name(rule: NormalizationRule, name: str) -> str:
    if rule.lowercase_name:
        name = name.lower()
    if rule.underscores_to_dashes:
        name = name.replace("_", "-")
    return name


def normalize_namespace(rule: NormalizationRule, namespace: Optional[str]) -> Optional[str]:
    if namespace is not None and rule.lowercase_namespace:
        return namespace.lower()
    return namespace


def canonicalize(purl: PackageURL) -> PackageURL:
    """Applies the normalization rules of the purl's type.

    For example, PyPI names are case-insensitive and treat `_` like `-`, so
    "Django_package" becomes "django-package". Types without a rule are
    returned unchanged. Applying this twice gives the same result as once.

    Args:
        purl: The PackageURL to normalize.

    Returns:
        A new PackageURL; the input is not modified.
    """
    rule = NORMALIZATION_RULES.get(purl.type)
    if rule is None:
        return purl
    return purl.model_copy(
        update={
            "name": normalize_name(rule, purl.name),
            "namespace": normalize_namespace(rule, purl.namespace),
        }
    )
