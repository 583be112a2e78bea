"""Tests for building purl strings."""
import pytest

from purlkit.purl import PackageURL
from purlkit.serializer import format_purl


def test_format_minimal() -> None:
    assert format_purl(PackageURL(type="gem", name="rails")) == "pkg:gem/rails"


def test_format_encodes_delimiters() -> None:
    """Test that '#', '?', '@' and '%' are always escaped."""
    purl = PackageURL(type="generic", namespace="@scope", name="a#b?c", version="1@2%3")
    assert format_purl(purl) == "pkg:generic/%40scope/a%23b%3Fc@1%402%253"


def test_format_keeps_punctuation() -> None:
    purl = PackageURL(type="docker", name="dockerimage", version="sha256:244fd47e07d1004f0aed9c")
    assert format_purl(purl) == "pkg:docker/dockerimage@sha256:244fd47e07d1004f0aed9c"


def test_format_encodes_spaces_and_symbols() -> None:
    purl = PackageURL(type="maven", namespace="mygroup", name="myartifact", version="1.0.0 Final", qualifiers={"mykey": "my value", "expr": "a=b+c"})
    assert format_purl(purl) == "pkg:maven/mygroup/myartifact@1.0.0%20Final?expr=a%3Db%2Bc&mykey=my%20value"


def test_format_encodes_non_ascii_as_utf8() -> None:
    purl = PackageURL(type="generic", name="café")
    assert format_purl(purl) == "pkg:generic/caf%C3%A9"


def test_format_namespace_segments() -> None:
    purl = PackageURL(type="golang", namespace="/github.com//gorilla/", name="/context/")
    assert format_purl(purl) == "pkg:golang/github.com/gorilla/context"


def test_format_name_without_namespace_is_not_trimmed() -> None:
    purl = PackageURL(type="docker", name="library/nginx")
    assert format_purl(purl) == "pkg:docker/library/nginx"


@pytest.mark.parametrize("namespace", [None, "", "/", "//"])
def test_format_empty_namespace_is_omitted(namespace) -> None:
    purl = PackageURL(type="npm", namespace=namespace, name="foobar")
    assert format_purl(purl) == "pkg:npm/foobar"


@pytest.mark.parametrize("version", [None, ""])
def test_format_empty_version_is_omitted(version) -> None:
    purl = PackageURL(type="npm", name="foobar", version=version)
    assert format_purl(purl) == "pkg:npm/foobar"


def test_format_sorts_qualifiers() -> None:
    purl = PackageURL(type="rpm", namespace="fedora", name="curl", version="7.50.3-1.fc25", qualifiers={"distro": "fedora-25", "arch": "i386"})
    assert format_purl(purl) == "pkg:rpm/fedora/curl@7.50.3-1.fc25?arch=i386&distro=fedora-25"


def test_format_lowercases_qualifier_keys() -> None:
    purl = PackageURL(type="gem", name="jruby-launcher", qualifiers={"Platform": "java"})
    assert format_purl(purl) == "pkg:gem/jruby-launcher?platform=java"


@pytest.mark.parametrize("qualifiers", [None, {}, {"arch": ""}])
def test_format_omits_empty_qualifiers(qualifiers) -> None:
    purl = PackageURL(type="deb", namespace="debian", name="curl", qualifiers=qualifiers)
    assert format_purl(purl) == "pkg:deb/debian/curl"


def test_format_subpath_discards_dot_segments() -> None:
    purl = PackageURL(type="golang", namespace="google.golang.org", name="genproto", subpath="/googleapis/./api/../annotations/")
    assert format_purl(purl) == "pkg:golang/google.golang.org/genproto#googleapis/api/annotations"


@pytest.mark.parametrize("subpath", [None, "", "/", "./..", "//"])
def test_format_omits_empty_subpath(subpath) -> None:
    purl = PackageURL(type="golang", namespace="g", name="p", subpath=subpath)
    assert format_purl(purl) == "pkg:golang/g/p"


def test_format_encodes_type() -> None:
    purl = PackageURL(type="my type", name="x")
    assert format_purl(purl) == "pkg:my%20type/x"
