"""
Command line front end for purlkit.

Usage:
    purlkit parse "pkg:PYPI/Django_package@1.11.1.dev1" --canonicalize
    purlkit format --type maven --namespace org.apache.commons --name io --version 1.3.4
    purlkit canonicalize "pkg:github/Package-url/purl-Spec"
"""
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from purlkit.config import PURL_CONFIG
from purlkit.parser import parse_strict
from purlkit.purl import PackageURL

logger = logging.getLogger(__name__)


def _parse_qualifier_arguments(pairs: List[str]) -> Optional[Dict[str, str]]:
    """Turns repeated `--qualifier key=value` arguments into a mapping."""
    qualifiers: Dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise ValueError(f"Expected a qualifier as key=value, got: {pair!r}")
        qualifiers[key] = value
    return qualifiers or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="purlkit", description="Parse, build and canonicalize package URLs.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_command = subparsers.add_parser("parse", help="Print the components of a purl as JSON.")
    parse_command.add_argument("purl", help="The Package URL (purl) to parse.")
    parse_command.add_argument("--canonicalize", action="store_true", default=PURL_CONFIG["canonicalize"],
                               help="Apply type-specific normalization before printing.")

    format_command = subparsers.add_parser("format", help="Build a purl string from its components.")
    format_command.add_argument("--type", required=True, dest="package_type", help="The package type, e.g. npm.")
    format_command.add_argument("--namespace", help="The package namespace, e.g. a Maven groupid.")
    format_command.add_argument("--name", required=True, help="The package name.")
    format_command.add_argument("--version", help="The package version.")
    format_command.add_argument("--qualifier", action="append", default=[], metavar="KEY=VALUE",
                                help="A qualifier; may be given more than once.")
    format_command.add_argument("--subpath", help="A subpath within the package.")
    format_command.add_argument("--canonicalize", action="store_true", default=PURL_CONFIG["canonicalize"],
                                help="Apply type-specific normalization before printing.")

    canonicalize_command = subparsers.add_parser("canonicalize", help="Print the canonical form of a purl.")
    canonicalize_command.add_argument("purl", help="The Package URL (purl) to canonicalize.")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=PURL_CONFIG["logging_level_int"], format="%(asctime)s-%(levelname)s-%(message)s")

    try:
        if args.command == "format":
            purl = PackageURL(
                type=args.package_type,
                namespace=args.namespace,
                name=args.name,
                version=args.version,
                qualifiers=_parse_qualifier_arguments(args.qualifier),
                subpath=args.subpath,
            )
            if args.canonicalize:
                purl = purl.canonicalized()
            print(purl.to_string())
        elif args.command == "parse":
            purl = parse_strict(args.purl)
            if args.canonicalize:
                purl = purl.canonicalized()
            print(json.dumps(purl.components(), indent=PURL_CONFIG["json_indent"]))
        else:
            print(parse_strict(args.purl).canonicalized().to_string())
    except ValueError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
