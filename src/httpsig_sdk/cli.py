"""
Command-line interface for the HTTP Signatures SDK
Computes a Cavage HTTP signature header for a request described on the command line
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from . import initialize_sdk, __version__
from .exceptions import HttpSigSDKError, ValidationError
from .signing import (
    Algorithm,
    SignatureAlgorithm,
    create_signing_config,
    HTTPSigner,
    is_hmac,
    list_algorithm_names,
)

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='httpsig-sign',
        description='Compute a Cavage HTTP Signatures header value for a request'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'HTTP Signatures SDK {__version__}'
    )

    parser.add_argument(
        '--check-compatibility',
        action='store_true',
        help='Check platform compatibility and exit'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--algorithm',
        choices=list_algorithm_names(),
        default=SignatureAlgorithm.HMAC_SHA256.value,
        help='Signature algorithm (default: hmac-sha256)'
    )
    parser.add_argument('--key-id', help='Key identifier sent as keyId')

    key_group = parser.add_mutually_exclusive_group()
    key_group.add_argument('--secret', help='HMAC shared secret')
    key_group.add_argument('--secret-env', metavar='NAME', help='Read the HMAC secret or PEM key from this environment variable')
    key_group.add_argument('--key-file', metavar='PATH', help='Read the HMAC secret or PEM private key from this file')

    target_group = parser.add_mutually_exclusive_group()
    target_group.add_argument('--path', help='Request path including query string')
    target_group.add_argument('--url', help='Absolute request URL; its path and query are signed')

    parser.add_argument('--method', default='GET', help='HTTP method (default: GET)')
    parser.add_argument(
        '-H', '--header',
        action='append',
        default=[],
        metavar='"NAME: VALUE"',
        help='Header to sign; repeat for more headers, order is preserved'
    )

    parser.add_argument(
        '--authorization',
        action='store_true',
        help='Print an Authorization header instead of a Signature header'
    )
    parser.add_argument(
        '--show-signing-string',
        action='store_true',
        help='Also print the signing string'
    )

    return parser


def parse_header(raw: str) -> Tuple[str, str]:
    """
    Parse a "Name: value" header argument.

    Raises:
        ValidationError: If the argument has no colon or an empty name
    """
    name, sep, value = raw.partition(':')
    if not sep or not name.strip():
        raise ValidationError(
            f"Invalid header {raw!r}, expected \"Name: value\"",
            "INVALID_HEADER_ARGUMENT",
            {"header": raw}
        )
    return name, value.strip()


def parse_headers(raw_headers: List[str]) -> List[Tuple[str, str]]:
    """Parse all header arguments, keeping order and duplicates."""
    return [parse_header(raw) for raw in raw_headers]


def load_key_material(args, algorithm_name: str) -> str:
    """
    Resolve key material from --secret, --secret-env or --key-file.

    Trailing newlines are removed from HMAC secrets read from a file or
    the environment; PEM keys are used as read.

    Raises:
        ValidationError: If no source is given or it cannot be read
    """
    if args.secret is not None:
        return args.secret

    if args.secret_env:
        value = os.environ.get(args.secret_env)
        if value is None:
            raise ValidationError(
                f"Environment variable {args.secret_env} is not set",
                "MISSING_KEY_MATERIAL",
                {"variable": args.secret_env}
            )
    elif args.key_file:
        try:
            with open(args.key_file, 'r', encoding='utf-8') as fh:
                value = fh.read()
        except OSError as e:
            raise ValidationError(
                f"Cannot read key file {args.key_file}: {e.strerror}",
                "MISSING_KEY_MATERIAL",
                {"path": args.key_file}
            ) from e
    else:
        raise ValidationError(
            "One of --secret, --secret-env or --key-file is required",
            "MISSING_KEY_MATERIAL"
        )

    if is_hmac(SignatureAlgorithm(algorithm_name)):
        value = value.rstrip('\r\n')
    return value


def handle_sign_command(args) -> int:
    """Build the signer from arguments and print the header."""
    if args.key_id is None:
        print("Error: --key-id is required", file=sys.stderr)
        return 1

    if args.path is None and args.url is None:
        print("Error: one of --path or --url is required", file=sys.stderr)
        return 1

    key = load_key_material(args, args.algorithm)
    headers = parse_headers(args.header)

    config = (create_signing_config()
              .algorithm(Algorithm.from_name(args.algorithm, key))
              .key_id(args.key_id)
              .build())
    signer = HTTPSigner(config)
    logger.debug(f"Configured {signer.algorithm.name} signer for key ID: {signer.key_id}")

    if args.url is not None:
        signature = signer.sign_url(args.url, args.method, headers)
    else:
        signature = signer.sign(args.path, args.method, headers)

    logger.debug(f"Signed {args.method.upper()} request with {len(headers)} header entries")

    if args.show_signing_string:
        print("Signing String:")
        print(signature.signing_string)
        print()

    if args.authorization:
        print(f"Authorization: {signature.authorization_header_value}")
    else:
        print(f"Signature: {signature.header_value}")

    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        if args.check_compatibility:
            result = initialize_sdk()
            if result['compatible']:
                print("✓ Platform is compatible with HTTP Signatures SDK")
                for warning in result['warnings']:
                    print(f"  Warning: {warning}")
                return 0
            else:
                print("✗ Platform is not compatible with HTTP Signatures SDK")
                for warning in result['warnings']:
                    print(f"  Error: {warning}")
                return 1

        return handle_sign_command(args)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except HttpSigSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
