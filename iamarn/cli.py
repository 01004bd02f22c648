import argparse
import io
import json
import logging
import os
import sys
from collections.abc import Iterator
import chardet
import botocore.exceptions
from boto3 import session

from . import __version__
from .arn import ParsedArn, parse_arn, same_principal
from .base_objects import IamArnError, InvalidArnError
from .identity import get_caller_identity

logger = logging.getLogger(__name__)

def get_textstream(file: io.BufferedReader) -> io.TextIOWrapper:
    '''Convert a binary file to a text stream'''
    detected = chardet.detect(file.read())
    file.seek(0)
    return io.TextIOWrapper(file, encoding=detected['encoding'] or 'utf-8')

def read_arns(filename: str) -> list[str]:
    '''Read ARNs from a file, one per line'''
    with open(filename, 'rb') as rawfile:
        textfile = get_textstream(rawfile)
        return [line.strip() for line in textfile if line.strip()]

def arn_to_dict(parsed: ParsedArn) -> dict[str, str]:
    return {
        'Partition': parsed.partition,
        'AccountNumber': parsed.account_number,
        'Type': parsed.type.value,
        'Path': parsed.path,
        'FriendlyName': parsed.friendly_name,
        'SessionInfo': parsed.session_info,
        'CanonicalArn': parsed.canonical_arn(),
    }

def build_parser():
    parser = argparse.ArgumentParser(description='Parse and canonicalize IAM principal ARNs')
    parser.add_argument('--debug', help='Enable debug logging', action='store_true')
    subparsers = parser.add_subparsers(dest='subcommand', required=True)
    subparsers.add_parser('version', help='Display version information')
    parse_parser = subparsers.add_parser('parse', help='Show the fields of ARNs')
    parse_parser.add_argument('arns', nargs='*', metavar='ARN', help='ARN to parse')
    parse_parser.add_argument('--file', help='File containing ARNs, one per line')
    canonical_parser = subparsers.add_parser('canonical', help='Print the canonical form of ARNs')
    canonical_parser.add_argument('arns', nargs='*', metavar='ARN', help='ARN to canonicalize')
    canonical_parser.add_argument('--file', help='File containing ARNs, one per line')
    compare_parser = subparsers.add_parser('compare',
                                           help='Check whether two ARNs name the same principal')
    compare_parser.add_argument('first', metavar='ARN')
    compare_parser.add_argument('second', metavar='ARN')
    whoami_parser = subparsers.add_parser('whoami', help='Show the principal of the current credentials')
    whoami_parser.add_argument('--profile', help='AWS profile to use',
                               default=os.environ.get('AWS_PROFILE', None))
    return parser

def _iter_parsed(args: argparse.Namespace) -> Iterator[ParsedArn | None]:
    arns = list(args.arns)
    if args.file:
        arns.extend(read_arns(args.file))
    for arn in arns:
        try:
            yield parse_arn(arn)
        except InvalidArnError as e:
            print(f'Invalid ARN {arn}: {e}', file=sys.stderr)
            yield None

def do_parse(args: argparse.Namespace) -> int:
    rv = 0
    for parsed in _iter_parsed(args):
        if parsed is None:
            rv = 1
            continue
        print(json.dumps(arn_to_dict(parsed)))
    return rv

def do_canonical(args: argparse.Namespace) -> int:
    rv = 0
    for parsed in _iter_parsed(args):
        if parsed is None:
            rv = 1
            continue
        print(parsed.canonical_arn())
    return rv

def do_compare(args: argparse.Namespace) -> int:
    if same_principal(args.first, args.second):
        print('same')
        return 0
    print('different')
    return 1

def do_whoami(args: argparse.Namespace) -> int:
    try:
        boto_session = session.Session(profile_name=args.profile)
    except botocore.exceptions.ProfileNotFound as e:
        print(str(e), file=sys.stderr)
        return 1
    try:
        identity = get_caller_identity(boto_session)
    except IamArnError as e:
        print(str(e), file=sys.stderr)
        return 1
    value = {
        'Arn': identity.arn,
        'UserId': identity.user_id,
        'Account': identity.account,
        'CanonicalArn': identity.canonical_arn,
    }
    print(json.dumps(value))
    return 0

def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.subcommand in ('parse', 'canonical') and not args.arns and not args.file:
        parser.error('No ARNs specified')
    logger.debug('Running %s', args.subcommand)
    if args.subcommand == 'parse':
        return do_parse(args)
    if args.subcommand == 'canonical':
        return do_canonical(args)
    if args.subcommand == 'compare':
        return do_compare(args)
    if args.subcommand == 'whoami':
        return do_whoami(args)
    if args.subcommand == 'version':
        print(f'iamarn version {__version__}')
        return 0
    raise ValueError('Unknown subcommand')

if __name__ == '__main__':
    sys.exit(main())
