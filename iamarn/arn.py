"""Parsing and canonicalization of IAM principal ARNs."""
import logging
from dataclasses import dataclass

from .base_objects import ArnType, InvalidArnError, MalformedArnError, \
    UnsupportedServiceError, UnsupportedTypeError

logger = logging.getLogger(__name__)

SUPPORTED_SERVICES = ('sts', 'iam')

@dataclass(frozen=True)
class ParsedArn:
    """Class to represent the fields of a role, user or assumed-role ARN."""
    partition: str
    account_number: str
    type: ArnType
    path: str
    friendly_name: str
    session_info: str = ''

    def canonical_arn(self) -> str:
        """Return the ARN of the underlying role or user, without path or session."""
        return f'arn:{self.partition}:iam::{self.account_number}:' \
            f'{self.type.canonical_type}/{self.friendly_name}'

    @property
    def service(self) -> str:
        return self.type.service

def _parse_resource(service: str, resource: str) -> tuple[ArnType, str, str, str]:
    components = resource.split('/')
    try:
        arn_type = ArnType(components[0])
    except ValueError:
        raise UnsupportedTypeError(
            f'Unsupported resource type {components[0]!r}') from None
    if arn_type.service != service:
        raise UnsupportedTypeError(
            f'Resource type {arn_type.value!r} is not valid for service {service!r}')
    if arn_type == ArnType.ASSUMED_ROLE:
        # role name, then session name
        if len(components) != 3:
            raise MalformedArnError(
                'Assumed role ARN must have a role name and a session name')
        if not components[1] or not components[2]:
            raise MalformedArnError('Empty role or session name')
        return arn_type, '', components[1], components[2]
    if len(components) < 2 or not components[-1]:
        raise MalformedArnError(f'Missing {arn_type.value} name')
    return arn_type, '/'.join(components[1:-1]), components[-1], ''

def parse_arn(raw: str) -> ParsedArn:
    """Parse an IAM role, IAM user or STS assumed-role ARN.

    Raises InvalidArnError (or one of its subclasses) if the string is not
    one of the supported principal ARNs.
    """
    try:
        elements = raw.split(':')
        if len(elements) != 6:
            raise MalformedArnError(
                f'Expected 6 colon separated fields, found {len(elements)}')
        literal, partition, service, _region, account, resource = elements
        if literal != 'arn':
            raise MalformedArnError('ARN does not start with "arn"')
        if not partition:
            raise MalformedArnError('Missing partition')
        if not service:
            raise MalformedArnError('Missing service')
        if service not in SUPPORTED_SERVICES:
            raise UnsupportedServiceError(f'Unsupported service {service!r}')
        if not account:
            raise MalformedArnError('Missing account number')
        if not resource:
            raise MalformedArnError('Missing resource')
        arn_type, path, name, session = _parse_resource(service, resource)
    except InvalidArnError as e:
        logger.debug('Rejected ARN %r: %s', raw, e)
        raise
    return ParsedArn(
        partition=partition,
        account_number=account,
        type=arn_type,
        path=path,
        friendly_name=name,
        session_info=session)

def canonical_arn(parsed: ParsedArn) -> str:
    return parsed.canonical_arn()

def same_principal(first: ParsedArn | str, second: ParsedArn | str) -> bool:
    """Whether two ARNs name the same role or user, ignoring path and session."""
    try:
        if isinstance(first, str):
            first = parse_arn(first)
        if isinstance(second, str):
            second = parse_arn(second)
    except InvalidArnError:
        return False
    return first.canonical_arn() == second.canonical_arn()
