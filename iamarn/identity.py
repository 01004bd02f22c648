"""The identity behind a set of AWS credentials, as reported by STS."""
from typing import TYPE_CHECKING
from dataclasses import dataclass, field
import logging
import botocore.exceptions
from boto3 import session

from .arn import ParsedArn, parse_arn, same_principal
from .base_objects import ArnType, InvalidArnError, BadIdentityError, \
    CallerIdentityError

if TYPE_CHECKING:
    from mypy_boto3_sts.type_defs import GetCallerIdentityResponseTypeDef

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CallerIdentity:
    arn: str
    user_id: str
    account: str
    parsed: ParsedArn = field(init=False, repr=False)

    def __post_init__(self):
        try:
            parsed = parse_arn(self.arn)
        except InvalidArnError as e:
            raise BadIdentityError(f'Unsupported caller identity {self.arn}') from e
        if parsed.account_number != self.account:
            raise BadIdentityError('Inconsistent account in caller identity')
        object.__setattr__(self, 'parsed', parsed)

    @classmethod
    def from_caller_identity(cls, identity: 'GetCallerIdentityResponseTypeDef'):
        return cls(arn=identity['Arn'], user_id=identity['UserId'],
                   account=identity['Account'])

    @property
    def canonical_arn(self) -> str:
        return self.parsed.canonical_arn()

    @property
    def cred_type(self) -> ArnType:
        return self.parsed.type

    @property
    def name(self) -> str:
        return self.parsed.friendly_name

    @property
    def session_name(self) -> str | None:
        if self.cred_type != ArnType.ASSUMED_ROLE:
            return None
        # role sessions report UserId as <role id>:<session name>
        _, sep, suffix = self.user_id.partition(':')
        if sep:
            return suffix
        return self.parsed.session_info

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CallerIdentity):
            return self.parsed.canonical_arn() == other.parsed.canonical_arn()
        if isinstance(other, (str, ParsedArn)):
            return same_principal(self.parsed, other)
        return False

    def __hash__(self) -> int:
        return hash(self.parsed.canonical_arn())


def get_caller_identity(boto_session: session.Session | None = None,
                        **client_kwargs) -> CallerIdentity:
    """Ask STS who the current credentials belong to."""
    if boto_session is None:
        boto_session = session.Session()
    client = boto_session.client('sts', **client_kwargs)
    try:
        response = client.get_caller_identity()
    except (botocore.exceptions.ClientError,
            botocore.exceptions.NoCredentialsError) as e:
        raise CallerIdentityError('Unable to determine caller identity') from e
    logger.debug('STS reports caller %s', response['Arn'])
    return CallerIdentity.from_caller_identity(response)
