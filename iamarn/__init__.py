from .arn import ParsedArn, parse_arn, canonical_arn, same_principal
from .base_objects import ArnType, IamArnError, InvalidArnError, MalformedArnError, \
    UnsupportedServiceError, UnsupportedTypeError, BadIdentityError, CallerIdentityError
from .identity import CallerIdentity, get_caller_identity
from ._version import __version__

__all__ = ['ParsedArn', 'parse_arn', 'canonical_arn', 'same_principal',
           'ArnType', 'IamArnError', 'InvalidArnError', 'MalformedArnError',
           'UnsupportedServiceError', 'UnsupportedTypeError', 'BadIdentityError',
           'CallerIdentityError', 'CallerIdentity', 'get_caller_identity', '__version__']
