from enum import Enum

class ArnType(Enum):
    """Enum to represent the kind of IAM principal named by an ARN."""
    ASSUMED_ROLE = 'assumed-role'
    ROLE = 'role'
    USER = 'user'

    @property
    def service(self) -> str:
        """The only service whose ARNs may carry this resource type."""
        if self is ArnType.ASSUMED_ROLE:
            return 'sts'
        return 'iam'

    @property
    def canonical_type(self) -> str:
        # sessions are identified by the role they assumed
        if self is ArnType.USER:
            return 'user'
        return 'role'

class IamArnError(Exception):
    """Base class for all exceptions in iamarn"""

class InvalidArnError(IamArnError, ValueError):
    """Exception raised for strings that are not a supported IAM identity ARN"""

class MalformedArnError(InvalidArnError):
    """Exception raised for ARNs with missing fields or a bad resource layout"""

class UnsupportedServiceError(InvalidArnError):
    """Exception raised for ARNs of services other than sts and iam"""

class UnsupportedTypeError(InvalidArnError):
    """Exception raised for unknown resource types or ones the service does not own"""

class BadIdentityError(IamArnError, ValueError):
    """Exception raised when a caller identity is not a supported principal"""

class CallerIdentityError(IamArnError):
    """Exception raised when the caller identity could not be fetched"""
