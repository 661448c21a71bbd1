class TrophyCabinetException(Exception):
    """Base exception for trophy cabinet"""

    pass


class UnauthorizedException(TrophyCabinetException):
    """Raised when JWT validation fails"""

    pass


class NotFoundException(TrophyCabinetException):
    """Raised when resource not found"""

    pass


class ForbiddenException(TrophyCabinetException):
    """Raised when the caller's role does not allow the operation"""

    pass


class ValidationException(TrophyCabinetException):
    """Raised for business logic validation errors"""

    pass


class ConflictException(TrophyCabinetException):
    """Raised when a unique value (slug, membership, code) is already taken"""

    pass


class InvalidInviteCodeException(TrophyCabinetException):
    """Raised when an invite code does not exist or was deactivated"""

    pass


class InviteCodeExpiredException(TrophyCabinetException):
    """Raised when an invite code is past its expiry"""

    pass


class InviteCodeExhaustedException(TrophyCabinetException):
    """Raised when an invite code has no uses left"""

    pass
