"""
Error hierarchy for the guide.
All exceptions inherit from SolidGuideError; the ones raised by examples
also inherit the builtin a caller would naturally catch.
"""


class SolidGuideError(Exception):
    """Base class for all guide errors"""
    pass


class UnsupportedOperationError(SolidGuideError, NotImplementedError):
    """A subtype refuses an operation its base type promises"""
    pass


class AuthenticationRequiredError(SolidGuideError, PermissionError):
    """Access attempted without authentication"""
    pass


class CollectionFullError(SolidGuideError, RuntimeError):
    """A bounded collection cannot accept more elements"""
    pass


class EngineNotRunningError(SolidGuideError, RuntimeError):
    """A motorized vehicle was asked to move with its engine off"""
    pass


class BatteryDepletedError(SolidGuideError, RuntimeError):
    """An electric vehicle cannot start on an empty battery"""
    pass


class InvalidUserError(SolidGuideError, ValueError):
    """User data failed validation"""
    pass


class UnknownPaymentTypeError(SolidGuideError, ValueError):
    """Payment type is not handled by the processor"""
    pass


class RepositoryError(SolidGuideError):
    """Persisting an entity failed"""
    pass


class CatalogError(SolidGuideError):
    """Topic catalog is malformed"""
    pass


class ServiceNotRegisteredError(SolidGuideError, ValueError):
    """Requested service type is unknown to the container"""
    pass
