class CollisionReportError(Exception):
    """Base exception for all collision report errors."""
    pass

class RecordParseError(CollisionReportError, ValueError):
    """Raised when a raw collision record cannot be parsed."""
    pass

class InvalidRankingArgument(CollisionReportError, ValueError):
    """Raised when a ranking query receives an invalid argument."""
    pass

class SourceError(CollisionReportError):
    """Raised when collision source operations fail."""
    pass

class ConfigurationError(CollisionReportError):
    """Raised when configuration is invalid."""
    pass
