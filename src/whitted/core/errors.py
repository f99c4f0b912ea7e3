"""Exception types for invalid scene, geometry and camera configuration."""


class ConfigurationError(ValueError):
    """Raised when an entity cannot be constructed from the given values.

    Construction either succeeds with a fully valid object or fails with
    this error; there is no partially built or degraded result.
    """


class ZeroVectorError(ConfigurationError):
    """Raised when a direction vector would have zero length."""
