class ConfigurationError(RuntimeError):
    """The world graph or engine settings are inconsistent; never retried."""
