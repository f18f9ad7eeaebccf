class GraphConfigurationError(ValueError):
    """Invalid construction parameters passed by the caller (e.g. to generate)."""
    pass
