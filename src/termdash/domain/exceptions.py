class InvalidConfig(ValueError):
    """Raised when a GameConfig holds values the frame update cannot run with."""
