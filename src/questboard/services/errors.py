"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when persisted progress cannot be decoded."""
