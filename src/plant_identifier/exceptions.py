class PlantIdentifierError(Exception):
    """Base exception for plant identifier."""


class ConfigurationError(PlantIdentifierError):
    """Raised when required configuration is missing or invalid."""


class AppNotInitializedError(PlantIdentifierError):
    """Raised when the app facade is used before initialization."""


class ValidationError(PlantIdentifierError):
    """Raised when analyze is requested without a selected image."""


class EncodeError(PlantIdentifierError):
    """Raised when an image file cannot be read for encoding."""


class InferenceError(PlantIdentifierError):
    """Raised when the inference call fails or its reply is not a valid PlantInfo."""
