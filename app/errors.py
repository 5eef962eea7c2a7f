class IdentifierError(Exception):
    """Base error carrying a message that is safe to show to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IdentifierError):
    """Upload rejected because of its media type or size."""


class ReadError(IdentifierError):
    """Image bytes could not be read or decoded."""


class AnalysisError(IdentifierError):
    """The analysis service failed or returned nothing usable."""


INVALID_TYPE_MESSAGE = "Please upload a valid image file"
TOO_LARGE_MESSAGE = "Image size should be less than 20MB"
READ_FAILED_MESSAGE = "Failed to read the image file. Please try again."
DEFAULT_IMAGE_MESSAGE = "Failed to load default image"
ANALYSIS_FAILED_MESSAGE = "Failed to analyze image. Please try again."
