class VolumeShapeError(ValueError):
    """Raised when a volume or slice index does not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(message)


class FilterArgumentError(ValueError):
    """Raised when a filter receives an invalid axis, kernel, sigma or padding."""

    def __init__(self, message: str):
        super().__init__(message)
