class StudyAreasError(Exception):
    """Base class for study-area errors."""


class MissingDependencyError(StudyAreasError, ImportError):
    """One or more required packages cannot be imported."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Missing packages: {', '.join(self.missing)}\n"
            f"Install them first, e.g. pip install {' '.join(self.missing)}"
        )


class InvalidInputError(StudyAreasError, ValueError):
    """A coordinate table or region name has the wrong shape."""


class ExternalDataError(StudyAreasError, RuntimeError):
    """The basemap data for the requested scale could not be supplied."""
