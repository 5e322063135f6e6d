"""Error types for the map pipeline."""


class InvalidInput(ValueError):
    """Submitted point data could not be turned into coordinates."""


class DegenerateGeometry(UserWarning):
    """A tessellation cell could not be built as a bounded polygon.

    Rendering filters such cells silently; this is only raised when a caller
    asks the tessellator to be strict about it.
    """
