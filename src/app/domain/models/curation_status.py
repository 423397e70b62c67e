from enum import IntEnum


class CurationStatus(IntEnum):
    """Conventional status codes returned by curation tasks."""

    UNSET = -2
    ERROR = -1
    SUCCESS = 0
    FAIL = 1
    SKIP = 2
