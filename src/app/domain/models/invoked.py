from enum import Enum


class Invoked(str, Enum):
    """How a curator was started; suspend policies are scoped by it."""

    INTERACTIVE = "INTERACTIVE"
    BATCH = "BATCH"
    ANY = "ANY"
