class BuildError(Exception):
    """Base class for failures raised while a task action runs."""

    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class PreconditionError(BuildError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


def require(condition: bool, message: str = "") -> None:
    if not condition:
        raise PreconditionError(message or "Precondition failed")
