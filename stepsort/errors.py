"""Exception hierarchy shared by the scaler, the catalog and the engine."""

EMPTY_INPUT_MSG   = "Please enter at least one number"
TOO_MANY_MSG      = "Maximum {limit} numbers allowed"
INVALID_TOKEN_MSG = "Please enter valid numbers separated by commas"


class StepSortError(Exception):
    """Base class for every error raised by stepsort."""


class InvalidInputError(StepSortError, ValueError):
    """User input could not be turned into a sequence.

    ``str(err)`` is the message meant for the person who typed the input.
    """


class UnknownAlgorithmError(StepSortError, KeyError):
    """No algorithm is registered under the requested id."""

    def __init__(self, algorithm_id):
        super().__init__(algorithm_id)
        self.algorithm_id = algorithm_id

    def __str__(self):
        return f"Unknown algorithm: {self.algorithm_id!r}"


class BusyError(StepSortError, RuntimeError):
    """A sort run is already active on this session."""


class SortCancelled(StepSortError):
    """Raised out of a pacing point once the run's cancel token fired."""
