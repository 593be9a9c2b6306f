class SalesDataError(ValueError):
    """Base class for errors that abort a leaderboard run."""


class InvalidInputError(SalesDataError):
    """The input bundle is missing a collection, or a record has the wrong shape."""


class InvalidOptionsError(SalesDataError):
    """The options bundle does not supply both strategy functions."""
