"""
Classified outcomes of a lunch lookup.

Everything the pipeline can end with, other than a menu line, is one of the
exceptions below. Each carries the exit code the CLI reports for it so that
scripts can tell the cases apart.
"""

from typing import Optional


class FabrikError(Exception):
    """Base class for every classified failure."""

    exit_code = 1
    message = "lunch lookup failed"
    # Expected terminal states are reported on stdout like a normal answer
    expected = False

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class FabrikClosed(FabrikError):
    exit_code = 10
    message = "fabrik is closed"
    expected = True


class FabrikOnHoliday(FabrikError):
    exit_code = 11
    message = "fabrik is probably on holiday, fall back to manual check"
    expected = True


class FabrikResting(FabrikError):
    exit_code = 12
    message = "fabrik is on a day off"
    expected = True


class FetchFailed(FabrikError):
    exit_code = 3
    message = "failed to fetch the menu page"


class MenuExpired(FabrikError):
    exit_code = 4
    message = "the menu is outdated"


class RowNotFound(FabrikError):
    exit_code = 5
    message = "no menu row for today, the page layout may have changed"


class MalformedDate(ValueError):
    """A date string that is not exactly DD.MM.YYYY."""


class FabrikWarning(Exception):
    """Non-fatal findings; the pipeline logs them and carries on."""


class ValidityUnavailable(FabrikWarning):
    pass


class MenuNotYetValid(FabrikWarning):
    pass
