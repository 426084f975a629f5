from __future__ import annotations


class EquityError(Exception):
    """Base class for everything raised by holdem_equity."""


class BadInputError(EquityError, ValueError):
    """Caller supplied cards, sizes or counts the engine can't work with."""


class RangeTokenError(BadInputError):
    """Malformed hand distribution token such as 'AAs' or 'X2o'."""


class TableNotLoadedError(EquityError, RuntimeError):
    """The hand ranking table hasn't been initialised (or can't be found)."""


class MalformedTableError(EquityError):
    """The hand ranking table has the wrong size or shape."""
