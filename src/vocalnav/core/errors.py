"""Exception types raised by vocalnav."""


class VocalnavError(Exception):
    """Base class for vocalnav errors."""


class ClassifierUnavailable(VocalnavError):
    """The remote classifier could not produce a usable result.

    Covers network errors, timeouts, non-2xx responses, and bodies that
    are not a single JSON object with an ``intent`` string.
    """


class ConfigError(VocalnavError):
    """A configuration file exists but cannot be used."""
