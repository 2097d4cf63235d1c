"""Exception types raised by mdlive."""


class MdliveError(Exception):
    """Base class for mdlive errors."""


class WatcherStartupError(MdliveError):
    """The filesystem subscription for the watch target could not be set up.

    Without it no reload notifications can ever be delivered, so callers
    treat this as fatal at startup.
    """
