"""Exceptions raised by Notefind. All are fatal at startup."""


class NotefindError(Exception):
    """Base class for errors that abort the session."""


class NoteLoadError(NotefindError):
    """A note file could not be opened or read during the initial scan."""


class TerminalError(NotefindError):
    """The terminal could not be put into raw mode."""


class EditorNotConfigured(NotefindError):
    """$EDITOR is not set."""


class EditorLaunchError(NotefindError):
    """The editor command could not be executed."""


class LogSetupError(NotefindError):
    """The log file or its directory could not be created."""
