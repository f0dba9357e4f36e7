class GitOpenError(RuntimeError):
    """Base class for every failure that should reach the user as `Error: ...`."""


class GitStateError(GitOpenError):
    """A git command failed or the repository is not in a usable state."""


class ParseError(GitOpenError):
    pass


class UnrecognizedFormatError(ParseError):
    pass


class MissingSeparatorError(ParseError):
    pass


class InvalidLineNumberError(ParseError):
    pass


class EmptyPathError(ParseError):
    pass


class PrUrlNotFoundError(GitOpenError):
    """The push went through but the server printed no pull request link."""


class BrowserLaunchError(GitOpenError):
    pass


class PathOutsideRepoError(ParseError):
    """The file path is absolute or climbs above the work tree root."""
