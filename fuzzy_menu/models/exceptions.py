"""Exception hierarchy for Fuzzy Menu.

The matching core never raises for well-formed input; these errors belong
to the collaborators around it (input loading, configuration).
"""


class MenuError(Exception):
    """Base exception for all Fuzzy Menu errors.

    Carries an optional suggestion shown to the user next to the message.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class InputError(MenuError):
    """Input could not be loaded."""

    pass


class NoInputError(InputError):
    """Nothing usable was provided on the input stream."""

    pass


class TerminalInputError(NoInputError):
    """Input is an interactive terminal with nothing piped in."""

    pass


class InputReadError(InputError):
    """Input stream could not be read or decoded."""

    pass


class ConfigError(MenuError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
