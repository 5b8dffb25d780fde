"""Exceptions raised while resolving, rendering and writing a project."""


class CppNewError(Exception):
    """Base exception for cppnew."""
    pass


class UsageError(CppNewError):
    """The command line could not be interpreted."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class UnknownCommandError(UsageError):
    """First token is not a known command."""

    def __init__(self, token: str):
        super().__init__(f"There is no command with the name '{token}'", token)


class UnknownTemplateError(UsageError):
    """Template token does not name a known template."""

    def __init__(self, token: str):
        super().__init__(f"There is no template with the name '{token}'", token)


class ScaffoldIOError(CppNewError):
    """Creating or writing a project artifact failed."""

    def __init__(self, artifact: str, cause: Exception):
        super().__init__(f"Failed to create '{artifact}': {cause}")
        self.artifact = artifact
        self.cause = cause
