class TinyRogueError(Exception):
    """Base error for tinyrogue domain exceptions."""


class SessionEndedError(TinyRogueError):
    """Raised when a command is submitted after the session has ended."""


class ConfigError(TinyRogueError):
    """Raised when settings or difficulty presets are invalid."""
