# RSM Errors
# Exception hierarchy for configuration and schema list failures


class RsmError(Exception):
    """Base class for every error the CLI reports and exits on."""


class ConfigReadError(RsmError, OSError):
    """A file or directory could not be read."""


class ConfigNotFoundError(ConfigReadError):
    """The configuration file does not exist."""


class SchemaDirError(ConfigReadError):
    """The schema data directory could not be listed."""


class ConfigWriteError(RsmError, OSError):
    """The configuration file could not be written."""


class ConfigParseError(RsmError, ValueError):
    """The configuration file is not a well-formed YAML mapping."""


class MissingFieldError(RsmError, KeyError):
    """The schema list field is absent or is not a list."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidEntryError(RsmError, ValueError):
    """A schema list element is not a mapping."""
