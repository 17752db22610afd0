"""
Errors raised while loading, switching and writing AWS profiles.
"""

__all__ = [
    'ProfileSwitcherError',
    'DirectoryNotFoundError',
    'CredentialsFileMissingError',
    'EmptyFileError',
    'MalformedFileError',
    'ProfileNotFoundError',
    'ProfileIndexError',
    'WriteFailureError',
]


class ProfileSwitcherError(Exception):
    """Base class for every error raised by awsswitch."""


class DirectoryNotFoundError(ProfileSwitcherError):
    """The AWS directory does not exist."""
    def __init__(self, directory):
        super().__init__(f"Given directory does not exist: [{directory}]")
        self.directory = directory


class CredentialsFileMissingError(ProfileSwitcherError):
    """The AWS directory has no credentials file."""
    def __init__(self, directory):
        super().__init__(f"No credentials file found in {directory}")
        self.directory = directory


class EmptyFileError(ProfileSwitcherError):
    """The credentials file exists but is zero-length."""
    def __init__(self, directory):
        super().__init__(f"Empty credentials file found in {directory}")
        self.directory = directory


class MalformedFileError(ProfileSwitcherError):
    """The file content does not have the expected profile structure."""


class ProfileNotFoundError(ProfileSwitcherError):
    """No profile matches the requested name."""


class ProfileIndexError(ProfileNotFoundError):
    """A profile index is not a valid position in the profile listing."""


class WriteFailureError(ProfileSwitcherError):
    """Writing the credentials or config file failed."""
    def __init__(self, path, reason):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
