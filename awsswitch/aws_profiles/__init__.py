"""
AWS profile switching: parse the credentials and config files, make one
profile the default, and write the files back.
"""

from .errors import (
    ProfileSwitcherError,
    DirectoryNotFoundError,
    CredentialsFileMissingError,
    EmptyFileError,
    MalformedFileError,
    ProfileNotFoundError,
    ProfileIndexError,
    WriteFailureError,
)
from .profile import Profile, DEFAULT_PROFILE
from .switcher import (
    ProfileSwitcher,
    list_profiles,
    get_current_profile,
    switch_profile,
)
