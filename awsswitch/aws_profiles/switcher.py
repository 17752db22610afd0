"""
AWS Profile Switcher

This module loads the profiles from the AWS credentials file (and, when it is
usable, the config file) and switches the default profile by overwriting the
[default] section with the fields of another profile.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..utils.paths import resolve_aws_paths
from .errors import (
    CredentialsFileMissingError,
    DirectoryNotFoundError,
    EmptyFileError,
    MalformedFileError,
    ProfileIndexError,
    ProfileNotFoundError,
)
from .parser import (
    STATUS_BAD,
    STATUS_EMPTY,
    STATUS_GOOD,
    check_config_text,
    check_credentials_text,
    parse_config,
    parse_credentials,
)
from .profile import DEFAULT_PROFILE, Profile
from .serializer import write_profiles

__all__ = [
    'ProfileSwitcher',
    'list_profiles',
    'get_current_profile',
    'switch_profile',
]

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    # newline="" keeps carriage returns for the parser to drop
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


class ProfileSwitcher:
    """
    Holds the profiles of one AWS directory for the lifetime of a command.
    """

    def __init__(self, aws_dir: Optional[Union[str, Path]] = None, process_config: bool = True):
        """
        Load and validate the profiles.

        Args:
            aws_dir: Directory holding `credentials` and `config`. Resolved from
                the environment when not given.
            process_config: Whether to read and rewrite the config file as well

        Raises:
            DirectoryNotFoundError: The directory does not exist
            CredentialsFileMissingError: The directory has no credentials file
            EmptyFileError: The credentials file is empty
            MalformedFileError: The credentials file is not in the expected format
            WriteFailureError: A missing [default] profile could not be written back
        """
        self.paths = resolve_aws_paths(aws_dir)
        self.aws_dir = self.paths.directory

        if not self.aws_dir.is_dir():
            raise DirectoryNotFoundError(self.aws_dir)
        if not self.paths.credentials.is_file():
            raise CredentialsFileMissingError(self.aws_dir)

        credentials_text = _read_text(self.paths.credentials)
        status = check_credentials_text(credentials_text)
        if status == STATUS_EMPTY:
            raise EmptyFileError(self.aws_dir)
        if status == STATUS_BAD:
            raise MalformedFileError(f"Incorrectly formatted credentials file found in {self.aws_dir}")

        config_text = self._load_config() if process_config else None
        self.process_config = config_text is not None

        profiles = parse_credentials(credentials_text)
        if self.process_config:
            parse_config(config_text, profiles)
        self._profiles: List[Profile] = profiles

        if self._resolve_default(profiles):
            logger.info("No [default] profile in %s, created one from [%s]",
                        self.paths.credentials, profiles[1].name)
            self._write_back()

    def _load_config(self) -> Optional[str]:
        """
        Read the config file if it is present and usable.

        Returns:
            The config file content, or None when it should be left alone
        """
        config_path = self.paths.config
        if not config_path.is_file():
            logger.debug("No config file at %s", config_path)
            return None

        config_text = _read_text(config_path)
        status = check_config_text(config_text)
        if status != STATUS_GOOD:
            logger.warning("Ignoring %s config file %s", status, config_path)
            return None
        return config_text

    @staticmethod
    def _resolve_default(profiles: List[Profile]) -> bool:
        """
        Make sure a [default] profile with credentials exists, copying the first
        profile when it does not.

        A [default] section found only in the config file keeps its settings
        on top of the copied ones.

        Returns:
            True if a default profile was created
        """
        existing = next((profile for profile in profiles if profile.is_default), None)
        if existing is not None and existing.has_credentials:
            return False

        # The credentials file always comes first, so this is its first section
        default = profiles[0].copy(name=DEFAULT_PROFILE)
        if existing is not None:
            default.merge_from(existing)
            profiles.remove(existing)
        profiles.insert(0, default)
        return True

    def _write_back(self) -> None:
        config_path = self.paths.config if self.process_config else None
        write_profiles(self._profiles, self.paths.credentials, config_path)

    def _default_profile(self) -> Profile:
        return next(profile for profile in self._profiles if profile.is_default)

    @property
    def profiles(self) -> List[Profile]:
        """All profiles in file order, including the default."""
        return list(self._profiles)

    def list_profiles(self) -> List[Profile]:
        """
        List the profiles a user can switch to.

        The [default] profile holds the active credentials and is never listed.

        Returns:
            List of Profile objects in file order
        """
        return [
            profile for profile in self._profiles
            if not profile.is_default and profile.has_credentials
        ]

    def get_profile(self, name: str) -> Profile:
        """
        Get a profile by its exact name.

        Raises:
            ProfileNotFoundError: No profile has that name
        """
        for profile in self._profiles:
            if profile.is_profile and profile.name == name:
                return profile
        raise ProfileNotFoundError(f"Profile '{name}' not found")

    def get_profile_by_index(self, index: Union[int, str]) -> Profile:
        """
        Get a profile by its 1-based position in list_profiles().

        Args:
            index: Position as shown by the list command; numeric strings are accepted

        Raises:
            ProfileIndexError: The index is not a number or is out of range
        """
        try:
            position = int(index)
        except (TypeError, ValueError):
            raise ProfileIndexError(f"Invalid profile index: {index!r}")

        listed = self.list_profiles()
        if not 1 <= position <= len(listed):
            raise ProfileIndexError(
                f"Profile index {position} is out of range (1-{len(listed)})"
            )
        return listed[position - 1]

    def get_profile_name_by_index(self, index: Union[int, str]) -> str:
        return self.get_profile_by_index(index).name

    def get_current_profile(self) -> str:
        """
        Find the profile the default is currently a copy of.

        Returns:
            Name of the first non-default profile with the same access key ID

        Raises:
            ProfileNotFoundError: No profile matches the default's access key ID
        """
        default = self._default_profile()
        for profile in self._profiles:
            if (not profile.is_default and profile.has_credentials
                    and profile.access_key_id == default.access_key_id):
                return profile.name
        raise ProfileNotFoundError("No profile matches the current [default] credentials")

    def switch_profile_by_name(self, name: str) -> Profile:
        """
        Overwrite the [default] profile with the fields of another profile
        and write both files back.

        Fields the source profile does not have keep their current value in
        the default profile.

        Args:
            name: Name of the profile to make the default

        Returns:
            The updated default profile

        Raises:
            ProfileNotFoundError: The profile does not exist or has no credentials
            WriteFailureError: The files could not be written; the in-memory
                default has already been updated
        """
        source = self.get_profile(name)
        if not source.has_credentials:
            raise ProfileNotFoundError(f"Profile '{name}' has no credentials")

        default = self._default_profile()
        default.merge_from(source)
        logger.info("Switching [default] to profile %s", name)
        self._write_back()
        return default


def list_profiles(aws_dir: Optional[Union[str, Path]] = None) -> List[Profile]:
    """
    List the switchable profiles in an AWS directory.

    Args:
        aws_dir: Optional AWS directory (resolved from the environment if not specified)

    Returns:
        List[Profile]: Profiles other than the default
    """
    switcher = ProfileSwitcher(aws_dir)
    return switcher.list_profiles()


def get_current_profile(aws_dir: Optional[Union[str, Path]] = None) -> str:
    """
    Get the name of the profile the default currently matches.

    Args:
        aws_dir: Optional AWS directory (resolved from the environment if not specified)

    Returns:
        str: Profile name
    """
    switcher = ProfileSwitcher(aws_dir)
    return switcher.get_current_profile()


def switch_profile(profile_name: str, aws_dir: Optional[Union[str, Path]] = None) -> Profile:
    """
    Make a profile the default.

    Args:
        profile_name: Name of the profile to switch to
        aws_dir: Optional AWS directory (resolved from the environment if not specified)

    Returns:
        Profile: The updated default profile
    """
    switcher = ProfileSwitcher(aws_dir)
    return switcher.switch_profile_by_name(profile_name)
