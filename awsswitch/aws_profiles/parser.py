"""
Credentials and config file parser

Parses the two INI-like shapes used by the AWS CLI into ordered Profile
records. This is deliberately not a general INI parser: the credentials file
holds `[name]` sections with exactly two credential assignments each, and the
config file holds `[default]` / `[profile name]` sections with display
settings.
"""

import logging
import re
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .errors import MalformedFileError
from .profile import CREDENTIAL_FIELDS, DEFAULT_PROFILE, Profile

__all__ = [
    'parse_credentials',
    'parse_config',
    'check_credentials_text',
    'check_config_text',
    'STATUS_GOOD',
    'STATUS_EMPTY',
    'STATUS_BAD',
]

logger = logging.getLogger(__name__)

STATUS_GOOD = "good"
STATUS_EMPTY = "empty"
STATUS_BAD = "bad"

HEADER_PATTERN = re.compile(r"^\s*\[(.*)\]\s*$")
PROFILE_QUALIFIER_PATTERN = re.compile(r"^profile\s+", re.IGNORECASE)

# Minimal shape of a usable file, checked once before line-by-line parsing
CREDENTIALS_PATTERN = re.compile(
    r"\[.*\][\r\n]* *aws_access_key_id *= *[A-Z0-9]+\r?\n[\r\n]* *aws_secret_access_key *= *.*"
)
CONFIG_PATTERN = re.compile(r"\[.*\][\r\n]* *output *= *.*\r?\n *region *= *.*")


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    ACCUMULATING_FIELDS = "accumulating_fields"


def check_credentials_text(text: str) -> str:
    """
    Check that credentials file content has the minimal expected structure.

    Args:
        text: Raw credentials file content

    Returns:
        STATUS_EMPTY for zero-length content, STATUS_GOOD when a section header
        is followed by both credential assignments, STATUS_BAD otherwise
    """
    if text == "":
        return STATUS_EMPTY
    if CREDENTIALS_PATTERN.search(text):
        return STATUS_GOOD
    return STATUS_BAD


def check_config_text(text: str) -> str:
    """
    Check that config file content has an `output` and a `region` setting
    under some section header.
    """
    if text == "":
        return STATUS_EMPTY
    if CONFIG_PATTERN.search(text):
        return STATUS_GOOD
    return STATUS_BAD


def _iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    for lineno, line in enumerate(text.split("\n"), start=1):
        yield lineno, line.rstrip("\r")


def _match_header(line: str) -> Optional[str]:
    match = HEADER_PATTERN.match(line)
    return match.group(1) if match else None


def _split_assignment(line: str, lineno: int) -> Tuple[str, str]:
    key, sep, value = line.partition("=")
    if not sep:
        raise MalformedFileError(
            f"Line {lineno} is neither a [section] header nor a 'key = value' assignment"
        )
    return key.strip(), value.strip()


def parse_credentials(text: str) -> List[Profile]:
    """
    Parse credentials file content into profiles, in file order.

    Each `[name]` header opens a profile that must be completed by exactly
    the two credential assignments before the next header.

    Args:
        text: Raw credentials file content

    Returns:
        List of Profile objects

    Raises:
        MalformedFileError: An assignment appears outside a section, a line is
            not an assignment, a section does not have both credential fields, or
            a profile name appears twice
    """
    profiles: List[Profile] = []
    seen = set()
    state = ParserState.AWAITING_HEADER
    current: Optional[Profile] = None
    expected = len(CREDENTIAL_FIELDS)

    for lineno, line in _iter_lines(text):
        if not line.strip():
            continue

        name = _match_header(line)
        if name is not None:
            if state is ParserState.ACCUMULATING_FIELDS:
                raise MalformedFileError(
                    f"Profile [{current.name}] has {len(current.fields)} of {expected} "
                    f"credential fields before line {lineno}"
                )
            if name in seen:
                raise MalformedFileError(f"Line {lineno} repeats profile [{name}]")
            seen.add(name)
            current = Profile(name)
            profiles.append(current)
            state = ParserState.ACCUMULATING_FIELDS
            continue

        if state is ParserState.AWAITING_HEADER:
            raise MalformedFileError(
                f"Line {lineno} assigns a field outside of a complete profile section"
            )

        key, value = _split_assignment(line, lineno)
        current.fields[key] = value
        if len(current.fields) == expected:
            state = ParserState.AWAITING_HEADER

    if state is ParserState.ACCUMULATING_FIELDS:
        raise MalformedFileError(
            f"Profile [{current.name}] has {len(current.fields)} of {expected} credential fields"
        )

    logger.debug("Parsed %d credential profiles", len(profiles))
    return profiles


def _config_profile_name(header: str) -> Optional[str]:
    """
    Get the profile name of a config section header.

    Returns:
        "default" for [default], NAME for [profile NAME], None for any other
        section such as [sso-session NAME]
    """
    header = header.strip()
    if header == DEFAULT_PROFILE:
        return header
    match = PROFILE_QUALIFIER_PATTERN.match(header)
    if match:
        return header[match.end():].strip()
    return None


def parse_config(text: str, profiles: List[Profile]) -> List[Profile]:
    """
    Layer config file settings onto existing profiles.

    Profile sections are matched to profiles by name. A profile section
    without a matching credentials profile is appended as a config-only
    profile, and any other section is appended under its original header, so
    both survive a rewrite of the config file. Credential keys in profile
    sections are ignored: credentials only come from the credentials file.

    Args:
        text: Raw config file content
        profiles: Profiles parsed from the credentials file (updated in place)

    Returns:
        The same list, with config fields merged in
    """
    by_name = {profile.name: profile for profile in profiles}
    state = ParserState.AWAITING_HEADER
    current: Optional[Profile] = None

    for lineno, line in _iter_lines(text):
        if not line.strip():
            continue

        header = _match_header(line)
        if header is not None:
            name = _config_profile_name(header)
            if name is None:
                logger.debug("Keeping config section [%s] as is", header)
                current = Profile(header.strip(), section=header.strip())
                profiles.append(current)
            else:
                current = by_name.get(name)
                if current is None:
                    logger.debug("Config section [%s] has no credentials profile", header)
                    current = Profile(name)
                    profiles.append(current)
                    by_name[name] = current
            state = ParserState.ACCUMULATING_FIELDS
            continue

        if state is ParserState.AWAITING_HEADER:
            raise MalformedFileError(
                f"Line {lineno} of the config file assigns a field outside of a section"
            )

        key, value = _split_assignment(line, lineno)
        if current.is_profile and key in CREDENTIAL_FIELDS:
            logger.warning("Ignoring %s on line %d of the config file", key, lineno)
            continue
        current.fields[key] = value

    return profiles
