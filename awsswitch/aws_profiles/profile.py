"""
Profile record

A profile is one bracketed section of the AWS credentials file, optionally
enriched with the display settings of the matching config file section.
"""

from typing import Dict, Optional

__all__ = [
    'Profile',
    'DEFAULT_PROFILE',
    'CREDENTIAL_FIELDS',
    'CONFIG_FIELDS',
]

DEFAULT_PROFILE = "default"

# Written in this order by the serializer
CREDENTIAL_FIELDS = ("aws_access_key_id", "aws_secret_access_key")
CONFIG_FIELDS = ("output", "region")


class Profile:
    """A named, insertion-ordered set of profile fields."""
    def __init__(self, name: str, fields: Optional[Dict[str, str]] = None,
                 section: Optional[str] = None):
        self.name = name
        self.fields: Dict[str, str] = dict(fields or {})
        # Raw header of a config section that is not a profile, e.g. "sso-session corp"
        self.section = section

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_PROFILE

    @property
    def is_profile(self) -> bool:
        return self.section is None

    @property
    def access_key_id(self) -> Optional[str]:
        return self.fields.get("aws_access_key_id")

    @property
    def has_credentials(self) -> bool:
        """True when the profile holds both credential fields."""
        return self.is_profile and all(key in self.fields for key in CREDENTIAL_FIELDS)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.fields.get(key, default)

    def __getitem__(self, key: str) -> str:
        if key == "name":
            return self.name
        return self.fields[key]

    def __contains__(self, key: str) -> bool:
        return key == "name" or key in self.fields

    def copy(self, name: Optional[str] = None) -> "Profile":
        """
        Copy the profile, optionally under a new name.

        Args:
            name: Name for the copy (keeps the current name if None)

        Returns:
            A new Profile with its own field mapping
        """
        return Profile(name if name is not None else self.name, self.fields, self.section)

    def merge_from(self, other: "Profile") -> None:
        """
        Copy every field of another profile into this one, keeping this
        profile's name. Fields the other profile lacks are left untouched.
        """
        self.fields.update(other.fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return (self.name == other.name and self.fields == other.fields
                and self.section == other.section)

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, fields={self.fields!r})"

    def __str__(self) -> str:
        """Return the profile name with its region, if any."""
        region = self.fields.get("region")
        region_str = f" - {region}" if region else ""
        return f"{self.name}{region_str}"
