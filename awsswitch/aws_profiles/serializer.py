"""
Profile serializer

Renders profiles back into the credentials and config file formats and
replaces the files on disk.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import WriteFailureError
from .profile import CONFIG_FIELDS, Profile

__all__ = [
    'render_credentials',
    'render_config',
    'write_profiles',
]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def render_credentials(profiles: List[Profile]) -> str:
    """
    Render the credentials file content.

    Config-only profiles (no credential fields) are left out.

    Args:
        profiles: Ordered list of profiles

    Returns:
        str: Credentials file content
    """
    blocks = []
    for profile in profiles:
        if not profile.has_credentials:
            continue
        blocks.append(
            f"[{profile.name}]\n"
            f"aws_access_key_id = {profile.get('aws_access_key_id')}\n"
            f"aws_secret_access_key = {profile.get('aws_secret_access_key')}\n"
            "\n"
        )
    return "".join(blocks)


def render_config(profiles: List[Profile]) -> str:
    """
    Render the config file content, one section per profile.

    Sections that are not profiles are written under their original header
    with all of their settings.

    Args:
        profiles: Ordered list of profiles

    Returns:
        str: Config file content
    """
    blocks = []
    for profile in profiles:
        if not profile.is_profile:
            lines = [f"[{profile.section}]"]
            lines.extend(f"{key} = {value}" for key, value in profile.fields.items())
            blocks.append("\n".join(lines) + "\n\n")
            continue

        header = "[default]" if profile.is_default else f"[profile {profile.name}]"
        lines = [header]
        for key in CONFIG_FIELDS:
            value = profile.get(key)
            if value:
                lines.append(f"{key} = {value}")
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def _write_temp(path: Path, content: str) -> str:
    fd, temp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError:
        os.unlink(temp_path)
        raise
    return temp_path


def write_profiles(profiles: List[Profile], credentials_path: PathLike,
                   config_path: Optional[PathLike] = None) -> None:
    """
    Replace the credentials file (and the config file, if given) with the
    rendered profiles.

    Both files are written to temporary files first and only renamed into
    place once both writes have succeeded. The two renames are separate
    operations, so a crash between them leaves the files out of step.

    Args:
        profiles: Ordered list of profiles
        credentials_path: Path of the credentials file
        config_path: Path of the config file, or None to leave it alone

    Raises:
        WriteFailureError: A temporary file could not be written or renamed
    """
    # Symlinked files are replaced at their target so the link survives
    targets: Dict[Path, str] = {Path(credentials_path).resolve(): render_credentials(profiles)}
    if config_path is not None:
        targets[Path(config_path).resolve()] = render_config(profiles)

    staged: Dict[Path, str] = {}
    try:
        for path, content in targets.items():
            try:
                staged[path] = _write_temp(path, content)
            except OSError as e:
                raise WriteFailureError(path, e) from e

        for path, temp_path in list(staged.items()):
            try:
                os.replace(temp_path, path)
            except OSError as e:
                raise WriteFailureError(path, e) from e
            del staged[path]
            logger.info("Wrote %s", path)
    finally:
        for temp_path in staged.values():
            if os.path.exists(temp_path):
                os.unlink(temp_path)
