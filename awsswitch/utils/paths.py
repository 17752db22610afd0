import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

import botocore.session

AWS_SWITCH_DIR_ENV = "AWS_SWITCH_DIR"


class AwsPaths(NamedTuple):
    directory: Path
    credentials: Path
    config: Path


def _from_directory(directory: Union[str, Path]) -> AwsPaths:
    directory = Path(directory).expanduser().resolve()
    return AwsPaths(directory, directory / "credentials", directory / "config")


def resolve_aws_paths(aws_dir: Optional[Union[str, Path]] = None) -> AwsPaths:
    """
    Work out where the credentials and config files live.

    Args:
        aws_dir: Explicit directory holding `credentials` and `config`

    Returns:
        AwsPaths: The directory and both file paths

    The explicit directory wins, then the AWS_SWITCH_DIR environment
    variable. Otherwise botocore's own resolution is used, which honors
    AWS_SHARED_CREDENTIALS_FILE and AWS_CONFIG_FILE and falls back to ~/.aws.
    """
    if aws_dir:
        return _from_directory(aws_dir)

    env_dir = os.environ.get(AWS_SWITCH_DIR_ENV)
    if env_dir:
        return _from_directory(env_dir)

    session = botocore.session.get_session()
    credentials = Path(os.path.expanduser(session.get_config_variable("credentials_file")))
    config = Path(os.path.expanduser(session.get_config_variable("config_file")))
    return AwsPaths(credentials.parent, credentials, config)
