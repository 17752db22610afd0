"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys

# Add the parent directory to the path so we can import the awsswitch package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# [default] matches profile2
CREDENTIALS = """[default]
aws_access_key_id = PROFILE2ID
aws_secret_access_key = PROFILE2SECRET

[profile1]
aws_access_key_id = PROFILE1ID
aws_secret_access_key = PROFILE1SECRET

[profile2]
aws_access_key_id = PROFILE2ID
aws_secret_access_key = PROFILE2SECRET

[profile3]
aws_access_key_id = PROFILE3ID
aws_secret_access_key = PROFILE3SECRET

"""

CREDENTIALS_SWITCHED_TO_PROFILE1 = """[default]
aws_access_key_id = PROFILE1ID
aws_secret_access_key = PROFILE1SECRET

[profile1]
aws_access_key_id = PROFILE1ID
aws_secret_access_key = PROFILE1SECRET

[profile2]
aws_access_key_id = PROFILE2ID
aws_secret_access_key = PROFILE2SECRET

[profile3]
aws_access_key_id = PROFILE3ID
aws_secret_access_key = PROFILE3SECRET

"""

CREDENTIALS_WITHOUT_DEFAULT = """[profile1]
aws_access_key_id = PROFILE1ID
aws_secret_access_key = PROFILE1SECRET

[profile2]
aws_access_key_id = PROFILE2ID
aws_secret_access_key = PROFILE2SECRET

"""

CONFIG = """[default]
output = json
region = us-west-2

[profile profile1]
output = text
region = us-east-1

[profile profile2]
output = json
region = us-west-2

[profile profile3]
output = table
region = eu-west-1

"""

CONFIG_SWITCHED_TO_PROFILE1 = """[default]
output = text
region = us-east-1

[profile profile1]
output = text
region = us-east-1

[profile profile2]
output = json
region = us-west-2

[profile profile3]
output = table
region = eu-west-1

"""


def write_aws_dir(directory, credentials=None, config=None):
    """Create an AWS directory with the given file contents (None means no file)."""
    directory.mkdir(parents=True, exist_ok=True)
    if credentials is not None:
        (directory / "credentials").write_text(credentials)
    if config is not None:
        (directory / "config").write_text(config)
    return directory


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.aws."""
    monkeypatch.delenv("AWS_SWITCH_DIR", raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "unused" / "credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "unused" / "config"))


@pytest.fixture
def aws_dir(tmp_path):
    """AWS directory with a credentials file only."""
    return write_aws_dir(tmp_path / "aws", credentials=CREDENTIALS)


@pytest.fixture
def aws_dir_with_config(tmp_path):
    """AWS directory with both credentials and config files."""
    return write_aws_dir(tmp_path / "aws", credentials=CREDENTIALS, config=CONFIG)
