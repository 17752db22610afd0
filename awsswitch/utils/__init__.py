"""
Utility functions for locating the AWS files.
"""

from .paths import resolve_aws_paths, AwsPaths, AWS_SWITCH_DIR_ENV

__all__ = [
    'resolve_aws_paths',
    'AwsPaths',
    'AWS_SWITCH_DIR_ENV',
]
