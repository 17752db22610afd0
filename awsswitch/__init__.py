"""
awsswitch - switch the default AWS profile by rewriting the credentials file.
"""

__version__ = "0.1.0"
