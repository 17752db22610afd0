#!/usr/bin/env python3
"""
AWS Profile Switcher CLI

A command-line utility for switching the default AWS profile.
It rewrites the [default] section of ~/.aws/credentials (and ~/.aws/config)
with the settings of another profile.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the parent directory to sys.path to import from awsswitch
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from awsswitch import __version__
from awsswitch.aws_profiles import ProfileSwitcher, ProfileSwitcherError

def format_profile_list(profiles):
    """Format profiles for display, numbered from 1."""
    if not profiles:
        return "No AWS profiles found."

    return "\n".join(f"{index}: {profile.name}" for index, profile in enumerate(profiles, start=1))

def handle_list(switcher, args):
    """Handle the list command."""
    print("Available profiles:")
    print(format_profile_list(switcher.list_profiles()))

def handle_current(switcher, args):
    """Handle the current command."""
    print(f"Current profile: {switcher.get_current_profile()}")

def prompt_for_index(switcher):
    """List the profiles and ask for the index of the one to switch to."""
    print(format_profile_list(switcher.list_profiles()))
    return input("index: ").strip()

def handle_switch(switcher, args):
    """Handle the switch command."""
    if args.profile:
        name = args.profile
    elif args.index:
        name = switcher.get_profile_name_by_index(args.index)
    else:
        name = switcher.get_profile_name_by_index(prompt_for_index(switcher))

    print(f"Switching default aws profile to {name}")
    switcher.switch_profile_by_name(name)
    print(f"✅ Default profile is now {name}")

def main():
    parser = argparse.ArgumentParser(
        description="AWS Profile Switcher - Make one of your AWS profiles the default",
        epilog="Examples:\n"
               "  switch_profiles.py list\n"
               "  switch_profiles.py switch -p profile_name\n"
               "  switch_profiles.py switch -i 2",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--dir", help="AWS directory holding credentials and config (default: ~/.aws)")
    parser.add_argument("--no-config", action="store_true",
                        help="Leave the config file untouched")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # List command
    list_parser = subparsers.add_parser("list", aliases=["ls"],
                                        help="List available AWS profiles")
    list_parser.set_defaults(func=handle_list)

    # Current command
    current_parser = subparsers.add_parser("current", aliases=["curr"],
                                           help="Show the profile the default currently matches")
    current_parser.set_defaults(func=handle_current)

    # Switch command
    switch_parser = subparsers.add_parser("switch", aliases=["sw"],
                                          help="Make a different profile the default")
    target = switch_parser.add_mutually_exclusive_group()
    target.add_argument("--profile", "-p", help="Name of the profile to make the default")
    target.add_argument("--index", "-i", help="Index of the profile to make the default (from list)")
    switch_parser.set_defaults(func=handle_switch)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        switcher = ProfileSwitcher(args.dir, process_config=not args.no_config)
        args.func(switcher, args)
    except ProfileSwitcherError as e:
        print(f"❌ {e}")
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\n❌ No profile selected")
        sys.exit(1)

if __name__ == "__main__":
    main()
