#!/usr/bin/env python
import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the changelog builder."""
    # Entry point for the 'graphql-changelog' command: a shortcut for
    # 'django-admin build_graphql_changelog' with standalone settings.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "graphql_changelog.conf.settings")

    argv = [sys.argv[0], "build_graphql_changelog", *sys.argv[1:]]
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
