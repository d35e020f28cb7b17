"""Build a GraphQL schema changelog entry and prepend it to the changelog."""

import json
import logging

from django.core.management.base import BaseCommand, CommandError
from graphql import GraphQLError

from graphql_changelog.changelog import create_changelog_entry, load_previews, prepend_entry
from graphql_changelog.config import get_changelog_settings, require_access_token
from graphql_changelog.exceptions import ChangelogError
from graphql_changelog.sources import fetch_current_schema

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = (
        "Compare the published GraphQL schema with the current one from GitHub "
        "and add a changelog entry when something worth reporting changed."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--old-schema",
            dest="old_schema_path",
            help="Path of the published schema SDL (default: GRAPHQL_CHANGELOG['old_schema_path']).",
        )
        parser.add_argument(
            "--previews",
            dest="previews_path",
            help="Path of the preview definitions YAML (default: GRAPHQL_CHANGELOG['previews_path']).",
        )
        parser.add_argument(
            "--changelog",
            dest="changelog_path",
            help="Path of the changelog JSON (default: GRAPHQL_CHANGELOG['changelog_path']).",
        )
        parser.add_argument(
            "--ref",
            dest="ref",
            help="Git ref to read the current schema from (default: GRAPHQL_CHANGELOG['source']['ref']).",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the entry as JSON instead of writing the changelog.",
        )

    def handle(self, *args, **options):
        settings = get_changelog_settings().with_overrides(
            old_schema_path=options.get("old_schema_path"),
            previews_path=options.get("previews_path"),
            changelog_path=options.get("changelog_path"),
            ref=options.get("ref"),
        )

        try:
            token = require_access_token(settings)
            with open(settings.old_schema_path, "r", encoding="utf-8") as f:
                old_schema_string = f.read()
            new_schema_string = fetch_current_schema(token, settings.source)
            previews = load_previews(settings.previews_path)
            changelog_entry = create_changelog_entry(old_schema_string, new_schema_string, previews)
        except (ChangelogError, GraphQLError, OSError) as e:
            logger.error(f"Changelog generation failed: {e}")
            raise CommandError(str(e)) from e

        if changelog_entry is None:
            self.stdout.write("No changelog-worthy schema changes found.")
            return

        changelog_entry = changelog_entry.stamp()
        if options["dry_run"]:
            self.stdout.write(json.dumps(changelog_entry.to_dict(), indent=2, ensure_ascii=False))
            return

        try:
            prepend_entry(settings.changelog_path, changelog_entry)
        except (ChangelogError, OSError, ValueError) as e:
            logger.error(f"Could not update {settings.changelog_path}: {e}")
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(
                f"Changelog entry for {changelog_entry.date} written to {settings.changelog_path}"
            )
        )
