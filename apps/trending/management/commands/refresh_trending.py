"""
Management command to recompute merchant trending scores.

Same refresh as GET /api/cron/trending/, for schedulers that run commands.

Usage:
    python manage.py refresh_trending
    python manage.py refresh_trending --window-hours 48
"""

from django.core.management.base import BaseCommand

from apps.trending.services import refresh_trending_scores


class Command(BaseCommand):
    help = 'Recompute merchant trending scores from recent transactions'

    def add_arguments(self, parser):
        parser.add_argument(
            '--window-hours',
            type=int,
            default=None,
            help='Look-back window (defaults to TRENDING_WINDOW_HOURS)',
        )

    def handle(self, *args, **options):
        updated = refresh_trending_scores(window_hours=options['window_hours'])

        self.stdout.write(
            self.style.SUCCESS(f'Refreshed trending scores for {updated} merchant(s).')
        )
