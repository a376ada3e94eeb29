"""
Management command to print the pending-work report.

Lists every employee with pending or blocked tasks updated since the start
of the chosen range, the same selection managers see at /reports/pending/.

Usage:
    python manage.py pending_report
    python manage.py pending_report --range day
"""
from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.reports.date_ranges import RANGE_DAY, RANGE_MONTH, RANGE_WEEK, resolve_range_start
from apps.reports.services import get_pending_report


class Command(BaseCommand):
    help = 'Print pending and blocked tasks grouped by employee'

    def add_arguments(self, parser):
        parser.add_argument(
            '--range',
            dest='range_token',
            choices=[RANGE_DAY, RANGE_WEEK, RANGE_MONTH],
            default=RANGE_WEEK,
            help='How far back to look (default: week)',
        )

    def handle(self, *args, **options):
        now = timezone.now()
        range_token = options['range_token']
        since = timezone.localtime(resolve_range_start(range_token, now))

        self.stdout.write(
            f'\nPending report ({range_token}) since {since:%d %b %Y, %I:%M %p}\n'
        )

        rows = get_pending_report(range_token, now)
        if not rows:
            self.stdout.write(self.style.SUCCESS('No pending or blocked tasks.'))
            return

        task_count = 0
        for row in rows:
            employee = row['employee']
            self.stdout.write(self.style.MIGRATE_HEADING(employee.get_full_name()))
            for entry in row['tasks']:
                task_count += 1
                if entry['status'] == 'waiting':
                    self.stdout.write(
                        self.style.WARNING(f"  ! {entry['text']}  (blocked: {entry['reason']})")
                    )
                else:
                    self.stdout.write(f"  • {entry['text']}")

        self.stdout.write('')
        self.stdout.write(
            self.style.SUCCESS(f'{task_count} task(s) across {len(rows)} employee(s).')
        )
