"""
Operator-only diagnostics over the active entity store.

Usage:
    python manage.py chitfund_diagnostics
    python manage.py chitfund_diagnostics --customers
    python manage.py chitfund_diagnostics --users --groups

Prints record counts and, on request, the unscoped listings that are
deliberately not reachable through the API.
"""

from django.core.management.base import BaseCommand

from apps.storage import get_store


class Command(BaseCommand):
    help = 'Show entity store backend, counts and unscoped listings (operators only)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--users',
            action='store_true',
            help='List every user across all managers',
        )
        parser.add_argument(
            '--customers',
            action='store_true',
            help='List every customer across all managers',
        )
        parser.add_argument(
            '--groups',
            action='store_true',
            help='List every chit group across all managers',
        )

    def handle(self, *args, **options):
        store = get_store()
        users = store.get_all_users()
        customers = store.get_all_customers()
        groups = store.get_all_chit_groups()

        self.stdout.write(f'Backend: {store.backend_name}')
        self.stdout.write(f'Users: {len(users)} ({len(customers)} customers)')
        self.stdout.write(f'Chit groups: {len(groups)}')

        if options['users']:
            self.stdout.write(self.style.MIGRATE_HEADING('Users'))
            for user in users:
                self.stdout.write(f'  #{user.id} {user.username} [{user.role}]')

        if options['customers']:
            self.stdout.write(self.style.MIGRATE_HEADING('Customers'))
            for user in customers:
                self.stdout.write(
                    f'  #{user.id} {user.username} (manager #{user.manager_id})'
                )

        if options['groups']:
            self.stdout.write(self.style.MIGRATE_HEADING('Chit groups'))
            for group in groups:
                state = 'active' if group.is_active else 'inactive'
                self.stdout.write(
                    f'  #{group.id} {group.name} by #{group.created_by} ({state})'
                )

        self.stdout.write(self.style.SUCCESS('Done'))
