from django.core.management.base import BaseCommand

from apps.points.services import BalanceAuditor


class Command(BaseCommand):
    help = 'Compare stored points balances with their ledger sums'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            action='append',
            dest='user_ids',
            help='Check only this user ID (may be repeated)',
        )
        parser.add_argument(
            '--repair',
            action='store_true',
            help='Reset drifted balances to their ledger sums',
        )

    def handle(self, *args, **options):
        user_ids = options.get('user_ids')
        self.stdout.write('Checking points balances against the ledger...')

        discrepancies = BalanceAuditor.find_discrepancies(user_ids)
        if not discrepancies:
            self.stdout.write(self.style.SUCCESS('All balances match their ledgers'))
            return

        for item in discrepancies:
            self.stdout.write(
                self.style.WARNING(
                    f'User {item.user_id} ({item.email}): stored {item.stored_balance}, '
                    f'ledger {item.ledger_balance} (difference {item.difference:+d})'
                )
            )

        if options['repair']:
            repaired = BalanceAuditor.repair([item.user_id for item in discrepancies])
            self.stdout.write(
                self.style.SUCCESS(f'Repaired {len(repaired)} balance(s)')
            )
        else:
            self.stdout.write(
                self.style.ERROR(f'{len(discrepancies)} balance(s) out of sync; rerun with --repair to fix')
            )
