# orders/management/commands/backfill_order_ids.py

from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from orders.services.display_ids import backfill_order_display_ids


class _DryRunRollback(Exception):
    pass


class Command(BaseCommand):
    help = "Assign YY-NNN display ids to paid orders recorded without one."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would change without saving.",
        )

    def handle(self, *args, **options):
        dry_run = bool(options.get("dry_run"))

        self.stdout.write("Backfilling order display ids...")
        if dry_run:
            self.stdout.write("DRY RUN: no database changes will be saved.\n")

        assigned: list[tuple[str, str]] = []
        try:
            with transaction.atomic():
                assigned = backfill_order_display_ids()
                if dry_run:
                    raise _DryRunRollback
        except _DryRunRollback:
            pass

        for order_id, display_id in assigned:
            self.stdout.write(f"ORDER {order_id} -> {display_id}")

        self.stdout.write("\n--- Summary ---")
        self.stdout.write(f"Orders numbered: {len(assigned)}")

        if dry_run:
            self.stdout.write("\nDRY RUN complete (no changes saved).")
