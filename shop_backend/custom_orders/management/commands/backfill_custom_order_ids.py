# custom_orders/management/commands/backfill_custom_order_ids.py

from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from custom_orders.services.display_ids import backfill_display_ids


class _DryRunRollback(Exception):
    pass


class Command(BaseCommand):
    help = "Assign CO-YY-NNN display ids to custom orders created without one."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would change without saving.",
        )

    def handle(self, *args, **options):
        dry_run = bool(options.get("dry_run"))

        self.stdout.write("Backfilling custom order display ids...")
        if dry_run:
            self.stdout.write("DRY RUN: no database changes will be saved.\n")

        assigned: list[tuple[str, str]] = []
        try:
            with transaction.atomic():
                assigned = backfill_display_ids()
                if dry_run:
                    raise _DryRunRollback
        except _DryRunRollback:
            pass

        for order_id, display_id in assigned:
            self.stdout.write(f"CUSTOM ORDER {order_id} -> {display_id}")

        self.stdout.write("\n--- Summary ---")
        self.stdout.write(f"Custom orders numbered: {len(assigned)}")

        if dry_run:
            self.stdout.write("\nDRY RUN complete (no changes saved).")
