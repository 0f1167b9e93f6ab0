"""
Django management command to create demo data for development.

Creates:
- Demo brands
- Optionally, an initial balance for a demo user with the first brand
"""

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from brands.application.commands.register_brand import RegisterBrandCommand
from brands.application.handlers.register_brand_handler import RegisterBrandHandler
from brands.infrastructure.repositories.kv_brand_repository import KeyValueBrandRepository
from core.infrastructure.authentication import ContextCallerAuthenticator, authenticated_caller
from core.infrastructure.django_key_value_store import DjangoKeyValueStore
from core.infrastructure.retention import RetentionExtender, retention_policy_from_settings
from exchange.application.commands.issue_tokens import IssueTokensCommand
from exchange.application.handlers.issue_tokens_handler import IssueTokensHandler
from ledger.infrastructure.kv_balance_ledger import KeyValueBalanceLedger


class Command(BaseCommand):
    """Command to create demo brands and balances."""

    help = "Register demo brands and issue an initial balance to a demo user"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--brand",
            action="append",
            dest="brands",
            default=None,
            help="Brand name to register (repeatable, default: Amazon, Apple)",
        )
        parser.add_argument(
            "--user",
            type=str,
            default="demo-user",
            help="User to issue the initial balance to (default: demo-user)",
        )
        parser.add_argument(
            "--amount",
            type=int,
            default=1000,
            help="Points issued with the first brand (default: 1000, 0 to skip)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        store = DjangoKeyValueStore()
        brand_repository = KeyValueBrandRepository(store)
        retention = RetentionExtender(store, retention_policy_from_settings())

        register = RegisterBrandHandler(store, brand_repository, retention)
        brand_ids = []
        for name in options["brands"] or ["Amazon", "Apple"]:
            brand = async_to_sync(register.handle)(RegisterBrandCommand(brand_name=name))
            brand_ids.append(brand.brand_id)
            self.stdout.write(f"Registered brand {brand.brand_id}: {brand.brand_name}")

        if options["amount"] > 0 and brand_ids:
            issue = IssueTokensHandler(
                store,
                brand_repository,
                KeyValueBalanceLedger(store),
                ContextCallerAuthenticator(),
                retention,
            )
            user = options["user"]
            with authenticated_caller(user):
                balance = async_to_sync(issue.handle)(
                    IssueTokensCommand(user=user, brand_id=brand_ids[0], amount=options["amount"])
                )
            self.stdout.write(
                f"Issued {options['amount']} points to {user} for brand {balance.brand_id}"
            )

        self.stdout.write(self.style.SUCCESS("Demo data created successfully"))
