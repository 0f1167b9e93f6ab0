"""
Concurrency tests for issue and exchange on the in-memory store.
"""
from concurrent.futures import ThreadPoolExecutor

from asgiref.sync import async_to_sync

from core.infrastructure.authentication import authenticated_caller
from exchange.application.commands.exchange_tokens import ExchangeTokensCommand
from exchange.application.commands.issue_tokens import IssueTokensCommand
from exchange.application.handlers.exchange_tokens_handler import ExchangeTokensHandler
from exchange.application.handlers.issue_tokens_handler import IssueTokensHandler

USER = "GUSER0001"
WORKERS = 8
OPERATIONS = 40


def _run_as(user, handler, command):
    with authenticated_caller(user):
        return async_to_sync(handler.handle)(command)


class TestConcurrentLedger:
    """Tests for serializability of concurrent read-modify-write."""

    def test_concurrent_issues_to_fresh_balance(
        self, store, brand_repository, balance_ledger, authenticator, retention, two_brands
    ):
        """Test concurrent issues to one new balance lose no update."""
        handler = IssueTokensHandler(
            store=store,
            brand_repository=brand_repository,
            balance_ledger=balance_ledger,
            authenticator=authenticator,
            retention=retention,
        )
        command = IssueTokensCommand(user=USER, brand_id=1, amount=3)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            futures = [pool.submit(_run_as, USER, handler, command) for _ in range(OPERATIONS)]
            for future in futures:
                future.result()

        assert balance_ledger.get_balance(USER, 1) == 3 * OPERATIONS

    def test_concurrent_opposite_exchanges_conserve_points(
        self, store, brand_repository, balance_ledger, authenticator, retention, two_brands
    ):
        """Test exchanges in both directions keep the user's total constant."""
        balance_ledger.set_balance(USER, 1, 100)
        balance_ledger.set_balance(USER, 2, 100)
        handler = ExchangeTokensHandler(
            store=store,
            brand_repository=brand_repository,
            balance_ledger=balance_ledger,
            authenticator=authenticator,
            retention=retention,
        )
        forward = ExchangeTokensCommand(user=USER, from_brand=1, to_brand=2, amount=1)
        backward = ExchangeTokensCommand(user=USER, from_brand=2, to_brand=1, amount=1)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            futures = [
                pool.submit(_run_as, USER, handler, forward if i % 2 else backward)
                for i in range(OPERATIONS)
            ]
            for future in futures:
                future.result()

        assert balance_ledger.get_balance(USER, 1) == 100
        assert balance_ledger.get_balance(USER, 2) == 100

    def test_concurrent_exchanges_never_overdraw(
        self, store, brand_repository, balance_ledger, authenticator, retention, two_brands
    ):
        """Test racing exchanges cannot spend the same points twice."""
        balance_ledger.set_balance(USER, 1, 10)
        handler = ExchangeTokensHandler(
            store=store,
            brand_repository=brand_repository,
            balance_ledger=balance_ledger,
            authenticator=authenticator,
            retention=retention,
        )
        command = ExchangeTokensCommand(user=USER, from_brand=1, to_brand=2, amount=1)

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            futures = [pool.submit(_run_as, USER, handler, command) for _ in range(OPERATIONS)]
            succeeded = sum(1 for future in futures if future.exception() is None)

        assert succeeded == 10
        assert balance_ledger.get_balance(USER, 1) == 0
        assert balance_ledger.get_balance(USER, 2) == 10
