# -*- coding: utf-8 -*-
"""Registry uniqueness, ordering and lookups."""

import unittest
from decimal import Decimal
from threading import Thread

from banksim.account import Account, AccountKind, CheckingTerms, SavingsTerms
from banksim.errors import DuplicateIdentifier, NotFound
from banksim.registry import AccountRegistry


class TestAccountRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = AccountRegistry()
        self.s1 = Account("S1", "Alice", Decimal("500"), SavingsTerms(Decimal("5")))
        self.c1 = Account("C1", "Bob", Decimal("100"), CheckingTerms(Decimal("50")))
        self.s2 = Account("S2", "Dana", Decimal("200"), SavingsTerms(Decimal("1")))
        for acc in (self.s1, self.c1, self.s2):
            self.assertTrue(self.registry.register(acc).ok)

    def test_insertion_order(self):
        self.assertEqual(self.registry.accounts(), (self.s1, self.c1, self.s2))
        self.assertEqual(list(self.registry), [self.s1, self.c1, self.s2])
        self.assertIn("C1", self.registry)

    def test_duplicate_number_rejected(self):
        result = self.registry.register(Account("C1", "Eve", Decimal("10")))
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, DuplicateIdentifier)
        self.assertEqual(len(self.registry), 3)
        self.assertIs(self.registry.find_by_number("C1").value, self.c1)

    def test_find_by_index_is_one_based(self):
        self.assertIs(self.registry.find_by_index(1).value, self.s1)
        self.assertIs(self.registry.find_by_index(3).value, self.s2)
        for bad in (0, 4, -1):
            result = self.registry.find_by_index(bad)
            self.assertIsInstance(result.error, NotFound)

    def test_find_in_empty_registry(self):
        result = AccountRegistry().find_by_index(1)
        self.assertEqual(result.kind, "not_found")
        self.assertIn("No accounts available", result.message)

    def test_find_by_number(self):
        self.assertIs(self.registry.find_by_number("S2").value, self.s2)
        self.assertIsInstance(self.registry.find_by_number("X9").error, NotFound)

    def test_all_of_kind_preserves_order(self):
        self.assertEqual(self.registry.all_of_kind(AccountKind.SAVINGS), (self.s1, self.s2))
        self.assertEqual(self.registry.all_of_kind(AccountKind.CHECKING), (self.c1,))
        self.assertEqual(AccountRegistry().all_of_kind(AccountKind.SAVINGS), ())

    def test_concurrent_duplicate_registration(self):
        registry = AccountRegistry()
        results = []

        def worker(i):
            results.append(registry.register(Account("SAME", f"holder-{i}")))

        threads = [Thread(target=worker, args=(i,)) for i in range(16)]
        for th in threads: th.start()
        for th in threads: th.join()

        self.assertEqual(len(registry), 1)
        self.assertEqual(sum(1 for r in results if r.ok), 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
