import unittest
from casewords.helpers import chain_operations

class TestChainOperations(unittest.TestCase):
    def test_applies_in_order(self):
        result = chain_operations(' Abc ', [str.strip, str.lower, lambda s: s + '!'])
        self.assertEqual(result, 'abc!')

    def test_no_operations(self):
        self.assertEqual(chain_operations('abc', []), 'abc')
