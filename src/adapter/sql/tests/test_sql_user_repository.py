"""Tests for SqlUserRepository against a mocked QueryExecutor."""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from adapter.sql.user_repository import SqlUserRepository
from domain.model.errors import DuplicateError, DuplicateUsernameError, InfrastructureError


def _profile_row(username='alice', **overrides):
    row = {
        'username': username,
        'first_name': 'Alice',
        'last_name': 'A',
        'phone': '555-0001',
        'join_at': datetime(2026, 1, 1, tzinfo=timezone.utc),
        'last_login_at': datetime(2026, 1, 2, tzinfo=timezone.utc),
    }
    row.update(overrides)
    return row


class TestSqlUserRepository(unittest.TestCase):

    def setUp(self):
        self.executor = MagicMock()
        self.repo = SqlUserRepository(self.executor)

    def test_create_inserts_and_maps_returned_row(self):
        self.executor.execute.return_value = [{
            'username': 'alice',
            'password': '$2b$04$hash',
            'first_name': 'Alice',
            'last_name': 'A',
            'phone': '555-0001',
        }]

        record = self.repo.create('alice', '$2b$04$hash', 'Alice', 'A', '555-0001')

        self.assertEqual(record.password_hash, '$2b$04$hash')
        statement, params = self.executor.execute.call_args.args
        self.assertIn('INSERT INTO users', statement)
        self.assertIn('$5, $6, $6)', statement)
        self.assertIn('RETURNING', statement)
        self.assertEqual(params[:5], ['alice', '$2b$04$hash', 'Alice', 'A', '555-0001'])
        self.assertIsInstance(params[5], datetime)
        self.assertEqual(params[5].tzinfo, timezone.utc)

    def test_create_translates_duplicate(self):
        self.executor.execute.side_effect = DuplicateError("Unique constraint violated")

        with self.assertRaises(DuplicateUsernameError) as ctx:
            self.repo.create('alice', 'h', 'Alice', 'A', '555-0001')
        self.assertEqual(ctx.exception.username, 'alice')

    def test_create_propagates_infrastructure_error(self):
        self.executor.execute.side_effect = InfrastructureError("Query failed")

        with self.assertRaises(InfrastructureError):
            self.repo.create('alice', 'h', 'Alice', 'A', '555-0001')

    def test_get_password_hash(self):
        self.executor.execute.return_value = [{'password': '$2b$04$hash'}]

        self.assertEqual(self.repo.get_password_hash('alice'), '$2b$04$hash')
        self.executor.execute.assert_called_once_with(
            'SELECT password FROM users WHERE username = $1', ['alice']
        )

    def test_get_password_hash_missing(self):
        self.executor.execute.return_value = []
        self.assertIsNone(self.repo.get_password_hash('nobody'))

    def test_get_by_username_maps_row(self):
        self.executor.execute.return_value = [_profile_row()]

        user = self.repo.get_by_username('alice')

        self.assertEqual(user.username, 'alice')
        self.assertEqual(user.join_at, datetime(2026, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(user.last_login_at, datetime(2026, 1, 2, tzinfo=timezone.utc))

    def test_get_by_username_parses_string_timestamps(self):
        self.executor.execute.return_value = [
            _profile_row(join_at='2026-01-01 09:30:00', last_login_at=None)
        ]

        user = self.repo.get_by_username('alice')

        self.assertEqual(user.join_at, datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc))
        self.assertIsNone(user.last_login_at)

    def test_get_by_username_missing(self):
        self.executor.execute.return_value = []
        self.assertIsNone(self.repo.get_by_username('nobody'))

    def test_list_all_orders_by_username(self):
        self.executor.execute.return_value = [_profile_row('alice'), _profile_row('bob')]

        users = self.repo.list_all()

        self.assertEqual([u.username for u in users], ['alice', 'bob'])
        self.assertIn('ORDER BY username', self.executor.execute.call_args.args[0])

    def test_update_last_login_binds_current_time(self):
        self.executor.execute.return_value = [{'username': 'alice'}]
        called_at = datetime.now(timezone.utc)

        self.assertTrue(self.repo.update_last_login('alice'))
        statement, params = self.executor.execute.call_args.args
        self.assertIn('SET last_login_at = $2', statement)
        self.assertEqual(params[0], 'alice')
        self.assertGreaterEqual(params[1], called_at)

    def test_update_last_login_no_row(self):
        self.executor.execute.return_value = []
        self.assertFalse(self.repo.update_last_login('nobody'))


if __name__ == '__main__':
    unittest.main()
