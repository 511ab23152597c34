"""Unit tests for the read-only store queries."""

from __future__ import annotations

import unittest

from claude_config.db import queries
from claude_config.models import SyncType
from tests.helpers import (
    insert_account,
    insert_directory,
    insert_sync_log,
    insert_webdav,
    link,
    make_db,
)


class TestCatalogueQueries(unittest.TestCase):
    def setUp(self):
        self.db = make_db()

    def tearDown(self):
        self.db.close()

    def test_table_counts_fresh(self):
        counts = queries.table_counts(self.db)
        self.assertEqual(counts["base_urls"], 3)
        self.assertEqual(
            {k: v for k, v in counts.items() if k != "base_urls"},
            {
                "accounts": 0, "directories": 0, "account_directories": 0,
                "webdav_configs": 0, "sync_logs": 0,
            },
        )

    def test_list_base_urls_default_first(self):
        names = [b.name for b in queries.list_base_urls(self.db)]
        self.assertEqual(names, ["Anthropic Official", "Claude API", "Local Development"])

    def test_default_base_url(self):
        b = queries.default_base_url(self.db)
        self.assertIsNotNone(b)
        self.assertEqual(b.url, "https://api.anthropic.com")

    def test_no_default_base_url(self):
        self.db.execute("UPDATE base_urls SET is_default = 0")
        self.db.connection().commit()
        self.assertIsNone(queries.default_base_url(self.db))


class TestAccountQueries(unittest.TestCase):
    def setUp(self):
        self.db = make_db()

    def tearDown(self):
        self.db.close()

    def test_get_by_name(self):
        insert_account(self.db, "work")
        self.assertEqual(queries.get_account_by_name(self.db, "work").name, "work")
        self.assertIsNone(queries.get_account_by_name(self.db, "missing"))

    def test_get_directory_by_path(self):
        insert_directory(self.db, "/srv/app", "app")
        self.assertEqual(queries.get_directory_by_path(self.db, "/srv/app").name, "app")
        self.assertIsNone(queries.get_directory_by_path(self.db, "/srv/none"))

    def test_no_active_account(self):
        insert_account(self.db, "idle")
        self.assertIsNone(queries.active_account(self.db))

    def test_single_active_account(self):
        insert_account(self.db, "idle")
        insert_account(self.db, "live", is_active=1)
        self.assertEqual(queries.active_account(self.db).name, "live")

    def test_several_active_accounts_latest_wins(self):
        insert_account(self.db, "older", is_active=1, updated_at="2024-01-01 00:00:00")
        insert_account(self.db, "newer", is_active=1, updated_at="2025-01-01 00:00:00")
        with self.assertLogs("claude_config.db.queries", level="WARNING"):
            account = queries.active_account(self.db)
        self.assertEqual(account.name, "newer")

    def test_directories_for_account(self):
        a = insert_account(self.db, "a")
        b = insert_account(self.db, "b")
        d1 = insert_directory(self.db, "/srv/zeta", "zeta")
        d2 = insert_directory(self.db, "/srv/alpha", "alpha")
        d3 = insert_directory(self.db, "/srv/other", "other")
        link(self.db, a, d1)
        link(self.db, a, d2)
        link(self.db, b, d3)
        names = [d.name for d in queries.directories_for_account(self.db, a)]
        self.assertEqual(names, ["alpha", "zeta"])


class TestWebdavQueries(unittest.TestCase):
    def setUp(self):
        self.db = make_db()

    def tearDown(self):
        self.db.close()

    def test_active_webdav_config(self):
        insert_webdav(self.db, "off")
        insert_webdav(self.db, "on", is_active=1, auto_sync=1, sync_interval=600)
        w = queries.active_webdav_config(self.db)
        self.assertEqual(w.name, "on")
        self.assertTrue(w.auto_sync)
        self.assertEqual(w.sync_interval, 600)

    def test_no_active_webdav_config(self):
        self.assertIsNone(queries.active_webdav_config(self.db))

    def test_recent_sync_logs_filter_and_order(self):
        one = insert_webdav(self.db, "one")
        two = insert_webdav(self.db, "two")
        insert_sync_log(self.db, one, "upload", synced_at="2025-01-01 10:00:00")
        insert_sync_log(self.db, one, "download", synced_at="2025-01-03 10:00:00")
        insert_sync_log(self.db, two, "auto", synced_at="2025-01-02 10:00:00")

        logs = queries.recent_sync_logs(self.db, one)
        self.assertEqual([l.sync_type for l in logs], [SyncType.DOWNLOAD, SyncType.UPLOAD])

        all_logs = queries.recent_sync_logs(self.db, limit=2)
        self.assertEqual(
            [l.sync_type for l in all_logs], [SyncType.DOWNLOAD, SyncType.AUTO]
        )


if __name__ == "__main__":
    unittest.main()
