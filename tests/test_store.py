import threading
import unittest
from datetime import datetime, timezone

from projecthub.models import Project
from projecthub.store import ProjectStore


class ProjectStoreTests(unittest.TestCase):
    def test_seeded_store_has_three_projects(self):
        now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        store = ProjectStore.seeded(now=now)
        self.assertEqual(len(store), 3)
        for pid in ("1", "2", "3"):
            proj = store.get(pid)
            self.assertIsNotNone(proj)
            self.assertEqual(proj.name, f"Project {pid}")
            self.assertEqual(proj.open_issues, ["1", "2"])
            self.assertEqual(proj.open_prs, ["1", "2"])
            self.assertEqual(proj.created_at, now)
            self.assertEqual(proj.updated_at, now)

    def test_seed_projects_do_not_share_lists(self):
        store = ProjectStore.seeded()
        store.get("1").open_issues.append("3")
        self.assertEqual(store.get("2").open_issues, ["1", "2"])

    def test_get_unknown_returns_none(self):
        store = ProjectStore()
        self.assertIsNone(store.get("99"))
        self.assertIsNone(store.get(""))

    def test_insert_overwrites_same_id(self):
        store = ProjectStore()
        store.insert(Project(id="1", name="first"))
        store.insert(Project(id="1", name="second"))
        self.assertEqual(len(store), 1)
        self.assertEqual(store.get("1").name, "second")

    def test_all_returns_snapshot(self):
        store = ProjectStore.seeded()
        snapshot = store.all()
        snapshot.clear()
        store.insert(Project(id="4", name="X"))
        self.assertEqual(len(store.all()), 4)
        self.assertEqual({p.id for p in store.all()}, {"1", "2", "3", "4"})

    def test_concurrent_inserts_and_reads(self):
        store = ProjectStore()
        errors = []

        def writer(offset):
            for i in range(200):
                store.insert(Project(id=f"{offset}-{i}", name="p"))

        def reader():
            try:
                for _ in range(200):
                    store.all()
                    len(store)
            except RuntimeError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertEqual(len(store), 800)


if __name__ == "__main__":
    unittest.main()
