import unittest


class BugPendingOperationTests(unittest.TestCase):
    def test_operation_from_id_and_delete_tag(self):
        from app.models import Bug, PendingOperation

        self.assertEqual(Bug(title="new").pending_operation, PendingOperation.CREATE)
        self.assertEqual(Bug(id="FOO-1").pending_operation, PendingOperation.UPDATE)
        self.assertEqual(Bug(id="FOO-1", delete=True).pending_operation, PendingOperation.DELETE)
        self.assertIsNone(Bug(title="local", delete=True).pending_operation)

    def test_marked_for_delete_returns_tagged_copy(self):
        from app.models import Bug, PendingOperation

        bug = Bug(id="FOO-1", title="t")
        tagged = bug.marked_for_delete()

        self.assertFalse(bug.delete)
        self.assertTrue(tagged.delete)
        self.assertEqual(tagged.title, "t")
        self.assertEqual(tagged.pending_operation, PendingOperation.DELETE)

    def test_bug_is_immutable(self):
        from pydantic import ValidationError

        from app.models import Bug

        bug = Bug(id="FOO-1")
        with self.assertRaises(ValidationError):
            bug.title = "changed"


class SettingsTests(unittest.TestCase):
    def test_closed_labels_parsing(self):
        from app.config import Settings

        s = Settings(closed_status_labels=" 完了, Closed ,,")

        self.assertEqual(s.closed_labels(), {"完了", "Closed"})

    def test_default_closed_label(self):
        from app.config import Settings

        self.assertEqual(Settings().closed_labels(), {"完了"})


if __name__ == "__main__":
    unittest.main()
