import unittest


class NormalizeBaseUrlTests(unittest.TestCase):
    def test_adds_scheme_and_api_prefix(self):
        from app.services.urls import normalize_base_url

        self.assertEqual(
            normalize_base_url("myspace.backlog.jp/projects/FOO"),
            "https://myspace.backlog.jp/api/v2/projects/FOO",
        )

    def test_rewrites_web_url(self):
        from app.services.urls import normalize_base_url

        self.assertEqual(
            normalize_base_url("https://myspace.backlog.jp/projects/FOO/"),
            "https://myspace.backlog.jp/api/v2/projects/FOO",
        )

    def test_keeps_already_normalized_url(self):
        from app.services.urls import normalize_base_url

        url = "https://myspace.backlog.jp/api/v2/projects/FOO"
        self.assertEqual(normalize_base_url(url), url)
        self.assertEqual(normalize_base_url(normalize_base_url(url)), url)

    def test_keeps_explicit_http_scheme(self):
        from app.services.urls import normalize_base_url

        self.assertEqual(
            normalize_base_url("http://localhost:8080/projects/BAR"),
            "http://localhost:8080/api/v2/projects/BAR",
        )

    def test_rejects_url_without_project(self):
        from app.services.urls import normalize_base_url

        for raw in ["", "   ", "myspace.backlog.jp", "https://myspace.backlog.jp/issues/FOO"]:
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    normalize_base_url(raw)


class DerivedUrlTests(unittest.TestCase):
    def test_root_url_strips_project_segment(self):
        from app.services.urls import root_url

        self.assertEqual(
            root_url("https://myspace.backlog.jp/api/v2/projects/FOO"),
            "https://myspace.backlog.jp/api/v2",
        )

    def test_project_name_is_last_segment(self):
        from app.services.urls import project_name

        self.assertEqual(project_name("https://myspace.backlog.jp/api/v2/projects/FOO"), "FOO")

    def test_issue_url(self):
        from app.services.urls import issue_url

        self.assertEqual(
            issue_url("https://myspace.backlog.jp/api/v2/projects/FOO", "FOO-7"),
            "https://myspace.backlog.jp/api/v2/issues/FOO-7.json",
        )


if __name__ == "__main__":
    unittest.main()
