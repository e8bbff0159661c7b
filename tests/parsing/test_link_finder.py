from remote_outcome.parsing.link_finder import find_first_url, find_urls


class TestFindUrls:
    def test_single_url(self):
        assert find_urls("visit https://github.com/user/repo/pull/new/feature\n") == [
            "https://github.com/user/repo/pull/new/feature"
        ]

    def test_document_order(self):
        text = "a https://one.example.com/x b http://two.example.com/y"
        assert find_urls(text) == [
            "https://one.example.com/x",
            "http://two.example.com/y",
        ]

    def test_query_string_kept(self):
        text = "remote:   https://gitlab.com/user/repo/-/merge_requests/new?x=1\n"
        assert find_urls(text) == ["https://gitlab.com/user/repo/-/merge_requests/new?x=1"]

    def test_percent_encoded_query(self):
        url = (
            "https://gitlab.com/user/repo/-/merge_requests/new"
            "?merge_request%5Bsource_branch%5D=feat"
        )
        assert find_urls(f"remote:   {url}\n") == [url]

    def test_trailing_punctuation_trimmed(self):
        assert find_urls("See https://example.com/docs.") == ["https://example.com/docs"]

    def test_schema_less_domain_ignored(self):
        assert find_urls("To github.com:user/repo.git\nsee example.com/page") == []

    def test_email_ignored(self):
        assert find_urls("contact admin@example.com") == []

    def test_mailto_ignored(self):
        assert find_urls("write to mailto:admin@example.com") == []

    def test_schema_relative_ignored(self):
        assert find_urls("a//b c //example.com/x") == []

    def test_mailto_before_web_link_skipped(self):
        text = "mailto:a@b.com https://x.example.com/y"
        assert find_urls(text) == ["https://x.example.com/y"]

    def test_empty(self):
        assert find_urls("") == []

    def test_returns_exact_substring(self):
        text = "link: https://example.com/Some/Path\n"
        url = find_urls(text)[0]
        assert url in text
        assert url == "https://example.com/Some/Path"


class TestFindFirstUrl:
    def test_first(self):
        assert find_first_url("x https://a.example.com y https://b.example.com") == (
            "https://a.example.com"
        )

    def test_none(self):
        assert find_first_url("no links here") is None
