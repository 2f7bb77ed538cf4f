"""Unit tests for gravatar URL construction."""

import hashlib

from infrastructure.gravatar import gravatar_url


class TestGravatarUrl:
    def test_uses_md5_of_normalised_email(self):
        digest = hashlib.md5(b"jane@example.com").hexdigest()

        assert f"/avatar/{digest}?" in gravatar_url("  Jane@Example.com ")

    def test_default_options(self):
        url = gravatar_url("jane@example.com")

        assert url.startswith("//www.gravatar.com/avatar/")
        assert url.endswith("?s=200&r=pg&d=mm")

    def test_custom_options(self):
        url = gravatar_url("jane@example.com", size=80, rating="g", default="identicon")

        assert url.endswith("?s=80&r=g&d=identicon")
