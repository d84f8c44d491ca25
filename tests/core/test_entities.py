"""Tests for domain entities."""

import pytest

from sherror.core.domain.entities import (
    DEFAULT_CONFIG_FILENAME,
    Discussion,
    ErrorDefinition,
    RepositoryRef,
    SherrorConfig,
)
from sherror.core.exceptions import ValidationError


def make_error(code=1, **kwargs):
    defaults = {"app_message": "m", "post_title": f"Error {code}", "post_body": "b"}
    defaults.update(kwargs)
    return ErrorDefinition(code=code, **defaults)


class TestErrorDefinition:
    """Tests for ErrorDefinition."""

    @pytest.mark.parametrize("link, number", [
        ("https://github.com/polyseam/sherror/discussions/36", 36),
        ("https://github.com/polyseam/sherror/discussions/36/", 36),
        ("https://github.com/polyseam/sherror/discussions/7?sort=new", 7),
    ])
    def test_discussion_number(self, link, number):
        assert make_error(discussion_link=link).discussion_number() == number

    @pytest.mark.parametrize("link", [
        None,
        "",
        "https://github.com/polyseam/sherror/discussions/",
        "https://github.com/polyseam/sherror/discussions/abc",
    ])
    def test_invalid_discussion_number(self, link):
        with pytest.raises(ValidationError) as exc_info:
            make_error(code=4, discussion_link=link).discussion_number()

        assert exc_info.value.code == 4

    def test_to_fields_order(self):
        error = make_error(discussion_link="https://x/discussions/1")

        assert list(error.to_fields()) == [
            "code", "app_message", "post_title", "post_body", "discussion_link",
        ]

    def test_to_fields_omits_missing_link(self):
        assert "discussion_link" not in make_error().to_fields()

    def test_is_synced(self):
        assert not make_error().is_synced
        assert make_error(discussion_link="https://x/discussions/1").is_synced


class TestSherrorConfig:
    """Tests for SherrorConfig."""

    def test_valid(self):
        assert SherrorConfig("cat", [make_error(1), make_error(2)]).validate() == []

    def test_missing_category(self):
        assert SherrorConfig("  ", []).validate() == ["Missing category_name"]

    def test_duplicate_codes(self):
        problems = SherrorConfig("cat", [make_error(1), make_error(1)]).validate()

        assert problems == ["Duplicate error code 1 at errors[1]"]

    def test_boolean_code_rejected(self):
        problems = SherrorConfig("cat", [make_error(True)]).validate()

        assert "non-integer code" in problems[0]

    def test_errors_must_be_a_list(self):
        assert SherrorConfig("cat", None).validate() == ["Missing errors list"]

    def test_find(self):
        config = SherrorConfig("cat", [make_error(1), make_error(2)])

        assert config.find(2).code == 2
        assert config.find(3) is None

    def test_copy_is_independent(self):
        config = SherrorConfig("cat", [make_error(1)])

        snapshot = config.copy()
        snapshot.errors[0].discussion_link = "https://x/discussions/1"

        assert config.errors[0].discussion_link is None

    def test_default_path(self):
        assert str(SherrorConfig("cat").path) == DEFAULT_CONFIG_FILENAME


class TestRemoteEntities:
    """Tests for repository and discussion entities."""

    def test_repository_ref(self):
        ref = RepositoryRef(owner="polyseam", name="sherror")

        assert str(ref) == "polyseam/sherror"

    def test_discussion_matches(self):
        error = make_error(post_title="t", post_body="b")

        assert Discussion(id="D", number=1, title="t", body="b").matches(error)
        assert not Discussion(id="D", number=1, title="t", body="other").matches(error)
