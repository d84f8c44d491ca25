"""Tests for the sync orchestrator."""

import pytest
from unittest.mock import Mock, call

from sherror.application.sync import SyncOrchestrator
from sherror.core.domain.entities import (
    Discussion,
    DiscussionCategory,
    ErrorDefinition,
    RepositoryInfo,
    RepositoryRef,
    SherrorConfig,
)
from sherror.core.domain.events import (
    ClearCompleted,
    ConfigWrittenBack,
    DiscussionCreated,
    DiscussionDeleted,
    DiscussionUpdated,
    EventBus,
    SyncCompleted,
    SyncStarted,
)
from sherror.core.exceptions import (
    CategoryNotFoundError,
    ConfigurationError,
    NotFoundError,
    RemoteProtocolError,
    ValidationError,
)


LINK_27 = "https://github.com/polyseam/sherror/discussions/27"


def make_error(code=1, link=None, title=None, body="if this happens, do that"):
    return ErrorDefinition(
        code=code,
        app_message=f"<red>error {code}</red>",
        post_title=title if title is not None else f"Error {code}",
        post_body=body,
        discussion_link=link,
    )


@pytest.fixture
def repository():
    return RepositoryInfo(
        id="R_1",
        owner="polyseam",
        name="sherror",
        categories=[
            DiscussionCategory(id="DIC_general", name="General"),
            DiscussionCategory(id="DIC_sherror", name="sherror-example"),
        ],
    )


@pytest.fixture
def platform(repository):
    platform = Mock()
    platform.get_repository.return_value = repository
    platform.create_discussion.side_effect = lambda repo_id, cat_id, title, body: Discussion(
        id=f"D_{title}",
        number=42,
        title=title,
        body=body,
        url="https://github.com/polyseam/sherror/discussions/42",
        category_id=cat_id,
    )
    return platform


@pytest.fixture
def locator():
    locator = Mock()
    locator.locate.return_value = RepositoryRef(owner="polyseam", name="sherror")
    return locator


@pytest.fixture
def writer():
    return Mock()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def orchestrator(platform, locator, writer, event_bus):
    return SyncOrchestrator(
        platform=platform,
        locator=locator,
        writer=writer,
        event_bus=event_bus,
    )


class TestSyncCreate:
    """Tests for errors without a discussion link."""

    def test_creates_discussion_and_writes_back_once(self, orchestrator, platform, writer):
        config = SherrorConfig(category_name="sherror-example", errors=[make_error()])

        result = orchestrator.sync(config)

        platform.create_discussion.assert_called_once_with(
            "R_1", "DIC_sherror", "Error 1", "if this happens, do that"
        )
        assert config.errors[0].discussion_link == "https://github.com/polyseam/sherror/discussions/42"
        writer.writeback.assert_called_once_with(config)
        assert result.created == [1]
        assert result.wrote_back

    def test_writes_back_once_for_many_new_links(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(1), make_error(2), make_error(3)],
        )

        result = orchestrator.sync(config)

        assert platform.create_discussion.call_count == 3
        writer.writeback.assert_called_once_with(config)
        assert result.created == [1, 2, 3]

    def test_processes_errors_in_declaration_order(self, orchestrator, platform):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(3), make_error(1), make_error(2)],
        )

        orchestrator.sync(config)

        titles = [c.args[2] for c in platform.create_discussion.call_args_list]
        assert titles == ["Error 3", "Error 1", "Error 2"]


class TestSyncUpdate:
    """Tests for errors that already have a discussion link."""

    def test_identical_discussion_is_a_noop(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(link=LINK_27)],
        )
        platform.get_discussion.return_value = Discussion(
            id="D_27",
            number=27,
            title="Error 1",
            body="if this happens, do that",
        )

        result = orchestrator.sync(config)

        platform.get_discussion.assert_called_once_with("polyseam", "sherror", 27)
        platform.update_discussion.assert_not_called()
        platform.create_discussion.assert_not_called()
        writer.writeback.assert_not_called()
        assert result.unchanged == [1]
        assert not result.wrote_back

    def test_changed_body_is_updated(self, orchestrator, platform, writer, event_bus):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(link=LINK_27, body="new body")],
        )
        platform.get_discussion.return_value = Discussion(
            id="D_27", number=27, title="Error 1", body="old body",
        )

        result = orchestrator.sync(config)

        platform.update_discussion.assert_called_once_with("D_27", "Error 1", "new body")
        writer.writeback.assert_not_called()
        assert result.updated == [1]

        updated = [e for e in event_bus.get_history() if isinstance(e, DiscussionUpdated)]
        assert updated[0].number == 27
        assert updated[0].changed_fields == ("body",)

    def test_missing_discussion_raises(self, orchestrator, platform):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(link=LINK_27)],
        )
        platform.get_discussion.return_value = None

        with pytest.raises(NotFoundError, match="#27"):
            orchestrator.sync(config)

    def test_link_without_number_is_rejected(self, orchestrator, platform):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(link="https://github.com/polyseam/sherror/discussions")],
        )

        with pytest.raises(ValidationError):
            orchestrator.sync(config)

        platform.get_discussion.assert_not_called()


class TestSyncResolution:
    """Tests for repository and category resolution."""

    def test_unknown_category_aborts_before_any_mutation(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="does-not-exist",
            errors=[make_error(1), make_error(2, link=LINK_27)],
        )

        with pytest.raises(CategoryNotFoundError) as exc_info:
            orchestrator.sync(config)

        assert exc_info.value.available == ["General", "sherror-example"]
        assert "General" in str(exc_info.value)
        assert "sherror-example" in str(exc_info.value)
        platform.create_discussion.assert_not_called()
        platform.update_discussion.assert_not_called()
        platform.get_discussion.assert_not_called()
        writer.writeback.assert_not_called()

    def test_category_not_found_is_a_not_found_error(self, orchestrator):
        config = SherrorConfig(category_name="nope", errors=[make_error()])

        with pytest.raises(NotFoundError):
            orchestrator.sync(config)

    def test_missing_repository_raises(self, orchestrator, platform):
        platform.get_repository.return_value = None
        config = SherrorConfig(category_name="sherror-example", errors=[make_error()])

        with pytest.raises(NotFoundError, match="polyseam/sherror"):
            orchestrator.sync(config)

        platform.create_discussion.assert_not_called()

    def test_locator_failure_propagates(self, orchestrator, locator, platform):
        locator.locate.side_effect = ConfigurationError("Unrecognized git remote URL")
        config = SherrorConfig(category_name="sherror-example", errors=[make_error()])

        with pytest.raises(ConfigurationError):
            orchestrator.sync(config)

        platform.get_repository.assert_not_called()

    def test_duplicate_codes_are_rejected(self, orchestrator, locator):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(1), make_error(1)],
        )

        with pytest.raises(ConfigurationError, match="Duplicate"):
            orchestrator.sync(config)

        locator.locate.assert_not_called()


class TestSyncFailures:
    """Tests for partial runs."""

    def test_invalid_entry_stops_the_run(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(1), make_error(2, body=""), make_error(3)],
        )

        with pytest.raises(ValidationError) as exc_info:
            orchestrator.sync(config)

        assert exc_info.value.code == 2
        assert exc_info.value.index == 1
        assert platform.create_discussion.call_count == 1
        assert config.errors[2].discussion_link is None

    def test_links_created_before_a_failure_are_written_back(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(1), make_error(2)],
        )
        created = Discussion(
            id="D_1", number=42, url="https://github.com/polyseam/sherror/discussions/42",
        )
        platform.create_discussion.side_effect = [created, RemoteProtocolError("boom")]

        with pytest.raises(RemoteProtocolError):
            orchestrator.sync(config)

        assert config.errors[0].discussion_link == created.url
        assert config.errors[1].discussion_link is None
        writer.writeback.assert_called_once_with(config)

    def test_failure_without_new_links_does_not_write_back(self, orchestrator, platform, writer):
        config = SherrorConfig(
            category_name="sherror-example",
            errors=[make_error(1, link=LINK_27)],
        )
        platform.get_discussion.side_effect = RemoteProtocolError("boom")

        with pytest.raises(RemoteProtocolError):
            orchestrator.sync(config)

        writer.writeback.assert_not_called()


class TestSyncEvents:
    """Tests for published events."""

    def test_event_sequence(self, orchestrator, event_bus):
        config = SherrorConfig(category_name="sherror-example", errors=[make_error()])

        orchestrator.sync(config)

        types = [type(e) for e in event_bus.get_history()]
        assert types == [SyncStarted, DiscussionCreated, ConfigWrittenBack, SyncCompleted]


class TestClear:
    """Tests for bulk clear."""

    @pytest.fixture
    def discussions(self):
        return [
            Discussion(id=f"D_{n}", number=n, title=f"Error {n}")
            for n in (10, 11, 12)
        ]

    @pytest.fixture
    def linked_config(self):
        return SherrorConfig(
            category_name="sherror-example",
            errors=[
                make_error(n, link=f"https://github.com/polyseam/sherror/discussions/{n + 9}")
                for n in (1, 2, 3)
            ],
        )

    def test_deletes_all_and_clears_links(
        self, orchestrator, platform, writer, discussions, linked_config, event_bus
    ):
        platform.list_discussions.return_value = discussions

        result = orchestrator.clear(linked_config)

        platform.list_discussions.assert_called_once_with("polyseam", "sherror", "DIC_sherror")
        assert platform.delete_discussion.call_args_list == [
            call("D_10"), call("D_11"), call("D_12"),
        ]
        assert all(e.discussion_link is None for e in linked_config.errors)
        writer.writeback.assert_called_once_with(linked_config)
        assert result.deleted == [10, 11, 12]
        assert result.links_cleared == 3

        history = event_bus.get_history()
        assert len([e for e in history if isinstance(e, DiscussionDeleted)]) == 3
        assert isinstance(history[-1], ClearCompleted)

    def test_missing_category_is_not_fatal(self, orchestrator, platform, writer, linked_config):
        linked_config.category_name = "other"

        result = orchestrator.clear(linked_config)

        assert not result.category_found
        platform.list_discussions.assert_not_called()
        writer.writeback.assert_not_called()
        assert linked_config.errors[0].discussion_link is not None

    def test_deletion_failure_stops_and_keeps_links(
        self, orchestrator, platform, writer, discussions, linked_config
    ):
        platform.list_discussions.return_value = discussions
        platform.delete_discussion.side_effect = [None, RemoteProtocolError("nope"), None]

        with pytest.raises(RemoteProtocolError):
            orchestrator.clear(linked_config)

        assert platform.delete_discussion.call_count == 2
        assert all(e.discussion_link for e in linked_config.errors)
        writer.writeback.assert_not_called()

    def test_nothing_to_write_when_no_links(self, orchestrator, platform, writer):
        platform.list_discussions.return_value = []
        config = SherrorConfig(category_name="sherror-example", errors=[make_error()])

        result = orchestrator.clear(config)

        assert result.deleted == []
        writer.writeback.assert_not_called()

    def test_empty_category_keeps_links(
        self, orchestrator, platform, writer, linked_config, event_bus
    ):
        platform.list_discussions.return_value = []

        result = orchestrator.clear(linked_config)

        assert result.category_found
        assert result.deleted == []
        assert result.links_cleared == 0
        assert all(e.discussion_link for e in linked_config.errors)
        platform.delete_discussion.assert_not_called()
        writer.writeback.assert_not_called()
        assert not any(isinstance(e, ClearCompleted) for e in event_bus.get_history())

    def test_blank_category_name_is_rejected(self, orchestrator, locator, linked_config):
        linked_config.category_name = "   "

        with pytest.raises(ConfigurationError, match="category_name"):
            orchestrator.clear(linked_config)

        locator.locate.assert_not_called()

    def test_duplicate_codes_are_rejected(self, orchestrator, locator, linked_config):
        linked_config.errors.append(make_error(1))

        with pytest.raises(ConfigurationError, match="Duplicate error code 1"):
            orchestrator.clear(linked_config)

        locator.locate.assert_not_called()

    def test_missing_repository_raises(self, orchestrator, platform, linked_config):
        platform.get_repository.return_value = None

        with pytest.raises(NotFoundError):
            orchestrator.clear(linked_config)
