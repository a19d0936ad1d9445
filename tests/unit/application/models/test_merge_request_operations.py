import pytest

from gitlab_api_models.application.exceptions.model_error import MissingClientError, MissingIdentifierError
from gitlab_api_models.application.models.merge_request import MergeRequest
from gitlab_api_models.application.models.note import Note
from gitlab_api_models.application.models.project import Project
from gitlab_api_models.application.models.user import User


@pytest.fixture
def mr(mock_client, project):
    return MergeRequest(project, 7, mock_client)


def test_show_rehydrates_a_new_instance(mr, mr_api, mock_client, mr_payload):
    mr_api.show.return_value = mr_payload

    fresh = mr.show()

    mock_client.api.assert_called_with("merge_requests")
    mr_api.show.assert_called_once_with(42, 7)
    assert fresh is not mr
    assert fresh.title == "Add login form"
    assert mr.title is None


def test_update_passes_params(mr, mr_api, mr_payload):
    mr_api.update.return_value = {**mr_payload, "title": "Renamed"}

    fresh = mr.update({"title": "Renamed"})

    mr_api.update.assert_called_once_with(42, 7, {"title": "Renamed"})
    assert fresh.title == "Renamed"


def test_close_without_comment(mr, mr_api, mr_payload):
    mr_api.update.return_value = {**mr_payload, "state": "closed"}

    fresh = mr.close()

    mr_api.add_note.assert_not_called()
    mr_api.update.assert_called_once_with(42, 7, {"state_event": "close"})
    assert fresh.is_closed()


def test_close_with_comment_posts_note_first(mr, mr_api, mr_payload):
    mr_api.add_note.return_value = {"id": 1, "body": "Superseded"}
    mr_api.update.return_value = {**mr_payload, "state": "closed"}

    mr.close("Superseded")

    mr_api.add_note.assert_called_once_with(42, 7, "Superseded")
    mr_api.update.assert_called_once_with(42, 7, {"state_event": "close"})


def test_close_with_empty_comment_skips_note(mr, mr_api, mr_payload):
    mr_api.update.return_value = mr_payload

    mr.close("")

    mr_api.add_note.assert_not_called()


def test_reopen_and_open(mr, mr_api, mr_payload):
    mr_api.update.return_value = mr_payload

    mr.reopen()
    mr.open()

    assert mr_api.update.call_count == 2
    for call in mr_api.update.call_args_list:
        assert call.args == (42, 7, {"state_event": "reopen"})


def test_merge_sends_commit_message(mr, mr_api, mr_payload):
    mr_api.merge.return_value = {**mr_payload, "state": "merged"}

    fresh = mr.merge("Merge login form")

    mr_api.merge.assert_called_once_with(42, 7, {"merge_commit_message": "Merge login form"})
    assert fresh.state == "merged"


def test_merged_uses_state_event(mr, mr_api, mr_payload):
    mr_api.update.return_value = {**mr_payload, "state": "merged"}

    mr.merged()

    mr_api.update.assert_called_once_with(42, 7, {"state_event": "merge"})


def test_add_comment_returns_note_bound_to_mr(mr, mr_api, mock_client):
    mr_api.add_note.return_value = {"id": 11, "body": "LGTM", "author": {"id": 5, "username": "ana"}}

    note = mr.add_comment("LGTM")

    assert isinstance(note, Note)
    assert note.body == "LGTM"
    assert note.parent is mr
    assert note.parent_type == "MergeRequest"
    assert isinstance(note.author, User)
    assert note.client is mock_client


def test_show_comments(mr, mr_api):
    mr_api.show_notes.return_value = [{"id": 1, "body": "first"}, {"id": 2, "body": "second"}]

    notes = mr.show_comments()

    mr_api.show_notes.assert_called_once_with(42, 7)
    assert [n.body for n in notes] == ["first", "second"]
    assert all(n.parent is mr for n in notes)


def test_show_comments_empty(mr, mr_api):
    mr_api.show_notes.return_value = []

    assert mr.show_comments() == []


def test_changes_uses_iid(mr, mr_api, mr_payload):
    mr_api.changes.return_value = {**mr_payload, "changes": [{"old_path": "a.py", "new_path": "a.py"}]}

    fresh = mr.changes()

    mr_api.changes.assert_called_once_with(42, 7)
    assert [d.path for d in fresh.file_diffs] == ["a.py"]


def test_commits_returns_raw_payload(mr, mr_api):
    mr_api.commits.return_value = [{"id": "abc123", "title": "Add form"}]

    assert mr.commits() == [{"id": "abc123", "title": "Add form"}]


@pytest.mark.parametrize("operation", ["subscribe", "unsubscribe"])
def test_subscription_returns_new_instance(mr, mr_api, mr_payload, operation):
    getattr(mr_api, operation).return_value = mr_payload

    fresh = getattr(mr, operation)()

    getattr(mr_api, operation).assert_called_once_with(42, 7)
    assert fresh is not mr
    assert fresh.title == "Add login form"


@pytest.mark.parametrize("operation", ["subscribe", "unsubscribe"])
def test_subscription_not_modified_returns_self(mr, mr_api, operation):
    getattr(mr_api, operation).return_value = None

    assert getattr(mr, operation)() is mr


def test_operations_require_a_client():
    mr = MergeRequest(Project(42), 7)

    with pytest.raises(MissingClientError):
        mr.show()


@pytest.mark.parametrize(
    "project, iid, missing",
    [
        (Project(None), 7, "id"),
        (None, 7, "project"),
        (Project(42), None, "iid"),
    ],
)
def test_operations_refuse_missing_identifiers(mock_client, mr_api, project, iid, missing):
    mr = MergeRequest(project, iid, mock_client)

    with pytest.raises(MissingIdentifierError) as exc:
        mr.show()

    assert exc.value.identifier == missing
    mr_api.show.assert_not_called()


def test_close_with_missing_iid_posts_nothing(project, mock_client, mr_api):
    mr = MergeRequest(project, None, mock_client)

    with pytest.raises(MissingIdentifierError):
        mr.close("Superseded")

    mr_api.add_note.assert_not_called()
    mr_api.update.assert_not_called()
