import pytest
import requests

from journal_guru import composer
from journal_guru.composer import ComposerView, FormState, PromptsClient
from journal_guru.errors import ComposerRequestError, ComposerValidationError


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.posts = []

    def post(self, url, json=None, timeout=None):
        self.posts.append({"url": url, "json": json})
        if self.error is not None:
            raise self.error
        return self.response


def _complete_form(**changes):
    return FormState(age="26-35", issue="new job", lens="stoic", num_prompts="3-5").update(**changes)


def test_form_state_is_replaced_not_mutated():
    first = FormState()
    second = first.update(age="26-35")

    assert first.age == ""
    assert second.age == "26-35"
    with pytest.raises(Exception):
        first.age = "36-45"


@pytest.mark.parametrize("field", ["age", "issue", "lens", "num_prompts"])
def test_any_blank_field_blocks(field):
    with pytest.raises(ComposerValidationError, match="fill out all fields"):
        composer.resolve_request(_complete_form(**{field: ""}))


def test_other_issue_requires_text():
    with pytest.raises(ComposerValidationError, match="custom issue"):
        composer.resolve_request(_complete_form(issue="Other", custom_issue="   "))


def test_other_lens_requires_text():
    with pytest.raises(ComposerValidationError, match="custom philosophical lens"):
        composer.resolve_request(_complete_form(lens="Other", custom_lens=""))


def test_other_resolves_to_custom_text():
    payload = composer.resolve_request(
        _complete_form(issue="Other", custom_issue="empty nest", lens="Other", custom_lens="taoist")
    )

    assert payload == {"age": "26-35", "issue": "empty nest", "lens": "taoist", "numPrompts": "3-5"}


def test_custom_text_ignored_without_other():
    payload = composer.resolve_request(_complete_form(custom_issue="ignored", custom_lens="ignored"))

    assert payload["issue"] == "new job"
    assert payload["lens"] == "stoic"


def test_blocked_submission_makes_no_request():
    session = FakeSession(response=FakeResponse(payload={"prompts": "x"}))
    view = ComposerView(form=_complete_form(lens="Other"))

    with pytest.raises(ComposerValidationError):
        composer.generate(view, PromptsClient("http://localhost:3001", session=session))

    assert session.posts == []


def test_generate_posts_once_and_keeps_text_verbatim():
    text = "1. Reflect...\n\n   2. Notice.\n"
    session = FakeSession(response=FakeResponse(payload={"prompts": text}))
    client = PromptsClient("http://localhost:3001/", session=session)

    view = composer.generate(ComposerView(form=_complete_form(), error="old"), client)

    assert view.prompts == text
    assert view.error == ""
    assert session.posts == [
        {
            "url": "http://localhost:3001/api/generate-prompts",
            "json": {"age": "26-35", "issue": "new job", "lens": "stoic", "numPrompts": "3-5"},
        }
    ]


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("refused")),
        FakeSession(response=FakeResponse(status_code=500, payload={"error": "Failed to generate prompts"})),
        FakeSession(response=FakeResponse(status_code=200, payload=None)),
        FakeSession(response=FakeResponse(status_code=200, payload={"other": 1})),
    ],
)
def test_any_failure_becomes_generic_message(session):
    view = composer.generate(ComposerView(form=_complete_form(), prompts="old"), PromptsClient("http://x", session=session))

    assert view.error == composer.MSG_REQUEST_FAILED
    assert view.prompts == ""
    assert len(session.posts) == 1


def test_client_raises_request_error():
    client = PromptsClient("http://x", session=FakeSession(error=requests.Timeout("slow")))

    with pytest.raises(ComposerRequestError):
        client.generate({"age": "1"})


def test_reset_clears_everything():
    view = ComposerView(form=_complete_form(issue="Other", custom_issue="x"), prompts="text", error="err")

    assert composer.reset() == ComposerView()
    assert composer.reset().form == FormState()
    assert view.prompts == "text"
