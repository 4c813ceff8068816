"""
Prompt composer
- form state is a single frozen value, replaced on every change
- "Other" selections resolve to their free-text companion only at submission
- one POST per generate action; every failure collapses to one generic message
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict

from .errors import ComposerRequestError, ComposerValidationError
from .options import OTHER

MSG_MISSING_FIELDS = "Please fill out all fields before generating your prompts."
MSG_MISSING_ISSUE = "Please enter your custom issue in the text field."
MSG_MISSING_LENS = "Please enter your custom philosophical lens in the text field."
MSG_REQUEST_FAILED = "Failed to generate prompts. Please try again."

GENERATE_PATH = "/api/generate-prompts"


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: str = ""
    issue: str = ""
    custom_issue: str = ""
    lens: str = ""
    custom_lens: str = ""
    num_prompts: str = ""

    def update(self, **changes: str) -> "FormState":
        return self.model_copy(update=changes)


class ComposerView(BaseModel):
    """Everything the page renders: the form plus the last outcome."""

    model_config = ConfigDict(frozen=True)

    form: FormState = FormState()
    prompts: str = ""
    error: str = ""


def validate_form(form: FormState) -> None:
    if not (form.age and form.issue and form.lens and form.num_prompts):
        raise ComposerValidationError(MSG_MISSING_FIELDS)
    if form.issue == OTHER and not form.custom_issue.strip():
        raise ComposerValidationError(MSG_MISSING_ISSUE)
    if form.lens == OTHER and not form.custom_lens.strip():
        raise ComposerValidationError(MSG_MISSING_LENS)


def resolve_request(form: FormState) -> Dict[str, str]:
    """Validate and build the JSON body sent to the relay."""
    validate_form(form)
    return {
        "age": form.age,
        "issue": form.custom_issue if form.issue == OTHER else form.issue,
        "lens": form.custom_lens if form.lens == OTHER else form.lens,
        "numPrompts": form.num_prompts,
    }


class PromptsClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def generate(self, payload: Dict[str, Any]) -> str:
        try:
            resp = self.session.post(self.base_url + GENERATE_PATH, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ComposerRequestError(MSG_REQUEST_FAILED) from e
        prompts = data.get("prompts") if isinstance(data, dict) else None
        if not isinstance(prompts, str):
            raise ComposerRequestError(MSG_REQUEST_FAILED)
        return prompts


def generate(view: ComposerView, client: PromptsClient) -> ComposerView:
    """Run the generate action and return the next view.

    Validation problems raise ComposerValidationError before any request is made.
    """
    payload = resolve_request(view.form)
    try:
        prompts = client.generate(payload)
    except ComposerRequestError as e:
        return ComposerView(form=view.form, error=str(e))
    return ComposerView(form=view.form, prompts=prompts)


def reset() -> ComposerView:
    return ComposerView()
