import pathlib
import sys

import streamlit as st

from typing import List

# Ensure the same import path as the server: PYTHONPATH=src
ROOT = pathlib.Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from journal_guru import composer
from journal_guru.configuration import settings
from journal_guru.errors import ComposerValidationError
from journal_guru.options import AGE_RANGES, ISSUES, LENSES, OTHER, PROMPT_COUNTS, Option, label_for, values

_WIDGET_KEYS = ("age", "issue", "custom_issue", "lens", "custom_lens", "num_prompts")


def _select(label: str, placeholder: str, options: List[Option], key: str) -> str:
    return st.selectbox(
        label,
        [""] + values(options),
        format_func=lambda v: placeholder if v == "" else label_for(options, v),
        key=key,
    )


def _reset():
    for key in _WIDGET_KEYS:
        st.session_state.pop(key, None)
    st.session_state.view = composer.reset()


st.set_page_config(page_title="Journal Guru", page_icon="📝")
st.title("📝 Journal Guru")
st.caption("Get personalized journal prompts powered by AI")

if "view" not in st.session_state:
    st.session_state.view = composer.reset()

age = _select("What is your age?", "Select your age range", AGE_RANGES, "age")

issue = _select(
    "What issue are you hoping to explore with journal prompts?",
    "Select an issue to explore",
    ISSUES,
    "issue",
)
custom_issue = ""
if issue == OTHER:
    custom_issue = st.text_input("Custom issue", placeholder="Enter your custom issue here...", key="custom_issue")

lens = _select(
    "What lens would you like the prompts to take on?",
    "Select a philosophical lens",
    LENSES,
    "lens",
)
custom_lens = ""
if lens == OTHER:
    custom_lens = st.text_input(
        "Custom lens", placeholder="Enter your custom philosophical lens here...", key="custom_lens"
    )

num_prompts = _select("How many prompts would you like?", "Select number of prompts", PROMPT_COUNTS, "num_prompts")

# The form is rebuilt wholesale from the widgets on every rerun.
form = composer.FormState(
    age=age,
    issue=issue,
    custom_issue=custom_issue,
    lens=lens,
    custom_lens=custom_lens,
    num_prompts=num_prompts,
)
st.session_state.view = st.session_state.view.model_copy(update={"form": form})

if st.button("✨ Generate Journal Prompts", use_container_width=True, type="primary"):
    client = composer.PromptsClient(settings.api_url)
    try:
        with st.spinner("Generating Your Prompts..."):
            st.session_state.view = composer.generate(st.session_state.view, client)
    except ComposerValidationError as e:
        st.warning(str(e))

view = st.session_state.view

if view.error:
    st.error(view.error)
    st.caption(f"Make sure your backend server is running on {settings.api_url}")

if view.prompts:
    st.subheader("Your Journal Prompts")
    # st.code keeps whitespace and carries the copy-to-clipboard button
    st.code(view.prompts, language=None)
    st.button("Generate New Prompts", on_click=_reset, use_container_width=True)

st.caption("Your prompts are generated in real-time")
