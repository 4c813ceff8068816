"""
Instruction builder
- renders the four form values into the journaling-coach instruction
- values are inserted verbatim; numPrompts is display text, never parsed
"""
from langchain_core.prompts import PromptTemplate

_TEMPLATE = (
    "You are a thoughtful journaling coach helping someone develop meaningful "
    "self-reflection practices. Please create {count} journal {noun} for the following person:\n"
    "\n"
    "Age Range: {age}\n"
    "Life Situation: {issue}\n"
    "Philosophical/Spiritual Lens: {lens}\n"
    "\n"
    "Requirements:\n"
    "- Tailor the language and complexity to be age-appropriate for someone in the {age} age range\n"
    "- Focus specifically on helping them explore \"{issue}\"\n"
    "- Frame the prompts through a {lens} perspective, incorporating relevant principles "
    "and wisdom from this tradition\n"
    "- Make each prompt open-ended to encourage deep reflection\n"
    "- Ensure prompts are specific enough to be actionable but broad enough to allow "
    "personal interpretation\n"
    "- Include gentle guidance on how to approach the prompt if helpful\n"
    "\n"
    "Please provide thoughtful, compassionate prompts that will genuinely help this person "
    "gain insight and clarity."
)

_PROMPT = PromptTemplate.from_template(_TEMPLATE)

_SINGLE = "1"
_RANGE = "3-5"


def prompt_count_phrase(num_prompts: str) -> str:
    """'3-5' reads as '3 to 5'; every other value is used as given."""
    return "3 to 5" if num_prompts == _RANGE else num_prompts


def prompt_noun(num_prompts: str) -> str:
    return "prompt" if num_prompts == _SINGLE else "prompts"


def render_instruction(age: str, issue: str, lens: str, num_prompts: str) -> str:
    return _PROMPT.format(
        count=prompt_count_phrase(num_prompts),
        noun=prompt_noun(num_prompts),
        age=age,
        issue=issue,
        lens=lens,
    )
