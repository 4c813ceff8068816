"""
Generation providers
- one capability: accept an instruction, model id and output budget; return text or fail
- the default implementation drives a LangChain chat model (anthropic / google / openai)
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from .configuration import Settings
from .errors import ConfigurationError, UpstreamError

ModelFactory = Callable[[str, int], BaseChatModel]


class GenerationProvider(Protocol):
    name: str

    def generate(self, instruction: str, *, model: str, max_tokens: int) -> str:
        ...


def first_text(message: BaseMessage) -> str:
    """Return the first text artifact of a chat reply, unmodified."""
    content = getattr(message, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        for block in content:
            if isinstance(block, str):
                return block
            if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str):
                return block["text"]
    raise UpstreamError("Provider response contained no text content.")


class ChatModelProvider:
    """Sends one user-role message per call to a freshly built chat model."""

    def __init__(self, name: str, factory: ModelFactory):
        self.name = name
        self._factory = factory

    def generate(self, instruction: str, *, model: str, max_tokens: int) -> str:
        try:
            reply = self._factory(model, max_tokens).invoke([HumanMessage(content=instruction)])
        except Exception as exc:
            raise UpstreamError(str(exc) or exc.__class__.__name__, cause=exc) from exc
        return first_text(reply)


def _common_kwargs(settings: Settings) -> Dict[str, Any]:
    # single outbound call per request: the SDK must not retry on its own
    kwargs: Dict[str, Any] = {"max_retries": 0}
    if settings.llm_timeout is not None:
        kwargs["timeout"] = settings.llm_timeout
    return kwargs


def _anthropic(settings: Settings, api_key: str) -> ModelFactory:
    def factory(model: str, max_tokens: int) -> BaseChatModel:
        return ChatAnthropic(model=model, max_tokens=max_tokens, api_key=api_key, **_common_kwargs(settings))

    return factory


def _google(settings: Settings, api_key: str) -> ModelFactory:
    def factory(model: str, max_tokens: int) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=model,
            max_output_tokens=max_tokens,
            api_key=api_key,
            **_common_kwargs(settings),
        )

    return factory


def _openai(settings: Settings, api_key: str) -> ModelFactory:
    def factory(model: str, max_tokens: int) -> BaseChatModel:
        return ChatOpenAI(model=model, max_tokens=max_tokens, api_key=api_key, **_common_kwargs(settings))

    return factory


_FACTORIES: Dict[str, Callable[[Settings, str], ModelFactory]] = {
    "anthropic": _anthropic,
    "google": _google,
    "openai": _openai,
}

_KEY_NAMES = {
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GOOGLE_API_KEY (or GEMINI_API_KEY)",
    "openai": "OPENAI_API_KEY",
}


def credential_name(provider: str) -> str:
    """Environment variable(s) holding the API key for a provider."""
    return _KEY_NAMES.get(provider, "an API key")


def build_provider(settings: Settings, factory: Optional[ModelFactory] = None) -> GenerationProvider:
    """Build the configured provider, failing fast when its credential is absent."""
    name = settings.llm_provider
    if name not in _FACTORIES:
        raise ConfigurationError(f"Unknown LLM_PROVIDER {name!r}; expected one of {sorted(_FACTORIES)}.")
    if factory is not None:
        return ChatModelProvider(name, factory)
    api_key = settings.api_key_for(name)
    if not api_key:
        raise ConfigurationError(f"Missing {credential_name(name)}.")
    return ChatModelProvider(name, _FACTORIES[name](settings, api_key))
