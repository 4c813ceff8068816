"""Relay between a validated form submission and the generation provider."""

from __future__ import annotations

import logging

from journal_guru.errors import UpstreamError, ValidationError
from journal_guru.prompting import render_instruction
from journal_guru.providers import GenerationProvider

from ..schemas.prompts import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class RelayService:
    """Stateless: one provider call per request, nothing kept between calls."""

    def __init__(self, provider: GenerationProvider, model: str, max_tokens: int = 2048):
        self.provider = provider
        self.model = model
        self.max_tokens = max_tokens

    def generate(self, request: GenerationRequest) -> GenerationResult:
        if not (request.age and request.issue and request.lens and request.num_prompts):
            raise ValidationError()

        instruction = render_instruction(
            age=request.age,
            issue=request.issue,
            lens=request.lens,
            num_prompts=request.num_prompts,
        )

        logger.info("Calling %s API... model=%s max_tokens=%d", self.provider.name, self.model, self.max_tokens)
        try:
            text = self.provider.generate(instruction, model=self.model, max_tokens=self.max_tokens)
        except UpstreamError:
            logger.exception("Error generating prompts")
            raise
        except Exception as exc:
            logger.exception("Error generating prompts")
            raise UpstreamError(str(exc) or exc.__class__.__name__, cause=exc) from exc

        if not isinstance(text, str):
            raise UpstreamError("Provider returned no text.")

        logger.info("Successfully generated prompts chars=%d", len(text))
        return GenerationResult(prompts=text)
