import asyncio
import logging
import time
from typing import Optional

from code_optimizer.core.config import Settings, get_settings
from code_optimizer.core.prompts import build_prompt
from code_optimizer.integrations.ollama_client import OllamaClient
from code_optimizer.schemas.optimizer import OptimizationRequest, OptimizationResult

logger = logging.getLogger(__name__)


class CodeOptimizerService:
    """
    Best-effort code rewrite through the local model.

    `optimize` never raises for endpoint problems: the failure is logged and
    encoded in the result, and the original code is handed back so callers
    can always use `optimized_code`.
    """

    def __init__(self, settings: Optional[Settings] = None, llm: Optional[OllamaClient] = None):
        self.settings = settings or get_settings()
        self.llm = llm or OllamaClient(self.settings)

    def optimize(self, source_code: str, language: Optional[str] = None) -> OptimizationResult:
        started = time.monotonic()

        try:
            prompt = build_prompt(source_code, language=language, settings=self.settings)
            optimized = self.llm.generate(prompt)
        except Exception as e:  # never propagate to the caller
            error_message = str(e) or type(e).__name__
            logger.warning("LLM error, returning original code: %s", error_message)
            logger.info(
                "optimize model=%s outcome=failed dt_s=%.3f",
                self.settings.LLM_MODEL, time.monotonic() - started,
            )
            return OptimizationResult(
                optimized_code=source_code,
                original_code=source_code,
                succeeded=False,
                error_message=error_message,
            )

        logger.info(
            "optimize model=%s outcome=succeeded dt_s=%.3f",
            self.settings.LLM_MODEL, time.monotonic() - started,
        )
        return OptimizationResult(
            optimized_code=optimized,
            original_code=source_code,
            succeeded=True,
        )

    def optimize_request(self, request: OptimizationRequest) -> OptimizationResult:
        return self.optimize(request.source_code, language=request.language)

    async def optimize_async(self, source_code: str, language: Optional[str] = None) -> OptimizationResult:
        # requests is blocking; each call gets its own worker thread
        return await asyncio.to_thread(self.optimize, source_code, language)


def optimize(source_code: str) -> OptimizationResult:
    """Module-level shortcut using the cached settings."""
    return CodeOptimizerService().optimize(source_code)
