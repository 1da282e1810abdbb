import logging

from fastapi import APIRouter, Depends
from code_optimizer.core.config import Settings, get_settings
from code_optimizer.schemas.optimizer import OptimizationRequest, OptimizeRequest, OptimizeResponse
from code_optimizer.services.optimizer_service import CodeOptimizerService
from code_optimizer.utils.code_diff import extract_code_block, generate_diff

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(settings: Settings = Depends(get_settings)) -> CodeOptimizerService:
    return CodeOptimizerService(settings)


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"ok": True, "model": settings.LLM_MODEL, "host": settings.OLLAMA_HOST}


@router.post("/optimize", response_model=OptimizeResponse)
def optimize(req: OptimizeRequest, service: CodeOptimizerService = Depends(get_service)):
    logger.debug("optimize request: %d chars, language=%s", len(req.code), req.language)

    result = service.optimize_request(OptimizationRequest(source_code=req.code, language=req.language))

    rewritten_code = extract_code_block(result.optimized_code) if result.succeeded else None
    diff = None
    if rewritten_code is not None:
        fence = req.language.lower() if req.language else service.settings.CODE_FENCE
        diff = generate_diff(req.code, rewritten_code, ext=fence or "txt")

    return OptimizeResponse(
        original_code=result.original_code,
        optimized_code=result.optimized_code,
        rewritten_code=rewritten_code,
        diff=diff,
        succeeded=result.succeeded,
        error_message=result.error_message,
    )
