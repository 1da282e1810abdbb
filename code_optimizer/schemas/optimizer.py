from pydantic import BaseModel, model_validator
from typing import Optional


class OptimizationRequest(BaseModel):
    source_code: str
    language: Optional[str] = None


class OptimizationResult(BaseModel):
    optimized_code: str
    original_code: str
    succeeded: bool
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self):
        if self.succeeded and self.error_message is not None:
            raise ValueError("a successful result carries no error_message")
        if not self.succeeded and self.optimized_code != self.original_code:
            raise ValueError("a failed result must pass the original code through")
        return self


# ---------- HTTP API ----------

class OptimizeRequest(BaseModel):
    code: str
    language: Optional[str] = None

class OptimizeResponse(BaseModel):
    original_code: str
    optimized_code: str
    rewritten_code: Optional[str]
    diff: Optional[str]
    succeeded: bool
    error_message: Optional[str] = None
