import logging
from typing import Optional

import requests

from code_optimizer.core.config import Settings, get_settings
from code_optimizer.core.errors import EndpointUnavailableOrFailed
from code_optimizer.core.prompts import PromptParts

logger = logging.getLogger(__name__)


class OllamaClient:
    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.host = settings.OLLAMA_HOST.rstrip("/")
        self.model = settings.LLM_MODEL
        self.api = settings.LLM_API
        self.timeout = settings.LLM_TIMEOUT

    def generate(self, prompt: PromptParts) -> str:
        """Send one prompt and return the model's text. Raises EndpointUnavailableOrFailed."""
        if self.api == "chat":
            url = f"{self.host}/v1/chat/completions"
            payload = {
                "model": self.model,
                "messages": [
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
                "stream": False,
            }
        elif self.api == "prompt":
            url = f"{self.host}/api/generate"
            payload = {
                "model": self.model,
                "prompt": prompt.as_single_prompt(),
                "stream": False,
            }
        else:
            url = f"{self.host}/api/generate"
            payload = {
                "model": self.model,
                "system": prompt.system,
                "prompt": prompt.user,
                "stream": False,
            }

        logger.debug("POST %s model=%s timeout=%s", url, self.model, self.timeout)
        data = self._post(url, payload)

        if self.api == "chat":
            try:
                text = data["choices"][0]["message"]["content"]
            except (KeyError, IndexError, TypeError):
                raise EndpointUnavailableOrFailed(f"LLM returned no choices: {data!r}")
        else:
            text = data.get("response") if isinstance(data, dict) else None

        if not isinstance(text, str):
            raise EndpointUnavailableOrFailed(f"LLM returned no 'response' text: {data!r}")
        return text

    def _post(self, url: str, payload: dict):
        try:
            response = requests.post(url, json=payload, timeout=self.timeout)
        except requests.Timeout as e:
            raise EndpointUnavailableOrFailed(
                f"LLM timed out after {self.timeout}s: {e}"
            ) from e
        except requests.RequestException as e:
            raise EndpointUnavailableOrFailed(f"LLM unreachable at {self.host}: {e}") from e

        if response.status_code != 200:
            raise EndpointUnavailableOrFailed(
                f"LLM error ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise EndpointUnavailableOrFailed(f"LLM returned invalid JSON: {e}") from e
