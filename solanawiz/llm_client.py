# solanawiz/llm_client.py — OpenAI-compatible client with schema-checked prompts
import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Type

import requests
from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from .errors import GenerationError
from .prompts import SYSTEM
from .settings import Settings

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


@dataclass(frozen=True)
class PromptSpec:
    """A named prompt template with typed input and output."""
    name: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    render: Callable[[BaseModel], str]


def _parse_object(content: str) -> Optional[dict]:
    """Return the JSON object in a completion, or None when there is none."""
    text = _FENCE.sub("", content.strip()).strip()
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


class LLMClient:
    def __init__(
        self,
        base_url: str = "http://localhost:11434/v1",
        api_key: str = "ollama-local",
        model: str = "llama3",
        temperature: float = 0.3,
        max_tokens: int = 1024,
    ):
        # Ollama ignores the key but the SDK requires one
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = OpenAI(api_key=api_key or "ollama-local", base_url=base_url)

    @classmethod
    def from_settings(cls, s: Settings) -> "LLMClient":
        return cls(
            base_url=s.llm_base_url,
            api_key=s.llm_api_key,
            model=s.llm_model,
            temperature=s.temperature,
            max_tokens=s.max_tokens,
        )

    def chat(self, messages: List[dict]) -> str:
        """Send chat messages and return the stripped text of the first choice."""
        resp = self._client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format={"type": "json_object"},
        )
        if not resp.choices:
            return ""
        return (resp.choices[0].message.content or "").strip()

    def generate(self, prompt: PromptSpec, data) -> Optional[BaseModel]:
        """Run `prompt` on `data`.

        Returns an instance of ``prompt.output_model``, or None when the model
        produced no JSON object at all. Raises GenerationError when the call
        itself fails or the object does not match the output schema.
        """
        inp = data if isinstance(data, prompt.input_model) else prompt.input_model.model_validate(data)
        schema = json.dumps(prompt.output_model.model_json_schema())
        messages = [
            {"role": "system", "content": f"{SYSTEM}\n\nJSON schema:\n{schema}"},
            {"role": "user", "content": prompt.render(inp)},
        ]

        try:
            content = self.chat(messages)
        except OpenAIError as e:
            logger.error("%s: generation call failed: %s", prompt.name, e)
            raise GenerationError(f"{prompt.name} failed: {e}") from e

        payload = _parse_object(content)
        if payload is None:
            logger.warning("%s: model returned no JSON object (%d chars)", prompt.name, len(content))
            return None

        try:
            return prompt.output_model.model_validate(payload)
        except ValidationError as e:
            raise GenerationError(f"{prompt.name} returned output that does not match its schema: {e}") from e

    def status(self) -> Tuple[bool, List[str]]:
        """Ping native /api/tags to list models (avoids client features that may vary)."""
        native_base = self.base_url.rstrip("/").removesuffix("/v1")
        try:
            r = requests.get(f"{native_base}/api/tags", timeout=2)
            r.raise_for_status()
            data = r.json() if r.content else {}
        except (requests.exceptions.RequestException, ValueError) as e:
            return False, [str(e)]
        models = [m.get("name") for m in data.get("models", [])] if isinstance(data, dict) else []
        return True, models
