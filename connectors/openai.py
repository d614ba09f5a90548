import logging
from typing import Any, Dict, Optional

import httpx

from connectors.exceptions import MalformedResponse, SummarizerTimeout, SummarizerUnavailable

log = logging.getLogger(__name__)


class OpenAIConnector:
    def __init__(
        self,
        url: str,
        api_key: str,
        model: str,
        timeout: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.7,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = str(url).rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def _body(self, system_prompt: str, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def complete(self, system_prompt: str, prompt: str) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, json=self._body(system_prompt, prompt), headers=self._headers())
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise SummarizerUnavailable(
                f"Chat completion failed [{e.response.status_code}]: {e.response.text}"
            ) from e
        except httpx.TimeoutException as e:
            raise SummarizerTimeout("Chat completion timed out") from e
        except httpx.RequestError as e:
            raise SummarizerUnavailable(f"Cannot reach chat completion API at {self.url}") from e
        except ValueError as e:
            raise MalformedResponse("Chat completion response is not valid JSON") from e

        log.debug("Chat completion received from %s (model %s)", self.url, self.model)
        return _extract_content(payload)


def _extract_content(payload: Any) -> str:
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponse("Chat completion response has no message content") from e
    if not isinstance(content, str) or not content.strip():
        raise MalformedResponse("Chat completion returned empty content")
    return content
