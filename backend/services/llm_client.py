"""LLM Client for Gemini and Groq text generation."""
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union
from groq import Groq
from groq import RateLimitError, AuthenticationError, APIError, APITimeoutError
from langchain_google_genai import ChatGoogleGenerativeAI
import logging

from config import DEFAULT_MODEL, DEFAULT_PROVIDER, DEFAULT_TEMPERATURE

logger = logging.getLogger(__name__)

# Provider content is either plain text or an ordered list of blocks.
# A block is a bare string or a mapping carrying a "text" field.
ContentBlock = Union[str, Dict[str, Any]]
MessageContent = Union[str, List[ContentBlock]]

SUPPORTED_PROVIDERS = ("gemini", "groq")


@dataclass
class LLMResponse:
    """Response from LLM generation."""
    text: str
    latency_ms: int
    model_used: str


@dataclass
class LLMError:
    """Structured error response from LLM operations."""
    code: str
    message: str
    details: Dict[str, Any]


class LLMClientError(Exception):
    """Custom exception for LLM client errors with structured error information."""

    def __init__(self, error: LLMError):
        self.error = error
        super().__init__(error.message)


def normalize_content(content: MessageContent) -> str:
    """
    Flatten provider content into plain text.

    Args:
        content: Plain string or list of content blocks

    Returns:
        The text of every block concatenated in order

    Raises:
        TypeError: If the content or one of its blocks has an unknown shape
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict):
                parts.append(str(block.get("text") or ""))
            else:
                raise TypeError(f"Unsupported content block type: {type(block).__name__}")
        return "".join(parts)
    raise TypeError(f"Unsupported message content type: {type(content).__name__}")


class LLMClient:
    """Client for generating text with a remote chat model."""

    def __init__(
        self,
        api_key: str,
        provider: str = DEFAULT_PROVIDER,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE
    ):
        """
        Initialize LLM client.

        Args:
            api_key: API key for the selected provider
            provider: "gemini" or "groq"
            model: Default model name
            temperature: Default sampling temperature

        Raises:
            ValueError: If the API key is missing or the provider is unknown
        """
        if not api_key:
            raise ValueError("API key must be provided")
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unsupported provider '{provider}'. Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
            )

        self.api_key = api_key
        self.provider = provider
        self.model = model
        self.temperature = temperature

        self._groq: Optional[Groq] = None
        self._gemini_models: Dict[Tuple[str, float], ChatGoogleGenerativeAI] = {}
        if provider == "groq":
            self._groq = Groq(api_key=api_key)

        logger.info(f"LLMClient initialized: provider={provider}, model={model}")

    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None
    ) -> LLMResponse:
        """
        Generate a completion for a single prompt.

        Args:
            prompt: Complete prompt text
            model: Model name override
            temperature: Temperature override

        Returns:
            LLMResponse with normalized text and latency

        Raises:
            LLMClientError: Structured error with code, message, and details
        """
        model = model or self.model
        temperature = self.temperature if temperature is None else temperature
        start_time = time.time()

        try:
            logger.debug(f"Generating response: provider={self.provider}, model={model}, prompt_chars={len(prompt)}")

            if self.provider == "groq":
                text = self._generate_groq(prompt, model, temperature)
            else:
                text = self._generate_gemini(prompt, model, temperature)

            latency_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Generated response: provider={self.provider}, model={model}, latency={latency_ms}ms",
                extra={"model": model, "latency_ms": latency_ms}
            )

            return LLMResponse(text=text, latency_ms=latency_ms, model_used=model)

        except RateLimitError as e:
            raise self._wrap_error(
                "RATE_LIMIT_ERROR",
                "Rate limit exceeded. Please try again in a few moments.",
                e, model, start_time, retry_after=60
            )
        except AuthenticationError as e:
            raise self._wrap_error(
                "AUTHENTICATION_ERROR",
                "Authentication failed. Please check your API key.",
                e, model, start_time
            )
        except APITimeoutError as e:
            raise self._wrap_error(
                "TIMEOUT_ERROR",
                "Request timed out. Please try again.",
                e, model, start_time
            )
        except APIError as e:
            raise self._wrap_error("API_ERROR", f"Groq API error: {str(e)}", e, model, start_time)
        except Exception as e:
            if self.provider == "gemini":
                raise self._wrap_error("API_ERROR", f"Gemini API error: {str(e)}", e, model, start_time)
            raise self._wrap_error(
                "UNKNOWN_ERROR",
                f"Unexpected error during generation: {str(e)}",
                e, model, start_time,
                error_type=type(e).__name__
            )

    def _generate_gemini(self, prompt: str, model: str, temperature: float) -> str:
        chat_model = self._gemini_model(model, temperature)
        message = chat_model.invoke(prompt)
        return normalize_content(message.content)

    def _generate_groq(self, prompt: str, model: str, temperature: float) -> str:
        response = self._groq.chat.completions.create(
            model=model,
            messages=[
                {
                    "role": "user",
                    "content": prompt
                }
            ],
            temperature=temperature
        )
        return normalize_content(response.choices[0].message.content or "")

    def _gemini_model(self, model: str, temperature: float) -> ChatGoogleGenerativeAI:
        key = (model, temperature)
        if key not in self._gemini_models:
            self._gemini_models[key] = ChatGoogleGenerativeAI(
                model=model,
                google_api_key=self.api_key,
                temperature=temperature,
            )
        return self._gemini_models[key]

    def _wrap_error(
        self,
        code: str,
        message: str,
        cause: Exception,
        model: str,
        start_time: float,
        **extra_details: Any
    ) -> LLMClientError:
        latency_ms = int((time.time() - start_time) * 1000)
        details: Dict[str, Any] = {
            "provider": self.provider,
            "model": model,
            "latency_ms": latency_ms,
            "original_error": str(cause),
        }
        details.update(extra_details)
        error = LLMError(code=code, message=message, details=details)
        logger.error(
            f"{code}: provider={self.provider}, model={model}, latency={latency_ms}ms, error={cause}",
            exc_info=True,
            extra={"error_code": code, "model": model, "latency_ms": latency_ms}
        )
        client_error = LLMClientError(error)
        client_error.__cause__ = cause
        return client_error
