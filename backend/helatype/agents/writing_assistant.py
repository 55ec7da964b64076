"""
writing_assistant.py

LLM integration for the editor's AI tools:
grammar fixing, formal letters, social posts, English translation
and short titles for saved text.
Supports Groq, OpenRouter and Gemini APIs.
"""
import logging
from typing import Optional

import requests

from ..config import get_settings

logger = logging.getLogger(__name__)


class AssistantError(Exception):
    """Raised when the assistant cannot produce a response."""


class WritingAssistant:
    """
    Sends prompts to an LLM and returns the generated text.
    Every failure (missing key, network, quota, bad response) is
    raised as AssistantError so callers can fall back.
    """

    # API endpoints
    ENDPOINTS = {
        "groq": "https://api.groq.com/openai/v1/chat/completions",
        "openrouter": "https://openrouter.ai/api/v1/chat/completions",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    }

    # Default models
    MODELS = {
        "groq": "llama-3.1-70b-versatile",
        "openrouter": "mistralai/mistral-7b-instruct",
    }

    def __init__(
        self,
        provider: str = "groq",
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize the assistant.
        provider: 'groq', 'openrouter' or 'gemini'
        """
        settings = get_settings()
        self.provider = provider.lower()
        if self.provider not in self.ENDPOINTS:
            raise ValueError(f"Unknown LLM provider: {provider}")

        default_model = settings.GEMINI_MODEL if self.provider == "gemini" else self.MODELS[self.provider]
        self.model = model or default_model
        self.timeout = timeout or settings.LLM_TIMEOUT
        self.temperature = settings.LLM_TEMPERATURE
        self.max_tokens = settings.LLM_MAX_TOKENS

        # Get API key
        if api_key is None:
            api_key = {
                "groq": settings.GROQ_API_KEY,
                "openrouter": settings.OPENROUTER_API_KEY,
                "gemini": settings.GEMINI_API_KEY
            }[self.provider]
        self.api_key = api_key or ""

        logger.info(f"[WritingAssistant] Using provider: {self.provider} ({self.model})")
        if not self.api_key:
            logger.warning(f"[WritingAssistant] No API key for {self.provider}")

    def assist(self, prompt: str) -> str:
        """
        Send a prompt and return the model's answer.

        Raises:
            AssistantError: if the call fails for any reason
        """
        if not self.api_key:
            raise AssistantError(f"No API key configured for {self.provider}")

        if self.provider == "gemini":
            url, headers, payload = self._gemini_request(prompt)
        else:
            url, headers, payload = self._chat_request(prompt)

        try:
            logger.info(f"[WritingAssistant] Calling {self.provider} API...")
            response = requests.post(
                url,
                headers=headers,
                json=payload,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"[WritingAssistant] Request failed: {e}")
            raise AssistantError(f"{self.provider} request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"[WritingAssistant] API error: {response.status_code}")
            logger.error(f"[WritingAssistant] Response: {response.text[:200]}")
            raise AssistantError(f"{self.provider} API error: {response.status_code}")

        try:
            data = response.json()
            if self.provider == "gemini":
                content = data["candidates"][0]["content"]["parts"][0]["text"]
            else:
                content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AssistantError(f"Malformed {self.provider} response") from e

        if not content or not content.strip():
            raise AssistantError(f"Empty {self.provider} response")

        return content.strip()

    def _chat_request(self, prompt: str):
        """Build an OpenAI style chat completion request."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        # OpenRouter needs extra headers
        if self.provider == "openrouter":
            headers["HTTP-Referer"] = "https://helatype.app"
            headers["X-Title"] = "HelaType"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "user", "content": prompt}
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature
        }
        return self.ENDPOINTS[self.provider], headers, payload

    def _gemini_request(self, prompt: str):
        """Build a Gemini generateContent request."""
        url = self.ENDPOINTS["gemini"].format(model=self.model)
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json"
        }
        payload = {
            "contents": [
                {"parts": [{"text": prompt}]}
            ],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_tokens
            }
        }
        return url, headers, payload

    # Editor tools

    def fix_grammar(self, text: str) -> str:
        """Fix spelling, grammar and flow of Sinhala text."""
        prompt = f"""You are a Sinhala language editor.
Fix the spelling, grammar and natural flow of the following Sinhala text.
Return only the corrected Sinhala text, with no explanation.

TEXT: {text}"""
        return self.assist(prompt)

    def formal_letter(self, text: str) -> str:
        """Rewrite text as a formal workplace letter."""
        return self.assist(
            f'Translate and rewrite this Sinhala text into a highly formal letter format suitable for a workplace: "{text}"'
        )

    def social_post(self, text: str) -> str:
        """Rewrite text as a friendly social media post."""
        return self.assist(
            f'Make this Sinhala text engaging and friendly for a social media post: "{text}"'
        )

    def translate_to_english(self, text: str) -> str:
        """Translate Sinhala text to English."""
        return self.assist(f'Translate this Sinhala to English: "{text}"')

    def smart_label(self, text: str) -> str:
        """Generate a 2-3 word Sinhala title for saved text."""
        return self.assist(
            f'Summarize this text into 2-3 Sinhala words for a title: "{text[:100]}"'
        )


# Singleton
_assistant = None

def get_writing_assistant(provider: Optional[str] = None) -> WritingAssistant:
    """Get or create the writing assistant."""
    global _assistant
    provider = (provider or get_settings().LLM_PROVIDER).lower()
    # Always create new if provider changes
    if _assistant is None or _assistant.provider != provider:
        _assistant = WritingAssistant(provider)
    return _assistant
