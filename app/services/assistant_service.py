"""Chat assistant gateway - OpenAI chat completions with graceful fallback

The assistant is a convenience feature: any upstream failure is turned into a
fixed, language-specific reply instead of an error for the caller.
"""

import logging
from typing import Dict, Optional

from openai import OpenAI, OpenAIError

from app.core.config import settings
from app.core.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


DEFAULT_LANGUAGE = "en"

FALLBACK_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "empty": "I'm sorry, I couldn't process that request.",
        "overloaded": "I'm temporarily experiencing high demand. Please try again in a few moments!",
        "unavailable": "I'm experiencing technical difficulties. Please try again later.",
    },
    "hi": {
        "empty": "क्षमा करें, मैं उस अनुरोध को संसाधित नहीं कर सका।",
        "overloaded": "इस समय बहुत अधिक मांग है। कृपया कुछ क्षणों में फिर से प्रयास करें!",
        "unavailable": "मुझे तकनीकी समस्या आ रही है। कृपया बाद में पुनः प्रयास करें।",
    },
    "pa": {
        "empty": "ਮਾਫ਼ ਕਰਨਾ, ਮੈਂ ਉਸ ਬੇਨਤੀ ਨੂੰ ਪੂਰਾ ਨਹੀਂ ਕਰ ਸਕਿਆ।",
        "overloaded": "ਇਸ ਸਮੇਂ ਬਹੁਤ ਜ਼ਿਆਦਾ ਮੰਗ ਹੈ। ਕਿਰਪਾ ਕਰਕੇ ਕੁਝ ਪਲਾਂ ਵਿੱਚ ਦੁਬਾਰਾ ਕੋਸ਼ਿਸ਼ ਕਰੋ!",
        "unavailable": "ਮੈਨੂੰ ਤਕਨੀਕੀ ਸਮੱਸਿਆ ਆ ਰਹੀ ਹੈ। ਕਿਰਪਾ ਕਰਕੇ ਬਾਅਦ ਵਿੱਚ ਦੁਬਾਰਾ ਕੋਸ਼ਿਸ਼ ਕਰੋ।",
    },
}


SYSTEM_PROMPTS: Dict[str, str] = {
    "en": (
        'You are a helpful AI assistant for a civic issue reporting application called "Swachh Janta".\n'
        "You can help users with:\n"
        "- Questions about how to report civic issues like drainage problems, potholes, garbage, etc.\n"
        "- General information about civic services\n"
        "- Navigation help within the app\n"
        "- General conversation\n\n"
        "Be friendly, concise, and helpful. Keep responses under 200 words. "
        "Always respond in English."
    ),
    "hi": (
        'आप "स्वच्छ जनता" नामक नागरिक समस्या रिपोर्टिंग ऐप के एक सहायक AI सहायक हैं।\n'
        "आप उपयोगकर्ताओं की इनमें मदद कर सकते हैं:\n"
        "- जल निकासी, गड्ढे, कचरा जैसी नागरिक समस्याओं की रिपोर्ट करने के बारे में प्रश्न\n"
        "- नागरिक सेवाओं के बारे में सामान्य जानकारी\n"
        "- ऐप में नेविगेशन सहायता\n"
        "- सामान्य बातचीत\n\n"
        "मित्रवत, संक्षिप्त और सहायक रहें। उत्तर 200 शब्दों से कम रखें। "
        "हमेशा हिंदी में उत्तर दें।"
    ),
    "pa": (
        'ਤੁਸੀਂ "ਸਵੱਛ ਜਨਤਾ" ਨਾਮਕ ਨਾਗਰਿਕ ਸਮੱਸਿਆ ਰਿਪੋਰਟਿੰਗ ਐਪ ਦੇ ਇੱਕ ਮਦਦਗਾਰ AI ਸਹਾਇਕ ਹੋ।\n'
        "ਤੁਸੀਂ ਵਰਤੋਂਕਾਰਾਂ ਦੀ ਇਹਨਾਂ ਵਿੱਚ ਮਦਦ ਕਰ ਸਕਦੇ ਹੋ:\n"
        "- ਨਿਕਾਸੀ, ਟੋਏ, ਕੂੜਾ ਵਰਗੀਆਂ ਨਾਗਰਿਕ ਸਮੱਸਿਆਵਾਂ ਦੀ ਰਿਪੋਰਟ ਕਰਨ ਬਾਰੇ ਸਵਾਲ\n"
        "- ਨਾਗਰਿਕ ਸੇਵਾਵਾਂ ਬਾਰੇ ਆਮ ਜਾਣਕਾਰੀ\n"
        "- ਐਪ ਵਿੱਚ ਨੈਵੀਗੇਸ਼ਨ ਸਹਾਇਤਾ\n"
        "- ਆਮ ਗੱਲਬਾਤ\n\n"
        "ਦੋਸਤਾਨਾ, ਸੰਖੇਪ ਅਤੇ ਮਦਦਗਾਰ ਰਹੋ। ਜਵਾਬ 200 ਸ਼ਬਦਾਂ ਤੋਂ ਘੱਟ ਰੱਖੋ। "
        "ਹਮੇਸ਼ਾ ਪੰਜਾਬੀ ਵਿੱਚ ਜਵਾਬ ਦਿਓ।"
    ),
}


def resolve_language(language: Optional[str]) -> str:
    """Unsupported or missing language tags fall back to English"""
    return language if language in SYSTEM_PROMPTS else DEFAULT_LANGUAGE


def build_system_prompt(language: str) -> str:
    """Each supported language gets a prompt written in that language"""
    return SYSTEM_PROMPTS[resolve_language(language)]


def _is_overloaded(error: OpenAIError) -> bool:
    return getattr(error, "status_code", None) == 503 or "overloaded" in str(error).lower()


# ============================================================
# OPENAI CLIENT
# ============================================================

class AssistantClient:
    """OpenAI API wrapper; every failure surfaces as UpstreamUnavailable"""

    def __init__(self, api_key: Optional[str] = None, client: Optional[OpenAI] = None):
        api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        if client is None and api_key:
            client = OpenAI(api_key=api_key)
        self.client = client

    def complete(self, system_prompt: str, message: str) -> str:
        if self.client is None:
            raise UpstreamUnavailable("OpenAI API key is not configured")

        try:
            return self._call(settings.OPENAI_MODEL, system_prompt, message)
        except OpenAIError as e:
            if not _is_overloaded(e):
                logger.error("❌ OpenAI API error: %s", str(e))
                raise UpstreamUnavailable(f"Assistant request failed: {e}") from e
            logger.warning("⚠️ %s overloaded, retrying on %s",
                           settings.OPENAI_MODEL, settings.OPENAI_FALLBACK_MODEL)

        try:
            return self._call(settings.OPENAI_FALLBACK_MODEL, system_prompt, message)
        except OpenAIError as e:
            logger.error("❌ OpenAI fallback model error: %s", str(e))
            raise UpstreamUnavailable(
                f"Assistant request failed: {e}", overloaded=_is_overloaded(e)
            ) from e

    def _call(self, model: str, system_prompt: str, message: str) -> str:
        logger.info("🤖 Calling OpenAI %s...", model)
        response = self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
            timeout=30,
        )
        content = response.choices[0].message.content or ""
        logger.info("✅ OpenAI response received (%d chars)", len(content))
        return content


# ============================================================
# SERVICE
# ============================================================

class AssistantService:

    def __init__(self, client: Optional[AssistantClient] = None):
        self.client = client or AssistantClient()

    def ask(self, message: str, language: Optional[str] = DEFAULT_LANGUAGE) -> str:
        language = resolve_language(language)
        messages = FALLBACK_MESSAGES[language]

        try:
            reply = self.client.complete(build_system_prompt(language), message)
        except UpstreamUnavailable as e:
            logger.warning("Assistant unavailable, sending fallback reply: %s", e.message)
            return messages["overloaded"] if e.overloaded else messages["unavailable"]

        return reply.strip() or messages["empty"]
