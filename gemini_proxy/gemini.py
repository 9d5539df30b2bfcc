import logging

import requests

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_MODEL = "gemini-2.5-flash-preview-09-2025"
MAX_OUTPUT_TOKENS = 100


class GeminiError(Exception):
    """Base class for failures talking to the Gemini API."""


class GeminiAPIError(GeminiError):
    def __init__(self, status_code):
        super().__init__(f"Gemini API error! status: {status_code}")
        self.status_code = status_code


class InvalidResponseError(GeminiError):
    def __init__(self):
        super().__init__("Invalid response structure from API.")


def build_api_url(model=GEMINI_MODEL):
    """The key itself is sent as the `key` query parameter, see generate_text."""
    return f"{GEMINI_BASE_URL}/{model}:generateContent"


def build_payload(user_query, system_prompt):
    return {
        "contents": [{"parts": [{"text": user_query}]}],
        "systemInstruction": {"parts": [{"text": system_prompt}]},
        "generationConfig": {"maxOutputTokens": MAX_OUTPUT_TOKENS},
    }


def extract_text(result):
    """Pull candidates[0].content.parts[0].text out of a generateContent response.

    Returns None when the response does not have that shape.
    """
    if not isinstance(result, dict):
        return None

    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None

    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


def generate_text(api_key, user_query, system_prompt):
    """Send one generateContent request and return the trimmed generated text.

    Raises GeminiAPIError on a non-2xx status and InvalidResponseError when the
    body does not carry any text. Transport and JSON decoding errors from
    requests are left to propagate.
    """
    headers = {"Content-Type": "application/json"}
    payload = build_payload(user_query, system_prompt)

    response = requests.post(
        build_api_url(),
        params={"key": api_key},
        headers=headers,
        json=payload,
    )

    if not 200 <= response.status_code < 300:
        logger.error("Gemini API Error: %s", response.text)
        raise GeminiAPIError(response.status_code)

    text = extract_text(response.json())
    if text is None:
        raise InvalidResponseError()
    return text.strip()
