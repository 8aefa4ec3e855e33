"""GitHub Models inference client.

The service speaks the OpenAI chat-completions protocol, so requests go
through the openai SDK pointed at the GitHub Models endpoint. Responses are
inspected as plain JSON so that alternative payload shapes still yield text.
"""

import json
from typing import Any

from openai import OpenAI

from autocommiter.config import INFERENCE_BASE_URL, Settings
from autocommiter.llm.exceptions import LLMError, MissingAPIKeyError
from autocommiter.llm.prompts import SYSTEM_PROMPT, build_commit_prompt, clean_commit_message


def extract_completion_text(payload: Any) -> str:
    """Pull the generated text out of an inference response payload.

    Recognized shapes, in order:
    - {"choices": [{"message": {"content": ...}}]}
    - {"output": [{"content": [{"text": ...}]}]}
    - a bare string

    Raises:
        LLMError: If the payload carries an error or has no known shape.
    """
    if isinstance(payload, str):
        return payload

    if not isinstance(payload, dict):
        raise LLMError(f"Unexpected API response format: {json.dumps(payload, default=str)[:200]}")

    choices = payload.get("choices")
    if isinstance(choices, list) and choices:
        message = (choices[0] or {}).get("message") or {}
        if message.get("content"):
            return str(message["content"])

    output = payload.get("output")
    if isinstance(output, list) and output:
        content = (output[0] or {}).get("content")
        if isinstance(content, list) and content and (content[0] or {}).get("text"):
            return str(content[0]["text"])

    error = payload.get("error")
    if error:
        detail = error.get("message") if isinstance(error, dict) else None
        raise LLMError(f"API Error: {detail or json.dumps(error, default=str)}")

    raise LLMError(f"Unexpected API response format: {json.dumps(payload, default=str)[:200]}")


def call_inference_api(api_key: str, user_prompt: str, model: str) -> str:
    """Send one chat-completion request and return the reply text.

    Raises:
        LLMError: If the request fails or the reply cannot be interpreted.
    """
    client = OpenAI(api_key=api_key, base_url=INFERENCE_BASE_URL)

    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
        )
    except Exception as e:
        raise LLMError(f"API request failed: {e}")

    return extract_completion_text(response.model_dump())


def generate_commit_message(settings: Settings, digest: str) -> str:
    """Generate a commit message for a change digest.

    Args:
        settings: Resolved user settings (API key and model).
        digest: JSON change digest from compress_to_json().

    Raises:
        MissingAPIKeyError: If no API key is configured.
        LLMError: If the call fails or returns an empty message.
    """
    if not settings.api_key:
        raise MissingAPIKeyError(
            "GitHub Models API key not found. Set it using:\n"
            "  1. Environment variable: export GITHUB_TOKEN=your_key_here\n"
            "  2. Run: autocommiter config set-key\n"
            "  3. Manually add GITHUB_TOKEN=... to ~/.autocommiter/credentials"
        )

    raw = call_inference_api(settings.api_key, build_commit_prompt(digest), settings.model)
    message = clean_commit_message(raw)
    if not message:
        raise LLMError("The model returned an empty commit message.")
    return message
