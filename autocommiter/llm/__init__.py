"""Inference layer for autocommiter.

Wraps the GitHub Models chat-completions API, the model catalogue and the
commit prompt.
"""

from dotenv import load_dotenv

from autocommiter.llm.exceptions import LLMError, MissingAPIKeyError
from autocommiter.llm.client import (
    call_inference_api,
    extract_completion_text,
    generate_commit_message,
)
from autocommiter.llm.models import (
    DEFAULT_MODELS,
    ModelInfo,
    fetch_available_models,
    get_cached_models,
    update_cached_models,
)

# Load environment variables from .env file
load_dotenv()


__all__ = [
    "LLMError",
    "MissingAPIKeyError",
    "call_inference_api",
    "extract_completion_text",
    "generate_commit_message",
    "DEFAULT_MODELS",
    "ModelInfo",
    "fetch_available_models",
    "get_cached_models",
    "update_cached_models",
]
