"""Catalogue of chat-completion models offered by GitHub Models."""

import json
import sys
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from autocommiter.config import MODELS_URL
from autocommiter.global_config import ensure_global_config_dir, get_models_cache_path


REQUEST_TIMEOUT = 15.0


class ModelInfo(BaseModel):
    """One selectable chat-completion model."""

    id: str
    name: str
    friendly_name: Optional[str] = None
    publisher: Optional[str] = None
    summary: Optional[str] = None
    task: Optional[str] = None
    tags: Optional[list[str]] = None


DEFAULT_MODELS = [
    ModelInfo(
        id="gpt-4o-mini",
        name="gpt-4o-mini",
        friendly_name="OpenAI GPT-4o mini",
        summary="Fast & cost-effective, great for most tasks",
        publisher="Azure OpenAI Service",
    ),
    ModelInfo(
        id="gpt-4o",
        name="gpt-4o",
        friendly_name="OpenAI GPT-4o",
        summary="High quality, most capable model",
        publisher="Azure OpenAI Service",
    ),
    ModelInfo(
        id="Phi-3-mini-128k-instruct",
        name="Phi-3-mini-128k-instruct",
        friendly_name="Phi-3 mini 128k",
        summary="Lightweight, efficient open model",
        publisher="Microsoft",
    ),
    ModelInfo(
        id="Mistral-large",
        name="Mistral-large",
        friendly_name="Mistral Large",
        summary="Powerful open-source model",
        publisher="Mistral AI",
    ),
]


def _warn(message: str) -> None:
    print(f"autocommiter: {message}", file=sys.stderr)


def parse_model_catalogue(payload: object) -> list[ModelInfo]:
    """Convert a /models response into chat-completion ModelInfo entries.

    Entries without an id or name, or with another task, are dropped. The
    model's name doubles as its id because that is what the chat endpoint
    accepts.
    """
    if not isinstance(payload, list):
        return []

    models = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        if not entry.get("id") or not entry.get("name") or entry.get("task") != "chat-completion":
            continue
        tags = entry.get("tags")
        models.append(
            ModelInfo(
                id=entry["name"],
                name=entry["name"],
                friendly_name=entry.get("friendly_name") or entry["name"],
                publisher=entry.get("publisher"),
                summary=entry.get("summary"),
                task=entry.get("task"),
                tags=[str(t) for t in tags] if isinstance(tags, list) else None,
            )
        )
    return models


def fetch_available_models(api_key: str) -> list[ModelInfo]:
    """Fetch the chat-completion models available to api_key.

    Falls back to DEFAULT_MODELS on any failure or an empty result.
    """
    try:
        response = httpx.get(
            MODELS_URL,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {api_key}",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        models = parse_model_catalogue(response.json())
    except (httpx.HTTPError, ValueError) as e:
        _warn(f"failed to fetch models ({e})")
        return list(DEFAULT_MODELS)

    return models or list(DEFAULT_MODELS)


def get_cached_models() -> list[ModelInfo]:
    """Read the cached catalogue, or DEFAULT_MODELS if there is none."""
    cache_file = get_models_cache_path()
    if not cache_file.exists():
        return list(DEFAULT_MODELS)

    try:
        cached = json.loads(cache_file.read_text(encoding="utf-8"))
        if not isinstance(cached, list):
            return list(DEFAULT_MODELS)
        return [ModelInfo.model_validate(m) for m in cached]
    except (OSError, ValueError, ValidationError) as e:
        _warn(f"failed to read cached models ({e})")
        return list(DEFAULT_MODELS)


def update_cached_models(models: list[ModelInfo]) -> None:
    """Replace the cached catalogue. Failures are reported, not raised."""
    try:
        ensure_global_config_dir()
        get_models_cache_path().write_text(
            json.dumps([m.model_dump() for m in models], indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        _warn(f"failed to cache models ({e})")
