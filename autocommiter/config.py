"""Static configuration for autocommiter.

User-editable settings live in ~/.autocommiter/ and are loaded into a
Settings value by autocommiter.global_config.load_settings().
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================
# INFERENCE SERVICE
# ============================================================

INFERENCE_BASE_URL = "https://models.inference.ai.azure.com"
MODELS_URL = f"{INFERENCE_BASE_URL}/models"

DEFAULT_MODEL = "gpt-4o-mini"

API_KEY_ENV_VAR = "GITHUB_TOKEN"


# ============================================================
# CHANGE DIGEST
# ============================================================

# Maximum characters of the JSON change digest embedded in the prompt
DEFAULT_DIGEST_BUDGET = 400


# ============================================================
# .gitignore SAFETY
# ============================================================

GITIGNORE_FILENAME = ".gitignore"
GITMODULES_FILENAME = ".gitmodules"
GIT_DIR_NAME = ".git"

# Patterns that must always be active in the repository's .gitignore
REQUIRED_PATTERNS = ("*.env*", ".env*", "docx/", ".docx/")

GITIGNORE_COMMENT_PREFIX = "# Added by autocommiter:"


class Settings(BaseModel):
    """User settings resolved once per invocation.

    Attributes:
        api_key: GitHub Models API key, if one is configured.
        model: Model id used for chat completions.
        gitmoji: Whether generated messages are prefixed with a gitmoji.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    gitmoji: bool = False
