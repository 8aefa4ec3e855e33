"""Gitmoji prefixes for commit messages.

Messages are matched to a curated gitmoji list by a keyword score: a full
keyword hit counts 40, a hit on the keyword's first three letters counts 10,
and each description word (longer than two letters) found counts 15. The
score is capped at 100 and must exceed MATCH_THRESHOLD.
"""

import random
from dataclasses import dataclass
from typing import Optional


MATCH_THRESHOLD = 30
MAX_SCORE = 100


@dataclass(frozen=True)
class Gitmoji:
    emoji: str
    code: str
    description: str
    keywords: tuple[str, ...]


GITMOJIS = (
    Gitmoji("🎨", ":art:", "Improve structure/format", ("format", "structure", "style", "lint")),
    Gitmoji("⚡", ":zap:", "Improve performance", ("performance", "speed", "optimize", "fast")),
    Gitmoji("🔥", ":fire:", "Remove code/files", ("remove", "delete", "clean", "unused")),
    Gitmoji("🐛", ":bug:", "Fix bug", ("fix", "bug", "issue", "error", "crash")),
    Gitmoji("✨", ":sparkles:", "New feature", ("feature", "new", "add", "implement")),
    Gitmoji("📝", ":memo:", "Add documentation", ("docs", "documentation", "comment", "readme")),
    Gitmoji("🚀", ":rocket:", "Deploy stuff", ("deploy", "release", "publish", "launch")),
    Gitmoji("💅", ":nail_care:", "Polish code", ("polish", "refine", "improve")),
    Gitmoji("✅", ":white_check_mark:", "Add tests", ("test", "tests", "testing")),
    Gitmoji("🔐", ":lock:", "Security fix", ("security", "auth", "encrypt")),
    Gitmoji("⬆️", ":arrow_up:", "Upgrade dependencies", ("upgrade", "update", "dependency", "dependencies")),
    Gitmoji("⬇️", ":arrow_down:", "Downgrade dependencies", ("downgrade",)),
    Gitmoji("📦", ":package:", "Update packages", ("package", "npm", "yarn", "bundler")),
    Gitmoji("🔧", ":wrench:", "Configuration", ("config", "configuration", "settings")),
    Gitmoji("🌐", ":globe_with_meridians:", "i18n/localization", ("i18n", "translation", "locale", "language")),
    Gitmoji("♿", ":wheelchair:", "Accessibility", ("accessibility", "a11y", "aria")),
    Gitmoji("🚨", ":rotating_light:", "Fix warnings", ("warning", "lint")),
    Gitmoji("🔍", ":mag:", "SEO", ("seo",)),
    Gitmoji("🍎", ":apple:", "macOS fix", ("macos", "mac", "apple")),
    Gitmoji("🐧", ":penguin:", "Linux fix", ("linux", "ubuntu")),
    Gitmoji("🪟", ":window:", "Windows fix", ("windows",)),
    Gitmoji("📱", ":iphone:", "iOS/Mobile", ("ios", "mobile", "swift", "react-native", "app")),
    Gitmoji("🤖", ":robot_face:", "Android development", ("android", "gradle", "kotlin", "apk")),
    Gitmoji("🖥️", ":desktop_computer:", "Desktop application", ("desktop", "electron", "gtk", "qt", "window")),
    Gitmoji("🐍", ":snake:", "Python changes", ("python", "django", "flask", "pip", "pytorch")),
    Gitmoji("📚", ":books:", "Node.js/JavaScript", ("node", "npm", "javascript", "express", "typescript")),
    Gitmoji("🦀", ":crab:", "Rust changes", ("rust", "cargo", "tokio", "wasm")),
    Gitmoji("🐹", ":hamster:", "Go changes", ("go", "golang", "goroutine", "cobra")),
    Gitmoji("☕", ":coffee:", "Java changes", ("java", "spring", "maven", "gradle", "jvm")),
    Gitmoji("🐳", ":whale:", "Docker changes", ("docker", "container", "dockerfile", "image")),
    Gitmoji("☸️", ":helm:", "Kubernetes/Helm", ("kubernetes", "k8s", "helm", "deployment", "pods")),
    Gitmoji("🔄", ":repeat:", "CI/CD changes", ("ci", "cd", "pipeline", "github-actions", "gitlab", "jenkins")),
    Gitmoji("📊", ":bar_chart:", "Database changes", ("database", "db", "sql", "schema", "migration", "postgres", "mysql")),
    Gitmoji("📈", ":chart_with_upwards_trend:", "Monitoring/Metrics", ("monitoring", "metrics", "logs", "alert", "grafana", "prometheus")),
    Gitmoji("🔨", ":hammer:", "Build changes", ("build", "compile", "webpack", "cargo", "cmake", "makefile")),
    Gitmoji("🎯", ":dart:", "Version/Release", ("version", "release", "semver", "tag", "v1", "v2")),
    Gitmoji("🔀", ":twisted_rightwards_arrows:", "Merge/Rebase", ("merge", "rebase", "pull-request", "pr", "conflict")),
    Gitmoji("🏗️", ":building_construction:", "Architecture changes", ("architecture", "design", "pattern", "refactor", "structure")),
    Gitmoji("🚪", ":door:", "Environment variables", ("environment", "env", "variables", "secrets", "config", ".env")),
    Gitmoji("🔌", ":electric_plug:", "API changes", ("api", "endpoint", "rest", "graphql", "interface", "json")),
    Gitmoji("💎", ":gem:", "Ruby changes", ("ruby", "rails", "bundler", "gem", "rake")),
)


def calculate_fuzzy_score(commit_message: str, gitmoji: Gitmoji) -> int:
    """Score how well a gitmoji fits a commit message (0-100)."""
    msg = commit_message.lower()
    score = 0

    for keyword in gitmoji.keywords:
        if keyword in msg:
            score += 40
        if keyword[:3] in msg:
            score += 10

    for word in gitmoji.description.lower().split(" "):
        if len(word) > 2 and word in msg:
            score += 15

    return min(score, MAX_SCORE)


def find_best_gitmoji(commit_message: str) -> Optional[Gitmoji]:
    """Return the best-scoring gitmoji, or None if nothing clears the threshold.

    Ties go to the gitmoji listed first.
    """
    if not commit_message or not commit_message.strip():
        return None

    best = None
    best_score = MATCH_THRESHOLD
    for gitmoji in GITMOJIS:
        score = calculate_fuzzy_score(commit_message, gitmoji)
        if score > best_score:
            best_score = score
            best = gitmoji
    return best


def get_random_gitmoji(rng: Optional[random.Random] = None) -> Gitmoji:
    return (rng or random).choice(GITMOJIS)


def prepend_gitmoji(commit_message: str, gitmoji: Gitmoji) -> str:
    return f"{gitmoji.emoji} {commit_message}"


def get_gitmojified_message(commit_message: str, rng: Optional[random.Random] = None) -> str:
    """Prefix the message with its best gitmoji, or a random one if none match."""
    gitmoji = find_best_gitmoji(commit_message) or get_random_gitmoji(rng)
    return prepend_gitmoji(commit_message, gitmoji)
