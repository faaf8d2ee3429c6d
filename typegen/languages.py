"""Target-language descriptors understood by the generation engine."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError


@dataclass(frozen=True)
class TargetLanguage:
    """How one target language is named, written and configured."""

    selector: str
    engine_name: str
    extension: str
    comment_prefix: str
    # Renderer options the engine accepts for this language
    renderer_options: frozenset[str]


LANGUAGES: dict[str, TargetLanguage] = {
    "ts": TargetLanguage(
        selector="ts",
        engine_name="typescript",
        extension="ts",
        comment_prefix="//",
        renderer_options=frozenset(
            {"just-types", "prefer-types", "prefer-unions", "prefer-const-values"}
        ),
    ),
    "swift": TargetLanguage(
        selector="swift",
        engine_name="swift",
        extension="swift",
        comment_prefix="//",
        renderer_options=frozenset({"just-types"}),
    ),
}


def supported_languages() -> list[str]:
    return sorted(LANGUAGES)


def get_target_language(selector: str) -> TargetLanguage:
    """Look up a language by selector, failing on anything unsupported."""
    try:
        return LANGUAGES[selector]
    except KeyError:
        supported = ", ".join(supported_languages())
        raise ConfigError(
            f"Language {selector!r} is not supported (supported: {supported})"
        ) from None
