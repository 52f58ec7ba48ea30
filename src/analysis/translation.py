"""Reference translator backed by a fixed phrase table"""
from __future__ import annotations

import re
from typing import Optional, Sequence, get_args

from config import logger
from src.core import DEFAULT_LANGUAGE, StageOutcome, SupportedLanguage, TranslationResult
from src.analysis.language import LanguageDetector
from src.analysis.lexicon import PHRASE_TABLE, Phrase

SUPPORTED_LANGUAGES = frozenset(get_args(SupportedLanguage))


class ReferenceTranslator:
    """
    Phrase-substitution translator

    Only phrases from the phrase table are translated; all other text is
    returned unchanged. A real translation backend can replace this class
    behind the ITranslationProvider interface.

    Attributes:
        phrases: Phrase table entries, each with en/hi/ta variants
        detector: LanguageDetector used when the source language is omitted
    """

    def __init__(
        self,
        phrases: Sequence[Phrase] = PHRASE_TABLE,
        detector: Optional[LanguageDetector] = None,
    ) -> None:
        self.phrases = tuple(phrases)
        self.detector = detector or LanguageDetector()

    def run(
        self,
        text: str,
        target_language: SupportedLanguage = DEFAULT_LANGUAGE,
        source_language: Optional[SupportedLanguage] = None,
    ) -> StageOutcome[TranslationResult]:
        """
        Translate text, reporting failures instead of raising

        Args:
            text: Text to translate
            target_language: Language to translate into (default 'en')
            source_language: Language of text, detected when omitted

        Returns:
            StageOutcome with the translation. On failure the value is an
            identity translation and error holds the failure message
        """
        try:
            if source_language is None:
                source_language = self.detector.detect(text).detected_language

            if source_language == target_language:
                return StageOutcome[TranslationResult](
                    value=TranslationResult(
                        original_text=text,
                        translated_text=text,
                        source_language=source_language,
                        target_language=target_language,
                    )
                )

            translated = self._substitute(text, source_language, target_language)
            return StageOutcome[TranslationResult](
                value=TranslationResult(
                    original_text=text,
                    translated_text=translated,
                    source_language=source_language,
                    target_language=target_language,
                )
            )
        except Exception as e:
            logger.exception("Translation failed")
            if source_language not in SUPPORTED_LANGUAGES:
                source_language = DEFAULT_LANGUAGE
            if target_language not in SUPPORTED_LANGUAGES:
                target_language = DEFAULT_LANGUAGE
            return StageOutcome[TranslationResult](
                value=TranslationResult(
                    original_text=text if isinstance(text, str) else "",
                    translated_text=text if isinstance(text, str) else "",
                    source_language=source_language,
                    target_language=target_language,
                ),
                error=repr(e),
            )

    def translate(
        self,
        text: str,
        target_language: SupportedLanguage = DEFAULT_LANGUAGE,
        source_language: Optional[SupportedLanguage] = None,
    ) -> TranslationResult:
        return self.run(text, target_language, source_language).value

    def _substitute(
        self,
        text: str,
        source_language: SupportedLanguage,
        target_language: SupportedLanguage,
    ) -> str:
        translated = text
        lowered = text.lower()
        for phrase in self.phrases:
            replacement = phrase.variant(target_language)
            if source_language == "en":
                if phrase.en.lower() in lowered:
                    translated = re.sub(
                        re.escape(phrase.en),
                        lambda _m, r=replacement: r,
                        translated,
                        flags=re.IGNORECASE,
                    )
            else:
                # Non-English phrases are matched literally, first occurrence only
                source_phrase = phrase.variant(source_language)
                if source_phrase in text:
                    translated = translated.replace(source_phrase, replacement, 1)
        return translated
