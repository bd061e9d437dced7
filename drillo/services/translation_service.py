"""Translation suggestions via the public Google Translate endpoint."""

import logging

import requests

from drillo.config import DrilloConfig

logger = logging.getLogger(__name__)


def normalize_input_for_translation(raw_input: str, specifier: str) -> tuple[str, bool]:
    """Strip the non-noun specifier from user input.

    A specifier at the start or end of the input marks the word as a
    non-noun. Anything else is treated as a noun.

    Args:
        raw_input: Word as typed by the user
        specifier: Single punctuation character marking non-nouns

    Returns:
        Tuple of (cleaned word, noun_mode)
    """
    stripped = raw_input.strip()
    if specifier and stripped.startswith(specifier):
        return stripped[len(specifier) :].strip(), False
    if specifier and stripped.endswith(specifier):
        return stripped[: -len(specifier)].strip(), False
    return stripped, True


class TranslationService:
    """Suggest translations for new vocabulary entries."""

    def __init__(self, config: DrilloConfig):
        """Initialize with endpoint, languages and timeout from config.

        Args:
            config: Configuration providing translation settings
        """
        self.config = config

    def translate(self, text: str) -> str | None:
        """Translate text from the source to the target language.

        Args:
            text: Text to translate

        Returns:
            Translated text, or None if the lookup failed
        """
        try:
            response = requests.get(
                self.config.translate_url,
                params={
                    "client": "gtx",
                    "sl": self.config.source_language,
                    "tl": self.config.target_language,
                    "dt": "t",
                    "q": text,
                },
                timeout=self.config.translate_timeout,
            )

            if response.status_code != 200:
                logger.warning(f"Translation request for '{text}' returned {response.status_code}")
                return None

            segments = response.json()[0]
            translation = "".join(segment[0] for segment in segments if segment and segment[0])
            return translation or None

        except requests.exceptions.Timeout:
            logger.warning(f"Translation request for '{text}' timed out")
            return None
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning(f"Translation lookup for '{text}' failed: {e}")
            return None

    def suggest(self, word: str, noun_mode: bool) -> str | None:
        """Look up a translation suitable for a new vocabulary entry.

        Nouns are translated with a leading article so the suggestion
        carries grammatical gender; other words are lowercased.

        Args:
            word: Normalized word (see normalize_input_for_translation)
            noun_mode: Whether the word is a noun

        Returns:
            Suggested translation, or None if the lookup failed
        """
        if noun_mode:
            return self.translate(f"the {word}")

        translation = self.translate(word)
        return translation.lower() if translation else None
