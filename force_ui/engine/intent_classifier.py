# force_ui/engine/intent_classifier.py

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ..config.intent_mappings import INTENT_KEYWORDS
from ..exceptions import EnhancementError
from ..models import Intent, IntentResult, Persona

if TYPE_CHECKING:
    from ..llm.enhancer import IntentEnhancer

logger = logging.getLogger(__name__)

FALLBACK_INTENT: Intent = "project_planning"
FALLBACK_CONFIDENCE = 0.3
KEYWORD_CONFIDENCE_CAP = 0.7
ENHANCEMENT_THRESHOLD = 0.6

# Checked in order, first hit wins.
PERSONA_HINTS: list[tuple[Persona, tuple[str, ...]]] = [
    ("developer", ("developer", "engineer", "code")),
    ("recruiter", ("recruit", "hiring", "candidate")),
    ("analyst", ("analy", "data", "metric")),
]

_QUOTED_RE = re.compile(r'"([^"]+)"')
_CAPITALIZED_RE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")


def detect_persona(text: str) -> Persona:
    lowered = text.lower()
    for persona, hints in PERSONA_HINTS:
        if any(h in lowered for h in hints):
            return persona
    return "founder"


def extract_entities(text: str) -> list[str]:
    """
    Quoted strings (quotes stripped), then runs of capitalized words.

    Capitalized runs of two characters or fewer, or equal to the whole input,
    are skipped. Duplicates are dropped keeping first occurrence.
    """
    entities: list[str] = list(_QUOTED_RE.findall(text))
    entities.extend(
        m for m in _CAPITALIZED_RE.findall(text) if len(m) > 2 and m != text
    )
    return list(dict.fromkeys(entities))


class IntentClassifier:
    """
    Keyword-based intent classification with an optional LLM refinement.

    Pipeline (classify):
    1. Count keyword substring hits per intent, rank, drop zero counts.
    2. No hits -> fixed fallback intent with low confidence.
    3. Low confidence + use_llm -> ask the enhancer; on failure keep step 1/2.
    4. Detect persona and extract entities from the raw text.
    """

    def __init__(
        self,
        keywords: dict[Intent, list[str]] | None = None,
        enhancer: IntentEnhancer | None = None,
    ) -> None:
        self.keywords = INTENT_KEYWORDS if keywords is None else keywords
        self.enhancer = enhancer

    # ------------------------------------------------------------------ #
    # Keyword scoring
    # ------------------------------------------------------------------ #

    def _keyword_classification(self, text: str) -> tuple[Intent, list[Intent], float]:
        lowered = text.lower()

        scores: list[tuple[Intent, int]] = []
        for intent, words in self.keywords.items():
            count = sum(1 for kw in words if kw.lower() in lowered)
            scores.append((intent, count))

        # sorted() is stable, so ties keep table order
        ranked = [(i, c) for i, c in sorted(scores, key=lambda s: s[1], reverse=True) if c > 0]

        if not ranked:
            return FALLBACK_INTENT, [], FALLBACK_CONFIDENCE

        primary, top_count = ranked[0]
        sub_intents = [i for i, _ in ranked[1:3]]
        confidence = min(KEYWORD_CONFIDENCE_CAP, top_count / 3)
        return primary, sub_intents, confidence

    def _enhance(
        self,
        text: str,
        fallback: tuple[Intent, list[Intent], float],
    ) -> tuple[Intent, list[Intent], float]:
        if self.enhancer is None:
            logger.warning("[IntentClassifier.classify] LLM requested but no enhancer configured")
            return fallback

        try:
            enhanced = self.enhancer.enhance(text)
        except EnhancementError as e:
            logger.warning("[IntentClassifier.classify] LLM enhancement failed, using keywords: %s", e)
            return fallback

        return enhanced.primary_intent, list(enhanced.sub_intents), enhanced.confidence

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def classify(self, text: str, use_llm: bool = False) -> IntentResult:
        primary, sub_intents, confidence = self._keyword_classification(text)

        if use_llm and confidence < ENHANCEMENT_THRESHOLD:
            primary, sub_intents, confidence = self._enhance(
                text, fallback=(primary, sub_intents, confidence)
            )

        result = IntentResult(
            primary_intent=primary,
            sub_intents=sub_intents,
            entities=extract_entities(text),
            persona=detect_persona(text),
            confidence=confidence,
            raw_input=text,
        )
        logger.debug(
            "[IntentClassifier.classify] %r -> %s (%.2f)",
            text,
            result.primary_intent,
            result.confidence,
        )
        return result

    def classify_batch(self, texts: list[str]) -> list[IntentResult]:
        return [self.classify(t) for t in texts]
