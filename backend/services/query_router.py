"""
Query Router for the Reasoning Chat service.

This module implements the keyword heuristic that decides whether a chat turn
is routed through chain-of-thought reasoning or answered directly.
"""

from dataclasses import dataclass, field
import logging
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class Classification:
    """
    Result of query classification.

    Attributes:
        category: Either "simple" or "complex"
        matched_keywords: Complexity keywords found in the query, sorted
        rule_triggered: Which rule produced the decision
    """
    category: str
    matched_keywords: List[str] = field(default_factory=list)
    rule_triggered: str = ""

    @property
    def is_complex(self) -> bool:
        return self.category == QueryRouter.COMPLEX


class QueryRouter:
    """
    Deterministic classifier for chat turns.

    A turn is complex when its lower-cased text contains any complexity keyword
    as a plain substring, so "how" also matches "show" and "somehow".
    """

    # Classification categories
    SIMPLE = "simple"
    COMPLEX = "complex"

    COMPLEX_KEYWORDS = (
        "why",
        "how",
        "analyze",
        "explain",
        "reason",
        "think",
        "solve",
        "problem",
        "complex",
        "difficult",
    )

    def classify_query(self, query: str) -> Classification:
        """
        Classify a chat message as simple or complex.

        Args:
            query: User message

        Returns:
            Classification with category, matched keywords and rule name
        """
        if not query or not query.strip():
            logger.debug("Empty query received, classifying as simple")
            return Classification(category=self.SIMPLE, rule_triggered="empty")

        matches = self._get_matched_keywords(query.lower())
        if matches:
            logger.info(f"Classification: {self.COMPLEX} (keywords: {', '.join(matches)}) - {query[:50]}")
            return Classification(
                category=self.COMPLEX,
                matched_keywords=matches,
                rule_triggered="complex_keyword"
            )

        logger.info(f"Classification: {self.SIMPLE} (default) - {query[:50]}")
        return Classification(category=self.SIMPLE, rule_triggered="default")

    def is_complex(self, query: str) -> bool:
        return self.classify_query(query).is_complex

    def _get_matched_keywords(self, query_lower: str) -> List[str]:
        return sorted(k for k in self.COMPLEX_KEYWORDS if k in query_lower)
