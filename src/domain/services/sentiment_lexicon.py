# src/domain/services/sentiment_lexicon.py
"""
Léxico financeiro ponderado usado no score heurístico de sentimento.

Tabelas somente-leitura, carregadas uma vez no import do módulo.
Chaves em minúsculas; o casamento é por substring (ver sentiment_scorer).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

POSITIVE_LEXICON: Mapping[str, int] = MappingProxyType(
    {
        # strong (+3)
        "surge": 3,
        "soar": 3,
        "skyrocket": 3,
        "record high": 3,
        "all-time high": 3,
        "breakout": 3,
        "blowout": 3,
        # solid (+2)
        "beat": 2,
        "strong": 2,
        "bullish": 2,
        "rally": 2,
        "upgrade": 2,
        "outperform": 2,
        "jump": 2,
        "boom": 2,
        "buy rating": 2,
        # moderate (+1)
        "gain": 1,
        "up": 1,
        "rise": 1,
        "growth": 1,
        "profit": 1,
        "higher": 1,
        "positive": 1,
        "buy": 1,
        "optimistic": 1,
        "climb": 1,
    }
)

NEGATIVE_LEXICON: Mapping[str, int] = MappingProxyType(
    {
        # strong (-3)
        "plunge": -3,
        "crash": -3,
        "collapse": -3,
        "plummet": -3,
        "record low": -3,
        "bankrupt": -3,
        "fraud": -3,
        # solid (-2)
        "miss": -2,
        "weak": -2,
        "bearish": -2,
        "downgrade": -2,
        "underperform": -2,
        "tumble": -2,
        "slump": -2,
        "selloff": -2,
        "sell-off": -2,
        "lawsuit": -2,
        # moderate (-1)
        "down": -1,
        "loss": -1,
        "fall": -1,
        "drop": -1,
        "decline": -1,
        "lower": -1,
        "negative": -1,
        "sell": -1,
        "risk": -1,
        "concern": -1,
    }
)
