# src/domain/services/sentiment_aggregator.py

from __future__ import annotations

from collections import Counter
from statistics import mean
from typing import Iterable, Mapping

from src.domain.services.sentiment_scorer import score_document
from src.entities.scored_document import (
    ScoredDocument,
    SentimentBucket,
    SentimentLabel,
)
from src.entities.sentiment_summary import (
    CombinedSentimentVerdict,
    SentimentReport,
    SourceSentimentSummary,
    VerdictLabel,
)
from src.entities.text_document import DocumentSource, TextDocument

STRONG_VERDICT_THRESHOLD = 1.0


class SentimentAggregator:
    """
    Domain Service responsável por pontuar documentos de texto e
    agregar os scores por fonte e no veredito combinado.

    Este serviço:
    - Implementa regra de negócio do domínio
    - Não depende de I/O nem guarda estado entre chamadas
    - Nunca divide por zero: fontes vazias têm média 0 e peso 0
    """

    def summarize_source(
        self,
        source: DocumentSource,
        documents: Iterable[ScoredDocument],
    ) -> SourceSentimentSummary:
        """
        Estatísticas de uma fonte.

        Args:
            source: fonte à qual todos os documentos pertencem
            documents: documentos já pontuados

        Returns:
            SourceSentimentSummary (média 0.0 quando não há documentos)
        """
        source = DocumentSource(source)
        scored = list(documents)

        for item in scored:
            if item.document.source_id != source:
                raise ValueError(
                    "All scored documents must belong to the summarized source"
                )

        labels = Counter(item.label for item in scored)
        buckets = Counter(item.bucket for item in scored)

        return SourceSentimentSummary(
            source_id=source,
            count=len(scored),
            bullish_count=labels[SentimentLabel.BULLISH],
            bearish_count=labels[SentimentLabel.BEARISH],
            neutral_count=labels[SentimentLabel.NEUTRAL],
            average_score=float(mean(item.score for item in scored)) if scored else 0.0,
            bucket_distribution={bucket: buckets[bucket] for bucket in SentimentBucket},
        )

    def combine(
        self,
        summaries: Iterable[SourceSentimentSummary],
    ) -> CombinedSentimentVerdict:
        """
        Média ponderada das médias por fonte, peso = número de documentos.

            combined = Σ(mean_i × count_i) / Σ(count_i)

        Fontes sem documentos contribuem com peso 0; sem nenhum documento
        o score combinado é 0 (neutro) por convenção.
        """
        weighted_sum = 0.0
        total = 0

        for summary in summaries:
            if summary.count == 0:
                continue
            weighted_sum += summary.average_score * summary.count
            total += summary.count

        score = weighted_sum / total if total else 0.0

        return CombinedSentimentVerdict(
            score=score,
            label=self.verdict_label(score),
            total_documents=total,
        )

    @staticmethod
    def verdict_label(score: float) -> VerdictLabel:
        if score > STRONG_VERDICT_THRESHOLD:
            return VerdictLabel.STRONGLY_BULLISH
        if score > 0:
            return VerdictLabel.MILDLY_BULLISH
        if score < -STRONG_VERDICT_THRESHOLD:
            return VerdictLabel.STRONGLY_BEARISH
        if score < 0:
            return VerdictLabel.MILDLY_BEARISH
        return VerdictLabel.NEUTRAL

    def aggregate(self, documents: Iterable[TextDocument]) -> SentimentReport:
        """
        Pontua e agrega um lote de documentos de várias fontes.

        Todas as fontes conhecidas aparecem no relatório, inclusive
        as que não tiveram documentos (count == 0).
        """
        scored = [score_document(doc) for doc in documents]

        by_source: dict[DocumentSource, list[ScoredDocument]] = {
            source: [] for source in DocumentSource
        }
        for item in scored:
            by_source[item.document.source_id].append(item)

        summaries: Mapping[DocumentSource, SourceSentimentSummary] = {
            source: self.summarize_source(source, items)
            for source, items in by_source.items()
        }

        return SentimentReport(
            summaries=summaries,
            documents=tuple(scored),
            verdict=self.combine(summaries.values()),
        )


# =========================
# TODOs: melhorias futuras
# =========================

# TODO(feature-engineering):
# Avaliar casamento por fronteira de palavra no léxico
# ("up" hoje também casa dentro de "upgrade"); exige
# aprovação de produto porque altera os scores publicados.
