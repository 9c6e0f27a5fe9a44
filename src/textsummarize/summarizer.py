from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List
import logging
import math
import re

log = logging.getLogger(__name__)

_SENTENCE = re.compile(r"[^.!?]+[.!?]+")
_WORD = re.compile(r"\w+")


@dataclass(frozen=True)
class Sentence:
    position: int
    text: str


@dataclass(frozen=True)
class ScoredSentence:
    position: int
    text: str
    score: float


@dataclass
class SummaryResult:
    summary: str
    total_sentences: int
    selected_sentences: int
    input_words: int
    output_words: int
    passthrough: bool = False

    @property
    def reduction_ratio(self) -> float:
        # 0.75 means the summary is 75% shorter (in words)
        return 1.0 - (self.output_words / max(1, self.input_words))


def split_sentences(text: str) -> List[Sentence]:
    """Split text into sentences ending in `.`, `!` or `?`, tagged with their position."""
    return [Sentence(i, m.group().strip()) for i, m in enumerate(_SENTENCE.finditer(text))]


def tokenize(text: str) -> List[str]:
    return [w.lower() for w in _WORD.findall(text)]


def word_frequencies(sentences: Iterable[Sentence]) -> Counter:
    freq: Counter = Counter()
    for s in sentences:
        freq.update(tokenize(s.text))
    return freq


def score_sentences(sentences: Iterable[Sentence], freq: Counter) -> List[ScoredSentence]:
    """
    Average document frequency of the words in each sentence.
    Sentences without words get NaN and rank below everything else.
    """
    scored = []
    for s in sentences:
        words = tokenize(s.text)
        score = sum(freq.get(w, 0) for w in words) / len(words) if words else math.nan
        scored.append(ScoredSentence(s.position, s.text, score))
    return scored


def _rank_key(item: ScoredSentence):
    if math.isfinite(item.score):
        return (0, -item.score, item.position)
    return (1, 0.0, item.position)


def summarize_text(text: str, count: int = 5) -> SummaryResult:
    """
    Extractive summary with statistics:
    - Split into sentences
    - Score each by average word frequency across the document
    - Return top-N sentences in document order

    Text with no more than `count` sentences is returned untouched.
    """
    count = max(count, 0)
    sents = split_sentences(text)
    input_words = len(tokenize(text))
    log.debug("segmented %d sentences, %d words", len(sents), input_words)

    if len(sents) <= count:
        return SummaryResult(
            summary=text,
            total_sentences=len(sents),
            selected_sentences=len(sents),
            input_words=input_words,
            output_words=input_words,
            passthrough=True,
        )

    scored = score_sentences(sents, word_frequencies(sents))
    # pick top `count` by score, then sort by original position
    top = sorted(sorted(scored, key=_rank_key)[:count], key=lambda s: s.position)
    summary = " ".join(s.text for s in top)
    log.debug("selected positions %s", [s.position for s in top])

    return SummaryResult(
        summary=summary,
        total_sentences=len(sents),
        selected_sentences=len(top),
        input_words=input_words,
        output_words=len(tokenize(summary)),
    )


def summarize(text: str, count: int = 5) -> str:
    return summarize_text(text, count).summary
