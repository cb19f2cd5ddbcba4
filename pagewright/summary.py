"""Sentence extraction for page summaries and templates.

Adjacent non-stop words inside a sentence form a relation. Relations are
weighted by how often they occur in the whole text, and the heaviest
relations point at the sentences worth quoting. Page summaries are the
opening sentence; the ranked sentences are offered to templates as
``ranked_sentences(text, n)``.
"""
from __future__ import annotations

import re
from collections import Counter

SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+|\n\s*\n")
WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)?", re.UNICODE)
DEFAULT_LIMIT = 50

STOP_WORDS = frozenset(
    """
    a about above after again against all am an and any are as at be because been before being
    below between both but by can could did do does doing down during each few for from further
    had has have having he her here hers herself him himself his how i if in into is it its
    itself just me more most my myself no nor not now of off on once only or other our ours
    ourselves out over own same she should so some such than that the their theirs them
    themselves then there these they this those through to too under until up very was we were
    what when where which while who whom why will with would you your yours yourself yourselves
    """.split()
)


def split_sentences(text: str) -> list[str]:
    return [part.strip() for part in SENTENCE_END_RE.split(text) if part and part.strip()]


def sentence_words(sentence: str) -> list[str]:
    words = [word.lower() for word in WORD_RE.findall(sentence)]
    return [word for word in words if word not in STOP_WORDS and len(word) > 1]


def rank_relations(sentences: list[str]) -> list[tuple[tuple[str, str], float]]:
    counts: Counter = Counter()
    for sentence in sentences:
        words = sentence_words(sentence)
        for left, right in zip(words, words[1:]):
            if left != right:
                counts[(left, right)] += 1
    if not counts:
        return []
    top = max(counts.values())
    # Counter preserves first-seen order, so ties keep text order.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [(pair, count / top) for pair, count in ranked]


def sentences_by_relation_weight(text: str, limit: int = DEFAULT_LIMIT) -> list[str]:
    sentences = split_sentences(text)
    word_sets = [set(sentence_words(sentence)) for sentence in sentences]
    selected: list[str] = []
    seen: set[int] = set()
    for (left, right), _weight in rank_relations(sentences):
        for idx, words in enumerate(word_sets):
            if idx in seen or left not in words or right not in words:
                continue
            seen.add(idx)
            selected.append(sentences[idx])
            if len(selected) >= limit:
                return selected
    return selected


def sentences_from(text: str, start: int, count: int) -> list[str]:
    return split_sentences(text)[start : start + count]


def summarize(text: str) -> str:
    summary = ""
    # Last sentence wins; only the opening sentence is iterated.
    for sentence in sentences_from(text, 0, 1):
        summary = sentence.replace("\n", "")
    return summary
