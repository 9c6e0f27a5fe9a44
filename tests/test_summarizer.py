"""Tests for the word-frequency extractive summarizer."""
import math

import pytest
from textsummarize.summarizer import (
    Sentence,
    score_sentences,
    split_sentences,
    summarize,
    summarize_text,
    tokenize,
    word_frequencies,
)

CAT_TEXT = "A cat sat. A cat sat on a mat. The mat was red. The sun was warm today."


def _long_text():
    return (
        "Python is a programming language. "
        "Python code is readable and Python is popular. "
        "The weather was cold yesterday. "
        "Many developers write Python code every day! "
        "Is the language easy to learn? "
        "Bananas are yellow. "
        "Python programming is fun for many developers."
    )


class TestSplitSentences:
    def test_positions_and_trimming(self):
        sents = split_sentences("  First one.  Second one!\nThird?  ")
        assert sents == [
            Sentence(0, "First one."),
            Sentence(1, "Second one!"),
            Sentence(2, "Third?"),
        ]

    def test_repeated_terminators_stay_with_sentence(self):
        sents = split_sentences("Wait!? Really... Yes.")
        assert [s.text for s in sents] == ["Wait!?", "Really...", "Yes."]

    def test_no_terminator_yields_nothing(self):
        assert split_sentences("no punctuation at all") == []
        assert split_sentences("") == []

    def test_trailing_fragment_dropped(self):
        sents = split_sentences("Done. And then")
        assert [s.text for s in sents] == ["Done."]


class TestScoring:
    def test_tokenize_lowercases(self):
        assert tokenize("The Cat, the_cat 42!") == ["the", "cat", "the_cat", "42"]

    def test_frequencies_are_document_wide(self):
        freq = word_frequencies(split_sentences(CAT_TEXT))
        assert freq["a"] == 3
        assert freq["cat"] == 2
        assert freq["today"] == 1

    def test_score_is_average_frequency(self):
        sents = split_sentences(CAT_TEXT)
        scored = score_sentences(sents, word_frequencies(sents))
        assert scored[0].score == pytest.approx(7 / 3)
        assert scored[1].score == pytest.approx(13 / 6)
        assert scored[2].score == pytest.approx(7 / 4)
        assert scored[3].score == pytest.approx(7 / 5)

    def test_wordless_sentence_is_not_finite(self):
        sents = split_sentences("Cats purr. - !")
        scored = score_sentences(sents, word_frequencies(sents))
        assert math.isfinite(scored[0].score)
        assert not math.isfinite(scored[1].score)


class TestSummarize:
    def test_cat_example(self):
        assert summarize(CAT_TEXT, 2) == "A cat sat. A cat sat on a mat."

    def test_short_text_passthrough(self):
        assert summarize("Short text.", 5) == "Short text."

    def test_passthrough_keeps_formatting(self):
        text = "  Hello   world.\n\nBye now!  "
        assert summarize(text, 2) == text

    def test_no_terminators_passthrough(self):
        text = "just some words without an ending"
        assert summarize(text, 1) == text

    def test_empty_input(self):
        for n in (1, 5, 20):
            assert summarize("", n) == ""

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 6])
    def test_length_bound(self, count):
        out = summarize(_long_text(), count)
        assert len(split_sentences(out)) == count

    def test_order_preserved(self):
        source = [s.text for s in split_sentences(_long_text())]
        out = [s.text for s in split_sentences(summarize(_long_text(), 3))]
        indices = [source.index(s) for s in out]
        assert indices == sorted(indices)

    def test_deterministic(self):
        assert summarize(_long_text(), 3) == summarize(_long_text(), 3)

    def test_ties_prefer_earlier_sentences(self):
        text = "Alpha beta. Gamma delta. Epsilon zeta."
        assert summarize(text, 2) == "Alpha beta. Gamma delta."

    def test_duplicate_sentences_keep_their_positions(self):
        assert summarize("Red fox. Blue fox. Red fox.", 2) == "Red fox. Red fox."

    def test_wordless_sentence_ranks_last(self):
        text = "Cats purr. Cats purr loudly. - ! Dogs bark."
        assert summarize(text, 3) == "Cats purr. Cats purr loudly. Dogs bark."

    def test_non_positive_count(self):
        assert summarize("One. Two.", 0) == ""
        assert summarize("One. Two.", -1) == ""
        assert summarize("", -3) == ""
        assert summarize("no sentences", 0) == "no sentences"


class TestSummaryResult:
    def test_statistics(self):
        res = summarize_text(CAT_TEXT, 2)
        assert res.total_sentences == 4
        assert res.selected_sentences == 2
        assert res.input_words == 18
        assert res.output_words == 9
        assert res.reduction_ratio == pytest.approx(0.5)
        assert not res.passthrough

    def test_passthrough_flag(self):
        res = summarize_text("Short text.", 5)
        assert res.passthrough
        assert res.summary == "Short text."
        assert res.reduction_ratio == 0.0
