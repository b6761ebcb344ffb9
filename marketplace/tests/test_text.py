from marketplace.search.config import STOP_WORDS
from marketplace.search.text import normalize, tokenize

SAMPLE_TEXTS = [
    "",
    "   ",
    "  Electrician! Needed-NOW  ",
    "AC_repair / servicing | urgent\\today",
    "Café  crème — déjà vu",
    "plumber,plumber;PLUMBER",
    "\tmulti\nline\r\ntext ",
    "123 Main St. #4",
]


# ── Normalizer ───────────────────────────────────────────────────────────


class TestNormalize:
    def test_example_query(self):
        assert normalize("  Electrician! Needed-NOW  ") == "electrician needed now"

    def test_separators_become_spaces(self):
        assert normalize("ac_repair/servicing|urgent\\today") == "ac repair servicing urgent today"

    def test_empty_and_whitespace(self):
        assert normalize("") == ""
        assert normalize("   \t\n ") == ""

    def test_non_string_is_empty(self):
        assert normalize(None) == ""
        assert normalize(42) == ""
        assert normalize(["plumber"]) == ""

    def test_non_ascii_letters_are_dropped(self):
        assert normalize("khana बनाने wali") == "khana wali"

    def test_output_alphabet(self):
        for text in SAMPLE_TEXTS:
            out = normalize(text)
            assert all(ch.isascii() and (ch.isalnum() or ch == " ") for ch in out)
            assert "  " not in out
            assert out == out.strip()
            assert out == out.lower()

    def test_idempotent(self):
        for text in SAMPLE_TEXTS:
            once = normalize(text)
            assert normalize(once) == once


# ── Tokenizer ────────────────────────────────────────────────────────────


class TestTokenize:
    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("!!! ???") == []
        assert tokenize(None) == []

    def test_stop_words_removed(self):
        assert tokenize("the best cheap plumber near me") == ["plumber"]

    def test_short_fragments_removed(self):
        assert tokenize("a b c tv x repair") == ["tv", "repair"]

    def test_deduplicates_preserving_order(self):
        assert tokenize("Plumber leak plumber LEAK pipe") == ["plumber", "leak", "pipe"]

    def test_capped_at_eight(self):
        text = "one two three four five six seven eight nine ten"
        tokens = tokenize(text)
        assert tokens == ["one", "two", "three", "four", "five", "six", "seven", "eight"]

    def test_cap_applies_after_dedup(self):
        text = "aa aa bb bb cc dd ee ff gg hh ii"
        assert tokenize(text) == ["aa", "bb", "cc", "dd", "ee", "ff", "gg", "hh"]

    def test_token_invariants(self):
        for text in SAMPLE_TEXTS + ["the service for my home with best price near me"]:
            tokens = tokenize(text)
            assert len(tokens) <= 8
            assert len(tokens) == len(set(tokens))
            for t in tokens:
                assert len(t) >= 2
                assert t not in STOP_WORDS
