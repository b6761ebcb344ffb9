from unittest.mock import patch

from marketplace.catalog.categories import SERVICE_CATEGORIES, category_names, get_categories
from marketplace.search.category import infer_category, jaccard
from marketplace.search.models import CategoryDescriptor

CATEGORIES = get_categories()


# ── Jaccard ──────────────────────────────────────────────────────────────


def test_jaccard_basic():
    assert jaccard({"a", "b"}, {"b", "c"}) == 1 / 3


def test_jaccard_identical():
    assert jaccard({"x", "y"}, {"y", "x"}) == 1.0


def test_jaccard_empty_is_zero():
    assert jaccard(set(), {"a"}) == 0.0
    assert jaccard({"a"}, set()) == 0.0
    assert jaccard(set(), set()) == 0.0


# ── Synonym stage ────────────────────────────────────────────────────────


class TestSynonymStage:
    def test_cctv_maps_to_security(self):
        assert infer_category("cctv installation", CATEGORIES) == "Security Services"

    def test_multiword_phrase(self):
        assert infer_category("Need System-Security audit", CATEGORIES) == "Security Services"

    def test_synonym_beats_similarity(self):
        # Tokens overlap heavily with Home Services, the synonym still wins
        query = "home cleaning plumbing electrical camera"
        assert infer_category(query, CATEGORIES) == "Security Services"

    def test_synonym_ignores_category_list(self):
        assert infer_category("plumber", []) == "Home Services"

    def test_first_declared_phrase_wins(self):
        # "tutor" is declared before "dj"
        assert infer_category("tutor for dj", CATEGORIES) == "Education & Tutoring"
        # "it support" is declared before "moving"
        assert infer_category("moving it support", CATEGORIES) == "Technical Services"

    def test_substring_match_inside_words(self):
        # "tutor" is contained in "tutoring"
        assert infer_category("online tutoring", CATEGORIES) == "Education & Tutoring"


# ── Similarity stage ─────────────────────────────────────────────────────


class TestSimilarityStage:
    def test_empty_query(self):
        assert infer_category("", CATEGORIES) is None
        assert infer_category("   ", CATEGORIES) is None
        assert infer_category(None, CATEGORIES) is None

    def test_no_overlap(self):
        assert infer_category("xyz123", CATEGORIES) is None

    def test_above_threshold(self):
        # {wellness, beauty} vs {health, personal, care, fitness, wellness, beauty}
        assert infer_category("wellness beauty", CATEGORIES) == "Health & Personal Care"

    def test_below_threshold(self):
        # 1 shared token out of a union of 7
        assert infer_category("writing poems songs", CATEGORIES) is None

    def test_tie_keeps_first_category(self):
        cats = [
            CategoryDescriptor(name="Alpha", description="garden lawn"),
            CategoryDescriptor(name="Beta", description="garden lawn"),
        ]
        assert infer_category("garden lawn", cats) == "Alpha"

    def test_accepts_plain_dicts(self):
        cats = [{"name": "Pet Care", "description": "grooming walking boarding"}]
        assert infer_category("dog walking grooming", cats) == "Pet Care"

    def test_stop_word_only_query_skips_categories(self):
        with patch("marketplace.search.category.jaccard") as mock_jaccard:
            assert infer_category("the best service near me", CATEGORIES) is None
            mock_jaccard.assert_not_called()

    def test_empty_category_list(self):
        assert infer_category("wellness beauty", []) is None

    def test_result_is_a_known_category_or_none(self):
        names = set(category_names())
        for query in ["garden", "wedding planning", "finance strategy", "auto furniture"]:
            result = infer_category(query, CATEGORIES)
            assert result is None or result in names


def test_catalog_has_twelve_categories():
    assert len(SERVICE_CATEGORIES) == 12
    assert "Security Services" in category_names()
