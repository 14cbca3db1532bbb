"""
Tests for the alias index builder.
"""
from venue_resolver.models import CatalogEntry
from venue_resolver.resolution import AliasIndexBuilder, acronym_for, build_alias_index


class TestAcronymFor:
    """Tests for acronym_for."""

    def test_first_letters_of_words(self):
        """Test acronym of a plain multi-word name."""
        assert acronym_for("Long Table Brewhouse") == "ltb"

    def test_stopwords_are_skipped(self):
        """Test that articles and prepositions don't contribute letters."""
        assert acronym_for("The Rusty Mic") == "rm"
        assert acronym_for("Bar of the Arts") == "ba"

    def test_single_significant_word_has_no_acronym(self):
        """Test that one remaining word produces no acronym."""
        assert acronym_for("The Venue") is None
        assert acronym_for("Rustys") is None


class TestBuildAliasIndex:
    """Tests for build_alias_index."""

    def test_indexes_generated_acronym(self, brewhouse_catalog):
        """Test that the acronym points at its venue."""
        index = build_alias_index(brewhouse_catalog)

        assert index == {"ltb": [brewhouse_catalog[0]]}

    def test_overrides_merge_by_derived_slug(self):
        """Test that curated aliases apply via the slug derived from the name."""
        entry = CatalogEntry(id="9", name="Sunshine Studios Live")

        index = build_alias_index([entry])

        # "ssl" is both the acronym and an override; listed once
        assert index == {"ssl": [entry], "sslive": [entry]}

    def test_overrides_merge_by_catalog_slug(self):
        """Test that curated aliases apply via an explicit catalog slug."""
        entry = CatalogEntry(id="9", name="SSL Main Room", slug="sunshine-studios-live")

        index = build_alias_index([entry])

        assert set(index) == {"smr", "ssl", "sslive"}

    def test_collisions_are_preserved(self):
        """Test that two venues sharing an acronym are both kept."""
        brewhouse = CatalogEntry(id="1", name="Long Table Brewhouse")
        tiger = CatalogEntry(id="2", name="Lucky Tiger Bar")

        index = build_alias_index([brewhouse, tiger])

        assert index["ltb"] == [brewhouse, tiger]

    def test_short_aliases_are_discarded(self):
        """Test that aliases under two characters never enter the index."""
        entry = CatalogEntry(id="3", name="X Y")

        index = build_alias_index([entry], overrides={"x-y": ["q", "!"]})

        assert index == {"xy": [entry]}

    def test_empty_catalog(self):
        """Test that an empty catalog gives an empty index."""
        assert build_alias_index([]) == {}

    def test_get_index_returns_copy(self, brewhouse_catalog):
        """Test that callers cannot mutate the builder's index."""
        builder = AliasIndexBuilder(brewhouse_catalog)

        builder.get_index()["ltb"].clear()

        assert builder.get_index()["ltb"] == [brewhouse_catalog[0]]
