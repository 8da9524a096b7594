"""
Tests for word tokenization and sentence segmentation.
"""
from text_scorer.tokenizer import normalize_whitespace, segment, tokenize


class TestTokenize:
    """Test word extraction"""

    def test_empty_string(self):
        """Test empty text yields no tokens"""
        assert tokenize("") == []

    def test_punctuation_only(self):
        """Test punctuation-only text yields no tokens"""
        assert tokenize("... !!! ,;:") == []

    def test_lowercases_and_keeps_order(self):
        """Test tokens are lower-cased, ordered and keep duplicates"""
        assert tokenize("The Cat saw the CAT") == ["the", "cat", "saw", "the", "cat"]

    def test_apostrophes_and_hyphens_stay_inside_words(self):
        """Test contractions and hyphenated words stay whole"""
        assert tokenize("Don't over-think it.") == ["don't", "over-think", "it"]

    def test_digits_are_word_characters(self):
        """Test digits count as word characters"""
        assert tokenize("Set a 20-minute timer") == ["set", "a", "20-minute", "timer"]

    def test_leading_hyphen_is_not_part_of_word(self):
        """Test hyphens outside word boundaries are dropped"""
        assert tokenize("-hello world-") == ["hello", "world"]

    def test_unicode_letters(self):
        """Test accented Latin letters stay inside words"""
        assert tokenize("Café naïve Ärger") == ["café", "naïve", "ärger"]

    def test_non_latin_scripts(self):
        """Test Cyrillic and Greek text tokenizes like English"""
        assert tokenize("Привет мир") == ["привет", "мир"]
        assert tokenize("Γειά σου κόσμε") == ["γειά", "σου", "κόσμε"]


class TestSegment:
    """Test sentence splitting"""

    def test_empty_string(self):
        """Test empty and whitespace-only text yields no sentences"""
        assert segment("") == []
        assert segment("   \n\t ") == []

    def test_splits_after_terminal_punctuation(self):
        """Test splits after '.', '!' and '?' followed by whitespace"""
        text = "First one. Second one! Third one? Fourth"
        assert segment(text) == ["First one.", "Second one!", "Third one?", "Fourth"]

    def test_requires_whitespace_after_punctuation(self):
        """Test punctuation without following whitespace does not split"""
        assert segment("Version 1.5 is out.Really") == ["Version 1.5 is out.Really"]

    def test_collapses_whitespace(self):
        """Test whitespace runs collapse to single spaces"""
        text = "  A   short\n\nline.   Another\tone.  "
        assert segment(text) == ["A short line.", "Another one."]

    def test_repeated_punctuation_stays_attached(self):
        """Test ellipses and '?!' stay with their sentence"""
        assert segment("Wait... What?! Fine.") == ["Wait...", "What?!", "Fine."]

    def test_round_trip_reproduces_normalized_text(self):
        """Test joining sentences with spaces gives the normalized text"""
        text = "Hello   there.\nHow are\tyou?  I am fine!   Thanks"
        assert " ".join(segment(text)) == normalize_whitespace(text)
