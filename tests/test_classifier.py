"""Unit tests for continuation classification."""

import pytest

from weighting.models import ActiveSeries
from weighting.scoring import ContinuationClassifier


def active(series_name, number, author="Test Author"):
    return ActiveSeries(
        series_name=series_name,
        author=author,
        current_book=f"Current ({series_name}, #{number:g})",
        current_book_number=number,
        normalized_author=author.lower(),
    )


@pytest.fixture
def classifier():
    return ContinuationClassifier()


class TestIsNext:
    """Basic next-in-series checks."""

    @pytest.fixture
    def active_series(self):
        return [
            active("Unholy Trinity", 1, author="Nicole Marsh"),
            active("Alex Cross", 17, author="James Patterson"),
        ]

    def test_next_book(self, classifier, active_series, make_book):
        book = make_book("Witch's Twilight (Unholy Trinity, #2)", author="Nicole Marsh")
        assert classifier.is_next(book, active_series)

    def test_skipped_book_is_not_next(self, classifier, active_series, make_book):
        book = make_book("Cross Country (Alex Cross, #19)", author="James Patterson")
        assert not classifier.is_next(book, active_series)

    def test_current_book_is_not_next(self, classifier, active_series, make_book):
        book = make_book("Cross Fire (Alex Cross, #17)", author="James Patterson")
        assert not classifier.is_next(book, active_series)

    def test_author_must_match(self, classifier, active_series, make_book):
        book = make_book("Witch's Twilight (Unholy Trinity, #2)", author="Somebody Else")
        assert not classifier.is_next(book, active_series)

    def test_author_spacing_and_case(self, classifier, active_series, make_book):
        book = make_book("Witch's Twilight (Unholy Trinity, #2)", author="NICOLE  MARSH")
        assert classifier.is_next(book, active_series)

    def test_series_name_case_insensitive(self, classifier, active_series, make_book):
        book = make_book("Witch's Twilight (unholy trinity, #2)", author="Nicole Marsh")
        assert classifier.is_next(book, active_series)

    def test_standalone_is_not_next(self, classifier, active_series, make_book):
        assert not classifier.is_next(make_book("Some Random Book Title"), active_series)

    def test_unknown_series_is_not_next(self, classifier, active_series, make_book):
        assert not classifier.is_next(make_book("Two (Other Series, #2)"), active_series)

    def test_no_active_series(self, classifier, make_book):
        assert not classifier.is_next(make_book("Two (Test Series, #2)"), [])


class TestDecimalNumbers:
    """Tolerance around the expected next number."""

    def test_whole_number_after_integer(self, classifier, make_book):
        book = make_book("Cross Justice (Alex Cross, #22)")
        assert classifier.is_next(book, [active("Alex Cross", 21)])

    def test_novella_is_not_next(self, classifier, make_book):
        book = make_book("Action (Alex Cross, #21.5)")
        assert not classifier.is_next(book, [active("Alex Cross", 21)])

    def test_next_after_novella(self, classifier, make_book):
        book = make_book("Later (Test Series, #2.5)")
        assert classifier.is_next(book, [active("Test Series", 1.5)])


class TestFindMatch:
    """Matching a book to an active series."""

    def test_match_returns_active_entry(self, classifier, make_book):
        series = [active("Alex Cross", 17)]
        assert classifier.find_match(make_book("Anything (alex cross, #30)"), series) is series[0]

    def test_no_match_for_standalone(self, classifier, make_book):
        assert classifier.find_match(make_book("Some Random Book Title"), [active("Alex Cross", 17)]) is None


class TestProgressive:
    """Progressive-aware continuation checks."""

    AUTHOR = "Reki Kawahara"

    def test_base_first_book_locked_while_variant_pending(self, classifier, make_book):
        library = [
            make_book("Aria (Sword Art Online: Progressive, #1)", author=self.AUTHOR),
            make_book("Aincrad (Sword Art Online, #1)", author=self.AUTHOR),
        ]
        assert not classifier.is_next_considering_progressive(library[1], [], library)

    def test_base_first_book_unlocked_after_variant_read(self, classifier, make_book):
        library = [
            make_book("Aria (Sword Art Online: Progressive, #1)", author=self.AUTHOR, shelf="read"),
            make_book("Barcarolle (Sword Art Online: Progressive, #2)", author=self.AUTHOR, shelf="read"),
            make_book("Aincrad (Sword Art Online, #1)", author=self.AUTHOR),
        ]
        assert classifier.is_next_considering_progressive(library[2], [], library)

    def test_base_first_book_without_variant_uses_basic_rule(self, classifier, make_book):
        library = [make_book("Aincrad (Sword Art Online, #1)", author=self.AUTHOR)]
        assert not classifier.is_next_considering_progressive(library[0], [], library)

    def test_progressive_book_follows_its_own_numbering(self, classifier, make_book):
        library = [
            make_book("Aria (Sword Art Online: Progressive, #1)", author=self.AUTHOR, shelf="read"),
            make_book("Barcarolle (Sword Art Online: Progressive, #2)", author=self.AUTHOR),
        ]
        series = [active("Sword Art Online: Progressive", 1, author=self.AUTHOR)]
        assert classifier.is_next_considering_progressive(library[1], series, library)

    def test_later_base_book_uses_basic_rule(self, classifier, make_book):
        library = [
            make_book("Aria (Sword Art Online: Progressive, #1)", author=self.AUTHOR),
            make_book("Fairy Dance (Sword Art Online, #3)", author=self.AUTHOR),
        ]
        series = [active("Sword Art Online", 2, author=self.AUTHOR)]
        assert classifier.is_next_considering_progressive(library[1], series, library)
