import pytest

from texmeta.errors import GrammarError
from texmeta.parsers.author import parse_author, parse_authors
from texmeta.parsers.models import Author

FULANO = Author(given=b"Fulano de", family=b"Tal")


class TestParseAuthor:
    def test_no_space(self) -> None:
        author, rest = parse_author(b"given>Fulano de,family>Tal")

        assert author == FULANO
        assert rest == b""

    def test_spaced_with_periods(self) -> None:
        data = b"""
            given > Fulano de.
            family > Tal.
        """

        author, rest = parse_author(data)

        assert author == FULANO
        assert rest != b""

    def test_stops_before_par(self) -> None:
        data = b"""
            given > Fulano de.
            family > Tal\\par"""

        author, rest = parse_author(data)

        assert author == FULANO
        assert rest == b"\\par"

    @pytest.mark.parametrize(
        "data",
        [
            b"given>Fulano de,family>Tal",
            b"family>Tal,given>Fulano de",
            b"family>Tal.given>Fulano de.",
            b" family > Tal , given > Fulano de",
        ],
    )
    def test_order_of_parts_is_irrelevant(self, data: bytes) -> None:
        author, _ = parse_author(data)

        assert author.given.strip() == b"Fulano de"
        assert author.family.strip() == b"Tal"

    def test_reversed_order_is_identical(self) -> None:
        forward, _ = parse_author(b"given>X,family>Y")
        reverse, _ = parse_author(b"family>Y,given>X")

        assert forward == reverse == Author(given=b"X", family=b"Y")

    def test_two_given_parts_fail(self) -> None:
        with pytest.raises(GrammarError, match="exactly one"):
            parse_author(b"given>A,given>B")

    def test_two_family_parts_fail(self) -> None:
        with pytest.raises(GrammarError):
            parse_author(b"family>A,family>B")

    def test_missing_second_part_fails(self) -> None:
        with pytest.raises(GrammarError):
            parse_author(b"given>A\\par")

    def test_missing_separator_fails(self) -> None:
        with pytest.raises(GrammarError, match="'>'"):
            parse_author(b"given A,family>B")

    def test_empty_name_fails(self) -> None:
        with pytest.raises(GrammarError, match="expected a name"):
            parse_author(b"given>,family>B")


class TestParseAuthors:
    def test_parses_list_without_explicit_delimiter(self) -> None:
        authors, rest = parse_authors(
            b"given>Ana,family>Silva,family>Souza,given>Bruno.given>Caio,family>Lima\\par"
        )

        assert authors == [
            Author(given=b"Ana", family=b"Silva"),
            Author(given=b"Bruno", family=b"Souza"),
            Author(given=b"Caio", family=b"Lima"),
        ]
        assert rest == b"\\par"

    def test_single_author(self) -> None:
        authors, rest = parse_authors(
            b"given> Aurora Almeida de Miranda, family> Le\xc3\xa3o\\par title=T"
        )

        assert authors == [
            Author(given=b"Aurora Almeida de Miranda", family=b"Le\xc3\xa3o")
        ]
        assert rest == b"\\par title=T"

    def test_stops_at_first_invalid_entry(self) -> None:
        authors, rest = parse_authors(b"given>A,family>B,given>C,given>D\\par")

        assert authors == [Author(given=b"A", family=b"B")]
        assert rest == b"given>C,given>D\\par"

    def test_requires_at_least_one_author(self) -> None:
        with pytest.raises(GrammarError):
            parse_authors(b"\\par")
