"""Tests for Coordinate."""

import pytest

from chesslite.core.coordinate import A1, A8, E2, E4, H1, H8, Coordinate


class TestConstruction:
    def test_valid_corners(self) -> None:
        assert Coordinate(0, 0) == A8
        assert Coordinate(7, 7) == H1

    @pytest.mark.parametrize(("rank", "file"), [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_out_of_range_fails_fast(self, rank: int, file: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Coordinate(rank, file)


class TestOffset:
    def test_inside_board(self) -> None:
        assert E2.offset(-2, 0) == E4

    def test_off_top_edge(self) -> None:
        assert A8.offset(-1, 0) is None

    def test_off_side_edge(self) -> None:
        assert H1.offset(0, 1) is None
        assert A1.offset(0, -1) is None

    def test_diagonal(self) -> None:
        assert A1.offset(-7, 7) == H8


class TestAlgebraic:
    def test_names(self) -> None:
        assert A8.algebraic == "a8"
        assert H1.algebraic == "h1"
        assert str(E4) == "e4"

    def test_parse(self) -> None:
        assert Coordinate.from_algebraic("e4") == Coordinate(4, 4)
        assert Coordinate.from_algebraic("a8") == Coordinate(0, 0)
        assert Coordinate.from_algebraic("h1") == Coordinate(7, 7)

    @pytest.mark.parametrize("name", ["", "e", "e44", "i1", "a0", "a9", "E4", "4e"])
    def test_malformed_gives_none(self, name: str) -> None:
        assert Coordinate.from_algebraic(name) is None

    def test_every_square_round_trips(self) -> None:
        for sq in Coordinate.all():
            assert Coordinate.from_algebraic(sq.algebraic) == sq


class TestIndex:
    def test_linearised(self) -> None:
        assert A8.index == 0
        assert H1.index == 63
        assert E4.index == 36

    def test_from_index(self) -> None:
        assert Coordinate.from_index(36) == E4

    def test_all_squares(self) -> None:
        squares = list(Coordinate.all())
        assert len(squares) == 64
        assert len(set(squares)) == 64
        assert squares[0] == A8
        assert squares[-1] == H1
