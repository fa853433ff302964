"""Tests for message normalization."""

import pytest

from switchboard.recognition.normalization import (
    contains_term,
    normalize_message,
    strip_accents,
    tokenize,
)


class TestNormalizeMessage:
    """Tests for normalize_message."""

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Socorro! É uma emergência!", "socorro e uma emergencia"),
            ("Quero agendar uma manicure para amanhã às 14h", "quero agendar uma manicure para amanha as 14h"),
            ("  Olá,   tudo bem?  ", "ola tudo bem"),
            ("Dia 25/12 às 14:00", "dia 25/12 as 14:00"),
        ],
    )
    def test_normalizes(self, message: str, expected: str) -> None:
        assert normalize_message(message) == expected

    def test_drops_separators_outside_numbers(self) -> None:
        """':' and '/' only survive between digits."""
        assert normalize_message("obs: ver site/agenda") == "obs ver site agenda"

    def test_idempotent(self) -> None:
        once = normalize_message("Preço do CORTE? R$ 50,00!")
        assert normalize_message(once) == once

    def test_empty_message(self) -> None:
        assert normalize_message("   ") == ""


class TestHelpers:
    """Tests for strip_accents, tokenize and contains_term."""

    def test_strip_accents(self) -> None:
        assert strip_accents("coloração sessão") == "coloracao sessao"

    def test_tokenize(self) -> None:
        assert tokenize("oi oi tudo bem") == {"oi", "tudo", "bem"}

    def test_contains_term_respects_word_boundaries(self) -> None:
        assert contains_term("amanha de manha", "manha")
        assert not contains_term("amanha", "manha")

    def test_contains_term_matches_phrases(self) -> None:
        assert contains_term("eu quero agendar agora", "quero agendar")
        assert not contains_term("eu quero agendarmos", "quero agendar")
