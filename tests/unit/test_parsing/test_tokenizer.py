#!/usr/bin/env python3
from hostlist_expr.model.tokens import Token, TokenKind
from hostlist_expr.parsing.tokenizer import tokenize


def kinds(text):
    return [t.kind for t in tokenize(text)]


def test_empty_input_is_only_end():
    assert tokenize("") == [Token(TokenKind.END, "", 0)]


def test_full_expression():
    tokens = tokenize("web[01-03,05],db1")
    assert tokens == [
        Token(TokenKind.LITERAL, "web", 0),
        Token(TokenKind.LBRACKET, "[", 3),
        Token(TokenKind.NUMBER, "01", 4, 2),
        Token(TokenKind.DASH, "-", 6),
        Token(TokenKind.NUMBER, "03", 7, 2),
        Token(TokenKind.COMMA, ",", 9),
        Token(TokenKind.NUMBER, "05", 10, 2),
        Token(TokenKind.RBRACKET, "]", 12),
        Token(TokenKind.COMMA, ",", 13),
        Token(TokenKind.LITERAL, "db", 14),
        Token(TokenKind.NUMBER, "1", 16),
        Token(TokenKind.END, "", 17),
    ]


def test_end_token_always_last():
    for text in ("a", "[", "1-2", "a b", "☃"):
        tokens = tokenize(text)
        assert tokens[-1].kind == TokenKind.END
        assert tokens[-1].position == len(text)
        assert [t.kind for t in tokens].count(TokenKind.END) == 1


class TestNumbers:
    def test_plain_number_has_no_width(self):
        (tok, _) = tokenize("10")
        assert tok.kind == TokenKind.NUMBER
        assert tok.value == 10
        assert tok.width is None
        assert not tok.zero_padded

    def test_single_zero_is_not_padded(self):
        (tok, _) = tokenize("0")
        assert tok.value == 0
        assert tok.width is None

    def test_leading_zero_sets_width(self):
        (tok, _) = tokenize("007")
        assert tok.value == 7
        assert tok.width == 3
        assert tok.zero_padded

    def test_all_zeros_are_padded(self):
        (tok, _) = tokenize("00")
        assert tok.value == 0
        assert tok.width == 2

    def test_digits_split_from_letters(self):
        assert kinds("node12a") == [
            TokenKind.LITERAL,
            TokenKind.NUMBER,
            TokenKind.LITERAL,
            TokenKind.END,
        ]


class TestLiterals:
    def test_dots_stay_in_literal(self):
        tokens = tokenize("iml.com")
        assert tokens[0] == Token(TokenKind.LITERAL, "iml.com", 0)

    def test_dash_is_its_own_token(self):
        assert kinds("a-b") == [
            TokenKind.LITERAL,
            TokenKind.DASH,
            TokenKind.LITERAL,
            TokenKind.END,
        ]

    def test_non_ascii_characters_fold_into_literal(self):
        tokens = tokenize("00☃-002")
        assert tokens[1] == Token(TokenKind.LITERAL, "☃", 2)

    def test_whitespace_run_is_one_token(self):
        tokens = tokenize("a \t b")
        assert tokens[1] == Token(TokenKind.SPACE, " \t ", 1)
        assert tokens[2] == Token(TokenKind.LITERAL, "b", 4)


def test_unbalanced_brackets_do_not_raise():
    assert kinds("]][[") == [
        TokenKind.RBRACKET,
        TokenKind.RBRACKET,
        TokenKind.LBRACKET,
        TokenKind.LBRACKET,
        TokenKind.END,
    ]
