from copy_comparer.tokenization import tokenize, word_tokens


def test_tokenize_partitions_text():
    text = "Hello,  world!\nBye"
    tokens = tokenize(text)

    assert tokens == ["Hello,", "  ", "world!", "\n", "Bye"]
    assert "".join(tokens) == text


def test_tokenize_empty_input():
    assert tokenize("") == []


def test_word_tokens_drop_whitespace():
    assert word_tokens("  a \t b\n") == ["a", "b"]
    assert word_tokens("   ") == []
