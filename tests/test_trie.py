from dsalgo.trie import Trie


def make_trie(*words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def test_inserted_word_is_found():
    trie = make_trie("hello")
    assert "hello" in trie


def test_prefix_is_not_a_word():
    trie = make_trie("hello")
    assert "hell" not in trie
    assert trie.has_prefix("hell")


def test_missing_prefix():
    trie = make_trie("hello")
    assert not trie.has_prefix("help")
    assert "help" not in trie


def test_longer_than_word():
    trie = make_trie("hello")
    assert "hellos" not in trie
    assert not trie.has_prefix("hellos")


def test_shared_prefixes():
    trie = make_trie("car", "cart", "care")
    assert all(word in trie for word in ("car", "cart", "care"))
    assert "ca" not in trie


def test_empty_trie():
    trie = Trie()
    assert trie.has_prefix("")
    assert "" not in trie
    assert not trie.has_prefix("a")


def test_non_string_not_contained():
    trie = make_trie("1")
    assert 1 not in trie