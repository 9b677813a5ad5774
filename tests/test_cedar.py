import pytest

from hellokit.cedar import NoPathError, NoValueError, Trie, main

WORDS = [
    "a", "aa", "ab", "ac", "abc", "abd",
    "abcd", "abde", "abdf", "abcdef", "abcde",
    "abcdefghijklmn", "bcd", "b", "xyz",
    "中国", "中国北京", "中国上海", "中国广州",
    "中华", "中华文明", "中华民族", "中华人民共和国",
    "this", "this is", "this is a sentence.",
]


@pytest.fixture
def trie():
    t = Trie()
    for i, word in enumerate(WORDS):
        t.insert(word, i)
    for word in WORDS[::4]:
        t.delete(word)
    return t


def check_consistency(t):
    for i, word in enumerate(WORDS):
        if i % 4 == 0:
            with pytest.raises((NoPathError, NoValueError)):
                t.value(t.jump(word))
            continue
        node = t.jump(word)
        assert t.key(node) == word.encode("utf-8")
        assert t.value(node) == i


def check(t, ids, keys, values):
    assert [t.key(n).decode("utf-8") for n in ids] == keys
    assert [t.value(n) for n in ids] == values


def test_basic(trie):
    check_consistency(trie)


def test_save_and_load(trie, tmp_path):
    path = tmp_path / "cedar.json"
    trie.save_to_file(path)
    loaded = Trie.load_from_file(path)
    check_consistency(loaded)
    assert len(loaded) == len(trie)


def test_prefix_match(trie):
    check(trie, trie.prefix_match("abcdefg"), ["ab", "abcd", "abcde", "abcdef"], [2, 6, 10, 9])
    check(trie, trie.prefix_match("中华人民共和国"), ["中华", "中华人民共和国"], [19, 22])
    check(trie, trie.prefix_match("this is a sentence."), ["this", "this is a sentence."], [23, 25])


def test_prefix_match_limit(trie):
    check(trie, trie.prefix_match("abcdefg", 2), ["ab", "abcd"], [2, 6])


def test_prefix_match_without_deletions():
    t = Trie()
    for i, word in enumerate(WORDS[:11]):
        t.insert(word, i)
    ids = t.prefix_match("abcdefg")
    check(t, ids, ["a", "ab", "abc", "abcd", "abcde", "abcdef"], [0, 2, 4, 6, 10, 9])


def test_order():
    t = Trie()
    for key, value in (("a", 1), ("b", 3), ("d", 6), ("ab", 2), ("c", 5), ("", 0), ("bb", 4)):
        t.insert(key, value)
    ids = t.prefix_predict("")
    assert len(ids) == 7
    assert [t.value(n) for n in ids] == list(range(7))


def test_prefix_predict(trie):
    check(trie, trie.prefix_predict("中华"), ["中华", "中华人民共和国", "中华民族"], [19, 22, 21])
    check(trie, trie.prefix_predict("中国"), ["中国", "中国上海", "中国广州"], [15, 17, 18])


def test_prefix_predict_unknown_prefix(trie):
    assert trie.prefix_predict("zzz") == []


def test_jump_missing_path(trie):
    with pytest.raises(NoPathError):
        trie.jump("qq")


def test_delete_twice_raises(trie):
    with pytest.raises(NoValueError):
        trie.delete("a")


def test_insert_replaces_value(trie):
    node = trie.insert("ab", 100)
    assert trie.value(node) == 100
    assert trie.jump("ab") == node


def test_load_malformed(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        Trie.load_from_file(path)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "key=[abcdef] val=[9]" in out
    assert out.count("\n") == 6