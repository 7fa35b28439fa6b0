from dictdoc.parsing import (
    EntryKind,
    ExplanationParser,
    RawExplanation,
    StyleTag,
    StyledToken,
    WordForm,
    parse,
)


def _parse(*explanations, word_forms=()):
    return parse(RawExplanation(explanations=list(explanations), word_forms=list(word_forms)))


def _word(text, kind=EntryKind.WORD):
    return StyledToken(text, StyleTag.WORD, kind)


def test_part_of_speech_and_separators():
    document = _parse("n. cat, dog; bird")
    assert list(document.word_tokens) == [
        StyledToken("n.", StyleTag.PART_OF_SPEECH),
        _word("cat"),
        StyledToken(", ", StyleTag.SEPARATOR),
        _word("dog"),
        StyledToken("; ", StyleTag.SEPARATOR),
        _word("bird"),
    ]
    assert document.translations == {"cat", "dog", "bird"}
    assert document.variant_tokens == ()


def test_annotation_is_regular_and_not_a_translation():
    document = _parse("n. apple (fruit); big house")
    assert StyledToken("(fruit)") in document.word_tokens
    assert document.translations == {"apple", "big house"}
    assert all("(" not in text for text in document.translations)


def test_space_before_annotation_stays_outside_word():
    document = _parse("n. apple (fruit)")
    texts = [(token.text, token.style) for token in document.word_tokens]
    assert texts == [
        ("n.", StyleTag.PART_OF_SPEECH),
        ("apple", StyleTag.WORD),
        (" ", StyleTag.REGULAR),
        ("(fruit)", StyleTag.REGULAR),
    ]


def test_all_bracket_kinds_are_annotations():
    document = _parse("v. 跑（快速）【口】[俚]<旧>步")
    regular = [t.text for t in document.word_tokens if t.style is StyleTag.REGULAR]
    assert regular == ["（快速）", "【口】", "[俚]", "<旧>"]
    assert document.translations == {"跑", "步"}


def test_annotation_match_is_non_greedy():
    document = _parse("n. a (b) c (d)")
    regular = [t.text for t in document.word_tokens if t.text.startswith("(")]
    assert regular == ["(b)", "(d)"]


def test_full_width_separators_keep_their_text():
    document = _parse("n. 猫，小猫；猫咪")
    separators = [t.text for t in document.word_tokens if t.style is StyleTag.SEPARATOR]
    assert separators == ["，", "；"]
    assert document.translations == {"猫", "小猫", "猫咪"}


def test_lines_are_separated_by_line_break_token():
    document = _parse("n. apple", "v. run")
    assert list(document.word_tokens) == [
        StyledToken("n.", StyleTag.PART_OF_SPEECH),
        _word("apple"),
        StyledToken("\n"),
        StyledToken("v.", StyleTag.PART_OF_SPEECH),
        _word("run"),
    ]
    assert document.translations == {"apple", "run"}


def test_line_without_part_of_speech_is_trimmed():
    document = _parse("  hello, world  ")
    assert document.word_tokens[0] == _word("hello")
    assert document.word_tokens[-1] == _word("world")
    assert not any(t.style is StyleTag.PART_OF_SPEECH for t in document.word_tokens)


def test_unknown_abbreviation_is_not_a_part_of_speech():
    document = _parse("xyz. thing")
    assert document.word_tokens == (_word("xyz. thing"),)


def test_longer_abbreviation_wins():
    document = _parse("adj. red", "adv. fast", "abbr. TV")
    labels = [t.text for t in document.word_tokens if t.style is StyleTag.PART_OF_SPEECH]
    assert labels == ["adj.", "adv.", "abbr."]


def test_part_of_speech_without_words_is_kept_as_text():
    document = _parse("n.")
    assert document.word_tokens == (_word("n."),)


def test_part_of_speech_with_blank_remainder():
    document = _parse("n.  ")
    assert document.word_tokens == (StyledToken("n.", StyleTag.PART_OF_SPEECH),)
    assert document.translations == frozenset()


def test_duplicate_words_are_deduplicated():
    document = _parse("n. cat, cat")
    assert document.translations == {"cat"}
    assert sum(1 for t in document.word_tokens if t.text == "cat") == 2


def test_word_forms_become_variant_section():
    document = _parse("n. cat", word_forms=[WordForm("plural", "cats 或 kittens")])
    assert list(document.variant_tokens) == [
        StyledToken("plural: ", StyleTag.VARIANT_NAME),
        _word("cats", EntryKind.VARIANT),
        StyledToken(", ", StyleTag.SEPARATOR),
        _word("kittens", EntryKind.VARIANT),
    ]
    assert document.translations == {"cat"}


def test_word_forms_are_separated_by_line_breaks():
    document = _parse(
        "v. run",
        word_forms=[WordForm("过去式", "ran"), WordForm("现在分词", "running")],
    )
    texts = [t.text for t in document.variant_tokens]
    assert texts == ["过去式: ", "ran", "\n", "现在分词: ", "running"]


def test_empty_variant_alternatives_are_kept():
    document = _parse("n. x", word_forms=[WordForm("复数", "或 xs")])
    words = [t.text for t in document.variant_tokens if t.style is StyleTag.WORD]
    assert words == ["", "xs"]
    assert document.plain_text(True) == "n. x\n\n复数: , xs"


def test_empty_or_missing_explanations_give_no_document():
    assert parse(None) is None
    assert parse(RawExplanation(explanations=[])) is None
    assert parse(RawExplanation(explanations=[], word_forms=[WordForm("a", "b")])) is None


def test_link_resolver_fills_word_tokens_only():
    calls = []

    def resolver(text, kind):
        calls.append((text, kind))
        return {"query": text}

    parser = ExplanationParser(link_resolver=resolver)
    document = parser.parse(
        RawExplanation(["n. cat (animal)"], [WordForm("复数", "cats")])
    )
    assert calls == [("cat", EntryKind.WORD), ("cats", EntryKind.VARIANT)]
    linked = [t for t in document.word_tokens + document.variant_tokens if t.link_data]
    assert [t.text for t in linked] == ["cat", "cats"]


def test_parsing_is_deterministic():
    raw = RawExplanation(["n. cat, dog", "v. run (fast)"], [WordForm("x", "a 或 b")])
    assert parse(raw) == parse(raw)


def test_token_string_is_its_text():
    token = StyledToken("cat", StyleTag.WORD, EntryKind.WORD, link_data={"query": "cat"})
    assert str(token) == "cat"
    assert token == StyledToken("cat", StyleTag.WORD, EntryKind.WORD, link_data={"query": "cat"})
    assert token != StyledToken("cat")


def test_linked_tokens_are_hashable():
    parser = ExplanationParser(link_resolver=lambda text, kind: {"query": text})
    document = parser.parse(RawExplanation(["n. cat, dog"], [WordForm("复数", "cats")]))
    tokens = set(document.word_tokens + document.variant_tokens)
    assert StyledToken("cat", StyleTag.WORD, EntryKind.WORD, {"query": "cat"}) in tokens
