from sofaclean.services.dictionary_service import get_dictionary, is_supported_locale


def test_supported_locales():
    assert is_supported_locale("th")
    assert is_supported_locale("en")
    assert not is_supported_locale("fr")
    assert not is_supported_locale(None)


def test_unknown_locale_falls_back_to_thai():
    assert get_dictionary("fr") == get_dictionary("th")
    assert get_dictionary(None) == get_dictionary("th")


def test_dictionaries_share_the_same_shape():
    th = get_dictionary("th")
    en = get_dictionary("en")
    assert set(th) == set(en)
    for key in ("metadata", "nav", "blogIndex", "blogPost", "quote"):
        assert set(th[key]) == set(en[key]), key
    assert len(th["faqData"]) == len(en["faqData"])
    assert all({"question", "answer"} <= set(item) for item in en["faqData"])


def test_dictionaries_are_language_specific():
    assert get_dictionary("en")["metadata"]["title"] != get_dictionary("th")["metadata"]["title"]
