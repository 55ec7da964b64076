import sys
import os
import pytest

# Add backend to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../backend')))

from helatype.utils.transliteration import HAL_KIRIMA, InputMode, render, transliterate


def test_empty_input():
    assert transliterate("") == ""


@pytest.mark.parametrize("text", ["123 ?!", "xqz", "XQZ", " \n\t", "අම්ම", "#@%"])
def test_text_outside_scheme_passes_through(text):
    assert transliterate(text) == text


def test_digraph_beats_single_letters():
    assert transliterate("th") == "ත"
    assert transliterate("th") != transliterate("t") + transliterate("h")


def test_case_selects_different_consonant():
    assert transliterate("k") == "ක"
    assert transliterate("K") == "ඛ"
    assert transliterate("th") == "ත"
    assert transliterate("TH") == "ථ"
    assert transliterate("ch") == "ච"
    assert transliterate("CH") == "ඡ"


def test_inherent_vowel_has_no_sign():
    assert transliterate("k") == "ක"
    assert transliterate("ka") == transliterate("k")


def test_vowel_sign_attaches_to_consonant():
    assert transliterate("kaa") == "කා"
    assert transliterate("kaa") != transliterate("ka") + transliterate("a")
    assert transliterate("ki") == "කි"
    assert transliterate("kee") == "කේ"
    assert transliterate("kaee") == "කෑ"


def test_special_cluster_priority():
    assert transliterate("nG") == "ඟ"
    assert transliterate("nD") == "ඳ"
    assert transliterate("nDh") == "ඬ"
    assert transliterate("nB") == "ඹ"
    assert transliterate("ny") == "ඤ"
    assert transliterate("kn") == "ඥ"


def test_special_takes_no_vowel_sign():
    assert transliterate("nGa") == "ඟඅ"
    assert transliterate("nGaa") == "ඟආ"
    assert transliterate("kna") == "ඥඅ"
    assert transliterate("nDha") == "ඬඅ"


def test_special_takes_no_hal_kirima():
    assert transliterate("nGk") == "ඟක"
    assert HAL_KIRIMA not in transliterate("nBnD")
    assert transliterate("kaa nG") == "කා ඟ"


def test_consonant_before_special_gets_hal_kirima():
    assert transliterate("mnG") == "ම" + HAL_KIRIMA + "ඟ"


def test_shortcut_examples():
    assert transliterate("amma") == "අම්ම"
    assert transliterate("L") == "ළ"
    assert transliterate("u") == "උ"
    assert transliterate("aa") == "ආ"


def test_consonant_cluster_gets_hal_kirima():
    assert transliterate("thaththa") == "තත්ත"
    assert transliterate("nn") == "න" + HAL_KIRIMA + "න"
    assert transliterate("kkk") == "ක්ක්ක"


def test_no_hal_kirima_before_space_or_punctuation():
    assert transliterate("k k") == "ක ක"
    assert transliterate("k.") == "ක."


def test_standalone_vowels_after_vowels():
    assert transliterate("aaa") == "ආඅ"
    assert transliterate("aiu") == "ඓඋ"


def test_sentence():
    assert transliterate("oya kohedha?") == "ඔය කොහෙද?"


def test_repeated_calls_are_identical():
    text = "mama gedhara yanavaa"
    first = transliterate(text)
    assert transliterate(text) == first
    assert first == "මම ගෙදර යනවා"


def test_render_modes():
    assert render("amma", InputMode.SINGLISH) == "අම්ම"
    assert render("amma", InputMode.ENGLISH) == "amma"
    assert render("amma", "EN") == "amma"
    assert render("", InputMode.SINGLISH) == ""
