import pytest

from translit import Direction, Script, detect_script, resolve_direction, transliterate


def test_detect_script():
    assert detect_script("") is Script.UNDETERMINED
    assert detect_script("   \n") is Script.UNDETERMINED
    assert detect_script("Kyiv") is Script.LATIN
    assert detect_script("123 !?") is Script.LATIN
    assert detect_script("Київ") is Script.UKRAINIAN
    assert detect_script("Kyiv і") is Script.UKRAINIAN
    assert detect_script("Ґ") is Script.UKRAINIAN
    assert detect_script("Є") is Script.UKRAINIAN


def test_resolve_direction_auto():
    assert resolve_direction("Київ") is Direction.UK_TO_LAT
    assert resolve_direction("Kyiv") is Direction.LAT_TO_UK
    assert resolve_direction("") is Direction.UK_TO_LAT


def test_resolve_direction_explicit_mode():
    assert resolve_direction("Kyiv", "ukrainian") is Direction.UK_TO_LAT
    assert resolve_direction("Київ", "latin") is Direction.LAT_TO_UK


def test_resolve_direction_unknown_mode():
    with pytest.raises(ValueError):
        resolve_direction("Kyiv", "klingon")


def test_direction_labels_and_swap():
    assert Direction.UK_TO_LAT.label == "Ukrainian → Latin"
    assert Direction.LAT_TO_UK.label == "Latin → Ukrainian"
    assert Direction.UK_TO_LAT.swapped() is Direction.LAT_TO_UK
    assert Direction("lat-to-uk").swapped() is Direction.UK_TO_LAT


def test_transliterate_dispatch():
    assert transliterate("Київ", Direction.UK_TO_LAT) == "Kyiv"
    assert transliterate("Zhytomyr", "lat-to-uk") == "Житомир"
    with pytest.raises(ValueError):
        transliterate("Kyiv", "sideways")
