import pytest

from translit import transliterate_forward

# Examples from the official transliteration table (resolution No. 55, 2010)
OFFICIAL_EXAMPLES = [
    ("Алушта", "Alushta"),
    ("Андрій", "Andrii"),
    ("Борщагівка", "Borshchahivka"),
    ("Борисенко", "Borysenko"),
    ("Вінниця", "Vinnytsia"),
    ("Володимир", "Volodymyr"),
    ("Гадяч", "Hadiach"),
    ("Богдан", "Bohdan"),
    ("Ґалаґан", "Galagan"),
    ("Ґорґани", "Gorgany"),
    ("Донецьк", "Donetsk"),
    ("Дмитро", "Dmytro"),
    ("Рівне", "Rivne"),
    ("Олег", "Oleh"),
    ("Есмань", "Esman"),
    ("Закарпаття", "Zakarpattia"),
    ("Казимирчук", "Kazymyrchuk"),
    ("Медвин", "Medvyn"),
    ("Михайленко", "Mykhailenko"),
    ("Іванків", "Ivankiv"),
    ("Іващенко", "Ivashchenko"),
    ("Київ", "Kyiv"),
    ("Коваленко", "Kovalenko"),
    ("Лебедин", "Lebedyn"),
    ("Леонід", "Leonid"),
    ("Миколаїв", "Mykolaiv"),
    ("Маринич", "Marynych"),
    ("Ніжин", "Nizhyn"),
    ("Наталія", "Nataliia"),
    ("Одеса", "Odesa"),
    ("Онищенко", "Onyshchenko"),
    ("Полтава", "Poltava"),
    ("Петро", "Petro"),
    ("Решетилівка", "Reshetylivka"),
    ("Рибчинський", "Rybchynskyi"),
    ("Суми", "Sumy"),
    ("Соломія", "Solomiia"),
    ("Тернопіль", "Ternopil"),
    ("Троць", "Trots"),
    ("Ужгород", "Uzhhorod"),
    ("Уляна", "Uliana"),
    ("Фастів", "Fastiv"),
    ("Філіпчук", "Filipchuk"),
    ("Житомир", "Zhytomyr"),
    ("Жанна", "Zhanna"),
    ("Жежелів", "Zhezheliv"),
    ("Харків", "Kharkiv"),
    ("Христина", "Khrystyna"),
    ("Біла Церква", "Bila Tserkva"),
    ("Стеценко", "Stetsenko"),
    ("Чернівці", "Chernivtsi"),
    ("Шевченко", "Shevchenko"),
    ("Шостка", "Shostka"),
    ("Кишеньки", "Kyshenky"),
    ("Щербухи", "Shcherbukhy"),
    ("Гоща", "Hoshcha"),
    ("Гаращенко", "Harashchenko"),
    ("Україна", "Ukraina"),
]


@pytest.mark.parametrize("ukrainian, latin", OFFICIAL_EXAMPLES)
def test_official_examples(ukrainian, latin):
    assert transliterate_forward(ukrainian) == latin


@pytest.mark.parametrize("ukrainian, latin", [
    ("Єнакієве", "Yenakiieve"),
    ("Гаєвич", "Haievych"),
    ("Їжакевич", "Yizhakevych"),
    ("Кадиївка", "Kadyivka"),
    ("Йосипівка", "Yosypivka"),
    ("Стрий", "Stryi"),
    ("Олексій", "Oleksii"),
    ("Юрій", "Yurii"),
    ("Корюківка", "Koriukivka"),
    ("Яготин", "Yahotyn"),
    ("Ярошенко", "Yaroshenko"),
    ("Костянтин", "Kostiantyn"),
    ("Феодосія", "Feodosiia"),
])
def test_position_dependent_letters(ukrainian, latin):
    assert transliterate_forward(ukrainian) == latin


def test_word_start_after_whitespace():
    assert transliterate_forward("Місто Київ") == "Misto Kyiv"
    assert transliterate_forward("стара\tяма") == "stara\tyama"
    assert transliterate_forward("нова\nюшка") == "nova\nyushka"


def test_apostrophe_and_soft_sign_do_not_start_a_word():
    assert transliterate_forward("Короп'є") == "Koropie"
    assert transliterate_forward("Мар'їне") == "Marine"
    assert transliterate_forward("Знам'янка") == "Znamianka"
    assert transliterate_forward("Знамʼянка") == "Znamianka"
    assert transliterate_forward("Знам’янка") == "Znamianka"


def test_leading_elidables_keep_word_start():
    assert transliterate_forward("'я") == "ya"
    assert transliterate_forward("ь є") == " ye"


@pytest.mark.parametrize("ukrainian, latin", [
    ("Згорани", "Zghorany"),
    ("Розгон", "Rozghon"),
    ("Згурський", "Zghurskyi"),
])
def test_zgh_digraph(ukrainian, latin):
    assert transliterate_forward(ukrainian) == latin


@pytest.mark.parametrize("pair, expected", [
    ("ЗГ", "ZGH"),
    ("Зг", "Zgh"),
    ("зГ", "zGH"),
    ("зг", "zgh"),
])
def test_zgh_keeps_case_of_each_letter(pair, expected):
    assert transliterate_forward(pair) == expected


def test_zgh_differs_from_letter_by_letter():
    letter_by_letter = transliterate_forward("з") + transliterate_forward("г")
    assert letter_by_letter == "zh"
    assert transliterate_forward("зг") != letter_by_letter


def test_soft_sign_and_apostrophes_are_dropped():
    assert transliterate_forward("ський") == "skyi"
    assert transliterate_forward("ська") == "ska"
    out = transliterate_forward("Мар'їне, Знамʼянка, Ь ь, сім’я")
    for char in ("ь", "Ь", "'", "ʼ", "’"):
        assert char not in out


def test_mixed_case():
    assert transliterate_forward("КИЇВ") == "KYIV"
    assert transliterate_forward("КиЇв") == "KyIv"


def test_uppercase_source_gives_capitalised_cluster():
    assert transliterate_forward("ЩУКА") == "ShchUKA"
    assert transliterate_forward("ЯЩИК") == "YaShchYK"


@pytest.mark.parametrize("word", ["київ", "рівне", "одеса", "полтава", "суми"])
def test_upper_commutes_for_single_letter_outputs(word):
    assert transliterate_forward(word.upper()) == transliterate_forward(word).upper()


def test_unmapped_characters_pass_through():
    assert transliterate_forward("Kyiv 2024, #1!") == "Kyiv 2024, #1!"
    assert transliterate_forward("Київ-2024") == "Kyiv-2024"


def test_empty_input():
    assert transliterate_forward("") == ""
