import pytest

from sniffkit.language import Language


def test_default_is_english():
    assert Language.default() is Language.EN


@pytest.mark.parametrize(
    "language, label",
    [
        (Language.EN, "English"),
        (Language.IT, "Italiano"),
        (Language.FR, "Français"),
        (Language.ZH, "简体中文"),
        (Language.SV, "Svenska"),
        (Language.FA, "فارسی"),
    ],
)
def test_radio_label(language, label):
    assert language.radio_label() == label


def test_every_language_has_a_distinct_label():
    labels = [Language.radio_label(language) for language in Language]
    assert len(set(labels)) == len(list(Language))
    assert all(labels)
    assert Language.EN.radio_label() in labels


def test_rows_cover_each_language_once():
    flat = [language for row in Language.rows() for language in row]
    assert len(flat) == len(list(Language))
    assert set(flat) == set(Language)


def test_rows_are_of_equal_width_and_ordered():
    rows = Language.rows()
    assert rows[0] == (Language.EN, Language.DE, Language.EL, Language.ES)
    assert rows[-1] == (Language.SV, Language.TR, Language.UK, Language.ZH)
    assert len({len(row) for row in rows}) == 1


def test_lookup_by_value_round_trips():
    for language in Language:
        assert Language(language.value) is language