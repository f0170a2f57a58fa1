import pytest

from sniffkit import report_texts as rt
from sniffkit.language import Language


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_non_empty_text(language):
    assert rt.overview_translation(language).strip() != ""
    results = [
        rt.packets_translation(language),
        rt.packets_chart_translation(language),
        rt.bytes_translation(language),
        rt.bytes_chart_translation(language),
        rt.recent_report_translation(language),
        rt.packets_report_translation(language),
        rt.bytes_report_translation(language),
        rt.notifications_title_translation(language),
        rt.appearance_title_translation(language),
        rt.languages_title_translation(language),
        rt.active_filters_translation(language),
        rt.none_translation(language),
        rt.yeti_night_translation(language),
        rt.yeti_day_translation(language),
        rt.deep_sea_translation(language),
        rt.mon_amour_translation(language),
        rt.incoming_translation(language),
        rt.outgoing_translation(language),
        rt.notifications_translation(language),
        rt.style_translation(language),
        rt.language_translation(language),
        rt.overview_translation(language),
    ]
    for result in results:
        assert isinstance(result, str)
        assert result.strip() != ""
        assert len(result) > 0


@pytest.mark.parametrize(
    "func, expected",
    [
        (rt.packets_translation, "packets"),
        (rt.packets_chart_translation, "packets per second"),
        (rt.bytes_translation, "bytes"),
        (rt.bytes_chart_translation, "bytes per second"),
        (rt.recent_report_translation, "most recent"),
        (rt.packets_report_translation, "most packets"),
        (rt.bytes_report_translation, "most bytes"),
        (rt.notifications_title_translation, "Customize your notifications"),
        (rt.appearance_title_translation, "Choose your favorite theme"),
        (rt.languages_title_translation, "Select your language"),
        (rt.active_filters_translation, "Active filters"),
        (rt.none_translation, "none"),
        (rt.yeti_night_translation, "Sniffnet's original dark theme"),
        (rt.yeti_day_translation, "Sniffnet's original light theme"),
        (rt.deep_sea_translation, "To dive into network traffic"),
        (rt.mon_amour_translation, "Lovely theme made for dreamers"),
        (rt.incoming_translation, "Incoming"),
        (rt.outgoing_translation, "Outgoing"),
        (rt.notifications_translation, "Notifications"),
        (rt.style_translation, "Style"),
        (rt.language_translation, "Language"),
        (rt.overview_translation, "Overview"),
    ],
)
def test_english_texts(func, expected):
    assert func(Language.EN) == expected


def test_italian_texts():
    assert rt.packets_translation(Language.IT) == "pacchetti"
    assert rt.none_translation(Language.IT) == "nessuno"
    assert rt.overview_translation(Language.IT) == "Panoramica"


def test_shared_texts_between_languages():
    assert rt.packets_translation(Language.TR) == rt.packets_translation(Language.SV) == "paket"
    for language in (Language.EN, Language.ES, Language.PT, Language.DE, Language.EL, Language.SV):
        assert rt.bytes_translation(language) == "bytes"
    assert rt.bytes_chart_translation(Language.ES) == rt.bytes_chart_translation(Language.PT)
    assert rt.yeti_day_translation(Language.ES) == rt.yeti_day_translation(Language.PT)
    assert rt.notifications_translation(Language.FR) == "Notifications"
    for language in (Language.DE, Language.RO, Language.TR, Language.SV):
        assert rt.style_translation(language) == "Stil"
    assert rt.style_translation(Language.UK) == rt.style_translation(Language.RU) == "Стиль"


def test_chart_texts_extend_unit_texts_in_english():
    assert rt.packets_chart_translation(Language.EN).startswith(rt.packets_translation(Language.EN))
    assert rt.bytes_chart_translation(Language.EN).startswith(rt.bytes_translation(Language.EN))


def test_incoming_and_outgoing_differ_everywhere():
    for language in Language:
        assert rt.incoming_translation(language) != rt.outgoing_translation(language)


def test_theme_descriptions_are_distinct_per_language():
    for language in Language:
        texts = {
            rt.yeti_night_translation(language),
            rt.yeti_day_translation(language),
            rt.deep_sea_translation(language),
            rt.mon_amour_translation(language),
        }
        assert len(texts) == 4


def test_unknown_language_is_rejected():
    with pytest.raises(KeyError):
        rt.packets_translation("XX")