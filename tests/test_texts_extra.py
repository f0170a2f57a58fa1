import pytest

from sniffkit import texts_extra
from sniffkit.language import Language


def _all_simple_texts(languages):
    return {
        lang: [
            texts_extra.new_version_available_translation(lang),
            texts_extra.inspect_translation(lang),
            texts_extra.connection_details_translation(lang),
            texts_extra.dropped_packets_translation(lang),
            texts_extra.data_representation_translation(lang),
            texts_extra.host_translation(lang),
            texts_extra.only_top_30_hosts_translation(lang),
            texts_extra.sort_by_translation(lang),
            texts_extra.local_translation(lang),
            texts_extra.unknown_translation(lang),
            texts_extra.your_network_adapter_translation(lang),
            texts_extra.socket_address_translation(lang),
            texts_extra.mac_address_translation(lang),
            texts_extra.source_translation(lang),
            texts_extra.destination_translation(lang),
            texts_extra.fqdn_translation(lang),
            texts_extra.administrative_entity_translation(lang),
            texts_extra.transmitted_data_translation(lang),
            texts_extra.country_translation(lang),
            texts_extra.domain_name_translation(lang),
            texts_extra.only_show_favorites_translation(lang),
            texts_extra.search_filters_translation(lang),
            texts_extra.no_search_results_translation(lang),
            texts_extra.color_gradients_translation(lang),
        ]
        for lang in languages
    }


@pytest.mark.parametrize("language", [Language.KO, Language.TR, Language.ZH])
def test_untranslated_languages_fall_back_to_english(language):
    assert texts_extra.inspect_translation(language) == texts_extra.inspect_translation(
        Language.EN
    )
    results = _all_simple_texts((language, Language.EN))
    assert all(results[Language.EN])
    assert results[language] == results[Language.EN]


def test_italian_differs_from_english():
    assert texts_extra.host_translation(Language.IT) != texts_extra.host_translation(
        Language.EN
    )
    results = _all_simple_texts((Language.IT, Language.EN))
    for italian, english in zip(results[Language.IT], results[Language.EN]):
        assert italian != english


@pytest.mark.parametrize(
    "function, language, expected",
    [
        (texts_extra.inspect_translation, Language.FR, "Inspecter"),
        (texts_extra.inspect_translation, Language.DE, "Überprüfen"),
        (texts_extra.host_translation, Language.SV, "Nätverksvärd"),
        (texts_extra.local_translation, Language.RU, "Локальная сеть"),
        (texts_extra.unknown_translation, Language.EN, "Unknown location"),
        (texts_extra.destination_translation, Language.SV, "Destination"),
        (texts_extra.destination_translation, Language.IT, "Destinazione"),
        (
            texts_extra.new_version_available_translation,
            Language.EL,
            "Μια νεότερη έκδοση είναι διαθέσιμη στο GitHub",
        ),
        (texts_extra.mac_address_translation, Language.RU, "MAC адрес"),
    ],
)
def test_specific_texts(function, language, expected):
    assert function(language) == expected


def test_new_version_available_in_persian():
    assert texts_extra.new_version_available_translation(Language.FA) == (
        "یک نسخه جدیدتر روی GitHub موجود است"
    )


def test_inspect_in_spanish_and_polish():
    assert texts_extra.inspect_translation(Language.ES) == "Inspeccionar"
    assert texts_extra.inspect_translation(Language.PL) == "Sprawdź"


def test_showing_results_english():
    text = texts_extra.showing_results_translation(Language.EN, 1, 10, 30)
    assert text == "Showing 1-10 of 30 total results"


def test_showing_results_swedish():
    text = texts_extra.showing_results_translation(Language.SV, 11, 20, 45)
    assert text == "Visar 11-20 av 45 totala resultat"


def test_showing_results_fallback_and_numbers_present():
    english = texts_extra.showing_results_translation(Language.EN, 5, 9, 12)
    assert texts_extra.showing_results_translation(Language.PT, 5, 9, 12) == english
    italian = texts_extra.showing_results_translation(Language.IT, 5, 9, 12)
    assert italian.startswith("Sono mostrati 5-9 di 12")