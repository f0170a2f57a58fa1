import pytest

from sniffkit.language import Language
from sniffkit import setup_texts as st


def _all_texts(languages):
    return {
        lang: [
            st.choose_adapters_translation(lang),
            st.application_protocol_translation(lang),
            st.select_filters_translation(lang),
            st.start_translation(lang),
            st.address_translation(lang),
            st.addresses_translation(lang),
            st.ip_version_translation(lang),
            st.transport_protocol_translation(lang),
            st.traffic_rate_translation(lang),
            st.settings_translation(lang),
            st.yes_translation(lang),
            st.ask_quit_translation(lang),
            st.quit_analysis_translation(lang),
            st.ask_clear_all_translation(lang),
            st.clear_all_translation(lang),
            st.hide_translation(lang),
            st.network_adapter_translation(lang),
        ]
        for lang in languages
    }


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_text(language):
    assert st.hide_translation(language).strip()
    texts = _all_texts((language,))[language]
    assert len(texts) == 17
    for text in texts:
        assert isinstance(text, str) and text.strip() == text and len(text) > 0


def test_italian_differs_from_english():
    assert st.settings_translation(Language.IT) != st.settings_translation(Language.EN)
    results = _all_texts((Language.IT, Language.EN))
    for italian, english in zip(results[Language.IT], results[Language.EN]):
        assert italian != english


@pytest.mark.parametrize(
    "func, expected",
    [
        (st.choose_adapters_translation, "Select network adapter to inspect"),
        (st.application_protocol_translation, "Application protocol"),
        (st.select_filters_translation, "Select filters to be applied on network traffic"),
        (st.start_translation, "Start!"),
        (st.address_translation, "Address"),
        (st.addresses_translation, "Addresses"),
        (st.ip_version_translation, "IP version"),
        (st.transport_protocol_translation, "Transport protocol"),
        (st.traffic_rate_translation, "Traffic rate"),
        (st.settings_translation, "Settings"),
        (st.yes_translation, "Yes"),
        (st.ask_quit_translation, "Are you sure you want to quit this analysis?"),
        (st.quit_analysis_translation, "Quit analysis"),
        (st.ask_clear_all_translation, "Are you sure you want to clear notifications?"),
        (st.clear_all_translation, "Clear all"),
        (st.hide_translation, "Hide"),
        (st.network_adapter_translation, "Network adapter"),
    ],
)
def test_english_texts(func, expected):
    assert func(Language.EN) == expected


@pytest.mark.parametrize("language", [Language.EN, Language.DE, Language.RO, Language.KO])
def test_start_shared_by_several_languages(language):
    assert st.start_translation(language) == "Start!"


def test_shared_arms():
    assert st.address_translation(Language.FR) == st.address_translation(Language.DE) == "Adresse"
    assert st.address_translation(Language.PL) == st.address_translation(Language.TR) == "Adres"
    assert (
        st.transport_protocol_translation(Language.ES)
        == st.transport_protocol_translation(Language.PT)
        == "Protocolo de transporte"
    )
    assert st.yes_translation(Language.DE) == st.yes_translation(Language.SV) == "Ja"


def test_some_other_languages():
    assert st.start_translation(Language.IT) == "Avvia!"
    assert st.settings_translation(Language.SV) == "Inställningar"
    assert st.hide_translation(Language.ZH) == "隐藏"
    assert st.quit_analysis_translation(Language.FR) == "Quitter l'analyse"


def test_addresses_is_plural_of_address_in_english():
    assert st.addresses_translation(Language.EN).startswith(st.address_translation(Language.EN))
    assert st.addresses_translation(Language.ZH) == st.address_translation(Language.ZH)


def test_rejects_non_language():
    with pytest.raises(KeyError):
        st.hide_translation("EN")