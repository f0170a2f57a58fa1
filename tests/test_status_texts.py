import pytest

from sniffkit.language import Language
from sniffkit.status_texts import (
    all_translation,
    both_translation,
    error_translation,
    filtered_bytes_translation,
    filtered_packets_translation,
    no_addresses_translation,
    of_total_translation,
    some_observed_translation,
    waiting_translation,
)

ALL_LANGUAGES = list(Language)


def test_no_addresses_english():
    assert no_addresses_translation(Language.EN, "eth0") == (
        "No traffic can be observed because the adapter you selected has no active addresses...\n\n"
        "Network adapter: eth0\n\n"
        "If you are sure you are connected to the internet, try choosing a different adapter."
    )


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_no_addresses_mentions_adapter(language):
    text = no_addresses_translation(language, "adapter-xyz")
    assert "adapter-xyz" in text
    assert "{adapter}" not in text


def test_waiting_english():
    assert waiting_translation(Language.EN, "en0") == (
        "No traffic has been observed yet. Waiting for network packets...\n\n"
        "Network adapter: en0\n\n"
        "Are you sure you are connected to the internet and you have selected the correct adapter?"
    )


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_waiting_mentions_adapter(language):
    assert "wlan7" in waiting_translation(language, "wlan7")


def test_adapter_with_braces_kept_verbatim():
    assert "Network adapter: {x}\n" in waiting_translation(Language.EN, "{x}")


def test_some_observed_english():
    assert some_observed_translation(Language.EN, "42", "Active filters:\n   none") == (
        "Total intercepted packets: 42\n\n"
        "Filtered packets: 0\n\n"
        "Some packets have been intercepted, but still none has been selected "
        "according to the filters you specified...\n\nActive filters:\n   none"
    )


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_some_observed_structure(language):
    text = some_observed_translation(language, "1234", "FILTERS")
    assert "1234" in text
    assert text.endswith("\n\nFILTERS")
    assert ": 0\n\n" in text


def test_filtered_packets_values():
    assert filtered_packets_translation(Language.EN) == "Filtered packets"
    assert filtered_packets_translation(Language.IT) == "Pacchetti filtrati"


def test_filtered_bytes_shared_between_es_and_pt():
    assert filtered_bytes_translation(Language.ES) == "Bytes filtrados"
    assert filtered_bytes_translation(Language.PT) == filtered_bytes_translation(Language.ES)


def test_of_total_english_and_turkish():
    assert of_total_translation(Language.EN, "12.5%") == "(12.5% of the total)"
    assert of_total_translation(Language.TR, "12.5%") == "toplamın (12.5%)"


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_of_total_contains_percentage(language):
    assert "<0.1%" in of_total_translation(language, "<0.1%")


def test_error_english():
    assert error_translation(Language.EN, "boom") == "An error occurred! \n\nboom"


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_error_ends_with_message(language):
    assert error_translation(language, "failure text").endswith("! \n\nfailure text")


def test_both_values():
    assert both_translation(Language.EN) == "both"
    assert both_translation(Language.ES) == both_translation(Language.PT) == "ambos"


def test_all_values():
    assert all_translation(Language.EN) == "All"
    assert all_translation(Language.ES) == all_translation(Language.PT) == "Todos"


@pytest.mark.parametrize(
    "func",
    [filtered_packets_translation, filtered_bytes_translation, both_translation, all_translation],
)
def test_every_language_has_text(func):
    texts = [func(language) for language in ALL_LANGUAGES]
    assert all(texts)
    assert len(texts) == len(ALL_LANGUAGES)