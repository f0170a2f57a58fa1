import pytest

from sniffkit import notification_texts as nt
from sniffkit.language import Language


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_text(language):
    assert nt.sound_translation(language).strip()
    texts = [
        nt.packets_threshold_translation(language),
        nt.bytes_threshold_translation(language),
        nt.per_second_translation(language),
        nt.specify_multiples_translation(language),
        nt.favorite_notification_translation(language),
        nt.threshold_translation(language),
        nt.volume_translation(language),
        nt.sound_translation(language),
        nt.open_report_translation(language),
        nt.bytes_exceeded_translation(language),
        nt.packets_exceeded_translation(language),
        nt.favorite_transmitted_translation(language),
        nt.no_notifications_set_translation(language),
        nt.no_notifications_received_translation(language),
        nt.only_last_30_translation(language),
    ]
    for text in texts:
        assert isinstance(text, str) and text.strip()


def test_pinned_english_values():
    assert nt.open_report_translation(Language.EN) == "Open full report"
    assert nt.threshold_translation(Language.IT) == "Soglia"
    assert nt.volume_translation(Language.FR) == "Volume"
    assert nt.sound_translation(Language.UK) == nt.sound_translation(Language.RU)


def test_only_last_30_mentions_thirty():
    for language in Language:
        if language is Language.FA:
            continue
        assert "30" in nt.only_last_30_translation(language)


@pytest.mark.parametrize("language", list(Language))
def test_bytes_exceeded_value_trims(language):
    text = nt.bytes_exceeded_value_translation(language, "  12.3 K  ")
    assert "12.3 K" in text
    assert " 12.3 K " in f" {text} "
    assert "  12.3" not in text
    assert text == nt.bytes_exceeded_value_translation(language, "12.3 K")


def test_bytes_exceeded_value_english():
    assert nt.bytes_exceeded_value_translation(Language.EN, " 5 ") == "5 bytes have been exchanged"


def test_packets_exceeded_value_singular_and_plural():
    assert nt.packets_exceeded_value_translation(Language.EN, 1) == "1 packet has been exchanged"
    assert nt.packets_exceeded_value_translation(Language.EN, 7) == "7 packets have been exchanged"
    assert nt.packets_exceeded_value_translation(Language.PT, 1) == "Foi trocado 1 pacote"
    assert nt.packets_exceeded_value_translation(Language.ES, 1) == "1 paquete/s han sido intercambiado/s"


@pytest.mark.parametrize("language", list(Language))
@pytest.mark.parametrize("value", [0, 1, 2, 1000])
def test_packets_exceeded_value_contains_number(language, value):
    assert str(value) in nt.packets_exceeded_value_translation(language, value)


@pytest.mark.parametrize("language", list(Language))
def test_notification_log_texts_have_paragraphs(language):
    assert "\n\n" in nt.no_notifications_set_translation(language)
    assert "\n\n" in nt.no_notifications_received_translation(language)


def test_persian_set_text_keeps_raw_line_break():
    assert "\n\n\n" in nt.no_notifications_set_translation(Language.FA)
    assert "\n\n\n" not in nt.no_notifications_set_translation(Language.EN)


def test_specify_multiples_lists_suffixes():
    for language in Language:
        text = nt.specify_multiples_translation(language)
        assert all(f"'{suffix}'" in text for suffix in "KMG")