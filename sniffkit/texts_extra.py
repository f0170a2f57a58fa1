"""Interface texts for the inspection and connection-detail views.

Languages without a dedicated text fall back to English.
"""

from __future__ import annotations

from sniffkit.language import Language


def _choose(language: Language, english: str, **others: str) -> str:
    return others.get(language.name, english)


def new_version_available_translation(language: Language) -> str:
    return _choose(
        language,
        "A newer version is available on GitHub",
        IT="Una versione più recente è disponibile su GitHub",
        RU="Новая версия доступна на GitHub",
        EL="Μια νεότερη έκδοση είναι διαθέσιμη στο GitHub",
        FA="یک نسخه جدیدتر روی GitHub موجود است",
        SV="En nyare version finns tillgänglig på GitHub",
    )


def inspect_translation(language: Language) -> str:
    return _choose(
        language,
        "Inspect",
        IT="Ispeziona",
        FR="Inspecter",
        ES="Inspeccionar",
        PL="Sprawdź",
        DE="Überprüfen",
        RU="Инспектировать",
        SV="Inspektera",
    )


def connection_details_translation(language: Language) -> str:
    return _choose(
        language,
        "Connection details",
        IT="Dettagli della connessione",
        RU="Подробнее о соединении",
        SV="Anslutningsdetaljer",
    )


def dropped_packets_translation(language: Language) -> str:
    return _choose(
        language,
        "Dropped packets",
        IT="Pacchetti mancati",
        RU="Потеряно пакетов",
        SV="Tappade paket",
    )


def data_representation_translation(language: Language) -> str:
    return _choose(
        language,
        "Data representation",
        IT="Rappresentazione dei dati",
        RU="Показывать в виде",
        SV="Datarepresentation",
    )


def host_translation(language: Language) -> str:
    return _choose(
        language,
        "Network host",
        IT="Host di rete",
        RU="Сетевой хост",
        SV="Nätverksvärd",
    )


def only_top_30_hosts_translation(language: Language) -> str:
    return _choose(
        language,
        "Only the top 30 hosts are displayed here",
        IT="Solo i maggiori 30 host sono mostrati qui",
        RU="Тут показываются только первые 30 хостов",
        SV="Endast de 30 främsta värdarna visas här",
    )


def sort_by_translation(language: Language) -> str:
    return _choose(
        language,
        "Sort by",
        IT="Ordina per",
        RU="Сортировка",
        SV="Sortera efter",
    )


def local_translation(language: Language) -> str:
    return _choose(
        language,
        "Local network",
        IT="Rete locale",
        RU="Локальная сеть",
        SV="Lokalt nätverk",
    )


def unknown_translation(language: Language) -> str:
    return _choose(
        language,
        "Unknown location",
        IT="Localizzazione sconosciuta",
        RU="Неизвестный регион",
        SV="Okänd plats",
    )


def your_network_adapter_translation(language: Language) -> str:
    return _choose(
        language,
        "Your network adapter",
        IT="La tua scheda di rete",
        RU="Ваш сетевой адаптер",
        SV="Din nätverksadapter",
    )


def socket_address_translation(language: Language) -> str:
    return _choose(
        language,
        "Socket address",
        IT="Indirizzo del socket",
        RU="Адрес сокекта",
        SV="Socketadress",
    )


def mac_address_translation(language: Language) -> str:
    return _choose(
        language,
        "MAC address",
        IT="Indirizzo MAC",
        RU="MAC адрес",
        SV="MAC-adress",
    )


def source_translation(language: Language) -> str:
    return _choose(
        language,
        "Source",
        IT="Sorgente",
        RU="Источник",
        SV="Källa",
    )


def destination_translation(language: Language) -> str:
    return _choose(
        language,
        "Destination",
        IT="Destinazione",
        RU="Получатель",
    )


def fqdn_translation(language: Language) -> str:
    return _choose(
        language,
        "Fully qualified domain name",
        IT="Nome di dominio completo",
        RU="Полное доменное имя",
        SV="Fullständigt domännamn",
    )


def administrative_entity_translation(language: Language) -> str:
    return _choose(
        language,
        "Administrative entity",
        IT="Entità amministrativa",
        RU="Имя автономной системы",
        SV="Administrativ enhet",
    )


def transmitted_data_translation(language: Language) -> str:
    return _choose(
        language,
        "Transmitted data",
        IT="Dati trasmessi",
        RU="Передано данных",
        SV="Överförd data",
    )


def country_translation(language: Language) -> str:
    return _choose(
        language,
        "Country",
        IT="Paese",
        RU="Страна",
        SV="Land",
    )


def domain_name_translation(language: Language) -> str:
    return _choose(
        language,
        "Domain name",
        IT="Nome di dominio",
        RU="Доменное имя",
        SV="Domännamn",
    )


def only_show_favorites_translation(language: Language) -> str:
    return _choose(
        language,
        "Only show favorites",
        IT="Mostra solo i preferiti",
        RU="Показывать только избранные",
        SV="Visa endast favoriter",
    )


def search_filters_translation(language: Language) -> str:
    return _choose(
        language,
        "Search filters",
        IT="Filtri di ricerca",
        RU="Фильтры для поиска",
        SV="Sökfilter",
    )


def no_search_results_translation(language: Language) -> str:
    return _choose(
        language,
        "No result available according to the specified search filters",
        IT="Nessun risultato disponibile secondo i filtri di ricerca specificati",
        RU="После применения выбранных фильтров результат поиска пустой",
        SV="Inga resultat tillgängliga utifrån de angivna sökfilterna",
    )


def showing_results_translation(language: Language, start: int, end: int, total: int) -> str:
    template = _choose(
        language,
        "Showing {start}-{end} of {total} total results",
        IT="Sono mostrati {start}-{end} di {total} risultati totali",
        RU="Показываются {start}-{end} из {total} общего числа результатов",
        SV="Visar {start}-{end} av {total} totala resultat",
    )
    return template.format(start=start, end=end, total=total)


def color_gradients_translation(language: Language) -> str:
    return _choose(
        language,
        "Apply color gradients",
        IT="Applica sfumature di colore",
        RU="Применить цветовой градиент",
        SV="Applicera färggradient",
    )