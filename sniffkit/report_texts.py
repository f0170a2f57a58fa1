"""Interface texts for charts, report sorting, settings pages and themes."""

from __future__ import annotations

from collections.abc import Mapping

from sniffkit.language import Language

L = Language


def _pick(table: Mapping[Language, str], language: Language) -> str:
    return table[language]


_PACKETS = {
    L.EN: "packets",
    L.IT: "pacchetti",
    L.FR: "paquets",
    L.ES: "paquetes",
    L.PL: "pakiety",
    L.DE: "pakete",
    L.UK: "пакети",
    L.ZH: "数据包",
    L.RO: "pachete",
    L.KO: "패킷",
    L.TR: "paket",
    L.SV: "paket",
    L.RU: "пакектов",
    L.PT: "pacotes",
    L.EL: "πακέτα",
    L.FA: "بسته ها",
}

_PACKETS_CHART = {
    L.EN: "packets per second",
    L.IT: "pacchetti al secondo",
    L.FR: "paquets par seconde",
    L.ES: "paquetes por segundo",
    L.PL: "pakiety na sekundę",
    L.DE: "pakete pro Sekunde",
    L.UK: "пакети на секунду",
    L.ZH: "数据包",
    L.RO: "pachete pe secundă",
    L.KO: "초당 패킷",
    L.TR: "saniye başı paket",
    L.RU: "пакектов в секунду",
    L.PT: "pacotes por segundo",
    L.EL: "πακέτα ανά δευτερόλεπτο",
    L.FA: "بسته در ثانیه",
    L.SV: "paket per sekund",
}

_BYTES = {
    L.EN: "bytes",
    L.ES: "bytes",
    L.PT: "bytes",
    L.DE: "bytes",
    L.EL: "bytes",
    L.SV: "bytes",
    L.IT: "byte",
    L.FR: "octets",
    L.PL: "bajty",
    L.UK: "байти",
    L.ZH: "网络流量",
    L.RO: "octeți",
    L.KO: "바이트",
    L.TR: "bayt",
    L.RU: "байтов",
    L.FA: "بایت ها",
}

_BYTES_CHART = {
    L.EN: "bytes per second",
    L.IT: "byte al secondo",
    L.FR: "octets par seconde",
    L.ES: "bytes por segundo",
    L.PT: "bytes por segundo",
    L.PL: "bajty na sekundę",
    L.DE: "bytes pro Sekunde",
    L.UK: "байти на секунду",
    L.ZH: "网络流量",
    L.RO: "octeți pe secundă",
    L.KO: "초당 바이트",
    L.TR: "saniye başı bayt",
    L.RU: "байтов в секунду",
    L.EL: "bytes ανά δευτερόλεπτο",
    L.FA: "بایت در ثانیه",
    L.SV: "bytes per sekund",
}

_RECENT_REPORT = {
    L.EN: "most recent",
    L.IT: "più recenti",
    L.FR: "la plus récente",
    L.ES: "más reciente",
    L.PL: "najnowsze",
    L.DE: "zuletzt",
    L.UK: "найновіші",
    L.ZH: "按时间",
    L.RO: "cea mai recentă",
    L.KO: "가장 최근",
    L.TR: "en son",
    L.RU: "новейшие",
    L.PT: "mais recente",
    L.EL: "πιο πρόσφατα",
    L.FA: "آخرین",
    L.SV: "senaste",
}

_PACKETS_REPORT = {
    L.EN: "most packets",
    L.IT: "più pacchetti",
    L.FR: "le plus de paquets",
    L.ES: "mayoría de los paquetes",
    L.PL: "najwięcej pakietów",
    L.DE: "meiste Pakete",
    L.UK: "найбільше пакетів",
    L.ZH: "按数据包",
    L.RO: "cele mai multe pachete",
    L.KO: "대부분의 패킷",
    L.TR: "en çok paket",
    L.RU: "больше всего пакетов",
    L.PT: "mais pacotes",
    L.EL: "περισσότερα πακέτα",
    L.FA: "بیشترین بسته ها",
    L.SV: "flest paket",
}

_BYTES_REPORT = {
    L.EN: "most bytes",
    L.IT: "più byte",
    L.FR: "le plus de données",
    L.ES: "mayoría de los bytes",
    L.PL: "najwięcej bajtów",
    L.DE: "meiste Bytes",
    L.UK: "найбільше байтів",
    L.ZH: "按流量",
    L.RO: "cei mai mulți octeți",
    L.KO: "대부분의 바이트",
    L.TR: "en çok bayt",
    L.RU: "больше всего байт",
    L.PT: "mais bytes",
    L.EL: "περισσότερα bytes",
    L.FA: "بیشترین بایت ها",
    L.SV: "flest bytes",
}

_NOTIFICATIONS_TITLE = {
    L.EN: "Customize your notifications",
    L.IT: "Personalizza le tue notifiche",
    L.FR: "Personnalisez vos notifications",
    L.ES: "Personaliza tus notificaciones",
    L.PL: "Dostosuj powiadomienia",
    L.DE: "Personalisier deine Benachrichtigungen",
    L.UK: "Достосуй повідомлення",
    L.ZH: "自定义通知",
    L.RO: "Personalizați-vă notificările",
    L.KO: "사용자 지정 알림",
    L.TR: "Bildirimlerinizi özelleştirin",
    L.RU: "Настройка уведомлений",
    L.PT: "Personalize as suas notificações",
    L.EL: "Εξατομίκευση ειδοποιήσεων",
    L.FA: "اعلان های خود را سفارشی کنید",
    L.SV: "Anpassa dina notifikationer",
}

_APPEARANCE_TITLE = {
    L.EN: "Choose your favorite theme",
    L.IT: "Scegli il tuo tema preferito",
    L.FR: "Sélectionnez votre thème préféré",
    L.ES: "Elige tu tema favorito",
    L.PL: "Wybierz swój ulubiony motyw",
    L.DE: "Wähl dein Lieblingsdesign",
    L.UK: "Вибери улюблену тему",
    L.ZH: "选择您喜欢的主题",
    L.RO: "Selectați tema preferată",
    L.KO: "태마를 선택하세요",
    L.TR: "Favori temanızı seçin",
    L.RU: "Выберите предпочительную тему",
    L.PT: "Escolha o seu tema favorito",
    L.EL: "Επίλεξε το αγαπημένο σου θέμα",
    L.FA: "زمینه دلخواه خود را انتخاب کنید",
    L.SV: "Välj ditt favorittema",
}

_LANGUAGES_TITLE = {
    L.EN: "Select your language",
    L.IT: "Seleziona la lingua",
    L.FR: "Sélectionnez votre langue",
    L.ES: "Selecciona tu idioma",
    L.PL: "Wybierz język",
    L.DE: "Stell deine Sprache ein",
    L.UK: "Вибери мову",
    L.ZH: "选择显示语言",
    L.RO: "Selectați limba",
    L.KO: "언어를 선택하세요",
    L.TR: "Dilinizi seçin",
    L.RU: "Выберите язык",
    L.PT: "Selecione o seu idioma",
    L.EL: "Επίλεξε τη γλώσσα σου",
    L.FA: "زبان خود را انتخاب کنید",
    L.SV: "Välj ditt språk",
}

_ACTIVE_FILTERS = {
    L.EN: "Active filters",
    L.IT: "Filtri attivi",
    L.FR: "Filtres actifs",
    L.ES: "Filtros activos",
    L.PL: "Aktywne filtry",
    L.DE: "Aktive Filter",
    L.UK: "Активні фільтри",
    L.ZH: "活动的过滤器",
    L.RO: "Filtre active",
    L.KO: "활성화된 필터",
    L.TR: "Aktif filtreler",
    L.RU: "Выбранные фильтры",
    L.PT: "Filtros ativos",
    L.EL: "Ενεργά φίλτρα",
    L.FA: "صافی های فعال",
    L.SV: "Aktiva filter",
}

_NONE = {
    L.EN: "none",
    L.IT: "nessuno",
    L.FR: "aucun",
    L.ES: "ninguno",
    L.PL: "brak",
    L.DE: "keine",
    L.UK: "бракує",
    L.ZH: "无",
    L.RO: "niciunul",
    L.KO: "없음",
    L.TR: "hiç biri",
    L.RU: "ничего",
    L.PT: "nenhum",
    L.EL: "κανένα",
    L.FA: "هیچ کدام",
    L.SV: "inga",
}

_YETI_NIGHT = {
    L.EN: "Sniffnet's original dark theme",
    L.IT: "Il tema scuro originale di Sniffnet",
    L.FR: "Thème original sombre de Sniffnet",
    L.ES: "Tema oscuro original de Sniffnet",
    L.PL: "Oryginalny, ciemny motyw Sniffnet",
    L.DE: "Sniffnets urspüngliches, dunkles Design",
    L.UK: "Оригінальний, темний мотив Sniffnet",
    L.ZH: "Sniffnet暗黑",
    L.RO: "Tema întunecată originală Sniffnet",
    L.KO: "Sniffnet의 기본 다크테마",
    L.TR: "Sniffnet'in orjinal koyu teması",
    L.RU: "Оригинальная тёмная тема Sniffnet'а",
    L.PT: "Tema escuro original de Sniffnet",
    L.EL: "Το αυθεντικό σκούρο θέμα του Sniffnet",
    L.FA: "زمینه تاریک اصلی Sniffnet",
    L.SV: "Sniffnets ursprungliga mörka tema",
}

_YETI_DAY = {
    L.EN: "Sniffnet's original light theme",
    L.IT: "Il tema chiaro originale di Sniffnet",
    L.FR: "Thème original clair de Sniffnet",
    L.ES: "Tema claro original de Sniffnet",
    L.PT: "Tema claro original de Sniffnet",
    L.PL: "Oryginalny, jasny motyw Sniffnet",
    L.DE: "Sniffnets urspüngliches, helles Design",
    L.UK: "Оригінальний, світлий мотив Sniffnet",
    L.ZH: "Sniffnet浅色",
    L.RO: "Tema deschisă originală Sniffnet",
    L.KO: "Sniffnet의 기본 라이트테마",
    L.TR: "Sniffnet'in orjinal açık teması",
    L.RU: "Оригинальная светая тема Sniffnet'а",
    L.EL: "Το αυθεντικό ανοιχτόχρωμο θέμα του Sniffnet",
    L.FA: "زمینه روشن اصلی Sniffnet",
    L.SV: "Sniffnets ursprungliga ljusa tema",
}

_DEEP_SEA = {
    L.EN: "To dive into network traffic",
    L.IT: "Per immergersi nel traffico di rete",
    L.FR: "Pour plonger dans votre trafic réseau",
    L.ES: "Para sumergirse en el tráfico de la red",
    L.PL: "Aby zanurzyć się w ruchu sieciowym",
    L.DE: "Um in den Netzwerkverkehr einzutauchen",
    L.UK: "Проаналізувати мережевий рух",
    L.ZH: "潜入网络活动的海洋",
    L.RO: "Pentru a vă scufunda în traficul de rețea",
    L.KO: "네트워크 트레픽으로 바로가기",
    L.TR: "Ağ trafiğine dalmak",
    L.RU: "Для погружения в сетевой трафик",
    L.PT: "Para mergulhar no tráfego de rede",
    L.EL: "Βουτιά μέσα στην κίνηση του δικτύου",
    L.FA: "شیرجه رفتن در آمد و شد شبکه",
    L.SV: "För att dyka ned i nätverkstrafiken",
}

_MON_AMOUR = {
    L.EN: "Lovely theme made for dreamers",
    L.IT: "Tema incantevole fatto per i sognatori",
    L.FR: "Thème romantique fait pour les rêveurs",
    L.ES: "Tema encantador hecho para soñadores",
    L.PL: "Uroczy motyw stworzony dla marzycieli",
    L.DE: "Liebevolles Design für Träumer",
    L.UK: "Прекрасна тема для мрійників",
    L.ZH: "梦想家的主题",
    L.RO: "O temă minunată creată pentru visători",
    L.KO: "사랑스러운 몽환가들을 위한 테마",
    L.TR: "Hayal perestler için yapılmış güzel tema",
    L.RU: "Милая тема для мечтателей",
    L.PT: "Tema encantador feito para sonhadores",
    L.EL: "Φτιαγμένο για ονειροπόλους",
    L.FA: "زمینه دلپذیر ساخته شده برای رویا پردازان",
    L.SV: "Ljuvligt tema gjort för drömmare",
}

_INCOMING = {
    L.EN: "Incoming",
    L.IT: "In entrata",
    L.FR: "Entrant",
    L.ES: "Entrante",
    L.PL: "Przychodzące",
    L.DE: "Ankommend",
    L.UK: "Вхідні",
    L.ZH: "入站",
    L.RO: "de intrare",
    L.KO: "수신중",
    L.TR: "Gelen",
    L.RU: "Входящий",
    L.PT: "Entrando",
    L.EL: "Εισερχόμενα",
    L.FA: "ورودی",
    L.SV: "Inkommande",
}

_OUTGOING = {
    L.EN: "Outgoing",
    L.IT: "In uscita",
    L.FR: "Sortant",
    L.ES: "Saliente",
    L.PL: "Wychodzące",
    L.DE: "Ausgehend",
    L.UK: "Вихідні",
    L.ZH: "出站",
    L.RO: "de ieșire",
    L.KO: "발신중",
    L.TR: "Giden",
    L.RU: "Исходящий",
    L.PT: "Saindo",
    L.EL: "Εξερχόμενα",
    L.FA: "خروجی",
    L.SV: "Utgående",
}

_NOTIFICATIONS = {
    L.EN: "Notifications",
    L.FR: "Notifications",
    L.IT: "Notifiche",
    L.ES: "Notificaciones",
    L.PL: "Powiadomienia",
    L.DE: "Benachrichtigungen",
    L.UK: "Повідомлення",
    L.ZH: "通知",
    L.RO: "Notificări",
    L.KO: "알림",
    L.TR: "Bildirimler",
    L.RU: "Уведомления",
    L.PT: "Notificações",
    L.EL: "Ειδοποιήσεις",
    L.FA: "اعلان ها",
    L.SV: "Notifikationer",
}

_STYLE = {
    L.EN: "Style",
    L.FR: "Style",
    L.IT: "Stile",
    L.ES: "Estilo",
    L.PT: "Estilo",
    L.PL: "Styl",
    L.DE: "Stil",
    L.RO: "Stil",
    L.TR: "Stil",
    L.SV: "Stil",
    L.UK: "Стиль",
    L.RU: "Стиль",
    L.ZH: "主题",
    L.KO: "스타일",
    L.EL: "Στυλ",
    L.FA: "شیوه",
}

_LANGUAGE = {
    L.EN: "Language",
    L.IT: "Lingua",
    L.FR: "Langue",
    L.ES: "Idioma",
    L.PL: "Język",
    L.DE: "Sprache",
    L.UK: "Мова",
    L.ZH: "语言",
    L.RO: "Limbă",
    L.KO: "언어",
    L.TR: "Dil",
    L.RU: "Язык",
    L.PT: "Língua",
    L.EL: "Γλώσσα",
    L.FA: "زبان",
    L.SV: "Språk",
}

_OVERVIEW = {
    L.EN: "Overview",
    L.IT: "Panoramica",
    L.FR: "Résumé",
    L.ES: "Resumen",
    L.PL: "Przegląd",
    L.DE: "Übersicht",
    L.UK: "Огляд",
    L.ZH: "概览",
    L.RO: "Prezentare generală",
    L.KO: "개요",
    L.TR: "Ön izleme",
    L.RU: "Обзор",
    L.PT: "Visão geral",
    L.EL: "επισκόπηση",
    L.FA: "نمای کلی",
    L.SV: "Översikt",
}


def packets_translation(language: Language) -> str:
    return _pick(_PACKETS, language)


def packets_chart_translation(language: Language) -> str:
    return _pick(_PACKETS_CHART, language)


def bytes_translation(language: Language) -> str:
    return _pick(_BYTES, language)


def bytes_chart_translation(language: Language) -> str:
    return _pick(_BYTES_CHART, language)


def recent_report_translation(language: Language) -> str:
    return _pick(_RECENT_REPORT, language)


def packets_report_translation(language: Language) -> str:
    return _pick(_PACKETS_REPORT, language)


def bytes_report_translation(language: Language) -> str:
    return _pick(_BYTES_REPORT, language)


def notifications_title_translation(language: Language) -> str:
    return _pick(_NOTIFICATIONS_TITLE, language)


def appearance_title_translation(language: Language) -> str:
    return _pick(_APPEARANCE_TITLE, language)


def languages_title_translation(language: Language) -> str:
    return _pick(_LANGUAGES_TITLE, language)


def active_filters_translation(language: Language) -> str:
    return _pick(_ACTIVE_FILTERS, language)


def none_translation(language: Language) -> str:
    return _pick(_NONE, language)


def yeti_night_translation(language: Language) -> str:
    return _pick(_YETI_NIGHT, language)


def yeti_day_translation(language: Language) -> str:
    return _pick(_YETI_DAY, language)


def deep_sea_translation(language: Language) -> str:
    return _pick(_DEEP_SEA, language)


def mon_amour_translation(language: Language) -> str:
    return _pick(_MON_AMOUR, language)


def incoming_translation(language: Language) -> str:
    return _pick(_INCOMING, language)


def outgoing_translation(language: Language) -> str:
    return _pick(_OUTGOING, language)


def notifications_translation(language: Language) -> str:
    return _pick(_NOTIFICATIONS, language)


def style_translation(language: Language) -> str:
    return _pick(_STYLE, language)


def language_translation(language: Language) -> str:
    return _pick(_LANGUAGE, language)


def overview_translation(language: Language) -> str:
    return _pick(_OVERVIEW, language)