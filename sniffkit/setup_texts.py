"""Interface texts for the initial setup page and the general settings."""

from __future__ import annotations

from collections.abc import Mapping

from sniffkit.language import Language

L = Language


def _pick(table: Mapping[Language, str], language: Language) -> str:
    return table[language]


_CHOOSE_ADAPTERS = {
    L.EN: "Select network adapter to inspect",
    L.IT: "Seleziona la scheda di rete da ispezionare",
    L.FR: "Sélectionnez une carte réseau à inspecter",
    L.ES: "Seleccione el adaptador de red que desea inspeccionar",
    L.PL: "Wybierz adapter sieciowy do inspekcji",
    L.DE: "Wähle einen Netzwerkadapter zum inspizieren aus",
    L.UK: "Вибрати мережевий адаптер для інспекції",
    L.ZH: "选择需要监控的网络适配器",
    L.RO: "Selectați adaptor de rețea pentru a inspecta",
    L.KO: "검사할 네트워크 어댑터 선택",
    L.TR: "İncelemek için bir ağ adaptörü seçiniz",
    L.RU: "Выберите сетевой адаптер для инспекции",
    L.PT: "Selecione o adaptador de rede a inspecionar",
    L.EL: "Επίλεξε τον προσαρμογέα δικτύου για επιθεώρηση",
    L.FA: "مبدل شبکه را برای بازرسی انتخاب کنید",
    L.SV: "Välj nätverksadapter att inspektera",
}

_APPLICATION_PROTOCOL = {
    L.EN: "Application protocol",
    L.IT: "Protocollo applicativo",
    L.FR: "Protocole applicatif",
    L.ES: "Protocolo de aplicación",
    L.PL: "Protokół aplikacji",
    L.DE: "Anwendungs-Protokoll",
    L.UK: "Протокол аплікації",
    L.ZH: "目标应用层协议",
    L.RO: "Protocol aplicație",
    L.KO: "어플리케이션 프로토콜",
    L.TR: "Uygulama protokolü",
    L.RU: "Прикладной протокол",
    L.PT: "Protocolo de aplicação",
    L.EL: "Πρωτόκολλο εφαρμογής",
    L.FA: "پیوندنامهٔ درخواست",
    L.SV: "Applikationsprotokoll",
}

_SELECT_FILTERS = {
    L.EN: "Select filters to be applied on network traffic",
    L.IT: "Seleziona i filtri da applicare al traffico di rete",
    L.FR: "Sélectionnez les filtres à appliquer sur le traffic réseau",
    L.ES: "Seleccionar los filtros que se aplicarán al tráfico de red",
    L.PL: "Wybierz filtry, które mają być zastosowane na ruchu sieciowym",
    L.DE: "Wähle die Filter, die auf den Netzwerkverkehr angewendet werden sollen",
    L.UK: "Вибрати фільтри, які мають бути застосовані до мережевого трафіку",
    L.ZH: "选择需要监控的目标",
    L.RO: "Selectați filtre pentru traficul de rețea",
    L.KO: "네트워크 트레픽에 적용할 필터 선택",
    L.TR: "Ağ trafiğine uygulanacak filtreleri seçiniz",
    L.RU: "Выберите фильтры для применения к сетевому трафику",
    L.PT: "Selecione os filtros a serem aplicados no tráfego de rede",
    L.EL: "Επίλεξε τα φίλτρα για εφαρμογή στην κίνηση του δικτύου",
    L.FA: "صافی ها را جهت اعمال بر آمد و شد شبکه انتخاب کنید",
    L.SV: "Välj filtren som ska appliceras på nätverkstrafiken",
}

_START = {
    L.EN: "Start!",
    L.DE: "Start!",
    L.RO: "Start!",
    L.KO: "Start!",
    L.IT: "Avvia!",
    L.FR: "Commencer!",
    L.ES: "¡Empieza!",
    L.PL: "Rozpocznij!",
    L.UK: "Почати!",
    L.ZH: "开始!",
    L.TR: "Başla!",
    L.RU: "Начать!",
    L.PT: "Começar!",
    L.EL: "Ξεκίνα!",
    L.FA: "شروع!",
    L.SV: "Starta!",
}

_ADDRESS = {
    L.EN: "Address",
    L.IT: "Indirizzo",
    L.FR: "Adresse",
    L.DE: "Adresse",
    L.ES: "Dirección",
    L.PL: "Adres",
    L.TR: "Adres",
    L.UK: "Адреса",
    L.ZH: "网络地址",
    L.RO: "Adresă",
    L.KO: "주소",
    L.RU: "Адрес",
    L.PT: "Endereço",
    L.EL: "Διεύθυνση",
    L.FA: "نشانی",
    L.SV: "Adress",
}

_ADDRESSES = {
    L.EN: "Addresses",
    L.IT: "Indirizzi",
    L.FR: "Adresses",
    L.ES: "Direcciones",
    L.PL: "Adresy",
    L.DE: "Adressen",
    L.UK: "Адреси",
    L.ZH: "网络地址",
    L.RO: "Adrese",
    L.KO: "주소",
    L.TR: "Adresler",
    L.RU: "Адреса",
    L.PT: "Endereços",
    L.EL: "Διευθύνσεις",
    L.FA: "نشانی ها",
    L.SV: "Adresser",
}

_IP_VERSION = {
    L.EN: "IP version",
    L.IT: "Versione IP",
    L.FR: "Version IP",
    L.ES: "Versión IP",
    L.PL: "Wersja IP",
    L.DE: "IP Version",
    L.UK: "Версія IP",
    L.ZH: "目标IP协议版本",
    L.RO: "Versiune IP",
    L.KO: "IP 버전",
    L.TR: "IP versiyonu",
    L.RU: "Версия IP",
    L.PT: "Versão de IP",
    L.EL: "Έκδοση IP",
    L.FA: "نسخهٔ IP",
    L.SV: "IP-version",
}

_TRANSPORT_PROTOCOL = {
    L.EN: "Transport protocol",
    L.IT: "Protocollo di trasporto",
    L.FR: "Protocole de transport",
    L.ES: "Protocolo de transporte",
    L.PT: "Protocolo de transporte",
    L.PL: "Protokół transportowy",
    L.DE: "Netzwerkprotokoll",
    L.UK: "Транспортний протокол",
    L.ZH: "目标传输协议",
    L.RO: "Protocol de transport",
    L.KO: "전송 프로토콜",
    L.TR: "İletişim protokolü",
    L.RU: "Транспортный протокол",
    L.EL: "Πρωτόκολλο μεταφοράς",
    L.FA: "پیوندنامهٔ ترابرد",
    L.SV: "Transportprotokoll",
}

_TRAFFIC_RATE = {
    L.EN: "Traffic rate",
    L.IT: "Intensità del traffico",
    L.FR: "Fréquence du traffic",
    L.ES: "Tasa de tráfico",
    L.PL: "Prędkość ruchu",
    L.DE: "Daten Frequenz",
    L.UK: "Швидкість руху",
    L.ZH: "网络速率图",
    L.RO: "Rata de trafic",
    L.KO: "트레픽 속도",
    L.TR: "Trafik oranı",
    L.RU: "Cкорость трафика",
    L.PT: "Taxa de tráfego",
    L.EL: "Ρυθμός κίνησης",
    L.FA: "نرخ آمد و شد",
    L.SV: "Datafrekvens",
}

_SETTINGS = {
    L.EN: "Settings",
    L.IT: "Impostazioni",
    L.FR: "Paramètres",
    L.ES: "Ajustes",
    L.PL: "Ustawienia",
    L.DE: "Einstellungen",
    L.UK: "Налаштування",
    L.ZH: "设置",
    L.RO: "Setări",
    L.KO: "설정",
    L.TR: "Ayarlar",
    L.RU: "Настройки",
    L.PT: "Configurações",
    L.EL: "Ρυθμίσεις",
    L.FA: "پیکربندی",
    L.SV: "Inställningar",
}

_YES = {
    L.EN: "Yes",
    L.IT: "Sì",
    L.FR: "Oui",
    L.ES: "Sí",
    L.PL: "Tak",
    L.DE: "Ja",
    L.SV: "Ja",
    L.UK: "Так",
    L.ZH: "是",
    L.RO: "Da",
    L.KO: "네",
    L.TR: "Evet",
    L.RU: "Да",
    L.PT: "Sim",
    L.EL: "Ναι",
    L.FA: "بله",
}

_ASK_QUIT = {
    L.EN: "Are you sure you want to quit this analysis?",
    L.IT: "Sei sicuro di voler interrompere questa analisi?",
    L.FR: "Êtes-vous sûr de vouloir quitter l'application ?",
    L.ES: "¿Estás seguro de que quieres dejar este análisis?",
    L.PL: "Czy na pewno chcesz zakończyć analizę?",
    L.DE: "Bist du sicher, dass du diese Analyse beenden willst?",
    L.UK: "Чи справді хочеш закінчити аналіз?",
    L.ZH: "您确定退出当前监控吗?",
    L.RO: "Sunteți sigur că doriți să renunțați la această analiză?",
    L.KO: "정말로 분석을 종료하겠습니까?",
    L.TR: "Bu analizden çıkmak istediğine emin misin?",
    L.RU: "Вы уверены, что хотите выйти из текущего анализа?",
    L.PT: "Tem a certeza que deseja sair desta análise?",
    L.EL: "Είσαι σίγουρος ότι θες να κλείσεις την ανάλυση;",
    L.FA: "آیا مطمئن هستید می خواهید از این تحلیل خارج شوید؟",
    L.SV: "Är du säker på att du vill avsluta analysen?",
}

_QUIT_ANALYSIS = {
    L.EN: "Quit analysis",
    L.IT: "Interrompi analisi",
    L.FR: "Quitter l'analyse",
    L.ES: "Quitar el análisis",
    L.PL: "Zakończ analize",
    L.DE: "Analyse beenden",
    L.UK: "Закінчити аналіз",
    L.ZH: "退出监控",
    L.RO: "Renunță la analiză",
    L.KO: "분석종료",
    L.TR: "Analizden çık",
    L.RU: "Закончить анализ",
    L.PT: "Sair da análise",
    L.EL: "Έξοδος ανάλυσης",
    L.FA: "خروج از تحلیل",
    L.SV: "Avsluta analys",
}

_ASK_CLEAR_ALL = {
    L.EN: "Are you sure you want to clear notifications?",
    L.IT: "Sei sicuro di voler eliminare le notifiche?",
    L.FR: "Êtes-vous sûr de vouloir effacer les notifications ?",
    L.ES: "¿Seguro que quieres borrar las notificaciones?",
    L.PL: "Czy na pewno chcesz wyczyścić powiadomienia?",
    L.DE: "Bist du sicher, dass du alle Benachrichtigungen löschen willst?",
    L.UK: "Чи справді хочеш видалити всі повідомлення?",
    L.ZH: "确定清除所有通知?",
    L.RO: "Sigur doriți să ștergeți notificările?",
    L.KO: "알림을 삭제하시겠습니까?",
    L.TR: "Bildirimleri temizlemek istediğine emin misin?",
    L.RU: "Вы уверены, что хотите удлить все уведомления?",
    L.PT: "Tem a certeza que deseja eliminar as notificações?",
    L.EL: "Είσαι σίγουρος ότι θες να κάνεις εκκαθάριση των ειδοποιήσεων;",
    L.FA: "آیا مطمئن هستید می خواهید اعلان ها را پاک کنید؟",
    L.SV: "Är du säker på att du vill radera notifikationerna?",
}

_CLEAR_ALL = {
    L.EN: "Clear all",
    L.IT: "Elimina tutte",
    L.FR: "Tout effacer",
    L.ES: "Borrar todo",
    L.PL: "Wyczyść wszystko",
    L.DE: "Alle leeren",
    L.UK: "Видалити все",
    L.ZH: "清除所有",
    L.RO: "Ștergeți tot",
    L.KO: "모두 지우기",
    L.TR: "Hepsini temizle",
    L.RU: "Очистить всё",
    L.PT: "Limpar tudo",
    L.EL: "Εκκαθάριση όλων",
    L.FA: "پاک کردن همه",
    L.SV: "Radera alla",
}

_HIDE = {
    L.EN: "Hide",
    L.IT: "Nascondi",
    L.FR: "Masquer",
    L.ES: "Ocultar",
    L.PL: "Ukryj",
    L.DE: "Verstecken",
    L.UK: "Заховати",
    L.ZH: "隐藏",
    L.RO: "Ascundeți",
    L.KO: "숨기기",
    L.TR: "Gizle",
    L.RU: "Скрыть",
    L.PT: "Esconder",
    L.EL: "Κλείσιμο",
    L.FA: "پنهان کردن",
    L.SV: "Göm",
}

_NETWORK_ADAPTER = {
    L.EN: "Network adapter",
    L.IT: "Adattatore di rete",
    L.FR: "Carte réseau",
    L.ES: "Adaptador de red",
    L.PL: "Adapter sieciowy",
    L.DE: "Netzwerkadapter",
    L.UK: "Мережквий адаптер",
    L.ZH: "网络适配器",
    L.RO: "Adaptor de rețea",
    L.KO: "네트워크 어뎁터",
    L.TR: "Ağ adaptörü",
    L.RU: "Сетевой интерфейс",
    L.PT: "Adaptador de rede",
    L.EL: "Προσαρμογέας δικτύου",
    L.FA: "مبدل شبکه",
    L.SV: "Nätverksadapter",
}


def choose_adapters_translation(language: Language) -> str:
    return _pick(_CHOOSE_ADAPTERS, language)


def application_protocol_translation(language: Language) -> str:
    return _pick(_APPLICATION_PROTOCOL, language)


def select_filters_translation(language: Language) -> str:
    return _pick(_SELECT_FILTERS, language)


def start_translation(language: Language) -> str:
    return _pick(_START, language)


def address_translation(language: Language) -> str:
    return _pick(_ADDRESS, language)


def addresses_translation(language: Language) -> str:
    return _pick(_ADDRESSES, language)


def ip_version_translation(language: Language) -> str:
    return _pick(_IP_VERSION, language)


def transport_protocol_translation(language: Language) -> str:
    return _pick(_TRANSPORT_PROTOCOL, language)


def traffic_rate_translation(language: Language) -> str:
    return _pick(_TRAFFIC_RATE, language)


def settings_translation(language: Language) -> str:
    return _pick(_SETTINGS, language)


def yes_translation(language: Language) -> str:
    return _pick(_YES, language)


def ask_quit_translation(language: Language) -> str:
    return _pick(_ASK_QUIT, language)


def quit_analysis_translation(language: Language) -> str:
    return _pick(_QUIT_ANALYSIS, language)


def ask_clear_all_translation(language: Language) -> str:
    return _pick(_ASK_CLEAR_ALL, language)


def clear_all_translation(language: Language) -> str:
    return _pick(_CLEAR_ALL, language)


def hide_translation(language: Language) -> str:
    return _pick(_HIDE, language)


def network_adapter_translation(language: Language) -> str:
    return _pick(_NETWORK_ADAPTER, language)