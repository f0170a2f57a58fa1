"""Interface texts for notification settings and the notification log."""

from __future__ import annotations

from collections.abc import Mapping

from sniffkit.language import Language

L = Language


def _pick(table: Mapping[Language, str], language: Language) -> str:
    return table[language]


# The Persian "no notifications set" text keeps a real line break followed by indentation.
_FA_INDENT = " " * 33

_PACKETS_THRESHOLD = {
    L.EN: "Notify me when a packets threshold is exceeded",
    L.IT: "Notificami quando una soglia di pacchetti è superata",
    L.FR: "Me notifier lorsqu'un seuil de paquet est atteint",
    L.ES: "Notificarme cuando se supere un límite de paquetes",
    L.PL: "Powiadom mnie, gdy zostanie przekroczony próg pakietów",
    L.DE: "Benachrichtige mich, wenn die Pakete eine Schwelle überschreiten",
    L.UK: "Повідом мене про переліміт пакетів",
    L.ZH: "超过设定的数据包数量阈值时通知我",
    L.RO: "Anunță-mă când este depășit un prag de pachete",
    L.KO: "패킷 임계값을 초과하면 알림",
    L.TR: "Paket eşiği aşıldığında beni bilgilendir",
    L.RU: "Уведомить, когда порог по частоте пакетов превышен",
    L.PT: "Notifique-me quando um limite de pacotes for excedido",
    L.EL: "Ειδοποίησέ με όταν το όριο τον πακέτων ξεπεραστεί",
    L.FA: "به من اطلاع بده وقتی آستانه یک بسته فراتر رفت",
    L.SV: "Notifiera mig när en paketgräns har överstigits",
}

_BYTES_THRESHOLD = {
    L.EN: "Notify me when a bytes threshold is exceeded",
    L.IT: "Notificami quando una soglia di byte è superata",
    L.FR: "Me notifier lorsqu'un seuil de donnée est atteint",
    L.ES: "Notificarme cuando se exceda un límite de bytes",
    L.PL: "Powiadom mnie, gdy zostanie przekroczony próg bajtów",
    L.DE: "Benachrichtige mich, wenn die Bytes eine Schwelle überschreiten",
    L.UK: "Повідом мене про переліміт байтів",
    L.ZH: "超过设定的网络流量阈值时通知我",
    L.RO: "Anunță-mă când este depășit un prag de octeți",
    L.KO: "바이트 임계값을 초과하면 알림",
    L.TR: "Bayt eşiği aşıldığında beni bilgilendir",
    L.RU: "Уведомить, когда порог по полосе в байтах превышен",
    L.PT: "Notifique-me quando um limite de bytes for excedido",
    L.EL: "Ειδοποίησέ με όταν το όριο των bytes ξεπεραστεί",
    L.FA: "به من اطلاع بده وقتی آستانه یک بایت فراتر رفت",
    L.SV: "Notifiera mig när en gräns för bytes har överstigits",
}

_PER_SECOND = {
    L.EN: "(per second)",
    L.IT: "(al secondo)",
    L.FR: "(par seconde)",
    L.ES: "(por segundo)",
    L.PT: "(por segundo)",
    L.PL: "(na sekundę)",
    L.DE: "(pro Sekunde)",
    L.UK: "(на секунду)",
    L.ZH: "(每秒) ",
    L.RO: "(pe secundă)",
    L.KO: "(초당)",
    L.TR: "(her saniye)",
    L.RU: "(в секунду)",
    L.EL: "(ανά δευτερόλεπτο)",
    L.FA: "(در ثانیه)",
    L.SV: "(per sekund)",
}

_SPECIFY_MULTIPLES = {
    L.EN: "; you can also specify 'K', 'M' and 'G'",
    L.IT: "; puoi anche specificare 'K', 'M' e 'G'",
    L.FR: "; vous pouvez également spécifier 'K', 'M' et 'G'",
    L.ES: "; también puede especificar 'K', 'M' y 'G'",
    L.PL: "; możesz również określić 'K', 'M' i 'G'",
    L.DE: "; du kannst auch 'K', 'M' und 'G' festlegen",
    L.UK: "; можеш також вибрати 'K', 'M' i 'G'",
    L.ZH: "您可指定 'K', 'M', 'G'",
    L.RO: "; puteți specifica 'K', 'M', 'G'",
    L.KO: "; 지정가능합니다 'K', 'M', 'G'",
    L.TR: "; şunları da kullanabilirsin 'K', 'M' ve 'G'",
    L.RU: "; Так же можно указать 'K', 'M' или 'G'",
    L.PT: "; também pode especificar 'K', 'M' e 'G'",
    L.EL: "• μπορείς επίσης να καθορίσεις τα 'K', 'M' και 'G'",
    L.FA: "؛ شما همچنین می توانید 'M'، 'K' و 'G' را تعیین کنید",
    L.SV: "; du kan också ange 'K', 'M' och 'G'",
}

_FAVORITE_NOTIFICATION = {
    L.EN: "Notify me when new data are exchanged from my favorites",
    L.IT: "Notificami quando nuovi dati sono scambiati dai miei preferiti",
    L.FR: "Notifiez-moi lorsque des données sont échangées depuis mes favoris",
    L.ES: "Notificarme cuando se intercambien nuevos datos de mis favoritos",
    L.PL: "Powiadom mnie, gdy nowe dane z moich ulubionych zostaną wymienione",
    L.DE: "Benachrichtige mich, wenn neue Daten mit meinen Favoriten ausgetauscht werden",
    L.UK: "Повідом мене, коли буде обмін даними з моїх улюблених",
    L.ZH: "收藏夹内的连接有新活动时通知我",
    L.RO: "Anunță-mă când sunt transferate date noi de la favoritele mele",
    L.KO: "즐겨찾기에서 새 데이터가 교환될 때 알림",
    L.TR: "Favorilerimde veri akışı olduğunda beni uyar",
    L.RU: "Уведомить, если произошёл обмен данными в соединениях из избранного",
    L.PT: "Notificar-me quando novos dados forem trocados dos meus favoritos",
    L.EL: "Ειδοποίησέ με όταν νέα δεδομένα έχουν ανταλλαγεί από τα αγαπημένα μου",
    L.FA: "به من اطلاع بده وقتی داده جدید از پسندیده های من مبادله شد",
    L.SV: "Notifiera mig när ny data utbyts av mina favoriter",
}

_THRESHOLD = {
    L.EN: "Threshold",
    L.IT: "Soglia",
    L.FR: "Seuil",
    L.ES: "Límite",
    L.PL: "Próg",
    L.DE: "Schwellenwert",
    L.UK: "Ліміт",
    L.ZH: "阈值",
    L.RO: "Prag",
    L.KO: "임계값",
    L.TR: "Eşik",
    L.RU: "Порог",
    L.PT: "Limite",
    L.EL: "όριο",
    L.FA: "آستانه",
    L.SV: "Gräns",
}

_VOLUME = {
    L.EN: "Volume",
    L.IT: "Volume",
    L.FR: "Volume",
    L.PT: "Volume",
    L.ES: "Volumen",
    L.PL: "Głośność",
    L.DE: "Lautstärke",
    L.UK: "Гучність",
    L.ZH: "通知音量",
    L.RO: "Volum",
    L.KO: "볼륨",
    L.TR: "Ses",
    L.RU: "Объём",
    L.EL: "Ένταση",
    L.FA: "حجم",
    L.SV: "Volym",
}

_SOUND = {
    L.EN: "Sound",
    L.IT: "Suono",
    L.FR: "Son",
    L.ES: "Sonido",
    L.PL: "Dźwięk",
    L.DE: "Ton",
    L.UK: "Звук",
    L.RU: "Звук",
    L.ZH: "通知音",
    L.RO: "Sunet",
    L.KO: "사운드",
    L.TR: "Ses",
    L.PT: "Som",
    L.EL: "Ήχος",
    L.FA: "صدا",
    L.SV: "Ljud",
}

_OPEN_REPORT = {
    L.EN: "Open full report",
    L.IT: "Apri report completo",
    L.FR: "Ouvrir le rapport complet",
    L.ES: "Abrir el informe completo",
    L.PL: "Otwórz pełny raport",
    L.DE: "Kompletten Bericht öffnen",
    L.UK: "Відкрий повний рапорт",
    L.ZH: "打开完整报告",
    L.RO: "Deschideți raport complet",
    L.KO: "전체 보고서 열기",
    L.TR: "Tam raporu aç",
    L.RU: "Открыть полный отчёт",
    L.PT: "Abrir relatório completo",
    L.EL: "Άνοιγμα της πλήρους αναφοράς",
    L.FA: "گزارش کامل را باز کن",
    L.SV: "Öppna fullständig rapport",
}

_BYTES_EXCEEDED = {
    L.EN: "Bytes threshold exceeded!",
    L.IT: "Soglia di Byte superata!",
    L.FR: "Seuil de donnée atteint!",
    L.ES: "¡Límite de bytes superado!",
    L.PL: "Próg bajtów przekroczony!",
    L.DE: "Byte-Schwellenwert überschritten!",
    L.UK: "Ліміт байтів перевищено!",
    L.ZH: "达到设定的网络流量阈值!",
    L.RO: "Prag de octeți depășit!",
    L.KO: "바이트 임계값 초과!",
    L.TR: "Bayt eşik değeri aşıldı!",
    L.RU: "Порог в байтах превышен!",
    L.PT: "Limite de bytes excedido!",
    L.EL: "Το όριο των bytes ξεπεράστηκε!",
    L.FA: "آستانه بایت فراتر رفت!",
    L.SV: "Gräns för bytes överskriden!",
}

_BYTES_EXCEEDED_VALUE = {
    L.EN: "{value} bytes have been exchanged",
    L.IT: "{value} byte sono stati scambiati",
    L.FR: "{value} octets ont été échangé",
    L.ES: "{value} byte/s han sido intercambiado/s",
    L.PL: "Wymieniono {value} bajtów",
    L.DE: "{value} Bytes wurden ausgetauscht",
    L.UK: "{value} байтів було обміняно",
    L.ZH: "已交换字节 {value}",
    L.RO: "au fost transferați {value} octeți",
    L.KO: "바이트 {value} 가 교환되었습니다",
    L.TR: "{value} bayt aktarıldı",
    L.RU: "{value} байт обмена информацией",
    L.PT: "Foram trocados {value} bytes",
    L.EL: "{value} bytes έχουν ανταλλαγεί",
    L.FA: "{value} بایت مبادله شده است",
    L.SV: "{value} bytes har utbytts",
}

_PACKETS_EXCEEDED = {
    L.EN: "Packets threshold exceeded!",
    L.IT: "Soglia di pacchetti superata!",
    L.FR: "Le seuil de paquet a été atteint!",
    L.ES: "¡Se ha superado el límite de paquetes!",
    L.PL: "Próg pakietów przekroczony!",
    L.DE: "Paket-Schwellenwert überschritten!",
    L.UK: "Ліміт пакетів перевищено!",
    L.ZH: "达到设定的数据包数量阈值!",
    L.RO: "Prag de pachete depășit!",
    L.KO: "패킷 임계값 초과!",
    L.TR: "Paket eşik değeri aşıldı!",
    L.RU: "Порог по числу пакетов превышен!",
    L.PT: "Limite de pacotes excedido!",
    L.EL: "Το όριο των πακέτων ξεπεράστηκε!",
    L.FA: "آستانه بسته فراتر رفت!",
    L.SV: "Paketgräns överskriden!",
}

# Plural template for every language; a singular form only where the language has one.
_PACKETS_EXCEEDED_VALUE = {
    L.EN: "{value} packets have been exchanged",
    L.IT: "{value} pacchetti sono stati scambiati",
    L.FR: "{value} paquets ont été échangés",
    L.ES: "{value} paquete/s han sido intercambiado/s",
    L.PL: "Wymieniono {value} pakietów",
    L.DE: "{value} Pakete wurden ausgetauscht",
    L.UK: "Обміняно {value} пакетів",
    L.ZH: "已交换数据包 {value}",
    L.RO: "au fost transferate {value} pachete",
    L.KO: "패킷 {value} 가 교환되었습니다",
    L.TR: "{value} paket aktarıldı",
    L.RU: "{value} пакет(ов) обмена информацией",
    L.PT: "Foram trocados {value} pacotes",
    L.EL: "{value} πακέτα έχουν ανταλλαγεί",
    L.FA: "{value} بسته مبادله شده است",
    L.SV: "{value} paket har utbytts",
}

_ONE_PACKET_EXCEEDED = {
    L.EN: "1 packet has been exchanged",
    L.IT: "1 pacchetto è stato scambiato",
    L.FR: "1 paquet a été échangé",
    L.PT: "Foi trocado 1 pacote",
    L.EL: "1 πακέτο έχει ανταλλαγεί",
    L.SV: "1 paket har utbytts",
}

_FAVORITE_TRANSMITTED = {
    L.EN: "New data exchanged from favorites!",
    L.IT: "Nuovi dati scambiati dai preferiti!",
    L.FR: "Nouvel échange de donnée depuis un favori!",
    L.ES: "¡Nuevos datos intercambiados de favoritos!",
    L.PL: "Nowe dane wymienione z ulubionych!",
    L.DE: "Neue Daten mit den Favoriten ausgetauscht!",
    L.UK: "Нові дані обміняно з улюблених!",
    L.ZH: "收藏夹内的连接有新活动!",
    L.RO: "Date noi transferate de la favorite!",
    L.KO: "즐겨찾기에서 새 데이터 교환",
    L.TR: "Favorilerden yeni veri aktarıldı!",
    L.RU: "Новый обмен данными в избранных соедиениях!",
    L.PT: "Novos dados trocados dos favoritos!",
    L.EL: "Καινούρια δεδομένα έχουν ανταλλαγεί στα αγαπημένα!",
    L.FA: "مبادله داده جدید از پسندیده ها!",
    L.SV: "Ny data utbytt av favoriter!",
}

_NO_NOTIFICATIONS_SET = {
    L.EN: (
        "You haven't enabled notifications yet!\n\n"
        "After enabling them, this page will display a log of your notifications\n\n"
        "You can enable notifications from settings:"
    ),
    L.IT: (
        "Non hai ancora abilitato le notifiche!\n\n"
        "Dopo che le avrai abilitate, questa pagina mostrerà una collezione delle tue notifiche\n\n"
        "Puoi abilitare le notifiche dalle impostazioni:"
    ),
    L.FR: (
        "Vous n'avez pas activé les notifications!\n\n"
        "Une fois activées, cette page affichera le journal des notifications\n\n"
        "Vous pouvez les activer dans les paramètres:"
    ),
    L.ES: (
        "¡Aún no has activado las notificaciones!\n\n"
        "Después de activarlas, esta página mostrará un registro de sus notificaciones\n\n"
        "Puedes activar las notificaciones desde los ajustes:"
    ),
    L.PL: (
        "Nie włączyłeś jeszcze powiadomień!\n\n"
        "Po ich włączeniu, ta strona wyświetli dziennik twoich powiadomień\n\n"
        "Możesz włączyć powiadomienia w ustawieniach:"
    ),
    L.DE: (
        "Benachrichtigungen wurden noch nicht aktiviert!\n\n"
        "Nachdem du sie aktiviert hast, wird diese Seite eine Liste deiner Benachrichtigungen anzeigen\n\n"
        "Du kannst die Benachrichtigungen in den Einstellungen aktivieren:"
    ),
    L.UK: (
        "Повідомлення не активовані!\n\n"
        "Після їх активації, на цій сторінці побачиш список своїх повідомлень\n\n"
        "Можеш вимкнути повідомлення в налаштуваннях:"
    ),
    L.ZH: (
        "您还没有设定任何通知!\n\n"
        "启用它们后，此页面将显示您的通知日志\n\n"
        "您可以从设置中设定:"
    ),
    L.RO: (
        "Încă nu ați activat notificările!\n\n"
        "După ce le veți activa, această pagină va afișa un jurnal al notificărilor dvs\n\n"
        "Puteți activa notificările din setări:"
    ),
    L.KO: (
        "아직 알림을 활성화하지 않았습니다!\n\n"
        "활성화로 설정하면 이 페이지에 알림 로그가 표시됩니다\n\n"
        "설정에서 알림을 활성화할 수 있습니다:"
    ),
    L.TR: (
        "Henüz bildirimleri etkinleştirmedin!\n\n"
        "Etkinleştirdikten sonra bu sayfada bildirimlerine ait kütüğü görebilirsin\n\n"
        "Bildirimleri, ayarlardan etkinleştirebilirsin:"
    ),
    L.RU: (
        "Уведомления пока не настроены!\n\n"
        "После настройки, эта страница будет показывать журнал уведомлений\n\n"
        "Вы можете включить уведомления в настройках:"
    ),
    L.PT: (
        "Ainda não ativou as notificações!\n\n"
        "Depois de ativá-las, esta página irá mostrar um registo das suas notificações\n\n"
        "Pode ativar as notificações nas definições:"
    ),
    L.EL: (
        "Δεν έχεις ενεργοποιήσει τις ειδοποιήσεις ακόμη!\n\n"
        "Αφότου τις ενεργοποιήσεις, αυτή η σελίδα θα απεικονίσει μια καταγραφή των ειδοποιήσεών σου\n\n"
        "Μπορείς να ενεργοποιήσεις τις ειδοποιήσεις από τις ρυθμίσεις:"
    ),
    L.FA: (
        "شما هنوز اعلان ها را فعال نکرده اید!\n\n"
        "پس از آنکه آن ها را فعال کنید، این صفحه یک کارنامه از اعلان های شما را نمایش خواهد داد\n\n\n"
        + _FA_INDENT
        + "شما می توانید اعلان ها را از پیکربندی فعال کنید:"
    ),
    L.SV: (
        "Du har inte aktiverat notifikationer än!\n\n"
        "Efter att du aktiverat dem så kommer denna sida att visa en logg av dina notifikationer\n\n"
        "Du kan aktivera notifikationer i inställingarna"
    ),
}

_NO_NOTIFICATIONS_RECEIVED = {
    L.EN: "Nothing to see at the moment...\n\nWhen you receive a notification, it will be displayed here",
    L.IT: "Nulla da vedere al momento...\n\nQuando riceverai una notifica, essa verrà mostrata qui",
    L.FR: (
        "Rien à voir pour le moment...\n\n"
        "Lorsque vous recevrez une notification, elle s'affichera ici"
    ),
    L.ES: "Nada que ver por el momento...\n\nCuando reciba una notificación, aparecerá aquí",
    L.PL: "Nic do wyświetlenia w tej chwili...\n\nGdy otrzymasz powiadomienie, pojawi się ono tutaj",
    L.DE: (
        "Im Moment nichts zu sehen...\n\n"
        "Wenn du eine Benachrichtigung erhälst, wird sie hier angezeigt"
    ),
    L.UK: "Немає що показати в даний момент...\n\nКоли отримаєш повідомлення, побачиш його тут",
    L.ZH: "还没有任何通知...\n\n当您收到通知时，它会显示在这里",
    L.RO: "Nimic de văzut momentan...\n\nCând veți primi o notificare, aceasta va fi afișată aici",
    L.KO: "현재는 볼 것이 없습니다...\n\n알림을 받으면 여기에 표시됩니다",
    L.TR: "Şu an görecek bir şey yok...\n\nBildirim aldığınız zaman burada gözükecektir",
    L.RU: "Нечего показывать в текущий момент...\n\nКогда прийдут уведомления, они будут показаны тут",
    L.PT: "Nada para ver neste momento...\n\nQuando receber uma notificação, ela será mostrada aqui",
    L.EL: (
        "Δεν υπάρχει κάτι για απεικόνιση αυτή τη στιγμή...\n\n"
        "Όταν λάβεις μια ειδοποίηση, αυτή θα εμφανιστεί εδώ"
    ),
    L.FA: (
        "در حال حاضر هیچ چیزی برای دیدن نیست...\n\n"
        "وقتی شما اعلانی دریافت می کنید، در اینجا نمایش داده خواهد شد"
    ),
    L.SV: "Inget att se för tillfället ...\n\nNär du tar emot en notifikation så kommer den att visas här",
}

_ONLY_LAST_30 = {
    L.EN: "Only the last 30 notifications are displayed",
    L.IT: "Solo le ultime 30 notifiche sono mostrate",
    L.FR: "Seulement les 30 dernières notifications sont affichées",
    L.ES: "Sólo se muestran las últimas 30 notificaciones",
    L.PL: "Wyświetlane jest tylko 30 ostatnich powiadomień",
    L.DE: "Nur die letzten 30 Benachrichtigungen werden angezeigt",
    L.UK: "Можеш побачити лише 30 останніх повідомлень",
    L.ZH: "仅显示最近 30 条通知",
    L.RO: "Sunt afișate doar ultimele 30 de notificări",
    L.KO: "최근 30개의 알림만 표시됩니다",
    L.TR: "Sadece son 30 bildirim gösterilmektedir",
    L.RU: "Тут показываются только последние 30 уведомлений",
    L.PT: "São mostradas apenas as últimas 30 notificações",
    L.EL: "Μόνο οι τελευταίες 30 ειδοποιήσεις απεικονίζονται",
    L.FA: "تنها ۳۰ اعلان آخر نمایش داده شده اند",
    L.SV: "Endast de senaste 30 notifikationerna visas",
}


def packets_threshold_translation(language: Language) -> str:
    return _pick(_PACKETS_THRESHOLD, language)


def bytes_threshold_translation(language: Language) -> str:
    return _pick(_BYTES_THRESHOLD, language)


def per_second_translation(language: Language) -> str:
    return _pick(_PER_SECOND, language)


def specify_multiples_translation(language: Language) -> str:
    return _pick(_SPECIFY_MULTIPLES, language)


def favorite_notification_translation(language: Language) -> str:
    return _pick(_FAVORITE_NOTIFICATION, language)


def threshold_translation(language: Language) -> str:
    return _pick(_THRESHOLD, language)


def volume_translation(language: Language) -> str:
    return _pick(_VOLUME, language)


def sound_translation(language: Language) -> str:
    return _pick(_SOUND, language)


def open_report_translation(language: Language) -> str:
    return _pick(_OPEN_REPORT, language)


def bytes_exceeded_translation(language: Language) -> str:
    return _pick(_BYTES_EXCEEDED, language)


def bytes_exceeded_value_translation(language: Language, value: str) -> str:
    """Message telling how many bytes were exchanged; ``value`` is trimmed first."""
    return _pick(_BYTES_EXCEEDED_VALUE, language).format(value=value.strip())


def packets_exceeded_translation(language: Language) -> str:
    return _pick(_PACKETS_EXCEEDED, language)


def packets_exceeded_value_translation(language: Language, value: int) -> str:
    """Message telling how many packets were exchanged, singular where the language has one."""
    if value == 1 and language in _ONE_PACKET_EXCEEDED:
        return _ONE_PACKET_EXCEEDED[language]
    return _pick(_PACKETS_EXCEEDED_VALUE, language).format(value=value)


def favorite_transmitted_translation(language: Language) -> str:
    return _pick(_FAVORITE_TRANSMITTED, language)


def no_notifications_set_translation(language: Language) -> str:
    return _pick(_NO_NOTIFICATIONS_SET, language)


def no_notifications_received_translation(language: Language) -> str:
    return _pick(_NO_NOTIFICATIONS_RECEIVED, language)


def only_last_30_translation(language: Language) -> str:
    return _pick(_ONLY_LAST_30, language)