"""Languages available for the user interface."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """A language the interface can be shown in."""

    EN = "EN"
    """English (default language)."""
    IT = "IT"
    """Italian."""
    FR = "FR"
    """French."""
    ES = "ES"
    """Spanish."""
    PL = "PL"
    """Polish."""
    DE = "DE"
    """German."""
    UK = "UK"
    """Ukrainian."""
    ZH = "ZH"
    """Simplified Chinese."""
    RO = "RO"
    """Romanian."""
    KO = "KO"
    """Korean."""
    PT = "PT"
    """Portuguese."""
    TR = "TR"
    """Turkish."""
    RU = "RU"
    """Russian."""
    EL = "EL"
    """Greek."""
    FA = "FA"
    """Persian."""
    SV = "SV"
    """Swedish."""

    def radio_label(self) -> str:
        """Name of the language written in the language itself."""
        return _RADIO_LABELS[self]

    @classmethod
    def default(cls) -> Language:
        """The language used when none is chosen."""
        return cls.EN

    @classmethod
    def rows(cls) -> tuple[tuple[Language, ...], ...]:
        """The languages laid out in the rows of the selection grid."""
        return (
            (cls.EN, cls.DE, cls.EL, cls.ES),
            (cls.FA, cls.FR, cls.IT, cls.KO),
            (cls.PL, cls.PT, cls.RO, cls.RU),
            (cls.SV, cls.TR, cls.UK, cls.ZH),
        )


_RADIO_LABELS = {
    Language.EN: "English",
    Language.IT: "Italiano",
    Language.FR: "Français",
    Language.ES: "Español",
    Language.PL: "Polski",
    Language.DE: "Deutsch",
    Language.UK: "Українська",
    Language.ZH: "简体中文",
    Language.RO: "Română",
    Language.KO: "한국인",
    Language.TR: "Türkçe",
    Language.RU: "Русский",
    Language.PT: "Português",
    Language.EL: "Ελληνικά",
    Language.FA: "فارسی",
    Language.SV: "Svenska",
}