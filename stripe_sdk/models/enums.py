"""Enumerations for the SDK domain model."""

from enum import Enum


class RequestMethod(str, Enum):
    """HTTP methods used against the REST API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class HostPlatform(str, Enum):
    """Where the SDK runs, which decides how authentication callbacks arrive."""

    NATIVE = "native"  # deep links / loopback callbacks reach the process
    WEB = "web"  # the browsing context navigates away; no callback path


class AttemptState(str, Enum):
    """Lifecycle states for a redirect authentication attempt."""

    IDLE = "idle"
    SUBSCRIBED = "subscribed"
    MATCHED = "matched"
    RESOLVED = "resolved"
    ERRORED = "errored"

    @property
    def is_terminal(self) -> bool:
        return self in (AttemptState.RESOLVED, AttemptState.ERRORED)


class IntentStatus(str, Enum):
    """Payment and setup intent statuses the SDK acts on."""

    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


class SupportLocale(str, Enum):
    """Locales accepted by the API for localized error messages."""

    AUTO = "auto"
    AR = "ar"
    BG = "bg"
    CS = "cs"
    DA = "da"
    DE = "de"
    EL = "el"
    ET = "et"
    EN = "en"
    ES = "es"
    FI = "fi"
    FR = "fr"
    HE = "he"
    ID = "id"
    IT = "it"
    JA = "ja"
    LT = "lt"
    LV = "lv"
    MS = "ms"
    NB = "nb"
    NL = "nl"
    PL = "pl"
    PT_BR = "ptBR"
    PT = "pt"
    RU = "ru"
    SK = "sk"
    SL = "sl"
    SV = "sv"
    ZH = "zh"

    def to_short_string(self) -> str:
        """Header form of the locale: ``pt-br`` for Brazilian Portuguese, else the tag."""
        if self is SupportLocale.PT_BR:
            return "pt-br"
        return self.value.lower()
