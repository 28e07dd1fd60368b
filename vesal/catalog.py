"""Status and error code catalogs.

Each API generation has its own error catalog and its own delivery-state
catalog. Codes are not shared between generations: ``1`` is an invalid
recipient in one and a delivered message in another. Every entry carries
Persian and English text.

Lookups never fail on an unknown code; ``StatusCatalog.get`` returns
``None`` and the ``get_*_text`` helpers return an empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .types import Language

SUCCESS = "success"

_SUCCESS_TEXT: dict[Language, str] = {
    Language.FA: "پیام با موفقیت رسید",
    Language.EN: "Message sent successfully",
}


@dataclass(frozen=True)
class StatusCatalog:
    """Read-only mapping of numeric codes to (Persian, English) text."""

    name: str
    entries: Mapping[int, tuple[str, str]]

    def __contains__(self, code: object) -> bool:
        return code in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, code: int, language: Language = Language.FA) -> str | None:
        entry = self.entries.get(code)
        if entry is None:
            return None
        fa, en = entry
        return en if Language(language) is Language.EN else fa


def _catalog(name: str, entries: dict[int, tuple[str, str]]) -> StatusCatalog:
    return StatusCatalog(name=name, entries=MappingProxyType(entries))


# ── Current API (sms.vesal.com, v2) ──────────────────────────────────

ERRORS = _catalog(
    "errors",
    {
        1: ("شماره گیرنده نادرست است", "Invalid recipient number"),
        2: ("شماره فرستنده نادرست است", "Invalid sender number"),
        3: (
            "پارامتر encoding نامعتبر است. (بررسی صحت و هم‌خوانی متن پیامک با encoding انتخابی)",
            "Invalid encoding parameter (check that the message text matches the selected encoding)",
        ),
        4: ("پارامتر mclass نامعتبر است", "Invalid mclass parameter"),
        6: ("پارامتر UDH نامعتبر است", "Invalid UDH parameter"),
        13: (
            "محتویات پیامک (ترکیب UDH و متن) خالی است. (بررسی دوباره‌ی متن پیامک و پارامتر UDH)",
            "Message content (UDH and text combined) is empty (check the message text and UDH parameter)",
        ),
        14: (
            "مانده اعتبار ریالی مورد نیاز برای ارسال پیامک کافی نیست",
            "Insufficient credit to send the message",
        ),
        15: (
            "سرور در هنگام ارسال پیام مشغول برطرف نمودن ایراد داخلی بوده است. (ارسال مجدد درخواست)",
            "The server was resolving an internal issue while sending (resend the request)",
        ),
        16: (
            "حساب غیرفعال است. (تماس با واحد فروش سیستم‌های ارتباطی)",
            "Account is inactive (contact the sales department)",
        ),
        17: (
            "حساب منقضی شده است. (تماس با واحد فروش سیستم‌های ارتباطی)",
            "Account has expired (contact the sales department)",
        ),
        18: (
            "نام کاربری و یا کلمه عبور نامعتبر است. (بررسی مجدد نام کاربری و کلمه عبور)",
            "Invalid username or password (check your username and password)",
        ),
        19: (
            "درخواست معتبر نیست. (ترکیب نام کاربری، رمز عبور و دامنه اشتباه است. تماس با واحد فروش برای دریافت کلمه عبور جدید)",
            "Invalid request (the username, password and domain combination is wrong; contact sales for a new password)",
        ),
        20: ("شماره فرستنده به حساب تعلق ندارد", "Sender number does not belong to the account"),
        22: ("این سرویس برای حساب فعال نشده است", "This service is not enabled for the account"),
        23: (
            "در حال حاضر امکان پردازش درخواست جدید وجود ندارد، لطفا دوباره سعی کنید. (ارسال مجدد درخواست)",
            "Unable to process new requests right now, please try again (resend the request)",
        ),
        24: (
            "شناسه پیامک معتبر نیست. (ممکن است شناسه پیامک اشتباه و یا متعلق به پیامکی باشد که بیش از یک روز از ارسال آن گذشته)",
            "Invalid message id (the id may be wrong or belong to a message sent more than a day ago)",
        ),
        25: (
            "نام متد درخواستی معتبر نیست. (بررسی نگارش نام متد با توجه به بخش متدها در این راهنما)",
            "Invalid method name (check the method name against the API documentation)",
        ),
        27: (
            "شماره گیرنده در لیست سیاه اپراتور قرار دارد. (ارسال پیامک‌های تبلیغاتی برای این شماره امکان‌پذیر نیست)",
            "Recipient is on the operator blacklist (promotional messages cannot be sent to this number)",
        ),
        28: (
            "شماره گیرنده، بر اساس پیش‌شماره در حال حاضر در مگفا مسدود است",
            "Recipient number is currently blocked by prefix",
        ),
        29: (
            "آدرس IP مبدا، اجازه دسترسی به این سرویس را ندارد",
            "Source IP address is not allowed to access this service",
        ),
        30: (
            "تعداد بخش‌های پیامک بیش از حد مجاز استاندارد (۲۶۵ عدد) است",
            "Message has more parts than the standard limit (265)",
        ),
        31: (
            "داده‌های موردنیاز برای ارسال کافی نیستند. (اصلاح HTTP Request)",
            "Required data for sending is incomplete (fix the HTTP request)",
        ),
        101: (
            "طول آرایه پارامتر messageBodies با طول آرایه گیرندگان تطابق ندارد",
            "Length of messageBodies does not match the number of recipients",
        ),
        102: (
            "طول آرایه پارامتر messageClass با طول آرایه گیرندگان تطابق ندارد",
            "Length of messageClass does not match the number of recipients",
        ),
        103: (
            "طول آرایه پارامتر senderNumbers با طول آرایه گیرندگان تطابق ندارد",
            "Length of senderNumbers does not match the number of recipients",
        ),
        104: (
            "طول آرایه پارامتر udhs با طول آرایه گیرندگان تطابق ندارد",
            "Length of udhs does not match the number of recipients",
        ),
        105: (
            "طول آرایه پارامتر priorities با طول آرایه گیرندگان تطابق ندارد",
            "Length of priorities does not match the number of recipients",
        ),
        106: ("آرایه‌ی گیرندگان خالی است", "Recipients array is empty"),
        107: (
            "طول آرایه پارامتر گیرندگان بیشتر از طول مجاز است",
            "Recipients array is longer than allowed",
        ),
        108: ("آرایه‌ی فرستندگان خالی است", "Senders array is empty"),
        109: (
            "طول آرایه پارامتر encoding با طول آرایه گیرندگان تطابق ندارد",
            "Length of encoding does not match the number of recipients",
        ),
        110: (
            "طول آرایه پارامتر checkingMessageIds با طول آرایه گیرندگان تطابق ندارد",
            "Length of checkingMessageIds does not match the number of recipients",
        ),
    },
)

MESSAGE_STATUSES = _catalog(
    "message_statuses",
    {
        -1: (
            "شناسه موجود نیست (شناسه نادرست یا گذشت بیش از ۲۴ ساعت از ارسال پیامک)",
            "Id not found (wrong id or more than 24 hours since the message was sent)",
        ),
        0: ("وضعیتی دریافت نشده", "No status received yet"),
        1: ("رسیده به گوشی", "Delivered to handset"),
        2: ("نرسیده به گوشی", "Not delivered to handset"),
        8: ("رسیده به مخابرات", "Delivered to operator"),
        16: ("نرسیده به مخابرات", "Not delivered to operator"),
    },
)

# ── Legacy API (vesal.armaghan.net REST) ─────────────────────────────

LEGACY_ERRORS = _catalog(
    "legacy_errors",
    {
        -100: ("شناسه مورد نظر یافت نشد", "Reference id not found"),
        -101: ("احراز هویت کاربر موفقیت آمیز نبود", "User authentication failed"),
        -102: ("نام کاربری یافت نشد", "Username not found"),
        -103: (
            "شماره فرستنده اشتباه یا در بازه شماره‌های کاربر نیست",
            "Sender number is wrong or outside the account's number range",
        ),
        -104: ("اعتبار کم است", "Insufficient credit"),
        -105: ("فرمت درخواست اشتباه است", "Malformed request"),
        -106: ("تعداد شناسه‌ها بیش از ۱۰۰۰ عدد است", "More than 1000 reference ids"),
        -107: ("شماره گیرنده پیامک اشتباه است", "Invalid recipient number"),
        -109: ("تاریخ انقضای حساب کاربری فرارسیده است", "Account has expired"),
        -110: ("درخواست از IP مجاز کاربر ارسال نشده است", "Request was not sent from an allowed IP"),
        -111: ("شماره گیرنده در لیست سیاه قرار دارد", "Recipient is blacklisted"),
        -112: ("حساب مشتری فعال نیست", "Account is inactive"),
        -115: ("فرمت UDH اشتباه است", "Invalid UDH format"),
        -117: ("مقدار mclass وارد شده اشتباه است", "Invalid mclass value"),
        -118: ("شماره پورت وارد شده صحیح نیست", "Invalid port number"),
        -119: ("کاربر به سرویس مورد نظر دسترسی ندارد", "User has no access to this service"),
        -120: ("پیام ارسال شده دارای هیچ شماره معتبری نیست", "Message has no valid recipient"),
        -137: ("پیام حاوی کلمات غیرمجاز است", "Message contains forbidden words"),
        -200: ("خطای داخلی در پایگاه داده رخ داده است", "Internal database error"),
        -201: ("خطای نامشخص داخل پایگاه داده", "Unknown database error"),
    },
)

LEGACY_MESSAGE_STATUSES = _catalog(
    "legacy_message_statuses",
    {
        0: ("ارسال شده به مخابرات", "Sent to operator"),
        1: ("رسیده به گوشی", "Delivered to handset"),
        2: ("نرسیده به گوشی", "Not delivered to handset"),
        3: ("خطای مخابراتی", "Operator error"),
        5: ("خطای نامشخص", "Unknown error"),
        8: ("رسیده به مخابرات", "Delivered to operator"),
        16: ("نرسیده به مخابرات", "Not delivered to operator"),
        35: ("شماره گیرنده در لیست سیاه قرار دارد", "Recipient is blacklisted"),
        100: ("نامشخص", "Unknown"),
        200: ("ارسال شده", "Sent"),
        300: ("فیلتر شده", "Filtered"),
        400: ("در لیست ارسال", "Queued for sending"),
        500: ("عدم پذیرش", "Rejected"),
    },
)


# ── Lookup helpers ────────────────────────────────────────────────────


def success_text(language: Language = Language.FA) -> str:
    """Text attached to a recipient whose message was accepted."""
    return _SUCCESS_TEXT[Language(language)]


def _error_text(catalog: StatusCatalog, code: int, language: Language) -> str:
    if code == 0:
        return SUCCESS
    return catalog.get(code, language) or ""


def get_status_text(code: int, language: Language = Language.FA) -> str:
    """Resolve an API error code; ``0`` is ``"success"``, unknown codes are ``""``."""
    return _error_text(ERRORS, code, language)


def get_message_status_text(code: int, language: Language = Language.FA) -> str:
    """Resolve a delivery-state code returned by ``get_message_status``."""
    return MESSAGE_STATUSES.get(code, language) or ""


def get_legacy_status_text(code: int, language: Language = Language.FA) -> str:
    """Resolve a legacy API error code; ``0`` is ``"success"``, unknown codes are ``""``."""
    return _error_text(LEGACY_ERRORS, code, language)


def get_legacy_message_status_text(code: int, language: Language = Language.FA) -> str:
    return LEGACY_MESSAGE_STATUSES.get(code, language) or ""
