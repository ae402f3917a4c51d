"""Sentence templates, error messages and intent titles for each locale."""

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    thai = "th"
    english = "en"


@dataclass(frozen=True)
class LocaleText:
    title: str
    reading: str
    location_failure: str
    error: str
    error_kinds: dict
    reasons: dict
    unexpected: str


TEXTS = {
    Locale.thai: LocaleText(
        title="เช็คค่าฝุ่นปัจจุบัน",
        reading="ระดับ PM2.5 ในปัจจุบันอยู่ที่ {value:.1f} µg/m³ ซึ่งอยู่ในเกณฑ์{label}",
        location_failure="ไม่สามารถระบุตำแหน่งของคุณได้",
        error="ไม่สามารถเช็คค่าฝุ่นได้ ({kind}): {message}",
        error_kinds={
            "network": "เครือข่ายขัดข้อง",
            "data": "ข้อมูลไม่ถูกต้อง",
        },
        reasons={
            "bad_url": "ที่อยู่เซิร์ฟเวอร์ไม่ถูกต้อง",
            "bad_status": "เซิร์ฟเวอร์ตอบกลับด้วยข้อผิดพลาด",
            "timeout": "เซิร์ฟเวอร์ไม่ตอบสนองภายในเวลาที่กำหนด",
            "unreachable": "ไม่สามารถเชื่อมต่อเซิร์ฟเวอร์ได้",
            "invalid_data": "ไม่สามารถอ่านข้อมูลที่ได้รับได้",
        },
        unexpected="เกิดข้อผิดพลาดที่ไม่คาดคิด กรุณาลองใหม่อีกครั้ง",
    ),
    Locale.english: LocaleText(
        title="Check Current PM2.5 Level",
        reading="Current PM2.5 level is {value:.1f} µg/m³, which is in the {label} range",
        location_failure="Could not determine your location.",
        error="Unable to check PM2.5 ({kind}): {message}",
        error_kinds={
            "network": "network error",
            "data": "data error",
        },
        reasons={
            "bad_url": "invalid server URL",
            "bad_status": "server returned an error",
            "timeout": "request timed out",
            "unreachable": "server is unreachable",
            "invalid_data": "unable to parse response data",
        },
        unexpected="An unexpected error occurred. Please try again.",
    ),
}

# Shortcut intents, keyed by the id the invocation surface exposes
INTENTS = {
    "pm25": Locale.thai,
    "pm25-english": Locale.english,
}


def get_text(locale: Locale | str) -> LocaleText:
    return TEXTS[Locale(locale)]
