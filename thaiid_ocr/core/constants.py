from typing import Final, List, Tuple

# Flat JSON keys of a parsed card, in output order
CARD_FIELDS: Final[List[str]] = [
    "idCardNumber", "name", "lastName", "dateOfBirth",
    "address", "dateOfIssue", "dateOfExpiry",
]

# Label markers (Thai, English) printed on the card
ID_NUMBER_LABELS: Final[Tuple[str, ...]] = ("เลขประจำตัวประชาชน", "Identification Number")
NAME_LABELS: Final[Tuple[str, ...]] = ("ชื่อตัวและชื่อสกุล", "Name")
BIRTH_DATE_LABELS: Final[Tuple[str, ...]] = ("เกิดวันที่", "Date of Birth")
ADDRESS_LABELS: Final[Tuple[str, ...]] = ("ที่อยู่",)
ISSUE_DATE_LABELS: Final[Tuple[str, ...]] = ("วันออกบัตร", "Date of issue")
EXPIRY_DATE_LABELS: Final[Tuple[str, ...]] = ("วันบัตรหมดอายุ", "Date of Expiry")

# Name line: "<label> <...> <...> <name> <last name>"
NAME_TOKEN_INDEX: Final[int] = 3
LAST_NAME_TOKEN_INDEX: Final[int] = 4
MIN_NAME_TOKENS: Final[int] = 5

# Address spans the label line and the one after it
ADDRESS_LINE_SPAN: Final[int] = 2

# Google Cloud Vision
VISION_API_URL: Final[str] = "https://vision.googleapis.com/v1/images:annotate"
VISION_FEATURE_TYPE: Final[str] = "TEXT_DETECTION"
RETRYABLE_STATUS: Final[Tuple[int, ...]] = (429, 500, 502, 503, 504)
BACKOFF_S = [0.2, 1.0, 3.0]
