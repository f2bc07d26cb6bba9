"""Stock rules. Each takes a field value and returns True or an error message."""
import datetime
import re
from collections.abc import Callable, Collection
from typing import Any

EMAIL_REGEX = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
IRISH_MOBILE_REGEX = r"^08[356789]\d{7}$"
# Northern Ireland (BT) postcodes only. Valid districts per BT postcode area:
# BT1-BT17 (Belfast), BT18-BT49, BT51-BT57, BT58, BT60-BT71, BT74-BT82, BT92-BT94.
# Inward code: digit + 2 letters (C,I,K,M,O,V excluded per UK postcode rules).
NI_POSTCODE_REGEX = (
    r"^BT"
    r"([1-9]|[1-4][0-9]|5[1-8]|6[0-9]|7[01]|7[4-9]|8[0-2]|9[2-4])"
    r"\s?\d[ABDEGHJLNPQRSTUWXYZ]{2}$"
)
EIRCODE_REGEX = (
    r"^(?:(a(4[125s]|6[37]|7[5s]|[8b][1-6s]|9[12468b])"
    r"|c1[5s]|d([0o][1-9sb]|1[0-8osb]|2[024o]|6w)|e(2[15s]|3[24]|4[15s]|[5s]3|91)|f(12|2[368b]"
    r"|3[15s]|4[25s]|[5s][26]|9[1-4])|h(1[2468b]|23|[5s][34]|6[25s]|[79]1)|k(3[246]|4[5s]|[5s]6|67|7[8b])"
    r"|n(3[79]|[49]1)|p(1[247]|2[45s]|3[126]|4[37]|[5s][16]|6[17]|7[25s]|[8b][15s])|r(14|21|3[25s]|4[25s]"
    r"|[5s][16]|9[35s])|t(12|23|34|4[5s]|[5s]6)|v(1[45s]|23|3[15s]|42|9[2-5s])|w(12|23|34|91)|x(3[5s]|42|91)"
    r"|y(14|2[15s]|3[45s]))\s?[acdefhknprtvwxy\d]{4})$"
)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def contains_text(value: Any) -> bool | str:
    if _text(value) == "":
        return "This field can't be blank."
    return True


def is_integer(value: Any) -> bool | str:
    if not _text(value).isdigit():
        return f"{value!r} is not a whole number."
    return True


def is_decimal(value: Any) -> bool | str:
    if not _text(value).replace(".", "", 1).isdigit():
        return f"{value!r} is not a number."
    return True


def is_date(value: Any) -> bool | str:
    try:
        datetime.datetime.strptime(_text(value), "%d/%m/%Y")
    except ValueError:
        return f"{value!r} is not a date (dd/mm/yyyy)."
    return True


def is_email(value: Any) -> bool | str:
    if re.match(EMAIL_REGEX, _text(value)) is None:
        return f"Invalid email address: {value}"
    return True


def is_irish_mobile(value: Any) -> bool | str:
    if re.match(IRISH_MOBILE_REGEX, _text(value)) is None:
        return f"Invalid mobile number: {value}"
    return True


def is_eircode(value: Any) -> bool | str:
    if re.match(EIRCODE_REGEX, _text(value), re.IGNORECASE) is None:
        return f"Invalid eircode: {value}"
    return True


def is_ni_postcode(value: Any) -> bool | str:
    if re.match(NI_POSTCODE_REGEX, _text(value), re.IGNORECASE) is None:
        return f"Invalid NI postcode: {value}"
    return True


def max_length(limit: int) -> Callable[[Any], bool | str]:
    """Rule factory: the value's text may be at most limit characters."""
    if not isinstance(limit, int) or isinstance(limit, bool):
        raise TypeError(f"limit must be an int, got {limit!r}")

    def rule(value: Any) -> bool | str:
        if len(_text(value)) > limit:
            return f"Must be {limit} characters or shorter."
        return True
    rule.__name__ = f"max_length_{limit}"
    return rule


def one_of(choices: Collection[Any]) -> Callable[[Any], bool | str]:
    """Rule factory: the value must be one of choices."""
    if isinstance(choices, str):
        raise TypeError("choices must be a collection of values, not a string")
    choices = list(choices)

    def rule(value: Any) -> bool | str:
        if value not in choices:
            return f"{value!r} is not one of {choices}."
        return True
    rule.__name__ = "one_of"
    return rule


RULE_REGISTRY: dict[str, Callable[[Any], bool | str]] = {
    "contains_text": contains_text,
    "is_integer": is_integer,
    "is_decimal": is_decimal,
    "is_date": is_date,
    "is_email": is_email,
    "is_irish_mobile": is_irish_mobile,
    "is_eircode": is_eircode,
    "is_ni_postcode": is_ni_postcode,
}
