"""Utility functions for the application"""
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from numbers import Number, Rational
from typing import Callable, NamedTuple, Sequence, Tuple

ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = ("ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen", "nineteen")
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

# Hindi numerals up to 100 are not built from tens + ones, every value has its own word
HINDI_WORDS = (
    "", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चौवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सरसठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उनासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानबे", "बानबे", "तिरानबे", "चौरानबे", "पंचानबे", "छियानबे", "सतानबे", "अठानबे", "निन्यानबे",
    "सौ",
)
HINDI_HUNDRED = "सौ"
HINDI_ONE_HUNDRED = "एक सौ"

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

# Largest unit first
ENGLISH_UNITS = ((CRORE, "crore"), (LAKH, "lakh"), (THOUSAND, "thousand"))
HINDI_UNITS = ((CRORE, "करोड़"), (LAKH, "लाख"), (THOUSAND, "हज़ार"))

ENGLISH_ZERO = "zero"
HINDI_ZERO = "शून्य"
ENGLISH_SUFFIX = " / Rupees"
HINDI_SUFFIX = " / रुपये"


class AmountError(ValueError):
    """Raised when an amount cannot be spelled out (negative, NaN, infinite or not a number)"""
    pass


class AmountInWords(NamedTuple):
    english: str
    hindi: str


def convert_below_thousand(n: int) -> str:
    """Indian-English words for 0 <= n < 1000, no "and" (705 -> "seven hundred five")."""
    assert 0 <= n < 1000, f"convert_below_thousand called with {n}"

    if n == 0:
        return ""
    elif n < 10:
        return ONES[n]
    elif n < 20:
        return TEENS[n - 10]
    elif n < 100:
        return TENS[n // 10] + (" " + ONES[n % 10] if n % 10 != 0 else "")
    else:
        return ONES[n // 100] + " hundred" + (" " + convert_below_thousand(n % 100) if n % 100 != 0 else "")


def hindi_below_thousand(n: int) -> str:
    """Devanagari words for 0 <= n < 1000."""
    assert 0 <= n < 1000, f"hindi_below_thousand called with {n}"

    if n < 100:
        return HINDI_WORDS[n]

    hundreds, remainder = divmod(n, 100)
    if hundreds == 1:
        label = HINDI_ONE_HUNDRED
    else:
        label = f"{HINDI_WORDS[hundreds]} {HINDI_HUNDRED}"
    return f"{label} {hindi_below_thousand(remainder)}".strip()


def group_words(
    number: int,
    units: Sequence[Tuple[int, str]],
    render_small: Callable[[int], str],
) -> str:
    """Spell out ``number`` using thousand / lakh / crore grouping.

    ``units`` lists (divisor, word) pairs from the largest divisor down and
    ``render_small`` spells anything below a thousand. Every level emits its
    unit word and drops the remainder clause when the remainder is zero.
    Only the top unit may have a quotient of 100 or more; that quotient is
    grouped again, so 10**10 reads "one thousand crore".
    """
    if number == 0:
        return ""
    if number < THOUSAND:
        return render_small(number)

    top_divisor = units[0][0]
    for divisor, unit in units:
        if number < divisor:
            continue
        quotient, remainder = divmod(number, divisor)
        if divisor != top_divisor:
            assert quotient < 100, f"{unit} quotient {quotient} out of range"
        words = [group_words(quotient, units, render_small), unit]
        if remainder:
            words.append(group_words(remainder, units, render_small))
        return " ".join(words)

    raise AssertionError(f"no grouping unit for {number}")


def to_indian_english(number: int) -> str:
    """Lower-case Indian-English words for a non-negative integer."""
    return group_words(number, ENGLISH_UNITS, convert_below_thousand) or ENGLISH_ZERO


def to_hindi(number: int) -> str:
    """Devanagari words for a non-negative integer."""
    return group_words(number, HINDI_UNITS, hindi_below_thousand) or HINDI_ZERO


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (Number, Decimal)):
        raise AmountError(f"Amount must be a number, got {amount!r}")
    if isinstance(amount, float) and not math.isfinite(amount):
        raise AmountError(f"Amount must be finite, got {amount!r}")

    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, Rational) and not isinstance(amount, int):
            # Fractions have no decimal literal; divide with room for the whole numerator
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, len(str(abs(amount.numerator))) + 6)
                value = Decimal(amount.numerator) / Decimal(amount.denominator)
        else:
            value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise AmountError(f"Amount must be a number, got {amount!r}")
    if not value.is_finite():
        raise AmountError(f"Amount must be finite, got {amount!r}")
    if value < 0:
        raise AmountError(f"Amount must not be negative, got {amount!r}")
    return value


def _quantize(value: Decimal, exponent: str) -> Decimal:
    # quantize fails once the result needs more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 6)
        return value.quantize(Decimal(exponent), rounding=ROUND_HALF_UP)


def round_amount(amount) -> int:
    """Round to the nearest rupee, halves away from zero (2.5 -> 3)."""
    return int(_quantize(_to_decimal(amount), "1"))


def _collapse_spaces(text: str) -> str:
    return " ".join(text.split())


def _title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def number_to_words(amount) -> AmountInWords:
    """Convert an amount to words in Indian English and Hindi (Indian numbering system).

    The amount is rounded to whole rupees first. ``None`` gives two empty
    strings so callers can render a blank field.
    """
    if amount is None:
        return AmountInWords(english="", hindi="")

    number = round_amount(amount)

    english = _title_case(_collapse_spaces(to_indian_english(number)))
    hindi = _collapse_spaces(to_hindi(number))

    return AmountInWords(english=english + ENGLISH_SUFFIX, hindi=hindi + HINDI_SUFFIX)


def format_indian_number(value: int) -> str:
    """Group digits the Indian way: last three together, the rest in pairs."""
    digits = str(value)
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount) -> str:
    """Format an amount with Indian digit grouping and two decimals (118000 -> "1,18,000.00")."""
    value = _quantize(_to_decimal(amount), "0.01")
    rupees = int(value)
    paise = int((value - rupees) * 100)
    return f"{format_indian_number(rupees)}.{paise:02d}"
