"""Street addresses: parsing user input and file storage."""

from dataclasses import dataclass

from .filehelper import read_chars, read_int, read_string, write_int, write_string
from .general import ask_string, count_char, is_blank, split_words

ELEMENT_SEP = "#"
WORD_SEP = "  "
_DIGITS = "0123456789"

_PROMPT = (
    f"Enter address data\nFormat: street{ELEMENT_SEP}house number{ELEMENT_SEP}city\n"
    "street and city can have spaces\n"
)


@dataclass
class Address:
    """A street address with a house number."""

    num: int
    street: str
    city: str

    def __str__(self):
        return f"{self.street} {self.num}, {self.city}"

    def save(self, fp):
        """Write the address in the plain binary format."""
        write_int(fp, self.num)
        write_string(fp, self.street)
        write_string(fp, self.city)

    def save_compressed(self, fp):
        """Write the address in the compressed binary format."""
        if not 0 <= self.num <= 0xFF:
            raise ValueError(f"house number {self.num} does not fit in one byte")
        fp.write(bytes([self.num]))
        for text in (self.street, self.city):
            data = text.encode("utf-8")
            write_int(fp, len(data))
            fp.write(data)


def check_elements(elements):
    """True when elements are a street, a numeric house number and a city."""
    if len(elements) != 3:
        return False
    street, number, city = elements
    if not all(ch in _DIGITS for ch in number):
        return False
    return not is_blank(street) and not is_blank(city)


def fix_address_param(param):
    """Normalise a street or city name.

    Words are joined by a double space; every word but the last starts with
    an upper-case letter and the last with a lower-case one, unless it is
    the only word, which is capitalised.
    """
    words = split_words(param, " ")
    if not words:
        raise ValueError("empty address part")
    if len(words) == 1:
        words = [words[0][0].upper() + words[0][1:]]
    else:
        head = [word[0].upper() + word[1:] for word in words[:-1]]
        last = words[-1][0].lower() + words[-1][1:]
        words = head + [last]
    return WORD_SEP.join(words)


def parse_address(text):
    """Build an Address from 'street#number#city'; raise ValueError if malformed."""
    if count_char(text, ELEMENT_SEP) > 2:
        raise ValueError("Too many separators in address")
    elements = split_words(text, ELEMENT_SEP)
    if not check_elements(elements):
        raise ValueError("!!!incorrect address format!!!")
    street, number, city = elements
    return Address(int(number), fix_address_param(street), fix_address_param(city))


def prompt_address():
    """Ask the user for an address until a valid one is entered."""
    while True:
        try:
            return parse_address(ask_string(_PROMPT))
        except ValueError as err:
            print(err)


def load_address(fp):
    """Read an address written by Address.save."""
    num = read_int(fp)
    street = read_string(fp)
    city = read_string(fp)
    return Address(num, street, city)


def load_address_compressed(fp):
    """Read an address written by Address.save_compressed."""
    raw = read_chars_raw = fp.read(1)
    if len(raw) != 1:
        from .filehelper import FileFormatError

        raise FileFormatError("missing house number")
    num = read_chars_raw[0]
    street = read_chars(fp, read_int(fp))
    city = read_chars(fp, read_int(fp))
    return Address(num, street, city)