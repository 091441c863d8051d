import logging
import re
from dataclasses import asdict, dataclass, fields
from typing import Optional

from qsl_factory.adif.util import format_date, format_time
from qsl_factory.constants import CARD_PLACEHOLDER

logger = logging.getLogger(__name__)

# <NAME>value or <NAME:LENGTH>value, with the value running up to the next '<'.
# Anything else, like <CALL:X> or <CALL:4:S>, doesn't match and is skipped over.
TAG_RE = re.compile(r"<(\w+)(?::(\d+))?>([^<]*)", re.ASCII)


@dataclass
class AdifTag:
    """
    A single tag and its value from a record, like <CALL:4>W1AW

    <name>value
    <name:length>value
    """

    name: str
    length: Optional[int] = None
    value: str = ""

    @classmethod
    def parse(cls, match: "re.Match[str]") -> "AdifTag":
        """
        Build a tag from a TAG_RE match. The value is trimmed, then cut down to the
        declared length if it's longer. A shorter value is left alone.
        """
        name, length_str, value = match.groups()
        value = value.strip()

        length = None
        if length_str is not None:
            try:
                length = int(length_str)
            except ValueError:
                # int() refuses strings over a few thousand digits. A length that long
                # is bigger than any value, so there's nothing to truncate.
                logger.debug(f"Ignoring {len(length_str)} digit length on <{name}>")

        if length is not None and len(value) > length:
            value = value[:length]

        return cls(name, length, value)

    @classmethod
    def find_all(cls, record: str) -> list["AdifTag"]:
        """
        Find every tag in a record string, in order
        """
        return [cls.parse(m) for m in TAG_RE.finditer(record)]


@dataclass
class ContactRecord:
    """
    A single QSO, as needed to fill in a QSL card. Only the callsign is required for a
    record to show up in a parse result, everything else is None if the log didn't
    have it.
    """

    callsign: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    band: Optional[str] = None
    mode: Optional[str] = None
    rst: Optional[str] = None

    # ADIF tag name -> (our field name, transform)
    _tag_fields = {
        "CALL": ("callsign", None),
        "QSO_DATE": ("date", format_date),
        "TIME_ON": ("time", format_time),
        "BAND": ("band", None),
        "MODE": ("mode", None),
        "RST_SENT": ("rst", None),
    }

    @classmethod
    def from_tags(cls, tags: list[AdifTag]) -> "ContactRecord":
        """
        Map the tags we know about onto a ContactRecord. Tags are applied in order, so
        if a tag shows up twice the later one wins. Unknown tags are ignored.
        """
        contact = cls()
        for tag in tags:
            if tag.name not in cls._tag_fields:
                continue

            field_name, transform = cls._tag_fields[tag.name]
            value = transform(tag.value) if transform else tag.value
            setattr(contact, field_name, value)
        return contact

    def as_dict(self) -> dict[str, str]:
        """
        Return the fields that were set, as a dict
        """
        return {k: v for k, v in asdict(self).items() if v is not None}

    def card_fields(self) -> dict[str, str]:
        """
        Return every field, with a placeholder for the ones that weren't set. Handy for
        rendering a card, where every slot needs something in it.
        """
        return {
            f.name: getattr(self, f.name) or CARD_PLACEHOLDER for f in fields(self)
        }
