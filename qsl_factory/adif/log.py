"""
Turn ADIF log text into ContactRecords.

Reference: https://www.adif.org/adif
Description of the file format: http://www.adif.org/312/ADIF_312.htm#ADI_File_Format

This is a forgiving parser, not a validating one. It never raises on bad input:
records it can't make sense of, or that have no callsign, are skipped.
"""

import logging
from pathlib import Path

from qsl_factory.adif.record import AdifTag, ContactRecord
from qsl_factory.adif.util import split_records

logger = logging.getLogger(__name__)


def parse(contents: str) -> list[ContactRecord]:
    """
    Parse ADIF text into a list of contacts, in the same order as the log.

    The whole log is upper-cased first, so tags and <EOR> match in any case. Values get
    upper-cased too.
    """
    contacts = []
    for i, record in enumerate(split_records(contents)):
        contact = ContactRecord.from_tags(AdifTag.find_all(record))
        if not contact.callsign:
            logger.debug(f"Skipping record {i}, no callsign")
            continue
        contacts.append(contact)

    logger.debug(f"Parsed {len(contacts)} contact(s)")
    return contacts


def parse_file(file_path: Path) -> list[ContactRecord]:
    """
    Parse an ADIF file. The whole file is read into memory, which is fine for a
    typical log.
    """
    with file_path.open(encoding="utf-8", errors="replace") as f:
        return parse(f.read())
