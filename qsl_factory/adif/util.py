"""
ADIF utility functions
"""

import logging
import re

logger = logging.getLogger(__name__)

# End of record marker. Input is upper-cased before splitting, but match either case
# anyway so split_records() can be used on its own.
EOR_RE = re.compile(r"<EOR>", re.IGNORECASE)


def split_records(contents: str) -> list[str]:
    """
    Upper-case the whole log and split it into record strings on <EOR>. The marker
    itself is dropped, as are segments that are empty or only whitespace (usually the
    trailing text after the last <EOR>).

    Anything before the first record, like the header, ends up as its own segment. It
    won't have a CALL tag so it gets dropped later on.
    """
    records = []
    for segment in EOR_RE.split(contents.upper()):
        if not segment.strip():
            continue
        records.append(segment)

    logger.debug(f"Split log into {len(records)} record(s)")
    return records


def format_date(date_str: str) -> str:
    """
    Format an ADIF date, YYYYMMDD, as YYYY-MM-DD. Anything that isn't 8 characters is
    returned as-is.
    """
    if len(date_str) != 8:
        return date_str
    return f"{date_str[:4]}-{date_str[4:6]}-{date_str[6:]}"


def format_time(time_str: str) -> str:
    """
    Format an ADIF time, HHMM or HHMMSS, as HH:MM. Seconds are dropped, and anything
    shorter than 4 characters is returned as-is.
    """
    if len(time_str) < 4:
        return time_str
    return f"{time_str[:2]}:{time_str[2:4]}"
