"""
Import contacts from ADIF log files, to preview them as QSL cards or dump them to a CSV
file.
"""

from argparse import ArgumentParser, Namespace
from csv import DictWriter
from pathlib import Path

from colorama import Fore, Style
from tqdm import tqdm

from qsl_factory.adif.log import parse_file
from qsl_factory.adif.record import ContactRecord
from qsl_factory.cli.common import add_common_args, setup_logging
from qsl_factory.constants import DEFAULT_EXPORT_FILE
from qsl_factory.version import VERSION

# Order that the contact fields will be written in each CSV row
CSV_FIELDS = ("callsign", "date", "time", "band", "mode", "rst")


def main() -> None:
    args = parse_args()
    setup_logging(args)

    try:
        contacts = []
        for path in args.files:
            contacts.extend(parse_file(Path(path)))

        if args.action == "show":
            show_contacts(contacts)
        elif args.action == "export":
            export_contacts(contacts, Path(args.o))
    except Exception as e:
        if not args.v:
            print(e)
        else:
            raise


def parse_args() -> Namespace:
    parser = ArgumentParser(description=__doc__)
    add_common_args(parser)
    parser.add_argument("--version", action="version", version=VERSION)

    parser.add_argument(
        "-o",
        default=DEFAULT_EXPORT_FILE,
        metavar="CSV_FILENAME",
        help=f"Filename to export contacts to, default: {DEFAULT_EXPORT_FILE}",
    )
    parser.add_argument("action", choices=("show", "export"))
    parser.add_argument("files", nargs="+", metavar="ADIF_FILE")
    return parser.parse_args()


def show_contacts(contacts: list[ContactRecord]) -> None:
    if not contacts:
        print("No contacts found")
        return

    for contact in contacts:
        print(format_card(contact))
        print()


def format_card(contact: ContactRecord) -> str:
    """
    Render a contact as a small text QSL card
    """
    card = contact.card_fields()
    lines = [
        f"{Fore.GREEN}{Style.BRIGHT}To: {card['callsign']}{Style.RESET_ALL}",
        f"Date: {card['date']}  Time: {card['time']} UTC",
        f"Band: {card['band']}  Mode: {card['mode']}  RST: {card['rst']}",
    ]
    return "\n".join(lines)


def export_contacts(contacts: list[ContactRecord], csv_path: Path) -> None:
    """
    Write contacts to a CSV file, one row per contact
    """
    with csv_path.open("w", newline="") as csv_file:
        writer = DictWriter(csv_file, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for contact in tqdm(contacts):
            writer.writerow(contact.as_dict())

    print(f"Wrote {len(contacts)} contact(s) to {csv_path}")


if __name__ == "__main__":
    main()
