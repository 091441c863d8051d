from pathlib import Path

DOCUMENTS_DIR = Path(Path.home(), "Documents")
DEFAULT_EXPORT_FILE = Path(DOCUMENTS_DIR, "qsl_contacts.csv")

# Shown on a card preview in place of any field the log didn't have
CARD_PLACEHOLDER = "--"
