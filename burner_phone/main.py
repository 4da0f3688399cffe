"""Entry point for the burner phone Textual app."""

from __future__ import annotations

from burner_phone.config import BRAND, DEV_MODE
from burner_phone.logging_config import configure_logging
from burner_phone.phone_app import PhoneApp


def main() -> None:
    """Run the phone; ``BURNER_DEV=1`` selects the development build."""
    configure_logging()
    PhoneApp(dev_mode=DEV_MODE, brand=BRAND).run()


if __name__ == "__main__":
    main()
