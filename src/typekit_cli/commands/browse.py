"""Browse command -- list kits and inspect them interactively.

Backs the ``typekit-browse`` console script. The command fetches the kit
list, prints it, then loops on a prompt:

* ``q`` quits,
* ``p`` prints every kit followed by its full detail record,
* a kit number prints that kit's detail record,
* anything else prints a "wrong number" notice and asks again.

Selections are coerced to integers the way Ruby's ``String#to_i`` does
(``"2abc"`` is 2, ``"abc"`` is 0). Earlier releases of this tool behaved
that way and scripted sessions rely on it, so non-numeric input lands in
the "wrong number" branch instead of being rejected with its own message.
"""

from __future__ import annotations

import re
from typing import Optional

import typer

from typekit_cli.client import TypekitClient
from typekit_cli.config import resolve_config
from typekit_cli.exceptions import UsageError
from typekit_cli.kits import KitsAPI
from typekit_cli.models import KitList
from typekit_cli.output import OutputManager, debug, get_output, set_output

SELECTION_PROMPT = (
    "Please input:\n"
    " the number of the kit you want to see \n"
    " or 'q' for quit:\n"
    " or 'p' for print all kits"
)
WRONG_NUMBER = "Wrong number, please select another kit:"

_LEADING_INT = re.compile(r"\s*([+-]?\d+(?:_\d+)*)")


def coerce_selection(text: str) -> int:
    """Convert user input to an int, returning 0 when no leading digits exist.

    Example::

        coerce_selection("3")      # 3
        coerce_selection(" 2 kits") # 2
        coerce_selection("-1")     # -1
        coerce_selection("abc")    # 0
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


class KitBrowser:
    """Prints kit listings and details for one browsing session.

    Args:
        api: Kit operations bound to an open client.
        kits: The listing fetched at the start of the session.
    """

    def __init__(self, api: KitsAPI, kits: KitList) -> None:
        self._api = api
        self._kits = kits
        self._output = get_output()

    @property
    def kit_count(self) -> int:
        return len(self._kits.kits)

    def _print_summaries(self, with_details: bool) -> None:
        for number, kit in enumerate(self._kits.kits, start=1):
            self._output.print_data(f"Number {number} kit information:")
            for key, value in kit.as_dict().items():
                self._output.print_data(f"{key}:{value}")
            if with_details:
                self._output.print_json({"kit": self._api.get_kit(kit.id).as_dict()})

    def print_listing(self) -> None:
        """Print the listing envelope, the kit count and each kit's fields."""
        self._output.print_json(self._kits.as_dict())
        self._output.print_data(f"You have {self.kit_count} kits in total.")
        self._print_summaries(with_details=False)

    def print_all(self) -> None:
        """Print the listing and fetch the detail of every kit, in list order."""
        self._output.print_data("Fetch all data in each kit")
        self._output.print_json(self._kits.as_dict())
        self._output.print_data(f"You have {self.kit_count} kits in total")
        self._print_summaries(with_details=True)

    def show_kit(self, number: int) -> None:
        """Fetch and print the detail of the kit at 1-based position *number*."""
        kit = self._kits.kits[number - 1]
        self._output.print_data(f"Fetch more information for Number {number} kit:")
        self._output.print_json({"kit": self._api.get_kit(kit.id).as_dict()})

    def handle(self, choice: str) -> bool:
        """Act on one line of user input.

        Returns:
            ``False`` when the session should end, ``True`` otherwise.
        """
        if choice == "q":
            return False
        if choice == "p":
            self.print_all()
            return True
        number = coerce_selection(choice)
        if number <= 0 or number > self.kit_count:
            self._output.print_data(WRONG_NUMBER)
        else:
            self.show_kit(number)
        return True


def browse_command(
    token: str = typer.Option(
        "", "--token", "-t", help="Authentication token to use.", show_default=False
    ),
    debug_flag: bool = typer.Option(
        False, "--debug", help="Enable extra debugging information."
    ),
    delete: Optional[list[str]] = typer.Option(
        None, "--delete", help="Delete this kit id before listing (repeatable)."
    ),
) -> None:
    """Fetch information about your Typekit kits.

    Lists every kit on the account, then prompts for a kit number to
    inspect, ``p`` to print every kit in full, or ``q`` to quit.

    Raises:
        UsageError: If no token is given by flag or ``TYPEKIT_TOKEN``.

    Example::

        typekit-browse --token=$TOKEN
        typekit-browse --token=$TOKEN --delete nld3fax
    """
    set_output(OutputManager(verbose=debug_flag))
    config = resolve_config(cli_token=token, debug=debug_flag)
    if not config.token:
        raise UsageError("missing argument: --token")

    debug("parsed options")
    debug(f"  token is {config.token}")

    with TypekitClient(config) as client:
        api = KitsAPI(client)
        for kit_id in delete or []:
            api.delete_kit(kit_id)
            get_output().success(f"Deleted kit {kit_id}")

        browser = KitBrowser(api, api.list_kits())
        browser.print_listing()
        if browser.kit_count == 0:
            return

        while True:
            choice = typer.prompt(
                SELECTION_PROMPT, default="", show_default=False, prompt_suffix="\n"
            )
            if not browser.handle(choice):
                return
