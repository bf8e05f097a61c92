"""poke.py: parses an address and opens a REPL for poking at it."""
import sys

import IPython
from loguru import logger

from addressnet import Address, InvalidAddressError

logger.enable("addressnet")


def main() -> None:
    """Parses host:port from the command line and embeds a REPL."""
    if len(sys.argv) != 2:
        print("usage: [uv run] python poke.py host:port")
        exit(1)

    try:
        address = Address.from_string(sys.argv[1])
    except InvalidAddressError as exc:
        print(exc, file=sys.stderr)
        exit(1)

    print(f"Address parsed as \"address\": {address!r}", file=sys.stderr)
    repl_locals = {
        'address': address,
        'Address': Address,
    }
    print("starting repl. access `address`")
    IPython.embed(user_ns=repl_locals)


if __name__ == '__main__':
    main()
