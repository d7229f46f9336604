#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, sys
from typing import Optional

from prompt_toolkit import prompt as pt_prompt

from pteroprompt.console import open_reader, run_console
from pteroprompt.rcon import EvrimaClient, RconError
from pteroprompt.util import env_address, env_password, env_timeout

log = logging.getLogger("pteroprompt")

# --- prompting for missing connection details --------------------------------

def ask(text: str, secret: bool = False) -> str:
    val = ""
    while not val:
        val = pt_prompt(f"{text}: ", is_password=secret).strip()
    return val

# --- argparse ----------------------------------------------------------------

def build_parser():
    p = argparse.ArgumentParser(prog="ptcli.py", description="Interactive RCON console for The Isle Evrima servers.")
    p.add_argument("address", nargs="?", help="Server address and port, HOST[:PORT] (optional)")
    p.add_argument("password", nargs="?", help="RCON password (optional)")
    p.add_argument("-q", "--quiet", action="store_true", help="Print only command outputs")
    p.add_argument("-v", "--verbose", action="store_true", help="Log protocol traffic to stderr")
    p.add_argument("-t", "--timeout", type=float, help="Seconds to wait for a reply (default 5)")
    return p

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def connect(address: str, password: str, timeout: float) -> Optional[EvrimaClient]:
    try:
        client = EvrimaClient.connect(address, timeout=timeout)
    except (RconError, ValueError) as e:
        print(f"cannot connect to {address}: {e}", file=sys.stderr)
        return None
    try:
        client.auth(password)
    except RconError as e:
        client.close()
        print(f"cannot authenticate with {address}: {e}", file=sys.stderr)
        return None
    return client

def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        timeout = args.timeout if args.timeout is not None else env_timeout()
        address = args.address or env_address() or ask("Server address")
        password = args.password or env_password() or ask("RCON password", secret=True)
    except (ValueError, EOFError, KeyboardInterrupt) as e:
        print(str(e) or type(e).__name__, file=sys.stderr)
        return 1

    client = connect(address, password, timeout)
    if client is None:
        return 1
    log.debug("authenticated with %s", address)

    if not args.quiet:
        print(f'Connected to {address}. Type "help" to get a list of available commands.')

    try:
        reader = open_reader()
    except Exception as e:
        client.close()
        print(e, file=sys.stderr)
        return 1
    return run_console(client, reader)

if __name__ == "__main__":
    raise SystemExit(main())
