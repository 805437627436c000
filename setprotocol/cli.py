"""Command-line interface for the Set Protocol client."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

from .client import SetClient
from .config import load_config
from .logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="setprotocol",
        description="Read Set Protocol v2 SetTokens and quote TradeModule trades",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    details_parser = sub.add_parser("details", help="SetToken details via the ProtocolViewer")
    details_parser.add_argument("set_token", help="SetToken address")
    details_parser.add_argument(
        "--module",
        dest="modules",
        action="append",
        default=None,
        help="Module address to report the state of (repeatable; default: configured modules)",
    )

    positions_parser = sub.add_parser("positions", help="SetToken component positions")
    positions_parser.add_argument("set_token", help="SetToken address")

    modules_parser = sub.add_parser("modules", help="Modules added to a SetToken")
    modules_parser.add_argument("set_token", help="SetToken address")

    quote_parser = sub.add_parser("quote", help="Quote a TradeModule trade through 0x")
    quote_parser.add_argument("--set", dest="set_token", required=True, help="SetToken address")
    quote_parser.add_argument("--from", dest="from_token", required=True, help="Token to sell")
    quote_parser.add_argument("--to", dest="to_token", required=True, help="Token to buy")
    quote_parser.add_argument(
        "--amount", required=True, help="Human amount of the sell token, e.g. .5"
    )
    quote_parser.add_argument("--from-decimals", type=int, default=None)
    quote_parser.add_argument("--to-decimals", type=int, default=None)
    quote_parser.add_argument(
        "--slippage", type=float, default=None, help="Slippage percentage (overrides config)"
    )
    quote_parser.add_argument(
        "--fee", type=float, default=None, help="Fee percentage (overrides config)"
    )

    sub.add_parser("tokens", help="Token list for the configured chain")

    return parser


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


def _default_modules(client: SetClient) -> list[str]:
    contracts = client.config.contracts
    return [
        address
        for address in (
            contracts.basic_issuance_module,
            contracts.streaming_fee_module,
            contracts.trade_module,
        )
        if address
    ]


async def _run(args: argparse.Namespace) -> None:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    client = SetClient(config)

    if args.command == "details":
        modules = args.modules if args.modules is not None else _default_modules(client)
        details = await client.set_token.fetch_set_details(args.set_token, modules)
        print(_to_json(asdict(details)))
    elif args.command == "positions":
        positions = await client.set_token.get_positions(args.set_token)
        print(_to_json([asdict(p) for p in positions]))
    elif args.command == "modules":
        print(_to_json(await client.set_token.get_modules(args.set_token)))
    elif args.command == "quote":
        quote = await client.trade.fetch_trade_quote(
            args.from_token,
            args.to_token,
            args.amount,
            args.set_token,
            from_token_decimals=args.from_decimals,
            to_token_decimals=args.to_decimals,
            slippage_percentage=args.slippage,
            fee_percentage=args.fee,
        )
        print(_to_json(quote.to_dict()))
    elif args.command == "tokens":
        tokens = await client.trade.fetch_token_list()
        print(_to_json([asdict(t) for t in tokens]))
    else:
        build_parser().print_help()
        sys.exit(1)


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    asyncio.run(_run(args))
