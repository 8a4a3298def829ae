"""Command line entry point for HotelHook.

Usage:
    hotelhook serve --port 3000
    hotelhook call gen_get_promotions room_type=suite
    hotelhook call "Reservación" guest_name="Ana" nights=3
    hotelhook verify --challenge abc123
    hotelhook use-cases
"""

import argparse
import json
import sys
import uuid
from typing import Any

import httpx

from hotelhook.core.config import HotelHookConfig
from hotelhook.utils.exceptions import ConfigurationError
from hotelhook.utils.logging import configure_logging
from hotelhook.wiring import bootstrap

DEFAULT_URL = "http://localhost:3000/webhook"

# ANSI colors
CYAN = "\033[96m"
GREEN = "\033[92m"
RED = "\033[91m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"


def parse_assignments(pairs: list[str]) -> dict[str, Any]:
    """Turn ``key=value`` strings into an argument bag.

    Values are decoded as JSON when possible (``nights=3``, ``all=true``),
    otherwise kept as text.
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got '{pair}'")
        try:
            arguments[key] = json.loads(value)
        except json.JSONDecodeError:
            arguments[key] = value
    return arguments


def _post(url: str, payload: dict[str, Any], timeout: float) -> int:
    print(f"{DIM}  → POST {url}{RESET}")
    try:
        response = httpx.post(
            url,
            json=payload,
            timeout=timeout,
            headers={"X-Roddy-Webhook-Id": str(uuid.uuid4())},
        )
    except httpx.HTTPError as e:
        print(f"{RED}Request failed: {e}{RESET}")
        return 1

    color = GREEN if response.is_success else RED
    print(f"{color}{BOLD}HTTP {response.status_code}{RESET}")
    print(response.text)
    return 0 if response.is_success else 1


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from hotelhook.server import create_app

    config = HotelHookConfig.from_env()
    overrides = {k: v for k, v in {"host": args.host, "port": args.port}.items() if v}
    config = config.model_copy(update=overrides)
    configure_logging(config.log_level)

    print(f"{CYAN}{BOLD}{config.service_name}{RESET}")
    print(f"  Webhooks: http://{config.host}:{config.port}/webhook")
    print(f"  Health:   http://{config.host}:{config.port}/health")
    print(f"  Docs:     http://{config.host}:{config.port}/docs\n")

    app = create_app(bootstrap(config))
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    try:
        arguments = parse_assignments(args.arguments)
    except ValueError as e:
        print(f"{RED}{e}{RESET}")
        return 2

    metadata = {"use_case_id": args.use_case_id, "agent_id": args.agent_id}
    return _post(args.url, {"metadata": metadata, "arguments": arguments}, args.timeout)


def cmd_verify(args: argparse.Namespace) -> int:
    challenge = args.challenge or uuid.uuid4().hex
    payload = {"type": "webhook_verification", "challenge": challenge}
    return _post(args.url, payload, args.timeout)


def cmd_use_cases(args: argparse.Namespace) -> int:
    runtime = bootstrap(HotelHookConfig(seed_data=False))
    print(f"{BOLD}Registered use cases:{RESET}")
    for key, operation in runtime.catalog.items():
        print(f"  {GREEN}•{RESET} {key}: {operation.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotelhook", description="Hotel webhook simulator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the webhook server")
    serve.add_argument("--host", default=None, help="Interface to bind")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on")
    serve.set_defaults(func=cmd_serve)

    call = subparsers.add_parser("call", help="Invoke a use case on a running server")
    call.add_argument("use_case_id", help="Use case identifier (loose spellings accepted)")
    call.add_argument("arguments", nargs="*", help="Arguments as key=value")
    call.add_argument("--url", default=DEFAULT_URL, help="Webhook URL")
    call.add_argument("--agent-id", default="hotelhook-cli", help="Agent id sent in metadata")
    call.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    call.set_defaults(func=cmd_call)

    verify = subparsers.add_parser("verify", help="Send a webhook verification request")
    verify.add_argument("--url", default=DEFAULT_URL, help="Webhook URL")
    verify.add_argument("--challenge", default=None, help="Challenge to echo (random if omitted)")
    verify.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")
    verify.set_defaults(func=cmd_verify)

    use_cases = subparsers.add_parser("use-cases", help="List registered use cases")
    use_cases.set_defaults(func=cmd_use_cases)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ConfigurationError as e:
        print(f"{RED}{e}{RESET}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
