from __future__ import annotations

import argparse
import json
import logging
import sys

from .actions.registry import list_actions, load_builtin_actions
from .config import GatewaySettings
from .envelope import handle_request


def _build_client(backend: str, settings: GatewaySettings):
    if backend == "mock":
        from .llm.mock_client import MockBackendClient
        return MockBackendClient()
    if backend == "gemini":
        from .llm.gemini_client import GeminiBackendClient
        return GeminiBackendClient(api_key=settings.api_key, timeout_ms=settings.request_timeout_ms)
    raise ValueError(f"Unsupported backend: {backend}")


def _read_payload(source: str):
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def main():
    load_builtin_actions()
    p = argparse.ArgumentParser(prog="petguard-gateway")
    p.add_argument("--list-actions", action="store_true", help="List available actions")
    sub = p.add_subparsers(dest="cmd", required=False)

    serve = sub.add_parser("serve", help="Run the HTTP gateway")
    serve.add_argument("--host", default=None, help="Bind address (default from PETGUARD_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port (default from PETGUARD_PORT)")

    invoke = sub.add_parser("invoke", help="Run a single action and print the envelope")
    invoke.add_argument("--action", required=True, help="Action name")
    invoke.add_argument("--payload", required=True, help="Path to payload JSON, or - for stdin")
    invoke.add_argument("--backend", default="mock", choices=["mock", "gemini"], help="Backend")

    args = p.parse_args()

    if args.list_actions:
        print("Available actions:")
        for name in list_actions():
            print(f"  - {name}")
        return

    if not args.cmd:
        p.print_help()
        sys.exit(0)

    settings = GatewaySettings.from_env()
    logging.basicConfig(level=settings.log_level)

    if args.cmd == "serve":
        import uvicorn

        uvicorn.run(
            "petguard_gateway.api.main:build_app",
            factory=True,
            host=args.host or settings.host,
            port=args.port or settings.port,
            log_level=settings.log_level.lower(),
        )
        return

    if args.cmd == "invoke":
        client = _build_client(args.backend, settings)
        body = {"action": args.action, "payload": _read_payload(args.payload)}
        status, envelope = handle_request(body, client=client, settings=settings)
        print(json.dumps(envelope, indent=2))
        if status != 200:
            sys.exit(1)


if __name__ == "__main__":
    main()
