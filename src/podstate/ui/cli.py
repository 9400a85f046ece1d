from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from podstate.adapters.runpod import (
    EndpointPayload,
    NetworkVolumePayload,
    PodPayload,
    checked_config,
)
from podstate.app import dump_state, load_state, open_session
from podstate.config import ConfigurationError, configure_logging
from podstate.domain.codec import decode_payload
from podstate.domain.errors import ReconcileError
from podstate.domain.model import (
    ENDPOINT_FIELDS,
    NETWORK_VOLUME_FIELDS,
    POD_FIELDS,
    EndpointConfig,
    EndpointState,
    NetworkVolumeConfig,
    NetworkVolumeState,
    PodConfig,
    PodState,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from podstate.adapters.runpod.schema import RunpodBaseModel
    from podstate.app import Session
    from podstate.domain.fields import FieldTable
    from podstate.domain.reconcilers import ResourceReconciler

log = logging.getLogger(__name__)

_KINDS: dict[str, tuple[type, type, FieldTable, type[RunpodBaseModel]]] = {
    "pod": (PodConfig, PodState, POD_FIELDS, PodPayload),
    "endpoint": (EndpointConfig, EndpointState, ENDPOINT_FIELDS, EndpointPayload),
    "volume": (
        NetworkVolumeConfig,
        NetworkVolumeState,
        NETWORK_VOLUME_FIELDS,
        NetworkVolumePayload,
    ),
}
_LISTINGS = {"pods": "pod", "endpoints": "endpoint", "volumes": "volume", "templates": None}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile RunPod resources")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    listing = subparsers.add_parser("list", help="List resources of one kind")
    listing.add_argument("kind", choices=sorted(_LISTINGS))

    get = subparsers.add_parser("get", help="Read one resource")
    get.add_argument("kind", choices=sorted(_KINDS))
    get.add_argument("id", help="Resource id")
    get.add_argument("--state", type=Path, help="Prior state file (JSON) to merge onto")

    create = subparsers.add_parser("create", help="Create a resource")
    create.add_argument("kind", choices=sorted(_KINDS))
    create.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Desired configuration (JSON, API field names)",
    )

    update = subparsers.add_parser("update", help="Update a resource")
    update.add_argument("kind", choices=sorted(_KINDS))
    update.add_argument("id", help="Resource id")
    update.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Desired configuration (JSON, API field names)",
    )
    update.add_argument("--state", type=Path, required=True, help="Last synced state (JSON)")

    delete = subparsers.add_parser("delete", help="Delete a resource")
    delete.add_argument("kind", choices=sorted(_KINDS))
    delete.add_argument("id", help="Resource id")
    delete.add_argument(
        "--no-wait",
        action="store_true",
        help="Return once the delete is accepted instead of waiting for it to finish",
    )

    stop = subparsers.add_parser("stop", help="Stop a pod")
    stop.add_argument("id", help="Pod id")
    start = subparsers.add_parser("start", help="Start a pod")
    start.add_argument("id", help="Pod id")

    return parser.parse_args(list(argv))


def _read_json(path: Path) -> dict[str, object]:
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def _emit(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, indent=2, sort_keys=True) + "\n")


def _reconciler(session: Session, kind: str) -> ResourceReconciler:
    match kind:
        case "pod":
            return session.pods
        case "endpoint":
            return session.endpoints
        case _:
            return session.network_volumes


async def _run(args: argparse.Namespace) -> None:
    # inputs are validated before any remote call is made
    config = None
    prior = None
    if args.command in {"create", "update"}:
        config_type, _, table, payload_model = _KINDS[args.kind]
        payload = _read_json(args.config)
        config = checked_config(
            payload, decode_payload(payload, config_type, table), payload_model
        )
    if getattr(args, "state", None) is not None:
        prior = load_state(_KINDS[args.kind][1], _read_json(args.state))
        if prior.id is not None and prior.id != args.id:
            raise ValueError(f"{args.state} describes {prior.id}, not {args.id}")

    async with open_session() as session:
        match args.command:
            case "list":
                kind = _LISTINGS[args.kind]
                if kind is None:
                    templates = await session.templates.list()
                    _emit([dump_state(item) for item in templates])
                else:
                    states = await _reconciler(session, kind).list()
                    _emit([dump_state(item) for item in states])
            case "get":
                reconciler = _reconciler(session, args.kind)
                base = prior if prior is not None else reconciler.state_type()
                _emit(dump_state(await reconciler.read(args.id, base)))
            case "create":
                state, identity = await _reconciler(session, args.kind).create(config)
                log.info("Created %s", identity)
                _emit(dump_state(state))
            case "update":
                state = await _reconciler(session, args.kind).update(args.id, config, prior)
                _emit(dump_state(state))
            case "delete":
                reconciler = _reconciler(session, args.kind)
                if args.no_wait:
                    ack = await reconciler.delete(args.id)
                    _emit({"identity": ack.identity, "outcome": "accepted"})
                else:
                    result = await reconciler.delete_and_confirm(args.id)
                    _emit(
                        {
                            "identity": result.identity,
                            "outcome": str(result.outcome),
                            "polls": result.polls,
                        }
                    )
            case "stop":
                await session.pods.stop(args.id)
            case "start":
                await session.pods.start(args.id)
            case _:
                raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        asyncio.run(_run(parsed_args))
    except (ConfigurationError, ValueError):
        log.exception("Invalid input")
        sys.exit(2)
    except ReconcileError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
