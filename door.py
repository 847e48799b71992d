import argparse
import sys
from src import config
from src.client import DoorClient, DoorClientError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Query or change the door status")
    parser.add_argument(
        "command", choices=["status", "open", "close"], help="Action to perform"
    )
    parser.add_argument(
        "--url",
        default=config.DOOR_API_URL,
        help="Base URL of the door API (overrides DOOR_API_URL env var)",
    )
    parser.add_argument(
        "--timeout", type=float, default=2, help="Request timeout in seconds"
    )
    return parser.parse_args(argv)


def format_status(status):
    if status.get("isOpen"):
        return f"Door is open ({status.get('remainingTime', 0)}s until auto-close)"
    return "Door is closed"


def main(argv=None):
    args = parse_args(argv)
    client = DoorClient(args.url, timeout=args.timeout)

    try:
        if args.command == "open":
            client.open()
        elif args.command == "close":
            client.close()
        status = client.get_status()
    except DoorClientError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(format_status(status))
    return 0


if __name__ == "__main__":
    sys.exit(main())
