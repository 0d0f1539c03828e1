import argparse
import base64
import json
import sys
from typing import Any, List, NamedTuple, Optional

import boto3


class InvocationError(RuntimeError):
    """Raised when a deployed function reports a FunctionError."""

    def __init__(self, function_name: str, error_type: str, payload: Any):
        super().__init__(f"{function_name} failed ({error_type}): {json.dumps(payload, default=str)}")
        self.function_name = function_name
        self.error_type = error_type
        self.payload = payload


class InvocationResult(NamedTuple):
    status_code: int
    payload: Any
    log: str


def _decode_payload(raw: bytes) -> Any:
    if not raw:
        return None
    return json.loads(raw)


def _decode_log(log_result: Optional[str]) -> str:
    if not log_result:
        return ""
    return base64.b64decode(log_result).decode("utf-8", errors="replace")


def invoke_function(function_name: str, payload: Any = None, client=None) -> InvocationResult:
    """Invoke a deployed function synchronously and return its decoded response and tail log."""
    if client is None:
        client = boto3.client("lambda")

    params = {
        "FunctionName": function_name,
        "InvocationType": "RequestResponse",
        "LogType": "Tail",
    }
    if payload is not None:
        params["Payload"] = json.dumps(payload).encode("utf-8")

    resp = client.invoke(**params)
    body = _decode_payload(resp["Payload"].read())

    if resp.get("FunctionError"):
        raise InvocationError(function_name, resp["FunctionError"], body)

    return InvocationResult(
        status_code=resp.get("StatusCode", 0),
        payload=body,
        log=_decode_log(resp.get("LogResult")),
    )


def _json_arg(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON payload: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hello-invoke",
        description="Invoke a deployed hello function and print its response.",
    )
    parser.add_argument("function_name", help="function name or ARN (see the stack outputs)")
    parser.add_argument("--payload", type=_json_arg, default=None, help="JSON event to send")
    parser.add_argument("--region", default=None, help="AWS region (defaults to the boto3 configuration)")
    parser.add_argument("--show-log", action="store_true", help="print the tail of the function log")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    client = boto3.client("lambda", region_name=args.region)
    try:
        result = invoke_function(args.function_name, args.payload, client=client)
    except InvocationError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"StatusCode: {result.status_code}")
    print(json.dumps(result.payload, indent=2, default=str))
    if args.show_log:
        print("=== LOG TAIL ===")
        print(result.log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
