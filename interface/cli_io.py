import json
from typing import Dict, Optional

from core import now_timestamp


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    exit_code: int = 0,
) -> int:
    """Print the --json envelope for a command and hand back its exit code."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": now_timestamp(),
        "payload": payload or {},
    }
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict] = None) -> int:
    return structured_response(command, status="ERROR", message=message, payload=payload, exit_code=1)


__all__ = ["structured_response", "structured_error"]
