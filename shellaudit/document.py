"""Assemble grouped commands into generic documents for the rule engine."""

import json
from typing import TYPE_CHECKING, Any

from shellaudit.exceptions import SerializationError

if TYPE_CHECKING:
    from shellaudit.parsers.models import Command

# Top-level key of the document holding the grouped commands
COMMAND_KEY = "command"


def assemble_documents(groups: dict[str, list["Command"]]) -> list[dict[str, Any]]:
    """Serialize the command groups into a list holding one document.

    The catalog goes through a JSON encode/decode pass so the rule engine only
    ever receives plain dicts, lists, strings and ints.

    Raises:
        SerializationError: if the catalog cannot be encoded or decoded.
    """
    resource = {
        COMMAND_KEY: {
            key: [command.to_dict() for command in commands]
            for key, commands in groups.items()
        }
    }

    try:
        encoded = json.dumps(resource)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to Marshal Shell: {e}") from e

    try:
        document = json.loads(encoded)
    except json.JSONDecodeError as e:
        raise SerializationError(f"failed to Unmarshal Shell: {e}") from e

    if not isinstance(document, dict):
        raise SerializationError(
            "failed to Unmarshal Shell: document is not a mapping",
            details={"type": type(document).__name__},
        )

    return [document]
