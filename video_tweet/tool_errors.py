from __future__ import annotations

# (H) Envelope
ERROR_WRAPPER = "❌ Error: {message}"
UNKNOWN_ERROR = "Unknown error occurred"

# (H) Dispatch errors
UNKNOWN_TOOL = "Unknown tool: {name}"

# (H) Argument validation errors
INVALID_ARGUMENTS = "Invalid arguments for '{tool}': {field} - {reason}"
ARGUMENTS_NOT_OBJECT = "Invalid arguments for '{tool}': arguments must be an object"
ROOT_FIELD = "arguments"
