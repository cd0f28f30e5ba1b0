"""Configuration constants.

Centralizes fixed strings and defaults shared by the formatter,
the orchestrator and the transport.
"""

# Transport defaults
DEFAULT_PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-2.5-flash"

# Prompt file (rxlens/prompts/<name>.txt) used as the request instruction
INSTRUCTION_PROMPT = "prescription"

# Per-medication reference link the model is asked to emit
REFERENCE_LINK_TEMPLATE = "https://www.drugs.com/search.php?searchterm={medication}"

# Shown to the user on every failure path; detail goes to the log only
ERROR_MESSAGE = (
    "Sorry, I encountered an error while analyzing the prescription. "
    "Please try again."
)
ERROR_CLASS = "text-red-400"

# Markup classes emitted by the formatter
HEADING_CLASS = "text-lg font-semibold mt-4 mb-2"
LIST_ITEM_CLASS = "ml-4 list-disc"
LINK_CLASS = "text-blue-300 hover:underline"

# Logging
LOG_LEVEL_ENV = "RXLENS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
