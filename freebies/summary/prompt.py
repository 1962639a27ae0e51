from __future__ import annotations

SUMMARY_SYSTEM_ROLE = "You are an expert game reviewer."
SUMMARY_PROMPT_TEMPLATE = (
    "Please provide a concise, engaging, one-paragraph summary (maximum 3 sentences) "
    "of the following game description. Focus on the core gameplay loop and unique selling points."
    "\n\nGame Description:\n{description}\n\nSummary:"
)


def build_summary_prompt(description: str) -> str:
    return SUMMARY_PROMPT_TEMPLATE.format(description=description)
