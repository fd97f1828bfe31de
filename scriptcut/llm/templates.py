"""
scriptcut.llm.templates - Prompt text sent to the model.
"""

from __future__ import annotations

SYSTEM_PROMPT = """\
Your job is to cut a video just using the audio of the video according to the user's prompt.

Provide the result in the following JSON format (this is an example):
{"stamps":"00:01:00-00:02:00,00:02:00-00:03:00"}

You can also use more accurate timestamps (with a max of two numbers behind the dot):
{"stamps":"00:00:13.20-00:00:15.30"}

Separate the timestamps with a comma, as in the examples above. DO NOT PUT THE JSON IN A CODE BLOCK.
Don't cut out little breaks when they aren't huge: You shouldn't cut out less than a second of a break between different clips.
"""


def join_prompt(words: list[str]) -> str:
    """Join CLI prompt words into the user turn text."""
    return " ".join(words)
