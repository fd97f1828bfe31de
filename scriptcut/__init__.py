"""
Scriptcut - prompt-driven video cutting.

Extracts the audio of a video, asks a Gemini model which time ranges match
a natural-language prompt, then cuts and concatenates those ranges with
FFmpeg: audio extraction → upload → prompt → parse → cut → concat.
"""

__version__ = "0.1.0"
