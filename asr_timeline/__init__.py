"""
Video ASR timeline app built with FastAPI, exposing
- an index.html UI,
- a video upload endpoint that sends the video to a Gemini model,
- and a parser turning the model reply into speaker-labelled timeline entries.
"""

__version__ = "0.2.0"
